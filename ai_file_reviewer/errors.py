"""异常定义"""


class ReviewError(Exception):
    """评审过程中的错误基类"""


class ReadError(ReviewError):
    """文件存在但无法按文本读取"""


class GenerationError(ReviewError):
    """调用生成服务失败（网络、认证或服务端错误）"""


class UnknownProfileError(ReviewError, KeyError):
    """未知的评审预设"""

    def __str__(self) -> str:
        # KeyError 默认会给消息加引号
        return str(self.args[0]) if self.args else ""
