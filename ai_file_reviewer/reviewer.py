"""单文件代码评审"""

import logging
from pathlib import Path

from langchain_core.runnables import Runnable

from .chains import create_review_chain
from .config import DEFAULT_PROFILE, get_review_config
from .errors import ReviewError
from .models.config import ReviewProfile, Settings
from .models.review_result import ReviewFailure, ReviewResult, ReviewSuccess

logger = logging.getLogger(__name__)


class CodeReviewer:
    """按预设配置评审单个源文件"""

    def __init__(
        self,
        profile: ReviewProfile | str = DEFAULT_PROFILE,
        settings: Settings | None = None,
        llm: Runnable | None = None,
        max_file_size: int | None = None,
    ):
        """
        Args:
            profile: 评审预设，默认为 "quick"
            settings: 凭据，为 None 时在调用 LLM 前从环境变量读取
            llm: 可注入的模型（测试或自定义接口使用）
            max_file_size: 可选的文件大小上限（字节）

        Raises:
            UnknownProfileError: 预设不存在
        """
        self.config = get_review_config(profile)
        self._chain = create_review_chain(
            self.config,
            settings=settings,
            llm=llm,
            max_file_size=max_file_size,
        )

    @property
    def model(self) -> str:
        return self.config.model

    @property
    def max_tokens(self) -> int:
        return self.config.max_tokens

    def review_file(self, file_name: str | Path) -> ReviewResult:
        """评审单个文件

        Args:
            file_name: 文件路径

        Returns:
            ReviewSuccess 或 ReviewFailure，不会抛出评审错误
        """
        file_name = str(file_name)
        try:
            output = self._chain.invoke({"file_name": file_name})
        except (FileNotFoundError, ReviewError) as e:
            logger.debug(f"评审失败: {file_name}: {e}")
            return ReviewFailure(file_name=file_name, error=str(e))

        return ReviewSuccess(**output)
