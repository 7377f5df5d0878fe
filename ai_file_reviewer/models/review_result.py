"""评审结果数据模型"""

from datetime import datetime, timezone
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """文件语言标签"""

    JAVASCRIPT = "Javascript"
    TYPESCRIPT = "Typescript"
    PHP = "PHP"
    UNKNOWN = "Unknown"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReviewRequest(BaseModel):
    """单次评审请求"""

    file_name: str = Field(description="文件路径")
    code: str = Field(description="文件完整内容")
    language: Language = Field(description="检测到的语言")


class ReviewSuccess(BaseModel):
    """评审成功结果"""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(description="文件路径")
    language: Language = Field(description="检测到的语言")
    analysis: str = Field(min_length=1, description="模型返回的评审文本")
    timestamp: datetime = Field(default_factory=utc_now, description="评审时间（UTC）")

    @property
    def ok(self) -> bool:
        return True


class ReviewFailure(BaseModel):
    """评审失败结果"""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(description="文件路径")
    error: str = Field(description="错误信息")
    timestamp: datetime = Field(default_factory=utc_now, description="评审时间（UTC）")

    @property
    def ok(self) -> bool:
        return False


ReviewResult = Union[ReviewSuccess, ReviewFailure]
