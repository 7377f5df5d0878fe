"""配置数据模型"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, SecretStr


class ReviewProfile(str, Enum):
    """评审预设"""

    QUICK = "quick"  # 快速评审（默认）
    DETAILED = "detailed"  # 全面评审
    SECURITY = "security"  # 安全评审


class ReviewConfig(BaseModel):
    """评审配置，按预设选定后不再修改"""

    model_config = ConfigDict(frozen=True)

    model: str = Field(description="模型名称")
    max_tokens: PositiveInt = Field(description="最大输出 token 数")
    focus: str = Field(description="评审重点")


class Settings(BaseModel):
    """生成服务的访问凭据"""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[SecretStr] = Field(None, description="API Key")
    base_url: Optional[str] = Field(None, description="Base URL，支持兼容 OpenAI 的接口")
