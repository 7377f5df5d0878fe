"""配置加载模块"""

import os

from .errors import UnknownProfileError
from .models.config import ReviewConfig, ReviewProfile, Settings


DEFAULT_PROFILE = ReviewProfile.QUICK

API_KEY_ENV = "OPENAI_API_KEY"
BASE_URL_ENV = "OPENAI_BASE_URL"

# 预设表：每个预设对应固定的模型、token 预算和评审重点
PROFILES: dict[ReviewProfile, ReviewConfig] = {
    ReviewProfile.QUICK: ReviewConfig(
        model="gpt-4o-mini",
        max_tokens=1000,
        focus="general code quality",
    ),
    ReviewProfile.DETAILED: ReviewConfig(
        model="gpt-4o",
        max_tokens=3000,
        focus="comprehensive analysis including architecture and maintainability",
    ),
    ReviewProfile.SECURITY: ReviewConfig(
        model="gpt-4o",
        max_tokens=2000,
        focus="security vulnerabilities and input validation",
    ),
}


def get_review_config(
    profile: ReviewProfile | str = DEFAULT_PROFILE,
) -> ReviewConfig:
    """获取预设对应的评审配置

    Args:
        profile: 预设名称或枚举值，默认为 "quick"

    Returns:
        ReviewConfig: 评审配置

    Raises:
        UnknownProfileError: 预设不存在
    """
    try:
        key = ReviewProfile(profile)
    except ValueError:
        available = ", ".join(p.value for p in ReviewProfile)
        raise UnknownProfileError(
            f"Unknown review profile: {profile!r} (available: {available})"
        ) from None
    return PROFILES[key]


def load_settings() -> Settings:
    """从环境变量读取生成服务凭据

    Returns:
        Settings: 凭据对象，未设置的字段为 None
    """
    api_key = os.getenv(API_KEY_ENV) or None
    base_url = os.getenv(BASE_URL_ENV) or None
    return Settings(api_key=api_key, base_url=base_url)
