"""数据模型定义"""

from .config import ReviewConfig, ReviewProfile, Settings
from .review_result import (
    Language,
    ReviewFailure,
    ReviewRequest,
    ReviewResult,
    ReviewSuccess,
)

__all__ = [
    "ReviewConfig",
    "ReviewProfile",
    "Settings",
    "Language",
    "ReviewRequest",
    "ReviewSuccess",
    "ReviewFailure",
    "ReviewResult",
]
