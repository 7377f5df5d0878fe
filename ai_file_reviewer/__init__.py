"""AI File Reviewer - 基于 LangChain 的单文件代码评审工具"""

__version__ = "0.1.0"

from .chains import create_review_chain, setup_debug_logging
from .cli import main
from .config import get_review_config, load_settings
from .errors import GenerationError, ReadError, ReviewError, UnknownProfileError
from .language import detect_language, language_for_path
from .models import (
    Language,
    ReviewConfig,
    ReviewFailure,
    ReviewProfile,
    ReviewRequest,
    ReviewResult,
    ReviewSuccess,
    Settings,
)
from .prompts import build_review_prompt
from .reviewer import CodeReviewer
from .source_reader import read_source_file

__all__ = [
    "main",
    "CodeReviewer",
    "create_review_chain",
    "setup_debug_logging",
    "get_review_config",
    "load_settings",
    "detect_language",
    "language_for_path",
    "read_source_file",
    "build_review_prompt",
    "ReviewError",
    "ReadError",
    "GenerationError",
    "UnknownProfileError",
    "Language",
    "ReviewConfig",
    "ReviewProfile",
    "Settings",
    "ReviewRequest",
    "ReviewSuccess",
    "ReviewFailure",
    "ReviewResult",
]
