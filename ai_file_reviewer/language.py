"""文件语言识别"""

from pathlib import Path

from .models.review_result import Language

# 后缀 -> 语言，按原样匹配（区分大小写）
EXTENSION_LANGUAGES: dict[str, Language] = {
    ".js": Language.JAVASCRIPT,
    ".ts": Language.TYPESCRIPT,
    ".php": Language.PHP,
}


def detect_language(extension: str) -> Language:
    """根据文件后缀识别语言

    Args:
        extension: 文件后缀（包含点号），例如 ".js"

    Returns:
        Language: 语言标签，未识别时返回 Language.UNKNOWN
    """
    return EXTENSION_LANGUAGES.get(extension, Language.UNKNOWN)


def language_for_path(path: str | Path) -> Language:
    """根据文件路径的最后一个后缀识别语言"""
    return detect_language(Path(path).suffix)
