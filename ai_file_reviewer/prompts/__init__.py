"""提示词模板"""

from .templates import REVIEW_PROMPT, build_review_prompt

__all__ = ["REVIEW_PROMPT", "build_review_prompt"]
