"""评审链"""

from .review_chain import (
    create_llm,
    create_review_chain,
    generate_review,
    setup_debug_logging,
)

__all__ = [
    "create_llm",
    "create_review_chain",
    "generate_review",
    "setup_debug_logging",
]
