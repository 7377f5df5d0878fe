"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

REVIEW_TEXT = (
    "- **Issue Type**: Debug output\n"
    "- **Location**: line 1\n"
    "- **Problem**: console.log left in code\n"
    "- **Fix**: Remove it or use a logger\n"
    "- **Priority**: Low"
)


@pytest.fixture
def js_file(tmp_path):
    """A small JavaScript file."""
    path = tmp_path / "test.js"
    path.write_text('console.log("hi")', encoding="utf-8")
    return path


@pytest.fixture
def fake_llm():
    """Chat model that always answers with a canned review."""
    return FakeListChatModel(responses=[REVIEW_TEXT])


@pytest.fixture
def failing_llm():
    """Runnable that fails like an unreachable endpoint."""

    def _raise(_):
        raise ConnectionError("Connection error.")

    return RunnableLambda(_raise)


@pytest.fixture
def no_credentials(monkeypatch):
    """Remove endpoint credentials from the environment."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
