"""Tests for the single file review pipeline."""

from datetime import datetime

import pytest

from ai_file_reviewer.errors import UnknownProfileError
from ai_file_reviewer.models import Language, ReviewFailure, ReviewSuccess
from ai_file_reviewer.reviewer import CodeReviewer

from conftest import REVIEW_TEXT


class TestCodeReviewer:
    """Tests for CodeReviewer.review_file."""

    def test_default_profile_is_quick(self, fake_llm):
        reviewer = CodeReviewer(llm=fake_llm)

        assert reviewer.model == "gpt-4o-mini"
        assert reviewer.max_tokens == 1000

    def test_unknown_profile_fails_at_construction(self, fake_llm):
        with pytest.raises(UnknownProfileError):
            CodeReviewer(profile="nonexistent", llm=fake_llm)

    def test_success_result(self, js_file, fake_llm):
        result = CodeReviewer(llm=fake_llm).review_file(js_file)

        assert isinstance(result, ReviewSuccess)
        assert result.ok
        assert result.file_name == str(js_file)
        assert result.language is Language.JAVASCRIPT
        assert result.analysis == REVIEW_TEXT
        assert datetime.fromisoformat(result.timestamp.isoformat()) == result.timestamp
        assert result.timestamp.tzinfo is not None
        assert not hasattr(result, "error")

    def test_missing_file_result(self, tmp_path, fake_llm):
        missing = tmp_path / "missing.js"

        result = CodeReviewer(llm=fake_llm).review_file(missing)

        assert isinstance(result, ReviewFailure)
        assert not result.ok
        assert result.file_name == str(missing)
        assert "missing.js" in result.error
        assert not hasattr(result, "analysis")
        datetime.fromisoformat(result.timestamp.isoformat())

    def test_read_error_result(self, tmp_path, fake_llm):
        path = tmp_path / "bad.php"
        path.write_bytes(b"\xff\xfe\xfd")

        result = CodeReviewer(llm=fake_llm).review_file(path)

        assert isinstance(result, ReviewFailure)
        assert "UTF-8" in result.error

    def test_generation_error_result(self, js_file, failing_llm):
        result = CodeReviewer(llm=failing_llm).review_file(js_file)

        assert isinstance(result, ReviewFailure)
        assert result.error == "Connection error."

    def test_missing_credentials_result(self, js_file, no_credentials):
        result = CodeReviewer().review_file(js_file)

        assert isinstance(result, ReviewFailure)
        assert result.error

    def test_unknown_language_is_still_reviewed(self, tmp_path, fake_llm):
        path = tmp_path / "script.py"
        path.write_text("print('hi')\n", encoding="utf-8")

        result = CodeReviewer(llm=fake_llm).review_file(path)

        assert isinstance(result, ReviewSuccess)
        assert result.language is Language.UNKNOWN
