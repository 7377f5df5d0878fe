"""Tests for the review prompt."""

from ai_file_reviewer.prompts import build_review_prompt
from ai_file_reviewer.source_reader import read_source_file


class TestBuildReviewPrompt:
    """Tests for build_review_prompt."""

    def test_contains_file_name_and_code(self):
        code = 'console.log("hi")'
        prompt = build_review_prompt(
            focus="general code quality",
            language="Javascript",
            file_name="./test.js",
            code=code,
        )

        assert "./test.js" in prompt
        assert code in prompt
        assert "Analyze this Javascript code" in prompt
        assert "focusing on general code quality" in prompt

    def test_code_with_braces_is_verbatim(self):
        code = 'function f() {\n  return `${name} {x}`;\n}\n{{ }}'
        prompt = build_review_prompt("security", "Javascript", "f.js", code)

        assert code in prompt

    def test_large_code_is_not_truncated(self):
        code = "\n".join(f"$v{i} = {i};" for i in range(5000))
        prompt = build_review_prompt("quality", "PHP", "big.php", code)

        assert code in prompt

    def test_lists_review_dimensions(self):
        prompt = build_review_prompt("quality", "Unknown", "a.txt", "")

        for heading in (
            "Bugs and logic issues",
            "Performance",
            "Security issues",
            "Code quality",
            "Testing gaps",
        ):
            assert heading in prompt
        assert "**Priority**: Low/Medium/High" in prompt

    def test_crlf_code_is_verbatim(self, tmp_path):
        path = tmp_path / "windows.js"
        path.write_bytes(b"var a = 1;\r\nvar b = 2;\r\n")

        code = read_source_file(path)
        prompt = build_review_prompt("quality", "Javascript", str(path), code)

        assert "var a = 1;\r\nvar b = 2;\r\n" in prompt
