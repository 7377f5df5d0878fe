"""LangChain 提示词模板"""

from langchain_core.prompts import PromptTemplate

# 代码评审提示：五个评审维度 + 固定输出格式
REVIEW_PROMPT = """You are an expert code reviewer focusing on {focus}.
Analyze this {language} code with emphasis on {focus}:

1. **Bugs and logic issues** - Potential runtime errors, edge cases, off-by-one errors
2. **Performance** - Inefficient algorithms, memory leaks, unnecessary operations
3. **Security issues** - Input validation, SQL injection, XSS vulnerabilities
4. **Code quality** - Code style, readability, maintainability, adherence to best practices
5. **Testing gaps** - Missing test cases, untestable code patterns

Code to review ({file_name})
{code}

Provide specific, actionable feedback in this format:
- **Issue Type**: Brief description
- **Location**: Line number or function name
- **Problem**: What's wrong
- **Fix**: Suggested fix for the issue
- **Priority**: Low/Medium/High

Focus on the issues that could improve code quality, performance, or prevent bugs."""

review_prompt_template = PromptTemplate.from_template(REVIEW_PROMPT)


def build_review_prompt(focus: str, language: str, file_name: str, code: str) -> str:
    """构建评审提示词

    代码内容原样插入，不做截断或转义。

    Args:
        focus: 评审重点
        language: 语言标签
        file_name: 文件路径
        code: 文件内容

    Returns:
        完整的提示词文本
    """
    return review_prompt_template.format(
        focus=focus,
        language=language,
        file_name=file_name,
        code=code,
    )
