"""LangChain 评审链"""

import logging
from typing import Any

from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable, RunnableLambda

from ..config import load_settings
from ..errors import GenerationError
from ..language import language_for_path
from ..models.config import ReviewConfig, Settings
from ..models.review_result import ReviewRequest
from ..prompts.templates import build_review_prompt
from ..source_reader import read_source_file

# 配置日志
logger = logging.getLogger(__name__)


# 包级 logger：评审链和 CodeReviewer 的调试记录都会传到这里
PACKAGE_LOGGER_NAME = "ai_file_reviewer"


def setup_debug_logging(
    verbose: bool = False, log_file: str | None = None
) -> list[logging.Handler]:
    """为库调用方开启调试日志

    CLI 不接受任何选项，因此这里只供以库方式使用时调用。处理器挂在包级
    logger 上，覆盖读取文件、构建 prompt、调用 LLM 各阶段；API Key 不会被记录。

    Args:
        verbose: 是否输出到控制台
        log_file: 日志文件路径（可选）

    Returns:
        新添加的处理器，调用方可据此移除
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers: list[logging.Handler] = []

    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("\n[DEBUG] %(message)s"))
        handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(message)s")
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        package_logger.addHandler(handler)
    if handlers:
        package_logger.setLevel(logging.DEBUG)

    return handlers


def create_llm(config: ReviewConfig, settings: Settings | None = None):
    """创建 LLM

    不做重试，也不设置超时，使用底层客户端的默认值。

    Args:
        config: 评审配置
        settings: 凭据，为 None 时从环境变量读取

    Returns:
        ChatOpenAI 实例
    """
    from langchain_openai import ChatOpenAI

    if settings is None:
        settings = load_settings()

    kwargs: dict[str, Any] = {
        "model": config.model,
        "max_tokens": config.max_tokens,
        "max_retries": 0,
    }
    if settings.api_key is not None:
        kwargs["api_key"] = settings.api_key
    if settings.base_url:
        kwargs["base_url"] = settings.base_url

    return ChatOpenAI(**kwargs)


def generate_review(prompt: str, llm: Runnable) -> str:
    """调用 LLM 获取完整评审文本

    Args:
        prompt: 提示词
        llm: 接受字符串输入的 LangChain 模型

    Returns:
        模型返回的文本

    Raises:
        GenerationError: 网络、认证或服务端错误，或返回内容为空
    """
    chain = llm | StrOutputParser()
    try:
        text = chain.invoke(prompt)
    except Exception as e:
        raise GenerationError(str(e) or type(e).__name__) from e

    if not text or not text.strip():
        raise GenerationError("Empty response from generation service")
    return text


def create_review_chain(
    config: ReviewConfig,
    settings: Settings | None = None,
    llm: Runnable | None = None,
    max_file_size: int | None = None,
):
    """创建评审链

    使用 LCEL 构建：
    1. 读取文件并识别语言
    2. 构建 prompt
    3. 调用 LLM

    Args:
        config: 评审配置
        settings: 凭据，为 None 时在调用 LLM 前从环境变量读取
        llm: 可注入的模型，为 None 时在调用时创建 ChatOpenAI
        max_file_size: 可选的文件大小上限（字节）

    Returns:
        评审链，输入 {"file_name": ...}，输出包含 file_name/language/analysis 的字典
    """

    def prepare_input(inputs: dict[str, Any]) -> dict[str, Any]:
        """读取文件并构建 prompt"""
        file_name = str(inputs["file_name"])
        code = read_source_file(file_name, max_bytes=max_file_size)
        request = ReviewRequest(
            file_name=file_name,
            code=code,
            language=language_for_path(file_name),
        )

        logger.debug("=" * 80)
        logger.debug("【1. 源文件】")
        logger.debug("=" * 80)
        logger.debug(f"文件: {request.file_name}")
        logger.debug(f"长度: {len(request.code)} 字符")
        logger.debug(f"语言: {request.language.value}")

        prompt = build_review_prompt(
            focus=config.focus,
            language=request.language.value,
            file_name=request.file_name,
            code=request.code,
        )

        logger.debug("=" * 80)
        logger.debug("【2. 最终发送给 LLM 的 PROMPT】")
        logger.debug("=" * 80)
        logger.debug(f"Prompt 长度: {len(prompt)} 字符")
        logger.debug("-" * 40)
        logger.debug(prompt)

        return {"request": request, "prompt": prompt}

    def invoke_llm(data: dict[str, Any]) -> dict[str, Any]:
        """调用 LLM"""
        request: ReviewRequest = data["request"]

        logger.debug("=" * 80)
        logger.debug("【3. 调用 LLM API】")
        logger.debug("=" * 80)
        logger.debug(f"Model: {config.model}")
        logger.debug(f"Max Tokens: {config.max_tokens}")

        model = llm
        if model is None:
            try:
                model = create_llm(config, settings)
            except Exception as e:
                # 通常是缺少 API Key
                raise GenerationError(str(e) or type(e).__name__) from e

        analysis = generate_review(data["prompt"], model)

        logger.debug("=" * 80)
        logger.debug("【4. LLM 原始响应】")
        logger.debug("=" * 80)
        logger.debug(analysis)

        return {
            "file_name": request.file_name,
            "language": request.language,
            "analysis": analysis,
        }

    # 完整的评审链
    review_chain = RunnableLambda(prepare_input) | RunnableLambda(invoke_llm)

    return review_chain
