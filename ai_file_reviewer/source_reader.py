"""源文件读取"""

from pathlib import Path

from .errors import ReadError


def read_source_file(path: str | Path, max_bytes: int | None = None) -> str:
    """读取源文件的完整文本内容

    Args:
        path: 文件路径
        max_bytes: 可选的文件大小上限（字节），为 None 则不限制

    Returns:
        文件内容（UTF-8 解码）

    Raises:
        FileNotFoundError: 文件不存在
        ReadError: 文件存在但无法按文本读取，或超过大小上限
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if not path.is_file():
        raise ReadError(f"Not a regular file: {path}")

    try:
        if max_bytes is not None:
            size = path.stat().st_size
            if size > max_bytes:
                raise ReadError(
                    f"File too large: {path} ({size} bytes, limit {max_bytes})"
                )
        # 按字节读取后解码，保留原始换行符（CRLF 不做转换）
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReadError(f"Cannot decode {path} as UTF-8 text: {e}") from e
    except OSError as e:
        raise ReadError(f"Cannot read {path}: {e}") from e
