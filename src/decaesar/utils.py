import base64
from typing import Union, Literal

BytesLike = Union[bytes, bytearray, memoryview]

type InputFormat = Union[Literal[
    "b64",
    "b64_urlsafe",
    "hex",
    "raw"
], str]

INPUT_FORMATS = ("raw", "hex", "b64", "b64_urlsafe")


def as_bytes(
    data: Union[str, bytes, bytearray, memoryview],
    *,
    encoding: str = "utf-8",
) -> bytes:
    """Normalize values to type bytes."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    raise TypeError(f"Expected str or bytes-like, got {type(data).__name__}")


def load_input(file_path: str, format: InputFormat) -> bytes:
    """Load the ciphertext from a file."""
    with open(file_path, "rb") as f:
        data = f.read()
    return parse_input(data, format)


def parse_input(data: bytes, format: InputFormat) -> bytes:
    if format == "raw":
        return data
    elif format == "hex":
        return bytes.fromhex(data.decode("utf-8"))
    elif format == "b64":
        return b64_decode(data.decode("ascii").strip())
    elif format == "b64_urlsafe":
        return b64_decode(data.decode("ascii").strip(), urlsafe=True)
    else:
        raise ValueError(f"Invalid input format: {format}")


def format_output(data: bytes, format: InputFormat) -> str:
    """Render transformed bytes in one of the input formats."""
    if format == "raw":
        return data.decode("utf-8", errors="replace")
    elif format == "hex":
        return data.hex()
    elif format == "b64":
        return b64_encode(data)
    elif format == "b64_urlsafe":
        return b64_encode(data, urlsafe=True)
    else:
        raise ValueError(f"Invalid output format: {format}")


def b64_encode(
    data: Union[str, bytes, bytearray, memoryview],
    *,
    urlsafe: bool = False,
    text_encoding: str = "utf-8",
) -> str:
    """Accepts str/bytes/etc and return a base64 string (standard or URL-safe)."""
    raw = as_bytes(data, encoding=text_encoding)
    fn = base64.urlsafe_b64encode if urlsafe else base64.b64encode
    return fn(raw).decode("ascii")


def b64_decode(b64_text: str, *, urlsafe: bool = False) -> bytes:
    """Decodes standard or URL-safe b64. Tolerates missing '=' padding."""
    missing = len(b64_text) % 4
    if missing:
        b64_text += "=" * (4 - missing)

    if urlsafe:
        return base64.urlsafe_b64decode(b64_text)
    return base64.b64decode(b64_text, validate=True)
