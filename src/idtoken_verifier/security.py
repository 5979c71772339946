import base64
import re

_B64URL = re.compile(r"[A-Za-z0-9_-]*")


def b64url_decode(data: str | bytes) -> bytes:
    """Decode unpadded base64url.

    Raises ValueError on padding, on characters outside the URL-safe alphabet
    and on impossible lengths.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise ValueError("base64url data must be ASCII") from exc
    if not isinstance(data, str):
        raise ValueError("base64url data must be str or bytes")
    if not _B64URL.fullmatch(data):
        raise ValueError("invalid base64url alphabet")
    if len(data) % 4 == 1:
        raise ValueError("invalid base64url length")
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def b64url_decode_uint(data: str) -> int:
    raw = b64url_decode(data)
    if not raw:
        raise ValueError("empty integer")
    return int.from_bytes(raw, "big")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
