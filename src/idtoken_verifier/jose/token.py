from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from authlib.jose.util import extract_header

from idtoken_verifier.jose.errors import MalformedToken


@dataclass(frozen=True)
class TokenHeader:
    alg: str = ""
    kid: str = ""
    typ: str = ""
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class IdToken:
    """An ID token already split into its compact-serialization segments.

    The raw segments are kept exactly as received; re-encoding the header or
    payload would change the signed bytes.
    """

    header: TokenHeader
    raw_header: str
    raw_payload: str
    raw_signature: str

    @property
    def signed_content(self) -> bytes:
        return f"{self.raw_header}.{self.raw_payload}".encode("ascii")


def parse_id_token(compact: str) -> IdToken:
    if not isinstance(compact, str):
        raise MalformedToken("Token must be a string")
    parts = compact.strip().split(".")
    if len(parts) != 3 or not all(parts):
        raise MalformedToken("Token must have three non-empty segments")
    raw_header, raw_payload, raw_signature = parts
    if not all(part.isascii() for part in parts):
        raise MalformedToken("Token segments must be ASCII")

    header = extract_header(raw_header.encode("ascii"), MalformedToken)
    for name in ("alg", "kid", "typ"):
        if name in header and not isinstance(header[name], str):
            raise MalformedToken(f"Header member {name!r} must be a string")

    return IdToken(
        header=TokenHeader(
            alg=header.get("alg", ""),
            kid=header.get("kid", ""),
            typ=header.get("typ", ""),
            extra={k: v for k, v in header.items() if k not in ("alg", "kid", "typ")},
        ),
        raw_header=raw_header,
        raw_payload=raw_payload,
        raw_signature=raw_signature,
    )
