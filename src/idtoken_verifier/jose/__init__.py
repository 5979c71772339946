from idtoken_verifier.jose.errors import (
    DecodeError,
    FetchError,
    InvalidURL,
    KeyNotFound,
    MalformedKey,
    MalformedSignature,
    MalformedToken,
    NetworkError,
    SignatureValidationError,
    VerificationError,
    VerificationFailed,
)
from idtoken_verifier.jose.keys import Key, KeySet, select_key
from idtoken_verifier.jose.token import IdToken, TokenHeader, parse_id_token
from idtoken_verifier.jose.verifier import load_public_key, verify_signature

__all__ = [
    "DecodeError",
    "FetchError",
    "IdToken",
    "InvalidURL",
    "Key",
    "KeyNotFound",
    "KeySet",
    "MalformedKey",
    "MalformedSignature",
    "MalformedToken",
    "NetworkError",
    "SignatureValidationError",
    "TokenHeader",
    "VerificationError",
    "VerificationFailed",
    "load_public_key",
    "parse_id_token",
    "select_key",
    "verify_signature",
]
