from idtoken_verifier.jose import (
    DecodeError,
    FetchError,
    IdToken,
    InvalidURL,
    Key,
    KeyNotFound,
    KeySet,
    MalformedKey,
    MalformedSignature,
    MalformedToken,
    NetworkError,
    SignatureValidationError,
    VerificationError,
    VerificationFailed,
    parse_id_token,
    select_key,
    verify_signature,
)
from idtoken_verifier.clients import JwksClient
from idtoken_verifier.signature import validate_signature

__all__ = [
    "DecodeError",
    "FetchError",
    "IdToken",
    "InvalidURL",
    "JwksClient",
    "Key",
    "KeyNotFound",
    "KeySet",
    "MalformedKey",
    "MalformedSignature",
    "MalformedToken",
    "NetworkError",
    "SignatureValidationError",
    "VerificationError",
    "VerificationFailed",
    "parse_id_token",
    "select_key",
    "validate_signature",
    "verify_signature",
]
