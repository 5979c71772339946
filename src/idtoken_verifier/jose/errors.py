from __future__ import annotations


class SignatureValidationError(Exception):
    """Base class for every failure on the ID token signature path."""

    kind = "signature_validation_error"


class FetchError(SignatureValidationError):
    """Raised when the JWKS document cannot be retrieved or decoded."""

    kind = "fetch_error"


class InvalidURL(FetchError):
    kind = "invalid_url"


class NetworkError(FetchError):
    """Transport failure, timeout or non-2xx response from the JWKS endpoint."""

    kind = "network_error"

    def __init__(self, message: str, *, timeout: bool = False, status_code: int | None = None) -> None:
        super().__init__(message)
        self.timeout = timeout
        self.status_code = status_code


class DecodeError(FetchError):
    kind = "decode_error"


class KeyNotFound(SignatureValidationError):
    """The key set has no key for the requested identifier.

    Callers may treat this as retryable at a higher layer since the issuer may
    have rotated its keys after the key set was fetched.
    """

    kind = "key_not_found"

    def __init__(self, kid: str) -> None:
        super().__init__(f"No JWK found for kid {kid!r}" if kid else "Token header does not declare a kid")
        self.kid = kid


class VerificationError(SignatureValidationError):
    kind = "verification_error"


class MalformedKey(VerificationError):
    kind = "malformed_key"


class MalformedSignature(VerificationError):
    kind = "malformed_signature"


class VerificationFailed(VerificationError):
    kind = "verification_failed"

    def __init__(self) -> None:
        super().__init__("Signature verification failed")


class MalformedToken(SignatureValidationError):
    """The compact token string could not be split into its segments."""

    kind = "malformed_token"
