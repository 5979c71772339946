"""RS256 signature verification against a single JWK."""
from __future__ import annotations

import hashlib

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from idtoken_verifier.jose.errors import MalformedKey, MalformedSignature, VerificationFailed
from idtoken_verifier.jose.keys import Key
from idtoken_verifier.security import b64url_decode, b64url_decode_uint

RS256 = "RS256"
STANDARD_EXPONENT = 65537


def load_public_key(key: Key, *, honor_key_exponent: bool = False) -> rsa.RSAPublicKey:
    """Rebuild the RSA public key from the JWK modulus.

    The exponent is fixed at 65537 unless ``honor_key_exponent`` is set, in
    which case the ``e`` member is decoded instead.
    """
    if key.kty != "RSA":
        raise MalformedKey(f"Unsupported key type {key.kty!r}")
    try:
        modulus = b64url_decode_uint(key.n)
    except ValueError as exc:
        raise MalformedKey("JWK modulus is not a base64url-encoded integer") from exc

    exponent = STANDARD_EXPONENT
    if honor_key_exponent:
        try:
            exponent = b64url_decode_uint(key.e)
        except ValueError as exc:
            raise MalformedKey("JWK exponent is not a base64url-encoded integer") from exc

    try:
        return rsa.RSAPublicNumbers(exponent, modulus).public_key()
    except ValueError as exc:
        raise MalformedKey("JWK does not describe a valid RSA public key") from exc


def verify_signature(
    key: Key,
    signed_content: bytes,
    signature: str | bytes,
    *,
    algorithm: str | None = None,
    honor_key_exponent: bool = False,
) -> None:
    """Check an RS256 signature over ``signed_content``.

    ``signature`` is the base64url segment as it appeared in the token. Every
    cryptographic mismatch raises the same VerificationFailed.
    """
    public_key = load_public_key(key, honor_key_exponent=honor_key_exponent)

    try:
        raw_signature = b64url_decode(signature)
    except ValueError as exc:
        raise MalformedSignature("Signature is not valid base64url") from exc

    if algorithm and algorithm != RS256:
        raise VerificationFailed()
    if key.alg and key.alg != RS256:
        raise VerificationFailed()
    if key.use and key.use != "sig":
        raise VerificationFailed()

    digest = hashlib.sha256(signed_content).digest()
    try:
        public_key.verify(raw_signature, digest, padding.PKCS1v15(), Prehashed(hashes.SHA256()))
    except InvalidSignature as exc:
        raise VerificationFailed() from exc
