import json
from typing import Any, Callable, Dict, List, Optional

import pytest
from authlib.jose import jwt
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from idtoken_verifier.jose.keys import KeySet
from idtoken_verifier.security import b64url_encode
from idtoken_verifier.settings import get_settings

JWKS_URL = "https://issuer.example/.well-known/jwks.json"


def _b64url_uint(value: int) -> str:
    return b64url_encode(value.to_bytes((value.bit_length() + 7) // 8, "big"))


def _segment(data: Dict[str, Any]) -> str:
    return b64url_encode(json.dumps(data, separators=(",", ":")).encode("utf-8"))


class StaticKeySource:
    """Stands in for JwksClient: returns a fixed key set or raises."""

    def __init__(self, key_set: Optional[KeySet] = None, error: Optional[Exception] = None) -> None:
        self.key_set = key_set or KeySet()
        self.error = error
        self.urls: List[str] = []

    async def fetch(self, jwks_url: str) -> KeySet:
        self.urls.append(jwks_url)
        if self.error is not None:
            raise self.error
        return self.key_set


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def small_exponent_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=3, key_size=2048)


@pytest.fixture
def make_jwk() -> Callable[..., Dict[str, Any]]:
    def _make(private_key: rsa.RSAPrivateKey, kid: str, **overrides: Any) -> Dict[str, Any]:
        numbers = private_key.public_key().public_numbers()
        jwk = {
            "kty": "RSA",
            "kid": kid,
            "use": "sig",
            "alg": "RS256",
            "n": _b64url_uint(numbers.n),
            "e": _b64url_uint(numbers.e),
        }
        jwk.update(overrides)
        return jwk

    return _make


@pytest.fixture
def sign_token() -> Callable[..., str]:
    """Sign header.payload directly with cryptography and return the compact token."""

    def _sign(private_key: rsa.RSAPrivateKey, header: Dict[str, Any], payload: Dict[str, Any]) -> str:
        signing_input = f"{_segment(header)}.{_segment(payload)}"
        signature = private_key.sign(signing_input.encode("ascii"), padding.PKCS1v15(), hashes.SHA256())
        return f"{signing_input}.{b64url_encode(signature)}"

    return _sign


@pytest.fixture
def authlib_token(rsa_key) -> str:
    """An ID token produced by authlib, as an issuer would."""
    pem = rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    header = {"alg": "RS256", "kid": "key-1", "typ": "JWT"}
    claims = {"iss": "https://issuer.example", "sub": "alice", "aud": "client-123", "nonce": "n-0S6_WzA2Mj"}
    return jwt.encode(header, claims, pem).decode("ascii")


@pytest.fixture
def key_source() -> Callable[..., StaticKeySource]:
    return StaticKeySource
