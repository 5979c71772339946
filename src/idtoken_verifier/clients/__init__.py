from idtoken_verifier.clients.jwks import JwksClient
from idtoken_verifier.clients.types import KeySetSource


def get_jwks_client() -> JwksClient:
    return JwksClient()


__all__ = ["JwksClient", "KeySetSource", "get_jwks_client"]
