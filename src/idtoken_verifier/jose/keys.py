from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from idtoken_verifier.jose.errors import KeyNotFound


class Key(BaseModel):
    """One public signing key as published in a JWKS document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    kty: str = ""
    kid: str = ""
    use: str = ""
    alg: str = ""
    n: str = ""
    e: str = ""


class KeySet(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    keys: Tuple[Key, ...] = ()

    def find(self, kid: str) -> Optional[Key]:
        """Return the first key whose kid equals ``kid``, or None."""
        if not kid:
            return None
        for key in self.keys:
            if key.kid == kid:
                return key
        return None

    def kids(self) -> list[str]:
        return [key.kid for key in self.keys]


def select_key(key_set: KeySet, kid: str) -> Key:
    key = key_set.find(kid)
    if key is None:
        raise KeyNotFound(kid)
    return key
