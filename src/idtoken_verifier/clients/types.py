from __future__ import annotations

from typing import Protocol

from idtoken_verifier.jose.keys import KeySet


class KeySetSource(Protocol):
    async def fetch(self, jwks_url: str) -> KeySet:
        ...
