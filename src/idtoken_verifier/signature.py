from __future__ import annotations

import logging
from typing import Optional

from idtoken_verifier.clients.jwks import JwksClient
from idtoken_verifier.clients.types import KeySetSource
from idtoken_verifier.jose.errors import SignatureValidationError
from idtoken_verifier.jose.keys import select_key
from idtoken_verifier.jose.token import IdToken
from idtoken_verifier.jose.verifier import verify_signature
from idtoken_verifier.settings import get_settings

logger = logging.getLogger(__name__)


async def validate_signature(
    token: IdToken,
    jwks_url: str,
    *,
    fetcher: Optional[KeySetSource] = None,
    honor_key_exponent: Optional[bool] = None,
) -> None:
    """Verify ``token``'s signature with the issuer key named by its ``kid``.

    Fetch, select and verify run in order and the first failure propagates
    with its own exception type. Returns None on success.
    """
    if honor_key_exponent is None:
        honor_key_exponent = get_settings().verifier.honor_key_exponent
    source = fetcher or JwksClient()

    try:
        key_set = await source.fetch(jwks_url)
        key = select_key(key_set, token.header.kid)
        verify_signature(
            key,
            token.signed_content,
            token.raw_signature,
            algorithm=token.header.alg or None,
            honor_key_exponent=honor_key_exponent,
        )
    except SignatureValidationError as exc:
        logger.warning(
            "id token signature rejected: %s",
            exc.kind,
            extra={"jwks_url": jwks_url, "kid": token.header.kid, "error_kind": exc.kind},
        )
        raise

    logger.info("id token signature valid", extra={"jwks_url": jwks_url, "kid": token.header.kid})
