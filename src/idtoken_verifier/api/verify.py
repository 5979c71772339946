from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from idtoken_verifier.clients import get_jwks_client
from idtoken_verifier.clients.types import KeySetSource
from idtoken_verifier.jose.token import parse_id_token
from idtoken_verifier.settings import get_settings
from idtoken_verifier.signature import validate_signature


router = APIRouter(prefix="/verify", tags=["verify"])


class VerifyRequest(BaseModel):
    id_token: str
    jwks_url: Optional[str] = None


class VerifyResponse(BaseModel):
    valid: bool
    kid: str
    alg: str


def _resolve_jwks_url(requested: Optional[str]) -> str:
    s = get_settings()
    if requested:
        if not s.jwks.allow_url_override:
            raise HTTPException(status_code=400, detail="Caller-supplied jwks_url is disabled")
        return requested
    if not s.jwks.url:
        raise HTTPException(status_code=400, detail="No JWKS URL supplied or configured")
    return s.jwks.url


@router.post("", response_model=VerifyResponse)
async def verify(body: VerifyRequest, fetcher: KeySetSource = Depends(get_jwks_client)) -> VerifyResponse:
    jwks_url = _resolve_jwks_url(body.jwks_url)
    token = parse_id_token(body.id_token)
    await validate_signature(token, jwks_url, fetcher=fetcher)
    return VerifyResponse(valid=True, kid=token.header.kid, alg=token.header.alg)
