from __future__ import annotations

import asyncio

import jwt
from jwt import PyJWKClient

from artes_service.application.dto.principal import Principal
from artes_service.infrastructure.auth.claims import principal_from_claims


class JWKSVerifier:
    """Verify JWTs issued by an external identity provider via its JWKS endpoint."""

    def __init__(self, jwks_url: str, algorithms: tuple[str, ...] = ("RS256", "ES256")) -> None:
        self._jwk_client = PyJWKClient(jwks_url)
        self._algorithms = list(algorithms)

    async def verify(self, token: str) -> Principal:
        # PyJWKClient fetches keys with blocking urllib
        signing_key = await asyncio.to_thread(self._jwk_client.get_signing_key_from_jwt, token)
        payload = jwt.decode(token, signing_key.key, algorithms=self._algorithms)
        return principal_from_claims(payload)
