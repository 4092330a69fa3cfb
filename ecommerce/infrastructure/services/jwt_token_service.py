"""
===============================================================================
TARJETA CRC — infrastructure/services/jwt_token_service.py
===============================================================================

Módulo:
    Tokens de acceso (JWT)

Responsabilidades:
    - Firmar TokenInfo como JWT con expiración (TokenService.sign).
    - Decodificar y validar JWT (firma, exp, claims mínimos).

Colaboradores:
    - PyJWT
    - crosscutting.config.get_settings: secreto y algoritmo.
    - crosscutting.exceptions: TokenSigningError / InvalidTokenError.

Decisiones de diseño:
    - La lógica criptográfica vive acá (borde de infraestructura), NO en dominio.
    - Claims mínimos: sub, iat, exp, typ.
    - No loguear secretos ni tokens.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from ...context import ExecutionContext
from ...crosscutting.config import get_settings
from ...crosscutting.exceptions import InvalidTokenError, TokenSigningError
from ...crosscutting.logger import logger
from ...domain.entities import Token, TokenInfo

CLAIM_SUB: str = "sub"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"

TOKEN_TYPE_ACCESS: str = "access"


class JWTTokenService:
    def __init__(self, secret: str | None = None, algorithm: str | None = None) -> None:
        settings = get_settings()
        self._secret = secret if secret is not None else settings.jwt_secret
        self._algorithm = algorithm or settings.jwt_algorithm

    def sign(
        self, ctx: ExecutionContext, info: TokenInfo, validity_minutes: int
    ) -> Token:
        ctx.raise_if_done()
        if validity_minutes <= 0:
            raise TokenSigningError("validity_minutes must be greater than 0")

        now = datetime.now(timezone.utc)
        payload: dict[str, object] = {
            CLAIM_SUB: info.info,
            CLAIM_IAT: int(now.timestamp()),
            CLAIM_EXP: int((now + timedelta(minutes=validity_minutes)).timestamp()),
            CLAIM_TYP: TOKEN_TYPE_ACCESS,
        }

        try:
            encoded = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            logger.error(
                "Token signing failed",
                extra={"algorithm": self._algorithm, "error": type(exc).__name__},
            )
            raise TokenSigningError("Token signing failed.", original_error=exc) from exc
        return Token(encoded)

    def validate(self, ctx: ExecutionContext, token: Token) -> TokenInfo:
        ctx.raise_if_done()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": [CLAIM_SUB, CLAIM_EXP]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired.", original_error=exc) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token.", original_error=exc) from exc

        subject = payload.get(CLAIM_SUB)
        if not subject:
            raise InvalidTokenError("Invalid token.")

        # Si viene typ lo validamos; si no viene, lo aceptamos por compatibilidad.
        token_type = payload.get(CLAIM_TYP)
        if token_type is not None and token_type != TOKEN_TYPE_ACCESS:
            raise InvalidTokenError("Invalid token type.")

        return TokenInfo(info=str(subject))
