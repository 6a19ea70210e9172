"""Signing and verification of HS256 session tokens."""

from __future__ import annotations

import time
from typing import Any

import jwt

_ALGORITHM = "HS256"


class JwtCodec:
    """Issues and verifies HS256 tokens for one issuer and session length.

    Verification failures raise the ``jwt.InvalidTokenError`` family.
    """

    def __init__(self, secret: str, session_time: int, issuer: str) -> None:
        self.secret = secret
        self.session_time = int(session_time)
        self.issuer = issuer

    def __repr__(self) -> str:
        return (
            f"JwtCodec(session_time={self.session_time!r}, "
            f"issuer={self.issuer!r})"
        )

    def encode(self, field: str, value: int) -> str:
        """Return a signed token carrying ``field`` set to ``str(value)``."""
        now = int(time.time())
        payload = {
            "iss": self.issuer,
            "iat": now,
            "exp": now + self.session_time,
            field: str(int(value)),
        }
        return jwt.encode(
            payload, self.secret, algorithm=_ALGORITHM, headers={"typ": "JWS"}
        )

    def decode(self, token: str) -> dict[str, Any]:
        """Verify ``token`` and return its claims."""
        return jwt.decode(
            token,
            self.secret,
            algorithms=[_ALGORITHM],
            issuer=self.issuer,
            options={"require": ["iss"]},
        )