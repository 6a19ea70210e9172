"""Application plugin that builds token codecs from configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .tokens import JwtCodec

_log = logging.getLogger(__name__)

_DEFAULT_SECRET = "secret"
_DEFAULT_SESSION_TIME = 3600
_DEFAULT_ISSUER = "auth0"


class JwtPlugin:
    """Holds token settings and creates :class:`JwtCodec` instances."""

    def __init__(self) -> None:
        self.config: dict[str, Any] = {}
        self.running = False

    def init_and_start(self, config: Mapping[str, Any] | None) -> None:
        """Store the plugin configuration and mark the plugin as running."""
        _log.debug("JWT initialized and started")
        self.config = dict(config or {})
        self.running = True

    def shutdown(self) -> None:
        """Mark the plugin as stopped; the configuration is kept."""
        _log.debug("JWT shut down")
        self.running = False

    def init(self) -> JwtCodec:
        """Return a codec built from the configuration, with defaults."""
        secret = str(self.config.get("secret", _DEFAULT_SECRET))
        session_time = int(self.config.get("sessionTime", _DEFAULT_SESSION_TIME))
        issuer = str(self.config.get("issuer", _DEFAULT_ISSUER))
        return JwtCodec(secret, session_time, issuer)