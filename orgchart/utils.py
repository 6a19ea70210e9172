"""Helpers for building JSON error responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


@dataclass(frozen=True)
class JsonResponse:
    """An HTTP response made of a status code and a JSON body."""

    status: int
    body: dict[str, Any] = field(default_factory=dict)


def make_err_resp(err: str) -> dict[str, str]:
    """Return a JSON object of the form ``{"error": err}``."""
    return {"error": err}


def bad_request(err: str, code: int = HTTPStatus.BAD_REQUEST) -> JsonResponse:
    """Build an error response carrying ``err`` with the given status code."""
    return JsonResponse(status=int(code), body=make_err_resp(err))