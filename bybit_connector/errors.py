"""API errors and request parameter checks."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class APIError(Exception):
    """Error reported by the API when a response has status 4xx or 5xx."""

    def __init__(self, code: int = 0, message: str = "") -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"<APIError> code={self.code}, msg={self.message}"

    @classmethod
    def from_json(cls, data: bytes | str | Mapping[str, Any]) -> "APIError":
        """Build an error from a JSON body holding retCode and retMsg."""
        payload = data if isinstance(data, Mapping) else json.loads(data)
        if not isinstance(payload, Mapping):
            raise ValueError("error body is not a JSON object")
        code = payload.get("retCode", 0)
        message = payload.get("retMsg", "")
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"retCode is not an integer: {code!r}")
        if not isinstance(message, str):
            raise ValueError(f"retMsg is not a string: {message!r}")
        return cls(code, message)


def is_api_error(error: BaseException) -> bool:
    """Tell whether an exception is an API error."""
    return isinstance(error, APIError)


def validate_params(params: Mapping[str, Any] | None) -> None:
    """Reject parameters with an empty key or a missing value."""
    if not params:
        return
    for key, value in params.items():
        if key == "":
            raise ValueError("empty key found in parameters")
        if value is None:
            raise ValueError(f"parameter for key '{key}' is None")