# src/api/errors.py
from __future__ import annotations


class InsightError(RuntimeError):
    """Yhteinen kantaluokka InSight-haun ja -dekoodauksen virheille."""


class TransportError(InsightError):
    """Network, DNS, timeout or HTTP status failure. Payload was never decoded."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(InsightError):
    """The response bytes arrived but could not be decoded into sol records."""


class MalformedPayload(DecodeError):
    """Not JSON at all, or the top level is not a JSON object."""


class MissingKeyList(DecodeError):
    """sol_keys puuttuu tai ei ole merkkijonolista."""


class FieldTypeMismatch(DecodeError):
    """A present field has the wrong JSON type, e.g. ``"av": "cold"``."""

    def __init__(self, sol_key: str, field: str, expected: str, got: object) -> None:
        self.sol_key = sol_key
        self.field = field
        self.expected = expected
        self.got = type(got).__name__ if got is not None else "null"
        super().__init__(
            f"sol {sol_key!r}: field {field!r} expected {expected}, got {self.got}"
        )
