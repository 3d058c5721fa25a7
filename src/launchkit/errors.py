"""
Exception taxonomy for the registrar layer.

These are raised internally and mapped to Result failures by the
operation classes; they never escape a public operation.
"""

from typing import Any, Optional


class RegistrarError(Exception):
    """Base exception for registrar errors."""
    pass


class ConfigurationError(RegistrarError):
    """Required credential or setting is missing."""
    pass


class RegistrarTransportError(RegistrarError):
    """Transient failure talking to the registrar. Retried."""
    pass


class RegistrarHTTPError(RegistrarTransportError):
    """Registrar answered with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[Any] = None):
        super().__init__(f"Registrar returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class RegistrarConnectionError(RegistrarTransportError):
    """The request never got a response (connect failure, timeout)."""
    pass


class ResponseShapeError(RegistrarError):
    """A 2xx response did not match the documented schema. Not retried."""
    pass
