"""
Shared plumbing for registrar operation groups.

Operation classes validate their inputs, then hand a request factory to
_execute(), which retries transport failures and turns every remaining
exception into a Result failure.
"""

import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Optional

from ..errors import (
    RegistrarConnectionError,
    RegistrarHTTPError,
    RegistrarTransportError,
    ResponseShapeError,
)
from ..result import Result
from ..retry import RetryPolicy
from .api import Envelope, RegistrarAPI

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "OLA_API_TOKEN not configured"
NETWORK_ERROR = "Network or server error"


class RegistrarOperations:
    """Base class for DomainOperations, ContactOperations and DNSOperations."""

    def __init__(self, api: RegistrarAPI, retry_policy: Optional[RetryPolicy] = None):
        self.api = api
        # Only transport failures are worth retrying
        self.retry_policy = replace(retry_policy or RetryPolicy(), retry_on=(RegistrarTransportError,))

    def _not_configured(self) -> Result:
        return Result.fail(NOT_CONFIGURED)

    async def _execute(
        self,
        request: Callable[[], Awaitable[Envelope]],
        decode: Optional[Callable[[Any], Any]] = None,
        *,
        action: str,
    ) -> Result:
        """
        Run ``request`` with retry and decode its payload.

        Args:
            request: Zero-argument coroutine factory issuing the HTTP call
            decode: Payload decoder; None for operations without data
            action: Human label used in logs

        Returns:
            Result carrying the decoded payload or the mapped failure
        """
        try:
            envelope = await self.retry_policy.run(request)
            data = decode(envelope.data) if decode else None
        except RegistrarHTTPError as e:
            logger.error(f"{action} failed with HTTP {e.status_code}")
            if e.body is not None:
                return Result.fail(e.body)
            return Result.fail(f"Request failed with status {e.status_code}")
        except RegistrarConnectionError:
            logger.error(f"{action} failed: registrar unreachable")
            return Result.fail(NETWORK_ERROR)
        except ResponseShapeError as e:
            logger.error(f"{action} returned an unexpected response: {e}")
            return Result.fail(f"Unexpected response from registrar: {e}")

        return Result.ok(data, envelope.message)
