"""
RegistrarClient: one object per configured registrar account.

Groups the domain, contact and DNS operations over a shared HTTP client
and retry policy.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import httpx

from ..config import Config
from ..retry import RetryPolicy
from .api import RegistrarAPI
from .contacts import ContactOperations
from .dns import DNSOperations
from .domains import DomainOperations


class RegistrarClient:
    """
    Entry point for registrar work.

    Example:
        async with RegistrarClient(Config.from_env()) as registrar:
            result = await registrar.domains.check_availability(["acme"])
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Args:
            config: Application config; only the registrar and retry sections are used
            transport: Optional httpx transport (tests inject httpx.MockTransport)
            sleep: Coroutine used for backoff delays
        """
        self.config = config
        self.api = RegistrarAPI(config.registrar, transport=transport)
        policy = RetryPolicy.from_config(config.retry, sleep=sleep)

        self.domains = DomainOperations(self.api, policy)
        self.contacts = ContactOperations(self.api, policy)
        self.dns = DNSOperations(self.api, policy)

    @property
    def is_configured(self) -> bool:
        return self.api.is_configured

    async def close(self):
        await self.api.close()

    async def __aenter__(self) -> "RegistrarClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.config.registrar.base_url!r})"
