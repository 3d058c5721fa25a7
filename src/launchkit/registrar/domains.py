"""
Domain availability and registration.

All domain strings are normalized to their canonical lowercase,
``.cv``-suffixed form before they are sent or echoed back.
"""

import logging
from typing import Any, List, Optional

from ..errors import ResponseShapeError
from ..models import DomainAvailability, DomainInfo, DomainRegistration
from ..result import Result
from .base import RegistrarOperations

logger = logging.getLogger(__name__)

NAMESERVERS = ["ns1.ola.cv", "ns2.ola.cv"]


def normalize_domain(domain: str, tld: str = "cv") -> str:
    """
    Canonical form of a domain: trimmed, lowercased, TLD-suffixed.

    Idempotent: normalize_domain(normalize_domain(x)) == normalize_domain(x).
    """
    clean = domain.strip().lower()
    suffix = f".{tld.lower()}"
    return clean if clean.endswith(suffix) else f"{clean}{suffix}"


class DomainOperations(RegistrarOperations):
    """Availability checks, registration and lookup of domains."""

    @property
    def tld(self) -> str:
        return self.api.config.tld

    def normalize(self, domain: str) -> str:
        return normalize_domain(domain, self.tld)

    async def check_availability(self, domains: Optional[List[str]]) -> Result[List[DomainAvailability]]:
        """
        Check availability (with fees) for a batch of domains.

        Results are returned in input order, one per input domain.
        """
        if not domains:
            return Result.fail("Domains array required")

        if not self.api.is_configured:
            return self._not_configured()

        if not all(isinstance(d, str) and d.strip() for d in domains):
            return Result.fail("Domain names must not be blank")

        normalized = [self.normalize(d) for d in domains]

        async def request():
            return await self.api.post(
                "/domains/check",
                params={"fees": "all"},
                json_body={"domains": normalized},
            )

        def decode(payload: Any) -> List[DomainAvailability]:
            return self._match_entries(normalized, payload)

        return await self._execute(request, decode, action=f"Domain check for {len(normalized)} domains")

    def _match_entries(self, normalized: List[str], payload: Any) -> List[DomainAvailability]:
        """
        Pair each queried domain with its response entry.

        Entries that echo their domain are matched by name; the rest fall
        back to position. Anything unmatched is reported unavailable.
        """
        if not isinstance(payload, list):
            raise ResponseShapeError("domain check payload must be a list")
        if not all(isinstance(entry, dict) for entry in payload):
            raise ResponseShapeError("domain check entries must be objects")

        by_name = {}
        for entry in payload:
            echoed = entry.get("domain") or entry.get("name")
            if isinstance(echoed, str):
                by_name[self.normalize(echoed)] = entry

        results = []
        for index, domain in enumerate(normalized):
            entry = by_name.get(domain)
            if entry is None and index < len(payload):
                positional = payload[index]
                if not (positional.get("domain") or positional.get("name")):
                    entry = positional
            if entry is None:
                logger.warning(f"No availability entry for {domain}, reporting unavailable")
                entry = {}
            results.append(DomainAvailability.from_check_entry(domain, entry))

        return results

    async def check_single(self, domain: str) -> Result[DomainAvailability]:
        """Convenience wrapper around check_availability for one domain."""
        result = await self.check_availability([domain])

        if result.success and result.data:
            return Result.ok(result.data[0], result.message)

        return Result.fail(result.error or "Domain check failed")

    async def register(self, domain: str, contact_id: str) -> Result[DomainRegistration]:
        """
        Register ``domain`` for the contact ``contact_id``.

        Nameservers and auto-renew are fixed by the platform.
        """
        if not self.api.is_configured:
            return self._not_configured()

        if not domain or not contact_id or not domain.strip() or not contact_id.strip():
            return Result.fail("Domain and contact ID required")

        final_domain = self.normalize(domain)

        async def request():
            return await self.api.post(
                "/domains",
                json_body={
                    "name": final_domain,
                    "registrant": contact_id.strip(),
                    "nameservers": list(NAMESERVERS),
                    "auto_renew": True,
                },
            )

        result = await self._execute(request, DomainRegistration.from_api, action=f"Registration of {final_domain}")
        if result.success:
            logger.info(f"Registered {final_domain} (id={result.data.id})")
        return result

    async def get_info(self, domain_id: str) -> Result[DomainInfo]:
        """Fetch registrar details for an owned domain."""
        if not self.api.is_configured:
            return self._not_configured()

        if not domain_id or not domain_id.strip():
            return Result.fail("Domain ID required")

        async def request():
            return await self.api.get(f"/domains/{domain_id.strip()}")

        return await self._execute(request, DomainInfo.from_api, action=f"Domain lookup {domain_id}")
