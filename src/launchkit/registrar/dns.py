"""
DNS zone and record management.

Records are validated client-side, so the registrar is never asked to
reject an obviously malformed record. MX records must carry a priority.
"""

import logging
from dataclasses import asdict, is_dataclass
from typing import Any, List, Mapping, Optional, Union

from ..errors import ResponseShapeError
from ..models import DEFAULT_TTL, DNS_RECORD_TYPES, DNSRecord, DNSZone
from ..result import BulkOutcome, BulkResult, Result
from .base import RegistrarOperations

logger = logging.getLogger(__name__)

RecordInput = Union[DNSRecord, Mapping[str, Any]]

# Google Workspace mail routing
GMAIL_MX_RECORDS = [
    DNSRecord(type="MX", name="@", content="aspmx.l.google.com", priority=1,
              comment="Gmail MX Record - Primary"),
    DNSRecord(type="MX", name="@", content="alt1.aspmx.l.google.com", priority=5,
              comment="Gmail MX Record - Alt 1"),
    DNSRecord(type="MX", name="@", content="alt2.aspmx.l.google.com", priority=5,
              comment="Gmail MX Record - Alt 2"),
    DNSRecord(type="MX", name="@", content="alt3.aspmx.l.google.com", priority=10,
              comment="Gmail MX Record - Alt 3"),
    DNSRecord(type="MX", name="@", content="alt4.aspmx.l.google.com", priority=10,
              comment="Gmail MX Record - Alt 4"),
]


def _as_mapping(record: Any) -> Mapping[str, Any]:
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    if isinstance(record, Mapping):
        return record
    return {}


def validate_record(record: Optional[RecordInput]) -> Optional[str]:
    """
    Validate a DNS record.

    Returns:
        None when valid, otherwise the error message
    """
    data = _as_mapping(record)

    if not data.get("type") or not data.get("name") or not data.get("content"):
        return "DNS record must have type, name, and content"

    if data["type"] not in DNS_RECORD_TYPES:
        return f"Invalid DNS record type. Must be one of: {', '.join(DNS_RECORD_TYPES)}"

    if data["type"] == "MX" and data.get("priority") is None:
        return "Priority is required for MX records"

    return None


def record_payload(record: RecordInput) -> dict:
    """Request body for create/update with defaults applied."""
    data = _as_mapping(record)
    return {
        "type": data["type"],
        "name": data["name"],
        "content": data["content"],
        "ttl": data.get("ttl") or DEFAULT_TTL,
        "priority": data.get("priority"),
        "comment": data.get("comment") or "",
    }


def _decode_records(payload: Any) -> List[DNSRecord]:
    if not isinstance(payload, list):
        raise ResponseShapeError("record list payload must be a list")
    return [DNSRecord.from_api(item) for item in payload]


class DNSOperations(RegistrarOperations):
    """Zone lookup, record CRUD and presets."""

    async def get_zone(self, domain_id: str) -> Result[DNSZone]:
        if not self.api.is_configured:
            return self._not_configured()
        if not domain_id:
            return Result.fail("Domain ID required")

        async def request():
            return await self.api.get(f"/domains/{domain_id}/zone")

        return await self._execute(request, DNSZone.from_api, action=f"Zone lookup for domain {domain_id}")

    async def list_records(self, zone_id: str) -> Result[List[DNSRecord]]:
        if not self.api.is_configured:
            return self._not_configured()
        if not zone_id:
            return Result.fail("Zone ID required")

        async def request():
            return await self.api.get(f"/zones/{zone_id}/records")

        return await self._execute(request, _decode_records, action=f"Record listing for zone {zone_id}")

    async def create_record(self, zone_id: str, record: Optional[RecordInput]) -> Result[DNSRecord]:
        """Validate and create one record in ``zone_id``."""
        if not self.api.is_configured:
            return self._not_configured()
        if not zone_id or not record:
            return Result.fail("Zone ID and record data required")

        error = validate_record(record)
        if error:
            return Result.fail(error)

        payload = record_payload(record)

        async def request():
            return await self.api.post(f"/zones/{zone_id}/records", json_body=payload)

        return await self._execute(request, DNSRecord.from_api, action=f"{payload['type']} record creation")

    async def update_record(self, zone_id: str, record_id: str, record: Optional[RecordInput]) -> Result[DNSRecord]:
        """Replace record ``record_id``; the new record is validated like a create."""
        if not self.api.is_configured:
            return self._not_configured()
        if not zone_id or not record_id or not record:
            return Result.fail("Zone ID, record ID, and record data required")

        error = validate_record(record)
        if error:
            return Result.fail(error)

        payload = record_payload(record)

        async def request():
            return await self.api.put(f"/zones/{zone_id}/records/{record_id}", json_body=payload)

        return await self._execute(request, DNSRecord.from_api, action=f"Update of record {record_id}")

    async def delete_record(self, zone_id: str, record_id: str) -> Result[None]:
        if not self.api.is_configured:
            return self._not_configured()
        if not zone_id or not record_id:
            return Result.fail("Zone ID and record ID required")

        async def request():
            return await self.api.delete(f"/zones/{zone_id}/records/{record_id}")

        return await self._execute(request, action=f"Deletion of record {record_id}")

    async def add_gmail_preset(self, zone_id: str) -> Result[List[DNSRecord]]:
        """
        Create the five Gmail MX records, one after another.

        A failed record is logged and skipped; the rest are still
        attempted. The call succeeds once the sequence has completed,
        and ``outcome`` tells full success from partial or total failure.
        """
        if not self.api.is_configured:
            return self._not_configured()
        if not zone_id:
            return Result.fail("Zone ID required")

        created: List[DNSRecord] = []
        failures = []

        for record in GMAIL_MX_RECORDS:
            result = await self.create_record(zone_id, record)
            if result.success and result.data:
                created.append(result.data)
            else:
                logger.warning(f"Failed to create Gmail DNS record {record.content}: {result.error}")
                failures.append(result.error)

        attempted = len(GMAIL_MX_RECORDS)
        return BulkResult(
            success=True,
            data=created,
            message=f"Created {len(created)} Gmail DNS records",
            outcome=BulkOutcome.from_counts(len(created), attempted),
            attempted=attempted,
            failures=failures,
        )
