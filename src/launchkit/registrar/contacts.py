"""
Registrant contact creation and lookup.
"""

import re
from dataclasses import asdict, is_dataclass
from typing import Any, Mapping, Optional, Union

from ..models import Contact, ContactDetails
from ..result import Result
from .base import RegistrarOperations

REQUIRED_FIELDS = ("name", "email", "phone", "address", "city", "postcode", "country")
OPTIONAL_FIELDS = ("organization", "state")

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

ContactInput = Union[ContactDetails, Mapping[str, Any]]


def _as_mapping(contact: Any) -> Mapping[str, Any]:
    if is_dataclass(contact) and not isinstance(contact, type):
        return asdict(contact)
    if isinstance(contact, Mapping):
        return contact
    return {}


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_contact(contact: Optional[ContactInput]) -> Optional[str]:
    """
    Check a contact before it is sent anywhere.

    Returns:
        None when valid, otherwise the error message. Every missing
        field is listed so a form can flag them all at once.
    """
    data = _as_mapping(contact)

    missing = [name for name in REQUIRED_FIELDS if _is_blank(data.get(name))]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    if not EMAIL_RE.match(data["email"].strip()):
        return "Invalid email format"

    return None


def contact_payload(contact: ContactInput) -> dict:
    """Trimmed request body; optional fields are sent as empty strings."""
    data = _as_mapping(contact)
    payload = {name: data[name].strip() for name in REQUIRED_FIELDS}
    for name in OPTIONAL_FIELDS:
        value = data.get(name)
        payload[name] = value.strip() if isinstance(value, str) else ""
    return payload


class ContactOperations(RegistrarOperations):
    """Create and fetch registrar contacts."""

    async def create(self, contact: ContactInput) -> Result[Contact]:
        if not self.api.is_configured:
            return self._not_configured()

        error = validate_contact(contact)
        if error:
            return Result.fail(error)

        payload = contact_payload(contact)

        async def request():
            return await self.api.post("/contacts", json_body=payload)

        return await self._execute(request, Contact.from_api, action="Contact creation")

    async def get(self, contact_id: str) -> Result[Contact]:
        if not self.api.is_configured:
            return self._not_configured()

        if not contact_id or not contact_id.strip():
            return Result.fail("Contact ID required")

        async def request():
            return await self.api.get(f"/contacts/{contact_id.strip()}")

        return await self._execute(request, Contact.from_api, action=f"Contact lookup {contact_id.strip()}")
