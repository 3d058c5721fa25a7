"""
Tests for contact validation, creation and lookup.
"""

import pytest

from launchkit.models import ContactDetails
from launchkit.registrar.contacts import REQUIRED_FIELDS, contact_payload, validate_contact

from conftest import ok

VALID_CONTACT = {
    "name": "John Doe",
    "email": "john@example.com",
    "phone": "+1234567890",
    "address": "123 Main St",
    "city": "New York",
    "postcode": "10001",
    "country": "US",
}


class TestValidateContact:
    """Tests for validate_contact."""

    def test_valid(self):
        """A complete contact passes."""
        assert validate_contact(VALID_CONTACT) is None

    def test_dataclass_input(self):
        """ContactDetails instances are accepted."""
        assert validate_contact(ContactDetails(**VALID_CONTACT)) is None

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_each_required_field(self, field):
        """Dropping any one required field is reported by name."""
        contact = {k: v for k, v in VALID_CONTACT.items() if k != field}
        assert validate_contact(contact) == f"Missing required fields: {field}"

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_whitespace_only_counts_as_missing(self, field):
        """Whitespace-only values are missing."""
        contact = dict(VALID_CONTACT, **{field: "   "})
        assert validate_contact(contact) == f"Missing required fields: {field}"

    def test_lists_every_missing_field(self):
        """All missing fields are listed, in order."""
        contact = dict(VALID_CONTACT, phone="", address="", city="", postcode="", country="")
        assert validate_contact(contact) == "Missing required fields: phone, address, city, postcode, country"

    def test_missing_fields_before_email_format(self):
        """Missing fields are reported ahead of a bad email."""
        contact = dict(VALID_CONTACT, email="invalid-email", phone="")
        assert "Missing required fields" in validate_contact(contact)

    @pytest.mark.parametrize("email", ["x", "invalid-email", "a@b", "a b@c.d", "@example.com", "a@@b.c"])
    def test_invalid_email(self, email):
        """Malformed emails are rejected."""
        assert validate_contact(dict(VALID_CONTACT, email=email)) == "Invalid email format"

    def test_email_is_trimmed_before_matching(self):
        """Surrounding whitespace does not invalidate an email."""
        assert validate_contact(dict(VALID_CONTACT, email="  john@example.com ")) is None

    def test_none(self):
        """No contact at all lists every field."""
        assert validate_contact(None) == f"Missing required fields: {', '.join(REQUIRED_FIELDS)}"


class TestContactPayload:
    """Tests for contact_payload."""

    def test_trims_and_defaults_optionals(self):
        """Strings are trimmed; absent optional fields become empty strings."""
        payload = contact_payload(dict(VALID_CONTACT, name="  John Doe ", state=" NY "))

        assert payload["name"] == "John Doe"
        assert payload["state"] == "NY"
        assert payload["organization"] == ""


class TestContactOperations:
    """Tests for ContactOperations."""

    @pytest.mark.asyncio
    async def test_create(self, registrar, handler):
        """Valid contacts are posted trimmed and decoded."""
        handler.queue(ok({"id": "contact-123", **VALID_CONTACT}))

        result = await registrar.contacts.create(dict(VALID_CONTACT, city=" New York "))

        assert result.success is True
        assert result.data.id == "contact-123"
        assert handler.requests[0].url.path == "/v1/contacts"
        assert handler.body()["city"] == "New York"
        assert handler.body()["organization"] == ""

    @pytest.mark.asyncio
    async def test_invalid_email_no_request(self, registrar, handler):
        """Example: present fields with a malformed email."""
        contact = {"name": "John Doe", "email": "x", "phone": "1", "address": "1",
                   "city": "c", "postcode": "1", "country": "US"}

        result = await registrar.contacts.create(contact)

        assert result.success is False
        assert result.error == "Invalid email format"
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_missing_fields_no_request(self, registrar, handler):
        """Validation failures never reach the network."""
        result = await registrar.contacts.create({"name": "John Doe", "email": "invalid-email"})

        assert result.success is False
        assert result.error.startswith("Missing required fields")
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_create_unconfigured(self, unconfigured_registrar):
        """Missing token is reported first."""
        result = await unconfigured_registrar.contacts.create({})

        assert result.error == "OLA_API_TOKEN not configured"

    @pytest.mark.asyncio
    async def test_get(self, registrar, handler):
        """Contacts are fetched by trimmed ID."""
        handler.queue(ok({"id": "contact-123", **VALID_CONTACT}))

        result = await registrar.contacts.get(" contact-123 ")

        assert result.success is True
        assert result.data.email == "john@example.com"
        assert handler.requests[0].url.path == "/v1/contacts/contact-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("contact_id", ["", "   "])
    async def test_get_blank_id(self, registrar, handler, contact_id):
        """Blank IDs are rejected."""
        result = await registrar.contacts.get(contact_id)

        assert result.error == "Contact ID required"
        assert handler.requests == []
