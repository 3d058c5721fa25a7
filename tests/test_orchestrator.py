"""
Tests for the launch orchestrator.
"""

import json

import httpx
import pytest

from conftest import ok
from launchkit.orchestrator import LaunchOrchestrator, LaunchState, LaunchStatus, LaunchStep
from launchkit.result import BulkOutcome, Result

CONTACT = {
    "name": "Ana Silva",
    "email": "ana@example.com",
    "phone": "+238 555 0100",
    "address": "Rua 1",
    "city": "Praia",
    "postcode": "7600",
    "country": "CV",
}


def failing(status, body, times=4):
    """One attempt plus three retries."""
    return [httpx.Response(status, json=body) for _ in range(times)]


def echo_record(request):
    body = json.loads(request.content)
    return httpx.Response(201, json={"data": dict(body, id=f"rec-{body['content']}")})


@pytest.fixture
def orchestrator(registrar):
    return LaunchOrchestrator(registrar)


class TestLaunchOrchestrator:
    """Tests for LaunchOrchestrator.launch."""

    @pytest.mark.asyncio
    async def test_full_launch(self, orchestrator, handler):
        """Contact, registration, zone and Gmail records all succeed."""
        handler.queue(
            ok({"id": "contact-1", **CONTACT}),
            ok({"id": "dom-1", "name": "anastudio.cv", "status": "active"}, status=201),
            ok({"id": "zone-1", "name": "anastudio.cv"}),
            *[echo_record] * 5,
        )

        state = await orchestrator.launch("AnaStudio", CONTACT, gmail_preset=True, job_id="job-1")

        assert state.is_live
        assert state.status == LaunchStatus.LIVE
        assert state.domain == "anastudio.cv"
        assert (state.contact_id, state.domain_id, state.zone_id) == ("contact-1", "dom-1", "zone-1")
        assert [s.step for s in state.steps] == [
            LaunchStep.CONTACT, LaunchStep.REGISTER, LaunchStep.ZONE, LaunchStep.DNS,
        ]
        assert state.dns_outcome == BulkOutcome.ALL_SUCCEEDED
        assert state.error is None
        assert handler.body(1)["registrant"] == "contact-1"
        assert handler.requests[2].url.path.endswith("/domains/dom-1/zone")

    @pytest.mark.asyncio
    async def test_existing_contact(self, orchestrator, handler):
        """A supplied contact ID skips contact creation."""
        handler.queue(
            ok({"id": "dom-1", "name": "nova.cv"}),
            ok({"id": "zone-1"}),
        )

        state = await orchestrator.launch("nova", contact_id="contact-9")

        assert state.is_live
        assert state.contact_id == "contact-9"
        assert [s.step for s in state.steps] == [LaunchStep.REGISTER, LaunchStep.ZONE]
        assert state.dns_outcome is None
        assert len(handler.requests) == 2

    @pytest.mark.asyncio
    async def test_invalid_contact_stops_launch(self, orchestrator, handler):
        """Contact validation failures stop before any request."""
        state = await orchestrator.launch("nova", dict(CONTACT, email="nope"))

        assert state.status == LaunchStatus.FAILED
        assert state.failed_step == LaunchStep.CONTACT
        assert state.error == "Invalid email format"
        assert handler.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("domain", ["", "   "])
    async def test_blank_domain_creates_nothing(self, orchestrator, handler, domain):
        """A blank domain fails at registration before a contact is created."""
        state = await orchestrator.launch(domain, CONTACT)

        assert state.status == LaunchStatus.FAILED
        assert state.failed_step == LaunchStep.REGISTER
        assert state.error == "Domain and contact ID required"
        assert state.contact_id is None
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_registration_failure(self, orchestrator, handler):
        """A rejected registration keeps the registrar's error body."""
        handler.queue(ok({"id": "contact-1"}), *failing(422, {"message": "Domain taken"}))

        state = await orchestrator.launch("nova", CONTACT)

        assert state.failed_step == LaunchStep.REGISTER
        assert state.error == {"message": "Domain taken"}
        assert state.contact_id == "contact-1"
        assert state.domain_id is None

    @pytest.mark.asyncio
    async def test_zone_failure(self, orchestrator, handler):
        """A missing zone fails the launch at the zone step."""
        handler.queue(
            ok({"id": "dom-1", "name": "nova.cv"}),
            *failing(404, {"message": "Zone not found"}),
        )

        state = await orchestrator.launch("nova", contact_id="contact-1", gmail_preset=True)

        assert state.failed_step == LaunchStep.ZONE
        assert state.zone_id is None
        assert not state.is_live

    @pytest.mark.asyncio
    async def test_partial_dns_is_still_live(self, orchestrator, handler):
        """Some Gmail records failing is reported but not fatal."""
        handler.queue(
            ok({"id": "dom-1", "name": "nova.cv"}),
            ok({"id": "zone-1"}),
            echo_record,
            *[httpx.ConnectError("down")] * 4,
            echo_record,
            echo_record,
            echo_record,
        )

        state = await orchestrator.launch("nova", contact_id="contact-1", gmail_preset=True)

        assert state.is_live
        assert state.dns_outcome == BulkOutcome.PARTIAL
        assert state.steps[-1].message == "Created 4 Gmail DNS records"

    @pytest.mark.asyncio
    async def test_unconfigured_registrar(self, unconfigured_registrar):
        """Without a token the first step fails with the configuration error."""
        state = await LaunchOrchestrator(unconfigured_registrar).launch("nova", contact_id="contact-1")

        assert state.failed_step == LaunchStep.REGISTER
        assert state.error == "OLA_API_TOKEN not configured"


class TestLaunchState:
    """Tests for LaunchState."""

    def test_initial_state(self):
        """A fresh state is pending with no steps."""
        state = LaunchState(job_id="job-1", domain="nova.cv")

        assert state.status == LaunchStatus.PENDING
        assert state.steps == []
        assert state.error is None

    def test_record_failure(self):
        """Recording a failed result marks the state failed."""
        state = LaunchState(job_id="job-1", domain="nova.cv")
        state.record(LaunchStep.CONTACT, Result.ok(message="created"))
        state.record(LaunchStep.REGISTER, Result.fail("Network or server error"))

        assert state.status == LaunchStatus.FAILED
        assert state.failed_step == LaunchStep.REGISTER
        assert state.error == "Network or server error"

    def test_to_dict(self):
        """Serialization uses plain values."""
        state = LaunchState(job_id="job-1", domain="nova.cv", dns_outcome=BulkOutcome.PARTIAL)
        state.record(LaunchStep.REGISTER, Result.fail("boom"))

        data = state.to_dict()

        assert data["job_id"] == "job-1"
        assert data["status"] == "failed"
        assert data["failed_step"] == "register"
        assert data["dns_outcome"] == "partial"
        assert data["steps"] == [
            {"step": "register", "success": False, "message": None, "error": "boom"},
        ]
