"""
Launch Orchestrator

Sequences the registrar steps needed to take a brand live:
1. Create the registrant contact (skipped when a contact ID is supplied)
2. Register the domain
3. Fetch the new domain's DNS zone
4. Optionally install the Gmail MX preset

Each step can fail independently. The first failure stops the sequence
and is recorded against its step, so callers can tell "contact rejected"
from "registration failed" from "zone unavailable".
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional, Union

from .registrar.client import RegistrarClient
from .registrar.contacts import ContactInput
from .result import BulkOutcome, BulkResult, Result

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class LaunchStatus(str, Enum):
    """Status of a launch job."""
    PENDING = "pending"
    CREATING_CONTACT = "creating_contact"
    REGISTERING = "registering"
    CONFIGURING_DNS = "configuring_dns"
    LIVE = "live"
    FAILED = "failed"


class LaunchStep(str, Enum):
    """Individual registrar steps."""
    CONTACT = "contact"
    REGISTER = "register"
    ZONE = "zone"
    DNS = "dns"


@dataclass
class StepOutcome:
    """What happened at one step."""
    step: LaunchStep
    success: bool
    message: Optional[str] = None
    error: Optional[Union[str, dict]] = None

    def to_dict(self) -> dict:
        return {
            "step": self.step.value,
            "success": self.success,
            "message": self.message,
            "error": self.error,
        }


@dataclass
class LaunchState:
    """State of one launch, for the caller to persist."""
    job_id: str
    domain: str
    status: LaunchStatus = LaunchStatus.PENDING
    contact_id: Optional[str] = None
    domain_id: Optional[str] = None
    zone_id: Optional[str] = None
    steps: List[StepOutcome] = field(default_factory=list)
    failed_step: Optional[LaunchStep] = None
    dns_outcome: Optional[BulkOutcome] = None
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    @property
    def is_live(self) -> bool:
        return self.status == LaunchStatus.LIVE

    @property
    def error(self) -> Optional[Union[str, dict]]:
        """Error of the failing step, if any."""
        for outcome in self.steps:
            if not outcome.success:
                return outcome.error
        return None

    def record(self, step: LaunchStep, result: Result):
        """Append a step outcome and mark the launch failed on error."""
        self.steps.append(StepOutcome(
            step=step,
            success=result.success,
            message=result.message,
            error=result.error,
        ))
        if not result.success:
            self.status = LaunchStatus.FAILED
            self.failed_step = step
        self.update_timestamp()

    def update_timestamp(self):
        """Update the updated_at timestamp."""
        self.updated_at = _now()

    def to_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "domain": self.domain,
            "status": self.status.value,
            "contact_id": self.contact_id,
            "domain_id": self.domain_id,
            "zone_id": self.zone_id,
            "steps": [s.to_dict() for s in self.steps],
            "failed_step": self.failed_step.value if self.failed_step else None,
            "dns_outcome": self.dns_outcome.value if self.dns_outcome else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


class LaunchOrchestrator:
    """
    Runs the contact -> registration -> zone -> DNS sequence.

    Never raises for registrar failures; inspect the returned state.
    """

    def __init__(self, registrar: RegistrarClient):
        self.registrar = registrar

    async def launch(
        self,
        domain: str,
        contact: Optional[ContactInput] = None,
        *,
        contact_id: Optional[str] = None,
        gmail_preset: bool = False,
        job_id: Optional[str] = None,
    ) -> LaunchState:
        """
        Take ``domain`` live.

        Args:
            domain: Domain to register (normalized before use)
            contact: Registrant details, used when no contact_id is given
            contact_id: Existing registrar contact to register under
            gmail_preset: Install Gmail MX records once the zone exists
            job_id: Identifier for the launch (generated if omitted)

        Returns:
            LaunchState describing every step attempted
        """
        state = LaunchState(
            job_id=job_id or str(uuid.uuid4()),
            domain=self.registrar.domains.normalize(domain) if domain else "",
        )

        # Nothing is created on the registrar unless a domain is given
        if not domain or not domain.strip():
            state.record(LaunchStep.REGISTER, Result.fail("Domain and contact ID required"))
            logger.error(f"Launch {state.job_id} rejected: no domain given")
            return state

        # Step 1: contact
        if contact_id:
            state.contact_id = contact_id
        else:
            state.status = LaunchStatus.CREATING_CONTACT
            result = await self._run(self.registrar.contacts.create(contact), state, LaunchStep.CONTACT)
            if not result.success:
                return state
            state.contact_id = result.data.id

        # Step 2: registration
        state.status = LaunchStatus.REGISTERING
        result = await self._run(
            self.registrar.domains.register(domain, state.contact_id), state, LaunchStep.REGISTER
        )
        if not result.success:
            return state
        state.domain_id = result.data.id

        # Step 3: zone
        state.status = LaunchStatus.CONFIGURING_DNS
        result = await self._run(self.registrar.dns.get_zone(state.domain_id), state, LaunchStep.ZONE)
        if not result.success:
            return state
        state.zone_id = result.data.id

        # Step 4: mail records; partial failure is reported, not fatal
        if gmail_preset:
            result = await self._run(self.registrar.dns.add_gmail_preset(state.zone_id), state, LaunchStep.DNS)
            if not result.success:
                return state
            if isinstance(result, BulkResult):
                state.dns_outcome = result.outcome
                if result.outcome != BulkOutcome.ALL_SUCCEEDED:
                    logger.warning(f"Launch {state.job_id}: {result.message} ({result.outcome.value})")

        state.status = LaunchStatus.LIVE
        state.update_timestamp()
        logger.info(f"Launch {state.job_id} for {state.domain} is live")
        return state

    async def _run(self, operation: Any, state: LaunchState, step: LaunchStep) -> Result:
        result = await operation
        state.record(step, result)
        if not result.success:
            logger.error(f"Launch {state.job_id} failed at {step.value}: {result.error}")
        return result
