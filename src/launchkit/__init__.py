"""
launchkit: async client for the LaunchKit brand-launch flow.

Checks and registers domains, manages contacts and DNS through the
registrar API, and generates brand identities with a text model.
"""

__version__ = "0.1.0"

from .config import Config, GenerationConfig, RegistrarConfig, RetryConfig
from .result import Result, BulkResult, BulkOutcome
from .models import (
    BrandColors,
    BrandIdentity,
    Contact,
    ContactDetails,
    DNSRecord,
    DNSZone,
    DomainAvailability,
    DomainInfo,
    DomainRegistration,
)
from .retry import RetryPolicy, retry, with_retry
from .registrar import RegistrarClient, normalize_domain
from .agents import BrandGenerator
from .providers import get_provider, provider_from_config
from .orchestrator import LaunchOrchestrator, LaunchState, LaunchStatus, LaunchStep

__all__ = [
    # Config
    "Config",
    "GenerationConfig",
    "RegistrarConfig",
    "RetryConfig",
    # Results
    "Result",
    "BulkResult",
    "BulkOutcome",
    # Models
    "BrandColors",
    "BrandIdentity",
    "Contact",
    "ContactDetails",
    "DNSRecord",
    "DNSZone",
    "DomainAvailability",
    "DomainInfo",
    "DomainRegistration",
    # Retry
    "RetryPolicy",
    "retry",
    "with_retry",
    # Registrar
    "RegistrarClient",
    "normalize_domain",
    # Generation
    "BrandGenerator",
    "get_provider",
    "provider_from_config",
    # Orchestrator
    "LaunchOrchestrator",
    "LaunchState",
    "LaunchStatus",
    "LaunchStep",
]
