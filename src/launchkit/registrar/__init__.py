"""
Registrar (Ola.CV) integration: domains, contacts and DNS.
"""

from .api import Envelope, RegistrarAPI, decode_envelope
from .client import RegistrarClient
from .contacts import ContactOperations, validate_contact
from .dns import GMAIL_MX_RECORDS, DNSOperations, validate_record
from .domains import DomainOperations, normalize_domain

__all__ = [
    "Envelope",
    "RegistrarAPI",
    "decode_envelope",
    "RegistrarClient",
    "ContactOperations",
    "validate_contact",
    "DNSOperations",
    "GMAIL_MX_RECORDS",
    "validate_record",
    "DomainOperations",
    "normalize_domain",
]
