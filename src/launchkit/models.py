"""
Records exchanged with the registrar and generation APIs.

Registrar entities decode themselves with from_api(), which raises
ResponseShapeError instead of guessing when a payload is malformed.
"""

from dataclasses import asdict, dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .errors import ResponseShapeError

DNS_RECORD_TYPES = ("A", "AAAA", "CNAME", "MX", "TXT", "SRV")
DEFAULT_TTL = 3600


def _require_mapping(data: Any, entity: str) -> dict:
    if not isinstance(data, dict):
        raise ResponseShapeError(f"{entity} payload must be an object, got {type(data).__name__}")
    return data


def _require(data: dict, entity: str, *keys: str) -> Any:
    """Return the first present key among ``keys`` or raise."""
    for key in keys:
        if data.get(key) not in (None, ""):
            return data[key]
    raise ResponseShapeError(f"{entity} payload missing '{keys[0]}'")


def _optional(data: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ResponseShapeError(f"Invalid {name} value: {value!r}")


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ResponseShapeError(f"Invalid fee value: {value!r}")


@dataclass
class DomainAvailability:
    """Availability and pricing for one queried domain."""
    domain: str
    available: bool = False
    premium: bool = False
    registration_fee: Optional[Decimal] = None
    renewal_fee: Optional[Decimal] = None
    currency: str = "USD"

    @classmethod
    def from_check_entry(cls, domain: str, entry: dict) -> "DomainAvailability":
        """Build from a /domains/check entry; ``domain`` is always the queried name."""
        return cls(
            domain=domain,
            available=bool(entry.get("available", False)),
            premium=bool(entry.get("premium", False)),
            registration_fee=_to_decimal(entry.get("registration_fee")),
            renewal_fee=_to_decimal(entry.get("renewal_fee")),
            currency=entry.get("currency") or "USD",
        )

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "available": self.available,
            "premium": self.premium,
            "registration_fee": str(self.registration_fee) if self.registration_fee is not None else None,
            "renewal_fee": str(self.renewal_fee) if self.renewal_fee is not None else None,
            "currency": self.currency,
        }


@dataclass
class ContactDetails:
    """Registrant details supplied by the caller."""
    name: str
    email: str
    phone: str
    address: str
    city: str
    postcode: str
    country: str
    organization: Optional[str] = None
    state: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Contact:
    """A registrar contact."""
    id: str
    name: str
    email: str
    phone: str
    address: str
    city: str
    postcode: str
    country: str
    organization: str = ""
    state: str = ""

    @classmethod
    def from_api(cls, data: Any) -> "Contact":
        data = _require_mapping(data, "Contact")
        return cls(
            id=str(_require(data, "Contact", "id")),
            name=_optional(data, "name", default=""),
            email=_optional(data, "email", default=""),
            phone=_optional(data, "phone", default=""),
            address=_optional(data, "address", default=""),
            city=_optional(data, "city", default=""),
            postcode=_optional(data, "postcode", default=""),
            country=_optional(data, "country", default=""),
            organization=_optional(data, "organization", default=""),
            state=_optional(data, "state", default=""),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DomainRegistration:
    """A completed registration."""
    id: str
    domain: str
    status: str
    registered_at: Optional[str] = None
    expires_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "DomainRegistration":
        data = _require_mapping(data, "DomainRegistration")
        return cls(
            id=str(_require(data, "DomainRegistration", "id")),
            domain=_require(data, "DomainRegistration", "domain", "name"),
            status=_optional(data, "status", default="pending"),
            registered_at=_optional(data, "registered_at", "registeredAt"),
            expires_at=_optional(data, "expires_at", "expiresAt"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DomainInfo:
    """Registrar view of an owned domain."""
    id: str
    domain: str
    auto_renew: bool = False
    registered_at: Optional[str] = None
    expires_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "DomainInfo":
        data = _require_mapping(data, "DomainInfo")
        return cls(
            id=str(_require(data, "DomainInfo", "id")),
            domain=_require(data, "DomainInfo", "domain", "name"),
            auto_renew=bool(_optional(data, "auto_renew", "autoRenew", default=False)),
            registered_at=_optional(data, "registered_at", "registeredAt"),
            expires_at=_optional(data, "expires_at", "expiresAt"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DNSZone:
    """DNS namespace container for one domain."""
    id: str
    domain: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "DNSZone":
        data = _require_mapping(data, "DNSZone")
        return cls(
            id=str(_require(data, "DNSZone", "id")),
            domain=_optional(data, "domain", "name"),
            status=_optional(data, "status"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DNSRecord:
    """A single DNS record. ``id`` is None until the registrar has created it."""
    type: str
    name: str
    content: str
    ttl: int = DEFAULT_TTL
    priority: Optional[int] = None
    comment: str = ""
    id: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "DNSRecord":
        data = _require_mapping(data, "DNSRecord")
        record_id = _optional(data, "id")
        return cls(
            type=_require(data, "DNSRecord", "type"),
            name=_require(data, "DNSRecord", "name"),
            content=_require(data, "DNSRecord", "content"),
            ttl=_to_int(_optional(data, "ttl", default=DEFAULT_TTL), "ttl"),
            priority=_optional(data, "priority"),
            comment=_optional(data, "comment", default=""),
            id=str(record_id) if record_id is not None else None,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BrandColors:
    """Palette as hex strings."""
    primary: str
    accent: str
    neutral: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BrandIdentity:
    """A generated brand. Ephemeral: never persisted here."""
    brand_name: str
    colors: BrandColors
    tagline: str
    tld: str = field(default="cv", repr=False)

    @property
    def suggested_domain(self) -> str:
        """Brand name squashed into a registrable domain."""
        return "".join(self.brand_name.split()).lower() + f".{self.tld}"

    def to_dict(self) -> dict:
        return {
            "brand_name": self.brand_name,
            "colors": self.colors.to_dict(),
            "tagline": self.tagline,
            "suggested_domain": self.suggested_domain,
        }
