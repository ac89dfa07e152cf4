"""Typed input records for the JSON-LD renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from schemakit.errors import RecordError


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return not math.isfinite(value)
    return False


class _Validated:
    """Mixin that rejects records whose required fields are blank."""

    __slots__ = ()

    _required: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        missing = [name for name in self._required if _is_blank(getattr(self, name))]
        if missing:
            raise RecordError(type(self).__name__, missing)


@dataclass(slots=True)
class PostalAddress(_Validated):
    street: str
    city: str
    state: str
    zip: str
    country: str = "US"

    _required: ClassVar[Tuple[str, ...]] = ("street", "city", "state", "zip", "country")


@dataclass(slots=True)
class GeoPoint(_Validated):
    lat: float
    lng: float

    _required: ClassVar[Tuple[str, ...]] = ("lat", "lng")


@dataclass(slots=True)
class BusinessRecord(_Validated):
    """A local business as shown on a brochure site."""

    name: str
    description: str
    url: str
    phone: str
    email: str
    address: PostalAddress
    geo: GeoPoint
    hours: Optional[Dict[str, str]] = None
    logo: Optional[str] = None
    image: Optional[str] = None
    price_range: Optional[str] = None
    same_as: Optional[List[str]] = None
    business_type: Optional[str] = None

    _required: ClassVar[Tuple[str, ...]] = (
        "name",
        "description",
        "url",
        "phone",
        "email",
        "address",
        "geo",
    )


@dataclass(slots=True)
class AttorneyRecord(BusinessRecord):
    """A law firm or attorney; practice areas render as ``knowsAbout``."""

    practice_areas: Optional[List[str]] = None


@dataclass(slots=True)
class OrganizationRecord(_Validated):
    name: str
    url: str
    logo: str
    description: Optional[str] = None
    same_as: Optional[List[str]] = None

    _required: ClassVar[Tuple[str, ...]] = ("name", "url", "logo")


@dataclass(slots=True)
class WebSiteRecord(_Validated):
    name: str
    url: str
    search_url: Optional[str] = None

    _required: ClassVar[Tuple[str, ...]] = ("name", "url")


@dataclass(slots=True)
class BreadcrumbItem(_Validated):
    name: str
    url: str

    _required: ClassVar[Tuple[str, ...]] = ("name", "url")


@dataclass(slots=True)
class FAQItem(_Validated):
    question: str
    answer: str

    _required: ClassVar[Tuple[str, ...]] = ("question", "answer")


@dataclass(slots=True)
class ServiceRecord(_Validated):
    name: str
    description: str
    provider: str
    area_served: Optional[str] = None
    image: Optional[str] = None

    _required: ClassVar[Tuple[str, ...]] = ("name", "description", "provider")


@dataclass(frozen=True, slots=True)
class OpeningHoursSpec:
    """One weekday's opening window, derived from free-text hours."""

    day_of_week: str
    opens: str
    closes: str

    def to_schema(self) -> Dict[str, str]:
        return {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": self.day_of_week,
            "opens": self.opens,
            "closes": self.closes,
        }
