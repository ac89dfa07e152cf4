"""Convert loose JSON payloads into typed schema records.

Payloads use the camelCase keys of the site templates, e.g.::

    {"name": "Acme", "phone": "+1-206-555-1234", "businessType": "plumber",
     "address": {"street": "1 Main St", "city": "Seattle", "state": "WA", "zip": "98101"},
     "geo": {"lat": 47.6, "lng": -122.3}, "sameAs": ["https://facebook.com/acme"]}

All missing required fields are collected and reported in one RecordError.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from schemakit.errors import RecordError
from schemakit.models import (
    AttorneyRecord,
    BreadcrumbItem,
    BusinessRecord,
    FAQItem,
    GeoPoint,
    OrganizationRecord,
    PostalAddress,
    ServiceRecord,
    WebSiteRecord,
)

logger = logging.getLogger(__name__)

_BUSINESS_REQUIRED = ("name", "description", "url", "phone", "email")
_ADDRESS_REQUIRED = ("street", "city", "state", "zip")


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _strip_or_none(value: Any) -> Optional[str]:
    # Numbers are accepted for fields like zip codes; other non-strings count as missing.
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    value_str = str(value).strip()
    return value_str or None


def _safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _string_list(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        logger.debug("Ignoring non-list value %r where a list of strings was expected", value)
        return None
    items = [item for item in (_strip_or_none(raw) for raw in value) if item]
    return items or None


def _hours(value: Any) -> Optional[Dict[str, str]]:
    if not isinstance(value, Mapping):
        return None
    hours = {str(day): str(text).strip() for day, text in value.items() if text is not None}
    return hours or None


def _required_strings(
    payload: Mapping[str, Any], keys: Sequence[str], missing: List[str], prefix: str = ""
) -> Dict[str, Optional[str]]:
    values: Dict[str, Optional[str]] = {}
    for key in keys:
        value = _strip_or_none(payload.get(key))
        if value is None:
            missing.append(f"{prefix}{key}")
        values[key] = value
    return values


def _business_fields(payload: Any, default_country: str, kind: str) -> Dict[str, Any]:
    data = _as_mapping(payload)
    missing: List[str] = []

    fields = _required_strings(data, _BUSINESS_REQUIRED, missing)

    raw_address = _as_mapping(data.get("address"))
    address = _required_strings(raw_address, _ADDRESS_REQUIRED, missing, prefix="address.")
    country = _strip_or_none(raw_address.get("country")) or default_country

    raw_geo = _as_mapping(data.get("geo"))
    lat = _safe_float(raw_geo.get("lat"))
    lng = _safe_float(raw_geo.get("lng"))
    if lat is None:
        missing.append("geo.lat")
    if lng is None:
        missing.append("geo.lng")

    if missing:
        raise RecordError(kind, missing)

    fields.update(
        address=PostalAddress(country=country, **address),
        geo=GeoPoint(lat=lat, lng=lng),
        hours=_hours(data.get("hours")),
        logo=_strip_or_none(data.get("logo")),
        image=_strip_or_none(data.get("image")),
        price_range=_strip_or_none(data.get("priceRange")),
        same_as=_string_list(data.get("sameAs")),
    )
    return fields


def load_business(payload: Any, default_country: str = "US") -> BusinessRecord:
    fields = _business_fields(payload, default_country, "BusinessRecord")
    return BusinessRecord(
        business_type=_strip_or_none(_as_mapping(payload).get("businessType")),
        **fields,
    )


def load_attorney(payload: Any, default_country: str = "US") -> AttorneyRecord:
    fields = _business_fields(payload, default_country, "AttorneyRecord")
    return AttorneyRecord(
        practice_areas=_string_list(_as_mapping(payload).get("practiceAreas")),
        **fields,
    )


def load_organization(payload: Any) -> OrganizationRecord:
    data = _as_mapping(payload)
    missing: List[str] = []
    fields = _required_strings(data, ("name", "url", "logo"), missing)
    if missing:
        raise RecordError("OrganizationRecord", missing)
    return OrganizationRecord(
        description=_strip_or_none(data.get("description")),
        same_as=_string_list(data.get("sameAs")),
        **fields,
    )


def load_website(payload: Any) -> WebSiteRecord:
    data = _as_mapping(payload)
    missing: List[str] = []
    fields = _required_strings(data, ("name", "url"), missing)
    if missing:
        raise RecordError("WebSiteRecord", missing)
    return WebSiteRecord(search_url=_strip_or_none(data.get("searchUrl")), **fields)


def load_service(payload: Any) -> ServiceRecord:
    data = _as_mapping(payload)
    missing: List[str] = []
    fields = _required_strings(data, ("name", "description", "provider"), missing)
    if missing:
        raise RecordError("ServiceRecord", missing)
    return ServiceRecord(
        area_served=_strip_or_none(data.get("areaServed")),
        image=_strip_or_none(data.get("image")),
        **fields,
    )


def _load_items(payload: Any, keys: Sequence[str], kind: str) -> List[Dict[str, Optional[str]]]:
    if not isinstance(payload, (list, tuple)):
        raise RecordError(kind, ["items"])
    missing: List[str] = []
    items = [
        _required_strings(_as_mapping(raw), keys, missing, prefix=f"[{index}].")
        for index, raw in enumerate(payload)
    ]
    if missing:
        raise RecordError(kind, missing)
    return items


def load_breadcrumbs(payload: Any) -> List[BreadcrumbItem]:
    return [BreadcrumbItem(**item) for item in _load_items(payload, ("name", "url"), "BreadcrumbItem")]


def load_faqs(payload: Any) -> List[FAQItem]:
    return [FAQItem(**item) for item in _load_items(payload, ("question", "answer"), "FAQItem")]
