"""Utilities for transforming typed records into Schema.org JSON-LD dictionaries."""

from typing import Any, Dict, Iterable, List, Optional

from schemakit.etl.business_types import DEFAULT_BUSINESS_TYPE, get_schema_business_type
from schemakit.etl.hours import format_opening_hours
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

SCHEMA_CONTEXT = "https://schema.org"
SEARCH_QUERY_SUFFIX = "?q={search_term_string}"
SEARCH_QUERY_INPUT = "required name=search_term_string"


def _base(schema_type: str) -> Dict[str, Any]:
    return {"@context": SCHEMA_CONTEXT, "@type": schema_type}


def _set_optional(schema: Dict[str, Any], key: str, value: Any) -> None:
    # None, "" and [] are all treated as absent.
    if value is None:
        return
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return
    schema[key] = list(value) if isinstance(value, tuple) else value


def address_schema(address: PostalAddress) -> Dict[str, Any]:
    return {
        "@type": "PostalAddress",
        "streetAddress": address.street,
        "addressLocality": address.city,
        "addressRegion": address.state,
        "postalCode": address.zip,
        "addressCountry": address.country,
    }


def geo_schema(geo: GeoPoint) -> Dict[str, Any]:
    return {
        "@type": "GeoCoordinates",
        "latitude": geo.lat,
        "longitude": geo.lng,
    }


def opening_hours_schema(hours: Optional[Dict[str, str]]) -> List[Dict[str, str]]:
    if not hours:
        return []
    return [spec.to_schema() for spec in format_opening_hours(hours)]


def _business_body(record: BusinessRecord, schema_type: str) -> Dict[str, Any]:
    schema = _base(schema_type)
    schema.update(
        {
            "name": record.name,
            "description": record.description,
            "url": record.url,
            "telephone": record.phone,
            "email": record.email,
            "address": address_schema(record.address),
            "geo": geo_schema(record.geo),
        }
    )
    return schema


def local_business_schema(record: BusinessRecord) -> Dict[str, Any]:
    schema = _business_body(record, get_schema_business_type(record.business_type))
    _set_optional(schema, "openingHoursSpecification", opening_hours_schema(record.hours))
    _set_optional(schema, "logo", record.logo)
    _set_optional(schema, "image", record.image)
    _set_optional(schema, "priceRange", record.price_range)
    _set_optional(schema, "sameAs", record.same_as)
    return schema


def attorney_schema(record: AttorneyRecord) -> Dict[str, Any]:
    schema = _business_body(record, "Attorney")
    _set_optional(schema, "knowsAbout", record.practice_areas)
    _set_optional(schema, "openingHoursSpecification", opening_hours_schema(record.hours))
    _set_optional(schema, "logo", record.logo)
    _set_optional(schema, "image", record.image)
    _set_optional(schema, "priceRange", record.price_range)
    _set_optional(schema, "sameAs", record.same_as)
    return schema


def organization_schema(record: OrganizationRecord) -> Dict[str, Any]:
    schema = _base("Organization")
    schema.update({"name": record.name, "url": record.url, "logo": record.logo})
    _set_optional(schema, "description", record.description)
    _set_optional(schema, "sameAs", record.same_as)
    return schema


def website_schema(record: WebSiteRecord) -> Dict[str, Any]:
    schema = _base("WebSite")
    schema.update({"name": record.name, "url": record.url})
    if record.search_url:
        schema["potentialAction"] = {
            "@type": "SearchAction",
            "target": record.search_url + SEARCH_QUERY_SUFFIX,
            "query-input": SEARCH_QUERY_INPUT,
        }
    return schema


def breadcrumb_schema(items: Iterable[BreadcrumbItem]) -> Dict[str, Any]:
    elements = [
        {
            "@type": "ListItem",
            "position": position,
            "name": item.name,
            "item": item.url,
        }
        for position, item in enumerate(items, start=1)
    ]
    schema = _base("BreadcrumbList")
    schema["itemListElement"] = elements
    return schema


def faq_schema(items: Iterable[FAQItem]) -> Dict[str, Any]:
    main_entity = [
        {
            "@type": "Question",
            "name": item.question,
            "acceptedAnswer": {"@type": "Answer", "text": item.answer},
        }
        for item in items
    ]
    schema = _base("FAQPage")
    schema["mainEntity"] = main_entity
    return schema


def service_schema(record: ServiceRecord) -> Dict[str, Any]:
    schema = _base("Service")
    schema.update(
        {
            "name": record.name,
            "description": record.description,
            "provider": {"@type": DEFAULT_BUSINESS_TYPE, "name": record.provider},
        }
    )
    _set_optional(schema, "areaServed", record.area_served)
    _set_optional(schema, "image", record.image)
    return schema
