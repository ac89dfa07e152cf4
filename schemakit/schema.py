"""Render Schema.org records as JSON-LD ``<script>`` tags.

Usage::

    from schemakit.schema import render_local_business
    html = render_local_business(record)

Every function here is pure and safe to call from any thread.
"""

import json
from typing import Any, Dict, Iterable

from schemakit.etl import transform
from schemakit.models import (
    AttorneyRecord,
    BreadcrumbItem,
    BusinessRecord,
    FAQItem,
    OrganizationRecord,
    ServiceRecord,
    WebSiteRecord,
)

SCRIPT_OPEN = '<script type="application/ld+json">'
SCRIPT_CLOSE = "</script>"


def render_schema_script(schema: Dict[str, Any]) -> str:
    """Serialize a schema dict into a pretty-printed JSON-LD script tag.

    Slashes are left unescaped and non-ASCII text is written literally. NaN and
    infinite floats raise ValueError rather than produce invalid JSON.
    """
    payload = json.dumps(schema, ensure_ascii=False, indent=4, allow_nan=False)
    return f"{SCRIPT_OPEN}\n{payload}\n{SCRIPT_CLOSE}"


def render_local_business(record: BusinessRecord) -> str:
    return render_schema_script(transform.local_business_schema(record))


def render_attorney(record: AttorneyRecord) -> str:
    return render_schema_script(transform.attorney_schema(record))


def render_organization(record: OrganizationRecord) -> str:
    return render_schema_script(transform.organization_schema(record))


def render_website(record: WebSiteRecord) -> str:
    return render_schema_script(transform.website_schema(record))


def render_breadcrumbs(items: Iterable[BreadcrumbItem]) -> str:
    return render_schema_script(transform.breadcrumb_schema(items))


def render_faq(items: Iterable[FAQItem]) -> str:
    return render_schema_script(transform.faq_schema(items))


def render_service(record: ServiceRecord) -> str:
    return render_schema_script(transform.service_schema(record))
