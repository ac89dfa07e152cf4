"""Schema.org JSON-LD rendering for brochure websites."""

from schemakit.schema import (
    render_attorney,
    render_breadcrumbs,
    render_faq,
    render_local_business,
    render_organization,
    render_service,
    render_website,
)

__all__ = [
    "render_attorney",
    "render_breadcrumbs",
    "render_faq",
    "render_local_business",
    "render_organization",
    "render_service",
    "render_website",
]
