"""Registry of schema kinds shared by the CLI and the render server."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from schemakit import schema
from schemakit.etl import loader


@dataclass(frozen=True)
class SchemaKind:
    loader: Callable[..., Any]
    renderer: Callable[[Any], str]
    uses_country: bool = False

    def load(self, payload: Any, default_country: str) -> Any:
        if self.uses_country:
            return self.loader(payload, default_country=default_country)
        return self.loader(payload)


SCHEMA_KINDS: Mapping[str, SchemaKind] = MappingProxyType(
    {
        "local_business": SchemaKind(loader.load_business, schema.render_local_business, uses_country=True),
        "attorney": SchemaKind(loader.load_attorney, schema.render_attorney, uses_country=True),
        "organization": SchemaKind(loader.load_organization, schema.render_organization),
        "website": SchemaKind(loader.load_website, schema.render_website),
        "breadcrumbs": SchemaKind(loader.load_breadcrumbs, schema.render_breadcrumbs),
        "faq": SchemaKind(loader.load_faqs, schema.render_faq),
        "service": SchemaKind(loader.load_service, schema.render_service),
    }
)


def render_payload(kind: str, payload: Any, default_country: str = "US") -> str:
    """Load ``payload`` as ``kind`` and render it. Raises KeyError for unknown kinds."""
    schema_kind = SCHEMA_KINDS[kind]
    return schema_kind.renderer(schema_kind.load(payload, default_country))
