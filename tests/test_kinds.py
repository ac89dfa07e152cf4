import json

import pytest

from schemakit.errors import RecordError
from schemakit.kinds import SCHEMA_KINDS, render_payload


def test_all_kinds_registered():
    assert set(SCHEMA_KINDS) == {
        "local_business",
        "attorney",
        "organization",
        "website",
        "breadcrumbs",
        "faq",
        "service",
    }


def test_render_payload_passes_default_country(business_payload):
    script = render_payload("local_business", business_payload, default_country="GB")
    body = script.split("\n", 1)[1].rsplit("\n", 1)[0]
    assert json.loads(body)["address"]["addressCountry"] == "GB"


def test_render_payload_breadcrumbs():
    script = render_payload("breadcrumbs", [{"name": "Home", "url": "/"}])
    assert '"position": 1' in script


def test_render_payload_unknown_kind():
    with pytest.raises(KeyError):
        render_payload("recipe", {})


def test_render_payload_propagates_record_errors():
    with pytest.raises(RecordError):
        render_payload("website", {"name": "No URL"})
