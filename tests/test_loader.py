import pytest

from schemakit.errors import RecordError
from schemakit.etl import loader


def test_load_business_maps_camel_case_payload(business_payload):
    business_payload["businessType"] = " Attorney "

    record = loader.load_business(business_payload)

    assert record.name == "Smith & Associates Law Firm"
    assert record.phone == "+1-206-555-1234"
    assert record.address.city == "Seattle"
    assert record.address.country == "US"
    assert record.geo.lat == pytest.approx(47.6062)
    assert record.hours == {"monday": "9:00 AM - 5:00 PM", "saturday": "Closed"}
    assert record.price_range == "$$"
    assert record.same_as == ["https://facebook.com/smithlaw", "https://linkedin.com/company/smithlaw"]
    assert record.business_type == "Attorney"


def test_load_business_uses_default_country_unless_given(business_payload):
    assert loader.load_business(business_payload, default_country="CA").address.country == "CA"

    business_payload["address"]["country"] = "MX"
    assert loader.load_business(business_payload, default_country="CA").address.country == "MX"


def test_load_business_coerces_numeric_strings(business_payload):
    business_payload["geo"] = {"lat": "47.5", "lng": "-122"}

    record = loader.load_business(business_payload)

    assert record.geo.lat == 47.5
    assert record.geo.lng == -122.0


def test_load_business_reports_all_missing_fields(business_payload):
    del business_payload["email"]
    business_payload["address"]["city"] = "   "
    business_payload["geo"] = {"lat": "north", "lng": -122.3}

    with pytest.raises(RecordError) as excinfo:
        loader.load_business(business_payload)

    assert excinfo.value.missing == ["email", "address.city", "geo.lat"]


def test_load_business_rejects_non_object_payload():
    with pytest.raises(RecordError) as excinfo:
        loader.load_business(["not", "a", "dict"])
    assert "name" in excinfo.value.missing
    assert "geo.lng" in excinfo.value.missing


def test_load_business_drops_blank_optionals(business_payload):
    business_payload.update({"logo": " ", "sameAs": ["", "  "], "image": None, "priceRange": ""})

    record = loader.load_business(business_payload)

    assert record.logo is None
    assert record.same_as is None
    assert record.image is None
    assert record.price_range is None


def test_load_attorney_reads_practice_areas(business_payload):
    business_payload["practiceAreas"] = ["Family Law", " ", "Estate Planning"]

    record = loader.load_attorney(business_payload)

    assert record.practice_areas == ["Family Law", "Estate Planning"]


def test_load_organization_and_website():
    org = loader.load_organization({"name": "Acme", "url": "https://acme.test", "logo": "https://acme.test/l.png"})
    assert org.description is None

    site = loader.load_website({"name": "Acme", "url": "https://acme.test", "searchUrl": "https://acme.test/search"})
    assert site.search_url == "https://acme.test/search"

    with pytest.raises(RecordError) as excinfo:
        loader.load_organization({"name": "Acme"})
    assert excinfo.value.missing == ["url", "logo"]


def test_load_service():
    record = loader.load_service(
        {"name": "Roof repair", "description": "Leaks fixed", "provider": "Acme", "areaServed": "Tacoma"}
    )
    assert record.area_served == "Tacoma"
    assert record.image is None


def test_load_breadcrumbs_reports_item_paths():
    with pytest.raises(RecordError) as excinfo:
        loader.load_breadcrumbs([{"name": "Home", "url": "/"}, {"name": "Blog"}])
    assert excinfo.value.missing == ["[1].url"]


def test_load_faqs_requires_list():
    with pytest.raises(RecordError):
        loader.load_faqs({"question": "Why?", "answer": "Because."})

    items = loader.load_faqs([{"question": "Why?", "answer": "Because."}])
    assert items[0].answer == "Because."


@pytest.mark.parametrize("lat, lng", [("nan", -122.3), (47.6, "inf"), (float("nan"), float("-inf"))])
def test_load_business_treats_non_finite_coordinates_as_missing(business_payload, lat, lng):
    business_payload["geo"] = {"lat": lat, "lng": lng}

    with pytest.raises(RecordError) as excinfo:
        loader.load_business(business_payload)

    assert set(excinfo.value.missing) & {"geo.lat", "geo.lng"}


@pytest.mark.parametrize("value", [True, {"x": 1}, ["Acme"], float("nan")])
def test_load_business_rejects_non_string_required_fields(business_payload, value):
    business_payload["name"] = value

    with pytest.raises(RecordError) as excinfo:
        loader.load_business(business_payload)

    assert excinfo.value.missing == ["name"]


def test_load_business_accepts_numeric_zip(business_payload):
    business_payload["address"]["zip"] = 98101

    record = loader.load_business(business_payload)

    assert record.address.zip == "98101"
