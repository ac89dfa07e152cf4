import pytest

from schemakit.etl.business_types import SCHEMA_BUSINESS_TYPES, get_schema_business_type


@pytest.mark.parametrize("category", [" Attorney ", "ATTORNEY", "attorney", "lawyer"])
def test_get_schema_business_type_ignores_case_and_whitespace(category):
    assert get_schema_business_type(category) == "Attorney"


def test_get_schema_business_type_defaults_to_local_business():
    assert get_schema_business_type("space_station") == "LocalBusiness"
    assert get_schema_business_type("") == "LocalBusiness"
    assert get_schema_business_type(None) == "LocalBusiness"
    assert get_schema_business_type("general") == "LocalBusiness"


def test_business_type_table_is_read_only():
    assert SCHEMA_BUSINESS_TYPES["restaurant"] == "Restaurant"
    assert len(SCHEMA_BUSINESS_TYPES) == 28
    with pytest.raises(TypeError):
        SCHEMA_BUSINESS_TYPES["castle"] = "Castle"
