"""Mapping of free-text business categories to Schema.org LocalBusiness subtypes.

Full list of subtypes: https://schema.org/LocalBusiness#subtypes
"""

from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_BUSINESS_TYPE = "LocalBusiness"

SCHEMA_BUSINESS_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "attorney": "Attorney",
        "lawyer": "Attorney",
        "accountant": "AccountingService",
        "restaurant": "Restaurant",
        "cafe": "CafeOrCoffeeShop",
        "bar": "BarOrPub",
        "dentist": "Dentist",
        "doctor": "Physician",
        "medical": "MedicalBusiness",
        "real_estate": "RealEstateAgent",
        "plumber": "Plumber",
        "electrician": "Electrician",
        "hvac": "HVACBusiness",
        "auto_repair": "AutoRepair",
        "beauty_salon": "BeautySalon",
        "hair_salon": "HairSalon",
        "spa": "DaySpa",
        "gym": "HealthClub",
        "store": "Store",
        "florist": "Florist",
        "bakery": "Bakery",
        "travel_agency": "TravelAgency",
        "insurance": "InsuranceAgency",
        "financial": "FinancialService",
        "veterinarian": "VeterinaryCare",
        "pet_store": "PetStore",
        "photographer": "Photographer",
        "general": DEFAULT_BUSINESS_TYPE,
    }
)


def get_schema_business_type(category: Optional[str]) -> str:
    """Resolve a category such as ``' Restaurant '`` to its Schema.org type."""
    if not category:
        return DEFAULT_BUSINESS_TYPE
    return SCHEMA_BUSINESS_TYPES.get(category.strip().lower(), DEFAULT_BUSINESS_TYPE)
