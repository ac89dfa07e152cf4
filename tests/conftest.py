import sys
from pathlib import Path

import pytest

# Ensure the `schemakit` package is importable when running pytest from a checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def business_payload():
    return {
        "name": "Smith & Associates Law Firm",
        "description": "Family law firm serving the greater Seattle area.",
        "url": "https://smithlaw.com",
        "phone": "+1-206-555-1234",
        "email": "info@smithlaw.com",
        "address": {
            "street": "123 Main Street, Suite 400",
            "city": "Seattle",
            "state": "WA",
            "zip": "98101",
        },
        "geo": {"lat": 47.6062, "lng": -122.3321},
        "hours": {
            "monday": "9:00 AM - 5:00 PM",
            "saturday": "Closed",
        },
        "logo": "https://smithlaw.com/images/logo.png",
        "priceRange": "$$",
        "sameAs": ["https://facebook.com/smithlaw", "https://linkedin.com/company/smithlaw"],
    }
