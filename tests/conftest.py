"""
pytest configuration and fixtures for propmate tests.
"""
import pytest

from propmate.config import get_settings
from propmate.models import Client, Property


def client_data(**overrides) -> dict:
    """Cliente con requisitos que la propiedad base cumple al 100%."""
    data = {
        "id": "c-001",
        "tenantId": "agency-1",
        "name": "Rohan Mehta",
        "phone": "9820012345",
        "description": "Looking near the station",
        "maritalStatus": "Married",
        "familySize": 3,
        "requirement": "Rent",
        "preferredAreas": ["Andheri West", "Bandra"],
        "preferredCity": "Mumbai",
        "bhkPreference": ["2BHK"],
        "furnishingPreference": ["Semi"],
        "budgetMin": 20000,
        "budgetMax": 30000,
        "moveInDate": "2024-06-01",
        "leadStage": "Contacted",
        "tags": ["hot"],
        "createdAt": "2024-01-10T09:00:00Z",
    }
    data.update(overrides)
    return data


def property_data(**overrides) -> dict:
    data = {
        "id": "p-001",
        "tenantId": "agency-1",
        "title": "2BHK near Andheri station",
        "type": "Flat",
        "transactionType": "Rent",
        "price": 25000,
        "bhk": "2BHK",
        "furnishing": "Semi",
        "parking": True,
        "liftAvailable": True,
        "powerBackup": False,
        "petsAllowed": False,
        "bachelorsAllowed": True,
        "availabilityDate": "2024-06-03",
        "status": "Available",
        "location": {"address": "12 Link Road", "area": "Andheri West", "city": "Mumbai"},
        "createdAt": "2024-05-01T10:00:00Z",
    }
    location = overrides.pop("location", None)
    if location:
        data["location"] = {**data["location"], **location}
    data.update(overrides)
    return data


def make_client(**overrides) -> Client:
    return Client.model_validate(client_data(**overrides))


def make_property(**overrides) -> Property:
    return Property.model_validate(property_data(**overrides))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Cada test lee la configuración de nuevo."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_client() -> Client:
    return make_client()


@pytest.fixture
def sample_property() -> Property:
    return make_property()

