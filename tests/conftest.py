# tests/conftest.py
from pathlib import Path

import pytest

from showmatch.config import Settings
from showmatch.models import Budget, Client, Dataset, FeedbackRecord, InterestLevel, Property

SAMPLE_DATASET = Path(__file__).resolve().parent.parent / "data" / "sample_dataset.json"


@pytest.fixture
def make_client():
    def _make(client_id=1, budget_min=400000, budget_max=600000, name="Sarah Johnson"):
        return Client(
            id=client_id,
            name=name,
            email=f"client{client_id}@email.com",
            budget=Budget(min=budget_min, max=budget_max),
        )

    return _make


@pytest.fixture
def make_property():
    def _make(
        property_id=1,
        price=500000,
        bedrooms=3,
        sqft=1800,
        property_type="Single Family",
        features=None,
    ):
        return Property(
            id=property_id,
            address=f"{property_id} Maple Street, Oakville",
            price=price,
            bedrooms=bedrooms,
            bathrooms=2,
            sqft=sqft,
            property_type=property_type,
            features=features or [],
        )

    return _make


@pytest.fixture
def make_feedback():
    counter = {"next": 1}

    def _make(
        client_id=1,
        property_id=1,
        likes=None,
        dislikes=None,
        interest=InterestLevel.MEDIUM,
    ):
        record_id = counter["next"]
        counter["next"] += 1
        return FeedbackRecord(
            id=record_id,
            client_id=client_id,
            property_id=property_id,
            likes=likes or [],
            dislikes=dislikes or [],
            interest_level=interest,
        )

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def sample_dataset_path():
    return SAMPLE_DATASET


@pytest.fixture
def sample_dataset():
    return Dataset.from_json_file(SAMPLE_DATASET)


@pytest.fixture
def settings():
    return Settings(default_match_limit=5, interested_min_score=50)
