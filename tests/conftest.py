from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from verdant.adapters.memory_backend import InMemoryBackend
from verdant.api.deps import get_admin_backend, get_backend, get_rules
from verdant.api.main import app
from verdant.domain.entities import AuthUser
from verdant.rules.loader import load_rules

FRUITS_ID = "0b6f1f2e-4a5c-4d7e-9f10-1a2b3c4d5e01"
VEGETABLES_ID = "0b6f1f2e-4a5c-4d7e-9f10-1a2b3c4d5e02"
APPLES_ID = "7c1d2e3f-5a6b-4c7d-8e9f-0a1b2c3d4e01"
CARROTS_ID = "7c1d2e3f-5a6b-4c7d-8e9f-0a1b2c3d4e02"

APPLE_IMAGES = '["https://cdn.example.com/a1.png", "https://cdn.example.com/a2.png"]'

ADMIN_TOKEN = "admin-token"
SHOPPER_TOKEN = "valid-token"


@pytest.fixture
def rules():
    # Tests run from the project root
    rules_path = Path("rules.yaml").resolve()
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def backend() -> InMemoryBackend:
    """In-memory backend with two categories and two products."""
    backend = InMemoryBackend()
    backend.tables["categories"] = [
        {"id": VEGETABLES_ID, "name": "Vegetables"},
        {"id": FRUITS_ID, "name": "Fruits"},
    ]
    backend.tables["products"] = [
        {
            "id": CARROTS_ID,
            "name": "Heirloom Carrots",
            "price": 3.49,
            "description": "Rainbow carrots.",
            "long_description": "Purple, yellow and orange carrots.",
            "category_id": VEGETABLES_ID,
            "image_url": "https://cdn.example.com/carrots.png",
            "data_ai_hint": "carrots bunch",
            "is_featured": True,
            "is_best_seller": False,
        },
        {
            "id": APPLES_ID,
            "name": "Apples",
            "price": 4.99,
            "description": "Crisp apples.",
            "long_description": "Honeycrisp apples from local orchards.",
            "category_id": FRUITS_ID,
            "image_url": APPLE_IMAGES,
            "data_ai_hint": "red apples",
            "is_featured": False,
            "is_best_seller": True,
        },
    ]
    backend.tables["user_profiles"] = [
        {"id": "user-1", "full_name": "Sam Shopper", "role": "customer"},
        {"id": "admin-1", "full_name": "Alex Admin", "role": "admin"},
    ]
    backend.users[SHOPPER_TOKEN] = AuthUser(id="user-1", email="shopper@example.com")
    backend.users[ADMIN_TOKEN] = AuthUser(id="admin-1", email="admin@example.com")
    return backend


@pytest.fixture
def client(backend, rules):
    """TestClient wired to the in-memory backend."""
    app.dependency_overrides[get_backend] = lambda: backend
    app.dependency_overrides[get_admin_backend] = lambda: backend
    app.dependency_overrides[get_rules] = lambda: rules
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """TestClient signed in as an admin."""
    client.headers["Authorization"] = f"Bearer {ADMIN_TOKEN}"
    return client
