import pytest
from fastapi.testclient import TestClient

from main import app
from models import Assignment, Bill, Item, Member


@pytest.fixture(scope="function")
def client():
    """Create a FastAPI TestClient for the split service."""
    with TestClient(app) as c:
        yield c

@pytest.fixture
def members():
    """Three group members without free cash."""
    return [
        Member(id="alice", name="Alice"),
        Member(id="bob", name="Bob"),
        Member(id="carol", name="Carol"),
    ]

@pytest.fixture
def dinner_bill():
    """Pizza shared by everyone, wine for two, dessert left unassigned."""
    return Bill(
        title="Dinner",
        items=(
            Item(id="pizza", name="Pizza", unit_price=1000, quantity=3),
            Item(id="wine", name="Wine", unit_price=2599),
            Item(id="dessert", name="Dessert", unit_price=750, quantity=2),
        ),
        assignments=(
            Assignment(item_id="pizza", member_ids=frozenset({"alice", "bob", "carol"})),
            Assignment(item_id="wine", member_ids=frozenset({"alice", "bob"})),
            Assignment(item_id="dessert", member_ids=frozenset()),
        ),
        platform_fee_percent="2.5",
        discount_percent=0,
    )

@pytest.fixture
def split_payload():
    """Request body for one $30.00 item shared by two members at a 10% fee."""
    return {
        "bill": {
            "title": "Lunch",
            "items": [{"id": "i1", "name": "Platter", "unit_price": 3000, "quantity": 1}],
            "assignments": [{"item_id": "i1", "member_ids": ["m1", "m2"]}],
            "platform_fee_percent": 10,
            "discount_percent": 0,
            "status": "pending",
        },
        "members": [
            {"id": "m1", "name": "Maya", "free_cash": 0},
            {"id": "m2", "name": "Noor", "free_cash": 0},
        ],
    }
