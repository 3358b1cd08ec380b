import os
import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure project's `back` package is importable
tests_dir = Path(__file__).resolve().parent
project_back = str(tests_dir.parent)
if project_back not in sys.path:
    sys.path.insert(0, project_back)

os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture
async def client():
    """Test client over the ASGI app, no network"""
    from main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_category_data():
    return {"name": "  electrónicos y gadgets ", "description": " dispositivos varios "}


@pytest.fixture
def sample_product_data():
    return {
        "name": "iphone 15 pro max",
        "description": "  smartphone de gama alta",
        "imageUrl": "cdn.example.com/img/iphone.png",
        "price": "1299.995",
        "categoryId": 3,
    }


@pytest.fixture
def sample_user_data():
    return {
        "username": "  JPerez ",
        "fullName": "juan  PÉREZ",
        "email": "Test@Example.com",
        "roleId": 2,
    }


@pytest.fixture
def sample_movement_data():
    return {
        "productId": 10,
        "userId": 1,
        "movementType": "EXIT",
        "quantity": 150,
        "reason": "venta a cliente",
    }
