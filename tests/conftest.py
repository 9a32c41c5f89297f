from decimal import Decimal

import pytest

from products.repositories import InMemoryProductsRepository
from products.schemas import ProductDTO


@pytest.fixture
def shirt() -> ProductDTO:
    return ProductDTO(id="p1", title="Shirt", price=Decimal("19.99"))


@pytest.fixture
def trousers() -> ProductDTO:
    return ProductDTO(id="p2", title="Trousers", price=Decimal("49.50"))


@pytest.fixture
def catalog(shirt, trousers) -> InMemoryProductsRepository:
    return InMemoryProductsRepository([shirt, trousers])
