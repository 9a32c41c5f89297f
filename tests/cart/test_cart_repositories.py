from decimal import Decimal

import pytest

from cart.repositories import CartManagerFactory, CartSessionManager
from cart.schemas import CartState, LineItemDTO
from gateways.db import InMemoryStorage
from gateways.db.exceptions import NotFoundError
from sessions.sessions import SessionCreator


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


def test_cart_manager_factory(storage):
    cart_manager = CartManagerFactory(storage).create("test key")
    assert isinstance(cart_manager, CartSessionManager)
    assert cart_manager.session_key == "test key"


def test_cart_manager_factory_with_empty_key(storage):
    with pytest.raises(AssertionError):
        CartManagerFactory(storage).create("")


def test_get_state_of_fresh_session(storage):
    session_key = SessionCreator(storage).create({"cart": None})
    assert CartSessionManager(storage, session_key).get_state() == CartState()


def test_save_state(storage):
    session_key = SessionCreator(storage).create()
    cart_manager = CartSessionManager(storage, session_key)
    state = CartState(
        items=(LineItemDTO(id="p1", name="Shirt", price=Decimal("19.99"), quantity=2),)
    )
    cart_manager.save_state(state)
    assert cart_manager.get_state() == state
    assert CartSessionManager(storage, session_key).get_state() == state


def test_unknown_session(storage):
    cart_manager = CartSessionManager(storage, "unknown")
    with pytest.raises(NotFoundError):
        cart_manager.get_state()
    with pytest.raises(NotFoundError):
        cart_manager.save_state(CartState())
