from cart.schemas import CartState
from gateways.db import InMemoryStorage
from sessions.sessions import SessionManager


class CartManagerFactory:
    def __init__(self, db: InMemoryStorage):
        self._db = db

    def create(self, session_key: str) -> "CartSessionManager":
        assert session_key, "session_key is required"
        return CartSessionManager(self._db, session_key)


class CartSessionManager(SessionManager):
    _field = "cart"

    def get_state(self) -> CartState:
        state = super().retrieve_from_session(self._field)
        if state is None:
            return CartState()
        return state

    def save_state(self, state: CartState) -> None:
        super().set_to_session(self._field, state)
