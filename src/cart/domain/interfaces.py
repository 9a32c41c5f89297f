import typing as t

from cart.schemas import CartState


class CartManagerI(t.Protocol):
    session_key: str

    def get_state(self) -> CartState: ...

    def save_state(self, state: CartState) -> None: ...


class CartManagerFactoryI(t.Protocol):
    def create(self, session_key: str) -> CartManagerI: ...


CartListener = t.Callable[[CartState], None]
