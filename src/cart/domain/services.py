from collections.abc import Callable
from decimal import Decimal

from cart.domain.interfaces import CartListener, CartManagerI
from cart.domain.reducer import cart_reducer
from cart.schemas import (
    AddItem,
    AdjustQuantity,
    CartItemView,
    CartState,
    CartSummaryDTO,
)
from core.logging import AbstractLogger
from core.services.base import BaseService
from core.services.exceptions import EntityNotFoundError, ServiceError
from core.utils import money_formatter
from gateways.db.exceptions import NotFoundError
from products.domain.interfaces import CatalogI


class CartService(BaseService):
    """Owns the cart of a single session.

    State changes only through ``dispatch`` (or the ``add_item`` /
    ``adjust_quantity`` shortcuts). Readers get immutable snapshots and may
    ``subscribe`` to be called with every new snapshot.
    """

    entity_name = "Session"

    def __init__(
        self,
        logger: AbstractLogger,
        catalog: CatalogI,
        cart_manager: CartManagerI,
        currency_symbol: str = "$",
        currency_precision: int = 2,
    ):
        super().__init__(logger.bind(session_key=cart_manager.session_key))
        self._catalog = catalog
        self._cart_manager = cart_manager
        self._listeners: list[CartListener] = []
        self._currency_precision = currency_precision
        self.format_price = money_formatter(currency_symbol, currency_precision)

    def get_state(self) -> CartState:
        try:
            return self._cart_manager.get_state()
        except NotFoundError:
            raise EntityNotFoundError(
                self.entity_name, key=self._cart_manager.session_key
            )

    def _save_state(self, state: CartState) -> None:
        try:
            self._cart_manager.save_state(state)
        except NotFoundError:
            raise EntityNotFoundError(
                self.entity_name, key=self._cart_manager.session_key
            )

    def dispatch(self, command: AddItem | AdjustQuantity) -> CartState:
        state = self.get_state()
        try:
            new_state = cart_reducer(state, command, self._catalog)
        except ServiceError as e:
            self._logger.warning(
                "Cart command rejected",
                command=getattr(command, "type", type(command).__name__),
                reason=str(e),
            )
            raise
        self._save_state(new_state)
        item = new_state.find(command.product_id)
        self._logger.info(
            "Cart command applied",
            command=command.type,
            product_id=command.product_id,
            quantity=item.quantity if item else 0,
        )
        self._notify(new_state)
        return new_state

    def add_item(self, product_id: str) -> CartState:
        return self.dispatch(AddItem(product_id=product_id))

    def adjust_quantity(self, product_id: str, delta: int) -> CartState:
        return self.dispatch(AdjustQuantity(product_id=product_id, delta=delta))

    def total_price(self) -> Decimal:
        return self.get_state().calc_total_price(self._currency_precision)

    def summary(self) -> CartSummaryDTO:
        state = self.get_state()
        total_price = state.calc_total_price(self._currency_precision)
        return CartSummaryDTO(
            items=[
                CartItemView(
                    id=item.id,
                    name=item.name,
                    price=self.format_price(item.price),
                    quantity=item.quantity,
                )
                for item in state.items
            ],
            total_quantity=state.total_quantity,
            total_price=total_price,
            formatted_total_price=self.format_price(total_price),
        )

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: CartState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                self._logger.exception("Cart listener failed", listener=repr(listener))
