"""Pure state transitions of the cart.

Every function here takes the current immutable ``CartState`` and returns a new
one. Nothing is mutated in place, so a rejected command leaves the caller's
state exactly as it was.
"""

from cart.schemas import AddItem, AdjustQuantity, CartState, LineItemDTO
from core.services.exceptions import (
    LineItemNotFoundError,
    ProductNotFoundError,
    UnknownCommandError,
)
from gateways.db.exceptions import NotFoundError
from products.domain.interfaces import CatalogI


def _replace_at(state: CartState, index: int, item: LineItemDTO | None) -> CartState:
    items = list(state.items)
    if item is None:
        del items[index]
    else:
        items[index] = item
    return CartState(items=tuple(items))


def add_item(state: CartState, product_id: str, catalog: CatalogI) -> CartState:
    index = state.index_of(product_id)
    if index != -1:
        existing = state.items[index]
        # name and price stay as they were when the item got into the cart
        updated = existing.model_copy(update={"quantity": existing.quantity + 1})
        return _replace_at(state, index, updated)
    try:
        product = catalog.get_by_id(product_id)
    except NotFoundError:
        raise ProductNotFoundError(id=product_id)
    new_item = LineItemDTO(
        id=product.id, name=product.title, price=product.price, quantity=1
    )
    return CartState(items=(*state.items, new_item))


def adjust_quantity(state: CartState, product_id: str, delta: int) -> CartState:
    index = state.index_of(product_id)
    if index == -1:
        raise LineItemNotFoundError(id=product_id)
    existing = state.items[index]
    new_qty = existing.quantity + delta
    if new_qty <= 0:
        return _replace_at(state, index, None)
    return _replace_at(state, index, existing.model_copy(update={"quantity": new_qty}))


def cart_reducer(
    state: CartState, command: AddItem | AdjustQuantity, catalog: CatalogI
) -> CartState:
    match command:
        case AddItem(product_id=product_id):
            return add_item(state, product_id, catalog)
        case AdjustQuantity(product_id=product_id, delta=delta):
            return adjust_quantity(state, product_id, delta)
    raise UnknownCommandError(command)
