from collections.abc import Sequence
from decimal import Decimal
from typing import Annotated, Literal, Self

import pydantic

from core.schemas import BaseDTO, EntityID, FrozenDTO, Price
from core.utils import quantize_money


class LineItemDTO(FrozenDTO):
    id: EntityID
    name: str
    price: Price
    quantity: int = pydantic.Field(gt=0)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


class CartState(FrozenDTO):
    items: tuple[LineItemDTO, ...] = ()

    @pydantic.model_validator(mode="after")
    def _check_unique_ids(self) -> Self:
        ids = [item.id for item in self.items]
        assert len(ids) == len(set(ids)), "Line item ids should be unique"
        return self

    def index_of(self, product_id: str) -> int:
        for i, item in enumerate(self.items):
            if item.id == product_id:
                return i
        return -1

    def find(self, product_id: str) -> LineItemDTO | None:
        index = self.index_of(product_id)
        return self.items[index] if index != -1 else None

    def calc_total_price(self, precision: int = 2) -> Decimal:
        total = sum((item.subtotal for item in self.items), Decimal("0"))
        return quantize_money(total, precision)

    @property
    def total_price(self) -> Decimal:
        return self.calc_total_price()

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)


class AddItem(FrozenDTO):
    type: Literal["add_item"] = "add_item"
    product_id: EntityID


class AdjustQuantity(FrozenDTO):
    type: Literal["adjust_quantity"] = "adjust_quantity"
    product_id: EntityID
    delta: pydantic.StrictInt


CartCommand = Annotated[AddItem | AdjustQuantity, pydantic.Field(discriminator="type")]
CartCommandAdapter: pydantic.TypeAdapter[AddItem | AdjustQuantity] = (
    pydantic.TypeAdapter(CartCommand)
)


class CartItemView(BaseDTO):
    id: str
    name: str
    price: str
    quantity: int


class CartSummaryDTO(BaseDTO):
    items: Sequence[CartItemView]
    total_quantity: int
    total_price: Decimal
    formatted_total_price: str

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0
