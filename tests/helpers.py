from decimal import Decimal

from faker import Faker

from cart.schemas import CartState, LineItemDTO
from products.schemas import ProductDTO

fake = Faker()


def new_test_product(
    id: str | None = None, title: str | None = None, price: Decimal | None = None
) -> ProductDTO:
    return ProductDTO(
        id=id or fake.unique.bothify("prod-####"),
        title=title or fake.word().capitalize(),
        price=price
        if price is not None
        else fake.pydecimal(left_digits=3, right_digits=2, positive=True),
    )


def new_test_state(*quantities: int) -> CartState:
    return CartState(
        items=tuple(
            LineItemDTO(
                id=f"p{i}",
                name=fake.word(),
                price=fake.pydecimal(left_digits=2, right_digits=2, positive=True),
                quantity=qty,
            )
            for i, qty in enumerate(quantities, start=1)
        )
    )
