from collections.abc import Iterable, Sequence

from gateways.db.exceptions import AlreadyExistsError, NotFoundError
from products.schemas import ProductDTO


class InMemoryProductsRepository:
    """Read-only catalog. Listing keeps the order products were supplied in."""

    def __init__(self, products: Iterable[ProductDTO]):
        self._products: dict[str, ProductDTO] = {}
        for product in products:
            if product.id in self._products:
                raise AlreadyExistsError(f"Duplicate product id: {product.id}")
            self._products[product.id] = product

    def get_by_id(self, product_id: str) -> ProductDTO:
        try:
            return self._products[product_id]
        except KeyError:
            raise NotFoundError()

    def list_all(self) -> Sequence[ProductDTO]:
        return list(self._products.values())
