from collections.abc import Sequence

from core.logging import AbstractLogger
from core.services.base import BaseService
from core.services.exceptions import ProductNotFoundError
from gateways.db.exceptions import NotFoundError
from products.domain.interfaces import CatalogI
from products.schemas import ProductDTO


class ProductsService(BaseService):
    entity_name = "Product"

    def __init__(self, logger: AbstractLogger, catalog: CatalogI) -> None:
        super().__init__(logger)
        self._catalog = catalog

    def get_product(self, product_id: str) -> ProductDTO:
        try:
            return self._catalog.get_by_id(product_id)
        except NotFoundError:
            raise ProductNotFoundError(id=product_id)

    def list_products(self) -> Sequence[ProductDTO]:
        return self._catalog.list_all()
