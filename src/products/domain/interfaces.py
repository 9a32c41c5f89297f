from collections.abc import Sequence
import typing as t

from products.schemas import ProductDTO


class CatalogI(t.Protocol):
    def get_by_id(self, product_id: str) -> ProductDTO: ...

    def list_all(self) -> Sequence[ProductDTO]: ...
