from core.schemas import EntityID, FrozenDTO, Price
import pydantic


class ProductDTO(FrozenDTO):
    id: EntityID
    title: str = pydantic.Field(min_length=1)
    price: Price
