from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from core.utils import quantize_money


class BaseDTO(BaseModel):
    class Config:
        from_attributes = True


class FrozenDTO(BaseDTO):
    class Config:
        from_attributes = True
        frozen = True


EntityID = Annotated[str, Field(min_length=1)]
Price = Annotated[Decimal, Field(ge=0), AfterValidator(lambda v: quantize_money(v))]
