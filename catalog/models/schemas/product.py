from pydantic import ConfigDict, Field
from typing import Annotated, Dict, List, Literal, Union

from catalog.config import DEFAULT_DESCRIPTION, DEFAULT_STOCK, MAX_INT

from .base import CamelModel, StateModel


class ProductBase(CamelModel):
    id: int = Field(..., ge=0, le=MAX_INT)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = DEFAULT_DESCRIPTION
    category: str = Field(..., min_length=1, max_length=255)
    number_category: int
    price: float
    stock: int = Field(DEFAULT_STOCK, ge=0, le=MAX_INT)

    @classmethod
    def base_fields(cls) -> List[str]:
        return list(ProductBase.model_fields.keys())

    def to_orm_dict(self) -> Dict:
        """Column values, with the variant-specific fields folded into ``details``."""
        data = self.model_dump()
        base = {key: data.pop(key) for key in self.base_fields()}
        base['details'] = data
        return base


class ElectronicsProduct(ProductBase):
    number_category: Literal[1]
    features: List[str]
    warranty_years: int = 2


class FoodProduct(ProductBase):
    number_category: Literal[2]
    ingredients: List[str]
    weight_or_volume: str
    flavors: List[str] = Field(default_factory=lambda: ["Original"])
    expiration_days: int = 30


class AutomotiveProduct(ProductBase):
    model_config = ConfigDict(protected_namespaces=())

    number_category: Literal[3]
    specs: Dict[str, str]
    model_year: int
    warranty_years: int = 2


class ClothingProduct(ProductBase):
    number_category: Literal[4]
    sizes_available: List[str]
    colors: List[str]
    material: str


ProductVariant = Annotated[
    Union[ElectronicsProduct, FoodProduct, AutomotiveProduct, ClothingProduct],
    Field(discriminator="number_category"),
]


class RestockRequest(CamelModel):
    n_stock: int = Field(..., gt=0, le=MAX_INT)


class SellRequest(CamelModel):
    s_stock: int = Field(..., gt=0, le=MAX_INT)


class DeletionResult(CamelModel):
    acknowledged: bool
    deleted_count: int


class ProductResponse(StateModel):
    data: ProductVariant


class ProductListResponse(StateModel):
    data: List[ProductVariant]


class DeletionResponse(StateModel):
    data: DeletionResult
