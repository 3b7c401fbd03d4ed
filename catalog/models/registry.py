"""Product type registry.

Maps a ``numberCategory`` code to the product variant it stands for and
builds validated variant instances from raw payloads and stored rows.
"""
from typing import Any, Dict, Mapping, Type

from pydantic import ValidationError as PydanticValidationError

from catalog.exceptions import ValidationError
from catalog.models.database_models import Product as ProductRow
from catalog.models.schemas.product import (
    AutomotiveProduct,
    ClothingProduct,
    ElectronicsProduct,
    FoodProduct,
    ProductBase,
)


VARIANTS: Dict[int, Type[ProductBase]] = {
    1: ElectronicsProduct,
    2: FoodProduct,
    3: AutomotiveProduct,
    4: ClothingProduct,
}


def _describe(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "body"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def resolve(number_category: Any, payload: Mapping[str, Any]) -> ProductBase:
    """Build the variant selected by ``number_category`` from ``payload``.

    Raises ``ValidationError`` for an unknown code or when a field the
    variant requires is missing or malformed.
    """
    variant = None
    if isinstance(number_category, int) and not isinstance(number_category, bool):
        variant = VARIANTS.get(number_category)
    if variant is None:
        raise ValidationError(
            f"Unknown product category {number_category!r}, expected one of {sorted(VARIANTS)}"
        )

    try:
        return variant.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e


def resolve_payload(payload: Mapping[str, Any]) -> ProductBase:
    """Resolve a request body, reading the code from its ``numberCategory`` key."""
    if not isinstance(payload, Mapping):
        raise ValidationError("Product payload must be a JSON object")
    return resolve(payload.get("numberCategory", payload.get("number_category")), payload)


def from_orm(row: ProductRow) -> ProductBase:
    """Rebuild the variant instance for a stored row."""
    data = {field: getattr(row, field) for field in ProductBase.base_fields()}
    data.update(row.details or {})
    return resolve(row.number_category, data)
