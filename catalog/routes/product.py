# routes/product.py
from fastapi import APIRouter, Body, Depends, Path, status
from sqlalchemy.orm import Session
from typing import Annotated, Any, Dict

from catalog.config import MAX_INT
from catalog.database.database import get_db
from catalog.database.dependencies import require_session
from catalog.services.product import ProductService
from catalog.models.schemas.product import (
    DeletionResponse,
    ProductListResponse,
    ProductResponse,
    RestockRequest,
    SellRequest,
)

router = APIRouter(prefix="/product", tags=["products"])

ProductId = Annotated[int, Path(ge=0, le=MAX_INT)]


@router.get("", response_model=ProductListResponse)
async def list_products(db: Session = Depends(get_db)):
    """List every product of every category."""
    service = ProductService(db)
    return {"state": True, "data": await service.list_all()}


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: ProductId, db: Session = Depends(get_db)):
    """Get a specific product by ID."""
    service = ProductService(db)
    return {"state": True, "data": await service.get_by_id(product_id)}


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def create_product(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Create a product; ``numberCategory`` selects which fields are required."""
    service = ProductService(db)
    return {"state": True, "data": await service.create(payload)}


@router.put(
    "/provider/{product_id}",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def restock_product(
    product_id: ProductId,
    data: RestockRequest,
    db: Session = Depends(get_db)
):
    """Add ``nStock`` units to a product's stock."""
    service = ProductService(db)
    return {"state": True, "data": await service.restock(product_id, data.n_stock)}


@router.put(
    "/sell/{product_id}",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def sell_product(
    product_id: ProductId,
    data: SellRequest,
    db: Session = Depends(get_db)
):
    """Remove ``sStock`` units from a product's stock, keeping at least the floor."""
    service = ProductService(db)
    return {"state": True, "data": await service.sell(product_id, data.s_stock)}


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_session)],
)
async def update_product(
    product_id: ProductId,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Replace an existing product."""
    service = ProductService(db)
    return {"state": True, "data": await service.update(product_id, payload)}


@router.delete(
    "/{product_id}",
    response_model=DeletionResponse,
    dependencies=[Depends(require_session)],
)
async def delete_product(product_id: ProductId, db: Session = Depends(get_db)):
    """Delete a product."""
    service = ProductService(db)
    return {"state": True, "data": await service.delete(product_id)}
