# ecorevive/api/routers/products.py
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ecorevive.data.store import EntityStore, get_store
from ecorevive.domain.enums import Category, Condition, SortBy
from ecorevive.domain.errors import NotFoundError
from ecorevive.domain.schemas import ProductCreate, ProductRead, ProductSearch, ProductUpdate
from ecorevive.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(store: EntityStore):
    return ProductService(store)


@router.get("/", response_model=List[ProductRead])
def search_products(
    query: Optional[str] = Query(None),
    category: Optional[Category] = Query(None),
    price_min: Optional[Decimal] = Query(None, ge=0),
    price_max: Optional[Decimal] = Query(None, ge=0),
    condition: Optional[Condition] = Query(None),
    location: Optional[str] = Query(None),
    featured: Optional[bool] = Query(None),
    is_new: Optional[bool] = Query(None),
    sort_by: Optional[SortBy] = Query(None),
    store: EntityStore = Depends(get_store),
):
    filters = ProductSearch(
        query=query,
        category=category,
        price_min=price_min,
        price_max=price_max,
        condition=condition,
        location=location,
        featured=featured,
        is_new=is_new,
        sort_by=sort_by,
    )
    return get_service(store).search(filters)


@router.get("/featured", response_model=List[ProductRead])
def featured_products(store: EntityStore = Depends(get_store)):
    return get_service(store).featured()


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, store: EntityStore = Depends(get_store)):
    svc = get_service(store)
    try:
        return svc.get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/", response_model=ProductRead, status_code=201)
def create_product(
    payload: ProductCreate,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    svc = get_service(store)
    try:
        return svc.create_product(user_id, payload)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    svc = get_service(store)
    try:
        return svc.update_product(user_id, product_id, payload)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    svc = get_service(store)
    try:
        svc.delete_product(user_id, product_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Product deleted successfully"}
