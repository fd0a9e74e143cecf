#ecorevive/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Query

from ecorevive.data.store import EntityStore, get_store
from ecorevive.domain.errors import NotFoundError, ValidationError
from ecorevive.domain.schemas import CartOut, ItemIn, QuantityIn
from ecorevive.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(store: EntityStore):
    return CartService(store)


@router.get("/", response_model=CartOut)
def get_cart(
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    return get_service(store).get_cart(user_id)


@router.post("/items", response_model=CartOut, status_code=201)
def add_item(
    payload: ItemIn,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    svc = get_service(store)
    try:
        svc.add_to_cart(user_id, payload.product_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return svc.get_cart(user_id)


@router.put("/items/{item_id}", response_model=CartOut)
def update_item(
    item_id: int,
    payload: QuantityIn,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    svc = get_service(store)
    try:
        svc.update_quantity(user_id, item_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return svc.get_cart(user_id)


@router.delete("/items/{item_id}", response_model=CartOut)
def remove_item(
    item_id: int,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    # usuwanie jest idempotentne, nieznane id to no-op
    svc = get_service(store)
    svc.remove_item(user_id, item_id)
    return svc.get_cart(user_id)


@router.delete("/", response_model=CartOut)
def clear_cart(
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
):
    svc = get_service(store)
    svc.clear_cart(user_id)
    return svc.get_cart(user_id)
