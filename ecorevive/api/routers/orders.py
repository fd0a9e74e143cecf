# ecorevive/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ecorevive.api.deps import get_lock_service, get_payment_client
from ecorevive.data.store import EntityStore, get_store
from ecorevive.domain.enums import Role
from ecorevive.domain.errors import (
    ConflictError,
    NotFoundError,
    PaymentError,
    PreconditionError,
    ServiceUnavailableError,
    ValidationError,
)
from ecorevive.domain.schemas import (
    CheckoutOut,
    OrderCreate,
    OrderOut,
    OrderStatusIn,
    PaymentIntentOut,
)
from ecorevive.services.lock_service import LockService
from ecorevive.services.order_service import OrderService
from ecorevive.services.payment_client import PaymentClient
from ecorevive.services.user_service import UserService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(
    store: EntityStore = Depends(get_store),
    payment_client: PaymentClient = Depends(get_payment_client),
    lock_service: LockService = Depends(get_lock_service),
):
    return OrderService(store, payment_client=payment_client, lock_service=lock_service)


@router.get("/", response_model=List[OrderOut])
def list_orders(
    user_id: int = Query(...),
    svc: OrderService = Depends(get_service),
):
    return svc.list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: int = Query(...),
    svc: OrderService = Depends(get_service),
):
    """
    Pobiera szczegoly zamowienia z pozycjami.
    """
    try:
        return svc.get_order(user_id, order_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/", response_model=CheckoutOut, status_code=201)
def checkout(
    payload: OrderCreate,
    user_id: int = Query(...),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamowienie z koszyka i payment intent na jego kwote.
    """
    try:
        order, payment = svc.checkout(user_id, payload.shipping_address)
    except (ValidationError, PreconditionError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PaymentError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except ServiceUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return {"order": svc.get_order(user_id, order.id), "payment": payment}


@router.post("/{order_id}/payment-intent", response_model=PaymentIntentOut)
def create_payment_intent(
    order_id: int,
    user_id: int = Query(...),
    svc: OrderService = Depends(get_service),
):
    """
    Ponowne utworzenie intentu dla zamowienia, ktore nadal czeka na platnosc.
    """
    try:
        return svc.create_payment_intent(user_id, order_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PaymentError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.put("/{order_id}/status", response_model=OrderOut)
def update_status(
    order_id: int,
    payload: OrderStatusIn,
    user_id: int = Query(...),
    store: EntityStore = Depends(get_store),
    svc: OrderService = Depends(get_service),
):
    try:
        user = UserService(store).get_user(user_id)
        if user.role != Role.ADMIN:
            raise PermissionError("Only admins can change order status")
        return svc.update_status(order_id, payload.status)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=str(e))
