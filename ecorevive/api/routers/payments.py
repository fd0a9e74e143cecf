# ecorevive/api/routers/payments.py
from fastapi import APIRouter, Depends, HTTPException

from ecorevive.data.store import EntityStore, get_store
from ecorevive.domain.errors import NotFoundError, PreconditionError, ValidationError
from ecorevive.domain.schemas import OrderOut, PaymentEventIn
from ecorevive.services.order_service import OrderService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/webhook", response_model=OrderOut)
def payment_webhook(payload: PaymentEventIn, store: EntityStore = Depends(get_store)):
    """
    Zdarzenie od bramki platnosci. Powtorzone zdarzenie nie jest bledem.
    """
    svc = OrderService(store)
    try:
        return svc.apply_payment_event(
            payload.order_id,
            payload.payment_reference,
            payload.succeeded,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (ValidationError, PreconditionError) as e:
        raise HTTPException(status_code=400, detail=str(e))
