# ecorevive/api/__init__.py
from fastapi import FastAPI

from ecorevive.api.routers import health, users, products, carts, orders, payments
from ecorevive.data.store import EntityStore
from ecorevive.services.lock_service import LockService
from ecorevive.services.payment_client import PaymentClient


def create_app(
    store: EntityStore | None = None,
    payment_client: PaymentClient | None = None,
    lock_service: LockService | None = None,
) -> FastAPI:
    app = FastAPI(
        title="EcoRevive Marketplace",
        version="1.0.0",
    )

    # jeden magazyn na proces, testy podaja wlasny
    app.state.store = store if store is not None else EntityStore()
    app.state.payment_client = payment_client or PaymentClient()
    app.state.lock_service = lock_service or LockService()

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(payments.router)

    return app
