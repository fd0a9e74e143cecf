# ecorevive/api/deps.py
from fastapi import Request

from ecorevive.services.lock_service import LockService
from ecorevive.services.payment_client import PaymentClient


def get_payment_client(request: Request) -> PaymentClient:
    return request.app.state.payment_client


def get_lock_service(request: Request) -> LockService:
    return request.app.state.lock_service
