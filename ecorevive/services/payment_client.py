# ecorevive/services/payment_client.py
import uuid
from decimal import Decimal
from typing import Dict

import requests
from requests import RequestException
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from ecorevive.domain.errors import PaymentError, ValidationError
from ecorevive.utils.money import to_minor_units
from ecorevive.utils.settings import (
    PAYMENT_API_KEY,
    PAYMENT_CURRENCY,
    PAYMENT_SERVICE_URL,
    PAYMENT_TIMEOUT_SECONDS,
)
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)


def http_retry():
    # tylko bledy transportu, odpowiedz 4xx/5xx od bramki nie jest ponawiana
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    )


class PaymentClient:
    """
    Klient bramki platnosci (API w stylu payment intents).
    Kwota idzie w centach, w odpowiedzi dostajemy id intentu i client secret.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        currency: str | None = None,
        timeout: int | None = None,
    ):
        self.base_url = (base_url or PAYMENT_SERVICE_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else PAYMENT_API_KEY
        self.currency = currency or PAYMENT_CURRENCY
        self.timeout = timeout or PAYMENT_TIMEOUT_SECONDS

    def create_payment_intent(self, amount: Decimal, order_id: int) -> Dict[str, str]:
        if amount <= 0:
            raise ValidationError("Payment amount must be positive")

        # jeden klucz na wszystkie proby, bramka nie utworzy dwoch intentow
        idempotency_key = uuid.uuid4().hex

        try:
            body = self._post_intent(to_minor_units(amount), order_id, idempotency_key)
        except RequestException as e:
            logger.error(f"Payment intent for order {order_id} failed: {e}")
            raise PaymentError(f"Payment provider error: {e}") from e

        try:
            return {"reference": body["id"], "client_secret": body["client_secret"]}
        except (KeyError, TypeError) as e:
            raise PaymentError("Malformed payment provider response") from e

    @http_retry()
    def _post_intent(self, amount_cents: int, order_id: int, idempotency_key: str) -> dict:
        url = f"{self.base_url}/v1/payment_intents"
        logger.info(f"PaymentClient POST {url} amount={amount_cents} {self.currency} order={order_id}")

        resp = requests.post(
            url,
            data={
                "amount": amount_cents,
                "currency": self.currency,
                "metadata[order_id]": order_id,
            },
            auth=(self.api_key, ""),
            headers={"Idempotency-Key": idempotency_key},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()
