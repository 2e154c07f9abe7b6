import hashlib
import hmac
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional, Union

import httpx

from ..errors import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


def compute_signature(payload: Union[str, bytes], secret: str) -> str:
    """Hex HMAC-SHA256 от payload на ключе secret."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def verify_client_signature(
    order_id: Optional[str],
    payment_id: Optional[str],
    signature: Optional[str],
    key_id: Optional[str],
    key_secret: Optional[str],
) -> None:
    """
    Проверка подписи, которую клиент получил от checkout Razorpay:
    HMAC-SHA256("<order_id>|<payment_id>") на секрете ключа API.
    Ничего не возвращает, при несовпадении бросает ValidationError.
    """
    if not (key_id and key_secret):
        raise ConfigurationError("Razorpay keys not configured")
    if not (order_id and payment_id and signature):
        raise ValidationError("Missing payment verification fields")

    expected = compute_signature(f"{order_id}|{payment_id}", key_secret)
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        raise ValidationError("Invalid signature")


def verify_webhook_signature(raw_body: bytes, signature: Optional[str], webhook_secret: Optional[str]) -> None:
    """
    Подпись вебхука считается по сырому телу запроса, байт в байт.
    Повторная сериализация разобранного JSON даст другие байты и другую подпись.
    """
    if not webhook_secret:
        raise ConfigurationError("Webhook secret not configured")
    if not signature:
        raise ValidationError("Missing signature")

    expected = compute_signature(raw_body, webhook_secret)
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        raise ValidationError("Invalid webhook signature")


def to_minor_units(amount: Decimal) -> int:
    """Округление до целого числа минимальных единиц (пайсы), половина - вверх."""
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class RazorpayClient:
    """
    Тонкий клиент Orders API Razorpay.
    Один экземпляр на процесс: создаётся при старте, закрывается при остановке.
    """

    def __init__(
        self,
        key_id: Optional[str],
        key_secret: Optional[str],
        base_url: str = "https://api.razorpay.com/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self._client = httpx.AsyncClient(
            base_url=base_url,
            auth=(key_id or "", key_secret or ""),
            timeout=timeout,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    async def create_order(
        self,
        amount: int,
        currency: str = "INR",
        receipt: Optional[str] = None,
        notes: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"amount": amount, "currency": currency}
        if receipt is not None:
            payload["receipt"] = receipt
        if notes is not None:
            payload["notes"] = notes

        response = await self._client.post("/orders", json=payload)
        response.raise_for_status()
        order = response.json()
        if not isinstance(order, dict):
            raise ValueError("unexpected Razorpay order payload")
        logger.info("Razorpay order %s created (%s %s)", order.get("id"), amount, currency)
        return order

    async def aclose(self) -> None:
        await self._client.aclose()
