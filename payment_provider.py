import logging
import requests
from config import get_settings

logger = logging.getLogger(__name__)

PAYMENT_INTENTS_URL = "https://api.stripe.com/v1/payment_intents"

class PaymentProviderError(Exception):
    pass

def create_payment_intent(amount: int, currency: str = "usd") -> str:
    """
    Ask the payment provider for a payment intent.

    Args:
        amount: Amount in the currency's smallest unit (cents)
        currency: ISO currency code

    Returns:
        The intent's client secret, handed to the browser to confirm the payment
    """
    data = {
        "amount": amount,
        "currency": currency,
        "payment_method_types[]": "card",
    }

    try:
        # Use application/x-www-form-urlencoded content type
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        response = requests.post(
            PAYMENT_INTENTS_URL,
            data=data,
            headers=headers,
            auth=(get_settings().stripe_secret_key, ""),
            timeout=10,
        )

        response.raise_for_status()

        result = response.json()

    except (requests.RequestException, ValueError) as e:
        logger.error("Payment intent creation failed: %s", e)
        raise PaymentProviderError(str(e)) from e

    client_secret = result.get("client_secret")
    if not client_secret:
        raise PaymentProviderError("Payment provider returned no client secret")
    return client_secret
