"""
Payment gateway utility functions (Stripe)
"""
import stripe
from flask import current_app


class PaymentError(Exception):
    """Raised when the payment provider call fails"""


def to_minor_units(price):
    """Convert a price in dollars to cents, the unit Stripe works in"""
    return int(round(float(price) * 100))


def create_payment_intent(price):
    """
    Create a card PaymentIntent for the given price.

    Args:
        price: Amount in major currency units (e.g. 5 for $5)

    Returns:
        str: client secret the frontend uses to confirm the payment
    """
    try:
        intent = stripe.PaymentIntent.create(
            amount=to_minor_units(price),
            currency=current_app.config.get("STRIPE_CURRENCY", "usd"),
            payment_method_types=["card"],
            api_key=current_app.config.get("STRIPE_SECRET_KEY"),
        )
    except stripe.StripeError as e:
        current_app.logger.error(f"Stripe PaymentIntent creation failed: {str(e)}", exc_info=True)
        raise PaymentError(str(e)) from e
    return intent["client_secret"]


def verify_payment(transaction_id):
    """Return True if the PaymentIntent with this id has succeeded"""
    try:
        intent = stripe.PaymentIntent.retrieve(
            transaction_id,
            api_key=current_app.config.get("STRIPE_SECRET_KEY"),
        )
    except stripe.InvalidRequestError:
        return False
    except stripe.StripeError as e:
        current_app.logger.error(f"Stripe PaymentIntent lookup failed for {transaction_id}: {str(e)}", exc_info=True)
        raise PaymentError(str(e)) from e
    return intent["status"] == "succeeded"
