from rest_framework import status
from rest_framework.exceptions import APIException


class PaymentProviderError(APIException):
    """The payment processor could not be reached or answered with an error."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'Payment provider error'
    default_code = 'payment_provider_error'
