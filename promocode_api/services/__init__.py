from promocode_api.services.customer_service import CustomerDetails, CustomerService
from promocode_api.services.promo_code_service import PromoCodeService

__all__ = [
    "CustomerDetails",
    "CustomerService",
    "PromoCodeService",
]
