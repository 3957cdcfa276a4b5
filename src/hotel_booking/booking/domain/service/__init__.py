from .booking_validator import BookingValidator as BookingValidator
from .pricing_engine import PricingEngine as PricingEngine
