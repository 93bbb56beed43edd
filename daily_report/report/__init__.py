"""Report rendering and delivery."""

from .composer import compose_report
from .dispatcher import DeliveryError, dispatch_report

__all__ = [
    "compose_report",
    "dispatch_report",
    "DeliveryError",
]
