"""Input validation utilities."""

import math
from typing import Any

from ..config.settings import Settings


class ValidationError(Exception):
    """Custom validation error."""
    pass


class MissingConfigError(ValidationError):
    """A required configuration value is absent or blank."""

    def __init__(self, name: str):
        self.name = name.upper()
        super().__init__(
            f"Missing required environment variable: {self.name}")


def require_config(settings: Settings, name: str) -> str:
    """Return the trimmed value of a required setting.

    Whitespace-only values count as missing.
    """
    value = getattr(settings, name.lower(), None)
    if value is None or str(value).strip() == "":
        raise MissingConfigError(name)
    return str(value).strip()


def safe_int(value: Any) -> int:
    """Coerce a metric value to a non-negative int, falling back to 0."""
    if isinstance(value, bool):
        return int(value)

    try:
        number = float(value)
    except (ValueError, TypeError):
        return 0

    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0
    return int(number)


def safe_rate(value: Any) -> str:
    """Coerce a percentage to a one-decimal string, falling back to "0.0"."""
    try:
        number = float(value)
    except (ValueError, TypeError):
        return "0.0"

    if math.isnan(number) or math.isinf(number):
        return "0.0"
    return f"{number:.1f}"


def format_rate(part: int, total: int) -> str:
    """Format part/total as a one-decimal percentage string."""
    if not total:
        return "0.0"
    return f"{part / total * 100:.1f}"
