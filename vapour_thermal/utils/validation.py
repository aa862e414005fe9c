"""Input validation and advisory warnings for Vapour Thermal calculators.

Two tiers:

- errors are collected in a :class:`ValidationResult` and raised as a
  :class:`ValidationError` before any computation runs;
- warnings are :class:`CalculationWarning` values returned on the result
  and never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WarningCategory(Enum):
    """Kind of advisory condition attached to a calculation result."""

    FLASHING = "flashing"
    HIGH_SPRAY_RATIO = "high_spray_ratio"
    EXTRAPOLATION = "extrapolation"
    LOW_NCG_FRACTION = "low_ncg_fraction"


@dataclass(frozen=True)
class CalculationWarning:
    """Non-fatal condition found while computing a result."""

    category: WarningCategory
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category.value, "message": self.message}


@dataclass
class ValidationMessage:
    """A single violated input constraint."""

    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    errors: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.errors.append(ValidationMessage(parameter, message, **kwargs))

    def raise_if_invalid(self) -> None:
        """Raise :class:`ValidationError` when any error was recorded."""
        if not self.is_valid:
            raise ValidationError(self)


class ValidationError(ValueError):
    """Raised when calculator input is physically impossible or out of domain.

    The message joins every violated constraint; the full finding list is
    available as ``result``.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__("; ".join(m.message for m in result.errors))


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> bool:
    """Validate that a value is strictly positive. Returns True when it is."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0)
        return False
    return True


def validate_non_negative(name: str, value: float | None, result: ValidationResult) -> None:
    """Validate that an optional value is zero or positive."""
    if value is not None and value < 0:
        result.error(name, f"{name} cannot be negative, got {value}", value=value, limit=0)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    unit: str = "",
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        suffix = f" {unit}" if unit else ""
        result.error(
            name,
            f"{name} must be between {low} and {high}{suffix}, got {value}",
            value=value,
            limit=(low, high),
        )
