"""
Bounded, self-describing calculated values.

A CalculatedValue carries a base amount, an ordered chain of adjustments
built from other calculated values, and optional bounds. The final amount
is always clamped into the bounds, which is how contract durations keep to
their valid range however the dates were supplied.
"""

from dataclasses import dataclass, field
from typing import Optional

ADJUSTMENT_OPERATIONS = ("add", "subtract", "multiply", "divide", "absolute")


@dataclass(frozen=True)
class Adjustment:
    """One step of an adjustment chain."""
    operation: str
    value: "CalculatedValue"


@dataclass(frozen=True)
class CalculatedValue:
    """Named quantity with bounds and an adjustment chain."""
    name: str
    description: str
    set_by: str
    base_amount: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    adjustments: tuple[Adjustment, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if (self.minimum is not None and self.maximum is not None
                and self.minimum > self.maximum):
            raise ValueError(
                f"{self.name}: minimum {self.minimum} exceeds maximum {self.maximum}")

    def with_adjustment(self, operation: str, value: "CalculatedValue") -> "CalculatedValue":
        """Return a copy with one more adjustment appended."""
        if operation not in ADJUSTMENT_OPERATIONS:
            raise ValueError(f"Unknown adjustment operation '{operation}'")

        return CalculatedValue(
            name=self.name,
            description=self.description,
            set_by=self.set_by,
            base_amount=self.base_amount,
            minimum=self.minimum,
            maximum=self.maximum,
            adjustments=self.adjustments + (Adjustment(operation, value),),
        )

    @property
    def raw_amount(self) -> float:
        """Adjusted amount before bounds are applied."""
        amount = self.base_amount
        for adjustment in self.adjustments:
            other = adjustment.value.amount
            if adjustment.operation == "add":
                amount += other
            elif adjustment.operation == "subtract":
                amount -= other
            elif adjustment.operation == "multiply":
                amount *= other
            elif adjustment.operation == "divide":
                amount /= other
            elif adjustment.operation == "absolute":
                amount = abs(amount)
        return amount

    @property
    def amount(self) -> float:
        """Adjusted amount clamped into [minimum, maximum]."""
        amount = self.raw_amount
        if self.minimum is not None:
            amount = max(self.minimum, amount)
        if self.maximum is not None:
            amount = min(self.maximum, amount)
        return amount

    @property
    def is_clamped(self) -> bool:
        """True if the bounds changed the adjusted amount."""
        return self.amount != self.raw_amount

    def peek(self, name: str) -> Optional["CalculatedValue"]:
        """Find this value or a component of its adjustment chain by name."""
        if self.name == name:
            return self
        for adjustment in self.adjustments:
            found = adjustment.value.peek(name)
            if found is not None:
                return found
        return None

    def peek_amount(self, name: str) -> Optional[float]:
        """Amount of a named component, None if absent."""
        found = self.peek(name)
        return found.amount if found is not None else None
