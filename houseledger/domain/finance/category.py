"""Transaction category value object."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransactionCategory:
    """Spending category of a transaction and whether a person confirmed it.

    Instances are immutable; "no category" is expressed as ``None`` on the
    transaction, never as an empty name.
    """

    name: str
    is_confirmed: bool = False

    def __post_init__(self) -> None:
        if self.name is None or not str(self.name).strip():
            raise ValueError("Category name cannot be empty")
        object.__setattr__(self, "name", str(self.name).strip())
        object.__setattr__(self, "is_confirmed", bool(self.is_confirmed))

    @classmethod
    def confirmed(cls, name: str) -> "TransactionCategory":
        return cls(name, True)

    @classmethod
    def unconfirmed(cls, name: str) -> "TransactionCategory":
        """Category assigned automatically and not yet reviewed."""
        return cls(name, False)

    def confirm(self) -> "TransactionCategory":
        return TransactionCategory(self.name, True)

    def rename(self, new_name: str) -> "TransactionCategory":
        return TransactionCategory(new_name, self.is_confirmed)

    def __str__(self) -> str:
        state = "Confirmed" if self.is_confirmed else "Unconfirmed"
        return f"{self.name} ({state})"


DEFAULT_CATEGORIES: tuple[TransactionCategory, ...] = (
    TransactionCategory.unconfirmed("Groceries"),
    TransactionCategory.unconfirmed("Utilities"),
    TransactionCategory.unconfirmed("Rent"),
    TransactionCategory.unconfirmed("Transportation"),
    TransactionCategory.unconfirmed("Entertainment"),
    TransactionCategory.unconfirmed("Healthcare"),
    TransactionCategory.unconfirmed("Education"),
    TransactionCategory.confirmed("Salary"),
    TransactionCategory.unconfirmed("Investment"),
    TransactionCategory.unconfirmed("Other"),
)


__all__ = ["DEFAULT_CATEGORIES", "TransactionCategory"]
