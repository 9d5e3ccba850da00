"""Amount and edit result models passed between the parsing stages."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


class NormalizedAmount(BaseModel):
    """Result of stripping formatting from raw amount text.

    ``integer_digits`` and ``fraction_digits`` hold only ASCII digits and may be
    empty.  A zero amount always carries ``sign == 1``.
    """

    model_config = ConfigDict(frozen=True)

    sign: int = Field(default=1)
    integer_digits: str = ""
    fraction_digits: str = ""

    @property
    def digits(self) -> str:
        """All digits of the amount, in the order they were typed."""
        return self.integer_digits + self.fraction_digits

    @property
    def is_zero(self) -> bool:
        return not self.digits.strip("0")


class EditResult(BaseModel):
    """Output of a single reconciliation or initialization."""

    model_config = ConfigDict(frozen=True)

    cents: int
    masked: str
    value: Decimal
    caret: int
    changed: bool = True
