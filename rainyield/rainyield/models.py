from enum import Enum

from pydantic import BaseModel


class StrengthLabel(str, Enum):
    STRONG_POSITIVE = "strong positive"
    STRONG_NEGATIVE = "strong negative"
    MODERATE_POSITIVE = "moderate positive"
    MODERATE_NEGATIVE = "moderate negative"
    WEAK = "weak"
    UNDEFINED = "undefined correlation"

    @property
    def is_strong(self) -> bool:
        return self in (StrengthLabel.STRONG_POSITIVE, StrengthLabel.STRONG_NEGATIVE)


STRONG_SUMMARY = "There is a significant relationship between rainfall and yield."
WEAK_SUMMARY = "The relationship between rainfall and yield is weak or moderate."


class CorrelationResult(BaseModel):
    # None when either series has zero variance
    r: float | None
    strength: StrengthLabel

    @property
    def summary(self) -> str:
        return STRONG_SUMMARY if self.strength.is_strong else WEAK_SUMMARY


class TrackerSnapshot(BaseModel):
    # Sent to the frontend as-is
    rainfall: list[float]
    yields: list[float]
    max_entries: int
    remaining: int

    correlation: float | None = None
    strength: StrengthLabel | None = None
    is_strong: bool = False
    summary: str | None = None
