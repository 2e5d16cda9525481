import math
from typing import Sequence

import numpy as np
from ddtrace import tracer

from rainyield.models import CorrelationResult, StrengthLabel

STRONG_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.3


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float | None:
    """Pearson product-moment correlation of two paired series.

    Uses the closed-form sums so the degenerate case (zero variance in either
    series) can be told apart from a real coefficient: it returns None for it,
    as well as for fewer than two pairs.
    """
    if len(xs) != len(ys):
        raise ValueError(
            f"Series must have the same length, got {len(xs)} and {len(ys)}"
        )

    n = len(xs)
    if n < 2:
        return None

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = np.dot(x, y)
    sum_x2 = np.dot(x, x)
    sum_y2 = np.dot(y, y)

    numerator = n * sum_xy - sum_x * sum_y
    # Either factor can dip just below zero through rounding when a series is constant
    variance_product = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if variance_product <= 0:
        return None

    denominator = math.sqrt(variance_product)
    r = float(numerator / denominator)
    return max(-1.0, min(1.0, r))


def classify_strength(r: float) -> StrengthLabel:
    magnitude = abs(r)
    if magnitude >= STRONG_THRESHOLD:
        return (
            StrengthLabel.STRONG_POSITIVE if r > 0 else StrengthLabel.STRONG_NEGATIVE
        )
    if magnitude >= MODERATE_THRESHOLD:
        return (
            StrengthLabel.MODERATE_POSITIVE
            if r > 0
            else StrengthLabel.MODERATE_NEGATIVE
        )
    return StrengthLabel.WEAK


@tracer.wrap("correlation.correlate_series")
def correlate_series(
    xs: Sequence[float], ys: Sequence[float]
) -> CorrelationResult | None:
    """Correlate two series and label the strength of the relationship."""
    if len(xs) < 2 or len(ys) < 2:
        return None

    r = pearson_correlation(xs, ys)
    if r is None:
        return CorrelationResult(r=None, strength=StrengthLabel.UNDEFINED)

    return CorrelationResult(r=r, strength=classify_strength(r))
