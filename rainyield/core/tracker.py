import json
import logging
import math

from ddtrace import tracer

from core.correlation import correlate_series
from core.exceptions import (
    CapacityExceededError,
    MissingFieldError,
    NotPositiveNumberError,
)
from core.store import KeyValueStore
from rainyield.models import CorrelationResult, TrackerSnapshot

logger = logging.getLogger(__name__)

MAX_ENTRIES = 10

# Same keys as the browser local storage layout
RAINFALL_KEY = "chuvas"
YIELD_KEY = "producoes"


def is_blank(raw) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def parse_positive_number(raw) -> float:
    """Parse a raw form value into a finite, strictly positive float."""
    # bool is an int subclass, but true/false are not measurements
    if isinstance(raw, bool):
        raise NotPositiveNumberError()
    # float() accepts digit grouping like "1_000", the form does not
    if isinstance(raw, str) and "_" in raw:
        raise NotPositiveNumberError()
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise NotPositiveNumberError() from None

    if not math.isfinite(value) or value <= 0:
        raise NotPositiveNumberError()
    return value


def _is_measurement(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        parse_positive_number(value)
    except NotPositiveNumberError:
        return False
    return True


class CorrelationTracker:
    """Paired rainfall and yield series with their Pearson correlation.

    The series are restored from ``store`` on construction and written back
    after every mutation. All commands run to completion; the tracker holds
    no reference to any request or UI object, so views build a fresh one per
    request around the store for that browser.
    """

    def __init__(self, store: KeyValueStore, max_entries: int = MAX_ENTRIES):
        self.store = store
        self.max_entries = max_entries
        self.rainfall: list[float] = []
        self.yields: list[float] = []
        self.correlation: CorrelationResult | None = None
        self.restore()

    def __len__(self) -> int:
        return len(self.rainfall)

    @property
    def is_full(self) -> bool:
        return len(self.rainfall) >= self.max_entries

    def validate(self, raw_rain, raw_yield) -> None:
        if is_blank(raw_rain) or is_blank(raw_yield):
            raise MissingFieldError()

        parse_positive_number(raw_rain)
        parse_positive_number(raw_yield)

        if self.is_full:
            raise CapacityExceededError()

    @tracer.wrap("tracker.add_sample")
    def add_sample(self, rain: float, yield_: float) -> CorrelationResult | None:
        if self.is_full:
            raise CapacityExceededError()

        self.rainfall.append(float(rain))
        self.yields.append(float(yield_))
        self.persist()
        logger.info(
            "Added sample %d/%d: rainfall=%s yield=%s",
            len(self.rainfall),
            self.max_entries,
            rain,
            yield_,
        )
        return self.compute_correlation()

    def submit(self, raw_rain, raw_yield) -> CorrelationResult | None:
        """Validate raw form input and add it as a new pair."""
        self.validate(raw_rain, raw_yield)
        return self.add_sample(
            parse_positive_number(raw_rain), parse_positive_number(raw_yield)
        )

    @tracer.wrap("tracker.clear")
    def clear(self) -> None:
        self.rainfall = []
        self.yields = []
        self.correlation = None
        self.store.delete(RAINFALL_KEY)
        self.store.delete(YIELD_KEY)
        logger.info("Cleared all samples")

    def compute_correlation(self) -> CorrelationResult | None:
        self.correlation = correlate_series(self.rainfall, self.yields)
        return self.correlation

    def persist(self) -> None:
        self.store.set(RAINFALL_KEY, json.dumps(self.rainfall))
        self.store.set(YIELD_KEY, json.dumps(self.yields))

    def restore(self) -> None:
        raw_rainfall = self.store.get(RAINFALL_KEY)
        raw_yields = self.store.get(YIELD_KEY)
        self.rainfall = []
        self.yields = []
        self.correlation = None

        if raw_rainfall is None and raw_yields is None:
            return

        rainfall = self._load_series(RAINFALL_KEY, raw_rainfall)
        yields = self._load_series(YIELD_KEY, raw_yields)
        if rainfall is None or yields is None:
            return

        if len(rainfall) != len(yields) or len(rainfall) > self.max_entries:
            logger.warning(
                "Discarding stored series with lengths %d and %d",
                len(rainfall),
                len(yields),
            )
            return

        self.rainfall = rainfall
        self.yields = yields
        self.compute_correlation()

    def _load_series(self, key: str, raw: str | None) -> list[float] | None:
        if raw is None:
            logger.warning("Stored series %r is missing its pair", key)
            return None

        try:
            values = json.loads(raw)
        except ValueError:
            logger.warning("Stored series %r is not valid JSON", key)
            return None

        if not isinstance(values, list) or not all(map(_is_measurement, values)):
            logger.warning("Stored series %r is not a list of positive numbers", key)
            return None

        return [float(value) for value in values]

    def snapshot(self) -> TrackerSnapshot:
        snapshot = TrackerSnapshot(
            rainfall=list(self.rainfall),
            yields=list(self.yields),
            max_entries=self.max_entries,
            remaining=max(0, self.max_entries - len(self.rainfall)),
        )
        if self.correlation is not None:
            snapshot.correlation = self.correlation.r
            snapshot.strength = self.correlation.strength
            snapshot.is_strong = self.correlation.strength.is_strong
            snapshot.summary = self.correlation.summary
        return snapshot
