import logging
import re
from typing import Callable, Dict, Optional, Protocol, Sequence

from taxilink.db.models import Driver

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+(?:\.\d+)?")


class DriverMatcher(Protocol):

    def match(self, drivers: Sequence[Driver]) -> Optional[Driver]:
        ...


def _leading_number(text: str) -> float:
    """First number in a display string ("2.1 km", "R15"); inf when there is none."""
    found = _NUMBER.search(text or "")
    return float(found.group()) if found else float("inf")


class FirstAvailableMatcher:
    """Placeholder dispatch: the lowest-index available driver."""

    def match(self, drivers: Sequence[Driver]) -> Optional[Driver]:
        return next((d for d in drivers if d.available), None)


class _LowestValueMatcher:
    field: str = ""

    def match(self, drivers: Sequence[Driver]) -> Optional[Driver]:
        candidates = [d for d in drivers if d.available]
        if not candidates:
            return None
        # min() keeps the first of equal values, so ties go to insertion order
        return min(candidates, key=lambda d: _leading_number(getattr(d, self.field)))


class NearestDriverMatcher(_LowestValueMatcher):
    field = "distance"


class CheapestDriverMatcher(_LowestValueMatcher):
    field = "price"


MATCHERS: Dict[str, Callable[[], DriverMatcher]] = {
    "first": FirstAvailableMatcher,
    "nearest": NearestDriverMatcher,
    "cheapest": CheapestDriverMatcher,
}


def build_matcher(name: Optional[str]) -> DriverMatcher:
    factory = MATCHERS.get((name or "first").lower())
    if factory is None:
        logger.warning(f"Unknown match strategy {name!r}, using 'first'")
        factory = FirstAvailableMatcher
    return factory()
