"""Per-calendar-day quotas guarding paid third-party APIs."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum

from pydantic import TypeAdapter, ValidationError

from food_suggest.domain.rate_limits import RateLimitCounter, RateLimitStatus
from food_suggest.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)

_counter_adapter = TypeAdapter(RateLimitCounter)


class Quota(StrEnum):
    """Independent daily quotas."""

    AI = "ai"
    PLACES = "places"


def storage_key(quota: str) -> str:
    """Return the storage key holding a quota's counter."""
    return f"@rate_limit_{quota}"


@dataclass
class RateLimitService:
    """Lazy-reset daily counters kept in the key-value store.

    Counters reset the first time they are read on a new local calendar day.
    Calls are not locked against each other. Any storage failure grants the
    request, since the quotas only protect a billing budget.
    """

    store: KeyValueStore
    today: Callable[[], date] = date.today

    async def check_and_increment(
        self, quota: str, daily_limit: int
    ) -> RateLimitStatus:
        """Consume one unit of quota if available."""
        key = storage_key(quota)
        try:
            counter = await self._load_current(key)
            if counter.count >= daily_limit:
                _logger.info("Daily %s quota exhausted (%s)", quota, daily_limit)
                return RateLimitStatus(allowed=False, remaining=0)
            await self._save(key, replace(counter, count=counter.count + 1))
        except Exception:
            _logger.warning(
                "Rate limit check for %s failed; allowing", quota, exc_info=True
            )
            return RateLimitStatus(allowed=True, remaining=daily_limit)
        return RateLimitStatus(allowed=True, remaining=daily_limit - counter.count - 1)

    async def get_remaining(self, quota: str, daily_limit: int) -> int:
        """Return remaining quota for today without consuming any."""
        try:
            raw = await self.store.get(storage_key(quota))
        except Exception:
            _logger.warning("Failed to read %s quota", quota, exc_info=True)
            return daily_limit
        counter = _parse_counter(raw)
        if counter.date_stamp != self._today_stamp():
            return daily_limit
        return max(daily_limit - counter.count, 0)

    async def _load_current(self, key: str) -> RateLimitCounter:
        """Load a counter, resetting it when it belongs to another day."""
        counter = _parse_counter(await self.store.get(key))
        today = self._today_stamp()
        if counter.date_stamp != today:
            counter = RateLimitCounter(count=0, date_stamp=today)
            await self._save(key, counter)
        return counter

    async def _save(self, key: str, counter: RateLimitCounter) -> None:
        await self.store.set(key, _counter_adapter.dump_json(counter).decode())

    def _today_stamp(self) -> str:
        return self.today().isoformat()


def _parse_counter(raw: str | None) -> RateLimitCounter:
    """Parse a stored counter, treating malformed data as empty."""
    if raw is None:
        return RateLimitCounter()
    try:
        return _counter_adapter.validate_json(raw)
    except ValidationError:
        return RateLimitCounter()
