"""Caller-owned memo for price resolutions.

The resolver itself caches nothing. A screen that re-renders the same
cards many times per second may keep one of these, keyed by
``(product_id, variant_id, campaign_version, time_bucket)``.

Buckets are aligned to the epoch, not to campaign or slot edges, so an
answer cached just before a window opens or closes is served until its
bucket ends: a cached result can lag a window edge by up to
``bucket_seconds``. Callers that must flip exactly on the edge, such as
checkout, should resolve without the cache.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from promoprice.domain.exceptions import ValidationError
from promoprice.domain.model.pricing import PriceResolution
from promoprice.domain.model.value_objects import as_utc

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str | None, str, int]


class ResolutionCache:

    def __init__(self, bucket_seconds: int = 1, max_entries: int = 1024) -> None:
        if bucket_seconds <= 0:
            raise ValidationError("Cache time bucket must be positive")
        if max_entries <= 0:
            raise ValidationError("Cache size must be positive")
        self._bucket_seconds = bucket_seconds
        self._max_entries = max_entries
        self._store: dict[CacheKey, PriceResolution] = {}

    def key(
        self,
        product_id: str,
        variant_id: str | None,
        campaign_version: str,
        now: datetime,
    ) -> CacheKey:
        bucket = int(as_utc(now).timestamp()) // self._bucket_seconds
        return (product_id, variant_id, campaign_version, bucket)

    def get_or_resolve(
        self, key: CacheKey, resolve: Callable[[], PriceResolution]
    ) -> PriceResolution:
        cached = self._store.get(key)
        if cached is not None:
            return cached

        resolution = resolve()
        if len(self._store) >= self._max_entries:
            oldest = next(iter(self._store))
            del self._store[oldest]
            logger.debug("Evicted cached resolution %s", oldest)
        self._store[key] = resolution
        return resolution

    def __len__(self) -> int:
        return len(self._store)
