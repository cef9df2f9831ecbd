"""In-process memo caches shared by the codec, DST engine and resolver."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from cachetools import LRUCache

__all__ = ["CacheStats", "MemoCache", "TimezoneCaches"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CacheStats:
    name: str
    size: int
    maxsize: int
    hits: int
    misses: int

    def as_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "size": self.size,
            "maxsize": self.maxsize,
            "hits": self.hits,
            "misses": self.misses,
        }


class MemoCache:
    """Bounded memoization table keyed by hashable inputs.

    Entries are pure derivations of their key, so evicting or clearing them
    only affects recomputation cost.
    """

    def __init__(self, name: str, maxsize: int = 1024) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.name = name
        self._store: LRUCache = LRUCache(maxsize=maxsize)
        self._hits = 0
        self._misses = 0

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        try:
            value = self._store[key]
        except KeyError:
            self._misses += 1
            value = compute()
            self._store[key] = value
            return value
        self._hits += 1
        return value

    def clear(self) -> None:
        self._store.clear()
        self._hits = 0
        self._misses = 0

    def __contains__(self, key: Any) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def stats(self) -> CacheStats:
        return CacheStats(
            name=self.name,
            size=len(self._store),
            maxsize=int(self._store.maxsize),
            hits=self._hits,
            misses=self._misses,
        )


def _memo(name: str, maxsize: int) -> Callable[[], MemoCache]:
    return lambda: MemoCache(name, maxsize)


@dataclass(slots=True)
class TimezoneCaches:
    """Bundle of the memo caches owned by one :class:`~tzpocket.Timezones`."""

    offsets: MemoCache = field(default_factory=_memo("offsets", 256))
    normalized: MemoCache = field(default_factory=_memo("normalized", 256))
    dst: MemoCache = field(default_factory=_memo("dst", 4096))
    nth_weekday: MemoCache = field(default_factory=_memo("nth_weekday", 512))
    offset_matches: MemoCache = field(default_factory=_memo("offset_matches", 128))

    @classmethod
    def from_sizes(
        cls,
        *,
        offsets: int = 256,
        dst: int = 4096,
        nth_weekday: int = 512,
        offset_matches: int = 128,
    ) -> "TimezoneCaches":
        return cls(
            offsets=MemoCache("offsets", offsets),
            normalized=MemoCache("normalized", offsets),
            dst=MemoCache("dst", dst),
            nth_weekday=MemoCache("nth_weekday", nth_weekday),
            offset_matches=MemoCache("offset_matches", offset_matches),
        )

    def all(self) -> tuple[MemoCache, ...]:
        return (self.offsets, self.normalized, self.dst, self.nth_weekday, self.offset_matches)

    def clear(self) -> None:
        for cache in self.all():
            cache.clear()

    def stats(self) -> list[CacheStats]:
        return [cache.stats() for cache in self.all()]
