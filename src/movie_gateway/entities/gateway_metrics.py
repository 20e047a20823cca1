"""Gateway performance counters."""

from dataclasses import dataclass


@dataclass
class GatewayMetrics:
    """Track cache effectiveness for the gateway handlers."""

    cache_hits: int = 0
    cache_misses: int = 0
    upstream_calls: int = 0
    upstream_failures: int = 0
    shape_violations: int = 0

    @property
    def total_requests(self) -> int:
        """Requests that reached a cached handler."""
        return self.cache_hits + self.cache_misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_requests == 0:
            return 0.0
        return self.cache_hits / self.total_requests

    def record_hit(self) -> None:
        self.cache_hits += 1

    def record_miss(self) -> None:
        self.cache_misses += 1

    def record_upstream_call(self) -> None:
        self.upstream_calls += 1

    def record_upstream_failure(self) -> None:
        self.upstream_failures += 1

    def record_shape_violation(self) -> None:
        self.shape_violations += 1

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_requests": self.total_requests,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "hit_rate": self.hit_rate,
            "upstream_calls": self.upstream_calls,
            "upstream_failures": self.upstream_failures,
            "shape_violations": self.shape_violations,
        }
