"""
Request metrics for the Bitvavo client.

Keeps a bounded history of completed calls and aggregate counters so that
callers can observe latency and exchange error codes without log scraping.
"""

import time
from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional


@dataclass(frozen=True)
class RequestMetrics:
    """Outcome of a single API call."""
    endpoint: str
    method: str
    status_code: int
    duration_ms: float
    timestamp: float
    error_code: Optional[int] = None  # exchange errorCode, when rejected


@dataclass
class Statistics:
    """Aggregate counters over all recorded calls."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_duration_ms: float = 0.0
    max_duration_ms: float = 0.0

    @property
    def avg_duration_ms(self) -> float:
        if not self.total_requests:
            return 0.0
        return self.total_duration_ms / self.total_requests

    def update(self, metrics: RequestMetrics) -> None:
        self.total_requests += 1
        self.total_duration_ms += metrics.duration_ms
        self.max_duration_ms = max(self.max_duration_ms, metrics.duration_ms)
        if 200 <= metrics.status_code < 300:
            self.successful_requests += 1
        else:
            self.failed_requests += 1


class PerformanceMonitor:
    """Records request metrics for a client instance."""

    def __init__(self, max_history: int = 1000):
        self._statistics = Statistics()
        self._history: Deque[RequestMetrics] = deque(maxlen=max_history)
        self._error_codes: Counter = Counter()

    def record_request(
        self,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
        error_code: Optional[int] = None,
    ) -> RequestMetrics:
        """Record one completed call and return its metrics."""
        metrics = RequestMetrics(
            endpoint=endpoint,
            method=method,
            status_code=status_code,
            duration_ms=duration_ms,
            timestamp=time.time(),
            error_code=error_code,
        )
        self._statistics.update(metrics)
        self._history.append(metrics)
        if error_code is not None:
            self._error_codes[error_code] += 1
        return metrics

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    @property
    def error_codes(self) -> Dict[int, int]:
        """How often each exchange error code was seen."""
        return dict(self._error_codes)

    def get_endpoint_stats(self, endpoint: str, method: str = "GET") -> Dict[str, float]:
        """Count, mean latency and success rate for one endpoint."""
        requests = [
            m for m in self._history
            if m.endpoint == endpoint and m.method == method
        ]
        if not requests:
            return {"count": 0, "avg_duration_ms": 0.0, "success_rate": 0.0}

        successful = sum(1 for m in requests if 200 <= m.status_code < 300)
        return {
            "count": len(requests),
            "avg_duration_ms": sum(m.duration_ms for m in requests) / len(requests),
            "success_rate": successful / len(requests),
        }

    def get_recent_requests(self, count: int = 10) -> List[RequestMetrics]:
        return list(self._history)[-count:]

    def reset(self) -> None:
        self._statistics = Statistics()
        self._history.clear()
        self._error_codes.clear()
