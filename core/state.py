import threading
from dataclasses import dataclass, field
from typing import Optional

from core.clock import utc_now_iso


# --------------------------------------------------
# RUNTIME STATE
# --------------------------------------------------

@dataclass
class UsageSnapshot:
    request_count: int
    last_request: Optional[str]


@dataclass
class RuntimeState:
    """
    Process-lifetime usage counters shared by every protocol surface.

    Mutated only by the tool executor; read by the stats tool
    and the /api/stats endpoint.
    """
    request_count: int = 0
    last_request: Optional[str] = None
    _lock: threading.Lock = field(
        default_factory=threading.Lock,
        repr=False,
        compare=False,
    )

    def record_request(self) -> UsageSnapshot:
        # handlers may run on worker threads
        with self._lock:
            self.request_count += 1
            self.last_request = utc_now_iso()
            return UsageSnapshot(
                request_count=self.request_count,
                last_request=self.last_request,
            )

    def snapshot(self) -> UsageSnapshot:
        with self._lock:
            return UsageSnapshot(
                request_count=self.request_count,
                last_request=self.last_request,
            )
