from __future__ import annotations

import os
import platform
import sys
import time
from dataclasses import dataclass

import psutil

MEGABYTE = 1024 * 1024


@dataclass(frozen=True)
class HostInfo:
    """
    Point-in-time view of the host process.
    """
    platform: str
    python_version: str
    architecture: str
    cwd: str
    rss_bytes: int
    vms_bytes: int
    uptime_seconds: float
    pid: int

    @property
    def memory_mb(self) -> int:
        return round(self.rss_bytes / MEGABYTE)

    @property
    def uptime_rounded(self) -> int:
        return round(self.uptime_seconds)


def process_uptime() -> float:
    return max(0.0, time.time() - psutil.Process().create_time())


def collect_host_info() -> HostInfo:
    process = psutil.Process()
    memory = process.memory_info()
    return HostInfo(
        platform=sys.platform,
        python_version=platform.python_version(),
        architecture=platform.machine(),
        cwd=os.getcwd(),
        rss_bytes=memory.rss,
        vms_bytes=memory.vms,
        uptime_seconds=process_uptime(),
        pid=process.pid,
    )
