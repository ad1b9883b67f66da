"""
Backend Learning API — Runtime Context & Process Introspection
===============================================================

What:  The immutable RuntimeContext captured at startup, and the helpers that
       turn live process state into the GET /info payload.
Why:   Handlers never read environment variables or process globals ad hoc.
       Everything they report comes from the context object (fixed at startup)
       or from an explicit psutil.Process handle (read per request), which keeps
       them testable in isolation.
How:   create_app() builds one RuntimeContext and stores it on app.state;
       routes receive it through the get_runtime_context dependency.
"""

import platform
import sys
import time
from datetime import datetime, timezone
from typing import Optional

import psutil
from pydantic import BaseModel

from learning_api import __version__
from learning_api.config import Settings
from learning_api.schemas.system import InfoResponse, MemoryUsage

APP_NAME = "Backend Learning API"

_BYTES_PER_MB = 1024 * 1024


class RuntimeContext(BaseModel):
    """
    Snapshot of configuration and process identity, frozen at startup.

    Attributes:
        app_name:        Display name reported by GET /info
        environment:     NODE_ENV value echoed by GET /
        version:         Application version
        database_label:  Name reported by GET /db-test
        pid:             Process the context describes
        started_at:      Process creation time (epoch seconds)
    """
    app_name: str
    environment: str
    version: str
    database_label: str
    pid: int
    started_at: float

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings, process: Optional[psutil.Process] = None) -> "RuntimeContext":
        process = process or psutil.Process()
        return cls(
            app_name=APP_NAME,
            environment=settings.node_env,
            version=__version__,
            database_label=settings.database_label,
            pid=process.pid,
            started_at=process.create_time(),
        )


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a UTC instant as ISO 8601 with milliseconds and a Z suffix.

    >>> utc_timestamp(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))
    '2024-01-15T12:00:00.000Z'
    """
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_megabytes(num_bytes: int) -> str:
    """Render a byte count as whole megabytes, rounding halves up ("42 MB")."""
    return f"{int(num_bytes / _BYTES_PER_MB + 0.5)} MB"


def runtime_version() -> str:
    return f"v{platform.python_version()}"


def collect_runtime_info(
    context: RuntimeContext,
    process: Optional[psutil.Process] = None,
    now: Optional[float] = None,
) -> InfoResponse:
    """
    Build the GET /info payload from the context and live process state.

    Args:
        context:  Startup snapshot (name, start time)
        process:  psutil handle to read memory from; defaults to context.pid
        now:      Epoch seconds to measure uptime against; defaults to the
                  current time

    heapUsed comes from the data segment (heap + stack) on Linux. Platforms
    whose psutil does not report it fall back to the resident set size.
    """
    process = process or psutil.Process(context.pid)
    memory = process.memory_info()
    heap_bytes = getattr(memory, "data", memory.rss)

    current = now if now is not None else time.time()
    uptime = max(0.0, current - context.started_at)

    return InfoResponse(
        app_name=context.app_name,
        node_version=runtime_version(),
        platform=sys.platform,
        uptime=round(uptime, 3),
        memory_usage=MemoryUsage(
            rss=format_megabytes(memory.rss),
            heap_used=format_megabytes(heap_bytes),
        ),
    )
