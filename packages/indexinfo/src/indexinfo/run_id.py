from __future__ import annotations

import os
from datetime import datetime, timezone


def make_run_id(prefix: str = "indexinfo") -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{ts}-{os.getpid()}"
