import json
import os
import sys
from datetime import datetime, timezone
from typing import Optional


_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}
_threshold: Optional[int] = None


def _level_value(level: Optional[str]) -> int:
    # unknown names fall back to info rather than failing a log call
    return _LEVELS.get((level or "info").strip().lower(), _LEVELS["info"])


def set_log_level(level: Optional[str]) -> None:
    """Override the threshold; until called, CART_LOG_LEVEL is read on the first event."""
    global _threshold
    _threshold = _level_value(level)


def log_event(level: str, event: str, **fields) -> None:
    global _threshold
    if _threshold is None:
        _threshold = _level_value(os.getenv("CART_LOG_LEVEL"))
    lvl = level.lower()
    if _level_value(lvl) < _threshold:
        return
    payload = {
        "ts": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
        "level": lvl,
        "event": event,
    }
    payload.update(fields or {})
    try:
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
    except Exception:
        # best-effort logging
        pass
