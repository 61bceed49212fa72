"""Rate-limited warnings about catalog records."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

__all__ = ["warn_record", "suppressed_count", "reset_warnings"]

_MAX_ISSUES = 512


@dataclass(slots=True)
class _Issue:
    reported_at: float
    suppressed: int = 0


# (kind, record id) -> last report
_ISSUES: dict[tuple[str, str], _Issue] = {}


def warn_record(
    logger: logging.Logger,
    kind: str,
    record_id: str,
    message: str,
    window: int = 300,
) -> bool:
    """Warn about ``kind`` of problem in record ``record_id``.

    The catalog is rebuilt on every refresh, so the same problem is reported
    at most once per ``window`` seconds. Repeats inside the window are counted
    and the next report states how many were skipped. Returns ``True`` when a
    warning was logged.
    """
    key = (kind, str(record_id))
    now = time.monotonic()
    issue = _ISSUES.get(key)
    if issue is not None and now - issue.reported_at <= window:
        issue.suppressed += 1
        return False

    if issue is None and len(_ISSUES) >= _MAX_ISSUES:
        stalest = min(_ISSUES, key=lambda k: _ISSUES[k].reported_at)
        del _ISSUES[stalest]
    _ISSUES[key] = _Issue(reported_at=now)

    if issue is not None and issue.suppressed:
        logger.warning(
            "%s:%s: %s (%d repeats suppressed)", kind, record_id, message, issue.suppressed
        )
    else:
        logger.warning("%s:%s: %s", kind, record_id, message)
    return True


def suppressed_count(kind: str, record_id: str) -> int:
    """Return repeats of an issue skipped since it was last logged."""
    issue = _ISSUES.get((kind, str(record_id)))
    return issue.suppressed if issue else 0


def reset_warnings() -> None:
    """Forget previously reported issues."""
    _ISSUES.clear()
