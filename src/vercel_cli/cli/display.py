"""
Display helpers shared by the command modules.

Contains the value formatters used in column descriptors and detail views:
truncation, timestamp rendering and state colors.
"""

from datetime import datetime
from typing import Any, Optional

from rich.text import Text

NOT_AVAILABLE = "N/A"


def truncate(value: Any, max_len: int = 40) -> str:
    """Shorten ``value`` to ``max_len`` characters, marking the cut with ``...``."""
    if not value:
        return ""
    text = str(value)
    return text[: max_len - 3] + "..." if len(text) > max_len else text


def _to_datetime(timestamp: Any) -> Optional[datetime]:
    # API timestamps are epoch milliseconds
    if isinstance(timestamp, bool):
        return None
    if isinstance(timestamp, (int, float)):
        try:
            return datetime.fromtimestamp(timestamp / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(timestamp, str):
        try:
            return datetime.fromisoformat(timestamp.replace("Z", "+00:00")).astimezone()
        except ValueError:
            return None
    return None


def format_date(timestamp: Any) -> str:
    """Local date and time, or ``N/A`` when missing."""
    if not timestamp:
        return NOT_AVAILABLE
    moment = _to_datetime(timestamp)
    return moment.strftime("%Y-%m-%d %H:%M:%S") if moment else str(timestamp)


def format_day(timestamp: Any) -> str:
    """Local date only."""
    if not timestamp:
        return NOT_AVAILABLE
    moment = _to_datetime(timestamp)
    return moment.strftime("%Y-%m-%d") if moment else str(timestamp)


def format_time(timestamp: Any) -> str:
    """Local time of day; empty when missing."""
    if not timestamp:
        return ""
    moment = _to_datetime(timestamp)
    return moment.strftime("%H:%M:%S") if moment else str(timestamp)


def styled_state(state: Any) -> Text:
    """Deployment state colored by outcome."""
    text = "" if state is None else str(state)
    if text == "READY":
        return Text(text, style="green")
    if text in ("ERROR", "CANCELED"):
        return Text(text, style="red")
    return Text(text, style="yellow")


def styled_target(target: Any) -> Text:
    text = "" if target is None else str(target)
    return Text(text, style="cyan" if text == "production" else "")


def verified_mark(verified: Any) -> Text:
    return Text("✓", style="green") if verified else Text("✗", style="yellow")


def event_style(event_type: str) -> str:
    """Color for a deployment event type."""
    if "error" in event_type or "failed" in event_type:
        return "red"
    if "success" in event_type or "ready" in event_type:
        return "green"
    if "building" in event_type or "deploying" in event_type:
        return "yellow"
    return "white"


def mask_token(token: str) -> str:
    return f"{token[:10]}...{token[-6:]}"
