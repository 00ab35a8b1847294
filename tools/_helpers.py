"""Shared helpers for Alpha Vantage tool modules."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any


def tool_annotations(title: str) -> dict:
    """Standard annotations for read-only market data tools."""
    return {
        "title": title,
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    }


def _provider_message(data: Any, *, with_message: bool = False, success_ok: bool = False) -> str | None:
    """Render a provider message (rate limit note, bad call) if the payload is one.

    ``Information`` and ``Error Message`` become ``Error: ...``, ``Note``
    becomes ``Note: ...``. With ``with_message`` a ``message`` field is also
    surfaced, except the literal ``success`` when ``success_ok`` is set.
    """
    if not isinstance(data, dict):
        return None
    if data.get("Information"):
        return f"Error: {data['Information']}"
    if data.get("Error Message"):
        return f"Error: {data['Error Message']}"
    if data.get("Note"):
        return f"Note: {data['Note']}"
    if with_message and data.get("message"):
        if not (success_ok and data["message"] == "success"):
            return f"Message: {data['message']}"
    return None


def _v(record: dict | None, key: str, fallback: str = "Unknown") -> Any:
    """Field lookup with a display fallback for missing or empty values."""
    if not isinstance(record, dict):
        return fallback
    value = record.get(key)
    if value is None or value == "":
        return fallback
    return value


def _to_float(value: Any) -> float | None:
    """Parse provider numbers (strings, ``"None"``, ``"-"``) into floats."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def _to_date(value: Any) -> date | None:
    """Coerce date-like values (date/datetime/ISO string) to date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value_str = str(value)
    if "T" in value_str:
        value_str = value_str.split("T", 1)[0]
    else:
        value_str = value_str.split(" ", 1)[0]
    try:
        return date.fromisoformat(value_str)
    except ValueError:
        return None


def _fmt_int(value: Any, fallback: str = "Unknown") -> str:
    """Whole number with thousands separators (``1,234,567``)."""
    num = _to_float(value)
    if not value or num is None:
        return fallback
    return f"{int(num):,}"


def _fmt_pct(value: Any, fallback: str = "Unknown") -> str:
    """Ratio rendered as a percentage with two decimals (``0.2531`` -> ``25.31%``)."""
    num = _to_float(value)
    if not value or num is None:
        return fallback
    return f"{num * 100:.2f}%"


def _month_label(value: Any) -> str | None:
    d = _to_date(value)
    return d.strftime("%B %Y") if d else None


def _quarter_label(value: Any) -> str | None:
    d = _to_date(value)
    return f"Q{(d.month - 1) // 3 + 1} {d.year}" if d else None


def _short_date(value: Any) -> str:
    """US short date (``4/24/2025``)."""
    d = _to_date(value)
    if d is None:
        return str(value)
    return f"{d.month}/{d.day}/{d.year}"


def _period_label(value: Any, interval: str | None) -> str:
    """Label a dated data point according to the series interval."""
    label = None
    if interval == "monthly":
        label = _month_label(value)
    elif interval == "quarterly":
        label = _quarter_label(value)
    elif interval in ("annual", "yearly"):
        d = _to_date(value)
        label = str(d.year) if d else None
    elif interval == "semiannual":
        d = _to_date(value)
        label = f"{'H1' if d.month <= 6 else 'H2'} {d.year}" if d else None
    return label or str(value)


def _newest_first(series: dict) -> list[str]:
    """Series keys (ISO dates or timestamps) sorted newest first."""
    return sorted(series, reverse=True)


def _clamp_limit(limit: int | None, default: int) -> int:
    if limit is None:
        return default
    return max(1, limit)


def _more_trailer(total: int, limit: int, unit: str, *, show: str = "last", suffix: str | None = None) -> str | None:
    """``... and N more <unit> (showing last L <suffix> only)`` when truncated."""
    if total <= limit:
        return None
    return f"... and {total - limit} more {unit} (showing {show} {limit} {suffix or unit} only)"


def _format_dated_values(data: dict, limit: int, empty: str) -> str:
    """Render a ``{name, interval, unit, data: [{date, value}]}`` series.

    Used by the commodity and economic indicator endpoints, which share
    this payload shape. Points keep the provider order (newest first).
    """
    msg = _provider_message(data)
    if msg:
        return msg

    points = data.get("data") or []
    if not data.get("name") or not points:
        return empty

    interval = data.get("interval")
    unit = data.get("unit") or ""
    lines = [
        f"== {data['name']} ==",
        f"Interval: {interval or 'Unknown'}",
        f"Unit: {unit or 'Unknown'}",
        "",
    ]
    for point in points[:limit]:
        lines.append(f"{_period_label(point.get('date'), interval)}: {point.get('value')} {unit}".rstrip())

    if len(points) > limit:
        lines.append(f"\n... and {len(points) - limit} more data points (showing latest {limit} only)")

    return "\n".join(lines)


def _param(value: Any) -> str:
    """Stringify a tool argument for the query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _query(function: str, **params: Any) -> dict[str, Any]:
    """Build query params, dropping arguments that were not supplied.

    List values stay lists so httpx sends them as repeated keys.
    """
    query: dict[str, Any] = {"function": function}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            query[key] = [_param(v) for v in value]
        else:
            query[key] = _param(value)
    return query
