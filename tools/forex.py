"""Foreign exchange tools: realtime rates and FX time series."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tools._helpers import (
    _clamp_limit,
    _month_label,
    _more_trailer,
    _newest_first,
    _provider_message,
    _query,
    _v,
    tool_annotations,
)

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

FxSeriesType = Literal["daily", "weekly", "monthly"]
OutputSize = Literal["compact", "full"]


def _format_exchange_rate(data: dict, title: str = "Exchange Rate Information") -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    rate = data.get("Realtime Currency Exchange Rate")
    if not rate:
        return "No exchange rate data available"

    refreshed = f"{_v(rate, '6. Last Refreshed')} {rate.get('7. Time Zone') or ''}".rstrip()
    return "\n".join([
        f"== {title} ==",
        f"From: {_v(rate, '1. From_Currency Code')} ({_v(rate, '2. From_Currency Name')})",
        f"To: {_v(rate, '3. To_Currency Code')} ({_v(rate, '4. To_Currency Name')})",
        f"Exchange Rate: {_v(rate, '5. Exchange Rate')}",
        f"Bid Price: {_v(rate, '8. Bid Price')}",
        f"Ask Price: {_v(rate, '9. Ask Price')}",
        f"Last Refreshed: {refreshed}",
    ])


def _daily_heading(day: str) -> str:
    return f"== {day} =="


def _weekly_heading(day: str) -> str:
    return f"== Week Ending {day} =="


def _monthly_heading(day: str) -> str:
    return f"== {_month_label(day) or day} ({day}) =="


# series_type -> (function code, series key, title, refreshed key, time zone key, heading, unit)
FX_SERIES = {
    "daily": ("FX_DAILY", "Time Series FX (Daily)", "Daily",
              "5. Last Refreshed", "6. Time Zone", _daily_heading, "days"),
    "weekly": ("FX_WEEKLY", "Time Series FX (Weekly)", "Weekly",
               "4. Last Refreshed", "5. Time Zone", _weekly_heading, "weeks"),
    "monthly": ("FX_MONTHLY", "Time Series FX (Monthly)", "Monthly",
                "4. Last Refreshed", "5. Time Zone", _monthly_heading, "months"),
}


def _format_fx_series(data: dict, series_type: str, limit: int = 10) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    _, series_key, title, refreshed_key, tz_key, heading, unit = FX_SERIES[series_type]
    meta = data.get("Meta Data")
    series = data.get(series_key)
    if not meta or not series:
        return f"No {title.lower()} FX time series data available"

    lines = [
        f"== {title} FX Time Series for {_v(meta, '2. From Symbol')}/{_v(meta, '3. To Symbol')} ==",
        f"Last Refreshed: {_v(meta, refreshed_key)}",
        f"Time Zone: {_v(meta, tz_key)}",
        "",
    ]

    dates = _newest_first(series)
    for day in dates[:limit]:
        bar = series[day]
        lines.append(heading(day))
        lines.append(f"Open: {_v(bar, '1. open')}")
        lines.append(f"High: {_v(bar, '2. high')}")
        lines.append(f"Low: {_v(bar, '3. low')}")
        lines.append(f"Close: {_v(bar, '4. close')}")
        lines.append("")

    trailer = _more_trailer(len(dates), limit, unit)
    if trailer:
        lines.append(trailer)

    return "\n".join(lines)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-exchange-rate", annotations=tool_annotations("Exchange Rate"))
    async def get_exchange_rate(from_currency: str, to_currency: str) -> str:
        """Get the realtime exchange rate for any pair of digital or physical currencies.

        Args:
            from_currency: The source currency (e.g. USD, BTC)
            to_currency: The target currency (e.g. JPY, EUR)
        """
        data = await client.get_safe(
            _query("CURRENCY_EXCHANGE_RATE", from_currency=from_currency, to_currency=to_currency)
        )
        if data is None:
            return "Error: Failed to fetch exchange rate data."
        return _format_exchange_rate(data)

    @mcp.tool(name="get-fx-series", annotations=tool_annotations("FX Time Series"))
    async def get_fx_series(
        series_type: FxSeriesType,
        from_symbol: str,
        to_symbol: str,
        outputsize: OutputSize = "compact",
        limit: int = 10,
    ) -> str:
        """Get daily, weekly or monthly time series data for a forex currency pair.

        Args:
            series_type: The type of time series data to retrieve
            from_symbol: The source currency (e.g. EUR)
            to_symbol: The target currency (e.g. USD)
            outputsize: "compact" (last 100 data points) or "full"; daily series only
            limit: Number of data points to display (default 10)
        """
        function = FX_SERIES[series_type][0]
        data = await client.get_safe(_query(
            function,
            from_symbol=from_symbol,
            to_symbol=to_symbol,
            outputsize=outputsize if series_type == "daily" else None,
        ))
        if data is None:
            return f"Error: Failed to fetch {series_type} FX data."
        return _format_fx_series(data, series_type, _clamp_limit(limit, 10))
