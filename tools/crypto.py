"""Cryptocurrency tools: exchange rates and digital currency time series."""

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
from tools.forex import _format_exchange_rate

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

CryptoSeriesType = Literal["intraday", "daily", "weekly", "monthly"]
IntradayInterval = Literal["1min", "5min", "15min", "30min", "60min"]
OutputSize = Literal["compact", "full"]

FUNCTIONS = {
    "intraday": "CRYPTO_INTRADAY",
    "daily": "DIGITAL_CURRENCY_DAILY",
    "weekly": "DIGITAL_CURRENCY_WEEKLY",
    "monthly": "DIGITAL_CURRENCY_MONTHLY",
}

# series_type -> (series key, title, heading template, unit)
DIGITAL_SERIES = {
    "daily": ("Time Series (Digital Currency Daily)", "Daily", "== {date} ==", "days"),
    "weekly": ("Time Series (Digital Currency Weekly)", "Weekly", "== Week Ending {date} ==", "weeks"),
    "monthly": ("Time Series (Digital Currency Monthly)", "Monthly", "== {month} ({date}) ==", "months"),
}

PRICE_FIELDS = (("1", "open", "Open"), ("2", "high", "High"), ("3", "low", "Low"), ("4", "close", "Close"))


def _format_crypto_intraday(data: dict, limit: int = 10) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    meta = data.get("Meta Data")
    series = data.get("Time Series Crypto")
    if not meta or not series:
        return "No intraday cryptocurrency time series data available"

    lines = [
        f"== {meta.get('7. Interval') or ''} Intraday Cryptocurrency Data for "
        f"{_v(meta, '2. Digital Currency Code')} ({_v(meta, '3. Digital Currency Name')}) ==",
        f"Market: {_v(meta, '4. Market Code')} ({_v(meta, '5. Market Name')})",
        f"Last Refreshed: {_v(meta, '6. Last Refreshed')}",
        f"Time Zone: {_v(meta, '9. Time Zone')}",
        "",
    ]

    timestamps = _newest_first(series)
    for ts in timestamps[:limit]:
        bar = series[ts]
        lines.append(f"== {ts} ==")
        lines.append(f"Open: {_v(bar, '1. open')}")
        lines.append(f"High: {_v(bar, '2. high')}")
        lines.append(f"Low: {_v(bar, '3. low')}")
        lines.append(f"Close: {_v(bar, '4. close')}")
        lines.append(f"Volume: {_v(bar, '5. volume')}")
        lines.append("")

    if len(timestamps) > limit:
        lines.append(f"... and {len(timestamps) - limit} more data points (showing last {limit} only)")

    return "\n".join(lines)


def _format_digital_currency(data: dict, series_type: str, limit: int = 10) -> str:
    """Daily/weekly/monthly digital currency series quoted in USD and the market currency."""
    msg = _provider_message(data)
    if msg:
        return msg

    series_key, title, heading, unit = DIGITAL_SERIES[series_type]
    meta = data.get("Meta Data")
    series = data.get(series_key)
    if not meta or not series:
        return f"No {title.lower()} cryptocurrency time series data available"

    market = _v(meta, "4. Market Code")
    lines = [
        f"== {title} Cryptocurrency Data for {_v(meta, '2. Digital Currency Code')} "
        f"({_v(meta, '3. Digital Currency Name')}) ==",
        f"Market: {market} ({_v(meta, '5. Market Name')})",
        f"Last Refreshed: {_v(meta, '6. Last Refreshed')}",
        f"Time Zone: {_v(meta, '7. Time Zone')}",
        "",
    ]

    dates = _newest_first(series)
    for day in dates[:limit]:
        bar = series[day]
        lines.append(heading.format(date=day, month=_month_label(day) or day))
        for num, field, label in PRICE_FIELDS:
            lines.append(f"{label} (USD): {_v(bar, f'{num}a. {field} (USD)')}")
            market_value = bar.get(f"{num}b. {field} ({market})") or _v(bar, f"{num}b. {field} (EUR)")
            lines.append(f"{label} ({market}): {market_value}")
        lines.append(f"Volume: {_v(bar, '5. volume')}")
        lines.append(f"Market Cap (USD): {_v(bar, '6. market cap (USD)')}")
        lines.append("")

    trailer = _more_trailer(len(dates), limit, unit)
    if trailer:
        lines.append(trailer)

    return "\n".join(lines)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-crypto-exchange-rate", annotations=tool_annotations("Crypto Exchange Rate"))
    async def get_crypto_exchange_rate(from_currency: str, to_currency: str) -> str:
        """Get the realtime exchange rate for a digital currency against any other currency.

        Args:
            from_currency: The source currency (e.g. BTC)
            to_currency: The target currency (e.g. USD)
        """
        data = await client.get_safe(
            _query("CURRENCY_EXCHANGE_RATE", from_currency=from_currency, to_currency=to_currency)
        )
        if data is None:
            return "Error: Failed to fetch crypto exchange rate data."
        return _format_exchange_rate(data, "Cryptocurrency Exchange Rate Information")

    @mcp.tool(name="get-digital-currency", annotations=tool_annotations("Digital Currency Series"))
    async def get_digital_currency(
        series_type: CryptoSeriesType,
        symbol: str,
        market: str,
        interval: IntradayInterval | None = None,
        outputsize: OutputSize = "compact",
        limit: int = 10,
    ) -> str:
        """Get time series data for a digital currency (intraday, daily, weekly or monthly).

        Args:
            series_type: The type of time series data to retrieve
            symbol: The cryptocurrency symbol (e.g. BTC)
            market: The exchange market (e.g. USD)
            interval: Time interval between data points (required for intraday)
            outputsize: "compact" (last 100 data points) or "full"; intraday only
            limit: Number of data points to display (default 10)
        """
        params = _query(FUNCTIONS[series_type], symbol=symbol, market=market)
        if series_type == "intraday":
            if not interval:
                return "Error: interval parameter is required for intraday data."
            params.update(interval=interval, outputsize=outputsize)

        data = await client.get_safe(params)
        if data is None:
            return f"Error: Failed to fetch {series_type} cryptocurrency data."

        limit = _clamp_limit(limit, 10)
        if series_type == "intraday":
            return _format_crypto_intraday(data, limit)
        return _format_digital_currency(data, series_type, limit)
