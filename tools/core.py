"""Core stock tools: quotes, symbol search, market status, price time series."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Literal
from zoneinfo import ZoneInfo

from tools._helpers import (
    _clamp_limit,
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

IntradayInterval = Literal["1min", "5min", "15min", "30min", "60min"]
OutputSize = Literal["compact", "full"]

CLOCK_ZONES = (
    ("UTC Time", "UTC"),
    ("Eastern Time (ET)", "America/New_York"),
    ("Pacific Time (PT)", "America/Los_Angeles"),
)


def _format_clock(moment: datetime) -> str:
    """``Mon, Oct 19, 2026, 10:20:33 AM``"""
    hour = moment.hour % 12 or 12
    return f"{moment:%a}, {moment:%b} {moment.day}, {moment.year}, {hour}:{moment:%M:%S %p}"


def _format_current_time(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return "\n".join(
        f"{label}: {_format_clock(now.astimezone(ZoneInfo(zone)))}"
        for label, zone in CLOCK_ZONES
    )


def _format_quote(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    quote = data.get("Global Quote")
    if not quote:
        return "No quote data available"

    return "\n".join([
        f"Symbol: {_v(quote, '01. symbol')}",
        f"Price: {_v(quote, '05. price')}",
        f"Open: {_v(quote, '02. open')}",
        f"High: {_v(quote, '03. high')}",
        f"Low: {_v(quote, '04. low')}",
        f"Volume: {_v(quote, '06. volume')}",
        f"Trading Day: {_v(quote, '07. latest trading day')}",
        f"Previous Close: {_v(quote, '08. previous close')}",
        f"Change: {_v(quote, '09. change')} ({_v(quote, '10. change percent')})",
    ])


def _format_search_results(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    matches = data.get("bestMatches")
    if not matches:
        return "No matching symbols found"

    blocks = []
    for match in matches:
        blocks.append("\n".join([
            f"Symbol: {_v(match, '1. symbol')}",
            f"Name: {_v(match, '2. name')}",
            f"Type: {_v(match, '3. type')}",
            f"Region: {_v(match, '4. region')}",
            f"Currency: {_v(match, '8. currency')}",
            f"Match Score: {_v(match, '9. matchScore')}",
        ]))
    return "\n\n".join(blocks)


def _format_market_status(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    markets = data.get("markets")
    if not markets:
        return "No market status data available"

    lines = [f"{data.get('endpoint') or 'Global Market Open & Close Status'}\n"]

    # Group by market type, keeping first-seen order
    by_type: dict[str, list[dict]] = {}
    for market in markets:
        by_type.setdefault(market.get("market_type"), []).append(market)

    for market_type, group in by_type.items():
        lines.append(f"\n== {market_type} Markets ==")
        for market in group:
            status = market.get("current_status")
            lines.append(f"\nRegion: {_v(market, 'region')}")
            lines.append(f"Exchanges: {_v(market, 'primary_exchanges')}")
            lines.append(f"Hours: {_v(market, 'local_open', '?')} - {_v(market, 'local_close', '?')}")
            lines.append(f"Status: {status.upper() if status else 'Unknown'}")
            if market.get("notes"):
                lines.append(f"Notes: {market['notes']}")

    return "\n".join(lines)


def _format_bulk_quotes(data: dict) -> str:
    msg = _provider_message(data, with_message=True)
    if msg:
        return msg

    quotes = data.get("data")
    if not quotes:
        return "No quote data available"

    lines = [f"{data.get('endpoint') or 'Realtime Bulk Quotes'}\n"]
    for quote in quotes:
        lines.append(f"\n== {_v(quote, 'symbol')} ==")
        lines.append(f"Timestamp: {_v(quote, 'timestamp')}")
        lines.append(f"Price: {_v(quote, 'close')}")
        lines.append(f"Open: {_v(quote, 'open')}")
        lines.append(f"High: {_v(quote, 'high')}")
        lines.append(f"Low: {_v(quote, 'low')}")
        lines.append(f"Volume: {_v(quote, 'volume')}")
        lines.append(f"Previous Close: {_v(quote, 'previous_close')}")
        lines.append(f"Change: {_v(quote, 'change')} ({_v(quote, 'change_percent')}%)")

        if quote.get("extended_hours_quote"):
            lines.append(f"\nExtended Hours Price: {quote['extended_hours_quote']}")
            lines.append(
                f"Extended Hours Change: {_v(quote, 'extended_hours_change')} "
                f"({_v(quote, 'extended_hours_change_percent')}%)"
            )

    return "\n".join(lines)


# series key, title, meta keys (output size, time zone), period heading, unit
_ADJUSTED_SERIES = {
    "monthly": {
        "series_key": "Monthly Adjusted Time Series",
        "title": "Monthly Adjusted Time Series",
        "output_size_key": None,
        "time_zone_key": "4. Time Zone",
        "heading": "== {date} ==",
        "unit": "months",
        "split": False,
    },
    "weekly": {
        "series_key": "Weekly Adjusted Time Series",
        "title": "Weekly Adjusted Time Series",
        "output_size_key": None,
        "time_zone_key": "4. Time Zone",
        "heading": "== Week ending {date} ==",
        "unit": "weeks",
        "split": False,
    },
    "daily": {
        "series_key": "Time Series (Daily)",
        "title": "Daily Adjusted Time Series",
        "output_size_key": "4. Output Size",
        "time_zone_key": "5. Time Zone",
        "heading": "== {date} ==",
        "unit": "days",
        "split": True,
    },
}


def _format_adjusted_series(data: dict, period: str, limit: int) -> str:
    """Shared formatter for monthly/weekly/daily adjusted price series."""
    msg = _provider_message(data)
    if msg:
        return msg

    layout = _ADJUSTED_SERIES[period]
    meta = data.get("Meta Data")
    series = data.get(layout["series_key"])
    if not meta or not series:
        return "No time series data available"

    lines = [
        f"{layout['title']} for {_v(meta, '2. Symbol')}",
        f"Last Refreshed: {_v(meta, '3. Last Refreshed')}",
    ]
    if layout["output_size_key"]:
        lines.append(f"Output Size: {_v(meta, layout['output_size_key'])}")
    lines.append(f"Time Zone: {_v(meta, layout['time_zone_key'])}")
    lines.append("")

    dates = _newest_first(series)
    for day in dates[:limit]:
        bar = series[day]
        lines.append(layout["heading"].format(date=day))
        lines.append(f"Open: {_v(bar, '1. open')}")
        lines.append(f"High: {_v(bar, '2. high')}")
        lines.append(f"Low: {_v(bar, '3. low')}")
        lines.append(f"Close: {_v(bar, '4. close')}")
        lines.append(f"Adjusted Close: {_v(bar, '5. adjusted close')}")
        lines.append(f"Volume: {_v(bar, '6. volume')}")
        lines.append(f"Dividend: {_v(bar, '7. dividend amount', '0.0000')}")
        if layout["split"]:
            lines.append(f"Split Coefficient: {_v(bar, '8. split coefficient', '1.0')}")
        lines.append("")

    trailer = _more_trailer(len(dates), limit, layout["unit"])
    if trailer:
        lines.append(trailer)

    return "\n".join(lines)


def _format_intraday(data: dict, limit: int = 20) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    meta = data.get("Meta Data")
    if not meta:
        return "No meta data available"

    interval = _v(meta, "4. Interval")
    series = data.get(f"Time Series ({interval})")
    if not series:
        return f"No time series data available for interval: {interval}"

    lines = [
        f"Intraday ({interval}) Time Series for {_v(meta, '2. Symbol')}",
        f"Last Refreshed: {_v(meta, '3. Last Refreshed')}",
        f"Output Size: {_v(meta, '5. Output Size')}",
        f"Time Zone: {_v(meta, '6. Time Zone')}",
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

    trailer = _more_trailer(len(timestamps), limit, "data points", suffix="intervals")
    if trailer:
        lines.append(trailer)

    return "\n".join(lines)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-current-time", annotations=tool_annotations("Current Time"))
    async def get_current_time() -> str:
        """Get the current date and time in UTC, Eastern Time (ET), and Pacific Time (PT)."""
        return _format_current_time()

    @mcp.tool(name="get-stock-quote", annotations=tool_annotations("Stock Quote"))
    async def get_stock_quote(symbol: str) -> str:
        """Get the latest price and volume information for a ticker symbol.

        Args:
            symbol: The stock symbol to look up (e.g. "IBM", "AAPL", "MSFT")
        """
        data = await client.get_safe(_query("GLOBAL_QUOTE", symbol=symbol, datatype="json"))
        if data is None:
            return "Failed to retrieve quote data"
        return _format_quote(data)

    @mcp.tool(name="search-ticker", annotations=tool_annotations("Ticker Search"))
    async def search_ticker(keywords: str) -> str:
        """Search for stock symbols based on keywords.

        Args:
            keywords: The search keywords (e.g. "Microsoft", "Tesla", "Banking")
        """
        data = await client.get_safe(_query("SYMBOL_SEARCH", keywords=keywords, datatype="json"))
        if data is None:
            return "Failed to retrieve search results"
        return _format_search_results(data)

    @mcp.tool(name="get-market-status", annotations=tool_annotations("Market Status"))
    async def get_market_status() -> str:
        """Get the current market status (open vs. closed) of major trading venues worldwide."""
        data = await client.get_safe(_query("MARKET_STATUS", datatype="json"))
        if data is None:
            return "Failed to retrieve market status data"
        return _format_market_status(data)

    @mcp.tool(name="get-bulk-quotes", annotations=tool_annotations("Bulk Quotes"))
    async def get_bulk_quotes(symbols: str) -> str:
        """Get realtime quotes for multiple US-traded symbols in bulk (up to 100 symbols).

        Args:
            symbols: Up to 100 ticker symbols separated by commas (e.g. "MSFT,AAPL,IBM")
        """
        data = await client.get_safe(_query("REALTIME_BULK_QUOTES", symbol=symbols, datatype="json"))
        if data is None:
            return "Failed to retrieve bulk quotes data"
        return _format_bulk_quotes(data)

    @mcp.tool(name="get-monthly-adjusted", annotations=tool_annotations("Monthly Adjusted Prices"))
    async def get_monthly_adjusted(symbol: str, months: int | None = None) -> str:
        """Get monthly adjusted time series data (20+ years of historical data) for a stock symbol.

        Args:
            symbol: The stock symbol to look up (e.g. "IBM")
            months: Number of months to display (default 12)
        """
        data = await client.get_safe(_query("TIME_SERIES_MONTHLY_ADJUSTED", symbol=symbol, datatype="json"))
        if data is None:
            return "Failed to retrieve monthly adjusted time series data"
        return _format_adjusted_series(data, "monthly", _clamp_limit(months, 12))

    @mcp.tool(name="get-weekly-adjusted", annotations=tool_annotations("Weekly Adjusted Prices"))
    async def get_weekly_adjusted(symbol: str, weeks: int | None = None) -> str:
        """Get weekly adjusted time series data (20+ years of historical data) for a stock symbol.

        Args:
            symbol: The stock symbol to look up (e.g. "IBM")
            weeks: Number of weeks to display (default 12)
        """
        data = await client.get_safe(_query("TIME_SERIES_WEEKLY_ADJUSTED", symbol=symbol, datatype="json"))
        if data is None:
            return "Failed to retrieve weekly adjusted time series data"
        return _format_adjusted_series(data, "weekly", _clamp_limit(weeks, 12))

    @mcp.tool(name="get-daily-adjusted", annotations=tool_annotations("Daily Adjusted Prices"))
    async def get_daily_adjusted(
        symbol: str,
        outputsize: OutputSize = "compact",
        days: int | None = None,
    ) -> str:
        """Get daily adjusted time series data with splits and dividend events for a stock symbol.

        Args:
            symbol: The stock symbol to look up (e.g. "IBM")
            outputsize: "compact" = last 100 data points (default), "full" = 20+ years of data
            days: Number of days to display (default 20)
        """
        data = await client.get_safe(
            _query("TIME_SERIES_DAILY_ADJUSTED", symbol=symbol, outputsize=outputsize, datatype="json")
        )
        if data is None:
            return "Failed to retrieve daily adjusted time series data"
        return _format_adjusted_series(data, "daily", _clamp_limit(days, 20))

    @mcp.tool(name="get-intraday", annotations=tool_annotations("Intraday Prices"))
    async def get_intraday(
        symbol: str,
        interval: IntradayInterval,
        adjusted: bool | None = None,
        extended_hours: bool | None = None,
        month: str | None = None,
        outputsize: OutputSize | None = None,
        datapoints: int | None = None,
    ) -> str:
        """Get intraday time series data (OHLCV) for a stock symbol.

        Args:
            symbol: The stock symbol to look up (e.g. "IBM")
            interval: Time interval between data points
            adjusted: Whether to return split/dividend adjusted data (provider default true)
            extended_hours: Whether to include pre/post market data (provider default true)
            month: Specific month in YYYY-MM format (e.g. "2009-01")
            outputsize: "compact" = last 100 data points, "full" = trailing 30 days or full month
            datapoints: Number of data points to display (default 20)
        """
        data = await client.get_safe(_query(
            "TIME_SERIES_INTRADAY",
            symbol=symbol,
            interval=interval,
            datatype="json",
            adjusted=adjusted,
            extended_hours=extended_hours,
            month=month or None,
            outputsize=outputsize,
        ))
        if data is None:
            return "Failed to retrieve intraday time series data"
        return _format_intraday(data, _clamp_limit(datapoints, 20))
