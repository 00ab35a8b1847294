"""Alpha Intelligence tools: news sentiment, transcripts, movers, insiders, analytics."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tools._helpers import _provider_message, _query, _to_float, _v, tool_annotations

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

NewsSort = Literal["LATEST", "EARLIEST", "RELEVANCE"]
AnalyticsInterval = Literal["1min", "5min", "15min", "30min", "60min", "DAILY", "WEEKLY", "MONTHLY"]
Ohlc = Literal["open", "high", "low", "close"]

MAX_INSIDER_ROWS = 10


# --- News -----------------------------------------------------------------


def _format_time_published(value: str | None) -> str:
    """``20240410T013000`` -> ``2024-04-10 01:30``."""
    if not value:
        return ""
    if len(value) < 13:
        return value
    return f"{value[0:4]}-{value[4:6]}-{value[6:8]} {value[9:11]}:{value[11:13]}"


def _format_news(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    feed = data.get("feed")
    if not feed:
        return "No news data available"

    lines = ["Market News & Sentiment"]
    if data.get("sentiment_score_definition"):
        lines.append(f"\nSentiment Score: {data['sentiment_score_definition']}")
    if data.get("relevance_score_definition"):
        lines.append(f"Relevance Score: {data['relevance_score_definition']}")
    total = f"(of {data['items']} total)" if data.get("items") else ""
    lines.append(f"\nShowing {len(feed)} articles {total}".rstrip())

    for i, article in enumerate(feed, 1):
        lines.append(f"\n=== Article {i} ===")
        lines.append(f"Title: {_v(article, 'title', 'N/A')}")
        lines.append(f"Published: {_format_time_published(article.get('time_published')) or 'N/A'}")
        category = f" ({article['category_within_source']})" if article.get("category_within_source") else ""
        lines.append(f"Source: {_v(article, 'source', 'N/A')}{category}")
        if article.get("authors"):
            lines.append(f"Authors: {', '.join(article['authors'])}")
        lines.append(f"URL: {_v(article, 'url', 'N/A')}")
        if article.get("summary"):
            lines.append(f"\nSummary: {article['summary']}")
        lines.append(
            f"Overall Sentiment: {_v(article, 'overall_sentiment_label', 'N/A')} "
            f"({_v(article, 'overall_sentiment_score', 'N/A')})"
        )
        if article.get("topics"):
            lines.append("\nTopics:")
            for topic in article["topics"]:
                lines.append(f"- {_v(topic, 'topic', 'N/A')} (Relevance: {_v(topic, 'relevance_score', 'N/A')})")
        if article.get("ticker_sentiment"):
            lines.append("\nTicker Sentiment:")
            for ts in article["ticker_sentiment"]:
                lines.append(
                    f"- {_v(ts, 'ticker', 'N/A')}: {_v(ts, 'ticker_sentiment_label', 'N/A')} "
                    f"(Score: {_v(ts, 'ticker_sentiment_score', 'N/A')}, "
                    f"Relevance: {_v(ts, 'relevance_score', 'N/A')})"
                )

    return "\n".join(lines)


# --- Transcripts ----------------------------------------------------------


def _format_transcript(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    segments = data.get("transcript")
    if not segments:
        return "No transcript data available"

    scores = [_to_float(seg.get("sentiment")) for seg in segments]
    scores = [s for s in scores if s is not None]
    average = f"{sum(scores) / len(scores):.2f}" if scores else "N/A"

    lines = [
        f"Earnings Call Transcript: {data.get('symbol')} - {data.get('quarter')}",
        f"Overall Sentiment Score: {average}",
        "\n--- Transcript ---",
    ]
    for i, seg in enumerate(segments):
        lines.append(f"\n[{_v(seg, 'speaker')} - {_v(seg, 'title', 'No Title')}]")
        lines.append(f"Sentiment: {_v(seg, 'sentiment', 'N/A')}")
        lines.append(f"\n{_v(seg, 'content', 'No content available')}")
        if i < len(segments) - 1:
            lines.append("\n---")

    return "\n".join(lines)


# --- Market movers --------------------------------------------------------


def _format_volume(value: str | None) -> str:
    if not value:
        return "N/A"
    try:
        volume = int(float(value))
    except (ValueError, OverflowError):
        return value
    if volume >= 1_000_000_000:
        return f"{volume / 1_000_000_000:.2f}B"
    if volume >= 1_000_000:
        return f"{volume / 1_000_000:.2f}M"
    if volume >= 1_000:
        return f"{volume:,}"
    return value


MOVER_SECTIONS = (
    ("top_gainers", "TOP GAINERS"),
    ("top_losers", "TOP LOSERS"),
    ("most_actively_traded", "MOST ACTIVELY TRADED"),
)


def _format_top_movers(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    lines = [
        data.get("metadata") or "Top Gainers, Losers, and Most Actively Traded US Tickers",
        f"Last Updated: {_v(data, 'last_updated', 'N/A')}",
    ]
    for key, title in MOVER_SECTIONS:
        tickers = data.get(key) or []
        if not tickers:
            continue
        lines.append(f"\n=== {title} ===")
        for i, ticker in enumerate(tickers, 1):
            lines.append(f"\n{i}. {_v(ticker, 'ticker', 'N/A')}")
            lines.append(f"   Price: ${_v(ticker, 'price', 'N/A')}")
            lines.append(
                f"   Change: {_v(ticker, 'change_amount', 'N/A')} ({_v(ticker, 'change_percentage', 'N/A')})"
            )
            lines.append(f"   Volume: {_format_volume(ticker.get('volume'))}")

    return "\n".join(lines)


# --- Insider transactions -------------------------------------------------


def _format_insider_transactions(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    transactions = data.get("data")
    if not transactions:
        return "No insider transactions data available"

    lines = [f"Insider Transactions for {_v(transactions[0], 'ticker')}"]
    # Provider order, no sorting
    for tx in transactions[:MAX_INSIDER_ROWS]:
        lines.append(f"\n=== {_v(tx, 'transaction_date', 'Unknown Date')} ===")
        kind = {"A": "ACQUISITION", "D": "DISPOSAL"}.get(tx.get("acquisition_or_disposal"), "TRANSACTION")
        lines.append(f"\n{_v(tx, 'executive', 'Unknown Executive')} ({_v(tx, 'executive_title', 'Unknown Title')})")
        lines.append(f"Type: {kind} of {_v(tx, 'security_type', 'Securities')}")
        shares = tx.get("shares") or "0"
        price = tx.get("share_price") or "0"
        total = (_to_float(shares) or 0.0) * (_to_float(price) or 0.0)
        lines.append(f"Shares: {shares} @ ${price} = ${total:,.2f}")

    return "\n".join(lines)


# --- Advanced analytics ---------------------------------------------------


def _matrix_lines(calc: dict) -> list[str]:
    index = calc.get("index") or []
    matrix = calc.get("correlation") or calc.get("covariance") or []
    if not index or not matrix:
        return ["No matrix data available"]

    lines = [" " * 11 + "".join(str(name).rjust(12) for name in index)]
    for i, name in enumerate(index):
        row = str(name).ljust(10)
        for j in range(i + 1):
            row += f"{matrix[i][j]:.4f}".rjust(12)
        lines.append(row)
    return lines


def _histogram_lines(calc: dict) -> list[str]:
    bins = calc.get("bins") or []
    counts = calc.get("counts") or {}
    if not bins or not counts:
        return ["No histogram data available"]

    lines = ["Bin Range    " + "  ".join(symbol.rjust(8) for symbol in counts)]
    for i in range(len(bins) - 1):
        row = f"{bins[i]:.3f} to {bins[i + 1]:.3f}".ljust(12)
        for symbol_counts in counts.values():
            count = symbol_counts[i] if i < len(symbol_counts) else 0
            row += str(count or 0).rjust(8) + "  "
        lines.append(row)
    return lines


def _format_metric(calc_type: str, value) -> str:
    if not isinstance(value, int | float) or isinstance(value, bool):
        return str(value)
    if calc_type == "CUMULATIVE_RETURN" or "DRAWDOWN" in calc_type:
        return f"{value * 100:.2f}%"
    if calc_type in ("VARIANCE", "STDDEV"):
        return f"{value:.6f}"
    return f"{value:.4f}"


def _format_analytics(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg

    meta = data.get("meta_data")
    payload = data.get("payload")
    if not meta or not payload:
        return "No analytics data available"

    lines = [
        "Advanced Analytics (Fixed Window)",
        f"\nSymbols: {_v(meta, 'symbols', 'N/A')}",
        f"Date Range: {_v(meta, 'min_dt', 'N/A')} to {_v(meta, 'max_dt', 'N/A')}",
        f"Data Type: {_v(meta, 'ohlc', 'Close')}",
        f"Interval: {_v(meta, 'interval', 'N/A')}",
    ]

    calculations = payload.get("RETURNS_CALCULATIONS")
    if not calculations:
        return "\n".join(lines) + "\n\nNo calculations data available"

    lines.append("\n=== CALCULATIONS ===")
    for calc_type, calc in calculations.items():
        lines.append(f"\n--- {calc_type} ---")
        if calc_type in ("CORRELATION", "COVARIANCE"):
            lines.extend(_matrix_lines(calc))
        elif calc_type == "HISTOGRAM":
            lines.extend(_histogram_lines(calc))
        elif isinstance(calc, dict):
            lines.extend(f"{symbol}: {_format_metric(calc_type, value)}" for symbol, value in calc.items())
        else:
            lines.append(str(calc))

    return "\n".join(lines)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-market-news-sentiment", annotations=tool_annotations("News & Sentiment"))
    async def get_market_news_sentiment(
        tickers: str | None = None,
        topics: str | None = None,
        time_from: str | None = None,
        time_to: str | None = None,
        sort: NewsSort | None = None,
        limit: int | None = None,
    ) -> str:
        """Get market news and sentiment from premier news outlets covering stocks, crypto, forex and topics.

        Supported topics: blockchain, earnings, ipo, mergers_and_acquisitions, financial_markets,
        economy_fiscal, economy_monetary, economy_macro, energy_transportation, finance,
        life_sciences, manufacturing, real_estate, retail_wholesale, technology.

        Args:
            tickers: Symbols to filter articles by (e.g. "IBM" or "COIN,CRYPTO:BTC,FOREX:USD")
            topics: Topics to filter by (e.g. "technology" or "technology,ipo")
            time_from: Start time in YYYYMMDDTHHMM format (e.g. "20220410T0130")
            time_to: End time in YYYYMMDDTHHMM format
            sort: Sort order (default LATEST)
            limit: Maximum number of results (default 50, max 1000)
        """
        data = await client.get_safe(_query(
            "NEWS_SENTIMENT",
            tickers=tickers or None,
            topics=topics or None,
            time_from=time_from or None,
            time_to=time_to or None,
            sort=sort,
            limit=limit,
        ))
        if data is None:
            return "Failed to fetch market news and sentiment data. Please try again later."
        return _format_news(data)

    @mcp.tool(name="get-earnings-call-transcript", annotations=tool_annotations("Earnings Call Transcript"))
    async def get_earnings_call_transcript(symbol: str, quarter: str) -> str:
        """Get an earnings call transcript with sentiment signals (15+ years of history).

        Args:
            symbol: The symbol of the company (e.g. IBM)
            quarter: Fiscal quarter in YYYYQN format (e.g. 2024Q1)
        """
        data = await client.get_safe(_query("EARNINGS_CALL_TRANSCRIPT", symbol=symbol, quarter=quarter))
        if data is None:
            return "Failed to fetch earnings call transcript data. Please try again later."
        return _format_transcript(data)

    @mcp.tool(name="get-top-gainers-losers", annotations=tool_annotations("Top Gainers & Losers"))
    async def get_top_gainers_losers() -> str:
        """Get the top 20 gainers, losers, and most actively traded US tickers."""
        data = await client.get_safe(_query("TOP_GAINERS_LOSERS"))
        if data is None:
            return "Failed to fetch top gainers, losers, and active tickers data. Please try again later."
        return _format_top_movers(data)

    @mcp.tool(name="get-insider-transactions", annotations=tool_annotations("Insider Transactions"))
    async def get_insider_transactions(symbol: str) -> str:
        """Get latest and historical insider transactions by key stakeholders of a company.

        Args:
            symbol: The symbol of the company (e.g. IBM)
        """
        data = await client.get_safe(_query("INSIDER_TRANSACTIONS", symbol=symbol))
        if data is None:
            return "Failed to fetch insider transactions data. Please try again later."
        return _format_insider_transactions(data)

    @mcp.tool(name="get-advanced-analytics", annotations=tool_annotations("Advanced Analytics"))
    async def get_advanced_analytics(
        symbols: str,
        range: list[str],
        interval: AnalyticsInterval,
        calculations: str,
        ohlc: Ohlc | None = None,
    ) -> str:
        """Get advanced analytics metrics (returns, variance, correlation, ...) over a fixed window.

        Supported calculations: MIN, MAX, MEAN, MEDIAN, CUMULATIVE_RETURN, VARIANCE, STDDEV,
        MAX_DRAWDOWN, HISTOGRAM, AUTOCORRELATION, COVARIANCE, CORRELATION.

        Args:
            symbols: Comma-separated list of symbols (e.g. "IBM,AAPL,MSFT")
            range: One value (start date) or two values (start and end dates)
            interval: Time interval between data points
            calculations: Comma-separated list of metrics to calculate
            ohlc: Price field used for calculations (default close)
        """
        if not 1 <= len(range) <= 2:
            return "Error: range must contain one or two values."
        data = await client.get_safe(_query(
            "ANALYTICS_FIXED_WINDOW",
            SYMBOLS=symbols,
            RANGE=list(range),
            INTERVAL=interval,
            CALCULATIONS=calculations,
            OHLC=ohlc,
        ))
        if data is None:
            return "Failed to fetch advanced analytics data. Please try again later."
        return _format_analytics(data)
