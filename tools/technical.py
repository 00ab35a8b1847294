"""Technical indicator tools.

Five unified tools select the indicator by an enum which is sent as the
``function`` code. All indicator values are computed by Alpha Vantage;
these tools only render them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tools._helpers import _clamp_limit, _newest_first, _provider_message, _query, tool_annotations

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

Interval = Literal["1min", "5min", "15min", "30min", "60min", "daily", "weekly", "monthly"]
SeriesType = Literal["close", "open", "high", "low"]
MovingAverage = Literal["SMA", "EMA", "WMA", "DEMA", "TEMA", "TRIMA", "KAMA", "MAMA", "VWAP", "T3"]
MomentumIndicator = Literal[
    "MACD", "MACDEXT", "STOCH", "STOCHF", "RSI", "STOCHRSI", "WILLR",
    "ADX", "ADXR", "APO", "PPO", "MOM", "BOP", "CCI", "CMO", "ROC", "ROCR",
]
VolatilityIndicator = Literal["BBANDS", "MIDPOINT", "MIDPRICE", "SAR", "TRANGE", "ATR", "NATR"]
VolumeIndicator = Literal["AD", "ADOSC", "OBV"]
CycleIndicator = Literal["HT_TRENDLINE", "HT_SINE", "HT_TRENDMODE", "HT_DCPERIOD", "HT_DCPHASE", "HT_PHASOR"]

# Indicators whose data points carry several named values
MULTI_VALUE_INDICATORS = frozenset({
    "BBANDS", "MACD", "MACDEXT", "STOCH", "STOCHF", "STOCHRSI",
    "AROON", "MAMA", "HT_SINE", "HT_PHASOR",
})


def _analysis_key(data: dict) -> str | None:
    return next((key for key in data if key.startswith("Technical Analysis:")), None)


def _header(meta: dict) -> list[str]:
    lines = [
        f"== {meta.get('2: Indicator') or 'Unknown Indicator'} ({meta.get('1: Symbol') or 'Unknown'}) ==",
        f"Last Refreshed: {meta.get('3: Last Refreshed') or 'Unknown'}",
    ]
    for label, key in (("Interval", "4: Interval"), ("Time Period", "5: Time Period"),
                       ("Series Type", "6: Series Type")):
        if meta.get(key):
            lines.append(f"{label}: {meta[key]}")
    return lines


def _format_technical(data: dict, indicator: str, limit: int = 10) -> str:
    """Render a technical indicator payload.

    Multi-value indicators get one block per date listing every value;
    single-value indicators get one ``date: KEY = value`` line per date.
    """
    msg = _provider_message(data)
    if msg:
        return msg

    meta = data.get("Meta Data")
    if not meta:
        return "No technical indicator data available"

    key = _analysis_key(data)
    series = data.get(key) if key else None
    if not series:
        return "No technical analysis data available"

    lines = _header(meta)
    dates = _newest_first(series)
    value_keys = list(series[dates[0]])

    if indicator in MULTI_VALUE_INDICATORS:
        for day in dates[:limit]:
            lines.append(f"== {day} ==")
            lines.extend(f"{k}: {series[day].get(k)}" for k in value_keys)
            lines.append("")
        if len(dates) > limit:
            lines.append(f"... and {len(dates) - limit} more data points (showing latest {limit} only)")
    else:
        value_key = value_keys[0]
        for day in dates[:limit]:
            lines.append(f"{day}: {value_key} = {series[day].get(value_key)}")
        if len(dates) > limit:
            lines.append(f"\n... and {len(dates) - limit} more data points (showing latest {limit} only)")

    return "\n".join(lines)


async def _fetch_indicator(client: AlphaVantageClient, indicator: str, limit: int, **params) -> str:
    data = await client.get_safe(_query(indicator, **params))
    if data is None:
        return f"Error: Failed to fetch {indicator} data."
    return _format_technical(data, indicator, _clamp_limit(limit, 10))


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-moving-average", annotations=tool_annotations("Moving Average"))
    async def get_moving_average(
        ma_type: MovingAverage,
        symbol: str,
        interval: Interval,
        time_period: int | None = None,
        series_type: SeriesType | None = None,
        fastlimit: float | None = None,
        slowlimit: float | None = None,
        limit: int = 10,
    ) -> str:
        """Get moving averages (SMA, EMA, WMA, DEMA, TEMA, TRIMA, KAMA, MAMA, VWAP, T3).

        Args:
            ma_type: The type of moving average
            symbol: The stock or forex symbol (e.g. IBM, MSFT, USDEUR)
            interval: Time interval between data points
            time_period: Number of data points used for calculation (required for most MA types)
            series_type: The price series to use (default close)
            fastlimit: Upper limit used in the adaptive algorithm (MAMA only, default 0.5)
            slowlimit: Lower limit used in the adaptive algorithm (MAMA only, default 0.05)
            limit: Number of data points to display (default 10)
        """
        return await _fetch_indicator(
            client, ma_type, limit,
            symbol=symbol, interval=interval, time_period=time_period,
            series_type=series_type, fastlimit=fastlimit, slowlimit=slowlimit,
        )

    @mcp.tool(name="get-momentum-indicator", annotations=tool_annotations("Momentum Indicator"))
    async def get_momentum_indicator(
        indicator_type: MomentumIndicator,
        symbol: str,
        interval: Interval,
        time_period: int | None = None,
        series_type: SeriesType | None = None,
        fastperiod: int | None = None,
        slowperiod: int | None = None,
        signalperiod: int | None = None,
        fastmatype: int | None = None,
        slowmatype: int | None = None,
        signalmatype: int | None = None,
        fastkperiod: int | None = None,
        slowkperiod: int | None = None,
        slowdperiod: int | None = None,
        slowkmatype: int | None = None,
        slowdmatype: int | None = None,
        fastdperiod: int | None = None,
        fastdmatype: int | None = None,
        matype: int | None = None,
        limit: int = 10,
    ) -> str:
        """Get momentum indicators (MACD, MACDEXT, STOCH, STOCHF, RSI, STOCHRSI, WILLR, ADX, ADXR,
        APO, PPO, MOM, BOP, CCI, CMO, ROC, ROCR).

        MA type codes: 0=SMA, 1=EMA, 2=WMA, 3=DEMA, 4=TEMA, 5=TRIMA.

        Args:
            indicator_type: The momentum indicator
            symbol: The stock or forex symbol (e.g. IBM, MSFT, USDEUR)
            interval: Time interval between data points
            time_period: Number of data points used for calculation (required for most indicators)
            series_type: The price series to use (default close)
            fastperiod: Fast period for MACD/MACDEXT/APO/PPO (default 12)
            slowperiod: Slow period for MACD/MACDEXT/APO/PPO (default 26)
            signalperiod: Signal period for MACD/MACDEXT (default 9)
            fastmatype: Fast MA type (MACDEXT)
            slowmatype: Slow MA type (MACDEXT)
            signalmatype: Signal MA type (MACDEXT)
            fastkperiod: Fast K period for STOCH/STOCHF/STOCHRSI (default 5)
            slowkperiod: Slow K period for STOCH (default 3)
            slowdperiod: Slow D period for STOCH (default 3)
            slowkmatype: Slow K MA type (STOCH)
            slowdmatype: Slow D MA type (STOCH)
            fastdperiod: Fast D period for STOCHF/STOCHRSI (default 3)
            fastdmatype: Fast D MA type (STOCHF/STOCHRSI)
            matype: MA type for APO/PPO
            limit: Number of data points to display (default 10)
        """
        return await _fetch_indicator(
            client, indicator_type, limit,
            symbol=symbol, interval=interval, time_period=time_period, series_type=series_type,
            fastperiod=fastperiod, slowperiod=slowperiod, signalperiod=signalperiod,
            fastmatype=fastmatype, slowmatype=slowmatype, signalmatype=signalmatype,
            fastkperiod=fastkperiod, slowkperiod=slowkperiod, slowdperiod=slowdperiod,
            slowkmatype=slowkmatype, slowdmatype=slowdmatype,
            fastdperiod=fastdperiod, fastdmatype=fastdmatype, matype=matype,
        )

    @mcp.tool(name="get-volatility-indicator", annotations=tool_annotations("Volatility Indicator"))
    async def get_volatility_indicator(
        indicator_type: VolatilityIndicator,
        symbol: str,
        interval: Interval,
        series_type: SeriesType | None = None,
        time_period: int | None = None,
        nbdevup: float | None = None,
        nbdevdn: float | None = None,
        matype: int | None = None,
        acceleration: float | None = None,
        maximum: float | None = None,
        limit: int = 10,
    ) -> str:
        """Get volatility indicators (BBANDS, MIDPOINT, MIDPRICE, SAR, TRANGE, ATR, NATR).

        Args:
            indicator_type: The volatility indicator
            symbol: The stock or forex symbol (e.g. IBM, MSFT, USDEUR)
            interval: Time interval between data points
            series_type: The price series to use (default close)
            time_period: Number of data points for calculation (BBANDS, MIDPOINT, MIDPRICE, ATR, NATR)
            nbdevup: Standard deviations above the middle band (BBANDS, default 2)
            nbdevdn: Standard deviations below the middle band (BBANDS, default 2)
            matype: MA type for the middle band (0=SMA, 1=EMA, 2=WMA, 3=DEMA, 4=TEMA, 5=TRIMA)
            acceleration: Acceleration factor (SAR, default 0.02)
            maximum: Maximum acceleration factor (SAR, default 0.2)
            limit: Number of data points to display (default 10)
        """
        return await _fetch_indicator(
            client, indicator_type, limit,
            symbol=symbol, interval=interval, series_type=series_type, time_period=time_period,
            nbdevup=nbdevup, nbdevdn=nbdevdn, matype=matype,
            acceleration=acceleration, maximum=maximum,
        )

    @mcp.tool(name="get-volume-indicator", annotations=tool_annotations("Volume Indicator"))
    async def get_volume_indicator(
        indicator_type: VolumeIndicator,
        symbol: str,
        interval: Interval,
        fastperiod: int | None = None,
        slowperiod: int | None = None,
        limit: int = 10,
    ) -> str:
        """Get volume indicators (AD, ADOSC, OBV).

        Args:
            indicator_type: The volume indicator
            symbol: The stock or forex symbol (e.g. IBM, MSFT, USDEUR)
            interval: Time interval between data points
            fastperiod: Fast period for ADOSC (default 3)
            slowperiod: Slow period for ADOSC (default 10)
            limit: Number of data points to display (default 10)
        """
        return await _fetch_indicator(
            client, indicator_type, limit,
            symbol=symbol, interval=interval, fastperiod=fastperiod, slowperiod=slowperiod,
        )

    @mcp.tool(name="get-cycle-indicator", annotations=tool_annotations("Cycle Indicator"))
    async def get_cycle_indicator(
        indicator_type: CycleIndicator,
        symbol: str,
        interval: Interval,
        series_type: SeriesType | None = None,
        limit: int = 10,
    ) -> str:
        """Get Hilbert Transform cycle indicators (HT_TRENDLINE, HT_SINE, HT_TRENDMODE,
        HT_DCPERIOD, HT_DCPHASE, HT_PHASOR).

        Args:
            indicator_type: The Hilbert Transform indicator
            symbol: The stock or forex symbol (e.g. IBM, MSFT, USDEUR)
            interval: Time interval between data points
            series_type: The price series to use (default close)
            limit: Number of data points to display (default 10)
        """
        return await _fetch_indicator(
            client, indicator_type, limit,
            symbol=symbol, interval=interval, series_type=series_type,
        )
