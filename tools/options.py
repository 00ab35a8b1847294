"""Options chain tools: realtime and historical contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tools._helpers import _provider_message, _query, _to_float, _v, tool_annotations

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

DataType = Literal["json", "csv"]


def _contract_lines(option: dict, expiration: str, with_greeks: bool) -> list[str]:
    option_type = (option.get("type") or "unknown").upper()
    lines = [
        f"\n{option.get('symbol')} {expiration} {option.get('strike')} {option_type} ({option.get('contractID')})",
        f"Last: {_v(option, 'last', 'N/A')} | Mark: {_v(option, 'mark', 'N/A')}",
        f"Bid: {_v(option, 'bid', 'N/A')} ({_v(option, 'bid_size', 'N/A')}) | "
        f"Ask: {_v(option, 'ask', 'N/A')} ({_v(option, 'ask_size', 'N/A')})",
        f"Volume: {_v(option, 'volume', 'N/A')} | Open Interest: {_v(option, 'open_interest', 'N/A')}",
    ]
    if with_greeks:
        lines.append(
            f"IV: {_v(option, 'implied_volatility', 'N/A')} | Delta: {_v(option, 'delta', 'N/A')} | "
            f"Gamma: {_v(option, 'gamma', 'N/A')}"
        )
        lines.append(
            f"Theta: {_v(option, 'theta', 'N/A')} | Vega: {_v(option, 'vega', 'N/A')} | Rho: {_v(option, 'rho', 'N/A')}"
        )
    return lines


def _chain_lines(options: list[dict], always_greeks: bool) -> list[str]:
    """Contracts grouped by expiration (ascending), each group sorted by strike."""
    lines = []
    for expiration in sorted({str(o.get("expiration")) for o in options}):
        lines.append(f"\n== Expiration: {expiration} ==")
        group = [o for o in options if str(o.get("expiration")) == expiration]
        group.sort(key=lambda o: _to_float(o.get("strike")) or 0.0)
        for option in group:
            lines.extend(_contract_lines(option, expiration, always_greeks or bool(option.get("implied_volatility"))))
    return lines


def _format_realtime_options(data: dict) -> str:
    msg = _provider_message(data, with_message=True, success_ok=True)
    if msg:
        return msg

    options = data.get("data")
    if not options:
        return "No options data available"

    lines = [f"{data.get('endpoint') or 'Realtime Options'}\n"]
    lines.extend(_chain_lines(options, always_greeks=False))
    return "\n".join(lines)


def _format_historical_options(data: dict) -> str:
    msg = _provider_message(data, with_message=True, success_ok=True)
    if msg:
        return msg

    options = data.get("data")
    if not options:
        return "No historical options data available"

    trade_date = options[0].get("date") or "Unknown Date"
    lines = [f"{data.get('endpoint') or 'Historical Options'} - {trade_date}\n"]
    lines.extend(_chain_lines(options, always_greeks=True))
    return "\n".join(lines)


async def _fetch_chain(client: AlphaVantageClient, params: dict, datatype: str | None):
    if datatype == "csv":
        return await client.get_csv_safe(params)
    return await client.get_safe(params)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-realtime-options", annotations=tool_annotations("Realtime Options"))
    async def get_realtime_options(
        symbol: str,
        require_greeks: bool | None = None,
        contract: str | None = None,
        datatype: DataType | None = None,
    ) -> str:
        """Get realtime US options data with full market coverage, sorted by expiration date and strike.

        Args:
            symbol: The name of the equity (e.g. IBM)
            require_greeks: Enable greeks and implied volatility fields (default false)
            contract: Specific US options contract ID
            datatype: Response format (default json)
        """
        params = _query("REALTIME_OPTIONS", symbol=symbol, require_greeks=require_greeks, contract=contract or None)
        data = await _fetch_chain(client, params, datatype)
        if data is None:
            return "Failed to fetch options data. Please try again later."
        return _format_realtime_options(data)

    @mcp.tool(name="get-historical-options", annotations=tool_annotations("Historical Options"))
    async def get_historical_options(
        symbol: str,
        date: str | None = None,
        datatype: DataType | None = None,
    ) -> str:
        """Get historical options data (15+ years) with implied volatility and greeks.

        Args:
            symbol: The name of the equity (e.g. IBM)
            date: Specific date in YYYY-MM-DD format (default previous trading session)
            datatype: Response format (default json)
        """
        params = _query("HISTORICAL_OPTIONS", symbol=symbol, date=date or None)
        data = await _fetch_chain(client, params, datatype)
        if data is None:
            return "Failed to fetch historical options data. Please try again later."
        return _format_historical_options(data)
