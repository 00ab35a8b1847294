"""US economic indicator tools (GDP, rates, prices, labor)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tools._helpers import _clamp_limit, _format_dated_values, _query, tool_annotations

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

EconomicInterval = Literal["daily", "weekly", "monthly", "quarterly", "annual", "semiannual"]
Maturity = Literal["3month", "2year", "5year", "7year", "10year", "30year"]

# (tool name, function code, title, description, extra params)
INDICATORS = [
    ("get-real-gdp", "REAL_GDP", "Real GDP",
     "Get real gross domestic product (GDP) of the United States", ("interval",)),
    ("get-real-gdp-per-capita", "REAL_GDP_PER_CAPITA", "Real GDP per Capita",
     "Get real GDP per capita of the United States", ()),
    ("get-treasury-yield", "TREASURY_YIELD", "Treasury Yield",
     "Get U.S. treasury yield of a given maturity", ("interval", "maturity")),
    ("get-federal-funds-rate", "FEDERAL_FUNDS_RATE", "Federal Funds Rate",
     "Get federal funds rate in the United States", ("interval",)),
    ("get-cpi", "CPI", "Consumer Price Index",
     "Get consumer price index (CPI) of the United States", ("interval",)),
    ("get-inflation", "INFLATION", "Inflation",
     "Get annual inflation rates (consumer prices) of the United States", ()),
    ("get-retail-sales", "RETAIL_SALES", "Retail Sales",
     "Get advance estimates of U.S. retail and food services sales", ()),
    ("get-durable-goods-orders", "DURABLES", "Durable Goods Orders",
     "Get U.S. manufacturers' new orders of durable goods", ()),
    ("get-unemployment-rate", "UNEMPLOYMENT", "Unemployment Rate",
     "Get monthly unemployment data of the United States", ()),
    ("get-nonfarm-payroll", "NONFARM_PAYROLL", "Nonfarm Payroll",
     "Get monthly US All Employees: Total Nonfarm (Nonfarm Payroll)", ()),
]

PARAM_DOCS = {
    "interval": "    interval: Time interval between data points (default depends on the indicator)",
    "maturity": "    maturity: Treasury maturity (default 10year)",
    "limit": "    limit: Number of data points to display (default 10)",
}


def _format_economic(data: dict, limit: int = 10) -> str:
    return _format_dated_values(data, limit, "No economic indicator data available")


def _describe(description: str, params: tuple[str, ...]) -> str:
    args = [PARAM_DOCS[p] for p in (*params, "limit")]
    return "\n".join([description, "", "Args:", *args])


def _register_indicator(mcp: FastMCP, client: AlphaVantageClient, name: str, function: str,
                        title: str, description: str, params: tuple[str, ...]) -> None:
    failure = f"Error: Failed to fetch {title} data."

    async def fetch(limit: int, **extra) -> str:
        data = await client.get_safe(_query(function, **extra))
        if data is None:
            return failure
        return _format_economic(data, _clamp_limit(limit, 10))

    # Only the parameters an indicator accepts are exposed in its schema.
    if "maturity" in params:
        async def indicator(
            interval: EconomicInterval | None = None,
            maturity: Maturity | None = None,
            limit: int = 10,
        ) -> str:
            return await fetch(limit, interval=interval, maturity=maturity)
    elif "interval" in params:
        async def indicator(interval: EconomicInterval | None = None, limit: int = 10) -> str:
            return await fetch(limit, interval=interval)
    else:
        async def indicator(limit: int = 10) -> str:
            return await fetch(limit)

    mcp.tool(name=name, description=_describe(description, params), annotations=tool_annotations(title))(indicator)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    for name, function, title, description, params in INDICATORS:
        _register_indicator(mcp, client, name, function, title, description, params)
