"""Commodity price tools (energy, metals, agriculture, global index)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tools._helpers import _clamp_limit, _format_dated_values, _query, tool_annotations

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

CommodityInterval = Literal["daily", "weekly", "monthly", "quarterly", "annual"]

# (tool name, function code, title, description)
COMMODITIES = [
    ("get-wti", "WTI", "WTI Crude Oil", "Get West Texas Intermediate (WTI) crude oil prices"),
    ("get-brent", "BRENT", "Brent Crude Oil", "Get Brent (Europe) crude oil prices"),
    ("get-natural-gas", "NATURAL_GAS", "Natural Gas", "Get natural gas prices"),
    ("get-copper", "COPPER", "Copper", "Get global copper prices"),
    ("get-aluminum", "ALUMINUM", "Aluminum", "Get global aluminum prices"),
    ("get-wheat", "WHEAT", "Wheat", "Get global wheat prices"),
    ("get-corn", "CORN", "Corn", "Get global corn prices"),
    ("get-cotton", "COTTON", "Cotton", "Get global cotton prices"),
    ("get-sugar", "SUGAR", "Sugar", "Get global sugar prices"),
    ("get-coffee", "COFFEE", "Coffee", "Get global coffee prices"),
    ("get-global-commodities-index", "ALL_COMMODITIES", "Global Commodities Index",
     "Get global price index of all commodities"),
]

PARAM_DOCS = """

Args:
    interval: Time interval between data points (default monthly)
    limit: Number of data points to display (default 10)
"""


def _format_commodity(data: dict, limit: int = 10) -> str:
    return _format_dated_values(data, limit, "No commodity data available")


def _register_commodity(mcp: FastMCP, client: AlphaVantageClient, name: str, function: str,
                        title: str, description: str) -> None:
    failure = f"Error: Failed to fetch {title} data."

    @mcp.tool(name=name, description=description + PARAM_DOCS, annotations=tool_annotations(title))
    async def commodity_prices(interval: CommodityInterval = "monthly", limit: int = 10) -> str:
        data = await client.get_safe(_query(function, interval=interval))
        if data is None:
            return failure
        return _format_commodity(data, _clamp_limit(limit, 10))


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    for name, function, title, description in COMMODITIES:
        _register_commodity(mcp, client, name, function, title, description)
