"""Alpha Vantage MCP - market data tools for stocks, fundamentals, FX, crypto and macro."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastmcp import FastMCP

from alphavantage_client import AlphaVantageClient
from tools import commodities, core, crypto, economic, forex, fundamental, intelligence, options, technical

API_KEY_ENV = "ALPHA_VANTAGE_API_KEY"

logger = logging.getLogger(__name__)


def resolve_api_key() -> tuple[str, list[str]]:
    """Resolve the Alpha Vantage API key.

    Resolution order:
    1) Process environment
    2) .env in the working directory
    3) Repo-local .env
    4) Parent .env

    .env files never override variables already set in the environment.
    Returns the key (empty if not found) and the locations checked.
    """
    checked = [f"process env ({API_KEY_ENV})"]
    key = os.environ.get(API_KEY_ENV)
    if key:
        return key, checked

    repo_root = Path(__file__).resolve().parent
    candidates = [Path.cwd() / ".env", repo_root / ".env", repo_root.parent / ".env"]

    seen: set[Path] = set()
    for dotenv_path in candidates:
        dotenv_path = dotenv_path.resolve()
        if dotenv_path in seen:
            continue
        seen.add(dotenv_path)
        checked.append(str(dotenv_path))
        if not dotenv_path.exists():
            continue

        load_dotenv(dotenv_path=dotenv_path, override=False)
        key = os.environ.get(API_KEY_ENV)
        if key:
            return key, checked

    return "", checked


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@asynccontextmanager
async def lifespan(server):
    """Manage client lifecycle."""
    yield
    await client.close()


mcp = FastMCP(
    "alphavantage_mcp",
    instructions=(
        "Alpha Vantage market data. Core tools cover quotes, symbol search, market status "
        "and adjusted price history. Fundamental tools cover company overview, statements, "
        "earnings, dividends, splits and IPO/earnings calendars. Also available: forex, "
        "crypto, commodities, US economic indicators, technical indicators, options chains, "
        "news sentiment, earnings call transcripts, insider transactions and advanced analytics. "
        "Rate-limit notes from Alpha Vantage are returned verbatim."
    ),
    lifespan=lifespan,
)

api_key, _checked = resolve_api_key()
if not api_key:
    raise RuntimeError(
        f"{API_KEY_ENV} is required. Checked: " + " -> ".join(_checked)
    )

client = AlphaVantageClient(
    api_key=api_key,
    timeout=_env_int("ALPHA_VANTAGE_TIMEOUT", 30),
)

# Register tool modules
core.register(mcp, client)
fundamental.register(mcp, client)
forex.register(mcp, client)
crypto.register(mcp, client)
commodities.register(mcp, client)
economic.register(mcp, client)
technical.register(mcp, client)
options.register(mcp, client)
intelligence.register(mcp, client)


def main() -> None:
    # stdout carries the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("ALPHA_VANTAGE_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting alphavantage_mcp over stdio")
    mcp.run()


if __name__ == "__main__":
    main()
