"""Shared test fixtures."""

from __future__ import annotations

import pytest
import respx

from fastmcp import FastMCP

from alphavantage_client import AlphaVantageClient

BASE_URL = "https://www.alphavantage.co"
QUERY_URL = f"{BASE_URL}/query"


def build_test_client(api_key: str = "test_key") -> AlphaVantageClient:
    return AlphaVantageClient(api_key=api_key, timeout=10)


def make_server(register_fn) -> tuple[FastMCP, AlphaVantageClient]:
    """Create a FastMCP server with one tool module registered."""
    mcp = FastMCP("Test")
    client = build_test_client()
    register_fn(mcp, client)
    return mcp, client


@pytest.fixture
def av_client():
    """Create an AlphaVantageClient with a test API key."""
    return build_test_client()


@pytest.fixture
def mock_api():
    """Start respx mock for Alpha Vantage calls (client unit tests only)."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as api:
        yield api


RATE_LIMIT = {
    "Information": "Thank you for using Alpha Vantage! Our standard API rate limit is 25 requests per day.",
}

# --- Core ---

IBM_QUOTE = {
    "Global Quote": {
        "01. symbol": "IBM",
        "02. open": "245.0000",
        "03. high": "247.5000",
        "04. low": "244.1000",
        "05. price": "246.8000",
        "06. volume": "3456789",
        "07. latest trading day": "2025-04-24",
        "08. previous close": "244.9000",
        "09. change": "1.9000",
        "10. change percent": "0.7758%",
    }
}

IBM_SEARCH = {
    "bestMatches": [
        {
            "1. symbol": "IBM",
            "2. name": "International Business Machines Corp",
            "3. type": "Equity",
            "4. region": "United States",
            "8. currency": "USD",
            "9. matchScore": "1.0000",
        },
        {
            "1. symbol": "IBM.DEX",
            "2. name": "International Business Machines Corp",
            "3. type": "Equity",
            "4. region": "XETRA",
            "8. currency": "EUR",
            "9. matchScore": "0.7500",
        },
    ]
}

MARKET_STATUS = {
    "endpoint": "Global Market Open & Close Status",
    "markets": [
        {
            "market_type": "Equity",
            "region": "United States",
            "primary_exchanges": "NASDAQ, NYSE, AMEX, BATS",
            "local_open": "09:30",
            "local_close": "16:15",
            "current_status": "open",
            "notes": "",
        },
        {
            "market_type": "Forex",
            "region": "Global",
            "primary_exchanges": "Global",
            "local_open": "",
            "local_close": "",
            "current_status": "open",
            "notes": "Trades 24/5",
        },
        {
            "market_type": "Equity",
            "region": "Japan",
            "primary_exchanges": "Tokyo",
            "local_open": "09:00",
            "local_close": "15:00",
            "current_status": "closed",
            "notes": "",
        },
    ],
}

BULK_QUOTES = {
    "endpoint": "Realtime Bulk Quotes",
    "message": "",
    "data": [
        {
            "symbol": "MSFT",
            "timestamp": "2025-04-24 16:00:00.000",
            "open": "400.00",
            "high": "405.00",
            "low": "398.50",
            "close": "404.20",
            "volume": "21000000",
            "previous_close": "399.10",
            "change": "5.10",
            "change_percent": "1.278",
            "extended_hours_quote": "405.00",
            "extended_hours_change": "0.80",
            "extended_hours_change_percent": "0.198",
        },
        {
            "symbol": "AAPL",
            "timestamp": "2025-04-24 16:00:00.000",
            "open": "200.00",
            "high": "202.00",
            "low": "199.00",
            "close": "201.50",
            "volume": "45000000",
            "previous_close": "200.10",
            "change": "1.40",
            "change_percent": "0.700",
        },
    ],
}

IBM_MONTHLY_ADJUSTED = {
    "Meta Data": {
        "1. Information": "Monthly Adjusted Prices and Volumes",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2025-04-24",
        "4. Time Zone": "US/Eastern",
    },
    "Monthly Adjusted Time Series": {
        "2025-02-28": {
            "1. open": "263.0000", "2. high": "265.7200", "3. low": "241.0000", "4. close": "252.4400",
            "5. adjusted close": "250.7700", "6. volume": "82321455", "7. dividend amount": "1.6700",
        },
        "2025-04-24": {
            "1. open": "243.0000", "2. high": "249.0000", "3. low": "214.5000", "4. close": "245.4800",
            "5. adjusted close": "245.4800", "6. volume": "80012321", "7. dividend amount": "0.0000",
        },
        "2025-03-31": {
            "1. open": "253.0000", "2. high": "256.5000", "3. low": "240.0000", "4. close": "248.6600",
            "5. adjusted close": "248.6600", "6. volume": "81000000", "7. dividend amount": "0.0000",
        },
    },
}

IBM_DAILY_ADJUSTED = {
    "Meta Data": {
        "1. Information": "Daily Time Series with Splits and Dividend Events",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2025-04-24",
        "4. Output Size": "Compact",
        "5. Time Zone": "US/Eastern",
    },
    "Time Series (Daily)": {
        "2025-04-24": {
            "1. open": "243.0000", "2. high": "249.0000", "3. low": "242.0000", "4. close": "245.4800",
            "5. adjusted close": "245.4800", "6. volume": "5000000", "7. dividend amount": "0.0000",
            "8. split coefficient": "1.0",
        },
        "2025-04-23": {
            "1. open": "240.0000", "2. high": "244.0000", "3. low": "239.5000", "4. close": "243.0000",
            "5. adjusted close": "243.0000", "6. volume": "4800000", "7. dividend amount": "0.0000",
            "8. split coefficient": "1.0",
        },
    },
}

IBM_INTRADAY = {
    "Meta Data": {
        "1. Information": "Intraday (5min) open, high, low, close prices and volume",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2025-04-24 19:55:00",
        "4. Interval": "5min",
        "5. Output Size": "Compact",
        "6. Time Zone": "US/Eastern",
    },
    "Time Series (5min)": {
        "2025-04-24 19:50:00": {
            "1. open": "245.1000", "2. high": "245.2000", "3. low": "245.0000", "4. close": "245.1500",
            "5. volume": "120",
        },
        "2025-04-24 19:55:00": {
            "1. open": "245.1500", "2. high": "245.3000", "3. low": "245.1000", "4. close": "245.2500",
            "5. volume": "300",
        },
        "2025-04-24 19:45:00": {
            "1. open": "245.0000", "2. high": "245.1000", "3. low": "244.9000", "4. close": "245.1000",
            "5. volume": "95",
        },
    },
}

# --- Fundamentals ---

IBM_OVERVIEW = {
    "Symbol": "IBM",
    "AssetType": "Common Stock",
    "Name": "International Business Machines",
    "Exchange": "NYSE",
    "Currency": "USD",
    "Country": "USA",
    "Sector": "TECHNOLOGY",
    "Industry": "COMPUTER & OFFICE EQUIPMENT",
    "MarketCapitalization": "227551256000",
    "EBITDA": "14632000000",
    "PERatio": "38.35",
    "ProfitMargin": "0.0963",
    "OperatingMarginTTM": "0.145",
    "DividendPerShare": "6.68",
    "DividendYield": "0.0272",
    "Beta": "0.699",
    "AnalystTargetPrice": "249.85",
    "AnalystRatingStrongBuy": "2",
    "AnalystRatingBuy": "7",
    "AnalystRatingHold": "9",
}

QQQ_PROFILE = {
    "net_assets": "315000000000",
    "net_expense_ratio": "0.002",
    "portfolio_turnover": "0.08",
    "dividend_yield": "0.0057",
    "inception_date": "1999-03-10",
    "leveraged": "NO",
    "sectors": [
        {"sector": "INFORMATION TECHNOLOGY", "weight": "0.511"},
        {"sector": "COMMUNICATION SERVICES", "weight": "0.158"},
    ],
    "holdings": [
        {"symbol": f"SYM{i}", "description": f"Holding {i}", "weight": "0.01"}
        for i in range(1, 13)
    ],
}

IBM_DIVIDENDS = {
    "symbol": "IBM",
    "data": [
        {"ex_dividend_date": "2099-05-09", "declaration_date": "2099-04-29",
         "record_date": "2099-05-09", "payment_date": "2099-06-10", "amount": "1.68"},
        {"ex_dividend_date": "2025-02-10", "declaration_date": "2025-01-28",
         "record_date": "2025-02-10", "payment_date": "2025-03-10", "amount": "1.67"},
        {"ex_dividend_date": "2024-11-12", "declaration_date": "2024-10-29",
         "record_date": "2024-11-12", "payment_date": "2024-12-10", "amount": "1.67"},
        {"ex_dividend_date": "2024-08-09", "declaration_date": "2024-07-30",
         "record_date": "2024-08-09", "payment_date": "2024-09-10", "amount": "1.67"},
        {"ex_dividend_date": "None", "declaration_date": "None",
         "record_date": "None", "payment_date": "None", "amount": "0.50"},
    ],
}

IBM_SPLITS = {
    "symbol": "IBM",
    "data": [
        {"effective_date": "1973-05-29", "split_factor": "1.25"},
        {"effective_date": "1979-06-01", "split_factor": "4.0"},
        {"effective_date": "1997-05-28", "split_factor": "2.0"},
        {"effective_date": "1999-05-27", "split_factor": "2.0"},
    ],
}

IBM_INCOME = {
    "symbol": "IBM",
    "annualReports": [
        {
            "fiscalDateEnding": "2024-12-31",
            "reportedCurrency": "USD",
            "totalRevenue": "62753000000",
            "costOfRevenue": "27202000000",
            "grossProfit": "35551000000",
            "operatingIncome": "10074000000",
            "netIncome": "6023000000",
            "researchAndDevelopment": "None",
        },
        {
            "fiscalDateEnding": "2023-12-31",
            "reportedCurrency": "USD",
            "totalRevenue": "61860000000",
            "costOfRevenue": "27560000000",
            "grossProfit": "34300000000",
            "operatingIncome": "9000000000",
            "netIncome": "7502000000",
        },
    ],
    "quarterlyReports": [
        {
            "fiscalDateEnding": "2024-12-31",
            "reportedCurrency": "USD",
            "totalRevenue": "17553000000",
            "grossProfit": "10399000000",
            "netIncome": "2915000000",
        },
        {
            "fiscalDateEnding": "2024-09-30",
            "reportedCurrency": "USD",
            "totalRevenue": "14968000000",
            "grossProfit": "8421000000",
            "netIncome": "-330000000",
        },
    ],
}

IBM_BALANCE = {
    "symbol": "IBM",
    "annualReports": [
        {
            "fiscalDateEnding": "2024-12-31",
            "reportedCurrency": "USD",
            "totalAssets": "137175000000",
            "totalCurrentAssets": "34482000000",
            "totalCurrentLiabilities": "33142000000",
            "totalLiabilities": "109783000000",
            "totalShareholderEquity": "27307000000",
            "shortLongTermDebtTotal": "54602000000",
            "commonStockSharesOutstanding": "927000000",
        },
    ],
    "quarterlyReports": [],
}

IBM_CASH_FLOW = {
    "symbol": "IBM",
    "annualReports": [
        {
            "fiscalDateEnding": "2024-12-31",
            "reportedCurrency": "USD",
            "operatingCashflow": "13445000000",
            "capitalExpenditures": "1685000000",
            "cashflowFromInvestment": "-4937000000",
            "dividendPayout": "6147000000",
            "cashflowFromFinancing": "-5759000000",
            "netIncome": "6023000000",
        },
    ],
    "quarterlyReports": [],
}

IBM_EARNINGS = {
    "symbol": "IBM",
    "annualEarnings": [
        {"fiscalDateEnding": "2025-12-31", "reportedEPS": "0"},
        {"fiscalDateEnding": "2024-12-31", "reportedEPS": "10.33"},
        {"fiscalDateEnding": "2023-12-31", "reportedEPS": "9.61"},
        {"fiscalDateEnding": "2022-12-31", "reportedEPS": "9.12"},
    ],
    "quarterlyEarnings": [
        {"fiscalDateEnding": "2024-12-31", "reportedDate": "2025-01-29", "reportedEPS": "3.92",
         "estimatedEPS": "3.77", "surprise": "0.15", "surprisePercentage": "3.9788"},
        {"fiscalDateEnding": "2024-09-30", "reportedDate": "2024-10-23", "reportedEPS": "2.3",
         "estimatedEPS": "2.23", "surprise": "0.07", "surprisePercentage": "3.139"},
        {"fiscalDateEnding": "2024-06-30", "reportedDate": "2024-07-24", "reportedEPS": "2.43",
         "estimatedEPS": "2.2", "surprise": "0.23", "surprisePercentage": "10.4545"},
        {"fiscalDateEnding": "2024-03-31", "reportedDate": "2024-04-24", "reportedEPS": "1.68",
         "estimatedEPS": "1.74", "surprise": "-0.06", "surprisePercentage": "-3.4483"},
    ],
}

IPO_CALENDAR_CSV = (
    "symbol,name,ipoDate,priceRangeLow,priceRangeHigh,currency,exchange\r\n"
    "BETA,Beta Technologies,2025-06-12,14,16,USD,NYSE\r\n"
    "ALFA,Alpha Holdings,2025-05-20,0,0,USD,NASDAQ\r\n"
    "GAMA,Gamma Corp,2025-05-02,9,11,USD,NASDAQ\r\n"
)

EARNINGS_CALENDAR_CSV = (
    "symbol,name,reportDate,fiscalDateEnding,estimate,currency\r\n"
    "IBM,International Business Machines Corp,2025-07-16,2025-06-30,2.64,USD\r\n"
    "MSFT,Microsoft Corp,2025-07-29,2025-06-30,,USD\r\n"
)

# --- Forex / crypto ---

USD_JPY_RATE = {
    "Realtime Currency Exchange Rate": {
        "1. From_Currency Code": "USD",
        "2. From_Currency Name": "United States Dollar",
        "3. To_Currency Code": "JPY",
        "4. To_Currency Name": "Japanese Yen",
        "5. Exchange Rate": "142.35000000",
        "6. Last Refreshed": "2025-04-24 20:10:01",
        "7. Time Zone": "UTC",
        "8. Bid Price": "142.34500000",
        "9. Ask Price": "142.35500000",
    }
}

EUR_USD_MONTHLY = {
    "Meta Data": {
        "1. Information": "Forex Monthly Prices (open, high, low, close)",
        "2. From Symbol": "EUR",
        "3. To Symbol": "USD",
        "4. Last Refreshed": "2025-04-24 20:10:00",
        "5. Time Zone": "UTC",
    },
    "Time Series FX (Monthly)": {
        "2025-03-31": {"1. open": "1.0374", "2. high": "1.0955", "3. low": "1.0360", "4. close": "1.0816"},
        "2025-04-24": {"1. open": "1.0816", "2. high": "1.1473", "3. low": "1.0777", "4. close": "1.1335"},
    },
}

EUR_USD_DAILY = {
    "Meta Data": {
        "1. Information": "Forex Daily Prices (open, high, low, close)",
        "2. From Symbol": "EUR",
        "3. To Symbol": "USD",
        "4. Output Size": "Compact",
        "5. Last Refreshed": "2025-04-24 20:10:00",
        "6. Time Zone": "UTC",
    },
    "Time Series FX (Daily)": {
        "2025-04-24": {"1. open": "1.1310", "2. high": "1.1390", "3. low": "1.1300", "4. close": "1.1335"},
        "2025-04-23": {"1. open": "1.1420", "2. high": "1.1440", "3. low": "1.1300", "4. close": "1.1310"},
        "2025-04-22": {"1. open": "1.1500", "2. high": "1.1570", "3. low": "1.1400", "4. close": "1.1420"},
    },
}

BTC_DAILY = {
    "Meta Data": {
        "1. Information": "Daily Prices and Volumes for Digital Currency",
        "2. Digital Currency Code": "BTC",
        "3. Digital Currency Name": "Bitcoin",
        "4. Market Code": "EUR",
        "5. Market Name": "Euro",
        "6. Last Refreshed": "2025-04-24 00:00:00",
        "7. Time Zone": "UTC",
    },
    "Time Series (Digital Currency Daily)": {
        "2025-04-24": {
            "1a. open (USD)": "93000.00", "1b. open (EUR)": "81800.00",
            "2a. high (USD)": "94000.00", "2b. high (EUR)": "82700.00",
            "3a. low (USD)": "92000.00", "3b. low (EUR)": "80900.00",
            "4a. close (USD)": "93500.00", "4b. close (EUR)": "82200.00",
            "5. volume": "120.5", "6. market cap (USD)": "120.5",
        },
    },
}

BTC_INTRADAY = {
    "Meta Data": {
        "1. Information": "Crypto Intraday (5min) Time Series",
        "2. Digital Currency Code": "BTC",
        "3. Digital Currency Name": "Bitcoin",
        "4. Market Code": "USD",
        "5. Market Name": "United States Dollar",
        "6. Last Refreshed": "2025-04-24 20:10:00",
        "7. Interval": "5min",
        "8. Output Size": "Compact",
        "9. Time Zone": "UTC",
    },
    "Time Series Crypto": {
        "2025-04-24 20:10:00": {
            "1. open": "93010.1", "2. high": "93050.0", "3. low": "92990.0", "4. close": "93020.5",
            "5. volume": "12",
        },
        "2025-04-24 20:05:00": {
            "1. open": "92980.0", "2. high": "93020.0", "3. low": "92970.0", "4. close": "93010.1",
            "5. volume": "9",
        },
    },
}

# --- Commodities / economic ---

WTI_MONTHLY = {
    "name": "Crude Oil Prices WTI",
    "interval": "monthly",
    "unit": "dollars per barrel",
    "data": [
        {"date": "2025-03-01", "value": "68.24"},
        {"date": "2025-02-01", "value": "71.53"},
        {"date": "2025-01-01", "value": "75.10"},
    ],
}

REAL_GDP_QUARTERLY = {
    "name": "Real Gross Domestic Product",
    "interval": "quarterly",
    "unit": "billions of dollars",
    "data": [
        {"date": "2024-10-01", "value": "5945.2"},
        {"date": "2024-07-01", "value": "5900.1"},
    ],
}

# --- Technical ---

IBM_SMA = {
    "Meta Data": {
        "1: Symbol": "IBM",
        "2: Indicator": "Simple Moving Average (SMA)",
        "3: Last Refreshed": "2025-04-24",
        "4: Interval": "daily",
        "5: Time Period": 20,
        "6: Series Type": "close",
        "7: Time Zone": "US/Eastern",
    },
    "Technical Analysis: SMA": {
        "2025-04-22": {"SMA": "238.1000"},
        "2025-04-24": {"SMA": "240.2100"},
        "2025-04-23": {"SMA": "239.0500"},
    },
}

IBM_BBANDS = {
    "Meta Data": {
        "1: Symbol": "IBM",
        "2: Indicator": "Bollinger Bands (BBANDS)",
        "3: Last Refreshed": "2025-04-24",
        "4: Interval": "weekly",
        "5: Time Period": 5,
        "6.1: Deviation multiplier for upper band": 2,
        "7: Series Type": "close",
    },
    "Technical Analysis: BBANDS": {
        "2025-04-24": {
            "Real Upper Band": "260.1000",
            "Real Middle Band": "245.0000",
            "Real Lower Band": "229.9000",
        },
    },
}

# --- Options ---

IBM_REALTIME_OPTIONS = {
    "endpoint": "Realtime Options",
    "message": "success",
    "data": [
        {
            "contractID": "IBM250620C00250000", "symbol": "IBM", "expiration": "2025-06-20",
            "strike": "250.00", "type": "call", "last": "8.10", "mark": "8.05", "bid": "8.00",
            "bid_size": "12", "ask": "8.10", "ask_size": "9", "volume": "140", "open_interest": "2100",
        },
        {
            "contractID": "IBM250516P00240000", "symbol": "IBM", "expiration": "2025-05-16",
            "strike": "240.00", "type": "put", "last": "4.20", "mark": "4.25", "bid": "4.20",
            "bid_size": "5", "ask": "4.30", "ask_size": "7", "volume": "80", "open_interest": "900",
            "implied_volatility": "0.31", "delta": "-0.38", "gamma": "0.02", "theta": "-0.11",
            "vega": "0.25", "rho": "-0.05",
        },
        {
            "contractID": "IBM250516C00230000", "symbol": "IBM", "expiration": "2025-05-16",
            "strike": "230.00", "type": "call", "last": "17.50", "mark": "17.45", "bid": "17.30",
            "bid_size": "3", "ask": "17.60", "ask_size": "4", "volume": "15", "open_interest": "400",
        },
    ],
}

IBM_HISTORICAL_OPTIONS = {
    "endpoint": "Historical Options",
    "message": "success",
    "data": [
        {
            "contractID": "IBM250516C00230000", "symbol": "IBM", "expiration": "2025-05-16",
            "strike": "230.00", "type": "call", "last": "17.50", "mark": "17.45", "bid": "17.30",
            "bid_size": "3", "ask": "17.60", "ask_size": "4", "volume": "15", "open_interest": "400",
            "date": "2025-04-24", "implied_volatility": "0.29", "delta": "0.72", "gamma": "0.01",
            "theta": "-0.09", "vega": "0.21", "rho": "0.12",
        },
    ],
}

# --- Alpha Intelligence ---

NEWS_FEED = {
    "items": "50",
    "sentiment_score_definition": "x <= -0.35: Bearish; x >= 0.35: Bullish",
    "relevance_score_definition": "0 < x <= 1, higher is more relevant",
    "feed": [
        {
            "title": "IBM Beats Estimates",
            "url": "https://example.com/ibm-beats",
            "time_published": "20250424T213000",
            "authors": ["Jane Doe", "John Roe"],
            "summary": "IBM reported better than expected results.",
            "source": "Reuters",
            "category_within_source": "Markets",
            "topics": [{"topic": "Earnings", "relevance_score": "0.9"}],
            "overall_sentiment_score": 0.41,
            "overall_sentiment_label": "Bullish",
            "ticker_sentiment": [
                {"ticker": "IBM", "relevance_score": "0.95",
                 "ticker_sentiment_score": "0.5", "ticker_sentiment_label": "Bullish"},
            ],
        },
    ],
}

IBM_TRANSCRIPT = {
    "symbol": "IBM",
    "quarter": "2024Q1",
    "transcript": [
        {"speaker": "Olympia McNerney", "title": "Global Head of Investor Relations",
         "content": "Welcome to IBM's first quarter earnings presentation.", "sentiment": "0.6"},
        {"speaker": "Arvind Krishna", "title": "Chairman and CEO",
         "content": "We are pleased with our performance.", "sentiment": "0.7"},
    ],
}

TOP_MOVERS = {
    "metadata": "Top gainers, losers, and most actively traded US tickers",
    "last_updated": "2025-04-24 16:15:59 US/Eastern",
    "top_gainers": [
        {"ticker": "ABCD", "price": "1.23", "change_amount": "0.61",
         "change_percentage": "98.39%", "volume": "1234567"},
    ],
    "top_losers": [
        {"ticker": "WXYZ", "price": "0.51", "change_amount": "-0.49",
         "change_percentage": "-49.0%", "volume": "2500000000"},
    ],
    "most_actively_traded": [
        {"ticker": "NVDA", "price": "102.71", "change_amount": "3.5",
         "change_percentage": "3.52%", "volume": "5432"},
    ],
}

IBM_INSIDERS = {
    "data": [
        {
            "transaction_date": "2025-03-01", "ticker": "IBM", "executive": "KRISHNA, ARVIND",
            "executive_title": "Chairman, President and CEO", "security_type": "Common Stock",
            "acquisition_or_disposal": "D", "shares": "1000.0", "share_price": "250.5",
        },
        {
            "transaction_date": "2025-02-15", "ticker": "IBM", "executive": "KAVANAUGH, JAMES J.",
            "executive_title": "SVP & CFO", "security_type": "Common Stock",
            "acquisition_or_disposal": "A", "shares": "200", "share_price": "",
        },
    ],
}

ANALYTICS = {
    "meta_data": {
        "symbols": "AAPL,MSFT",
        "min_dt": "2025-01-02",
        "max_dt": "2025-03-31",
        "ohlc": "Close",
        "interval": "DAILY",
    },
    "payload": {
        "RETURNS_CALCULATIONS": {
            "MEAN": {"AAPL": 0.00123456, "MSFT": -0.0005},
            "STDDEV": {"AAPL": 0.0181234567, "MSFT": 0.015},
            "CUMULATIVE_RETURN": {"AAPL": -0.1234, "MSFT": 0.05},
            "CORRELATION": {
                "index": ["AAPL", "MSFT"],
                "correlation": [[1.0], [0.6512, 1.0]],
            },
        }
    },
}
