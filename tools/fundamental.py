"""Company fundamentals: overview, ETF profile, corporate actions, statements, calendars."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import TYPE_CHECKING, Literal

from tools._helpers import (
    _fmt_int,
    _fmt_pct,
    _month_label,
    _provider_message,
    _query,
    _quarter_label,
    _short_date,
    _to_date,
    _to_float,
    _v,
    tool_annotations,
)

if TYPE_CHECKING:
    from fastmcp import FastMCP
    from alphavantage_client import AlphaVantageClient

ReportType = Literal["annual", "quarterly"]
Horizon = Literal["3month", "6month", "12month"]

TOP_HOLDINGS = 10
RECENT_DIVIDENDS = 10
RECENT_QUARTERS = 8


def _missing(value) -> bool:
    return value is None or value == "" or value == "None"


def _plain_number(num: float) -> str:
    """``2.0`` -> ``2``, ``1.5`` -> ``1.5``."""
    return str(int(num)) if num.is_integer() else str(num)


def _weight(value) -> str:
    num = _to_float(value) or 0.0
    return f"{num * 100:.2f}%"


# --- Overview / ETF -------------------------------------------------------


def _format_overview(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    if not data.get("Symbol"):
        return "No company data available"

    d = data
    sections = [
        [
            f"== Company Information: {_v(d, 'Name')} ({d['Symbol']}) ==",
            f"Asset Type: {_v(d, 'AssetType')}",
            f"Exchange: {_v(d, 'Exchange')}",
            f"Currency: {_v(d, 'Currency')}",
            f"Country: {_v(d, 'Country')}",
            f"Sector: {_v(d, 'Sector')}",
            f"Industry: {_v(d, 'Industry')}",
            f"Address: {_v(d, 'Address')}",
            f"Website: {_v(d, 'OfficialSite')}",
            f"CIK: {_v(d, 'CIK')}",
            f"Fiscal Year End: {_v(d, 'FiscalYearEnd')}",
            f"Latest Quarter: {_v(d, 'LatestQuarter')}",
            "",
            f"Description: {_v(d, 'Description', 'No description available')}",
            "",
        ],
        [
            "== Key Financial Metrics ==",
            f"Market Cap: {_fmt_int(d.get('MarketCapitalization'))}",
            f"EBITDA: {_fmt_int(d.get('EBITDA'))}",
            f"Revenue (TTM): {_fmt_int(d.get('RevenueTTM'))}",
            f"Gross Profit (TTM): {_fmt_int(d.get('GrossProfitTTM'))}",
            f"Shares Outstanding: {_fmt_int(d.get('SharesOutstanding'))}",
            "",
        ],
        [
            "== Ratios and Performance ==",
            f"EPS: {_v(d, 'EPS')}",
            f"PE Ratio: {_v(d, 'PERatio')}",
            f"PEG Ratio: {_v(d, 'PEGRatio')}",
            f"Forward PE: {_v(d, 'ForwardPE')}",
            f"Price to Sales (TTM): {_v(d, 'PriceToSalesRatioTTM')}",
            f"Price to Book: {_v(d, 'PriceToBookRatio')}",
            f"EV to Revenue: {_v(d, 'EVToRevenue')}",
            f"EV to EBITDA: {_v(d, 'EVToEBITDA')}",
            f"Book Value: {_v(d, 'BookValue')}",
            f"Revenue Per Share (TTM): {_v(d, 'RevenuePerShareTTM')}",
            f"Diluted EPS (TTM): {_v(d, 'DilutedEPSTTM')}",
            "",
        ],
        [
            "== Profitability and Growth ==",
            f"Profit Margin: {_fmt_pct(d.get('ProfitMargin'))}",
            f"Operating Margin (TTM): {_fmt_pct(d.get('OperatingMarginTTM'))}",
            f"Return on Assets (TTM): {_fmt_pct(d.get('ReturnOnAssetsTTM'))}",
            f"Return on Equity (TTM): {_fmt_pct(d.get('ReturnOnEquityTTM'))}",
            f"Quarterly Earnings Growth (YOY): {_fmt_pct(d.get('QuarterlyEarningsGrowthYOY'))}",
            f"Quarterly Revenue Growth (YOY): {_fmt_pct(d.get('QuarterlyRevenueGrowthYOY'))}",
            "",
        ],
        [
            "== Dividends ==",
            f"Dividend Per Share: {_v(d, 'DividendPerShare', 'N/A')}",
            f"Dividend Yield: {_fmt_pct(d.get('DividendYield'), 'N/A')}",
            f"Dividend Date: {_v(d, 'DividendDate', 'N/A')}",
            f"Ex-Dividend Date: {_v(d, 'ExDividendDate', 'N/A')}",
            "",
        ],
        [
            "== Market Data ==",
            f"Beta: {_v(d, 'Beta')}",
            f"52-Week High: {_v(d, '52WeekHigh')}",
            f"52-Week Low: {_v(d, '52WeekLow')}",
            f"50-Day Moving Average: {_v(d, '50DayMovingAverage')}",
            f"200-Day Moving Average: {_v(d, '200DayMovingAverage')}",
            "",
        ],
        [
            "== Analyst Ratings ==",
            f"Analyst Target Price: {_v(d, 'AnalystTargetPrice')}",
            f"Strong Buy: {_v(d, 'AnalystRatingStrongBuy', '0')}",
            f"Buy: {_v(d, 'AnalystRatingBuy', '0')}",
            f"Hold: {_v(d, 'AnalystRatingHold', '0')}",
            f"Sell: {_v(d, 'AnalystRatingSell', '0')}",
            f"Strong Sell: {_v(d, 'AnalystRatingStrongSell', '0')}",
        ],
    ]
    return "\n\n".join("\n".join(section) for section in sections)


def _holding_line(index: int, holding: dict) -> str:
    return f"{index}. {_v(holding, 'symbol')} - {_v(holding, 'description', 'N/A')}: {_weight(holding.get('weight'))}"


def _format_etf_profile(data: dict, show_all_holdings: bool = False) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    if not data.get("net_assets"):
        return "No ETF profile data available"

    net_assets = _to_float(data["net_assets"]) or 0.0
    net_assets_str = f"{int(net_assets):,}" if net_assets.is_integer() else f"{net_assets:,}"

    sections = [[
        "== ETF Profile Overview ==",
        f"Net Assets: ${net_assets_str}",
        f"Expense Ratio: {_weight(data.get('net_expense_ratio'))}",
        f"Portfolio Turnover: {_weight(data.get('portfolio_turnover'))}",
        f"Dividend Yield: {_weight(data.get('dividend_yield'))}",
        f"Inception Date: {_v(data, 'inception_date')}",
        f"Leveraged: {_v(data, 'leveraged')}",
    ]]

    sectors = data.get("sectors") or []
    if sectors:
        sections.append(["== Sector Allocation =="] + [
            f"{_v(s, 'sector')}: {_weight(s.get('weight'))}" for s in sectors
        ])
    else:
        sections.append(["== Sector Allocation ==", "No sector data available"])

    holdings = data.get("holdings") or []
    if holdings:
        sections.append(
            ["== Top Holdings =="]
            + [_holding_line(i, h) for i, h in enumerate(holdings[:TOP_HOLDINGS], 1)]
            + ["", f"Total Holdings: {len(holdings)}"]
        )
    else:
        sections.append(["== Top Holdings ==", "No holdings data available"])

    if show_all_holdings and len(holdings) > TOP_HOLDINGS:
        sections.append(["== All Holdings =="] + [_holding_line(i, h) for i, h in enumerate(holdings, 1)])

    return "\n\n".join("\n".join(section) for section in sections)


# --- Corporate actions ----------------------------------------------------


def _dividend_line(div: dict) -> str:
    return (
        f"Payment: {_v(div, 'payment_date')} | Ex-Div: {_v(div, 'ex_dividend_date')} | "
        f"Declared: {_v(div, 'declaration_date')} | Amount: ${_v(div, 'amount')}"
    )


def _format_dividends(data: dict, show_all_history: bool = False, today: date | None = None) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    rows = data.get("data") or []
    if not data.get("symbol") or not rows:
        return "No dividend data available"

    today = today or date.today()
    upcoming, historical = [], []
    for div in rows:
        paid = _to_date(div.get("payment_date"))
        if paid is None:
            continue
        (upcoming if paid > today else historical).append(div)

    amounts = [_to_float(div.get("amount")) or 0.0 for div in historical]
    average = sum(amounts) / len(amounts) if amounts else 0.0

    by_year: dict[int, float] = defaultdict(float)
    for div, amount in zip(historical, amounts):
        by_year[_to_date(div["payment_date"]).year] += amount

    sections = [[
        f"== Dividend History for {data['symbol']} ==",
        f"Total Records: {len(rows)}",
        f"Average Dividend: ${average:.2f}",
        "",
    ]]

    if upcoming:
        sections.append(["== Upcoming Dividends =="] + [
            f"Payment Date: {_v(div, 'payment_date')} | Ex-Div Date: {_v(div, 'ex_dividend_date')} | "
            f"Amount: ${_v(div, 'amount')}"
            for div in upcoming
        ] + [""])

    if by_year:
        sections.append(["== Annual Dividend Totals =="] + [
            f"{year}: ${total:.2f}" for year, total in sorted(by_year.items(), reverse=True)
        ] + [""])

    recent = ["== Recent Dividend History =="] + [_dividend_line(d) for d in historical[:RECENT_DIVIDENDS]]
    if len(historical) > RECENT_DIVIDENDS:
        recent.append(f"... and {len(historical) - RECENT_DIVIDENDS} more historical dividends")
    sections.append(recent)

    text = "\n\n".join("\n".join(section) for section in sections)
    if show_all_history and len(rows) > RECENT_DIVIDENDS:
        text += "\n\n" + "\n".join(["== Complete Dividend History =="] + [_dividend_line(d) for d in historical])
    return text


def _split_description(factor: float) -> tuple[str, str]:
    if factor > 1:
        return "Forward Split", f"{_plain_number(factor)}:1"
    if factor < 1:
        return "Reverse Split", f"1:{round(1 / factor)}"
    return "Stock Distribution", "1:1"


def _format_splits(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    rows = data.get("data") or []
    if not data.get("symbol") or not rows:
        return "No stock split data available"

    ordered = sorted(rows, key=lambda s: str(s.get("effective_date") or ""), reverse=True)

    cumulative = 1.0
    for split in rows:
        cumulative *= _to_float(split.get("split_factor")) or 1.0

    lines = [
        f"== Stock Split History for {data['symbol']} ==",
        f"Total Split Events: {len(rows)}",
        f"Cumulative Split Factor: {cumulative:.4f}",
        f"(Original shares multiplied by {cumulative:.4f} equals current shares)",
        "",
        "== All Stock Splits (Most Recent First) ==",
    ]

    decades: dict[str, int] = defaultdict(int)
    for split in ordered:
        factor = _to_float(split.get("split_factor")) or 1.0
        kind, ratio = _split_description(factor)
        lines.append(f"{_v(split, 'effective_date')}: {kind} - {ratio} (factor: {_v(split, 'split_factor')})")
        effective = _to_date(split.get("effective_date"))
        if effective:
            decades[f"{effective.year // 10 * 10}s"] += 1

    if len(rows) >= 3:
        lines.extend(["", "== Splits By Decade =="])
        for decade, count in sorted(decades.items(), reverse=True):
            lines.append(f"{decade}: {count} split{'' if count == 1 else 's'}")

    return "\n".join(lines)


# --- Financial statements -------------------------------------------------


def _fmt_millions(value) -> str:
    """``$1,234.5M``."""
    if _missing(value):
        return "N/A"
    num = _to_float(value)
    if num is None:
        return "N/A"
    return f"${num / 1_000_000:,.1f}M"


def _fmt_signed_millions(value) -> str:
    """``+$1,234.5M`` / ``-$1,234.5M``."""
    if _missing(value):
        return "N/A"
    num = _to_float(value)
    if num is None:
        return "N/A"
    millions = num / 1_000_000
    return f"{'+' if millions >= 0 else '-'}${abs(millions):,.1f}M"


def _pct_of(value, total) -> str:
    if _missing(value) or _missing(total):
        return "N/A"
    num, base = _to_float(value), _to_float(total)
    if num is None or base is None:
        return "N/A"
    if base == 0:
        return "0.0%"
    return f"{num / base * 100:.1f}%"


def _ratio(numerator, denominator, fmt: str = "{:.2f}") -> str:
    num, den = _to_float(numerator), _to_float(denominator)
    if _missing(numerator) or _missing(denominator) or num is None or not den:
        return "N/A"
    return fmt.format(num / den)


def _fiscal_period(fiscal_date: str, report_type: str) -> str:
    if report_type == "quarterly":
        return _quarter_label(fiscal_date) or str(fiscal_date)
    return str(fiscal_date)[:4]


# Each section: (title, rows). Each row: (label, field, percentage base field, base name).
INCOME_SECTIONS = [
    ("Revenue and Gross Profit", [
        ("Total Revenue", "totalRevenue", None, None),
        ("Cost of Revenue", "costOfRevenue", "totalRevenue", "revenue"),
        ("Gross Profit", "grossProfit", "totalRevenue", "revenue"),
    ]),
    ("Operating Expenses", [
        ("SG&A", "sellingGeneralAndAdministrative", "totalRevenue", "revenue"),
        ("R&D", "researchAndDevelopment", "totalRevenue", "revenue"),
        ("Total Operating Expenses", "operatingExpenses", None, None),
        ("Operating Income", "operatingIncome", "totalRevenue", "revenue"),
    ]),
    ("Other Income and Expenses", [
        ("Interest Income", "interestIncome", None, None),
        ("Interest Expense", "interestExpense", None, None),
        ("Net Interest Income", "netInterestIncome", None, None),
        ("Depreciation & Amortization", "depreciationAndAmortization", None, None),
    ]),
    ("Profit Metrics", [
        ("Income Before Tax", "incomeBeforeTax", "totalRevenue", "revenue"),
        ("Income Tax Expense", "incomeTaxExpense", None, None),
        ("Net Income", "netIncome", "totalRevenue", "revenue"),
        ("EBIT", "ebit", None, None),
        ("EBITDA", "ebitda", None, None),
    ]),
]

BALANCE_SECTIONS = [
    ("Assets", [
        ("Total Assets", "totalAssets", None, None),
        ("", None, None, None),
        ("Current Assets", "totalCurrentAssets", "totalAssets", "total assets"),
        ("  - Cash & Equivalents", "cashAndCashEquivalentsAtCarryingValue", None, None),
        ("  - Short-term Investments", "shortTermInvestments", None, None),
        ("  - Inventory", "inventory", None, None),
        ("  - Other Current Assets", "otherCurrentAssets", None, None),
        ("", None, None, None),
        ("Non-Current Assets", "totalNonCurrentAssets", "totalAssets", "total assets"),
        ("  - Goodwill", "goodwill", None, None),
        ("  - Intangible Assets", "intangibleAssets", None, None),
        ("  - Long-term Investments", "longTermInvestments", None, None),
    ]),
    ("Liabilities", [
        ("Total Liabilities", "totalLiabilities", "totalAssets", "total assets"),
        ("", None, None, None),
        ("Current Liabilities", "totalCurrentLiabilities", "totalLiabilities", "total liabilities"),
        ("  - Short-term Debt", "shortTermDebt", None, None),
        ("  - Current Portion of Long-term Debt", "currentLongTermDebt", None, None),
        ("  - Other Current Liabilities", "otherCurrentLiabilities", None, None),
        ("", None, None, None),
        ("Non-Current Liabilities", "totalNonCurrentLiabilities", "totalLiabilities", "total liabilities"),
        ("  - Long-term Debt", "longTermDebt", None, None),
        ("  - Capital Lease Obligations", "capitalLeaseObligations", None, None),
        ("  - Other Non-Current Liabilities", "otherNonCurrentLiabilities", None, None),
    ]),
    ("Shareholders' Equity", [
        ("Total Shareholders' Equity", "totalShareholderEquity", "totalAssets", "total assets"),
        ("  - Common Stock", "commonStock", None, None),
        ("  - Retained Earnings", "retainedEarnings", None, None),
    ]),
]

CASH_FLOW_SECTIONS = [
    ("Cash Flow from Operating Activities", [
        ("Net Income", "netIncome", None, None),
        ("Depreciation & Amortization", "depreciationDepletionAndAmortization", None, None),
        ("Change in Inventory", "changeInInventory", None, None),
        ("Net Operating Cash Flow", "operatingCashflow", None, None),
    ]),
    ("Cash Flow from Investing Activities", [
        ("Capital Expenditures", "capitalExpenditures", None, None),
        ("Cash Flow from Investment", "cashflowFromInvestment", None, None),
    ]),
    ("Cash Flow from Financing Activities", [
        ("Dividend Payout", "dividendPayout", None, None),
        ("Stock Repurchase", "proceedsFromRepurchaseOfEquity", None, None),
        ("Debt Proceeds", "proceedsFromIssuanceOfLongTermDebtAndCapitalSecuritiesNet", None, None),
        ("Net Financing Cash Flow", "cashflowFromFinancing", None, None),
    ]),
]


def _section_lines(periods, reports, rows, money) -> list[str]:
    lines = []
    for period, report in zip(periods, reports):
        lines.append(f"{period}:")
        for label, field, base, base_name in rows:
            if field is None:
                lines.append("")
                continue
            line = f"  {label}: {money(report.get(field))}"
            if base:
                line += f" ({_pct_of(report.get(field), report.get(base))} of {base_name})"
            lines.append(line)
    return lines


def _balance_ratios(report: dict) -> list[str]:
    debt = report.get("shortLongTermDebtTotal")
    equity = report.get("totalShareholderEquity")
    return [
        f"  Current Ratio: {_ratio(report.get('totalCurrentAssets'), report.get('totalCurrentLiabilities'))}",
        f"  Debt to Equity: {_ratio(debt, equity)}",
        f"  Debt to Assets: {_ratio(debt, report.get('totalAssets'))}",
        f"  Book Value per Share: {_ratio(equity, report.get('commonStockSharesOutstanding'), '${:.2f}')}",
    ]


def _cash_flow_metrics(report: dict) -> list[str]:
    ocf, capex = report.get("operatingCashflow"), report.get("capitalExpenditures")
    fcf = fcf_ratio = "N/A"
    if not _missing(ocf) and not _missing(capex):
        fcf_num = (_to_float(ocf) or 0.0) - (_to_float(capex) or 0.0)
        fcf = _fmt_signed_millions(fcf_num)
        if not _missing(report.get("netIncome")):
            fcf_ratio = _ratio(fcf_num, report.get("netIncome"), "{:.1%}")
    return [
        f"  Free Cash Flow (OCF - CapEx): {fcf}",
        f"  FCF to Net Income Ratio: {fcf_ratio}",
        f"  Capital Expenditure to OCF: {_ratio(capex, ocf, '{:.1%}')}",
        f"  Dividend Payout Ratio: {_ratio(report.get('dividendPayout'), ocf, '{:.1%}')}",
    ]


STATEMENTS = {
    "income": ("Income Statement", "income statement", INCOME_SECTIONS, _fmt_millions, None),
    "balance": ("Balance Sheet", "balance sheet", BALANCE_SECTIONS, _fmt_millions,
                ("Key Financial Ratios", _balance_ratios)),
    "cash_flow": ("Cash Flow Statement", "cash flow", CASH_FLOW_SECTIONS, _fmt_signed_millions,
                  ("Key Cash Flow Metrics", _cash_flow_metrics)),
}


def _format_statement(data: dict, statement: str, report_type: str = "annual", limit: int | None = None) -> str:
    """Render an income statement, balance sheet or cash flow statement."""
    msg = _provider_message(data)
    if msg:
        return msg

    title, noun, sections, money, extra = STATEMENTS[statement]
    reports = data.get(f"{report_type}Reports") or []
    if limit and limit > 0:
        reports = reports[:limit]
    if not data.get("symbol") or not reports:
        return f"No {report_type} {noun} data available"

    periods = [_fiscal_period(r.get("fiscalDateEnding", ""), report_type) for r in reports]
    lines = [
        f"== {report_type.capitalize()} {title} for {data['symbol']} ==",
        f"Currency: {_v(reports[0], 'reportedCurrency')}",
        f"Periods: {', '.join(periods)}",
        "",
    ]
    for i, (section_title, rows) in enumerate(sections):
        if i:
            lines.append("")
        lines.append(f"== {section_title} ==")
        lines.extend(_section_lines(periods, reports, rows, money))

    if extra:
        extra_title, metrics = extra
        lines.extend(["", f"== {extra_title} =="])
        for period, report in zip(periods, reports):
            lines.append(f"{period}:")
            lines.extend(metrics(report))

    return "\n".join(lines)


# --- Earnings -------------------------------------------------------------


def _is_upcoming(earning: dict) -> bool:
    return _to_float(earning.get("reportedEPS")) == 0


def _signed(value: str, prefix: str = "", suffix: str = "") -> str:
    num = _to_float(value)
    if _missing(value) or num is None:
        return "N/A"
    sign = "-" if num < 0 else "+"
    return f"{sign}{prefix}{str(value).lstrip('-')}{suffix}"


def _format_earnings(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    if not data.get("symbol"):
        return "No earnings data available"

    annual = data.get("annualEarnings") or []
    quarterly = data.get("quarterlyEarnings") or []
    upcoming = [e for e in annual if _is_upcoming(e)]
    historical = [e for e in annual if not _is_upcoming(e)]

    lines = [f"== Earnings Data for {data['symbol']} ==", ""]

    if upcoming:
        lines.append("== Upcoming Earnings Dates ==")
        lines.extend(f"Fiscal Year Ending: {_v(e, 'fiscalDateEnding')}" for e in upcoming)
        lines.append("")

    lines.append("== Annual Earnings ==")
    if not annual:
        lines.append("No annual earnings data available")
    for i, earning in enumerate(historical):
        line = f"{str(earning.get('fiscalDateEnding', ''))[:4]}: ${_v(earning, 'reportedEPS')}"
        if i < len(historical) - 1:
            current = _to_float(earning.get("reportedEPS")) or 0.0
            previous = _to_float(historical[i + 1].get("reportedEPS")) or 0.0
            growth = (current - previous) / previous * 100 if previous else 0.0
            line += f" (YoY: {'+' if growth >= 0 else ''}{growth:.2f}%)"
        lines.append(line)

    lines.append("")
    if not quarterly:
        lines.extend(["== Quarterly Earnings ==", "No quarterly earnings data available"])
    else:
        lines.append(f"== Quarterly Earnings (Last {RECENT_QUARTERS} Quarters) ==")
        ordered = sorted(quarterly, key=lambda q: str(q.get("fiscalDateEnding") or ""), reverse=True)
        for quarter in ordered[:RECENT_QUARTERS]:
            reported = quarter.get("reportedEPS")
            estimated = "N/A" if _missing(quarter.get("estimatedEPS")) else quarter["estimatedEPS"]
            result = "N/A"
            if estimated != "N/A" and not _missing(reported):
                diff = (_to_float(reported) or 0.0) - (_to_float(estimated) or 0.0)
                result = "Beat" if diff > 0 else "Missed" if diff < 0 else "Met"
            label = _quarter_label(quarter.get("fiscalDateEnding")) or _v(quarter, "fiscalDateEnding")
            lines.append(
                f"{label} (Reported: {_v(quarter, 'reportedDate')}): Actual: ${_v(quarter, 'reportedEPS')} | "
                f"Est: {estimated} | {result} by {_signed(quarter.get('surprise'), '$')} "
                f"({_signed(quarter.get('surprisePercentage'), suffix='%')})"
            )

    if len(historical) > 1:
        eps = [_to_float(e.get("reportedEPS")) or 0.0 for e in historical]
        first, last, years = eps[-1], eps[0], len(eps) - 1
        cagr = "N/A"
        if first > 0 and last >= 0:
            cagr = f"{((last / first) ** (1 / years) - 1) * 100:.2f}%"
        lines.extend([
            "",
            "== Earnings Trends ==",
            f"Average Annual EPS Growth Rate: {cagr}",
            f"3-Year Average EPS: ${sum(eps[:3]) / len(eps[:3]):.2f}",
            f"5-Year Average EPS: ${sum(eps[:5]) / len(eps[:5]):.2f}",
            f"Latest Annual EPS: ${_v(historical[0], 'reportedEPS')}",
        ])

    return "\n".join(lines)


# --- Calendars (CSV) ------------------------------------------------------


def _group_by_month(rows: list[dict], date_key: str) -> list[tuple[str, list[dict]]]:
    """Group rows into ``Month YYYY`` buckets, chronological, rows sorted by date."""
    dated = sorted(
        (row for row in rows if _to_date(row.get(date_key))),
        key=lambda row: _to_date(row[date_key]),
    )
    groups: dict[str, list[dict]] = {}
    for row in dated:
        groups.setdefault(_month_label(row[date_key]), []).append(row)
    return list(groups.items())


def _format_ipo_calendar(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    rows = data.get("data") or []
    if not rows:
        return "No upcoming IPO data available"

    lines = ["== Upcoming IPO Calendar ==", f"Total Upcoming IPOs: {len(rows)}", ""]
    for month, ipos in _group_by_month(rows, "ipoDate"):
        lines.append(f"== {month} ==")
        for ipo in ipos:
            low, high = ipo.get("priceRangeLow"), ipo.get("priceRangeHigh")
            price_range = "TBD" if low == "0" and high == "0" else f"{low}-{high} {ipo.get('currency', '')}".rstrip()
            lines.append(
                f"{_short_date(ipo['ipoDate'])} - {_v(ipo, 'symbol')} - {_v(ipo, 'name')} - "
                f"{_v(ipo, 'exchange')} - Price Range: {price_range}"
            )
        lines.append("")
    return "\n".join(lines)


def _format_earnings_calendar(data: dict) -> str:
    msg = _provider_message(data)
    if msg:
        return msg
    rows = data.get("data") or []
    if not rows:
        return "No upcoming earnings data available"

    lines = ["== Upcoming Earnings Calendar ==", f"Total Upcoming Earnings Reports: {len(rows)}", ""]
    for month, entries in _group_by_month(rows, "reportDate"):
        lines.append(f"== {month} ==")
        for entry in entries:
            estimate = f"Estimate: ${entry['estimate']}" if entry.get("estimate") else "No estimate available"
            fiscal = f"Fiscal Period: {entry['fiscalDateEnding']}" if entry.get("fiscalDateEnding") else ""
            lines.append(
                f"{_short_date(entry['reportDate'])} - {_v(entry, 'symbol')} - "
                f"{entry.get('name') or _v(entry, 'symbol')} - {estimate} - {fiscal} - {entry.get('currency', '')}"
            )
        lines.append("")
    return "\n".join(lines)


def register(mcp: FastMCP, client: AlphaVantageClient) -> None:
    @mcp.tool(name="get-company-overview", annotations=tool_annotations("Company Overview"))
    async def get_company_overview(symbol: str) -> str:
        """Get the company information, financial ratios, and other key metrics for a specific stock.

        Args:
            symbol: The stock symbol to lookup
        """
        data = await client.get_safe(_query("OVERVIEW", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch company overview data."
        return _format_overview(data)

    @mcp.tool(name="get-etf-profile", annotations=tool_annotations("ETF Profile"))
    async def get_etf_profile(symbol: str, show_all_holdings: bool = False) -> str:
        """Get ETF profile, sector allocation, and holdings data for a specific ETF.

        Args:
            symbol: The ETF symbol to lookup (e.g. QQQ, SPY, VOO)
            show_all_holdings: Display all holdings instead of just the top 10
        """
        data = await client.get_safe(_query("ETF_PROFILE", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch ETF profile data."
        return _format_etf_profile(data, show_all_holdings)

    @mcp.tool(name="get-dividends", annotations=tool_annotations("Dividends"))
    async def get_dividends(symbol: str, show_all_history: bool = False) -> str:
        """Get historical and future (declared) dividend distributions for a specific stock.

        Args:
            symbol: The stock symbol to lookup
            show_all_history: Display all historical dividends instead of just the recent 10
        """
        data = await client.get_safe(_query("DIVIDENDS", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch dividend data."
        return _format_dividends(data, show_all_history)

    @mcp.tool(name="get-stock-splits", annotations=tool_annotations("Stock Splits"))
    async def get_stock_splits(symbol: str) -> str:
        """Get historical stock split events for a specific stock.

        Args:
            symbol: The stock symbol to lookup
        """
        data = await client.get_safe(_query("SPLITS", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch stock split data."
        return _format_splits(data)

    @mcp.tool(name="get-income-statement", annotations=tool_annotations("Income Statement"))
    async def get_income_statement(symbol: str, report_type: ReportType = "annual", limit: int | None = None) -> str:
        """Get annual and quarterly income statements for a specific company.

        Args:
            symbol: The stock symbol to lookup
            report_type: The type of report to retrieve (default annual)
            limit: The number of periods to display (default all available)
        """
        data = await client.get_safe(_query("INCOME_STATEMENT", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch income statement data."
        return _format_statement(data, "income", report_type, limit)

    @mcp.tool(name="get-balance-sheet", annotations=tool_annotations("Balance Sheet"))
    async def get_balance_sheet(symbol: str, report_type: ReportType = "annual", limit: int | None = None) -> str:
        """Get annual and quarterly balance sheets for a specific company.

        Args:
            symbol: The stock symbol to lookup
            report_type: The type of report to retrieve (default annual)
            limit: The number of periods to display (default all available)
        """
        data = await client.get_safe(_query("BALANCE_SHEET", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch balance sheet data."
        return _format_statement(data, "balance", report_type, limit)

    @mcp.tool(name="get-cash-flow", annotations=tool_annotations("Cash Flow"))
    async def get_cash_flow(symbol: str, report_type: ReportType = "annual", limit: int | None = None) -> str:
        """Get annual and quarterly cash flow statements for a specific company.

        Args:
            symbol: The stock symbol to lookup
            report_type: The type of report to retrieve (default annual)
            limit: The number of periods to display (default all available)
        """
        data = await client.get_safe(_query("CASH_FLOW", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch cash flow data."
        return _format_statement(data, "cash_flow", report_type, limit)

    @mcp.tool(name="get-earnings", annotations=tool_annotations("Earnings"))
    async def get_earnings(symbol: str) -> str:
        """Get annual and quarterly earnings (EPS) data for a specific company.

        Args:
            symbol: The stock symbol to lookup
        """
        data = await client.get_safe(_query("EARNINGS", symbol=symbol))
        if data is None:
            return "Error: Failed to fetch earnings data."
        return _format_earnings(data)

    @mcp.tool(name="get-ipo-calendar", annotations=tool_annotations("IPO Calendar"))
    async def get_ipo_calendar() -> str:
        """Get a list of upcoming IPOs expected in the next 3 months."""
        data = await client.get_csv_safe(_query("IPO_CALENDAR"))
        if data is None:
            return "Error: Failed to fetch IPO calendar data."
        if "data" in data and not data["data"]:
            return "No upcoming IPO data available or error parsing the response."
        return _format_ipo_calendar(data)

    @mcp.tool(name="get-earnings-calendar", annotations=tool_annotations("Earnings Calendar"))
    async def get_earnings_calendar(symbol: str | None = None, horizon: Horizon | None = None) -> str:
        """Get a list of company earnings expected in the next 3, 6, or 12 months.

        Args:
            symbol: The stock symbol to lookup (e.g. IBM). When not set, returns all scheduled earnings.
            horizon: Time horizon for expected earnings (default 3month)
        """
        data = await client.get_csv_safe(_query("EARNINGS_CALENDAR", symbol=symbol or None, horizon=horizon))
        if data is None:
            return "Error: Failed to fetch earnings calendar data."
        if "data" in data and not data["data"]:
            return "No upcoming earnings data available or error parsing the response."
        return _format_earnings_calendar(data)
