"""Financial report tools."""

from typing import Dict, Literal, Optional

from mcp.server.fastmcp import Context

from .base import ResponseFormat, run_query

Timeframe = Literal["MONTH", "QUARTER", "YEAR"]


async def xero_list_reports(ctx: Context, format: ResponseFormat = "json") -> str:
    """List the reports published in the organisation."""
    return await run_query(ctx, lambda client: client.list_reports(), "reports", format)


async def xero_get_report(
    ctx: Context,
    report_name: str,
    params: Optional[Dict[str, str]] = None,
    format: ResponseFormat = "json",
) -> str:
    """Fetch any Xero report by endpoint name.

    Args:
        report_name: Report endpoint, e.g. 'BalanceSheet' or 'TenNinetyNine'
        params: Query parameters using Xero's names, e.g. {"date": "2024-06-30"}
        format: Response format, json or markdown
    """
    return await run_query(ctx, lambda client: client.get_report(report_name, params), "report", format)


async def xero_get_balance_sheet(
    ctx: Context,
    date: Optional[str] = None,
    periods: Optional[int] = None,
    timeframe: Optional[Timeframe] = None,
    tracking_option_id1: Optional[str] = None,
    tracking_option_id2: Optional[str] = None,
    standard_layout: Optional[bool] = None,
    payments_only: Optional[bool] = None,
    format: ResponseFormat = "json",
) -> str:
    """Balance sheet as at a date, optionally compared across periods.

    Args:
        date: Report date (YYYY-MM-DD), defaults to today
        periods: Number of comparison periods (1-11)
        timeframe: Period length: MONTH, QUARTER or YEAR
        tracking_option_id1: Filter by a tracking option
        tracking_option_id2: Filter by a second tracking option
        standard_layout: Ignore custom report layouts
        payments_only: Cash basis
        format: Response format, json or markdown
    """
    return await run_query(
        ctx,
        lambda client: client.get_balance_sheet(
            date, periods, timeframe, tracking_option_id1, tracking_option_id2,
            standard_layout, payments_only,
        ),
        "report",
        format,
    )


async def xero_get_profit_and_loss(
    ctx: Context,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    periods: Optional[int] = None,
    timeframe: Optional[Timeframe] = None,
    tracking_category_id: Optional[str] = None,
    tracking_option_id: Optional[str] = None,
    standard_layout: Optional[bool] = None,
    payments_only: Optional[bool] = None,
    format: ResponseFormat = "json",
) -> str:
    """Profit and loss for a date range.

    Args:
        from_date: Start date (YYYY-MM-DD)
        to_date: End date (YYYY-MM-DD)
        periods: Number of comparison periods (1-11)
        timeframe: Period length: MONTH, QUARTER or YEAR
        tracking_category_id: Split by a tracking category
        tracking_option_id: Filter by a tracking option
        standard_layout: Ignore custom report layouts
        payments_only: Cash basis
        format: Response format, json or markdown
    """
    return await run_query(
        ctx,
        lambda client: client.get_profit_and_loss(
            from_date, to_date, periods, timeframe, tracking_category_id,
            tracking_option_id, standard_layout, payments_only,
        ),
        "report",
        format,
    )


async def xero_get_trial_balance(
    ctx: Context,
    date: Optional[str] = None,
    payments_only: Optional[bool] = None,
    format: ResponseFormat = "json",
) -> str:
    """Trial balance as at a date."""
    return await run_query(
        ctx, lambda client: client.get_trial_balance(date, payments_only), "report", format
    )


async def xero_get_bank_summary(
    ctx: Context,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """Opening and closing balances of bank accounts for a date range."""
    return await run_query(
        ctx, lambda client: client.get_bank_summary(from_date, to_date), "report", format
    )


async def xero_get_aged_receivables_by_contact(
    ctx: Context,
    contact_id: str,
    date: Optional[str] = None,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """Aged receivables for one contact."""
    return await run_query(
        ctx,
        lambda client: client.get_aged_receivables_by_contact(contact_id, date, from_date, to_date),
        "report",
        format,
    )


async def xero_get_aged_payables_by_contact(
    ctx: Context,
    contact_id: str,
    date: Optional[str] = None,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """Aged payables for one contact."""
    return await run_query(
        ctx,
        lambda client: client.get_aged_payables_by_contact(contact_id, date, from_date, to_date),
        "report",
        format,
    )


async def xero_get_budget_summary(
    ctx: Context,
    date: Optional[str] = None,
    periods: Optional[int] = None,
    timeframe: Optional[int] = None,
    format: ResponseFormat = "json",
) -> str:
    """Budget summary.

    Args:
        date: Report date (YYYY-MM-DD)
        periods: Number of periods to compare (1-12)
        timeframe: Months per period: 1, 3 or 12
        format: Response format, json or markdown
    """
    return await run_query(
        ctx, lambda client: client.get_budget_summary(date, periods, timeframe), "report", format
    )


async def xero_get_executive_summary(
    ctx: Context,
    date: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """Executive summary for the month containing the date."""
    return await run_query(ctx, lambda client: client.get_executive_summary(date), "report", format)


TOOLS = [
    xero_list_reports,
    xero_get_report,
    xero_get_balance_sheet,
    xero_get_profit_and_loss,
    xero_get_trial_balance,
    xero_get_bank_summary,
    xero_get_aged_receivables_by_contact,
    xero_get_aged_payables_by_contact,
    xero_get_budget_summary,
    xero_get_executive_summary,
]
