"""General ledger journal and manual journal tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import LineAmountType, ManualJournal, ManualJournalLine, ManualJournalStatus
from .base import ResponseFormat, run_command, run_query


async def xero_list_journals(
    ctx: Context,
    offset: Optional[int] = None,
    payments_only: Optional[bool] = None,
    format: ResponseFormat = "json",
) -> str:
    """List general ledger journals, up to 100 per call.

    Args:
        offset: Return journals with a JournalNumber above this value
        payments_only: Only cash transactions
        format: Response format, json or markdown
    """
    return await run_query(
        ctx, lambda client: client.list_journals(offset, payments_only), "journals", format
    )


async def xero_get_journal(ctx: Context, journal_id: str, format: ResponseFormat = "json") -> str:
    """Get a journal by JournalID, with its lines."""
    return await run_query(ctx, lambda client: client.get_journal(journal_id), "journal", format)


async def xero_list_manual_journals(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List manual journals, 100 per page."""
    return await run_query(
        ctx, lambda client: client.list_manual_journals(page, where, order), "manual_journals", format
    )


async def xero_get_manual_journal(ctx: Context, manual_journal_id: str, format: ResponseFormat = "json") -> str:
    """Get a manual journal by ManualJournalID."""
    return await run_query(
        ctx, lambda client: client.get_manual_journal(manual_journal_id), "manual_journal", format
    )


async def xero_create_manual_journal(
    ctx: Context,
    narration: str,
    journal_lines: List[ManualJournalLine],
    date: Optional[str] = None,
    status: Optional[ManualJournalStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
    show_on_cash_basis_reports: Optional[bool] = None,
) -> str:
    """Create a manual journal. Line amounts must sum to zero.

    Args:
        narration: Description of the journal
        journal_lines: Lines with line_amount (debit positive, credit negative) and account_code
        date: Journal date (YYYY-MM-DD)
        status: DRAFT or POSTED
        line_amount_types: Exclusive, Inclusive or NoTax
        show_on_cash_basis_reports: Include in cash basis reports
    """
    journal = ManualJournal(
        narration=narration,
        journal_lines=journal_lines,
        date=date,
        status=status,
        line_amount_types=line_amount_types,
        show_on_cash_basis_reports=show_on_cash_basis_reports,
    )
    return await run_command(
        ctx, lambda client: client.create_manual_journal(journal), "Manual journal created", "manual_journal"
    )


async def xero_update_manual_journal(
    ctx: Context,
    manual_journal_id: str,
    narration: Optional[str] = None,
    journal_lines: Optional[List[ManualJournalLine]] = None,
    date: Optional[str] = None,
    status: Optional[ManualJournalStatus] = None,
) -> str:
    """Update a manual journal, e.g. post a DRAFT or void a POSTED one."""
    journal = ManualJournal(
        narration=narration,
        journal_lines=journal_lines,
        date=date,
        status=status,
    )
    return await run_command(
        ctx,
        lambda client: client.update_manual_journal(manual_journal_id, journal),
        "Manual journal updated",
        "manual_journal",
    )


TOOLS = [
    xero_list_journals,
    xero_get_journal,
    xero_list_manual_journals,
    xero_get_manual_journal,
    xero_create_manual_journal,
    xero_update_manual_journal,
]
