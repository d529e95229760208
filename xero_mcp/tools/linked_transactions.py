"""Linked transaction (billable expense) tools."""

from typing import Optional

from mcp.server.fastmcp import Context

from ..models import LinkedTransaction, LinkedTransactionStatus
from .base import ResponseFormat, run_command, run_query


async def xero_list_linked_transactions(
    ctx: Context,
    page: int = 1,
    source_transaction_id: Optional[str] = None,
    contact_id: Optional[str] = None,
    status: Optional[LinkedTransactionStatus] = None,
    target_transaction_id: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List billable expenses, 100 per page.

    Args:
        page: Page number (1-based)
        source_transaction_id: Bill or spend money transaction the expense comes from
        contact_id: Customer the expense is billed to
        status: APPROVED, DRAFT, ONDRAFT, BILLED or VOIDED
        target_transaction_id: Sales invoice the expense was billed on
        format: Response format, json or markdown
    """
    status_value = LinkedTransactionStatus(status).value if status else None
    return await run_query(
        ctx,
        lambda client: client.list_linked_transactions(
            page, source_transaction_id, contact_id, status_value, target_transaction_id
        ),
        "linked_transactions",
        format,
    )


async def xero_get_linked_transaction(
    ctx: Context,
    linked_transaction_id: str,
    format: ResponseFormat = "json",
) -> str:
    """Get a linked transaction by LinkedTransactionID."""
    return await run_query(
        ctx,
        lambda client: client.get_linked_transaction(linked_transaction_id),
        "linked_transaction",
        format,
    )


async def xero_create_linked_transaction(
    ctx: Context,
    source_transaction_id: str,
    source_line_item_id: str,
    contact_id: Optional[str] = None,
    target_transaction_id: Optional[str] = None,
    target_line_item_id: Optional[str] = None,
) -> str:
    """Mark a bill or spend money line as billable to a customer.

    Args:
        source_transaction_id: InvoiceID of the bill or BankTransactionID
        source_line_item_id: LineItemID on the source transaction
        contact_id: Customer to bill
        target_transaction_id: Sales invoice to bill on
        target_line_item_id: Line on the sales invoice
    """
    link = LinkedTransaction(
        source_transaction_id=source_transaction_id,
        source_line_item_id=source_line_item_id,
        contact_id=contact_id,
        target_transaction_id=target_transaction_id,
        target_line_item_id=target_line_item_id,
    )
    return await run_command(
        ctx,
        lambda client: client.create_linked_transaction(link),
        "Linked transaction created",
        "linked_transaction",
    )


async def xero_update_linked_transaction(
    ctx: Context,
    linked_transaction_id: str,
    contact_id: Optional[str] = None,
    target_transaction_id: Optional[str] = None,
    target_line_item_id: Optional[str] = None,
) -> str:
    """Assign a linked transaction to a customer or sales invoice line."""
    link = LinkedTransaction(
        contact_id=contact_id,
        target_transaction_id=target_transaction_id,
        target_line_item_id=target_line_item_id,
    )
    return await run_command(
        ctx,
        lambda client: client.update_linked_transaction(linked_transaction_id, link),
        "Linked transaction updated",
        "linked_transaction",
    )


async def xero_delete_linked_transaction(ctx: Context, linked_transaction_id: str) -> str:
    """Delete a linked transaction that has not been billed."""
    return await run_command(
        ctx,
        lambda client: client.delete_linked_transaction(linked_transaction_id),
        "Linked transaction deleted",
    )


TOOLS = [
    xero_list_linked_transactions,
    xero_get_linked_transaction,
    xero_create_linked_transaction,
    xero_update_linked_transaction,
    xero_delete_linked_transaction,
]
