"""Bank transaction and bank transfer tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import (
    AccountRef,
    BankTransaction,
    BankTransactionStatus,
    BankTransactionType,
    BankTransfer,
    ContactRef,
    LineAmountType,
    LineItem,
)
from .base import ResponseFormat, run_command, run_query


async def xero_list_bank_transactions(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List spend and receive money transactions, 100 per page."""
    return await run_query(
        ctx, lambda client: client.list_bank_transactions(page, where, order), "bank_transactions", format
    )


async def xero_get_bank_transaction(
    ctx: Context,
    bank_transaction_id: str,
    format: ResponseFormat = "json",
) -> str:
    """Get a bank transaction by BankTransactionID."""
    return await run_query(
        ctx, lambda client: client.get_bank_transaction(bank_transaction_id), "bank_transaction", format
    )


async def xero_create_bank_transaction(
    ctx: Context,
    type: BankTransactionType,
    contact_id: str,
    bank_account_id: str,
    line_items: List[LineItem],
    date: Optional[str] = None,
    reference: Optional[str] = None,
    is_reconciled: Optional[bool] = None,
    line_amount_types: Optional[LineAmountType] = None,
    currency_code: Optional[str] = None,
) -> str:
    """Create a spend money (SPEND) or receive money (RECEIVE) transaction.

    Args:
        type: SPEND or RECEIVE (or the prepayment / overpayment variants)
        contact_id: ContactID
        bank_account_id: AccountID of the bank account
        line_items: Transaction lines
        date: Transaction date (YYYY-MM-DD)
        reference: Reference
        is_reconciled: Mark as reconciled
        line_amount_types: Exclusive, Inclusive or NoTax
        currency_code: Currency code
    """
    transaction = BankTransaction(
        type=type,
        contact=ContactRef(contact_id=contact_id),
        bank_account=AccountRef(account_id=bank_account_id),
        line_items=line_items,
        date=date,
        reference=reference,
        is_reconciled=is_reconciled,
        line_amount_types=line_amount_types,
        currency_code=currency_code,
    )
    return await run_command(
        ctx,
        lambda client: client.create_bank_transaction(transaction),
        "Bank transaction created",
        "bank_transaction",
    )


async def xero_update_bank_transaction(
    ctx: Context,
    bank_transaction_id: str,
    contact_id: Optional[str] = None,
    line_items: Optional[List[LineItem]] = None,
    date: Optional[str] = None,
    reference: Optional[str] = None,
    status: Optional[BankTransactionStatus] = None,
    is_reconciled: Optional[bool] = None,
) -> str:
    """Update a bank transaction. Set status DELETED to delete it."""
    transaction = BankTransaction(
        contact=ContactRef(contact_id=contact_id) if contact_id else None,
        line_items=line_items,
        date=date,
        reference=reference,
        status=status,
        is_reconciled=is_reconciled,
    )
    return await run_command(
        ctx,
        lambda client: client.update_bank_transaction(bank_transaction_id, transaction),
        "Bank transaction updated",
        "bank_transaction",
    )


async def xero_list_bank_transfers(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List transfers between bank accounts."""
    return await run_query(
        ctx, lambda client: client.list_bank_transfers(where, order), "bank_transfers", format
    )


async def xero_get_bank_transfer(ctx: Context, bank_transfer_id: str, format: ResponseFormat = "json") -> str:
    """Get a bank transfer by BankTransferID."""
    return await run_query(
        ctx, lambda client: client.get_bank_transfer(bank_transfer_id), "bank_transfer", format
    )


async def xero_create_bank_transfer(
    ctx: Context,
    from_bank_account_id: str,
    to_bank_account_id: str,
    amount: float,
    date: Optional[str] = None,
    reference: Optional[str] = None,
) -> str:
    """Transfer money between two bank accounts."""
    transfer = BankTransfer(
        from_bank_account=AccountRef(account_id=from_bank_account_id),
        to_bank_account=AccountRef(account_id=to_bank_account_id),
        amount=amount,
        date=date,
        reference=reference,
    )
    return await run_command(
        ctx, lambda client: client.create_bank_transfer(transfer), "Bank transfer created", "bank_transfer"
    )


TOOLS = [
    xero_list_bank_transactions,
    xero_get_bank_transaction,
    xero_create_bank_transaction,
    xero_update_bank_transaction,
    xero_list_bank_transfers,
    xero_get_bank_transfer,
    xero_create_bank_transfer,
]
