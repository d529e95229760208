"""Payment, prepayment, overpayment and batch payment tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import AccountRef, BatchPayment, InvoiceRef, Payment
from .base import ResponseFormat, run_command, run_query


async def xero_list_payments(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List payments against invoices and credit notes, 100 per page."""
    return await run_query(
        ctx, lambda client: client.list_payments(page, where, order), "payments", format
    )


async def xero_get_payment(ctx: Context, payment_id: str, format: ResponseFormat = "json") -> str:
    """Get a payment by PaymentID."""
    return await run_query(ctx, lambda client: client.get_payment(payment_id), "payment", format)


async def xero_create_payment(
    ctx: Context,
    invoice_id: str,
    amount: float,
    account_id: Optional[str] = None,
    account_code: Optional[str] = None,
    date: Optional[str] = None,
    reference: Optional[str] = None,
    currency_rate: Optional[float] = None,
    is_reconciled: Optional[bool] = None,
) -> str:
    """Record a payment against an AUTHORISED invoice.

    Args:
        invoice_id: InvoiceID being paid
        amount: Amount paid
        account_id: AccountID of the bank account receiving or making the payment
        account_code: Account code, if account_id is not given
        date: Payment date (YYYY-MM-DD)
        reference: Payment reference
        currency_rate: Exchange rate for foreign currency invoices
        is_reconciled: Mark the payment as reconciled
    """
    payment = Payment(
        invoice=InvoiceRef(invoice_id=invoice_id),
        account=AccountRef(account_id=account_id, code=account_code),
        amount=amount,
        date=date,
        reference=reference,
        currency_rate=currency_rate,
        is_reconciled=is_reconciled,
    )
    return await run_command(
        ctx, lambda client: client.create_payment(payment), "Payment created", "payment"
    )


async def xero_delete_payment(ctx: Context, payment_id: str) -> str:
    """Delete (reverse) a payment."""
    return await run_command(ctx, lambda client: client.delete_payment(payment_id), "Payment deleted")


# =============================================================================
# PREPAYMENTS & OVERPAYMENTS
# =============================================================================

async def xero_list_prepayments(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List prepayments, 100 per page."""
    return await run_query(
        ctx, lambda client: client.list_prepayments(page, where, order), "prepayments", format
    )


async def xero_get_prepayment(ctx: Context, prepayment_id: str, format: ResponseFormat = "json") -> str:
    """Get a prepayment by PrepaymentID."""
    return await run_query(ctx, lambda client: client.get_prepayment(prepayment_id), "prepayment", format)


async def xero_allocate_prepayment(
    ctx: Context,
    prepayment_id: str,
    invoice_id: str,
    amount: float,
    date: Optional[str] = None,
) -> str:
    """Allocate part or all of a prepayment to an invoice."""
    return await run_command(
        ctx,
        lambda client: client.allocate_prepayment(prepayment_id, invoice_id, amount, date),
        "Prepayment allocated",
        "prepayment",
    )


async def xero_list_overpayments(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List overpayments, 100 per page."""
    return await run_query(
        ctx, lambda client: client.list_overpayments(page, where, order), "overpayments", format
    )


async def xero_get_overpayment(ctx: Context, overpayment_id: str, format: ResponseFormat = "json") -> str:
    """Get an overpayment by OverpaymentID."""
    return await run_query(ctx, lambda client: client.get_overpayment(overpayment_id), "overpayment", format)


async def xero_allocate_overpayment(
    ctx: Context,
    overpayment_id: str,
    invoice_id: str,
    amount: float,
    date: Optional[str] = None,
) -> str:
    """Allocate part or all of an overpayment to an invoice."""
    return await run_command(
        ctx,
        lambda client: client.allocate_overpayment(overpayment_id, invoice_id, amount, date),
        "Overpayment allocated",
        "overpayment",
    )


# =============================================================================
# BATCH PAYMENTS
# =============================================================================

async def xero_list_batch_payments(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List batch payments."""
    return await run_query(
        ctx, lambda client: client.list_batch_payments(where, order), "batch_payments", format
    )


async def xero_get_batch_payment(ctx: Context, batch_payment_id: str, format: ResponseFormat = "json") -> str:
    """Get a batch payment by BatchPaymentID."""
    return await run_query(
        ctx, lambda client: client.get_batch_payment(batch_payment_id), "batch_payment", format
    )


async def xero_create_batch_payment(
    ctx: Context,
    account_id: str,
    payments: List[Payment],
    date: Optional[str] = None,
    reference: Optional[str] = None,
    particulars: Optional[str] = None,
    code: Optional[str] = None,
    details: Optional[str] = None,
    narrative: Optional[str] = None,
) -> str:
    """Pay several invoices from one bank account in a single batch.

    Args:
        account_id: AccountID of the bank account
        payments: Payments, each with an invoice reference and amount
        date: Batch date (YYYY-MM-DD)
        reference: Batch reference
        particulars: Bank statement particulars (NZ only)
        code: Bank statement code (NZ only)
        details: Bank statement details
        narrative: Bank statement narrative (UK only)
    """
    batch = BatchPayment(
        account=AccountRef(account_id=account_id),
        payments=payments,
        date=date,
        reference=reference,
        particulars=particulars,
        code=code,
        details=details,
        narrative=narrative,
    )
    return await run_command(
        ctx, lambda client: client.create_batch_payment(batch), "Batch payment created", "batch_payment"
    )


async def xero_delete_batch_payment(ctx: Context, batch_payment_id: str) -> str:
    """Delete a batch payment."""
    return await run_command(
        ctx, lambda client: client.delete_batch_payment(batch_payment_id), "Batch payment deleted"
    )


TOOLS = [
    xero_list_payments,
    xero_get_payment,
    xero_create_payment,
    xero_delete_payment,
    xero_list_prepayments,
    xero_get_prepayment,
    xero_allocate_prepayment,
    xero_list_overpayments,
    xero_get_overpayment,
    xero_allocate_overpayment,
    xero_list_batch_payments,
    xero_get_batch_payment,
    xero_create_batch_payment,
    xero_delete_batch_payment,
]
