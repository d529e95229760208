"""Repeating invoice template tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import (
    ContactRef,
    InvoiceType,
    LineAmountType,
    LineItem,
    RepeatingInvoice,
    RepeatingInvoiceStatus,
    Schedule,
)
from .base import ResponseFormat, run_command, run_query


async def xero_list_repeating_invoices(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List repeating invoice templates."""
    return await run_query(
        ctx, lambda client: client.list_repeating_invoices(where, order), "repeating_invoices", format
    )


async def xero_get_repeating_invoice(
    ctx: Context,
    repeating_invoice_id: str,
    format: ResponseFormat = "json",
) -> str:
    """Get a repeating invoice template, including its schedule."""
    return await run_query(
        ctx,
        lambda client: client.get_repeating_invoice(repeating_invoice_id),
        "repeating_invoice",
        format,
    )


async def xero_create_repeating_invoice(
    ctx: Context,
    type: InvoiceType,
    contact_id: str,
    schedule: Schedule,
    line_items: List[LineItem],
    reference: Optional[str] = None,
    status: Optional[RepeatingInvoiceStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
    approved_for_sending: Optional[bool] = None,
    send_copy: Optional[bool] = None,
    mark_as_sent: Optional[bool] = None,
    include_pdf: Optional[bool] = None,
) -> str:
    """Create a repeating invoice template.

    Args:
        type: ACCREC or ACCPAY
        contact_id: ContactID
        schedule: period, unit (WEEKLY, MONTHLY or YEARLY), due_date, due_date_type and start_date
        line_items: Template lines
        reference: Reference
        status: DRAFT or AUTHORISED
        line_amount_types: Exclusive, Inclusive or NoTax
        approved_for_sending: Email generated invoices automatically
        send_copy: Send a copy to the sender
        mark_as_sent: Mark generated invoices as sent
        include_pdf: Attach a PDF to the email
    """
    invoice = RepeatingInvoice(
        type=type,
        contact=ContactRef(contact_id=contact_id),
        schedule=schedule,
        line_items=line_items,
        reference=reference,
        status=status,
        line_amount_types=line_amount_types,
        approved_for_sending=approved_for_sending,
        send_copy=send_copy,
        mark_as_sent=mark_as_sent,
        include_pdf=include_pdf,
    )
    return await run_command(
        ctx,
        lambda client: client.create_repeating_invoice(invoice),
        "Repeating invoice created",
        "repeating_invoice",
    )


async def xero_update_repeating_invoice(
    ctx: Context,
    repeating_invoice_id: str,
    schedule: Optional[Schedule] = None,
    line_items: Optional[List[LineItem]] = None,
    reference: Optional[str] = None,
    status: Optional[RepeatingInvoiceStatus] = None,
    approved_for_sending: Optional[bool] = None,
) -> str:
    """Update a repeating invoice template. Only the fields given are changed."""
    invoice = RepeatingInvoice(
        schedule=schedule,
        line_items=line_items,
        reference=reference,
        status=status,
        approved_for_sending=approved_for_sending,
    )
    return await run_command(
        ctx,
        lambda client: client.update_repeating_invoice(repeating_invoice_id, invoice),
        "Repeating invoice updated",
        "repeating_invoice",
    )


async def xero_delete_repeating_invoice(ctx: Context, repeating_invoice_id: str) -> str:
    """Delete a repeating invoice template."""
    return await run_command(
        ctx,
        lambda client: client.delete_repeating_invoice(repeating_invoice_id),
        "Repeating invoice deleted",
    )


TOOLS = [
    xero_list_repeating_invoices,
    xero_get_repeating_invoice,
    xero_create_repeating_invoice,
    xero_update_repeating_invoice,
    xero_delete_repeating_invoice,
]
