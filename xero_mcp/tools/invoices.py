"""Invoice and credit note tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import (
    ContactRef,
    CreditNote,
    CreditNoteType,
    Invoice,
    InvoiceStatus,
    InvoiceType,
    LineAmountType,
    LineItem,
)
from .base import ResponseFormat, run_command, run_query


async def xero_list_invoices(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    statuses: Optional[List[InvoiceStatus]] = None,
    contact_ids: Optional[List[str]] = None,
    invoice_numbers: Optional[List[str]] = None,
    format: ResponseFormat = "json",
) -> str:
    """List sales invoices (ACCREC) and bills (ACCPAY), 100 per page.

    Args:
        page: Page number (1-based)
        where: Filter expression (e.g. 'Type=="ACCREC"')
        order: Sort order (e.g. 'Date DESC')
        statuses: Only invoices in these statuses
        contact_ids: Only invoices for these ContactIDs
        invoice_numbers: Only invoices with these numbers
        format: Response format, json or markdown
    """
    status_values = [InvoiceStatus(status).value for status in statuses] if statuses else None
    return await run_query(
        ctx,
        lambda client: client.list_invoices(
            page, where, order, status_values, contact_ids, invoice_numbers
        ),
        "invoices",
        format,
    )


async def xero_get_invoice(ctx: Context, invoice_id: str, format: ResponseFormat = "json") -> str:
    """Get an invoice by InvoiceID or invoice number, with its line items."""
    return await run_query(ctx, lambda client: client.get_invoice(invoice_id), "invoice", format)


async def xero_create_invoice(
    ctx: Context,
    type: InvoiceType,
    contact_id: str,
    line_items: List[LineItem],
    date: Optional[str] = None,
    due_date: Optional[str] = None,
    reference: Optional[str] = None,
    invoice_number: Optional[str] = None,
    status: Optional[InvoiceStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
    currency_code: Optional[str] = None,
    branding_theme_id: Optional[str] = None,
) -> str:
    """Create a sales invoice (ACCREC) or bill (ACCPAY).

    Args:
        type: ACCREC for a sales invoice, ACCPAY for a bill
        contact_id: ContactID of the customer or supplier
        line_items: Lines with description, quantity, unit_amount and account_code
        date: Invoice date (YYYY-MM-DD)
        due_date: Due date (YYYY-MM-DD)
        reference: Reference (sales invoices only)
        invoice_number: Invoice number; Xero assigns one for sales invoices if omitted
        status: DRAFT (default), SUBMITTED or AUTHORISED
        line_amount_types: Exclusive, Inclusive or NoTax
        currency_code: Currency code
        branding_theme_id: Branding theme for the invoice PDF
    """
    invoice = Invoice(
        type=type,
        contact=ContactRef(contact_id=contact_id),
        line_items=line_items,
        date=date,
        due_date=due_date,
        reference=reference,
        invoice_number=invoice_number,
        status=status,
        line_amount_types=line_amount_types,
        currency_code=currency_code,
        branding_theme_id=branding_theme_id,
    )
    return await run_command(
        ctx, lambda client: client.create_invoice(invoice), "Invoice created", "invoice"
    )


async def xero_update_invoice(
    ctx: Context,
    invoice_id: str,
    contact_id: Optional[str] = None,
    line_items: Optional[List[LineItem]] = None,
    date: Optional[str] = None,
    due_date: Optional[str] = None,
    reference: Optional[str] = None,
    invoice_number: Optional[str] = None,
    status: Optional[InvoiceStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
    sent_to_contact: Optional[bool] = None,
) -> str:
    """Update an invoice. Only the fields given are changed.

    Line items, when given, replace the invoice's existing lines.
    """
    invoice = Invoice(
        contact=ContactRef(contact_id=contact_id) if contact_id else None,
        line_items=line_items,
        date=date,
        due_date=due_date,
        reference=reference,
        invoice_number=invoice_number,
        status=status,
        line_amount_types=line_amount_types,
        sent_to_contact=sent_to_contact,
    )
    return await run_command(
        ctx, lambda client: client.update_invoice(invoice_id, invoice), "Invoice updated", "invoice"
    )


async def xero_void_invoice(ctx: Context, invoice_id: str) -> str:
    """Void an AUTHORISED invoice that has no payments."""
    return await run_command(
        ctx, lambda client: client.void_invoice(invoice_id), "Invoice voided", "invoice"
    )


async def xero_delete_invoice(ctx: Context, invoice_id: str) -> str:
    """Delete a DRAFT or SUBMITTED invoice."""
    return await run_command(ctx, lambda client: client.delete_invoice(invoice_id), "Invoice deleted")


async def xero_get_invoice_online_url(ctx: Context, invoice_id: str) -> str:
    """Get the online (customer-facing) URL of a sales invoice."""

    async def fetch_url(client):
        url = await client.get_invoice_online_url(invoice_id)
        return {"invoice_id": invoice_id, "online_invoice_url": url}

    return await run_query(ctx, fetch_url, "online_invoice")


async def xero_email_invoice(ctx: Context, invoice_id: str) -> str:
    """Email an AUTHORISED sales invoice to its contact."""
    return await run_command(ctx, lambda client: client.email_invoice(invoice_id), "Invoice emailed")


# =============================================================================
# CREDIT NOTES
# =============================================================================

async def xero_list_credit_notes(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List credit notes, 100 per page."""
    return await run_query(
        ctx, lambda client: client.list_credit_notes(page, where, order), "credit_notes", format
    )


async def xero_get_credit_note(ctx: Context, credit_note_id: str, format: ResponseFormat = "json") -> str:
    """Get a credit note by CreditNoteID, with its allocations."""
    return await run_query(
        ctx, lambda client: client.get_credit_note(credit_note_id), "credit_note", format
    )


async def xero_create_credit_note(
    ctx: Context,
    type: CreditNoteType,
    contact_id: str,
    line_items: List[LineItem],
    date: Optional[str] = None,
    reference: Optional[str] = None,
    credit_note_number: Optional[str] = None,
    status: Optional[InvoiceStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
    currency_code: Optional[str] = None,
) -> str:
    """Create a credit note.

    Args:
        type: ACCRECCREDIT (customer credit) or ACCPAYCREDIT (supplier credit)
        contact_id: ContactID
        line_items: Credit note lines
        date: Credit note date (YYYY-MM-DD)
        reference: Reference
        credit_note_number: Credit note number
        status: DRAFT, SUBMITTED or AUTHORISED
        line_amount_types: Exclusive, Inclusive or NoTax
        currency_code: Currency code
    """
    credit_note = CreditNote(
        type=type,
        contact=ContactRef(contact_id=contact_id),
        line_items=line_items,
        date=date,
        reference=reference,
        credit_note_number=credit_note_number,
        status=status,
        line_amount_types=line_amount_types,
        currency_code=currency_code,
    )
    return await run_command(
        ctx, lambda client: client.create_credit_note(credit_note), "Credit note created", "credit_note"
    )


async def xero_update_credit_note(
    ctx: Context,
    credit_note_id: str,
    line_items: Optional[List[LineItem]] = None,
    date: Optional[str] = None,
    reference: Optional[str] = None,
    status: Optional[InvoiceStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
) -> str:
    """Update a credit note. Only the fields given are changed."""
    credit_note = CreditNote(
        line_items=line_items,
        date=date,
        reference=reference,
        status=status,
        line_amount_types=line_amount_types,
    )
    return await run_command(
        ctx,
        lambda client: client.update_credit_note(credit_note_id, credit_note),
        "Credit note updated",
        "credit_note",
    )


async def xero_void_credit_note(ctx: Context, credit_note_id: str) -> str:
    """Void an AUTHORISED credit note."""
    return await run_command(
        ctx, lambda client: client.void_credit_note(credit_note_id), "Credit note voided", "credit_note"
    )


async def xero_allocate_credit_note(
    ctx: Context,
    credit_note_id: str,
    invoice_id: str,
    amount: float,
    date: Optional[str] = None,
) -> str:
    """Apply part or all of a credit note to an outstanding invoice.

    Args:
        credit_note_id: CreditNoteID
        invoice_id: InvoiceID to allocate against
        amount: Amount to allocate, at most the remaining credit
        date: Allocation date (YYYY-MM-DD)
    """
    return await run_command(
        ctx,
        lambda client: client.allocate_credit_note(credit_note_id, invoice_id, amount, date),
        "Credit note allocated",
        "credit_note",
    )


TOOLS = [
    xero_list_invoices,
    xero_get_invoice,
    xero_create_invoice,
    xero_update_invoice,
    xero_void_invoice,
    xero_delete_invoice,
    xero_get_invoice_online_url,
    xero_email_invoice,
    xero_list_credit_notes,
    xero_get_credit_note,
    xero_create_credit_note,
    xero_update_credit_note,
    xero_void_credit_note,
    xero_allocate_credit_note,
]
