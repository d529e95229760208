"""Quote tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import ContactRef, LineAmountType, LineItem, Quote, QuoteStatus
from .base import ResponseFormat, run_command, run_query


async def xero_list_quotes(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    status: Optional[QuoteStatus] = None,
    contact_id: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List quotes, 100 per page, optionally by status or contact."""
    status_value = QuoteStatus(status).value if status else None
    return await run_query(
        ctx,
        lambda client: client.list_quotes(page, where, order, status_value, contact_id),
        "quotes",
        format,
    )


async def xero_get_quote(ctx: Context, quote_id: str, format: ResponseFormat = "json") -> str:
    """Get a quote by QuoteID."""
    return await run_query(ctx, lambda client: client.get_quote(quote_id), "quote", format)


async def xero_create_quote(
    ctx: Context,
    contact_id: str,
    line_items: List[LineItem],
    date: str,
    expiry_date: Optional[str] = None,
    reference: Optional[str] = None,
    quote_number: Optional[str] = None,
    title: Optional[str] = None,
    summary: Optional[str] = None,
    terms: Optional[str] = None,
    status: Optional[QuoteStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
) -> str:
    """Create a quote for a customer.

    Args:
        contact_id: ContactID of the customer
        line_items: Quote lines
        date: Quote date (YYYY-MM-DD)
        expiry_date: Expiry date (YYYY-MM-DD)
        reference: Reference
        quote_number: Quote number; Xero assigns one if omitted
        title: Title shown on the quote
        summary: Summary shown under the title
        terms: Terms and conditions
        status: DRAFT or SENT
        line_amount_types: Exclusive, Inclusive or NoTax
    """
    quote = Quote(
        contact=ContactRef(contact_id=contact_id),
        line_items=line_items,
        date=date,
        expiry_date=expiry_date,
        reference=reference,
        quote_number=quote_number,
        title=title,
        summary=summary,
        terms=terms,
        status=status,
        line_amount_types=line_amount_types,
    )
    return await run_command(ctx, lambda client: client.create_quote(quote), "Quote created", "quote")


async def xero_update_quote(
    ctx: Context,
    quote_id: str,
    contact_id: str,
    date: str,
    line_items: Optional[List[LineItem]] = None,
    expiry_date: Optional[str] = None,
    reference: Optional[str] = None,
    title: Optional[str] = None,
    summary: Optional[str] = None,
    terms: Optional[str] = None,
    status: Optional[QuoteStatus] = None,
) -> str:
    """Update a quote. Xero requires the contact and date on every quote update."""
    quote = Quote(
        contact=ContactRef(contact_id=contact_id),
        date=date,
        line_items=line_items,
        expiry_date=expiry_date,
        reference=reference,
        title=title,
        summary=summary,
        terms=terms,
        status=status,
    )
    return await run_command(
        ctx, lambda client: client.update_quote(quote_id, quote), "Quote updated", "quote"
    )


async def xero_delete_quote(ctx: Context, quote_id: str) -> str:
    """Delete a quote (status DELETED)."""
    return await run_command(ctx, lambda client: client.delete_quote(quote_id), "Quote deleted")


TOOLS = [
    xero_list_quotes,
    xero_get_quote,
    xero_create_quote,
    xero_update_quote,
    xero_delete_quote,
]
