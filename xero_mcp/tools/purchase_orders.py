"""Purchase order tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import ContactRef, LineAmountType, LineItem, PurchaseOrder, PurchaseOrderStatus
from .base import ResponseFormat, run_command, run_query


async def xero_list_purchase_orders(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    status: Optional[PurchaseOrderStatus] = None,
    format: ResponseFormat = "json",
) -> str:
    """List purchase orders, 100 per page, optionally by status."""
    status_value = PurchaseOrderStatus(status).value if status else None
    return await run_query(
        ctx,
        lambda client: client.list_purchase_orders(page, where, order, status_value),
        "purchase_orders",
        format,
    )


async def xero_get_purchase_order(ctx: Context, purchase_order_id: str, format: ResponseFormat = "json") -> str:
    """Get a purchase order by PurchaseOrderID or number."""
    return await run_query(
        ctx, lambda client: client.get_purchase_order(purchase_order_id), "purchase_order", format
    )


async def xero_create_purchase_order(
    ctx: Context,
    contact_id: str,
    line_items: List[LineItem],
    date: Optional[str] = None,
    delivery_date: Optional[str] = None,
    reference: Optional[str] = None,
    purchase_order_number: Optional[str] = None,
    status: Optional[PurchaseOrderStatus] = None,
    line_amount_types: Optional[LineAmountType] = None,
    delivery_address: Optional[str] = None,
    attention_to: Optional[str] = None,
    telephone: Optional[str] = None,
    delivery_instructions: Optional[str] = None,
) -> str:
    """Create a purchase order for a supplier.

    Args:
        contact_id: ContactID of the supplier
        line_items: Order lines
        date: Order date (YYYY-MM-DD)
        delivery_date: Expected delivery date (YYYY-MM-DD)
        reference: Reference
        purchase_order_number: Order number; Xero assigns one if omitted
        status: DRAFT, SUBMITTED or AUTHORISED
        line_amount_types: Exclusive, Inclusive or NoTax
        delivery_address: Delivery address
        attention_to: Person to deliver to
        telephone: Delivery contact phone
        delivery_instructions: Delivery instructions
    """
    order = PurchaseOrder(
        contact=ContactRef(contact_id=contact_id),
        line_items=line_items,
        date=date,
        delivery_date=delivery_date,
        reference=reference,
        purchase_order_number=purchase_order_number,
        status=status,
        line_amount_types=line_amount_types,
        delivery_address=delivery_address,
        attention_to=attention_to,
        telephone=telephone,
        delivery_instructions=delivery_instructions,
    )
    return await run_command(
        ctx, lambda client: client.create_purchase_order(order), "Purchase order created", "purchase_order"
    )


async def xero_update_purchase_order(
    ctx: Context,
    purchase_order_id: str,
    line_items: Optional[List[LineItem]] = None,
    date: Optional[str] = None,
    delivery_date: Optional[str] = None,
    reference: Optional[str] = None,
    status: Optional[PurchaseOrderStatus] = None,
    delivery_address: Optional[str] = None,
    delivery_instructions: Optional[str] = None,
) -> str:
    """Update a purchase order. Only the fields given are changed."""
    order = PurchaseOrder(
        line_items=line_items,
        date=date,
        delivery_date=delivery_date,
        reference=reference,
        status=status,
        delivery_address=delivery_address,
        delivery_instructions=delivery_instructions,
    )
    return await run_command(
        ctx,
        lambda client: client.update_purchase_order(purchase_order_id, order),
        "Purchase order updated",
        "purchase_order",
    )


async def xero_delete_purchase_order(ctx: Context, purchase_order_id: str) -> str:
    """Delete a purchase order (status DELETED)."""
    return await run_command(
        ctx, lambda client: client.delete_purchase_order(purchase_order_id), "Purchase order deleted"
    )


TOOLS = [
    xero_list_purchase_orders,
    xero_get_purchase_order,
    xero_create_purchase_order,
    xero_update_purchase_order,
    xero_delete_purchase_order,
]
