"""Inventory item tools."""

from typing import Optional

from mcp.server.fastmcp import Context

from ..models import Item, ItemDetails
from .base import ResponseFormat, run_command, run_query


async def xero_list_items(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List products and services (all items, not paginated)."""
    return await run_query(ctx, lambda client: client.list_items(where, order), "items", format)


async def xero_get_item(ctx: Context, item_id: str, format: ResponseFormat = "json") -> str:
    """Get an item by ItemID or item code."""
    return await run_query(ctx, lambda client: client.get_item(item_id), "item", format)


async def xero_create_item(
    ctx: Context,
    code: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    purchase_description: Optional[str] = None,
    sales_details: Optional[ItemDetails] = None,
    purchase_details: Optional[ItemDetails] = None,
    is_sold: Optional[bool] = None,
    is_purchased: Optional[bool] = None,
    is_tracked_as_inventory: Optional[bool] = None,
    inventory_asset_account_code: Optional[str] = None,
) -> str:
    """Create a product or service.

    Args:
        code: Item code (SKU), unique in the organisation
        name: Item name
        description: Sales description
        purchase_description: Purchase description
        sales_details: Sales unit price, account code and tax type
        purchase_details: Purchase unit price, account code and tax type
        is_sold: Item can be sold
        is_purchased: Item can be purchased
        is_tracked_as_inventory: Track quantity and value on hand
        inventory_asset_account_code: Inventory asset account for tracked items
    """
    item = Item(
        code=code,
        name=name,
        description=description,
        purchase_description=purchase_description,
        sales_details=sales_details,
        purchase_details=purchase_details,
        is_sold=is_sold,
        is_purchased=is_purchased,
        is_tracked_as_inventory=is_tracked_as_inventory,
        inventory_asset_account_code=inventory_asset_account_code,
    )
    return await run_command(ctx, lambda client: client.create_item(item), "Item created", "item")


async def xero_update_item(
    ctx: Context,
    item_id: str,
    code: Optional[str] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
    purchase_description: Optional[str] = None,
    sales_details: Optional[ItemDetails] = None,
    purchase_details: Optional[ItemDetails] = None,
    is_sold: Optional[bool] = None,
    is_purchased: Optional[bool] = None,
) -> str:
    """Update an item. Only the fields given are changed."""
    item = Item(
        code=code,
        name=name,
        description=description,
        purchase_description=purchase_description,
        sales_details=sales_details,
        purchase_details=purchase_details,
        is_sold=is_sold,
        is_purchased=is_purchased,
    )
    return await run_command(ctx, lambda client: client.update_item(item_id, item), "Item updated", "item")


async def xero_delete_item(ctx: Context, item_id: str) -> str:
    """Delete an item."""
    return await run_command(ctx, lambda client: client.delete_item(item_id), "Item deleted")


TOOLS = [
    xero_list_items,
    xero_get_item,
    xero_create_item,
    xero_update_item,
    xero_delete_item,
]
