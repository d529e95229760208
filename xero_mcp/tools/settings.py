"""Organisation settings tools: tax rates, currencies, tracking and branding."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import (
    Currency,
    RecordStatus,
    TaxComponent,
    TaxRate,
    TaxRateStatus,
    TrackingCategory,
    TrackingOption,
)
from .base import ResponseFormat, run_command, run_query


# =============================================================================
# TAX RATES
# =============================================================================

async def xero_list_tax_rates(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List tax rates."""
    return await run_query(ctx, lambda client: client.list_tax_rates(where, order), "tax_rates", format)


async def xero_get_tax_rate(ctx: Context, tax_type: str, format: ResponseFormat = "json") -> str:
    """Get a tax rate by its TaxType code (e.g. 'OUTPUT2')."""
    return await run_query(ctx, lambda client: client.get_tax_rate(tax_type), "tax_rate", format)


async def xero_create_tax_rate(
    ctx: Context,
    name: str,
    tax_components: List[TaxComponent],
    report_tax_type: Optional[str] = None,
) -> str:
    """Create a custom tax rate.

    Args:
        name: Tax rate name
        tax_components: Components, each with a name and rate
        report_tax_type: Reporting tax type (required in some regions)
    """
    tax_rate = TaxRate(name=name, tax_components=tax_components, report_tax_type=report_tax_type)
    return await run_command(
        ctx, lambda client: client.create_tax_rate(tax_rate), "Tax rate created", "tax_rate"
    )


async def xero_update_tax_rate(
    ctx: Context,
    tax_type: str,
    name: Optional[str] = None,
    status: Optional[TaxRateStatus] = None,
    tax_components: Optional[List[TaxComponent]] = None,
    report_tax_type: Optional[str] = None,
) -> str:
    """Update a tax rate identified by TaxType. Set status DELETED to remove it."""
    tax_rate = TaxRate(
        name=name,
        status=status,
        tax_components=tax_components,
        report_tax_type=report_tax_type,
    )
    return await run_command(
        ctx, lambda client: client.update_tax_rate(tax_type, tax_rate), "Tax rate updated", "tax_rate"
    )


# =============================================================================
# CURRENCIES
# =============================================================================

async def xero_list_currencies(ctx: Context, format: ResponseFormat = "json") -> str:
    """List the currencies enabled for the organisation."""
    return await run_query(ctx, lambda client: client.list_currencies(), "currencies", format)


async def xero_create_currency(ctx: Context, code: str, description: Optional[str] = None) -> str:
    """Enable a currency for the organisation (multi-currency plans only).

    Args:
        code: ISO 4217 currency code (e.g. 'EUR')
        description: Currency name
    """
    currency = Currency(code=code, description=description)
    return await run_command(
        ctx, lambda client: client.create_currency(currency), "Currency added", "currency"
    )


# =============================================================================
# TRACKING CATEGORIES
# =============================================================================

async def xero_list_tracking_categories(
    ctx: Context,
    include_archived: bool = False,
    format: ResponseFormat = "json",
) -> str:
    """List tracking categories and their options."""
    return await run_query(
        ctx,
        lambda client: client.list_tracking_categories(include_archived=include_archived),
        "tracking_categories",
        format,
    )


async def xero_get_tracking_category(
    ctx: Context,
    tracking_category_id: str,
    format: ResponseFormat = "json",
) -> str:
    """Get a tracking category and its options."""
    return await run_query(
        ctx,
        lambda client: client.get_tracking_category(tracking_category_id),
        "tracking_category",
        format,
    )


async def xero_create_tracking_category(ctx: Context, name: str) -> str:
    """Create a tracking category. Xero allows two active categories."""
    category = TrackingCategory(name=name)
    return await run_command(
        ctx,
        lambda client: client.create_tracking_category(category),
        "Tracking category created",
        "tracking_category",
    )


async def xero_update_tracking_category(
    ctx: Context,
    tracking_category_id: str,
    name: Optional[str] = None,
    status: Optional[RecordStatus] = None,
) -> str:
    """Rename or archive a tracking category."""
    category = TrackingCategory(name=name, status=status)
    return await run_command(
        ctx,
        lambda client: client.update_tracking_category(tracking_category_id, category),
        "Tracking category updated",
        "tracking_category",
    )


async def xero_delete_tracking_category(ctx: Context, tracking_category_id: str) -> str:
    """Delete a tracking category that has not been used."""
    return await run_command(
        ctx,
        lambda client: client.delete_tracking_category(tracking_category_id),
        "Tracking category deleted",
    )


async def xero_create_tracking_option(ctx: Context, tracking_category_id: str, name: str) -> str:
    """Add an option to a tracking category."""
    option = TrackingOption(name=name)
    return await run_command(
        ctx,
        lambda client: client.create_tracking_option(tracking_category_id, option),
        "Tracking option created",
        "tracking_option",
    )


async def xero_update_tracking_option(
    ctx: Context,
    tracking_category_id: str,
    tracking_option_id: str,
    name: Optional[str] = None,
    status: Optional[RecordStatus] = None,
) -> str:
    """Rename or archive a tracking option."""
    option = TrackingOption(name=name, status=status)
    return await run_command(
        ctx,
        lambda client: client.update_tracking_option(tracking_category_id, tracking_option_id, option),
        "Tracking option updated",
        "tracking_option",
    )


async def xero_delete_tracking_option(ctx: Context, tracking_category_id: str, tracking_option_id: str) -> str:
    """Delete a tracking option that has not been used."""
    return await run_command(
        ctx,
        lambda client: client.delete_tracking_option(tracking_category_id, tracking_option_id),
        "Tracking option deleted",
    )


# =============================================================================
# BRANDING THEMES
# =============================================================================

async def xero_list_branding_themes(ctx: Context, format: ResponseFormat = "json") -> str:
    """List branding themes used for invoice and quote PDFs."""
    return await run_query(ctx, lambda client: client.list_branding_themes(), "branding_themes", format)


async def xero_get_branding_theme(ctx: Context, branding_theme_id: str, format: ResponseFormat = "json") -> str:
    """Get a branding theme by BrandingThemeID."""
    return await run_query(
        ctx, lambda client: client.get_branding_theme(branding_theme_id), "branding_theme", format
    )


TOOLS = [
    xero_list_tax_rates,
    xero_get_tax_rate,
    xero_create_tax_rate,
    xero_update_tax_rate,
    xero_list_currencies,
    xero_create_currency,
    xero_list_tracking_categories,
    xero_get_tracking_category,
    xero_create_tracking_category,
    xero_update_tracking_category,
    xero_delete_tracking_category,
    xero_create_tracking_option,
    xero_update_tracking_option,
    xero_delete_tracking_option,
    xero_list_branding_themes,
    xero_get_branding_theme,
]
