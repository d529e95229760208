"""Contact and contact group tools."""

from typing import List, Optional

from mcp.server.fastmcp import Context

from ..models import (
    Address,
    Contact,
    ContactGroup,
    ContactPerson,
    ContactStatus,
    PaymentTerms,
    Phone,
    RecordStatus,
)
from .base import ResponseFormat, run_command, run_query


async def xero_list_contacts(
    ctx: Context,
    page: int = 1,
    where: Optional[str] = None,
    order: Optional[str] = None,
    include_archived: bool = False,
    format: ResponseFormat = "json",
) -> str:
    """List contacts (customers and suppliers) from Xero, 100 per page.

    Args:
        page: Page number (1-based)
        where: Filter expression (e.g. 'IsCustomer==true')
        order: Sort order (e.g. 'Name ASC')
        include_archived: Include archived contacts
        format: Response format, json or markdown
    """
    return await run_query(
        ctx,
        lambda client: client.list_contacts(page, where, order, include_archived),
        "contacts",
        format,
    )


async def xero_get_contact(ctx: Context, contact_id: str, format: ResponseFormat = "json") -> str:
    """Get a contact by ContactID, including addresses, phones and balances."""
    return await run_query(ctx, lambda client: client.get_contact(contact_id), "contact", format)


async def xero_create_contact(
    ctx: Context,
    name: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    email_address: Optional[str] = None,
    contact_number: Optional[str] = None,
    account_number: Optional[str] = None,
    is_supplier: Optional[bool] = None,
    is_customer: Optional[bool] = None,
    tax_number: Optional[str] = None,
    default_currency: Optional[str] = None,
    bank_account_details: Optional[str] = None,
    addresses: Optional[List[Address]] = None,
    phones: Optional[List[Phone]] = None,
    contact_persons: Optional[List[ContactPerson]] = None,
    payment_terms: Optional[PaymentTerms] = None,
) -> str:
    """Create a new contact in Xero.

    Args:
        name: Contact name (must be unique in the organisation)
        first_name: First name of the primary person
        last_name: Last name of the primary person
        email_address: Email address
        contact_number: External reference number
        account_number: Account number
        is_supplier: Mark the contact as a supplier
        is_customer: Mark the contact as a customer
        tax_number: Tax / VAT / ABN number
        default_currency: Default currency code (e.g. 'NZD')
        bank_account_details: Bank account number
        addresses: POBOX, STREET or DELIVERY addresses
        phones: DEFAULT, DDI, MOBILE or FAX numbers
        contact_persons: Additional people at the contact
        payment_terms: Default bill and sales payment terms
    """
    contact = Contact(
        name=name,
        first_name=first_name,
        last_name=last_name,
        email_address=email_address,
        contact_number=contact_number,
        account_number=account_number,
        is_supplier=is_supplier,
        is_customer=is_customer,
        tax_number=tax_number,
        default_currency=default_currency,
        bank_account_details=bank_account_details,
        addresses=addresses,
        phones=phones,
        contact_persons=contact_persons,
        payment_terms=payment_terms,
    )
    return await run_command(
        ctx, lambda client: client.create_contact(contact), "Contact created", "contact"
    )


async def xero_update_contact(
    ctx: Context,
    contact_id: str,
    name: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    email_address: Optional[str] = None,
    contact_number: Optional[str] = None,
    account_number: Optional[str] = None,
    is_supplier: Optional[bool] = None,
    is_customer: Optional[bool] = None,
    tax_number: Optional[str] = None,
    default_currency: Optional[str] = None,
    contact_status: Optional[ContactStatus] = None,
    addresses: Optional[List[Address]] = None,
    phones: Optional[List[Phone]] = None,
    contact_persons: Optional[List[ContactPerson]] = None,
    payment_terms: Optional[PaymentTerms] = None,
) -> str:
    """Update an existing contact. Only the fields given are changed.

    Args:
        contact_id: ContactID to update
        contact_status: ACTIVE or ARCHIVED
        (other arguments as for xero_create_contact)
    """
    contact = Contact(
        name=name,
        first_name=first_name,
        last_name=last_name,
        email_address=email_address,
        contact_number=contact_number,
        account_number=account_number,
        is_supplier=is_supplier,
        is_customer=is_customer,
        tax_number=tax_number,
        default_currency=default_currency,
        contact_status=contact_status,
        addresses=addresses,
        phones=phones,
        contact_persons=contact_persons,
        payment_terms=payment_terms,
    )
    return await run_command(
        ctx, lambda client: client.update_contact(contact_id, contact), "Contact updated", "contact"
    )


async def xero_archive_contact(ctx: Context, contact_id: str) -> str:
    """Archive a contact. Xero contacts cannot be deleted."""
    return await run_command(
        ctx, lambda client: client.archive_contact(contact_id), "Contact archived", "contact"
    )


# =============================================================================
# CONTACT GROUPS
# =============================================================================

async def xero_list_contact_groups(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    format: ResponseFormat = "json",
) -> str:
    """List contact groups."""
    return await run_query(
        ctx, lambda client: client.list_contact_groups(where, order), "contact_groups", format
    )


async def xero_get_contact_group(ctx: Context, contact_group_id: str, format: ResponseFormat = "json") -> str:
    """Get a contact group and its member contacts."""
    return await run_query(
        ctx, lambda client: client.get_contact_group(contact_group_id), "contact_group", format
    )


async def xero_create_contact_group(ctx: Context, name: str) -> str:
    """Create a contact group."""
    group = ContactGroup(name=name)
    return await run_command(
        ctx, lambda client: client.create_contact_group(group), "Contact group created", "group"
    )


async def xero_update_contact_group(
    ctx: Context,
    contact_group_id: str,
    name: Optional[str] = None,
    status: Optional[RecordStatus] = None,
) -> str:
    """Rename a contact group or change its status."""
    group = ContactGroup(name=name, status=status)
    return await run_command(
        ctx,
        lambda client: client.update_contact_group(contact_group_id, group),
        "Contact group updated",
        "group",
    )


async def xero_delete_contact_group(ctx: Context, contact_group_id: str) -> str:
    """Delete a contact group (status DELETED). Member contacts are kept."""
    return await run_command(
        ctx,
        lambda client: client.delete_contact_group(contact_group_id),
        "Contact group deleted",
    )


async def xero_add_contacts_to_group(ctx: Context, contact_group_id: str, contact_ids: List[str]) -> str:
    """Add one or more contacts to a contact group.

    Args:
        contact_group_id: ContactGroupID
        contact_ids: ContactIDs to add
    """
    return await run_command(
        ctx,
        lambda client: client.add_contacts_to_group(contact_group_id, contact_ids),
        "Contacts added to group",
        "contacts",
    )


async def xero_remove_contact_from_group(ctx: Context, contact_group_id: str, contact_id: str) -> str:
    """Remove one contact from a contact group."""
    return await run_command(
        ctx,
        lambda client: client.remove_contact_from_group(contact_group_id, contact_id),
        "Contact removed from group",
    )


async def xero_remove_all_contacts_from_group(ctx: Context, contact_group_id: str) -> str:
    """Remove every contact from a contact group."""
    return await run_command(
        ctx,
        lambda client: client.remove_all_contacts_from_group(contact_group_id),
        "All contacts removed from group",
    )


TOOLS = [
    xero_list_contacts,
    xero_get_contact,
    xero_create_contact,
    xero_update_contact,
    xero_archive_contact,
    xero_list_contact_groups,
    xero_get_contact_group,
    xero_create_contact_group,
    xero_update_contact_group,
    xero_delete_contact_group,
    xero_add_contacts_to_group,
    xero_remove_contact_from_group,
    xero_remove_all_contacts_from_group,
]
