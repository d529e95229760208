"""Chart of accounts tools."""

from typing import Optional

from mcp.server.fastmcp import Context

from ..models import Account, AccountClass, AccountType, BankAccountType, RecordStatus
from .base import ResponseFormat, run_command, run_query


async def xero_list_accounts(
    ctx: Context,
    where: Optional[str] = None,
    order: Optional[str] = None,
    account_class: Optional[AccountClass] = None,
    format: ResponseFormat = "json",
) -> str:
    """List the chart of accounts (all accounts, not paginated).

    Args:
        where: Filter expression (e.g. 'Type=="BANK"')
        order: Sort order (e.g. 'Code ASC')
        account_class: Only ASSET, EQUITY, EXPENSE, LIABILITY or REVENUE accounts
        format: Response format, json or markdown
    """
    return await run_query(
        ctx, lambda client: client.list_accounts(where, order, account_class), "accounts", format
    )


async def xero_get_account(ctx: Context, account_id: str, format: ResponseFormat = "json") -> str:
    """Get an account by AccountID."""
    return await run_query(ctx, lambda client: client.get_account(account_id), "account", format)


async def xero_create_account(
    ctx: Context,
    code: str,
    name: str,
    type: AccountType,
    description: Optional[str] = None,
    tax_type: Optional[str] = None,
    enable_payments_to_account: Optional[bool] = None,
    show_in_expense_claims: Optional[bool] = None,
    bank_account_number: Optional[str] = None,
    bank_account_type: Optional[BankAccountType] = None,
    currency_code: Optional[str] = None,
) -> str:
    """Create an account in the chart of accounts.

    Args:
        code: Account code, unique in the organisation (e.g. '200')
        name: Account name
        type: Account type (e.g. REVENUE, EXPENSE, BANK)
        description: Description
        tax_type: Default tax type
        enable_payments_to_account: Allow payments to be recorded against the account
        show_in_expense_claims: Show the account in expense claims
        bank_account_number: Required for BANK accounts
        bank_account_type: BANK, CREDITCARD or PAYPAL (BANK accounts only)
        currency_code: Currency of a BANK account
    """
    account = Account(
        code=code,
        name=name,
        type=type,
        description=description,
        tax_type=tax_type,
        enable_payments_to_account=enable_payments_to_account,
        show_in_expense_claims=show_in_expense_claims,
        bank_account_number=bank_account_number,
        bank_account_type=bank_account_type,
        currency_code=currency_code,
    )
    return await run_command(
        ctx, lambda client: client.create_account(account), "Account created", "account"
    )


async def xero_update_account(
    ctx: Context,
    account_id: str,
    code: Optional[str] = None,
    name: Optional[str] = None,
    type: Optional[AccountType] = None,
    description: Optional[str] = None,
    tax_type: Optional[str] = None,
    status: Optional[RecordStatus] = None,
    enable_payments_to_account: Optional[bool] = None,
    show_in_expense_claims: Optional[bool] = None,
) -> str:
    """Update an account. Only the fields given are changed."""
    account = Account(
        code=code,
        name=name,
        type=type,
        description=description,
        tax_type=tax_type,
        status=status,
        enable_payments_to_account=enable_payments_to_account,
        show_in_expense_claims=show_in_expense_claims,
    )
    return await run_command(
        ctx, lambda client: client.update_account(account_id, account), "Account updated", "account"
    )


async def xero_archive_account(ctx: Context, account_id: str) -> str:
    """Archive an account that has transactions and can no longer be deleted."""
    return await run_command(
        ctx, lambda client: client.archive_account(account_id), "Account archived", "account"
    )


async def xero_delete_account(ctx: Context, account_id: str) -> str:
    """Delete an account. Only accounts without transactions can be deleted."""
    return await run_command(ctx, lambda client: client.delete_account(account_id), "Account deleted")


TOOLS = [
    xero_list_accounts,
    xero_get_account,
    xero_create_account,
    xero_update_account,
    xero_archive_account,
    xero_delete_account,
]
