"""Xero Accounting API client.

One method per endpoint. Each method builds the request, sends it through
``XeroTransport`` and maps the response into domain models. Nothing is
cached and nothing is retried; errors from the transport propagate as-is.

Usage:
    async with XeroClient(credentials) as client:
        page = await client.list_invoices(page=2, statuses=["AUTHORISED"])
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx

from .config import Settings, get_settings
from .credentials import TenantCredentials
from .errors import XeroNotFoundError
from .mappers import (
    WireRecord,
    account_from_wire,
    account_to_wire,
    allocation_to_wire,
    bank_transaction_from_wire,
    bank_transaction_to_wire,
    bank_transfer_from_wire,
    bank_transfer_to_wire,
    batch_payment_from_wire,
    batch_payment_to_wire,
    branding_theme_from_wire,
    contact_from_wire,
    contact_group_from_wire,
    contact_group_to_wire,
    contact_to_wire,
    credit_note_from_wire,
    credit_note_to_wire,
    currency_from_wire,
    currency_to_wire,
    invoice_from_wire,
    invoice_to_wire,
    item_from_wire,
    item_to_wire,
    journal_from_wire,
    linked_transaction_from_wire,
    linked_transaction_to_wire,
    manual_journal_from_wire,
    manual_journal_to_wire,
    organisation_from_wire,
    overpayment_from_wire,
    payment_from_wire,
    payment_to_wire,
    prepayment_from_wire,
    purchase_order_from_wire,
    purchase_order_to_wire,
    quote_from_wire,
    quote_to_wire,
    repeating_invoice_from_wire,
    repeating_invoice_to_wire,
    report_from_wire,
    tax_rate_from_wire,
    tax_rate_to_wire,
    tracking_category_from_wire,
    tracking_category_to_wire,
    tracking_option_from_wire,
    tracking_option_to_wire,
    user_from_wire,
)
from .models import (
    Account,
    AccountClass,
    Allocation,
    BankTransaction,
    BankTransfer,
    BatchPayment,
    BrandingTheme,
    ConnectionStatus,
    Contact,
    ContactGroup,
    ContactStatus,
    CreditNote,
    Currency,
    Invoice,
    InvoiceRef,
    InvoiceStatus,
    Item,
    Journal,
    LinkedTransaction,
    ManualJournal,
    Organisation,
    Overpayment,
    PagedResult,
    Payment,
    Prepayment,
    PurchaseOrder,
    PurchaseOrderStatus,
    Quote,
    QuoteStatus,
    RecordStatus,
    RepeatingInvoice,
    Report,
    TaxRate,
    TrackingCategory,
    TrackingOption,
    User,
)
from .pagination import normalize_page, paged_result
from .transport import XeroTransport

logger = logging.getLogger(__name__)

M = TypeVar("M")


def _records(data: Any, key: str) -> List[WireRecord]:
    """Read the pluralised collection from a response envelope.

    A missing key raises KeyError: the envelope is malformed and the caller
    should see that rather than an empty result.
    """
    return data[key] or []


def _first(data: Any, key: str, what: str) -> WireRecord:
    records = _records(data, key)
    if not records:
        raise XeroNotFoundError(f"{what} not found")
    return records[0]


def _join(values: Optional[List[str]]) -> Optional[str]:
    if not values:
        return None
    return ",".join(values)


def _where_eq(field: str, value: str) -> str:
    safe_value = value.replace('"', '\\"')
    return f'{field}=="{safe_value}"'


class XeroClient:
    """Client for the Xero Accounting API, bound to one tenant."""

    def __init__(
        self,
        credentials: TenantCredentials,
        settings: Optional[Settings] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            credentials: Tenant credentials used for every call
            settings: Server settings (loaded from environment if omitted)
            http_transport: Optional httpx transport passed to the HTTP client
        """
        self.credentials = credentials
        self.settings = settings or get_settings()
        self._transport = XeroTransport(credentials, self.settings, http_transport)

    async def __aenter__(self) -> "XeroClient":
        """Async context manager entry."""
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self._transport.__aexit__(exc_type, exc_val, exc_tb)

    # =========================================================================
    # REQUEST HELPERS
    # =========================================================================

    async def _fetch_one(
        self,
        path: str,
        key: str,
        what: str,
        from_wire: Callable[[WireRecord], M],
        params: Optional[Dict[str, Any]] = None,
    ) -> M:
        data = await self._transport.send("GET", path, params=params)
        return from_wire(_first(data, key, what))

    async def _fetch_all(
        self,
        path: str,
        key: str,
        from_wire: Callable[[WireRecord], M],
        params: Optional[Dict[str, Any]] = None,
    ) -> List[M]:
        data = await self._transport.send("GET", path, params=params)
        return [from_wire(record) for record in _records(data, key)]

    async def _fetch_page(
        self,
        path: str,
        key: str,
        from_wire: Callable[[WireRecord], M],
        page: Optional[int],
        params: Optional[Dict[str, Any]] = None,
    ) -> PagedResult:
        page = normalize_page(page)
        query = dict(params or {})
        query["page"] = page
        items = await self._fetch_all(path, key, from_wire, params=query)
        result = paged_result(items, page)
        logger.debug(f"Fetched {result.count} records from {path} (page {page})")
        return result

    async def _write(
        self,
        method: str,
        path: str,
        key: str,
        what: str,
        from_wire: Callable[[WireRecord], M],
        body: Any,
    ) -> M:
        data = await self._transport.send(method, path, json_data=body)
        return from_wire(_first(data, key, what))

    async def _send_wrapped(
        self,
        method: str,
        path: str,
        key: str,
        what: str,
        from_wire: Callable[[WireRecord], M],
        payload: WireRecord,
    ) -> M:
        """Send one record under its pluralised key and map the echo."""
        return await self._write(method, path, key, what, from_wire, {key: [payload]})

    async def _allocate(
        self,
        path: str,
        key: str,
        what: str,
        from_wire: Callable[[WireRecord], M],
        invoice_id: str,
        amount: float,
        date: Optional[str],
    ) -> M:
        allocation = Allocation(invoice=InvoiceRef(invoice_id=invoice_id), amount=amount, date=date)
        return await self._write(
            "PUT", path, key, what, from_wire,
            {"Allocations": [allocation_to_wire(allocation)]},
        )

    # =========================================================================
    # ORGANISATION
    # =========================================================================

    async def get_organisation(self) -> Organisation:
        return await self._fetch_one("/Organisation", "Organisations", "Organisation", organisation_from_wire)

    async def test_connection(self) -> ConnectionStatus:
        """Verify the credentials by reading the organisation.

        Returns:
            ConnectionStatus naming the connected organisation

        Raises:
            XeroError: If the credentials are missing or rejected
        """
        organisation = await self.get_organisation()
        name = organisation.name or "Xero"
        logger.info(f"Connection verified for tenant {self.credentials.tenant_id} ({name})")
        return ConnectionStatus(
            connected=True,
            message=f"Connected to {name}",
            organisation_name=organisation.name,
        )

    # =========================================================================
    # CONTACTS
    # =========================================================================

    async def list_contacts(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
        include_archived: Optional[bool] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/Contacts", "Contacts", contact_from_wire, page,
            {"where": where, "order": order, "includeArchived": include_archived},
        )

    async def get_contact(self, contact_id: str) -> Contact:
        return await self._fetch_one(f"/Contacts/{contact_id}", "Contacts", "Contact", contact_from_wire)

    async def create_contact(self, contact: Contact) -> Contact:
        result = await self._send_wrapped(
            "POST", "/Contacts", "Contacts", "Contact", contact_from_wire, contact_to_wire(contact)
        )
        logger.info(f"Created Xero contact: {result.contact_id} ({result.name})")
        return result

    async def update_contact(self, contact_id: str, contact: Contact) -> Contact:
        result = await self._send_wrapped(
            "POST", f"/Contacts/{contact_id}", "Contacts", "Contact", contact_from_wire,
            contact_to_wire(contact),
        )
        logger.info(f"Updated Xero contact: {contact_id}")
        return result

    async def archive_contact(self, contact_id: str) -> Contact:
        return await self.update_contact(contact_id, Contact(contact_status=ContactStatus.ARCHIVED))

    # =========================================================================
    # CONTACT GROUPS
    # =========================================================================

    async def list_contact_groups(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[ContactGroup]:
        return await self._fetch_all(
            "/ContactGroups", "ContactGroups", contact_group_from_wire,
            {"where": where, "order": order},
        )

    async def get_contact_group(self, contact_group_id: str) -> ContactGroup:
        return await self._fetch_one(
            f"/ContactGroups/{contact_group_id}", "ContactGroups", "Contact group",
            contact_group_from_wire,
        )

    async def create_contact_group(self, group: ContactGroup) -> ContactGroup:
        result = await self._send_wrapped(
            "PUT", "/ContactGroups", "ContactGroups", "Contact group", contact_group_from_wire,
            contact_group_to_wire(group),
        )
        logger.info(f"Created Xero contact group: {result.contact_group_id} ({result.name})")
        return result

    async def update_contact_group(self, contact_group_id: str, group: ContactGroup) -> ContactGroup:
        return await self._send_wrapped(
            "POST", f"/ContactGroups/{contact_group_id}", "ContactGroups", "Contact group",
            contact_group_from_wire, contact_group_to_wire(group),
        )

    async def delete_contact_group(self, contact_group_id: str) -> ContactGroup:
        return await self.update_contact_group(contact_group_id, ContactGroup(status=RecordStatus.DELETED))

    async def add_contacts_to_group(self, contact_group_id: str, contact_ids: List[str]) -> List[Contact]:
        """Add contacts to a group.

        Returns:
            The contacts now in the group, as echoed by Xero
        """
        data = await self._transport.send(
            "PUT",
            f"/ContactGroups/{contact_group_id}/Contacts",
            json_data={"Contacts": [{"ContactID": contact_id} for contact_id in contact_ids]},
        )
        return [contact_from_wire(record) for record in _records(data, "Contacts")]

    async def remove_contact_from_group(self, contact_group_id: str, contact_id: str) -> None:
        await self._transport.send("DELETE", f"/ContactGroups/{contact_group_id}/Contacts/{contact_id}")

    async def remove_all_contacts_from_group(self, contact_group_id: str) -> None:
        await self._transport.send("DELETE", f"/ContactGroups/{contact_group_id}/Contacts")

    # =========================================================================
    # ACCOUNTS
    # =========================================================================

    async def list_accounts(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
        account_class: Optional[AccountClass] = None,
    ) -> List[Account]:
        if account_class is not None:
            class_filter = f'Class=="{AccountClass(account_class).value}"'
            where = f"{where}&&{class_filter}" if where else class_filter
        return await self._fetch_all(
            "/Accounts", "Accounts", account_from_wire, {"where": where, "order": order}
        )

    async def get_account(self, account_id: str) -> Account:
        return await self._fetch_one(f"/Accounts/{account_id}", "Accounts", "Account", account_from_wire)

    async def create_account(self, account: Account) -> Account:
        result = await self._write(
            "PUT", "/Accounts", "Accounts", "Account", account_from_wire, account_to_wire(account)
        )
        logger.info(f"Created Xero account: {result.account_id} ({result.code})")
        return result

    async def update_account(self, account_id: str, account: Account) -> Account:
        return await self._write(
            "POST", f"/Accounts/{account_id}", "Accounts", "Account", account_from_wire,
            account_to_wire(account),
        )

    async def archive_account(self, account_id: str) -> Account:
        return await self.update_account(account_id, Account(status=RecordStatus.ARCHIVED))

    async def delete_account(self, account_id: str) -> None:
        await self._transport.send("DELETE", f"/Accounts/{account_id}")

    # =========================================================================
    # INVOICES
    # =========================================================================

    async def list_invoices(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
        statuses: Optional[List[str]] = None,
        contact_ids: Optional[List[str]] = None,
        invoice_numbers: Optional[List[str]] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/Invoices", "Invoices", invoice_from_wire, page,
            {
                "where": where,
                "order": order,
                "Statuses": _join(statuses),
                "ContactIDs": _join(contact_ids),
                "InvoiceNumbers": _join(invoice_numbers),
            },
        )

    async def get_invoice(self, invoice_id: str) -> Invoice:
        return await self._fetch_one(f"/Invoices/{invoice_id}", "Invoices", "Invoice", invoice_from_wire)

    async def create_invoice(self, invoice: Invoice) -> Invoice:
        result = await self._send_wrapped(
            "POST", "/Invoices", "Invoices", "Invoice", invoice_from_wire, invoice_to_wire(invoice)
        )
        logger.info(f"Created Xero invoice: {result.invoice_id} ({result.invoice_number})")
        return result

    async def update_invoice(self, invoice_id: str, invoice: Invoice) -> Invoice:
        result = await self._send_wrapped(
            "POST", f"/Invoices/{invoice_id}", "Invoices", "Invoice", invoice_from_wire,
            invoice_to_wire(invoice),
        )
        logger.info(f"Updated Xero invoice: {invoice_id}")
        return result

    async def void_invoice(self, invoice_id: str) -> Invoice:
        return await self.update_invoice(invoice_id, Invoice(status=InvoiceStatus.VOIDED))

    async def delete_invoice(self, invoice_id: str) -> Invoice:
        """Delete a DRAFT or SUBMITTED invoice (status DELETED)."""
        return await self.update_invoice(invoice_id, Invoice(status=InvoiceStatus.DELETED))

    async def get_invoice_online_url(self, invoice_id: str) -> Optional[str]:
        """Return the customer-facing URL of a sales invoice."""
        data = await self._transport.send("GET", f"/Invoices/{invoice_id}/OnlineInvoice")
        record = _first(data, "OnlineInvoices", "Online invoice")
        return record.get("OnlineInvoiceUrl")

    async def email_invoice(self, invoice_id: str) -> None:
        """Ask Xero to email an AUTHORISED sales invoice to its contact."""
        await self._transport.send("POST", f"/Invoices/{invoice_id}/Email", json_data={})
        logger.info(f"Requested email for Xero invoice: {invoice_id}")

    # =========================================================================
    # CREDIT NOTES
    # =========================================================================

    async def list_credit_notes(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/CreditNotes", "CreditNotes", credit_note_from_wire, page,
            {"where": where, "order": order},
        )

    async def get_credit_note(self, credit_note_id: str) -> CreditNote:
        return await self._fetch_one(
            f"/CreditNotes/{credit_note_id}", "CreditNotes", "Credit note", credit_note_from_wire
        )

    async def create_credit_note(self, credit_note: CreditNote) -> CreditNote:
        result = await self._send_wrapped(
            "POST", "/CreditNotes", "CreditNotes", "Credit note", credit_note_from_wire,
            credit_note_to_wire(credit_note),
        )
        logger.info(f"Created Xero credit note: {result.credit_note_id}")
        return result

    async def update_credit_note(self, credit_note_id: str, credit_note: CreditNote) -> CreditNote:
        return await self._send_wrapped(
            "POST", f"/CreditNotes/{credit_note_id}", "CreditNotes", "Credit note",
            credit_note_from_wire, credit_note_to_wire(credit_note),
        )

    async def void_credit_note(self, credit_note_id: str) -> CreditNote:
        return await self.update_credit_note(credit_note_id, CreditNote(status=InvoiceStatus.VOIDED))

    async def allocate_credit_note(
        self,
        credit_note_id: str,
        invoice_id: str,
        amount: float,
        date: Optional[str] = None,
    ) -> CreditNote:
        return await self._allocate(
            f"/CreditNotes/{credit_note_id}/Allocations", "CreditNotes", "Credit note",
            credit_note_from_wire, invoice_id, amount, date,
        )

    # =========================================================================
    # PAYMENTS
    # =========================================================================

    async def list_payments(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/Payments", "Payments", payment_from_wire, page, {"where": where, "order": order}
        )

    async def get_payment(self, payment_id: str) -> Payment:
        return await self._fetch_one(f"/Payments/{payment_id}", "Payments", "Payment", payment_from_wire)

    async def create_payment(self, payment: Payment) -> Payment:
        result = await self._send_wrapped(
            "PUT", "/Payments", "Payments", "Payment", payment_from_wire, payment_to_wire(payment)
        )
        logger.info(f"Created Xero payment: {result.payment_id} ({result.amount})")
        return result

    async def delete_payment(self, payment_id: str) -> Payment:
        """Delete (reverse) a payment by setting its status to DELETED."""
        return await self._send_wrapped(
            "POST", f"/Payments/{payment_id}", "Payments", "Payment", payment_from_wire,
            {"Status": "DELETED"},
        )

    # =========================================================================
    # PREPAYMENTS & OVERPAYMENTS
    # =========================================================================

    async def list_prepayments(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/Prepayments", "Prepayments", prepayment_from_wire, page,
            {"where": where, "order": order},
        )

    async def get_prepayment(self, prepayment_id: str) -> Prepayment:
        return await self._fetch_one(
            f"/Prepayments/{prepayment_id}", "Prepayments", "Prepayment", prepayment_from_wire
        )

    async def allocate_prepayment(
        self,
        prepayment_id: str,
        invoice_id: str,
        amount: float,
        date: Optional[str] = None,
    ) -> Prepayment:
        return await self._allocate(
            f"/Prepayments/{prepayment_id}/Allocations", "Prepayments", "Prepayment",
            prepayment_from_wire, invoice_id, amount, date,
        )

    async def list_overpayments(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/Overpayments", "Overpayments", overpayment_from_wire, page,
            {"where": where, "order": order},
        )

    async def get_overpayment(self, overpayment_id: str) -> Overpayment:
        return await self._fetch_one(
            f"/Overpayments/{overpayment_id}", "Overpayments", "Overpayment", overpayment_from_wire
        )

    async def allocate_overpayment(
        self,
        overpayment_id: str,
        invoice_id: str,
        amount: float,
        date: Optional[str] = None,
    ) -> Overpayment:
        return await self._allocate(
            f"/Overpayments/{overpayment_id}/Allocations", "Overpayments", "Overpayment",
            overpayment_from_wire, invoice_id, amount, date,
        )

    # =========================================================================
    # BATCH PAYMENTS
    # =========================================================================

    async def list_batch_payments(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[BatchPayment]:
        return await self._fetch_all(
            "/BatchPayments", "BatchPayments", batch_payment_from_wire,
            {"where": where, "order": order},
        )

    async def get_batch_payment(self, batch_payment_id: str) -> BatchPayment:
        return await self._fetch_one(
            f"/BatchPayments/{batch_payment_id}", "BatchPayments", "Batch payment",
            batch_payment_from_wire,
        )

    async def create_batch_payment(self, batch: BatchPayment) -> BatchPayment:
        result = await self._send_wrapped(
            "PUT", "/BatchPayments", "BatchPayments", "Batch payment", batch_payment_from_wire,
            batch_payment_to_wire(batch),
        )
        logger.info(f"Created Xero batch payment: {result.batch_payment_id}")
        return result

    async def delete_batch_payment(self, batch_payment_id: str) -> BatchPayment:
        return await self._send_wrapped(
            "POST", f"/BatchPayments/{batch_payment_id}", "BatchPayments", "Batch payment",
            batch_payment_from_wire, {"Status": "DELETED"},
        )

    # =========================================================================
    # BANK TRANSACTIONS & TRANSFERS
    # =========================================================================

    async def list_bank_transactions(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/BankTransactions", "BankTransactions", bank_transaction_from_wire, page,
            {"where": where, "order": order},
        )

    async def get_bank_transaction(self, bank_transaction_id: str) -> BankTransaction:
        return await self._fetch_one(
            f"/BankTransactions/{bank_transaction_id}", "BankTransactions", "Bank transaction",
            bank_transaction_from_wire,
        )

    async def create_bank_transaction(self, transaction: BankTransaction) -> BankTransaction:
        result = await self._send_wrapped(
            "POST", "/BankTransactions", "BankTransactions", "Bank transaction",
            bank_transaction_from_wire, bank_transaction_to_wire(transaction),
        )
        logger.info(f"Created Xero bank transaction: {result.bank_transaction_id}")
        return result

    async def update_bank_transaction(
        self,
        bank_transaction_id: str,
        transaction: BankTransaction,
    ) -> BankTransaction:
        return await self._send_wrapped(
            "POST", f"/BankTransactions/{bank_transaction_id}", "BankTransactions",
            "Bank transaction", bank_transaction_from_wire, bank_transaction_to_wire(transaction),
        )

    async def list_bank_transfers(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[BankTransfer]:
        return await self._fetch_all(
            "/BankTransfers", "BankTransfers", bank_transfer_from_wire,
            {"where": where, "order": order},
        )

    async def get_bank_transfer(self, bank_transfer_id: str) -> BankTransfer:
        return await self._fetch_one(
            f"/BankTransfers/{bank_transfer_id}", "BankTransfers", "Bank transfer",
            bank_transfer_from_wire,
        )

    async def create_bank_transfer(self, transfer: BankTransfer) -> BankTransfer:
        result = await self._send_wrapped(
            "PUT", "/BankTransfers", "BankTransfers", "Bank transfer", bank_transfer_from_wire,
            bank_transfer_to_wire(transfer),
        )
        logger.info(f"Created Xero bank transfer: {result.bank_transfer_id} ({result.amount})")
        return result

    # =========================================================================
    # ITEMS
    # =========================================================================

    async def list_items(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[Item]:
        return await self._fetch_all("/Items", "Items", item_from_wire, {"where": where, "order": order})

    async def get_item(self, item_id: str) -> Item:
        """Fetch an item by ItemID or by Code."""
        return await self._fetch_one(f"/Items/{item_id}", "Items", "Item", item_from_wire)

    async def create_item(self, item: Item) -> Item:
        result = await self._send_wrapped("POST", "/Items", "Items", "Item", item_from_wire, item_to_wire(item))
        logger.info(f"Created Xero item: {result.item_id} ({result.code})")
        return result

    async def update_item(self, item_id: str, item: Item) -> Item:
        return await self._send_wrapped(
            "POST", f"/Items/{item_id}", "Items", "Item", item_from_wire, item_to_wire(item)
        )

    async def delete_item(self, item_id: str) -> None:
        await self._transport.send("DELETE", f"/Items/{item_id}")
        logger.info(f"Deleted Xero item: {item_id}")

    # =========================================================================
    # PURCHASE ORDERS
    # =========================================================================

    async def list_purchase_orders(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
        status: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/PurchaseOrders", "PurchaseOrders", purchase_order_from_wire, page,
            {"where": where, "order": order, "status": status},
        )

    async def get_purchase_order(self, purchase_order_id: str) -> PurchaseOrder:
        return await self._fetch_one(
            f"/PurchaseOrders/{purchase_order_id}", "PurchaseOrders", "Purchase order",
            purchase_order_from_wire,
        )

    async def create_purchase_order(self, order: PurchaseOrder) -> PurchaseOrder:
        result = await self._send_wrapped(
            "POST", "/PurchaseOrders", "PurchaseOrders", "Purchase order",
            purchase_order_from_wire, purchase_order_to_wire(order),
        )
        logger.info(f"Created Xero purchase order: {result.purchase_order_id}")
        return result

    async def update_purchase_order(self, purchase_order_id: str, order: PurchaseOrder) -> PurchaseOrder:
        return await self._send_wrapped(
            "POST", f"/PurchaseOrders/{purchase_order_id}", "PurchaseOrders", "Purchase order",
            purchase_order_from_wire, purchase_order_to_wire(order),
        )

    async def delete_purchase_order(self, purchase_order_id: str) -> PurchaseOrder:
        return await self.update_purchase_order(
            purchase_order_id, PurchaseOrder(status=PurchaseOrderStatus.DELETED)
        )

    # =========================================================================
    # QUOTES
    # =========================================================================

    async def list_quotes(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
        status: Optional[str] = None,
        contact_id: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/Quotes", "Quotes", quote_from_wire, page,
            {"where": where, "order": order, "Status": status, "ContactID": contact_id},
        )

    async def get_quote(self, quote_id: str) -> Quote:
        return await self._fetch_one(f"/Quotes/{quote_id}", "Quotes", "Quote", quote_from_wire)

    async def create_quote(self, quote: Quote) -> Quote:
        result = await self._send_wrapped(
            "POST", "/Quotes", "Quotes", "Quote", quote_from_wire, quote_to_wire(quote)
        )
        logger.info(f"Created Xero quote: {result.quote_id} ({result.quote_number})")
        return result

    async def update_quote(self, quote_id: str, quote: Quote) -> Quote:
        return await self._send_wrapped(
            "POST", f"/Quotes/{quote_id}", "Quotes", "Quote", quote_from_wire, quote_to_wire(quote)
        )

    async def delete_quote(self, quote_id: str) -> Quote:
        return await self.update_quote(quote_id, Quote(status=QuoteStatus.DELETED))

    # =========================================================================
    # JOURNALS
    # =========================================================================

    async def list_journals(
        self,
        offset: Optional[int] = None,
        payments_only: Optional[bool] = None,
    ) -> List[Journal]:
        """List general ledger journals.

        Xero returns up to 100 journals with a JournalNumber greater than
        ``offset``; pass the last JournalNumber seen to continue.
        """
        return await self._fetch_all(
            "/Journals", "Journals", journal_from_wire,
            {"offset": offset, "paymentsOnly": payments_only},
        )

    async def get_journal(self, journal_id: str) -> Journal:
        return await self._fetch_one(f"/Journals/{journal_id}", "Journals", "Journal", journal_from_wire)

    async def list_manual_journals(
        self,
        page: Optional[int] = None,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/ManualJournals", "ManualJournals", manual_journal_from_wire, page,
            {"where": where, "order": order},
        )

    async def get_manual_journal(self, manual_journal_id: str) -> ManualJournal:
        return await self._fetch_one(
            f"/ManualJournals/{manual_journal_id}", "ManualJournals", "Manual journal",
            manual_journal_from_wire,
        )

    async def create_manual_journal(self, journal: ManualJournal) -> ManualJournal:
        result = await self._send_wrapped(
            "POST", "/ManualJournals", "ManualJournals", "Manual journal",
            manual_journal_from_wire, manual_journal_to_wire(journal),
        )
        logger.info(f"Created Xero manual journal: {result.manual_journal_id}")
        return result

    async def update_manual_journal(self, manual_journal_id: str, journal: ManualJournal) -> ManualJournal:
        return await self._send_wrapped(
            "POST", f"/ManualJournals/{manual_journal_id}", "ManualJournals", "Manual journal",
            manual_journal_from_wire, manual_journal_to_wire(journal),
        )

    # =========================================================================
    # TAX RATES & CURRENCIES
    # =========================================================================

    async def list_tax_rates(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[TaxRate]:
        return await self._fetch_all(
            "/TaxRates", "TaxRates", tax_rate_from_wire, {"where": where, "order": order}
        )

    async def get_tax_rate(self, tax_type: str) -> TaxRate:
        return await self._fetch_one(
            "/TaxRates", "TaxRates", "Tax rate", tax_rate_from_wire,
            {"where": _where_eq("TaxType", tax_type)},
        )

    async def create_tax_rate(self, tax_rate: TaxRate) -> TaxRate:
        result = await self._send_wrapped(
            "PUT", "/TaxRates", "TaxRates", "Tax rate", tax_rate_from_wire, tax_rate_to_wire(tax_rate)
        )
        logger.info(f"Created Xero tax rate: {result.tax_type} ({result.name})")
        return result

    async def update_tax_rate(self, tax_type: str, tax_rate: TaxRate) -> TaxRate:
        """Update a tax rate. Xero identifies it by TaxType in the body."""
        payload = tax_rate_to_wire(tax_rate)
        payload["TaxType"] = tax_type
        return await self._send_wrapped("POST", "/TaxRates", "TaxRates", "Tax rate", tax_rate_from_wire, payload)

    async def list_currencies(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[Currency]:
        return await self._fetch_all(
            "/Currencies", "Currencies", currency_from_wire, {"where": where, "order": order}
        )

    async def create_currency(self, currency: Currency) -> Currency:
        result = await self._write(
            "PUT", "/Currencies", "Currencies", "Currency", currency_from_wire, currency_to_wire(currency)
        )
        logger.info(f"Added Xero currency: {result.code}")
        return result

    # =========================================================================
    # TRACKING CATEGORIES
    # =========================================================================

    async def list_tracking_categories(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
        include_archived: Optional[bool] = None,
    ) -> List[TrackingCategory]:
        return await self._fetch_all(
            "/TrackingCategories", "TrackingCategories", tracking_category_from_wire,
            {"where": where, "order": order, "includeArchived": include_archived},
        )

    async def get_tracking_category(self, tracking_category_id: str) -> TrackingCategory:
        return await self._fetch_one(
            f"/TrackingCategories/{tracking_category_id}", "TrackingCategories", "Tracking category",
            tracking_category_from_wire,
        )

    async def create_tracking_category(self, category: TrackingCategory) -> TrackingCategory:
        result = await self._write(
            "PUT", "/TrackingCategories", "TrackingCategories", "Tracking category",
            tracking_category_from_wire, tracking_category_to_wire(category),
        )
        logger.info(f"Created Xero tracking category: {result.tracking_category_id} ({result.name})")
        return result

    async def update_tracking_category(
        self,
        tracking_category_id: str,
        category: TrackingCategory,
    ) -> TrackingCategory:
        return await self._write(
            "POST", f"/TrackingCategories/{tracking_category_id}", "TrackingCategories",
            "Tracking category", tracking_category_from_wire, tracking_category_to_wire(category),
        )

    async def delete_tracking_category(self, tracking_category_id: str) -> None:
        await self._transport.send("DELETE", f"/TrackingCategories/{tracking_category_id}")

    async def create_tracking_option(self, tracking_category_id: str, option: TrackingOption) -> TrackingOption:
        return await self._write(
            "PUT", f"/TrackingCategories/{tracking_category_id}/Options", "Options",
            "Tracking option", tracking_option_from_wire, tracking_option_to_wire(option),
        )

    async def update_tracking_option(
        self,
        tracking_category_id: str,
        tracking_option_id: str,
        option: TrackingOption,
    ) -> TrackingOption:
        return await self._write(
            "POST", f"/TrackingCategories/{tracking_category_id}/Options/{tracking_option_id}",
            "Options", "Tracking option", tracking_option_from_wire, tracking_option_to_wire(option),
        )

    async def delete_tracking_option(self, tracking_category_id: str, tracking_option_id: str) -> None:
        await self._transport.send(
            "DELETE", f"/TrackingCategories/{tracking_category_id}/Options/{tracking_option_id}"
        )

    # =========================================================================
    # BRANDING THEMES & USERS
    # =========================================================================

    async def list_branding_themes(self) -> List[BrandingTheme]:
        return await self._fetch_all("/BrandingThemes", "BrandingThemes", branding_theme_from_wire)

    async def get_branding_theme(self, branding_theme_id: str) -> BrandingTheme:
        return await self._fetch_one(
            f"/BrandingThemes/{branding_theme_id}", "BrandingThemes", "Branding theme",
            branding_theme_from_wire,
        )

    async def list_users(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[User]:
        return await self._fetch_all("/Users", "Users", user_from_wire, {"where": where, "order": order})

    async def get_user(self, user_id: str) -> User:
        return await self._fetch_one(f"/Users/{user_id}", "Users", "User", user_from_wire)

    # =========================================================================
    # REPEATING INVOICES
    # =========================================================================

    async def list_repeating_invoices(
        self,
        where: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[RepeatingInvoice]:
        return await self._fetch_all(
            "/RepeatingInvoices", "RepeatingInvoices", repeating_invoice_from_wire,
            {"where": where, "order": order},
        )

    async def get_repeating_invoice(self, repeating_invoice_id: str) -> RepeatingInvoice:
        return await self._fetch_one(
            f"/RepeatingInvoices/{repeating_invoice_id}", "RepeatingInvoices", "Repeating invoice",
            repeating_invoice_from_wire,
        )

    async def create_repeating_invoice(self, invoice: RepeatingInvoice) -> RepeatingInvoice:
        result = await self._send_wrapped(
            "POST", "/RepeatingInvoices", "RepeatingInvoices", "Repeating invoice",
            repeating_invoice_from_wire, repeating_invoice_to_wire(invoice),
        )
        logger.info(f"Created Xero repeating invoice: {result.repeating_invoice_id}")
        return result

    async def update_repeating_invoice(
        self,
        repeating_invoice_id: str,
        invoice: RepeatingInvoice,
    ) -> RepeatingInvoice:
        return await self._send_wrapped(
            "POST", f"/RepeatingInvoices/{repeating_invoice_id}", "RepeatingInvoices",
            "Repeating invoice", repeating_invoice_from_wire, repeating_invoice_to_wire(invoice),
        )

    async def delete_repeating_invoice(self, repeating_invoice_id: str) -> RepeatingInvoice:
        return await self._send_wrapped(
            "POST", f"/RepeatingInvoices/{repeating_invoice_id}", "RepeatingInvoices",
            "Repeating invoice", repeating_invoice_from_wire, {"Status": "DELETED"},
        )

    # =========================================================================
    # LINKED TRANSACTIONS
    # =========================================================================

    async def list_linked_transactions(
        self,
        page: Optional[int] = None,
        source_transaction_id: Optional[str] = None,
        contact_id: Optional[str] = None,
        status: Optional[str] = None,
        target_transaction_id: Optional[str] = None,
    ) -> PagedResult:
        return await self._fetch_page(
            "/LinkedTransactions", "LinkedTransactions", linked_transaction_from_wire, page,
            {
                "SourceTransactionID": source_transaction_id,
                "ContactID": contact_id,
                "Status": status,
                "TargetTransactionID": target_transaction_id,
            },
        )

    async def get_linked_transaction(self, linked_transaction_id: str) -> LinkedTransaction:
        return await self._fetch_one(
            f"/LinkedTransactions/{linked_transaction_id}", "LinkedTransactions",
            "Linked transaction", linked_transaction_from_wire,
        )

    async def create_linked_transaction(self, link: LinkedTransaction) -> LinkedTransaction:
        result = await self._write(
            "PUT", "/LinkedTransactions", "LinkedTransactions", "Linked transaction",
            linked_transaction_from_wire, linked_transaction_to_wire(link),
        )
        logger.info(f"Created Xero linked transaction: {result.linked_transaction_id}")
        return result

    async def update_linked_transaction(
        self,
        linked_transaction_id: str,
        link: LinkedTransaction,
    ) -> LinkedTransaction:
        return await self._write(
            "POST", f"/LinkedTransactions/{linked_transaction_id}", "LinkedTransactions",
            "Linked transaction", linked_transaction_from_wire, linked_transaction_to_wire(link),
        )

    async def delete_linked_transaction(self, linked_transaction_id: str) -> None:
        await self._transport.send("DELETE", f"/LinkedTransactions/{linked_transaction_id}")

    # =========================================================================
    # REPORTS
    # =========================================================================

    async def list_reports(self) -> List[Report]:
        """List the reports published in the organisation."""
        return await self._fetch_all("/Reports", "Reports", report_from_wire)

    async def get_report(self, report_name: str, params: Optional[Dict[str, Any]] = None) -> Report:
        """Fetch a report by name (e.g. "BalanceSheet").

        Args:
            report_name: Xero report endpoint name
            params: Query parameters using Xero's camelCase names

        Returns:
            The report with its nested rows
        """
        return await self._fetch_one(f"/Reports/{report_name}", "Reports", "Report", report_from_wire, params)

    async def get_balance_sheet(
        self,
        date: Optional[str] = None,
        periods: Optional[int] = None,
        timeframe: Optional[str] = None,
        tracking_option_id1: Optional[str] = None,
        tracking_option_id2: Optional[str] = None,
        standard_layout: Optional[bool] = None,
        payments_only: Optional[bool] = None,
    ) -> Report:
        return await self.get_report("BalanceSheet", {
            "date": date,
            "periods": periods,
            "timeframe": timeframe,
            "trackingOptionID1": tracking_option_id1,
            "trackingOptionID2": tracking_option_id2,
            "standardLayout": standard_layout,
            "paymentsOnly": payments_only,
        })

    async def get_profit_and_loss(
        self,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        periods: Optional[int] = None,
        timeframe: Optional[str] = None,
        tracking_category_id: Optional[str] = None,
        tracking_option_id: Optional[str] = None,
        standard_layout: Optional[bool] = None,
        payments_only: Optional[bool] = None,
    ) -> Report:
        return await self.get_report("ProfitAndLoss", {
            "fromDate": from_date,
            "toDate": to_date,
            "periods": periods,
            "timeframe": timeframe,
            "trackingCategoryID": tracking_category_id,
            "trackingOptionID": tracking_option_id,
            "standardLayout": standard_layout,
            "paymentsOnly": payments_only,
        })

    async def get_trial_balance(
        self,
        date: Optional[str] = None,
        payments_only: Optional[bool] = None,
    ) -> Report:
        return await self.get_report("TrialBalance", {"date": date, "paymentsOnly": payments_only})

    async def get_bank_summary(
        self,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Report:
        return await self.get_report("BankSummary", {"fromDate": from_date, "toDate": to_date})

    async def get_aged_receivables_by_contact(
        self,
        contact_id: str,
        date: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Report:
        return await self.get_report("AgedReceivablesByContact", {
            "contactID": contact_id,
            "date": date,
            "fromDate": from_date,
            "toDate": to_date,
        })

    async def get_aged_payables_by_contact(
        self,
        contact_id: str,
        date: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Report:
        return await self.get_report("AgedPayablesByContact", {
            "contactID": contact_id,
            "date": date,
            "fromDate": from_date,
            "toDate": to_date,
        })

    async def get_budget_summary(
        self,
        date: Optional[str] = None,
        periods: Optional[int] = None,
        timeframe: Optional[int] = None,
    ) -> Report:
        return await self.get_report("BudgetSummary", {
            "date": date,
            "periods": periods,
            "timeframe": timeframe,
        })

    async def get_executive_summary(self, date: Optional[str] = None) -> Report:
        return await self.get_report("ExecutiveSummary", {"date": date})
