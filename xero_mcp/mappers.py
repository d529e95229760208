"""Two-way mapping between Xero wire records and domain models.

Each entity kind has a pure pair of functions:

- ``<kind>_from_wire(record)`` reads every documented PascalCase field of a
  decoded JSON record. Absent or null fields become ``None``.
- ``<kind>_to_wire(model)`` builds a sparse write payload. A key is emitted
  exactly when the model field is not ``None``; ``False``, ``0`` and ``""``
  are all sent. Identifiers, timestamps and remote-computed totals are
  never written.

The pairs are collected in ``MAPPERS``, keyed by entity kind.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type, TypeVar

from .models import (
    Account,
    AccountClass,
    AccountRef,
    AccountType,
    Address,
    AddressType,
    Allocation,
    Balance,
    BankAccountType,
    BankTransaction,
    BankTransactionStatus,
    BankTransactionType,
    BankTransfer,
    BatchPayment,
    BatchPaymentType,
    BrandingTheme,
    Contact,
    ContactBalances,
    ContactGroup,
    ContactPerson,
    ContactRef,
    ContactStatus,
    CreditNote,
    CreditNoteType,
    Currency,
    Invoice,
    InvoiceRef,
    InvoiceStatus,
    InvoiceType,
    Item,
    ItemDetails,
    Journal,
    JournalLine,
    LineAmountType,
    LineItem,
    LinkedTransaction,
    LinkedTransactionStatus,
    ManualJournal,
    ManualJournalLine,
    ManualJournalStatus,
    Organisation,
    Overpayment,
    OverpaymentType,
    Payment,
    PaymentStatus,
    PaymentTerm,
    PaymentTermType,
    PaymentTerms,
    PaymentType,
    Phone,
    PhoneType,
    Prepayment,
    PrepaymentType,
    PurchaseOrder,
    PurchaseOrderStatus,
    Quote,
    QuoteStatus,
    RecordStatus,
    RepeatingInvoice,
    RepeatingInvoiceStatus,
    Report,
    ReportCell,
    ReportRow,
    Schedule,
    ScheduleUnit,
    TaxComponent,
    TaxRate,
    TaxRateStatus,
    TrackingCategory,
    TrackingOption,
    TrackingRef,
    User,
)

logger = logging.getLogger(__name__)

WireRecord = Dict[str, Any]
E = TypeVar("E", bound=Enum)
M = TypeVar("M")


# =============================================================================
# HELPERS
# =============================================================================

def _enum(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Coerce a wire string into an enum member, or None if unknown."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug(f"Unknown {enum_cls.__name__} value from Xero: {value!r}")
        return None


def _date(record: WireRecord, key: str) -> Optional[str]:
    """Read a date field, preferring Xero's ISO ``<Key>String`` twin.

    Xero sends dates as ``/Date(1705764000000+0000)/`` and, for most
    fields, an ISO copy under ``DateString``, ``DueDateString`` and so on.
    """
    value = record.get(f"{key}String")
    if value:
        return value
    return record.get(key)


def _many(records: Any, from_wire: Callable[[WireRecord], M]) -> Optional[List[M]]:
    if records is None:
        return None
    return [from_wire(record) for record in records]


def _one(record: Any, from_wire: Callable[[WireRecord], M]) -> Optional[M]:
    if record is None:
        return None
    return from_wire(record)


def _put(out: WireRecord, key: str, value: Any) -> None:
    """Set ``out[key]`` unless value is None. Enums are written as their value."""
    if value is None:
        return
    if isinstance(value, Enum):
        value = value.value
    out[key] = value


def _put_many(out: WireRecord, key: str, values: Optional[list], to_wire: Callable[[Any], WireRecord]) -> None:
    if values is not None:
        out[key] = [to_wire(value) for value in values]


def _put_one(out: WireRecord, key: str, value: Any, to_wire: Callable[[Any], Optional[WireRecord]]) -> None:
    if value is None:
        return
    wire = to_wire(value)
    if wire is not None:
        out[key] = wire


# =============================================================================
# REFERENCES
# =============================================================================

def contact_ref_from_wire(record: WireRecord) -> ContactRef:
    return ContactRef(contact_id=record.get("ContactID"), name=record.get("Name"))


def contact_ref_to_wire(ref: ContactRef) -> Optional[WireRecord]:
    if ref.contact_id is None:
        return None
    return {"ContactID": ref.contact_id}


def account_ref_from_wire(record: WireRecord) -> AccountRef:
    return AccountRef(
        account_id=record.get("AccountID"),
        code=record.get("Code"),
        name=record.get("Name"),
    )


def account_ref_to_wire(ref: AccountRef) -> Optional[WireRecord]:
    """Accounts may be referenced by AccountID or, failing that, by Code."""
    if ref.account_id is not None:
        return {"AccountID": ref.account_id}
    if ref.code is not None:
        return {"Code": ref.code}
    return None


def invoice_ref_from_wire(record: WireRecord) -> InvoiceRef:
    return InvoiceRef(
        invoice_id=record.get("InvoiceID"),
        invoice_number=record.get("InvoiceNumber"),
    )


def invoice_ref_to_wire(ref: InvoiceRef) -> Optional[WireRecord]:
    if ref.invoice_id is None:
        return None
    return {"InvoiceID": ref.invoice_id}


# =============================================================================
# LINE ITEMS & ALLOCATIONS
# =============================================================================

def tracking_ref_from_wire(record: WireRecord) -> TrackingRef:
    return TrackingRef(
        tracking_category_id=record.get("TrackingCategoryID"),
        tracking_option_id=record.get("TrackingOptionID"),
        name=record.get("Name"),
        option=record.get("Option"),
    )


def tracking_ref_to_wire(tracking: TrackingRef) -> WireRecord:
    out: WireRecord = {}
    _put(out, "TrackingCategoryID", tracking.tracking_category_id)
    _put(out, "TrackingOptionID", tracking.tracking_option_id)
    _put(out, "Name", tracking.name)
    _put(out, "Option", tracking.option)
    return out


def line_item_from_wire(record: WireRecord) -> LineItem:
    return LineItem(
        line_item_id=record.get("LineItemID"),
        description=record.get("Description"),
        quantity=record.get("Quantity"),
        unit_amount=record.get("UnitAmount"),
        item_code=record.get("ItemCode"),
        account_code=record.get("AccountCode"),
        tax_type=record.get("TaxType"),
        tax_amount=record.get("TaxAmount"),
        line_amount=record.get("LineAmount"),
        discount_rate=record.get("DiscountRate"),
        discount_amount=record.get("DiscountAmount"),
        tracking=_many(record.get("Tracking"), tracking_ref_from_wire),
    )


def line_item_to_wire(line: LineItem) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Description", line.description)
    _put(out, "Quantity", line.quantity)
    _put(out, "UnitAmount", line.unit_amount)
    _put(out, "ItemCode", line.item_code)
    _put(out, "AccountCode", line.account_code)
    _put(out, "TaxType", line.tax_type)
    _put(out, "DiscountRate", line.discount_rate)
    _put_many(out, "Tracking", line.tracking, tracking_ref_to_wire)
    return out


def allocation_from_wire(record: WireRecord) -> Allocation:
    return Allocation(
        allocation_id=record.get("AllocationID"),
        invoice=_one(record.get("Invoice"), invoice_ref_from_wire),
        amount=record.get("Amount"),
        date=_date(record, "Date"),
    )


def allocation_to_wire(allocation: Allocation) -> WireRecord:
    out: WireRecord = {}
    _put_one(out, "Invoice", allocation.invoice, invoice_ref_to_wire)
    _put(out, "Amount", allocation.amount)
    _put(out, "Date", allocation.date)
    return out


# =============================================================================
# ORGANISATION & USERS
# =============================================================================

def organisation_from_wire(record: WireRecord) -> Organisation:
    return Organisation(
        organisation_id=record.get("OrganisationID"),
        name=record.get("Name"),
        legal_name=record.get("LegalName"),
        short_code=record.get("ShortCode"),
        organisation_type=record.get("OrganisationType"),
        organisation_entity_type=record.get("OrganisationEntityType"),
        organisation_status=record.get("OrganisationStatus"),
        base_currency=record.get("BaseCurrency"),
        country_code=record.get("CountryCode"),
        is_demo_company=record.get("IsDemoCompany"),
        sales_tax_basis=record.get("SalesTaxBasis"),
        sales_tax_period=record.get("SalesTaxPeriod"),
        financial_year_end_day=record.get("FinancialYearEndDay"),
        financial_year_end_month=record.get("FinancialYearEndMonth"),
        timezone=record.get("Timezone"),
        version=record.get("Version"),
        line_of_business=record.get("LineOfBusiness"),
        created_date_utc=record.get("CreatedDateUTC"),
    )


def user_from_wire(record: WireRecord) -> User:
    return User(
        user_id=record.get("UserID"),
        email_address=record.get("EmailAddress"),
        first_name=record.get("FirstName"),
        last_name=record.get("LastName"),
        is_subscriber=record.get("IsSubscriber"),
        organisation_role=record.get("OrganisationRole"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


# =============================================================================
# CONTACTS
# =============================================================================

def address_from_wire(record: WireRecord) -> Address:
    return Address(
        address_type=_enum(AddressType, record.get("AddressType")),
        address_line1=record.get("AddressLine1"),
        address_line2=record.get("AddressLine2"),
        address_line3=record.get("AddressLine3"),
        address_line4=record.get("AddressLine4"),
        city=record.get("City"),
        region=record.get("Region"),
        postal_code=record.get("PostalCode"),
        country=record.get("Country"),
        attention_to=record.get("AttentionTo"),
    )


def address_to_wire(address: Address) -> WireRecord:
    out: WireRecord = {}
    _put(out, "AddressType", address.address_type)
    _put(out, "AddressLine1", address.address_line1)
    _put(out, "AddressLine2", address.address_line2)
    _put(out, "AddressLine3", address.address_line3)
    _put(out, "AddressLine4", address.address_line4)
    _put(out, "City", address.city)
    _put(out, "Region", address.region)
    _put(out, "PostalCode", address.postal_code)
    _put(out, "Country", address.country)
    _put(out, "AttentionTo", address.attention_to)
    return out


def phone_from_wire(record: WireRecord) -> Phone:
    return Phone(
        phone_type=_enum(PhoneType, record.get("PhoneType")),
        phone_number=record.get("PhoneNumber"),
        phone_area_code=record.get("PhoneAreaCode"),
        phone_country_code=record.get("PhoneCountryCode"),
    )


def phone_to_wire(phone: Phone) -> WireRecord:
    out: WireRecord = {}
    _put(out, "PhoneType", phone.phone_type)
    _put(out, "PhoneNumber", phone.phone_number)
    _put(out, "PhoneAreaCode", phone.phone_area_code)
    _put(out, "PhoneCountryCode", phone.phone_country_code)
    return out


def contact_person_from_wire(record: WireRecord) -> ContactPerson:
    return ContactPerson(
        first_name=record.get("FirstName"),
        last_name=record.get("LastName"),
        email_address=record.get("EmailAddress"),
        include_in_emails=record.get("IncludeInEmails"),
    )


def contact_person_to_wire(person: ContactPerson) -> WireRecord:
    out: WireRecord = {}
    _put(out, "FirstName", person.first_name)
    _put(out, "LastName", person.last_name)
    _put(out, "EmailAddress", person.email_address)
    _put(out, "IncludeInEmails", person.include_in_emails)
    return out


def payment_term_from_wire(record: WireRecord) -> PaymentTerm:
    return PaymentTerm(
        day=record.get("Day"),
        type=_enum(PaymentTermType, record.get("Type")),
    )


def payment_term_to_wire(term: PaymentTerm) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Day", term.day)
    _put(out, "Type", term.type)
    return out


def payment_terms_from_wire(record: WireRecord) -> PaymentTerms:
    return PaymentTerms(
        bills=_one(record.get("Bills"), payment_term_from_wire),
        sales=_one(record.get("Sales"), payment_term_from_wire),
    )


def payment_terms_to_wire(terms: PaymentTerms) -> WireRecord:
    out: WireRecord = {}
    _put_one(out, "Bills", terms.bills, payment_term_to_wire)
    _put_one(out, "Sales", terms.sales, payment_term_to_wire)
    return out


def _balance_from_wire(record: WireRecord) -> Balance:
    return Balance(outstanding=record.get("Outstanding"), overdue=record.get("Overdue"))


def contact_balances_from_wire(record: WireRecord) -> ContactBalances:
    return ContactBalances(
        accounts_receivable=_one(record.get("AccountsReceivable"), _balance_from_wire),
        accounts_payable=_one(record.get("AccountsPayable"), _balance_from_wire),
    )


def contact_group_from_wire(record: WireRecord) -> ContactGroup:
    return ContactGroup(
        contact_group_id=record.get("ContactGroupID"),
        name=record.get("Name"),
        status=_enum(RecordStatus, record.get("Status")),
        contacts=_many(record.get("Contacts"), contact_ref_from_wire),
    )


def contact_group_to_wire(group: ContactGroup) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Name", group.name)
    _put(out, "Status", group.status)
    return out


def contact_from_wire(record: WireRecord) -> Contact:
    return Contact(
        contact_id=record.get("ContactID"),
        contact_number=record.get("ContactNumber"),
        account_number=record.get("AccountNumber"),
        contact_status=_enum(ContactStatus, record.get("ContactStatus")),
        name=record.get("Name"),
        first_name=record.get("FirstName"),
        last_name=record.get("LastName"),
        email_address=record.get("EmailAddress"),
        bank_account_details=record.get("BankAccountDetails"),
        tax_number=record.get("TaxNumber"),
        accounts_receivable_tax_type=record.get("AccountsReceivableTaxType"),
        accounts_payable_tax_type=record.get("AccountsPayableTaxType"),
        is_supplier=record.get("IsSupplier"),
        is_customer=record.get("IsCustomer"),
        default_currency=record.get("DefaultCurrency"),
        addresses=_many(record.get("Addresses"), address_from_wire),
        phones=_many(record.get("Phones"), phone_from_wire),
        contact_persons=_many(record.get("ContactPersons"), contact_person_from_wire),
        payment_terms=_one(record.get("PaymentTerms"), payment_terms_from_wire),
        balances=_one(record.get("Balances"), contact_balances_from_wire),
        contact_groups=_many(record.get("ContactGroups"), contact_group_from_wire),
        has_attachments=record.get("HasAttachments"),
        has_validation_errors=record.get("HasValidationErrors"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def contact_to_wire(contact: Contact) -> WireRecord:
    out: WireRecord = {}
    _put(out, "ContactNumber", contact.contact_number)
    _put(out, "AccountNumber", contact.account_number)
    _put(out, "ContactStatus", contact.contact_status)
    _put(out, "Name", contact.name)
    _put(out, "FirstName", contact.first_name)
    _put(out, "LastName", contact.last_name)
    _put(out, "EmailAddress", contact.email_address)
    _put(out, "BankAccountDetails", contact.bank_account_details)
    _put(out, "TaxNumber", contact.tax_number)
    _put(out, "AccountsReceivableTaxType", contact.accounts_receivable_tax_type)
    _put(out, "AccountsPayableTaxType", contact.accounts_payable_tax_type)
    _put(out, "IsSupplier", contact.is_supplier)
    _put(out, "IsCustomer", contact.is_customer)
    _put(out, "DefaultCurrency", contact.default_currency)
    _put_many(out, "Addresses", contact.addresses, address_to_wire)
    _put_many(out, "Phones", contact.phones, phone_to_wire)
    _put_many(out, "ContactPersons", contact.contact_persons, contact_person_to_wire)
    _put_one(out, "PaymentTerms", contact.payment_terms, payment_terms_to_wire)
    return out


# =============================================================================
# CHART OF ACCOUNTS
# =============================================================================

def account_from_wire(record: WireRecord) -> Account:
    return Account(
        account_id=record.get("AccountID"),
        code=record.get("Code"),
        name=record.get("Name"),
        type=_enum(AccountType, record.get("Type")),
        status=_enum(RecordStatus, record.get("Status")),
        description=record.get("Description"),
        tax_type=record.get("TaxType"),
        account_class=_enum(AccountClass, record.get("Class")),
        system_account=record.get("SystemAccount"),
        enable_payments_to_account=record.get("EnablePaymentsToAccount"),
        show_in_expense_claims=record.get("ShowInExpenseClaims"),
        bank_account_number=record.get("BankAccountNumber"),
        bank_account_type=_enum(BankAccountType, record.get("BankAccountType")),
        currency_code=record.get("CurrencyCode"),
        reporting_code=record.get("ReportingCode"),
        reporting_code_name=record.get("ReportingCodeName"),
        add_to_watchlist=record.get("AddToWatchlist"),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def account_to_wire(account: Account) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Code", account.code)
    _put(out, "Name", account.name)
    _put(out, "Type", account.type)
    _put(out, "Status", account.status)
    _put(out, "Description", account.description)
    _put(out, "TaxType", account.tax_type)
    _put(out, "EnablePaymentsToAccount", account.enable_payments_to_account)
    _put(out, "ShowInExpenseClaims", account.show_in_expense_claims)
    _put(out, "BankAccountNumber", account.bank_account_number)
    _put(out, "BankAccountType", account.bank_account_type)
    _put(out, "CurrencyCode", account.currency_code)
    _put(out, "ReportingCode", account.reporting_code)
    _put(out, "AddToWatchlist", account.add_to_watchlist)
    return out


# =============================================================================
# SALES & PURCHASES
# =============================================================================

def invoice_from_wire(record: WireRecord) -> Invoice:
    return Invoice(
        invoice_id=record.get("InvoiceID"),
        invoice_number=record.get("InvoiceNumber"),
        type=_enum(InvoiceType, record.get("Type")),
        status=_enum(InvoiceStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        date=_date(record, "Date"),
        due_date=_date(record, "DueDate"),
        expected_payment_date=_date(record, "ExpectedPaymentDate"),
        planned_payment_date=_date(record, "PlannedPaymentDate"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        reference=record.get("Reference"),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        branding_theme_id=record.get("BrandingThemeID"),
        url=record.get("Url"),
        sent_to_contact=record.get("SentToContact"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        total_discount=record.get("TotalDiscount"),
        amount_due=record.get("AmountDue"),
        amount_paid=record.get("AmountPaid"),
        amount_credited=record.get("AmountCredited"),
        fully_paid_on_date=_date(record, "FullyPaidOnDate"),
        has_attachments=record.get("HasAttachments"),
        has_errors=record.get("HasErrors"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def invoice_to_wire(invoice: Invoice) -> WireRecord:
    out: WireRecord = {}
    _put(out, "InvoiceNumber", invoice.invoice_number)
    _put(out, "Type", invoice.type)
    _put(out, "Status", invoice.status)
    _put_one(out, "Contact", invoice.contact, contact_ref_to_wire)
    _put_many(out, "LineItems", invoice.line_items, line_item_to_wire)
    _put(out, "Date", invoice.date)
    _put(out, "DueDate", invoice.due_date)
    _put(out, "ExpectedPaymentDate", invoice.expected_payment_date)
    _put(out, "PlannedPaymentDate", invoice.planned_payment_date)
    _put(out, "LineAmountTypes", invoice.line_amount_types)
    _put(out, "Reference", invoice.reference)
    _put(out, "CurrencyCode", invoice.currency_code)
    _put(out, "CurrencyRate", invoice.currency_rate)
    _put(out, "BrandingThemeID", invoice.branding_theme_id)
    _put(out, "Url", invoice.url)
    _put(out, "SentToContact", invoice.sent_to_contact)
    return out


def credit_note_from_wire(record: WireRecord) -> CreditNote:
    return CreditNote(
        credit_note_id=record.get("CreditNoteID"),
        credit_note_number=record.get("CreditNoteNumber"),
        type=_enum(CreditNoteType, record.get("Type")),
        status=_enum(InvoiceStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        date=_date(record, "Date"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        reference=record.get("Reference"),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        branding_theme_id=record.get("BrandingThemeID"),
        sent_to_contact=record.get("SentToContact"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        remaining_credit=record.get("RemainingCredit"),
        fully_paid_on_date=_date(record, "FullyPaidOnDate"),
        allocations=_many(record.get("Allocations"), allocation_from_wire),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def credit_note_to_wire(credit_note: CreditNote) -> WireRecord:
    out: WireRecord = {}
    _put(out, "CreditNoteNumber", credit_note.credit_note_number)
    _put(out, "Type", credit_note.type)
    _put(out, "Status", credit_note.status)
    _put_one(out, "Contact", credit_note.contact, contact_ref_to_wire)
    _put_many(out, "LineItems", credit_note.line_items, line_item_to_wire)
    _put(out, "Date", credit_note.date)
    _put(out, "LineAmountTypes", credit_note.line_amount_types)
    _put(out, "Reference", credit_note.reference)
    _put(out, "CurrencyCode", credit_note.currency_code)
    _put(out, "CurrencyRate", credit_note.currency_rate)
    _put(out, "BrandingThemeID", credit_note.branding_theme_id)
    _put(out, "SentToContact", credit_note.sent_to_contact)
    return out


def purchase_order_from_wire(record: WireRecord) -> PurchaseOrder:
    return PurchaseOrder(
        purchase_order_id=record.get("PurchaseOrderID"),
        purchase_order_number=record.get("PurchaseOrderNumber"),
        status=_enum(PurchaseOrderStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        date=_date(record, "Date"),
        delivery_date=_date(record, "DeliveryDate"),
        expected_arrival_date=_date(record, "ExpectedArrivalDate"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        reference=record.get("Reference"),
        branding_theme_id=record.get("BrandingThemeID"),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        sent_to_contact=record.get("SentToContact"),
        delivery_address=record.get("DeliveryAddress"),
        attention_to=record.get("AttentionTo"),
        telephone=record.get("Telephone"),
        delivery_instructions=record.get("DeliveryInstructions"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        total_discount=record.get("TotalDiscount"),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def purchase_order_to_wire(order: PurchaseOrder) -> WireRecord:
    out: WireRecord = {}
    _put(out, "PurchaseOrderNumber", order.purchase_order_number)
    _put(out, "Status", order.status)
    _put_one(out, "Contact", order.contact, contact_ref_to_wire)
    _put_many(out, "LineItems", order.line_items, line_item_to_wire)
    _put(out, "Date", order.date)
    _put(out, "DeliveryDate", order.delivery_date)
    _put(out, "ExpectedArrivalDate", order.expected_arrival_date)
    _put(out, "LineAmountTypes", order.line_amount_types)
    _put(out, "Reference", order.reference)
    _put(out, "BrandingThemeID", order.branding_theme_id)
    _put(out, "CurrencyCode", order.currency_code)
    _put(out, "CurrencyRate", order.currency_rate)
    _put(out, "SentToContact", order.sent_to_contact)
    _put(out, "DeliveryAddress", order.delivery_address)
    _put(out, "AttentionTo", order.attention_to)
    _put(out, "Telephone", order.telephone)
    _put(out, "DeliveryInstructions", order.delivery_instructions)
    return out


def quote_from_wire(record: WireRecord) -> Quote:
    return Quote(
        quote_id=record.get("QuoteID"),
        quote_number=record.get("QuoteNumber"),
        status=_enum(QuoteStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        date=_date(record, "Date"),
        expiry_date=_date(record, "ExpiryDate"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        reference=record.get("Reference"),
        branding_theme_id=record.get("BrandingThemeID"),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        title=record.get("Title"),
        summary=record.get("Summary"),
        terms=record.get("Terms"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        total_discount=record.get("TotalDiscount"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def quote_to_wire(quote: Quote) -> WireRecord:
    out: WireRecord = {}
    _put(out, "QuoteNumber", quote.quote_number)
    _put(out, "Status", quote.status)
    _put_one(out, "Contact", quote.contact, contact_ref_to_wire)
    _put_many(out, "LineItems", quote.line_items, line_item_to_wire)
    _put(out, "Date", quote.date)
    _put(out, "ExpiryDate", quote.expiry_date)
    _put(out, "LineAmountTypes", quote.line_amount_types)
    _put(out, "Reference", quote.reference)
    _put(out, "BrandingThemeID", quote.branding_theme_id)
    _put(out, "CurrencyCode", quote.currency_code)
    _put(out, "CurrencyRate", quote.currency_rate)
    _put(out, "Title", quote.title)
    _put(out, "Summary", quote.summary)
    _put(out, "Terms", quote.terms)
    return out


def schedule_from_wire(record: WireRecord) -> Schedule:
    return Schedule(
        period=record.get("Period"),
        unit=_enum(ScheduleUnit, record.get("Unit")),
        due_date=record.get("DueDate"),
        due_date_type=_enum(PaymentTermType, record.get("DueDateType")),
        start_date=_date(record, "StartDate"),
        next_scheduled_date=_date(record, "NextScheduledDate"),
        end_date=_date(record, "EndDate"),
    )


def schedule_to_wire(schedule: Schedule) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Period", schedule.period)
    _put(out, "Unit", schedule.unit)
    _put(out, "DueDate", schedule.due_date)
    _put(out, "DueDateType", schedule.due_date_type)
    _put(out, "StartDate", schedule.start_date)
    _put(out, "EndDate", schedule.end_date)
    return out


def repeating_invoice_from_wire(record: WireRecord) -> RepeatingInvoice:
    return RepeatingInvoice(
        repeating_invoice_id=record.get("RepeatingInvoiceID"),
        type=_enum(InvoiceType, record.get("Type")),
        status=_enum(RepeatingInvoiceStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        schedule=_one(record.get("Schedule"), schedule_from_wire),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        reference=record.get("Reference"),
        branding_theme_id=record.get("BrandingThemeID"),
        currency_code=record.get("CurrencyCode"),
        approved_for_sending=record.get("ApprovedForSending"),
        send_copy=record.get("SendCopy"),
        mark_as_sent=record.get("MarkAsSent"),
        include_pdf=record.get("IncludePDF"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        has_attachments=record.get("HasAttachments"),
    )


def repeating_invoice_to_wire(invoice: RepeatingInvoice) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Type", invoice.type)
    _put(out, "Status", invoice.status)
    _put_one(out, "Contact", invoice.contact, contact_ref_to_wire)
    _put_one(out, "Schedule", invoice.schedule, schedule_to_wire)
    _put_many(out, "LineItems", invoice.line_items, line_item_to_wire)
    _put(out, "LineAmountTypes", invoice.line_amount_types)
    _put(out, "Reference", invoice.reference)
    _put(out, "BrandingThemeID", invoice.branding_theme_id)
    _put(out, "CurrencyCode", invoice.currency_code)
    _put(out, "ApprovedForSending", invoice.approved_for_sending)
    _put(out, "SendCopy", invoice.send_copy)
    _put(out, "MarkAsSent", invoice.mark_as_sent)
    _put(out, "IncludePDF", invoice.include_pdf)
    return out


def item_details_from_wire(record: WireRecord) -> ItemDetails:
    return ItemDetails(
        unit_price=record.get("UnitPrice"),
        account_code=record.get("AccountCode"),
        cogs_account_code=record.get("COGSAccountCode"),
        tax_type=record.get("TaxType"),
    )


def item_details_to_wire(details: ItemDetails) -> WireRecord:
    out: WireRecord = {}
    _put(out, "UnitPrice", details.unit_price)
    _put(out, "AccountCode", details.account_code)
    _put(out, "COGSAccountCode", details.cogs_account_code)
    _put(out, "TaxType", details.tax_type)
    return out


def item_from_wire(record: WireRecord) -> Item:
    return Item(
        item_id=record.get("ItemID"),
        code=record.get("Code"),
        name=record.get("Name"),
        description=record.get("Description"),
        purchase_description=record.get("PurchaseDescription"),
        purchase_details=_one(record.get("PurchaseDetails"), item_details_from_wire),
        sales_details=_one(record.get("SalesDetails"), item_details_from_wire),
        is_tracked_as_inventory=record.get("IsTrackedAsInventory"),
        inventory_asset_account_code=record.get("InventoryAssetAccountCode"),
        is_sold=record.get("IsSold"),
        is_purchased=record.get("IsPurchased"),
        total_cost_pool=record.get("TotalCostPool"),
        quantity_on_hand=record.get("QuantityOnHand"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def item_to_wire(item: Item) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Code", item.code)
    _put(out, "Name", item.name)
    _put(out, "Description", item.description)
    _put(out, "PurchaseDescription", item.purchase_description)
    _put_one(out, "PurchaseDetails", item.purchase_details, item_details_to_wire)
    _put_one(out, "SalesDetails", item.sales_details, item_details_to_wire)
    _put(out, "IsTrackedAsInventory", item.is_tracked_as_inventory)
    _put(out, "InventoryAssetAccountCode", item.inventory_asset_account_code)
    _put(out, "IsSold", item.is_sold)
    _put(out, "IsPurchased", item.is_purchased)
    return out


# =============================================================================
# PAYMENTS & CREDITS
# =============================================================================

def payment_from_wire(record: WireRecord) -> Payment:
    return Payment(
        payment_id=record.get("PaymentID"),
        invoice=_one(record.get("Invoice"), invoice_ref_from_wire),
        account=_one(record.get("Account"), account_ref_from_wire),
        date=_date(record, "Date"),
        amount=record.get("Amount"),
        currency_rate=record.get("CurrencyRate"),
        reference=record.get("Reference"),
        is_reconciled=record.get("IsReconciled"),
        status=_enum(PaymentStatus, record.get("Status")),
        payment_type=_enum(PaymentType, record.get("PaymentType")),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def payment_to_wire(payment: Payment) -> WireRecord:
    out: WireRecord = {}
    _put_one(out, "Invoice", payment.invoice, invoice_ref_to_wire)
    _put_one(out, "Account", payment.account, account_ref_to_wire)
    _put(out, "Date", payment.date)
    _put(out, "Amount", payment.amount)
    _put(out, "CurrencyRate", payment.currency_rate)
    _put(out, "Reference", payment.reference)
    _put(out, "IsReconciled", payment.is_reconciled)
    _put(out, "Status", payment.status)
    return out


def batch_payment_from_wire(record: WireRecord) -> BatchPayment:
    return BatchPayment(
        batch_payment_id=record.get("BatchPaymentID"),
        account=_one(record.get("Account"), account_ref_from_wire),
        date=_date(record, "Date"),
        reference=record.get("Reference"),
        particulars=record.get("Particulars"),
        code=record.get("Code"),
        details=record.get("Details"),
        narrative=record.get("Narrative"),
        type=_enum(BatchPaymentType, record.get("Type")),
        status=_enum(PaymentStatus, record.get("Status")),
        payments=_many(record.get("Payments"), payment_from_wire),
        total_amount=record.get("TotalAmount"),
        is_reconciled=record.get("IsReconciled"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def batch_payment_to_wire(batch: BatchPayment) -> WireRecord:
    out: WireRecord = {}
    _put_one(out, "Account", batch.account, account_ref_to_wire)
    _put(out, "Date", batch.date)
    _put(out, "Reference", batch.reference)
    _put(out, "Particulars", batch.particulars)
    _put(out, "Code", batch.code)
    _put(out, "Details", batch.details)
    _put(out, "Narrative", batch.narrative)
    _put(out, "Status", batch.status)
    _put_many(out, "Payments", batch.payments, payment_to_wire)
    return out


def prepayment_from_wire(record: WireRecord) -> Prepayment:
    return Prepayment(
        prepayment_id=record.get("PrepaymentID"),
        type=_enum(PrepaymentType, record.get("Type")),
        status=_enum(InvoiceStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        date=_date(record, "Date"),
        reference=record.get("Reference"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        remaining_credit=record.get("RemainingCredit"),
        allocations=_many(record.get("Allocations"), allocation_from_wire),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def overpayment_from_wire(record: WireRecord) -> Overpayment:
    return Overpayment(
        overpayment_id=record.get("OverpaymentID"),
        type=_enum(OverpaymentType, record.get("Type")),
        status=_enum(InvoiceStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        date=_date(record, "Date"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        remaining_credit=record.get("RemainingCredit"),
        allocations=_many(record.get("Allocations"), allocation_from_wire),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


# =============================================================================
# BANKING
# =============================================================================

def bank_transaction_from_wire(record: WireRecord) -> BankTransaction:
    return BankTransaction(
        bank_transaction_id=record.get("BankTransactionID"),
        type=_enum(BankTransactionType, record.get("Type")),
        status=_enum(BankTransactionStatus, record.get("Status")),
        contact=_one(record.get("Contact"), contact_ref_from_wire),
        bank_account=_one(record.get("BankAccount"), account_ref_from_wire),
        line_items=_many(record.get("LineItems"), line_item_from_wire),
        date=_date(record, "Date"),
        reference=record.get("Reference"),
        is_reconciled=record.get("IsReconciled"),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        currency_code=record.get("CurrencyCode"),
        currency_rate=record.get("CurrencyRate"),
        url=record.get("Url"),
        sub_total=record.get("SubTotal"),
        total_tax=record.get("TotalTax"),
        total=record.get("Total"),
        prepayment_id=record.get("PrepaymentID"),
        overpayment_id=record.get("OverpaymentID"),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def bank_transaction_to_wire(transaction: BankTransaction) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Type", transaction.type)
    _put(out, "Status", transaction.status)
    _put_one(out, "Contact", transaction.contact, contact_ref_to_wire)
    _put_one(out, "BankAccount", transaction.bank_account, account_ref_to_wire)
    _put_many(out, "LineItems", transaction.line_items, line_item_to_wire)
    _put(out, "Date", transaction.date)
    _put(out, "Reference", transaction.reference)
    _put(out, "IsReconciled", transaction.is_reconciled)
    _put(out, "LineAmountTypes", transaction.line_amount_types)
    _put(out, "CurrencyCode", transaction.currency_code)
    _put(out, "CurrencyRate", transaction.currency_rate)
    _put(out, "Url", transaction.url)
    return out


def bank_transfer_from_wire(record: WireRecord) -> BankTransfer:
    return BankTransfer(
        bank_transfer_id=record.get("BankTransferID"),
        from_bank_account=_one(record.get("FromBankAccount"), account_ref_from_wire),
        to_bank_account=_one(record.get("ToBankAccount"), account_ref_from_wire),
        amount=record.get("Amount"),
        date=_date(record, "Date"),
        reference=record.get("Reference"),
        currency_rate=record.get("CurrencyRate"),
        from_bank_transaction_id=record.get("FromBankTransactionID"),
        to_bank_transaction_id=record.get("ToBankTransactionID"),
        has_attachments=record.get("HasAttachments"),
        created_date_utc=record.get("CreatedDateUTC"),
    )


def bank_transfer_to_wire(transfer: BankTransfer) -> WireRecord:
    out: WireRecord = {}
    _put_one(out, "FromBankAccount", transfer.from_bank_account, account_ref_to_wire)
    _put_one(out, "ToBankAccount", transfer.to_bank_account, account_ref_to_wire)
    _put(out, "Amount", transfer.amount)
    _put(out, "Date", transfer.date)
    _put(out, "Reference", transfer.reference)
    return out


# =============================================================================
# JOURNALS
# =============================================================================

def journal_line_from_wire(record: WireRecord) -> JournalLine:
    return JournalLine(
        journal_line_id=record.get("JournalLineID"),
        account_id=record.get("AccountID"),
        account_code=record.get("AccountCode"),
        account_type=record.get("AccountType"),
        account_name=record.get("AccountName"),
        description=record.get("Description"),
        net_amount=record.get("NetAmount"),
        gross_amount=record.get("GrossAmount"),
        tax_amount=record.get("TaxAmount"),
        tax_type=record.get("TaxType"),
        tax_name=record.get("TaxName"),
    )


def journal_from_wire(record: WireRecord) -> Journal:
    return Journal(
        journal_id=record.get("JournalID"),
        journal_number=record.get("JournalNumber"),
        journal_date=_date(record, "JournalDate"),
        reference=record.get("Reference"),
        source_id=record.get("SourceID"),
        source_type=record.get("SourceType"),
        journal_lines=_many(record.get("JournalLines"), journal_line_from_wire),
        created_date_utc=record.get("CreatedDateUTC"),
    )


def manual_journal_line_from_wire(record: WireRecord) -> ManualJournalLine:
    return ManualJournalLine(
        line_amount=record.get("LineAmount"),
        account_code=record.get("AccountCode"),
        account_id=record.get("AccountID"),
        description=record.get("Description"),
        tax_type=record.get("TaxType"),
        tax_amount=record.get("TaxAmount"),
        tracking=_many(record.get("Tracking"), tracking_ref_from_wire),
    )


def manual_journal_line_to_wire(line: ManualJournalLine) -> WireRecord:
    out: WireRecord = {}
    _put(out, "LineAmount", line.line_amount)
    _put(out, "AccountCode", line.account_code)
    _put(out, "AccountID", line.account_id)
    _put(out, "Description", line.description)
    _put(out, "TaxType", line.tax_type)
    _put_many(out, "Tracking", line.tracking, tracking_ref_to_wire)
    return out


def manual_journal_from_wire(record: WireRecord) -> ManualJournal:
    return ManualJournal(
        manual_journal_id=record.get("ManualJournalID"),
        narration=record.get("Narration"),
        date=_date(record, "Date"),
        status=_enum(ManualJournalStatus, record.get("Status")),
        line_amount_types=_enum(LineAmountType, record.get("LineAmountTypes")),
        show_on_cash_basis_reports=record.get("ShowOnCashBasisReports"),
        url=record.get("Url"),
        journal_lines=_many(record.get("JournalLines"), manual_journal_line_from_wire),
        has_attachments=record.get("HasAttachments"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def manual_journal_to_wire(journal: ManualJournal) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Narration", journal.narration)
    _put(out, "Date", journal.date)
    _put(out, "Status", journal.status)
    _put(out, "LineAmountTypes", journal.line_amount_types)
    _put(out, "ShowOnCashBasisReports", journal.show_on_cash_basis_reports)
    _put(out, "Url", journal.url)
    _put_many(out, "JournalLines", journal.journal_lines, manual_journal_line_to_wire)
    return out


# =============================================================================
# SETTINGS
# =============================================================================

def tax_component_from_wire(record: WireRecord) -> TaxComponent:
    return TaxComponent(
        name=record.get("Name"),
        rate=record.get("Rate"),
        is_compound=record.get("IsCompound"),
        is_non_recoverable=record.get("IsNonRecoverable"),
    )


def tax_component_to_wire(component: TaxComponent) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Name", component.name)
    _put(out, "Rate", component.rate)
    _put(out, "IsCompound", component.is_compound)
    _put(out, "IsNonRecoverable", component.is_non_recoverable)
    return out


def tax_rate_from_wire(record: WireRecord) -> TaxRate:
    return TaxRate(
        tax_type=record.get("TaxType"),
        name=record.get("Name"),
        status=_enum(TaxRateStatus, record.get("Status")),
        report_tax_type=record.get("ReportTaxType"),
        tax_components=_many(record.get("TaxComponents"), tax_component_from_wire),
        can_apply_to_assets=record.get("CanApplyToAssets"),
        can_apply_to_equity=record.get("CanApplyToEquity"),
        can_apply_to_expenses=record.get("CanApplyToExpenses"),
        can_apply_to_liabilities=record.get("CanApplyToLiabilities"),
        can_apply_to_revenue=record.get("CanApplyToRevenue"),
        display_tax_rate=record.get("DisplayTaxRate"),
        effective_rate=record.get("EffectiveRate"),
    )


def tax_rate_to_wire(tax_rate: TaxRate) -> WireRecord:
    out: WireRecord = {}
    _put(out, "TaxType", tax_rate.tax_type)
    _put(out, "Name", tax_rate.name)
    _put(out, "Status", tax_rate.status)
    _put(out, "ReportTaxType", tax_rate.report_tax_type)
    _put_many(out, "TaxComponents", tax_rate.tax_components, tax_component_to_wire)
    return out


def currency_from_wire(record: WireRecord) -> Currency:
    return Currency(code=record.get("Code"), description=record.get("Description"))


def currency_to_wire(currency: Currency) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Code", currency.code)
    _put(out, "Description", currency.description)
    return out


def tracking_option_from_wire(record: WireRecord) -> TrackingOption:
    return TrackingOption(
        tracking_option_id=record.get("TrackingOptionID"),
        name=record.get("Name"),
        status=_enum(RecordStatus, record.get("Status")),
    )


def tracking_option_to_wire(option: TrackingOption) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Name", option.name)
    _put(out, "Status", option.status)
    return out


def tracking_category_from_wire(record: WireRecord) -> TrackingCategory:
    return TrackingCategory(
        tracking_category_id=record.get("TrackingCategoryID"),
        name=record.get("Name"),
        status=_enum(RecordStatus, record.get("Status")),
        options=_many(record.get("Options"), tracking_option_from_wire),
    )


def tracking_category_to_wire(category: TrackingCategory) -> WireRecord:
    out: WireRecord = {}
    _put(out, "Name", category.name)
    _put(out, "Status", category.status)
    return out


def branding_theme_from_wire(record: WireRecord) -> BrandingTheme:
    return BrandingTheme(
        branding_theme_id=record.get("BrandingThemeID"),
        name=record.get("Name"),
        logo_url=record.get("LogoUrl"),
        type=record.get("Type"),
        sort_order=record.get("SortOrder"),
        created_date_utc=record.get("CreatedDateUTC"),
    )


# =============================================================================
# LINKED TRANSACTIONS
# =============================================================================

def linked_transaction_from_wire(record: WireRecord) -> LinkedTransaction:
    return LinkedTransaction(
        linked_transaction_id=record.get("LinkedTransactionID"),
        source_transaction_id=record.get("SourceTransactionID"),
        source_line_item_id=record.get("SourceLineItemID"),
        source_transaction_type_code=record.get("SourceTransactionTypeCode"),
        contact_id=record.get("ContactID"),
        target_transaction_id=record.get("TargetTransactionID"),
        target_line_item_id=record.get("TargetLineItemID"),
        status=_enum(LinkedTransactionStatus, record.get("Status")),
        type=record.get("Type"),
        updated_date_utc=record.get("UpdatedDateUTC"),
    )


def linked_transaction_to_wire(link: LinkedTransaction) -> WireRecord:
    out: WireRecord = {}
    _put(out, "SourceTransactionID", link.source_transaction_id)
    _put(out, "SourceLineItemID", link.source_line_item_id)
    _put(out, "ContactID", link.contact_id)
    _put(out, "TargetTransactionID", link.target_transaction_id)
    _put(out, "TargetLineItemID", link.target_line_item_id)
    return out


# =============================================================================
# REPORTS
# =============================================================================

def report_cell_from_wire(record: WireRecord) -> ReportCell:
    return ReportCell(
        value=None if record.get("Value") is None else str(record.get("Value")),
        attributes=record.get("Attributes"),
    )


def report_row_from_wire(record: WireRecord) -> ReportRow:
    return ReportRow(
        row_type=record.get("RowType"),
        title=record.get("Title"),
        cells=_many(record.get("Cells"), report_cell_from_wire),
        rows=_many(record.get("Rows"), report_row_from_wire),
    )


def report_from_wire(record: WireRecord) -> Report:
    return Report(
        report_id=record.get("ReportID"),
        report_name=record.get("ReportName"),
        report_type=record.get("ReportType"),
        report_titles=record.get("ReportTitles"),
        report_date=record.get("ReportDate"),
        updated_date_utc=record.get("UpdatedDateUTC"),
        rows=_many(record.get("Rows"), report_row_from_wire),
    )


# =============================================================================
# REGISTRY
# =============================================================================

class EntityMapper(NamedTuple):
    """Mapping pair for one entity kind; ``to_wire`` is None when read-only."""
    from_wire: Callable[[WireRecord], Any]
    to_wire: Optional[Callable[[Any], WireRecord]]


MAPPERS: Dict[str, EntityMapper] = {
    "organisation": EntityMapper(organisation_from_wire, None),
    "user": EntityMapper(user_from_wire, None),
    "contact": EntityMapper(contact_from_wire, contact_to_wire),
    "contact_group": EntityMapper(contact_group_from_wire, contact_group_to_wire),
    "address": EntityMapper(address_from_wire, address_to_wire),
    "phone": EntityMapper(phone_from_wire, phone_to_wire),
    "contact_person": EntityMapper(contact_person_from_wire, contact_person_to_wire),
    "payment_terms": EntityMapper(payment_terms_from_wire, payment_terms_to_wire),
    "account": EntityMapper(account_from_wire, account_to_wire),
    "invoice": EntityMapper(invoice_from_wire, invoice_to_wire),
    "credit_note": EntityMapper(credit_note_from_wire, credit_note_to_wire),
    "purchase_order": EntityMapper(purchase_order_from_wire, purchase_order_to_wire),
    "quote": EntityMapper(quote_from_wire, quote_to_wire),
    "repeating_invoice": EntityMapper(repeating_invoice_from_wire, repeating_invoice_to_wire),
    "schedule": EntityMapper(schedule_from_wire, schedule_to_wire),
    "line_item": EntityMapper(line_item_from_wire, line_item_to_wire),
    "item": EntityMapper(item_from_wire, item_to_wire),
    "item_details": EntityMapper(item_details_from_wire, item_details_to_wire),
    "payment": EntityMapper(payment_from_wire, payment_to_wire),
    "batch_payment": EntityMapper(batch_payment_from_wire, batch_payment_to_wire),
    "prepayment": EntityMapper(prepayment_from_wire, None),
    "overpayment": EntityMapper(overpayment_from_wire, None),
    "allocation": EntityMapper(allocation_from_wire, allocation_to_wire),
    "bank_transaction": EntityMapper(bank_transaction_from_wire, bank_transaction_to_wire),
    "bank_transfer": EntityMapper(bank_transfer_from_wire, bank_transfer_to_wire),
    "journal": EntityMapper(journal_from_wire, None),
    "journal_line": EntityMapper(journal_line_from_wire, None),
    "manual_journal": EntityMapper(manual_journal_from_wire, manual_journal_to_wire),
    "manual_journal_line": EntityMapper(manual_journal_line_from_wire, manual_journal_line_to_wire),
    "tax_rate": EntityMapper(tax_rate_from_wire, tax_rate_to_wire),
    "tax_component": EntityMapper(tax_component_from_wire, tax_component_to_wire),
    "currency": EntityMapper(currency_from_wire, currency_to_wire),
    "tracking_category": EntityMapper(tracking_category_from_wire, tracking_category_to_wire),
    "tracking_option": EntityMapper(tracking_option_from_wire, tracking_option_to_wire),
    "branding_theme": EntityMapper(branding_theme_from_wire, None),
    "linked_transaction": EntityMapper(linked_transaction_from_wire, linked_transaction_to_wire),
    "report": EntityMapper(report_from_wire, None),
    "report_row": EntityMapper(report_row_from_wire, None),
}


def from_wire(kind: str, record: WireRecord) -> Any:
    """Map a wire record of the given entity kind to its domain model."""
    return MAPPERS[kind].from_wire(record)


def to_wire(kind: str, model: Any) -> WireRecord:
    """Map a (partial) domain model of the given entity kind to a sparse payload.

    Raises:
        ValueError: If the entity kind is read-only
    """
    mapper = MAPPERS[kind]
    if mapper.to_wire is None:
        raise ValueError(f"Entity kind '{kind}' is read-only")
    return mapper.to_wire(model)
