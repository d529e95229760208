"""Pydantic domain models for Xero accounting entities.

Every field is optional: ``None`` means "not present" on the way in and
"leave unchanged" on the way out. The same model therefore describes both
a record read from Xero and a partial record to create or update.

Field names are snake_case; the PascalCase wire names live in ``mappers``.
"""

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field


# =============================================================================
# ENUMERATIONS
# =============================================================================

class ContactStatus(str, Enum):
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    GDPRREQUEST = "GDPRREQUEST"


class RecordStatus(str, Enum):
    """Status shared by accounts, contact groups and tracking categories."""
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"


class AddressType(str, Enum):
    POBOX = "POBOX"
    STREET = "STREET"
    DELIVERY = "DELIVERY"


class PhoneType(str, Enum):
    DEFAULT = "DEFAULT"
    DDI = "DDI"
    MOBILE = "MOBILE"
    FAX = "FAX"


class PaymentTermType(str, Enum):
    """Due date rule for payment terms and repeating invoice schedules."""
    DAYSAFTERBILLDATE = "DAYSAFTERBILLDATE"
    DAYSAFTERBILLMONTH = "DAYSAFTERBILLMONTH"
    OFCURRENTMONTH = "OFCURRENTMONTH"
    OFFOLLOWINGMONTH = "OFFOLLOWINGMONTH"


class AccountClass(str, Enum):
    ASSET = "ASSET"
    EQUITY = "EQUITY"
    EXPENSE = "EXPENSE"
    LIABILITY = "LIABILITY"
    REVENUE = "REVENUE"


class AccountType(str, Enum):
    BANK = "BANK"
    CURRENT = "CURRENT"
    CURRLIAB = "CURRLIAB"
    DEPRECIATN = "DEPRECIATN"
    DIRECTCOSTS = "DIRECTCOSTS"
    EQUITY = "EQUITY"
    EXPENSE = "EXPENSE"
    FIXED = "FIXED"
    INVENTORY = "INVENTORY"
    LIABILITY = "LIABILITY"
    NONCURRENT = "NONCURRENT"
    OTHERINCOME = "OTHERINCOME"
    OVERHEADS = "OVERHEADS"
    PREPAYMENT = "PREPAYMENT"
    REVENUE = "REVENUE"
    SALES = "SALES"
    TERMLIAB = "TERMLIAB"
    PAYGLIABILITY = "PAYGLIABILITY"
    SUPERANNUATIONEXPENSE = "SUPERANNUATIONEXPENSE"
    SUPERANNUATIONLIABILITY = "SUPERANNUATIONLIABILITY"
    WAGESEXPENSE = "WAGESEXPENSE"


class BankAccountType(str, Enum):
    BANK = "BANK"
    CREDITCARD = "CREDITCARD"
    PAYPAL = "PAYPAL"


class InvoiceType(str, Enum):
    ACCREC = "ACCREC"  # sales invoice
    ACCPAY = "ACCPAY"  # bill


class InvoiceStatus(str, Enum):
    """Status of invoices, credit notes, prepayments and overpayments."""
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    AUTHORISED = "AUTHORISED"
    PAID = "PAID"
    VOIDED = "VOIDED"
    DELETED = "DELETED"


class LineAmountType(str, Enum):
    EXCLUSIVE = "Exclusive"
    INCLUSIVE = "Inclusive"
    NOTAX = "NoTax"


class CreditNoteType(str, Enum):
    ACCRECCREDIT = "ACCRECCREDIT"
    ACCPAYCREDIT = "ACCPAYCREDIT"


class PaymentType(str, Enum):
    ACCRECPAYMENT = "ACCRECPAYMENT"
    ACCPAYPAYMENT = "ACCPAYPAYMENT"
    ARCREDITPAYMENT = "ARCREDITPAYMENT"
    APCREDITPAYMENT = "APCREDITPAYMENT"
    AROVERPAYMENTPAYMENT = "AROVERPAYMENTPAYMENT"
    ARPREPAYMENTPAYMENT = "ARPREPAYMENTPAYMENT"
    APPREPAYMENTPAYMENT = "APPREPAYMENTPAYMENT"
    APOVERPAYMENTPAYMENT = "APOVERPAYMENTPAYMENT"


class PaymentStatus(str, Enum):
    """Status of payments and batch payments."""
    AUTHORISED = "AUTHORISED"
    DELETED = "DELETED"


class PrepaymentType(str, Enum):
    RECEIVE_PREPAYMENT = "RECEIVE-PREPAYMENT"
    SPEND_PREPAYMENT = "SPEND-PREPAYMENT"


class OverpaymentType(str, Enum):
    RECEIVE_OVERPAYMENT = "RECEIVE-OVERPAYMENT"
    SPEND_OVERPAYMENT = "SPEND-OVERPAYMENT"


class BatchPaymentType(str, Enum):
    PAYBATCH = "PAYBATCH"
    RECBATCH = "RECBATCH"


class BankTransactionType(str, Enum):
    RECEIVE = "RECEIVE"
    SPEND = "SPEND"
    RECEIVE_OVERPAYMENT = "RECEIVE-OVERPAYMENT"
    RECEIVE_PREPAYMENT = "RECEIVE-PREPAYMENT"
    SPEND_OVERPAYMENT = "SPEND-OVERPAYMENT"
    SPEND_PREPAYMENT = "SPEND-PREPAYMENT"
    RECEIVE_TRANSFER = "RECEIVE-TRANSFER"
    SPEND_TRANSFER = "SPEND-TRANSFER"


class BankTransactionStatus(str, Enum):
    AUTHORISED = "AUTHORISED"
    DELETED = "DELETED"
    VOIDED = "VOIDED"


class PurchaseOrderStatus(str, Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    AUTHORISED = "AUTHORISED"
    BILLED = "BILLED"
    DELETED = "DELETED"


class QuoteStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    DECLINED = "DECLINED"
    ACCEPTED = "ACCEPTED"
    INVOICED = "INVOICED"
    DELETED = "DELETED"


class ManualJournalStatus(str, Enum):
    DRAFT = "DRAFT"
    POSTED = "POSTED"
    DELETED = "DELETED"
    VOIDED = "VOIDED"
    ARCHIVED = "ARCHIVED"


class TaxRateStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DELETED = "DELETED"
    ARCHIVED = "ARCHIVED"
    PENDING = "PENDING"


class RepeatingInvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    AUTHORISED = "AUTHORISED"
    DELETED = "DELETED"


class ScheduleUnit(str, Enum):
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class LinkedTransactionStatus(str, Enum):
    APPROVED = "APPROVED"
    DRAFT = "DRAFT"
    ONDRAFT = "ONDRAFT"
    BILLED = "BILLED"
    VOIDED = "VOIDED"


# =============================================================================
# REFERENCES
# =============================================================================
# A reference names another entity. Only the identifier is ever written.

class ContactRef(BaseModel):
    contact_id: Optional[str] = None
    name: Optional[str] = None


class AccountRef(BaseModel):
    """Reference to an account by id or by code."""
    account_id: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None


class InvoiceRef(BaseModel):
    invoice_id: Optional[str] = None
    invoice_number: Optional[str] = None


# =============================================================================
# SHARED NESTED OBJECTS
# =============================================================================

class TrackingRef(BaseModel):
    """Tracking category option applied to a line item or journal line."""
    tracking_category_id: Optional[str] = None
    tracking_option_id: Optional[str] = None
    name: Optional[str] = None
    option: Optional[str] = None


class LineItem(BaseModel):
    """Line of a transactional document (invoice, quote, order, ...)."""
    line_item_id: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_amount: Optional[float] = None
    item_code: Optional[str] = None
    account_code: Optional[str] = None
    tax_type: Optional[str] = None
    tax_amount: Optional[float] = None
    line_amount: Optional[float] = None
    discount_rate: Optional[float] = None
    discount_amount: Optional[float] = None
    tracking: Optional[List[TrackingRef]] = None


class Allocation(BaseModel):
    """Part of a credit note, prepayment or overpayment applied to an invoice."""
    allocation_id: Optional[str] = None
    invoice: Optional[InvoiceRef] = None
    amount: Optional[float] = None
    date: Optional[str] = None


# =============================================================================
# ORGANISATION & USERS
# =============================================================================

class Organisation(BaseModel):
    organisation_id: Optional[str] = None
    name: Optional[str] = None
    legal_name: Optional[str] = None
    short_code: Optional[str] = None
    organisation_type: Optional[str] = None
    organisation_entity_type: Optional[str] = None
    organisation_status: Optional[str] = None
    base_currency: Optional[str] = None
    country_code: Optional[str] = None
    is_demo_company: Optional[bool] = None
    sales_tax_basis: Optional[str] = None
    sales_tax_period: Optional[str] = None
    financial_year_end_day: Optional[int] = None
    financial_year_end_month: Optional[int] = None
    timezone: Optional[str] = None
    version: Optional[str] = None
    line_of_business: Optional[str] = None
    created_date_utc: Optional[str] = None


class ConnectionStatus(BaseModel):
    connected: bool
    message: str
    organisation_name: Optional[str] = None


class User(BaseModel):
    user_id: Optional[str] = None
    email_address: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_subscriber: Optional[bool] = None
    organisation_role: Optional[str] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# CONTACTS
# =============================================================================

class Address(BaseModel):
    address_type: Optional[AddressType] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    address_line4: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    attention_to: Optional[str] = None


class Phone(BaseModel):
    phone_type: Optional[PhoneType] = None
    phone_number: Optional[str] = None
    phone_area_code: Optional[str] = None
    phone_country_code: Optional[str] = None


class ContactPerson(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: Optional[str] = None
    include_in_emails: Optional[bool] = None


class PaymentTerm(BaseModel):
    day: Optional[int] = None
    type: Optional[PaymentTermType] = None


class PaymentTerms(BaseModel):
    bills: Optional[PaymentTerm] = None
    sales: Optional[PaymentTerm] = None


class Balance(BaseModel):
    outstanding: Optional[float] = None
    overdue: Optional[float] = None


class ContactBalances(BaseModel):
    """Read-only receivable and payable balances."""
    accounts_receivable: Optional[Balance] = None
    accounts_payable: Optional[Balance] = None


class ContactGroup(BaseModel):
    contact_group_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[RecordStatus] = None
    contacts: Optional[List[ContactRef]] = None


class Contact(BaseModel):
    contact_id: Optional[str] = None
    contact_number: Optional[str] = None
    account_number: Optional[str] = None
    contact_status: Optional[ContactStatus] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: Optional[str] = None
    bank_account_details: Optional[str] = None
    tax_number: Optional[str] = None
    accounts_receivable_tax_type: Optional[str] = None
    accounts_payable_tax_type: Optional[str] = None
    is_supplier: Optional[bool] = None
    is_customer: Optional[bool] = None
    default_currency: Optional[str] = None
    addresses: Optional[List[Address]] = None
    phones: Optional[List[Phone]] = None
    contact_persons: Optional[List[ContactPerson]] = None
    payment_terms: Optional[PaymentTerms] = None
    balances: Optional[ContactBalances] = None
    contact_groups: Optional[List[ContactGroup]] = None
    has_attachments: Optional[bool] = None
    has_validation_errors: Optional[bool] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# CHART OF ACCOUNTS
# =============================================================================

class Account(BaseModel):
    account_id: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None
    type: Optional[AccountType] = None
    status: Optional[RecordStatus] = None
    description: Optional[str] = None
    tax_type: Optional[str] = None
    account_class: Optional[AccountClass] = None
    system_account: Optional[str] = None
    enable_payments_to_account: Optional[bool] = None
    show_in_expense_claims: Optional[bool] = None
    bank_account_number: Optional[str] = None
    bank_account_type: Optional[BankAccountType] = None
    currency_code: Optional[str] = None
    reporting_code: Optional[str] = None
    reporting_code_name: Optional[str] = None
    add_to_watchlist: Optional[bool] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# SALES & PURCHASES
# =============================================================================

class Invoice(BaseModel):
    invoice_id: Optional[str] = None
    invoice_number: Optional[str] = None
    type: Optional[InvoiceType] = None
    status: Optional[InvoiceStatus] = None
    contact: Optional[ContactRef] = None
    line_items: Optional[List[LineItem]] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    expected_payment_date: Optional[str] = None
    planned_payment_date: Optional[str] = None
    line_amount_types: Optional[LineAmountType] = None
    reference: Optional[str] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    branding_theme_id: Optional[str] = None
    url: Optional[str] = None
    sent_to_contact: Optional[bool] = None
    # Remote-computed
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    total_discount: Optional[float] = None
    amount_due: Optional[float] = None
    amount_paid: Optional[float] = None
    amount_credited: Optional[float] = None
    fully_paid_on_date: Optional[str] = None
    has_attachments: Optional[bool] = None
    has_errors: Optional[bool] = None
    updated_date_utc: Optional[str] = None


class CreditNote(BaseModel):
    credit_note_id: Optional[str] = None
    credit_note_number: Optional[str] = None
    type: Optional[CreditNoteType] = None
    status: Optional[InvoiceStatus] = None
    contact: Optional[ContactRef] = None
    line_items: Optional[List[LineItem]] = None
    date: Optional[str] = None
    line_amount_types: Optional[LineAmountType] = None
    reference: Optional[str] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    branding_theme_id: Optional[str] = None
    sent_to_contact: Optional[bool] = None
    # Remote-computed
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    remaining_credit: Optional[float] = None
    fully_paid_on_date: Optional[str] = None
    allocations: Optional[List[Allocation]] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


class PurchaseOrder(BaseModel):
    purchase_order_id: Optional[str] = None
    purchase_order_number: Optional[str] = None
    status: Optional[PurchaseOrderStatus] = None
    contact: Optional[ContactRef] = None
    line_items: Optional[List[LineItem]] = None
    date: Optional[str] = None
    delivery_date: Optional[str] = None
    expected_arrival_date: Optional[str] = None
    line_amount_types: Optional[LineAmountType] = None
    reference: Optional[str] = None
    branding_theme_id: Optional[str] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    sent_to_contact: Optional[bool] = None
    delivery_address: Optional[str] = None
    attention_to: Optional[str] = None
    telephone: Optional[str] = None
    delivery_instructions: Optional[str] = None
    # Remote-computed
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    total_discount: Optional[float] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


class Quote(BaseModel):
    quote_id: Optional[str] = None
    quote_number: Optional[str] = None
    status: Optional[QuoteStatus] = None
    contact: Optional[ContactRef] = None
    line_items: Optional[List[LineItem]] = None
    date: Optional[str] = None
    expiry_date: Optional[str] = None
    line_amount_types: Optional[LineAmountType] = None
    reference: Optional[str] = None
    branding_theme_id: Optional[str] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    terms: Optional[str] = None
    # Remote-computed
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    total_discount: Optional[float] = None
    updated_date_utc: Optional[str] = None


class Schedule(BaseModel):
    period: Optional[int] = None
    unit: Optional[ScheduleUnit] = None
    due_date: Optional[int] = None
    due_date_type: Optional[PaymentTermType] = None
    start_date: Optional[str] = None
    next_scheduled_date: Optional[str] = None
    end_date: Optional[str] = None


class RepeatingInvoice(BaseModel):
    repeating_invoice_id: Optional[str] = None
    type: Optional[InvoiceType] = None
    status: Optional[RepeatingInvoiceStatus] = None
    contact: Optional[ContactRef] = None
    schedule: Optional[Schedule] = None
    line_items: Optional[List[LineItem]] = None
    line_amount_types: Optional[LineAmountType] = None
    reference: Optional[str] = None
    branding_theme_id: Optional[str] = None
    currency_code: Optional[str] = None
    approved_for_sending: Optional[bool] = None
    send_copy: Optional[bool] = None
    mark_as_sent: Optional[bool] = None
    include_pdf: Optional[bool] = None
    # Remote-computed
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    has_attachments: Optional[bool] = None


class ItemDetails(BaseModel):
    """Purchase or sales pricing for an item."""
    unit_price: Optional[float] = None
    account_code: Optional[str] = None
    cogs_account_code: Optional[str] = None
    tax_type: Optional[str] = None


class Item(BaseModel):
    item_id: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    purchase_description: Optional[str] = None
    purchase_details: Optional[ItemDetails] = None
    sales_details: Optional[ItemDetails] = None
    is_tracked_as_inventory: Optional[bool] = None
    inventory_asset_account_code: Optional[str] = None
    is_sold: Optional[bool] = None
    is_purchased: Optional[bool] = None
    # Remote-computed
    total_cost_pool: Optional[float] = None
    quantity_on_hand: Optional[float] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# PAYMENTS & CREDITS
# =============================================================================

class Payment(BaseModel):
    payment_id: Optional[str] = None
    invoice: Optional[InvoiceRef] = None
    account: Optional[AccountRef] = None
    date: Optional[str] = None
    amount: Optional[float] = None
    currency_rate: Optional[float] = None
    reference: Optional[str] = None
    is_reconciled: Optional[bool] = None
    status: Optional[PaymentStatus] = None
    payment_type: Optional[PaymentType] = None
    updated_date_utc: Optional[str] = None


class BatchPayment(BaseModel):
    batch_payment_id: Optional[str] = None
    account: Optional[AccountRef] = None
    date: Optional[str] = None
    reference: Optional[str] = None
    particulars: Optional[str] = None
    code: Optional[str] = None
    details: Optional[str] = None
    narrative: Optional[str] = None
    type: Optional[BatchPaymentType] = None
    status: Optional[PaymentStatus] = None
    payments: Optional[List[Payment]] = None
    # Remote-computed
    total_amount: Optional[float] = None
    is_reconciled: Optional[bool] = None
    updated_date_utc: Optional[str] = None


class Prepayment(BaseModel):
    prepayment_id: Optional[str] = None
    type: Optional[PrepaymentType] = None
    status: Optional[InvoiceStatus] = None
    contact: Optional[ContactRef] = None
    date: Optional[str] = None
    reference: Optional[str] = None
    line_amount_types: Optional[LineAmountType] = None
    line_items: Optional[List[LineItem]] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    remaining_credit: Optional[float] = None
    allocations: Optional[List[Allocation]] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


class Overpayment(BaseModel):
    overpayment_id: Optional[str] = None
    type: Optional[OverpaymentType] = None
    status: Optional[InvoiceStatus] = None
    contact: Optional[ContactRef] = None
    date: Optional[str] = None
    line_amount_types: Optional[LineAmountType] = None
    line_items: Optional[List[LineItem]] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    remaining_credit: Optional[float] = None
    allocations: Optional[List[Allocation]] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# BANKING
# =============================================================================

class BankTransaction(BaseModel):
    bank_transaction_id: Optional[str] = None
    type: Optional[BankTransactionType] = None
    status: Optional[BankTransactionStatus] = None
    contact: Optional[ContactRef] = None
    bank_account: Optional[AccountRef] = None
    line_items: Optional[List[LineItem]] = None
    date: Optional[str] = None
    reference: Optional[str] = None
    is_reconciled: Optional[bool] = None
    line_amount_types: Optional[LineAmountType] = None
    currency_code: Optional[str] = None
    currency_rate: Optional[float] = None
    url: Optional[str] = None
    # Remote-computed
    sub_total: Optional[float] = None
    total_tax: Optional[float] = None
    total: Optional[float] = None
    prepayment_id: Optional[str] = None
    overpayment_id: Optional[str] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


class BankTransfer(BaseModel):
    bank_transfer_id: Optional[str] = None
    from_bank_account: Optional[AccountRef] = None
    to_bank_account: Optional[AccountRef] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    reference: Optional[str] = None
    # Remote-computed
    currency_rate: Optional[float] = None
    from_bank_transaction_id: Optional[str] = None
    to_bank_transaction_id: Optional[str] = None
    has_attachments: Optional[bool] = None
    created_date_utc: Optional[str] = None


# =============================================================================
# JOURNALS
# =============================================================================

class JournalLine(BaseModel):
    journal_line_id: Optional[str] = None
    account_id: Optional[str] = None
    account_code: Optional[str] = None
    account_type: Optional[str] = None
    account_name: Optional[str] = None
    description: Optional[str] = None
    net_amount: Optional[float] = None
    gross_amount: Optional[float] = None
    tax_amount: Optional[float] = None
    tax_type: Optional[str] = None
    tax_name: Optional[str] = None


class Journal(BaseModel):
    """Read-only general ledger journal."""
    journal_id: Optional[str] = None
    journal_number: Optional[int] = None
    journal_date: Optional[str] = None
    reference: Optional[str] = None
    source_id: Optional[str] = None
    source_type: Optional[str] = None
    journal_lines: Optional[List[JournalLine]] = None
    created_date_utc: Optional[str] = None


class ManualJournalLine(BaseModel):
    line_amount: Optional[float] = None
    account_code: Optional[str] = None
    account_id: Optional[str] = None
    description: Optional[str] = None
    tax_type: Optional[str] = None
    tax_amount: Optional[float] = None
    tracking: Optional[List[TrackingRef]] = None


class ManualJournal(BaseModel):
    manual_journal_id: Optional[str] = None
    narration: Optional[str] = None
    date: Optional[str] = None
    status: Optional[ManualJournalStatus] = None
    line_amount_types: Optional[LineAmountType] = None
    show_on_cash_basis_reports: Optional[bool] = None
    url: Optional[str] = None
    journal_lines: Optional[List[ManualJournalLine]] = None
    has_attachments: Optional[bool] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# SETTINGS
# =============================================================================

class TaxComponent(BaseModel):
    name: Optional[str] = None
    rate: Optional[float] = None
    is_compound: Optional[bool] = None
    is_non_recoverable: Optional[bool] = None


class TaxRate(BaseModel):
    """Tax rate, identified by its ``tax_type`` code."""
    tax_type: Optional[str] = None
    name: Optional[str] = None
    status: Optional[TaxRateStatus] = None
    report_tax_type: Optional[str] = None
    tax_components: Optional[List[TaxComponent]] = None
    can_apply_to_assets: Optional[bool] = None
    can_apply_to_equity: Optional[bool] = None
    can_apply_to_expenses: Optional[bool] = None
    can_apply_to_liabilities: Optional[bool] = None
    can_apply_to_revenue: Optional[bool] = None
    display_tax_rate: Optional[float] = None
    effective_rate: Optional[float] = None


class Currency(BaseModel):
    code: Optional[str] = None
    description: Optional[str] = None


class TrackingOption(BaseModel):
    tracking_option_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[RecordStatus] = None


class TrackingCategory(BaseModel):
    tracking_category_id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[RecordStatus] = None
    options: Optional[List[TrackingOption]] = None


class BrandingTheme(BaseModel):
    branding_theme_id: Optional[str] = None
    name: Optional[str] = None
    logo_url: Optional[str] = None
    type: Optional[str] = None
    sort_order: Optional[int] = None
    created_date_utc: Optional[str] = None


# =============================================================================
# LINKED TRANSACTIONS
# =============================================================================

class LinkedTransaction(BaseModel):
    """Billable expense linking a bill line to a sales invoice line."""
    linked_transaction_id: Optional[str] = None
    source_transaction_id: Optional[str] = None
    source_line_item_id: Optional[str] = None
    source_transaction_type_code: Optional[str] = None
    contact_id: Optional[str] = None
    target_transaction_id: Optional[str] = None
    target_line_item_id: Optional[str] = None
    status: Optional[LinkedTransactionStatus] = None
    type: Optional[str] = None
    updated_date_utc: Optional[str] = None


# =============================================================================
# REPORTS
# =============================================================================

class ReportCell(BaseModel):
    value: Optional[str] = None
    attributes: Optional[List[Dict[str, Any]]] = None


class ReportRow(BaseModel):
    row_type: Optional[str] = None
    title: Optional[str] = None
    cells: Optional[List[ReportCell]] = None
    rows: Optional[List["ReportRow"]] = None


class Report(BaseModel):
    report_id: Optional[str] = None
    report_name: Optional[str] = None
    report_type: Optional[str] = None
    report_titles: Optional[List[str]] = None
    report_date: Optional[str] = None
    updated_date_utc: Optional[str] = None
    rows: Optional[List[ReportRow]] = None


ReportRow.model_rebuild()


# =============================================================================
# PAGINATION
# =============================================================================

T = TypeVar("T")


class PagedResult(BaseModel, Generic[T]):
    """One page of a paginated Xero collection.

    ``has_more`` is a heuristic: a full page may still be the last one.
    """
    items: List[T] = Field(default_factory=list)
    count: int = 0
    page: int = 1
    has_more: bool = False
    next_page: Optional[int] = None
