"""Mock fixtures for Xero API responses.

These fixtures provide realistic wire records (PascalCase, as Xero sends
them) and a small router that answers httpx requests from a queue of
canned responses.
"""

import json
import uuid
from typing import Any, Dict, List, Optional

import httpx

TEST_BASE_URL = "https://api.xero.test/api.xro/2.0"


# =============================================================================
# MOCK XERO API
# =============================================================================

class MockXeroAPI:
    """Callable handler for ``httpx.MockTransport``.

    Responses are registered per method and path suffix. When several
    responses match the same request they are served in registration
    order, the last one repeating. Unmatched requests get a 404.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: List[Dict[str, Any]] = []

    def add_response(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._routes.append({
            "method": method,
            "path": path,
            "status_code": status_code,
            "json_body": json_body,
            "headers": headers or {},
        })

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        matches = [
            route for route in self._routes
            if route["method"] == request.method and request.url.path.endswith(route["path"])
        ]
        if not matches:
            return httpx.Response(404, json={"Message": f"No mock for {request.method} {request.url.path}"})
        route = matches[0]
        if len(matches) > 1:
            self._routes.remove(route)
        if route["json_body"] is None:
            return httpx.Response(route["status_code"], headers=route["headers"])
        return httpx.Response(route["status_code"], json=route["json_body"], headers=route["headers"])

    def last_json(self) -> Any:
        """Decoded body of the most recent request."""
        return json.loads(self.requests[-1].content)


# =============================================================================
# XERO CONTACT FIXTURES
# =============================================================================

def make_xero_contact(
    contact_id: str = None,
    name: str = "Acme Ltd",
    email: str = "accounts@acme.example",
    is_customer: bool = True,
    **kwargs
) -> dict:
    """Create a mock Xero contact record.

    Args:
        contact_id: Contact UUID (generated if not provided)
        name: Contact name
        email: Email address
        is_customer: Whether contact is a customer
        **kwargs: Additional fields to override

    Returns:
        Dictionary representing a Xero contact
    """
    if contact_id is None:
        contact_id = str(uuid.uuid4())

    contact = {
        "ContactID": contact_id,
        "ContactStatus": "ACTIVE",
        "Name": name,
        "FirstName": "Ada",
        "LastName": "Lovelace",
        "EmailAddress": email,
        "IsCustomer": is_customer,
        "IsSupplier": False,
        "Addresses": [
            {
                "AddressType": "POBOX",
                "AddressLine1": "1 Queen Street",
                "City": "Auckland",
                "PostalCode": "1010",
                "Country": "New Zealand",
            }
        ],
        "Phones": [
            {"PhoneType": "DEFAULT", "PhoneNumber": "555 0100"},
        ],
        "Balances": {
            "AccountsReceivable": {"Outstanding": 250.0, "Overdue": 0.0},
        },
        "UpdatedDateUTC": "/Date(1705764000000+0000)/",
    }
    contact.update(kwargs)
    return contact


def make_xero_contacts_response(contacts: list) -> dict:
    return {"Contacts": contacts}


# =============================================================================
# XERO INVOICE FIXTURES
# =============================================================================

def make_xero_invoice(
    invoice_id: str = None,
    invoice_number: str = "INV-0001",
    status: str = "AUTHORISED",
    contact_id: str = "c-1",
    total: float = 115.0,
    **kwargs
) -> dict:
    """Create a mock Xero invoice record.

    Args:
        invoice_id: Invoice UUID (generated if not provided)
        invoice_number: Invoice number
        status: Invoice status
        contact_id: ContactID of the customer
        total: Invoice total including tax
        **kwargs: Additional fields to override

    Returns:
        Dictionary representing a Xero invoice
    """
    if invoice_id is None:
        invoice_id = str(uuid.uuid4())

    invoice = {
        "InvoiceID": invoice_id,
        "InvoiceNumber": invoice_number,
        "Type": "ACCREC",
        "Status": status,
        "Contact": {"ContactID": contact_id, "Name": "Acme Ltd"},
        "Date": "/Date(1705708800000+0000)/",
        "DateString": "2024-01-20T00:00:00",
        "DueDate": "/Date(1706918400000+0000)/",
        "DueDateString": "2024-02-03T00:00:00",
        "LineAmountTypes": "Exclusive",
        "LineItems": [
            {
                "LineItemID": str(uuid.uuid4()),
                "Description": "Consulting",
                "Quantity": 1.0,
                "UnitAmount": 100.0,
                "AccountCode": "200",
                "TaxType": "OUTPUT2",
                "TaxAmount": 15.0,
                "LineAmount": 100.0,
            }
        ],
        "SubTotal": 100.0,
        "TotalTax": 15.0,
        "Total": total,
        "AmountDue": total,
        "AmountPaid": 0.0,
        "CurrencyCode": "NZD",
        "UpdatedDateUTC": "/Date(1705764000000+0000)/",
    }
    invoice.update(kwargs)
    return invoice


def make_xero_invoices_response(invoices: list) -> dict:
    return {"Invoices": invoices}


def make_xero_invoice_page(count: int) -> dict:
    """A page of ``count`` invoices."""
    return make_xero_invoices_response(
        [make_xero_invoice(invoice_number=f"INV-{n:04d}") for n in range(1, count + 1)]
    )


# =============================================================================
# OTHER ENTITY FIXTURES
# =============================================================================

def make_xero_credit_note(credit_note_id: str = "cn-1", remaining_credit: float = 50.0, **kwargs) -> dict:
    credit_note = {
        "CreditNoteID": credit_note_id,
        "CreditNoteNumber": "CN-0001",
        "Type": "ACCRECCREDIT",
        "Status": "AUTHORISED",
        "Contact": {"ContactID": "c-1", "Name": "Acme Ltd"},
        "Total": 50.0,
        "RemainingCredit": remaining_credit,
        "Allocations": [],
    }
    credit_note.update(kwargs)
    return credit_note


def make_xero_tax_rate(tax_type: str = "OUTPUT2", name: str = "GST on Income", rate: float = 15.0) -> dict:
    return {
        "Name": name,
        "TaxType": tax_type,
        "Status": "ACTIVE",
        "ReportTaxType": "OUTPUT",
        "TaxComponents": [{"Name": "GST", "Rate": rate, "IsCompound": False, "IsNonRecoverable": False}],
        "CanApplyToRevenue": True,
        "DisplayTaxRate": rate,
        "EffectiveRate": rate,
    }


def make_xero_account(account_id: str = "a-1", code: str = "200", name: str = "Sales", **kwargs) -> dict:
    account = {
        "AccountID": account_id,
        "Code": code,
        "Name": name,
        "Type": "REVENUE",
        "Status": "ACTIVE",
        "TaxType": "OUTPUT2",
        "Class": "REVENUE",
        "EnablePaymentsToAccount": False,
        "ShowInExpenseClaims": False,
        "UpdatedDateUTC": "/Date(1705764000000+0000)/",
    }
    account.update(kwargs)
    return account


def make_xero_report(report_name: str = "Balance Sheet") -> dict:
    return {
        "ReportID": "BalanceSheet",
        "ReportName": report_name,
        "ReportType": "BalanceSheet",
        "ReportTitles": [report_name, "Demo Company (NZ)", "As at 31 January 2024"],
        "ReportDate": "31 January 2024",
        "Rows": [
            {
                "RowType": "Header",
                "Cells": [{"Value": ""}, {"Value": "31 Jan 2024"}],
            },
            {
                "RowType": "Section",
                "Title": "Bank",
                "Rows": [
                    {
                        "RowType": "Row",
                        "Cells": [
                            {"Value": "Business Bank Account", "Attributes": [{"Id": "account", "Value": "a-9"}]},
                            {"Value": 1234.5},
                        ],
                    }
                ],
            },
        ],
    }


XERO_ORGANISATION = {
    "Organisations": [
        {
            "OrganisationID": "org-1",
            "Name": "Demo Company (NZ)",
            "LegalName": "Demo Company (NZ) Limited",
            "ShortCode": "!abc12",
            "OrganisationType": "COMPANY",
            "BaseCurrency": "NZD",
            "CountryCode": "NZ",
            "IsDemoCompany": True,
            "FinancialYearEndDay": 31,
            "FinancialYearEndMonth": 3,
            "Timezone": "NEWZEALANDSTANDARDTIME",
        }
    ]
}


# =============================================================================
# WRITABLE WIRE RECORDS
# =============================================================================

# Every writable field of each writable entity kind, and nothing Xero computes,
# so to_wire(from_wire(record)) reproduces the record exactly.

_TRACKING = [{"TrackingCategoryID": "tc-1", "TrackingOptionID": "to-1", "Name": "Region", "Option": "North"}]

_LINE_ITEM = {
    "Description": "Consulting",
    "Quantity": 2.0,
    "UnitAmount": 150.0,
    "ItemCode": "CONSULT",
    "AccountCode": "200",
    "TaxType": "OUTPUT2",
    "DiscountRate": 10.0,
    "Tracking": _TRACKING,
}

_ITEM_DETAILS = {"UnitPrice": 9.5, "AccountCode": "200", "COGSAccountCode": "310", "TaxType": "OUTPUT2"}

_ADDRESS = {
    "AddressType": "STREET",
    "AddressLine1": "1 Queen St",
    "AddressLine2": "Level 3",
    "AddressLine3": "Suite 4",
    "AddressLine4": "Rear entrance",
    "City": "Auckland",
    "Region": "Auckland",
    "PostalCode": "1010",
    "Country": "New Zealand",
    "AttentionTo": "Accounts",
}

_PHONE = {"PhoneType": "MOBILE", "PhoneNumber": "5551234", "PhoneAreaCode": "21", "PhoneCountryCode": "64"}

_CONTACT_PERSON = {"FirstName": "Jo", "LastName": "Bloggs", "EmailAddress": "jo@acme.test", "IncludeInEmails": True}

_PAYMENT_TERMS = {
    "Bills": {"Day": 20, "Type": "OFFOLLOWINGMONTH"},
    "Sales": {"Day": 14, "Type": "DAYSAFTERBILLDATE"},
}

_SCHEDULE = {
    "Period": 1,
    "Unit": "YEARLY",
    "DueDate": 20,
    "DueDateType": "OFFOLLOWINGMONTH",
    "StartDate": "2024-01-01",
    "EndDate": "2026-12-31",
}

_PAYMENT = {
    "Invoice": {"InvoiceID": "i-1"},
    "Account": {"Code": "090"},
    "Date": "2024-02-01",
    "Amount": 115.0,
    "CurrencyRate": 1.0,
    "Reference": "Remittance 42",
    "IsReconciled": False,
    "Status": "AUTHORISED",
}

_MANUAL_JOURNAL_LINE = {
    "LineAmount": -100.0,
    "AccountCode": "200",
    "AccountID": "a-200",
    "Description": "Accrual reversal",
    "TaxType": "NONE",
    "Tracking": _TRACKING,
}

_TAX_COMPONENT = {"Name": "GST", "Rate": 15.0, "IsCompound": False, "IsNonRecoverable": False}

WRITABLE_WIRE_RECORDS = {
    "contact": {
        "ContactNumber": "ACME-01",
        "AccountNumber": "A-001",
        "ContactStatus": "ACTIVE",
        "Name": "Acme Ltd",
        "FirstName": "Jo",
        "LastName": "Bloggs",
        "EmailAddress": "accounts@acme.test",
        "BankAccountDetails": "12-3456-7890123-00",
        "TaxNumber": "12-345-678",
        "AccountsReceivableTaxType": "OUTPUT2",
        "AccountsPayableTaxType": "INPUT2",
        "IsSupplier": False,
        "IsCustomer": True,
        "DefaultCurrency": "NZD",
        "Addresses": [_ADDRESS],
        "Phones": [_PHONE],
        "ContactPersons": [_CONTACT_PERSON],
        "PaymentTerms": _PAYMENT_TERMS,
    },
    "contact_group": {"Name": "Wholesale", "Status": "ACTIVE"},
    "address": _ADDRESS,
    "phone": _PHONE,
    "contact_person": _CONTACT_PERSON,
    "payment_terms": _PAYMENT_TERMS,
    "account": {
        "Code": "090",
        "Name": "Business Cheque",
        "Type": "BANK",
        "Status": "ACTIVE",
        "Description": "Main trading account",
        "TaxType": "NONE",
        "EnablePaymentsToAccount": True,
        "ShowInExpenseClaims": False,
        "BankAccountNumber": "12-3456-7890123-00",
        "BankAccountType": "BANK",
        "CurrencyCode": "NZD",
        "ReportingCode": "ASS.CUR.CAS.CAS",
        "AddToWatchlist": True,
    },
    "invoice": {
        "InvoiceNumber": "INV-0042",
        "Type": "ACCREC",
        "Status": "DRAFT",
        "Contact": {"ContactID": "c-1"},
        "LineItems": [_LINE_ITEM],
        "Date": "2024-01-20",
        "DueDate": "2024-02-20",
        "ExpectedPaymentDate": "2024-02-18",
        "PlannedPaymentDate": "2024-02-19",
        "LineAmountTypes": "Exclusive",
        "Reference": "PO-77",
        "CurrencyCode": "NZD",
        "CurrencyRate": 1.0,
        "BrandingThemeID": "bt-1",
        "Url": "https://acme.test/orders/77",
        "SentToContact": False,
    },
    "credit_note": {
        "CreditNoteNumber": "CN-0007",
        "Type": "ACCRECCREDIT",
        "Status": "AUTHORISED",
        "Contact": {"ContactID": "c-1"},
        "LineItems": [_LINE_ITEM],
        "Date": "2024-01-25",
        "LineAmountTypes": "Inclusive",
        "Reference": "Returned goods",
        "CurrencyCode": "NZD",
        "CurrencyRate": 1.0,
        "BrandingThemeID": "bt-1",
        "SentToContact": True,
    },
    "purchase_order": {
        "PurchaseOrderNumber": "PO-0003",
        "Status": "SUBMITTED",
        "Contact": {"ContactID": "c-2"},
        "LineItems": [_LINE_ITEM],
        "Date": "2024-01-10",
        "DeliveryDate": "2024-01-31",
        "ExpectedArrivalDate": "2024-01-30",
        "LineAmountTypes": "Exclusive",
        "Reference": "Restock",
        "BrandingThemeID": "bt-1",
        "CurrencyCode": "AUD",
        "CurrencyRate": 0.92,
        "SentToContact": False,
        "DeliveryAddress": "1 Queen St, Auckland",
        "AttentionTo": "Warehouse",
        "Telephone": "09 555 1234",
        "DeliveryInstructions": "Leave at loading dock",
    },
    "quote": {
        "QuoteNumber": "QU-0011",
        "Status": "SENT",
        "Contact": {"ContactID": "c-1"},
        "LineItems": [_LINE_ITEM],
        "Date": "2024-01-05",
        "ExpiryDate": "2024-02-05",
        "LineAmountTypes": "NoTax",
        "Reference": "Website rebuild",
        "BrandingThemeID": "bt-1",
        "CurrencyCode": "NZD",
        "CurrencyRate": 1.0,
        "Title": "Website rebuild",
        "Summary": "Design and build",
        "Terms": "50% deposit",
    },
    "schedule": _SCHEDULE,
    "repeating_invoice": {
        "Type": "ACCREC",
        "Status": "AUTHORISED",
        "Contact": {"ContactID": "c-1"},
        "Schedule": _SCHEDULE,
        "LineItems": [_LINE_ITEM],
        "LineAmountTypes": "Exclusive",
        "Reference": "Annual support",
        "BrandingThemeID": "bt-1",
        "CurrencyCode": "NZD",
        "ApprovedForSending": True,
        "SendCopy": False,
        "MarkAsSent": False,
        "IncludePDF": True,
    },
    "line_item": _LINE_ITEM,
    "item": {
        "Code": "WIDGET",
        "Name": "Widget",
        "Description": "Blue widget",
        "PurchaseDescription": "Blue widget (wholesale)",
        "PurchaseDetails": _ITEM_DETAILS,
        "SalesDetails": _ITEM_DETAILS,
        "IsTrackedAsInventory": True,
        "InventoryAssetAccountCode": "630",
        "IsSold": True,
        "IsPurchased": True,
    },
    "item_details": _ITEM_DETAILS,
    "payment": _PAYMENT,
    "batch_payment": {
        "Account": {"AccountID": "a-090"},
        "Date": "2024-02-01",
        "Reference": "Feb run",
        "Particulars": "Suppliers",
        "Code": "FEB",
        "Details": "Monthly suppliers",
        "Narrative": "February supplier payments",
        "Status": "AUTHORISED",
        "Payments": [_PAYMENT],
    },
    "allocation": {"Invoice": {"InvoiceID": "i-1"}, "Amount": 25.0, "Date": "2024-02-02"},
    "bank_transaction": {
        "Type": "SPEND",
        "Status": "AUTHORISED",
        "Contact": {"ContactID": "c-2"},
        "BankAccount": {"Code": "090"},
        "LineItems": [_LINE_ITEM],
        "Date": "2024-01-15",
        "Reference": "Card purchase",
        "IsReconciled": True,
        "LineAmountTypes": "Inclusive",
        "CurrencyCode": "NZD",
        "CurrencyRate": 1.0,
        "Url": "https://acme.test/receipts/9",
    },
    "bank_transfer": {
        "FromBankAccount": {"Code": "090"},
        "ToBankAccount": {"AccountID": "a-091"},
        "Amount": 500.0,
        "Date": "2024-01-31",
        "Reference": "Sweep to savings",
    },
    "manual_journal": {
        "Narration": "Month end accrual",
        "Date": "2024-01-31",
        "Status": "DRAFT",
        "LineAmountTypes": "NoTax",
        "ShowOnCashBasisReports": False,
        "Url": "https://acme.test/journals/1",
        "JournalLines": [_MANUAL_JOURNAL_LINE, {**_MANUAL_JOURNAL_LINE, "LineAmount": 100.0}],
    },
    "manual_journal_line": _MANUAL_JOURNAL_LINE,
    "tax_rate": {
        "TaxType": "TAX001",
        "Name": "Custom GST",
        "Status": "ACTIVE",
        "ReportTaxType": "OUTPUT",
        "TaxComponents": [_TAX_COMPONENT],
    },
    "tax_component": _TAX_COMPONENT,
    "currency": {"Code": "AUD", "Description": "Australian Dollar"},
    "tracking_category": {"Name": "Region", "Status": "ACTIVE"},
    "tracking_option": {"Name": "North", "Status": "ARCHIVED"},
    "linked_transaction": {
        "SourceTransactionID": "b-1",
        "SourceLineItemID": "li-1",
        "ContactID": "c-1",
        "TargetTransactionID": "i-9",
        "TargetLineItemID": "li-9",
    },
}


# =============================================================================
# XERO ERROR RESPONSES
# =============================================================================

XERO_ERROR_VALIDATION = {
    "ErrorNumber": 10,
    "Type": "ValidationException",
    "Message": None,
    "Elements": [
        {
            "ValidationErrors": [
                {"Message": "The amount being allocated exceeds the remaining credit"},
                {"Message": "Allocation date is before the credit note date"},
            ]
        }
    ],
}

XERO_ERROR_MESSAGE = {
    "ErrorNumber": 14,
    "Type": "PostDataInvalidException",
    "Message": "Invalid JSON in request body",
}
