"""Unit tests for the Xero API client.

Tests verify that:
- Each operation hits the right method, path and query
- Payloads are wrapped under Xero's pluralised keys
- Paged lists report has_more from the page size
- Lookups by id raise NotFound on an empty collection
- Transport errors propagate unchanged
"""

import json

import pytest

from xero_mcp.errors import MissingCredentialError, XeroAPIError, XeroNotFoundError
from xero_mcp.credentials import TenantCredentials
from xero_mcp.models import (
    AccountClass,
    AccountRef,
    Contact,
    ContactRef,
    Invoice,
    InvoiceRef,
    InvoiceStatus,
    InvoiceType,
    LineItem,
    Payment,
    TaxRate,
)

from tests.fixtures.xero_fixtures import (
    XERO_ERROR_VALIDATION,
    XERO_ORGANISATION,
    make_xero_account,
    make_xero_contact,
    make_xero_contacts_response,
    make_xero_credit_note,
    make_xero_invoice,
    make_xero_invoice_page,
    make_xero_invoices_response,
    make_xero_report,
    make_xero_tax_rate,
)


class TestOrganisation:
    """Tests for organisation and connection checks."""

    @pytest.mark.asyncio
    async def test_get_organisation(self, xero_api, make_client):
        xero_api.add_response("GET", "/Organisation", json_body=XERO_ORGANISATION)

        async with make_client() as client:
            organisation = await client.get_organisation()

        assert organisation.name == "Demo Company (NZ)"
        assert organisation.base_currency == "NZD"
        assert organisation.is_demo_company is True

    @pytest.mark.asyncio
    async def test_connection(self, xero_api, make_client):
        xero_api.add_response("GET", "/Organisation", json_body=XERO_ORGANISATION)

        async with make_client() as client:
            status = await client.test_connection()

        assert status.connected is True
        assert status.organisation_name == "Demo Company (NZ)"

    @pytest.mark.asyncio
    async def test_empty_tenant_makes_no_request(self, xero_api, make_client):
        async with make_client(TenantCredentials(access_token="tok", tenant_id="")) as client:
            with pytest.raises(MissingCredentialError):
                await client.list_contacts()

        assert xero_api.requests == []


class TestPagination:
    """Tests for paged list operations."""

    @pytest.mark.asyncio
    async def test_full_page_has_more(self, xero_api, make_client):
        xero_api.add_response("GET", "/Invoices", json_body=make_xero_invoice_page(100))

        async with make_client() as client:
            page = await client.list_invoices(page=1)

        assert page.count == 100
        assert page.has_more is True
        assert page.next_page == 2

    @pytest.mark.asyncio
    async def test_short_page_is_last(self, xero_api, make_client):
        xero_api.add_response("GET", "/Invoices", json_body=make_xero_invoice_page(99))

        async with make_client() as client:
            page = await client.list_invoices(page=3)

        assert page.count == 99
        assert page.page == 3
        assert page.has_more is False
        assert page.next_page is None

    @pytest.mark.asyncio
    async def test_invoice_filters_joined(self, xero_api, make_client):
        xero_api.add_response("GET", "/Invoices", json_body=make_xero_invoices_response([]))

        async with make_client() as client:
            await client.list_invoices(statuses=["DRAFT", "AUTHORISED"], contact_ids=["c-1", "c-2"])

        params = xero_api.requests[0].url.params
        assert params["Statuses"] == "DRAFT,AUTHORISED"
        assert params["ContactIDs"] == "c-1,c-2"
        assert params["page"] == "1"
        assert "InvoiceNumbers" not in params

    @pytest.mark.asyncio
    async def test_contacts_include_archived(self, xero_api, make_client):
        xero_api.add_response("GET", "/Contacts", json_body=make_xero_contacts_response([make_xero_contact()]))

        async with make_client() as client:
            page = await client.list_contacts(page=0, include_archived=True)

        params = xero_api.requests[0].url.params
        assert params["includeArchived"] == "true"
        assert params["page"] == "1"
        assert page.items[0].name == "Acme Ltd"


class TestLookups:
    """Tests for singular gets."""

    @pytest.mark.asyncio
    async def test_get_contact(self, xero_api, make_client):
        xero_api.add_response(
            "GET", "/Contacts/c-1", json_body=make_xero_contacts_response([make_xero_contact(contact_id="c-1")])
        )

        async with make_client() as client:
            contact = await client.get_contact("c-1")

        assert contact.contact_id == "c-1"

    @pytest.mark.asyncio
    async def test_empty_collection_is_not_found(self, xero_api, make_client):
        xero_api.add_response("GET", "/Invoices/missing", json_body={"Invoices": []})

        async with make_client() as client:
            with pytest.raises(XeroNotFoundError) as exc_info:
                await client.get_invoice("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Invoice not found"

    @pytest.mark.asyncio
    async def test_tax_rate_by_type(self, xero_api, make_client):
        xero_api.add_response("GET", "/TaxRates", json_body={"TaxRates": [make_xero_tax_rate()]})

        async with make_client() as client:
            tax_rate = await client.get_tax_rate("OUTPUT2")

        assert tax_rate.name == "GST on Income"
        assert xero_api.requests[0].url.params["where"] == 'TaxType=="OUTPUT2"'

    @pytest.mark.asyncio
    async def test_accounts_class_filter(self, xero_api, make_client):
        xero_api.add_response("GET", "/Accounts", json_body={"Accounts": [make_xero_account()]})

        async with make_client() as client:
            accounts = await client.list_accounts(where='Status=="ACTIVE"', account_class=AccountClass.REVENUE)

        assert accounts[0].code == "200"
        assert xero_api.requests[0].url.params["where"] == 'Status=="ACTIVE"&&Class=="REVENUE"'


class TestWrites:
    """Tests for create, update and status-change operations."""

    @pytest.mark.asyncio
    async def test_create_then_fetch_invoice(self, xero_api, make_client):
        """Test a created invoice is echoed and can be fetched by its new id."""
        created = make_xero_invoice(invoice_id="i-new", status="DRAFT", total=115.0)
        xero_api.add_response("POST", "/Invoices", json_body=make_xero_invoices_response([created]))
        xero_api.add_response("GET", "/Invoices/i-new", json_body=make_xero_invoices_response([created]))

        invoice = Invoice(
            type=InvoiceType.ACCREC,
            contact=ContactRef(contact_id="c-1"),
            line_items=[LineItem(description="Consulting", quantity=1, unit_amount=100, account_code="200")],
            status=InvoiceStatus.DRAFT,
        )
        async with make_client() as client:
            result = await client.create_invoice(invoice)
            fetched = await client.get_invoice(result.invoice_id)

        assert result.invoice_id == "i-new"
        assert fetched.total == 115.0
        assert fetched.status == InvoiceStatus.DRAFT
        sent = xero_api.requests[0]
        assert sent.method == "POST"
        assert json.loads(sent.content) == {
            "Invoices": [{
                "Type": "ACCREC",
                "Status": "DRAFT",
                "Contact": {"ContactID": "c-1"},
                "LineItems": [{"Description": "Consulting", "Quantity": 1.0, "UnitAmount": 100.0, "AccountCode": "200"}],
            }]
        }

    @pytest.mark.asyncio
    async def test_void_invoice(self, xero_api, make_client):
        voided = make_xero_invoice(invoice_id="i-1", status="VOIDED")
        xero_api.add_response("POST", "/Invoices/i-1", json_body=make_xero_invoices_response([voided]))

        async with make_client() as client:
            invoice = await client.void_invoice("i-1")

        assert invoice.status == InvoiceStatus.VOIDED
        assert xero_api.last_json() == {"Invoices": [{"Status": "VOIDED"}]}

    @pytest.mark.asyncio
    async def test_sparse_contact_update(self, xero_api, make_client):
        xero_api.add_response(
            "POST", "/Contacts/c-1", json_body=make_xero_contacts_response([make_xero_contact(contact_id="c-1")])
        )

        async with make_client() as client:
            await client.update_contact("c-1", Contact(is_supplier=False))

        assert xero_api.last_json() == {"Contacts": [{"IsSupplier": False}]}

    @pytest.mark.asyncio
    async def test_over_allocation_surfaces_validation_message(self, xero_api, make_client):
        xero_api.add_response("PUT", "/CreditNotes/cn-1/Allocations", status_code=400, json_body=XERO_ERROR_VALIDATION)

        async with make_client() as client:
            with pytest.raises(XeroAPIError) as exc_info:
                await client.allocate_credit_note("cn-1", "i-1", 500.0, "2024-02-01")

        assert "exceeds the remaining credit" in exc_info.value.message
        assert xero_api.last_json() == {
            "Allocations": [{"Invoice": {"InvoiceID": "i-1"}, "Amount": 500.0, "Date": "2024-02-01"}]
        }

    @pytest.mark.asyncio
    async def test_allocate_credit_note(self, xero_api, make_client):
        xero_api.add_response(
            "PUT", "/CreditNotes/cn-1/Allocations",
            json_body={"CreditNotes": [make_xero_credit_note(remaining_credit=0.0)]},
        )

        async with make_client() as client:
            credit_note = await client.allocate_credit_note("cn-1", "i-1", 50.0)

        assert credit_note.remaining_credit == 0.0
        assert "Date" not in xero_api.last_json()["Allocations"][0]

    @pytest.mark.asyncio
    async def test_create_payment_uses_put(self, xero_api, make_client):
        xero_api.add_response(
            "PUT", "/Payments",
            json_body={"Payments": [{"PaymentID": "p-1", "Amount": 115.0, "Status": "AUTHORISED"}]},
        )
        payment = Payment(
            invoice=InvoiceRef(invoice_id="i-1"),
            account=AccountRef(code="090"),
            amount=115.0,
            date="2024-02-01",
        )

        async with make_client() as client:
            result = await client.create_payment(payment)

        assert result.payment_id == "p-1"
        assert xero_api.last_json() == {"Payments": [{
            "Invoice": {"InvoiceID": "i-1"},
            "Account": {"Code": "090"},
            "Date": "2024-02-01",
            "Amount": 115.0,
        }]}

    @pytest.mark.asyncio
    async def test_delete_payment(self, xero_api, make_client):
        xero_api.add_response(
            "POST", "/Payments/p-1", json_body={"Payments": [{"PaymentID": "p-1", "Status": "DELETED"}]}
        )

        async with make_client() as client:
            payment = await client.delete_payment("p-1")

        assert payment.status.value == "DELETED"
        assert xero_api.last_json() == {"Payments": [{"Status": "DELETED"}]}

    @pytest.mark.asyncio
    async def test_update_tax_rate_names_tax_type(self, xero_api, make_client):
        xero_api.add_response("POST", "/TaxRates", json_body={"TaxRates": [make_xero_tax_rate(name="Renamed")]})

        async with make_client() as client:
            await client.update_tax_rate("OUTPUT2", TaxRate(name="Renamed"))

        assert xero_api.last_json() == {"TaxRates": [{"TaxType": "OUTPUT2", "Name": "Renamed"}]}

    @pytest.mark.asyncio
    async def test_update_tax_rate_argument_wins(self, xero_api, make_client):
        xero_api.add_response("POST", "/TaxRates", json_body={"TaxRates": [make_xero_tax_rate()]})

        async with make_client() as client:
            await client.update_tax_rate("OUTPUT2", TaxRate(tax_type="INPUT2", name="Renamed"))

        assert xero_api.last_json()["TaxRates"][0]["TaxType"] == "OUTPUT2"

    @pytest.mark.asyncio
    async def test_create_tax_rate_sends_tax_type(self, xero_api, make_client):
        xero_api.add_response("PUT", "/TaxRates", json_body={"TaxRates": [make_xero_tax_rate()]})

        async with make_client() as client:
            await client.create_tax_rate(TaxRate(tax_type="TAX001", name="Custom"))

        assert xero_api.last_json() == {"TaxRates": [{"TaxType": "TAX001", "Name": "Custom"}]}

    @pytest.mark.asyncio
    async def test_delete_item_no_content(self, xero_api, make_client):
        xero_api.add_response("DELETE", "/Items/i-1", status_code=204)

        async with make_client() as client:
            result = await client.delete_item("i-1")

        assert result is None
        assert xero_api.requests[0].method == "DELETE"

    @pytest.mark.asyncio
    async def test_add_contacts_to_group(self, xero_api, make_client):
        xero_api.add_response(
            "PUT", "/ContactGroups/g-1/Contacts",
            json_body={"Contacts": [{"ContactID": "c-1"}, {"ContactID": "c-2"}]},
        )

        async with make_client() as client:
            contacts = await client.add_contacts_to_group("g-1", ["c-1", "c-2"])

        assert [contact.contact_id for contact in contacts] == ["c-1", "c-2"]
        assert xero_api.last_json() == {"Contacts": [{"ContactID": "c-1"}, {"ContactID": "c-2"}]}


class TestReports:
    """Tests for report operations."""

    @pytest.mark.asyncio
    async def test_balance_sheet_params(self, xero_api, make_client):
        xero_api.add_response("GET", "/Reports/BalanceSheet", json_body={"Reports": [make_xero_report()]})

        async with make_client() as client:
            report = await client.get_balance_sheet(date="2024-01-31", periods=2, timeframe="MONTH")

        assert report.report_name == "Balance Sheet"
        assert dict(xero_api.requests[0].url.params) == {
            "date": "2024-01-31",
            "periods": "2",
            "timeframe": "MONTH",
        }

    @pytest.mark.asyncio
    async def test_aged_receivables_contact_param(self, xero_api, make_client):
        xero_api.add_response(
            "GET", "/Reports/AgedReceivablesByContact", json_body={"Reports": [make_xero_report("Aged Receivables")]}
        )

        async with make_client() as client:
            await client.get_aged_receivables_by_contact("c-1")

        assert xero_api.requests[0].url.params["contactID"] == "c-1"


class TestMalformedResponses:
    """Tests for envelopes missing their collection key."""

    @pytest.mark.asyncio
    async def test_missing_key_raises(self, xero_api, make_client):
        xero_api.add_response("GET", "/Contacts", json_body={"Unexpected": []})

        async with make_client() as client:
            with pytest.raises(KeyError):
                await client.list_contacts()
