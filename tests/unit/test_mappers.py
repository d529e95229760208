"""Unit tests for wire <-> domain mapping.

Tests verify that:
- Wire records map to models field by field
- Write payloads are sparse and never carry ids or totals
- Explicit False / 0 / "" values are transmitted
- References collapse to their identifier
"""

import pytest

from xero_mcp.mappers import (
    MAPPERS,
    account_ref_to_wire,
    contact_from_wire,
    contact_to_wire,
    from_wire,
    invoice_from_wire,
    invoice_to_wire,
    item_to_wire,
    manual_journal_line_to_wire,
    report_from_wire,
    schedule_from_wire,
    tax_rate_from_wire,
    tax_rate_to_wire,
    to_wire,
)
from xero_mcp.models import (
    AccountRef,
    Contact,
    ContactRef,
    ContactStatus,
    Invoice,
    InvoiceStatus,
    InvoiceType,
    Item,
    ItemDetails,
    LineAmountType,
    LineItem,
    ManualJournalLine,
    ScheduleUnit,
    TaxRate,
    TrackingRef,
)

from tests.fixtures.xero_fixtures import (
    WRITABLE_WIRE_RECORDS,
    make_xero_contact,
    make_xero_invoice,
    make_xero_report,
    make_xero_tax_rate,
)


class TestFromWire:
    """Tests for reading wire records."""

    def test_contact(self):
        record = make_xero_contact(contact_id="c-1", name="Acme Ltd")

        contact = contact_from_wire(record)

        assert contact.contact_id == "c-1"
        assert contact.name == "Acme Ltd"
        assert contact.contact_status == ContactStatus.ACTIVE
        assert contact.is_supplier is False
        assert contact.addresses[0].city == "Auckland"
        assert contact.phones[0].phone_number == "555 0100"
        assert contact.balances.accounts_receivable.outstanding == 250.0
        assert contact.balances.accounts_payable is None

    def test_absent_fields_are_none(self):
        contact = contact_from_wire({"ContactID": "c-1"})

        assert contact.name is None
        assert contact.addresses is None
        assert contact.payment_terms is None

    def test_unknown_enum_value_is_none(self):
        invoice = invoice_from_wire({"InvoiceID": "i-1", "Status": "SOMETHING_NEW", "Type": "ACCREC"})

        assert invoice.status is None
        assert invoice.type == InvoiceType.ACCREC

    def test_date_prefers_iso_string(self):
        invoice = invoice_from_wire(make_xero_invoice())

        assert invoice.date == "2024-01-20T00:00:00"
        assert invoice.due_date == "2024-02-03T00:00:00"

    def test_date_falls_back_to_raw_value(self):
        invoice = invoice_from_wire({"Date": "/Date(1705708800000+0000)/"})

        assert invoice.date == "/Date(1705708800000+0000)/"

    def test_invoice_totals_and_lines(self):
        invoice = invoice_from_wire(make_xero_invoice(total=115.0))

        assert invoice.total == 115.0
        assert invoice.amount_due == 115.0
        assert invoice.contact.contact_id == "c-1"
        assert invoice.line_items[0].tax_amount == 15.0
        assert invoice.line_amount_types == LineAmountType.EXCLUSIVE

    def test_tax_rate_components(self):
        tax_rate = tax_rate_from_wire(make_xero_tax_rate(rate=15.0))

        assert tax_rate.tax_type == "OUTPUT2"
        assert tax_rate.tax_components[0].rate == 15.0
        assert tax_rate.can_apply_to_revenue is True

    @pytest.mark.parametrize("unit", ["WEEKLY", "MONTHLY", "YEARLY"])
    def test_schedule_units(self, unit):
        schedule = schedule_from_wire({"Period": 1, "Unit": unit})

        assert schedule.unit == ScheduleUnit(unit)

    def test_report_rows_nested(self):
        report = report_from_wire(make_xero_report())

        section = report.rows[1]
        assert section.title == "Bank"
        assert section.rows[0].cells[0].value == "Business Bank Account"
        # Numeric cell values are kept as text
        assert section.rows[0].cells[1].value == "1234.5"


class TestToWire:
    """Tests for building write payloads."""

    def test_sparse_update_keeps_explicit_false(self):
        payload = contact_to_wire(Contact(is_supplier=False))

        assert payload == {"IsSupplier": False}

    def test_empty_string_is_sent(self):
        payload = contact_to_wire(Contact(email_address=""))

        assert payload == {"EmailAddress": ""}

    def test_empty_model_gives_empty_payload(self):
        assert invoice_to_wire(Invoice()) == {}

    def test_identifiers_and_totals_never_written(self):
        invoice = invoice_from_wire(make_xero_invoice(invoice_id="i-1"))

        payload = invoice_to_wire(invoice)

        assert "InvoiceID" not in payload
        for read_only in ("SubTotal", "TotalTax", "Total", "AmountDue", "AmountPaid", "UpdatedDateUTC"):
            assert read_only not in payload
        assert "LineItemID" not in payload["LineItems"][0]
        assert "TaxAmount" not in payload["LineItems"][0]

    def test_enums_written_as_values(self):
        payload = invoice_to_wire(Invoice(
            type=InvoiceType.ACCREC,
            status=InvoiceStatus.AUTHORISED,
            line_amount_types=LineAmountType.INCLUSIVE,
        ))

        assert payload == {"Type": "ACCREC", "Status": "AUTHORISED", "LineAmountTypes": "Inclusive"}

    def test_contact_reference_collapses_to_id(self):
        payload = invoice_to_wire(Invoice(contact=ContactRef(contact_id="c-1", name="Acme Ltd")))

        assert payload == {"Contact": {"ContactID": "c-1"}}

    def test_line_items_order_and_tracking(self):
        invoice = Invoice(line_items=[
            LineItem(description="First", quantity=0),
            LineItem(description="Second", tracking=[TrackingRef(name="Region", option="North")]),
        ])

        payload = invoice_to_wire(invoice)

        assert payload["LineItems"] == [
            {"Description": "First", "Quantity": 0},
            {"Description": "Second", "Tracking": [{"Name": "Region", "Option": "North"}]},
        ]

    @pytest.mark.parametrize("ref,expected", [
        (AccountRef(account_id="a-1", code="090"), {"AccountID": "a-1"}),
        (AccountRef(code="090"), {"Code": "090"}),
        (AccountRef(name="Bank"), None),
    ])
    def test_account_reference(self, ref, expected):
        assert account_ref_to_wire(ref) == expected

    def test_item_nested_details(self):
        item = Item(code="WIDGET", sales_details=ItemDetails(unit_price=9.5, account_code="200"))

        assert item_to_wire(item) == {
            "Code": "WIDGET",
            "SalesDetails": {"UnitPrice": 9.5, "AccountCode": "200"},
        }

    def test_manual_journal_line_by_account_id(self):
        line = ManualJournalLine(line_amount=-100.0, account_id="a-200", description="Accrual")

        assert manual_journal_line_to_wire(line) == {
            "LineAmount": -100.0,
            "AccountID": "a-200",
            "Description": "Accrual",
        }

    def test_manual_journal_line_tax_amount_not_written(self):
        line = ManualJournalLine(line_amount=115.0, account_code="200", tax_amount=15.0)

        assert "TaxAmount" not in manual_journal_line_to_wire(line)

    def test_tax_rate_names_tax_type(self):
        tax_rate = TaxRate(tax_type="TAX001", name="Custom GST", effective_rate=15.0)

        assert tax_rate_to_wire(tax_rate) == {"TaxType": "TAX001", "Name": "Custom GST"}


class TestRoundTrip:
    """Tests for from_wire(to_wire(x)) on writable fields."""

    def test_invoice_round_trip(self):
        invoice = Invoice(
            type=InvoiceType.ACCPAY,
            status=InvoiceStatus.DRAFT,
            contact=ContactRef(contact_id="c-9"),
            date="2024-03-01",
            due_date="2024-03-31",
            reference="PO-77",
            line_items=[LineItem(description="Paper", quantity=2, unit_amount=4.5, account_code="400")],
        )

        restored = invoice_from_wire(invoice_to_wire(invoice))

        assert restored == invoice

    def test_contact_round_trip(self):
        contact = Contact(name="Globex", is_customer=True, is_supplier=False, tax_number="12-345-678")

        assert contact_from_wire(contact_to_wire(contact)) == contact

    def test_every_writable_kind_has_a_record(self):
        writable = {kind for kind, mapper in MAPPERS.items() if mapper.to_wire is not None}

        assert set(WRITABLE_WIRE_RECORDS) == writable

    @pytest.mark.parametrize("kind", sorted(WRITABLE_WIRE_RECORDS))
    def test_wire_record_survives(self, kind):
        record = WRITABLE_WIRE_RECORDS[kind]

        assert to_wire(kind, from_wire(kind, record)) == record

    @pytest.mark.parametrize("kind", sorted(WRITABLE_WIRE_RECORDS))
    def test_model_survives(self, kind):
        model = from_wire(kind, WRITABLE_WIRE_RECORDS[kind])

        assert from_wire(kind, to_wire(kind, model)) == model


class TestRegistry:
    """Tests for the MAPPERS registry."""

    def test_lookup_by_kind(self):
        contact = from_wire("contact", {"ContactID": "c-1", "Name": "Acme Ltd"})

        assert contact.name == "Acme Ltd"
        assert to_wire("contact", contact) == {"Name": "Acme Ltd"}

    def test_read_only_kind_rejects_writes(self):
        with pytest.raises(ValueError, match="read-only"):
            to_wire("journal", object())

    @pytest.mark.parametrize("kind", ["organisation", "journal", "report", "branding_theme", "user"])
    def test_read_only_kinds(self, kind):
        assert MAPPERS[kind].to_wire is None

    def test_every_kind_reads_an_empty_record(self):
        for kind, mapper in MAPPERS.items():
            assert mapper.from_wire({}) is not None, kind
