"""Rendering of tool results and errors as JSON or Markdown text."""

import json
import logging
from typing import Any, Dict, List

from pydantic import BaseModel

from .constants import DEFAULT_CHARACTER_LIMIT
from .errors import XeroError

logger = logging.getLogger(__name__)

TRUNCATION_NOTE = "\n\n... [truncated: response exceeded {limit} characters. Narrow the query or request a later page.]"


def to_jsonable(data: Any) -> Any:
    """Convert models (and containers of models) into plain JSON values.

    Fields that are None are dropped so responses only carry what Xero sent.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, list):
        return [to_jsonable(item) for item in data]
    if isinstance(data, dict):
        return {key: to_jsonable(value) for key, value in data.items()}
    return data


def truncate(text: str, limit: int = DEFAULT_CHARACTER_LIMIT) -> str:
    if len(text) <= limit:
        return text
    logger.debug(f"Truncating response from {len(text)} to {limit} characters")
    return text[:limit] + TRUNCATION_NOTE.format(limit=limit)


def to_json_text(data: Any) -> str:
    return json.dumps(to_jsonable(data), indent=2)


def format_response(
    data: Any,
    response_format: str = "json",
    entity_type: str = "items",
    character_limit: int = DEFAULT_CHARACTER_LIMIT,
) -> str:
    """Render a Facade result for an MCP client.

    Args:
        data: Model, list of models, PagedResult or plain dict
        response_format: "json" or "markdown"
        entity_type: Plural entity name, used for headings and table choice
        character_limit: Maximum length before truncation

    Returns:
        Rendered text
    """
    if response_format == "markdown":
        text = format_markdown(to_jsonable(data), entity_type)
    else:
        text = to_json_text(data)
    return truncate(text, character_limit)


def format_error(error: Exception) -> str:
    """Render any exception as a JSON error payload.

    Errors from the taxonomy carry their own type and retry flag; anything
    else is an internal failure and is logged with its traceback.
    """
    if isinstance(error, XeroError):
        message = f"Error: {error.message}"
        if error.retryable:
            message += " (retryable)"
        payload = {
            "error": message,
            "error_type": error.error_type,
            "retryable": error.retryable,
            "details": error.to_dict(),
        }
    else:
        logger.exception(f"Unexpected error in tool call: {error}")
        payload = {
            "error": f"Error: {error}",
            "error_type": "internal_error",
            "retryable": False,
            "details": {
                "error_type": "internal_error",
                "exception": type(error).__name__,
                "message": str(error),
            },
        }
    return json.dumps(payload, indent=2)


# =============================================================================
# MARKDOWN
# =============================================================================

def format_markdown(data: Any, entity_type: str) -> str:
    if isinstance(data, dict) and isinstance(data.get("items"), list):
        return _paged_markdown(data, entity_type)
    if isinstance(data, list):
        if not data:
            return "_No items found._"
        return TABLES.get(entity_type, _generic_table)(data)
    if isinstance(data, dict):
        return _object_markdown(data, entity_type)
    return str(data)


def _title(text: str) -> str:
    return text.replace("_", " ").strip().title()


def _cell(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value).replace("|", "\\|")


def _paged_markdown(data: Dict[str, Any], entity_type: str) -> str:
    items = data["items"]
    lines = [f"## {_title(entity_type)}", "", f"**Showing:** {data.get('count', len(items))}"]
    if data.get("has_more"):
        lines.append(f"**More available:** Yes (page: {data.get('next_page')})")
    lines.append("")

    if not items:
        lines.append("_No items found._")
        return "\n".join(lines)

    table = TABLES.get(entity_type, _generic_table)
    lines.append(table(items))
    return "\n".join(lines)


def _contacts_table(contacts: List[Dict[str, Any]]) -> str:
    lines = ["| ID | Name | Email | Phone | Status |", "|---|---|---|---|---|"]
    for contact in contacts:
        phone = next(
            (p.get("phone_number") for p in contact.get("phones", []) if p.get("phone_number")),
            None,
        )
        lines.append(
            f"| {_cell(contact.get('contact_id'))} | {_cell(contact.get('name'))} "
            f"| {_cell(contact.get('email_address'))} | {_cell(phone)} "
            f"| {_cell(contact.get('contact_status'))} |"
        )
    return "\n".join(lines)


def _invoices_table(invoices: List[Dict[str, Any]]) -> str:
    lines = ["| Invoice # | Contact | Total | Status | Due Date |", "|---|---|---|---|---|"]
    for invoice in invoices:
        number = invoice.get("invoice_number") or invoice.get("invoice_id")
        contact_name = (invoice.get("contact") or {}).get("name")
        total = invoice.get("total")
        lines.append(
            f"| {_cell(number)} | {_cell(contact_name)} "
            f"| {_cell(f'{total:,.2f}' if total is not None else None)} "
            f"| {_cell(invoice.get('status'))} | {_cell(invoice.get('due_date'))} |"
        )
    return "\n".join(lines)


def _accounts_table(accounts: List[Dict[str, Any]]) -> str:
    lines = ["| Code | Name | Type | Status |", "|---|---|---|---|"]
    for account in accounts:
        lines.append(
            f"| {_cell(account.get('code'))} | {_cell(account.get('name'))} "
            f"| {_cell(account.get('type'))} | {_cell(account.get('status'))} |"
        )
    return "\n".join(lines)


def _payments_table(payments: List[Dict[str, Any]]) -> str:
    lines = ["| ID | Invoice | Amount | Date | Status |", "|---|---|---|---|---|"]
    for payment in payments:
        invoice_number = (payment.get("invoice") or {}).get("invoice_number")
        lines.append(
            f"| {_cell(payment.get('payment_id'))} | {_cell(invoice_number)} "
            f"| {_cell(payment.get('amount'))} | {_cell(payment.get('date'))} "
            f"| {_cell(payment.get('status'))} |"
        )
    return "\n".join(lines)


def _generic_table(items: List[Any]) -> str:
    """Table of the first five fields of the first record."""
    if not items:
        return "_No items found._"
    if not isinstance(items[0], dict):
        return "\n".join(f"- {_cell(item)}" for item in items)

    keys = list(items[0].keys())[:5]
    lines = [
        "| " + " | ".join(_title(key) for key in keys) + " |",
        "|" + "|".join("---" for _ in keys) + "|",
    ]
    for item in items:
        lines.append("| " + " | ".join(_cell(item.get(key)) for key in keys) + " |")
    return "\n".join(lines)


def _object_markdown(data: Dict[str, Any], entity_type: str) -> str:
    heading = entity_type[:-1] if entity_type.endswith("s") else entity_type
    lines = [f"## {_title(heading)}", ""]
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"**{_title(key)}:**")
            lines.append("```json")
            lines.append(json.dumps(value, indent=2))
            lines.append("```")
        else:
            lines.append(f"**{_title(key)}:** {value}")
    return "\n".join(lines)


TABLES = {
    "contacts": _contacts_table,
    "invoices": _invoices_table,
    "accounts": _accounts_table,
    "payments": _payments_table,
}
