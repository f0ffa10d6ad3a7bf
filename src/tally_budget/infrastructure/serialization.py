"""JSON codec for the ledger's canonical collections.

Amounts are written as decimal strings, dates in ISO-8601, identifiers as
UUID strings and month keys as ``YYYY-MM``. Decoding raises ``ValueError``,
``KeyError`` or ``TypeError`` on malformed payloads; store adapters catch
those and fall back to defaults.
"""

import json
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable
from uuid import UUID

from tally_budget.domain.constants import (
    ALLOCATIONS,
    CATEGORIES,
    MONTHLY_BUDGETS,
    ROLLOVER_SPENT_BY_MONTH,
    SAVINGS_GOALS,
    SAVINGS_RECORDS,
    TRANSACTIONS,
)
from tally_budget.domain.errors import LedgerError
from tally_budget.domain.models import (
    CategoryAllocation,
    CategoryBudget,
    MonthKey,
    SavingsGoal,
    SavingsRecord,
    Transaction,
)
from tally_budget.utils.decimal_utils import round_cents


def _amount(raw: Any) -> Decimal:
    if not isinstance(raw, (str, int)):
        raise TypeError(f"Amount must be a string or integer, got {raw!r}")
    try:
        value = Decimal(str(raw))
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {raw!r}")
        return round_cents(value)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {raw!r}") from exc


def _uuid(raw: Any) -> UUID:
    if not isinstance(raw, str):
        raise TypeError(f"Identifier must be a string, got {raw!r}")
    return UUID(raw)


def _month(raw: str) -> MonthKey:
    try:
        return MonthKey.parse(raw)
    except LedgerError as exc:
        raise ValueError(str(exc)) from exc


def _encode_category(category: CategoryBudget) -> dict[str, Any]:
    return {
        "id": str(category.id),
        "name": category.name,
        "base_allocation": str(category.base_allocation),
        "color": category.color,
    }


def _decode_category(raw: dict[str, Any]) -> CategoryBudget:
    return CategoryBudget(
        id=_uuid(raw["id"]),
        name=str(raw["name"]),
        base_allocation=_amount(raw["base_allocation"]),
        color=str(raw["color"]),
    )


def _encode_allocation(allocation: CategoryAllocation) -> dict[str, Any]:
    return {
        "id": str(allocation.id),
        "category_id": str(allocation.category_id),
        "month": str(allocation.month),
        "allocated_amount": str(allocation.allocated_amount),
    }


def _decode_allocation(raw: dict[str, Any]) -> CategoryAllocation:
    return CategoryAllocation(
        id=_uuid(raw["id"]),
        category_id=_uuid(raw["category_id"]),
        month=_month(raw["month"]),
        allocated_amount=_amount(raw["allocated_amount"]),
    )


def _encode_transaction(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": str(transaction.id),
        "category_id": str(transaction.category_id),
        "date": transaction.date.isoformat(),
        "amount": str(transaction.amount),
        "description": transaction.description,
    }


def _decode_transaction(raw: dict[str, Any]) -> Transaction:
    return Transaction(
        id=_uuid(raw["id"]),
        category_id=_uuid(raw["category_id"]),
        date=date.fromisoformat(raw["date"]),
        amount=_amount(raw["amount"]),
        description=str(raw.get("description", "")),
    )


def _encode_goal(goal: SavingsGoal) -> dict[str, Any]:
    return {
        "id": str(goal.id),
        "title": goal.title,
        "target_amount": str(goal.target_amount),
        "current_amount": str(goal.current_amount),
    }


def _decode_goal(raw: dict[str, Any]) -> SavingsGoal:
    return SavingsGoal(
        id=_uuid(raw["id"]),
        title=str(raw["title"]),
        target_amount=_amount(raw["target_amount"]),
        current_amount=_amount(raw["current_amount"]),
    )


def _encode_record(record: SavingsRecord) -> dict[str, Any]:
    return {
        "id": str(record.id),
        "goal_id": str(record.goal_id),
        "date": record.date.isoformat(),
        "amount": str(record.amount),
        "description": record.description,
    }


def _decode_record(raw: dict[str, Any]) -> SavingsRecord:
    return SavingsRecord(
        id=_uuid(raw["id"]),
        goal_id=_uuid(raw["goal_id"]),
        date=date.fromisoformat(raw["date"]),
        amount=_amount(raw["amount"]),
        description=str(raw.get("description", "")),
    )


def _list_codec(
    encode: Callable[[Any], dict[str, Any]],
    decode: Callable[[dict[str, Any]], Any],
) -> tuple[Callable[[Any], Any], Callable[[Any], Any]]:
    def encode_list(items):
        return [encode(item) for item in items]

    def decode_list(payload):
        if not isinstance(payload, list):
            raise TypeError(f"Expected a list, got {type(payload).__name__}")
        return [decode(item) for item in payload]

    return encode_list, decode_list


def _encode_monthly_budgets(value) -> dict[str, Any]:
    return {
        str(month): [_encode_category(category) for category in categories]
        for month, categories in sorted(value.items())
    }


def _decode_monthly_budgets(payload) -> dict[MonthKey, list[CategoryBudget]]:
    if not isinstance(payload, dict):
        raise TypeError(f"Expected a mapping, got {type(payload).__name__}")
    return {
        _month(month): [_decode_category(item) for item in categories]
        for month, categories in payload.items()
    }


def _encode_spent(value) -> dict[str, str]:
    return {str(month): str(amount) for month, amount in sorted(value.items())}


def _decode_spent(payload) -> dict[MonthKey, Decimal]:
    if not isinstance(payload, dict):
        raise TypeError(f"Expected a mapping, got {type(payload).__name__}")
    return {_month(month): _amount(amount) for month, amount in payload.items()}


CODECS: dict[str, tuple[Callable[[Any], Any], Callable[[Any], Any]]] = {
    CATEGORIES: _list_codec(_encode_category, _decode_category),
    ALLOCATIONS: _list_codec(_encode_allocation, _decode_allocation),
    MONTHLY_BUDGETS: (_encode_monthly_budgets, _decode_monthly_budgets),
    TRANSACTIONS: _list_codec(_encode_transaction, _decode_transaction),
    SAVINGS_RECORDS: _list_codec(_encode_record, _decode_record),
    SAVINGS_GOALS: _list_codec(_encode_goal, _decode_goal),
    ROLLOVER_SPENT_BY_MONTH: (_encode_spent, _decode_spent),
}


def encode_collection(name: str, collection: Any) -> str:
    """Serialize a named collection to JSON text.

    Args:
        name: Canonical collection name.
        collection: Domain collection to serialize.

    Returns:
        str: JSON document.

    Raises:
        KeyError: If ``name`` is not a canonical collection.
    """
    encode, _ = CODECS[name]
    return json.dumps(encode(collection), indent=2, sort_keys=True)


def decode_collection(name: str, payload: str) -> Any:
    """Deserialize JSON text into the named domain collection.

    Args:
        name: Canonical collection name.
        payload: JSON document produced by ``encode_collection``.

    Returns:
        Any: Decoded list or mapping.
    """
    _, decode = CODECS[name]
    return decode(json.loads(payload))


__all__ = ["CODECS", "encode_collection", "decode_collection"]
