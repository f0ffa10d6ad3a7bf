"""Tests for ManageSavingsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from tally_budget.application.use_cases.manage_savings import (
    ManageSavingsUseCase,
)
from tally_budget.application.use_cases.transfer_funds import (
    TransferFundsUseCase,
)
from tally_budget.domain.models import MonthKey

FEB = MonthKey(2025, 2)


@pytest.fixture
def transfers(session) -> TransferFundsUseCase:
    return TransferFundsUseCase(
        session,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        today=lambda: date(2025, 2, 10),
    )


@pytest.fixture
def savings(session, transfers) -> ManageSavingsUseCase:
    return ManageSavingsUseCase(
        session, transfers=transfers, logger=MagicMock()
    )


def test_add_goal_requires_unique_title_and_positive_target(savings) -> None:
    created = savings.add_goal("Trip", "500")
    duplicate = savings.add_goal(" trip ", "10")
    zero = savings.add_goal("Car", "0")
    untitled = savings.add_goal("", "10")

    assert created.ok
    assert created.value.target_amount == Decimal("500.00")
    assert created.value.current_amount == Decimal("0.00")
    assert duplicate.message == "A goal named 'trip' already exists."
    assert zero.message == "Please enter a positive amount."
    assert untitled.message == "Please enter a goal title."
    assert [goal.title for goal in savings.goals()] == ["Trip"]


def test_edit_goal_keeps_target_above_saved_amount(
    savings, transfers
) -> None:
    """The target may not drop below what has already been saved."""
    goal = savings.add_goal("Trip", "80").value
    transfers.to_goal("60", goal.id, FEB)

    too_low = savings.edit_goal(goal.id, target_amount="59.99")
    renamed = savings.edit_goal(goal.id, title="Holiday", target_amount="60")

    assert not too_low.ok
    assert "below the saved 60.00" in too_low.message
    assert renamed.ok
    assert renamed.value.title == "Holiday"
    assert savings.progress(goal.id) == Decimal("1")


def test_remove_goal_requires_no_contributions(savings, transfers) -> None:
    """Goals with history must have their records deleted first."""
    goal = savings.add_goal("Trip", "80").value
    record = transfers.to_goal("20", goal.id, FEB).value

    blocked = savings.remove_goal(goal.id)
    assert not blocked.ok
    assert blocked.message == "Delete the contributions to 'Trip' first."

    assert savings.remove_record(record.id).ok
    assert savings.contributions(goal.id) == []
    assert savings.remove_goal(goal.id).ok
    assert savings.goals() == []
    assert savings.progress(goal.id) is None


def test_contributions_are_listed_oldest_first(savings, transfers) -> None:
    goal = savings.add_goal("Trip", "80").value
    later = transfers.to_goal(
        "5", goal.id, FEB, on_date=date(2025, 2, 20)
    ).value
    earlier = transfers.to_goal(
        "5", goal.id, FEB, on_date=date(2025, 2, 1)
    ).value

    assert savings.contributions(goal.id) == [earlier, later]
    assert savings.progress(goal.id) == Decimal("0.125")
