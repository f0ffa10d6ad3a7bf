"""Domain services package."""

from .budgets import (
    allocated_by_category,
    allocations_for_month,
    budgets_for_month,
    copy_forward,
    effective_allocation,
    find_category,
    merge_allocation,
    most_recent_configured_month,
    spent_by_category,
)
from .months import (
    iter_months,
    month_key,
    next_month,
    previous_month,
    same_month,
)
from .rollover import (
    allocated_total_for_month,
    infer_epoch,
    leftover_for_month,
    rollover_leftover,
    state_rollover_leftover,
)
from .savings import (
    apply_contribution,
    contributions_for_goal,
    find_goal,
    goal_progress,
    reverse_contribution,
)
from .transactions import (
    category_name,
    daily_cumulative_spending,
    is_valid_category,
    spending_on_day,
    total_spent,
    transactions_for_month,
    valid_categories_for_month,
)
from .validation import (
    parse_amount,
    parse_non_negative_amount,
    parse_positive_amount,
    require_text,
)

__all__ = [
    "allocated_by_category",
    "allocations_for_month",
    "budgets_for_month",
    "copy_forward",
    "effective_allocation",
    "find_category",
    "merge_allocation",
    "most_recent_configured_month",
    "spent_by_category",
    "iter_months",
    "month_key",
    "next_month",
    "previous_month",
    "same_month",
    "allocated_total_for_month",
    "infer_epoch",
    "leftover_for_month",
    "rollover_leftover",
    "state_rollover_leftover",
    "apply_contribution",
    "contributions_for_goal",
    "find_goal",
    "goal_progress",
    "reverse_contribution",
    "category_name",
    "daily_cumulative_spending",
    "is_valid_category",
    "spending_on_day",
    "total_spent",
    "transactions_for_month",
    "valid_categories_for_month",
    "parse_amount",
    "parse_non_negative_amount",
    "parse_positive_amount",
    "require_text",
]
