"""Static category registry for income and expense transactions."""

from typing import NamedTuple


class Category(NamedTuple):
    """Display metadata for a transaction category."""

    id: str
    name: str
    color: str


INCOME = "income"
EXPENSE = "expense"

CATEGORIES: dict[str, tuple[Category, ...]] = {
    INCOME: (
        Category("salary", "Salary", "#22c55e"),
        Category("freelance", "Freelance", "#10b981"),
        Category("investment", "Investment", "#14b8a6"),
        Category("other-income", "Other", "#6ee7b7"),
    ),
    EXPENSE: (
        Category("food", "Food", "#f59e0b"),
        Category("transport", "Transport", "#3b82f6"),
        Category("shopping", "Shopping", "#ec4899"),
        Category("bills", "Bills", "#ef4444"),
        Category("entertainment", "Entertainment", "#8b5cf6"),
        Category("health", "Health", "#10b981"),
        Category("other-expense", "Other", "#6b7280"),
    ),
}

FALLBACK_CATEGORY_IDS = {INCOME: "other-income", EXPENSE: "other-expense"}


def get_categories(txn_type: str) -> tuple[Category, ...]:
    """Categories offered for a transaction type (expense list for unknown types)."""
    return CATEGORIES.get(txn_type, CATEGORIES[EXPENSE])


def default_category(txn_type: str) -> Category:
    """Category preselected in the add form."""
    return get_categories(txn_type)[0]


def fallback_category(txn_type: str) -> Category:
    """The "Other" entry that unresolved category ids fall back to."""
    fallback_id = FALLBACK_CATEGORY_IDS.get(txn_type, FALLBACK_CATEGORY_IDS[EXPENSE])
    for category in get_categories(txn_type):
        if category.id == fallback_id:
            return category
    raise LookupError(fallback_id)


def is_known_category(category_id: str, txn_type: str) -> bool:
    return any(c.id == category_id for c in CATEGORIES.get(txn_type, ()))


def resolve_category(category_id: str, txn_type: str) -> Category:
    """Look up a category, falling back to "Other" instead of failing."""
    for category in get_categories(txn_type):
        if category.id == category_id:
            return category
    return fallback_category(txn_type)


def category_color(name: str, txn_type: str = EXPENSE) -> str:
    """Chart colour for a category display name."""
    for category in get_categories(txn_type):
        if category.name == name:
            return category.color
    return fallback_category(txn_type).color
