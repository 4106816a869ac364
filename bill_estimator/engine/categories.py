"""Bill category resolution from an explicit tag or the bill name."""

import logging

from bill_estimator.config import Settings, settings as default_settings
from bill_estimator.models.bill import BillCategory, RecurringBillRecord

logger = logging.getLogger(__name__)

# Categories whose amounts swing with the weather
SEASONAL_SELECTION_CATEGORIES = frozenset({BillCategory.ENERGY, BillCategory.CLIMATE_CONTROL})
SEASONAL_VARIANCE_CATEGORIES = frozenset({BillCategory.ENERGY})


def category_from_name(name: str, keywords: dict[str, list[str]]) -> BillCategory:
    """First category in the keyword table whose keyword appears in the name."""
    lowered = name.lower()
    for category_key, words in keywords.items():
        try:
            category = BillCategory(category_key)
        except ValueError:
            logger.warning("Unknown bill category %r in keyword table, skipping", category_key)
            continue
        if any(word.lower() in lowered for word in words):
            return category
    return BillCategory.OTHER


def resolve_category(bill: RecurringBillRecord, settings: Settings | None = None) -> BillCategory:
    if bill.category is not None:
        return bill.category
    cfg = settings or default_settings
    return category_from_name(bill.name, cfg.category_keywords)
