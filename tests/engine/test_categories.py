import logging

from bill_estimator.config import Settings
from bill_estimator.engine.categories import category_from_name, resolve_category
from bill_estimator.models.bill import BillCategory, RecurringBillRecord

KEYWORDS = Settings().category_keywords


class TestCategoryFromName:
    def test_energy(self):
        assert category_from_name("PG&E Electric", KEYWORDS) == BillCategory.ENERGY
        assert category_from_name("Natural GAS", KEYWORDS) == BillCategory.ENERGY

    def test_first_match_wins(self):
        assert category_from_name("Heating & Cooling", KEYWORDS) == BillCategory.ENERGY

    def test_cooling_only(self):
        assert category_from_name("Central Cooling", KEYWORDS) == BillCategory.CLIMATE_CONTROL

    def test_telecom(self):
        assert category_from_name("T-Mobile", KEYWORDS) == BillCategory.TELECOM
        assert category_from_name("Verizon", KEYWORDS) == BillCategory.TELECOM

    def test_no_match(self):
        assert category_from_name("Netflix", KEYWORDS) == BillCategory.OTHER

    def test_unknown_table_key_warns(self, caplog):
        table = {"energi": ["electric"], "telecom": ["phone"]}
        with caplog.at_level(logging.WARNING, logger="bill_estimator.engine.categories"):
            assert category_from_name("City Electric", table) == BillCategory.OTHER
        assert "energi" in caplog.text

    def test_unknown_table_key_does_not_block_later_keys(self):
        table = {"streaming": ["netflix"], "telecom": ["phone"]}
        assert category_from_name("Home Phone", table) == BillCategory.TELECOM


class TestResolveCategory:
    def test_explicit_category_wins(self):
        bill = RecurringBillRecord(id="c", name="Electric", category=BillCategory.TELECOM)
        assert resolve_category(bill) == BillCategory.TELECOM

    def test_custom_settings(self):
        bill = RecurringBillRecord(id="c", name="Comcast")
        cfg = Settings(category_keywords={"telecom": ["comcast"]})
        assert resolve_category(bill) == BillCategory.OTHER
        assert resolve_category(bill, cfg) == BillCategory.TELECOM
