from decimal import Decimal

import pytest

from src.engine.aggregator import aggregate, analyze_ledger
from src.engine.errors import NoDataFound
from src.engine.ledger import parse_ledger


class TestAggregate:
    def test_single_row(self, single_row_ledger):
        rows = parse_ledger(single_row_ledger)
        summary = aggregate(rows)
        assert summary.total_premium_outlay == Decimal("10000.00")
        assert summary.total_policy_charges == Decimal("870.00")
        assert summary.total_credits == Decimal("450.00")
        assert summary.final_accumulated_value == Decimal("9580.00")
        assert summary.final_death_benefit == Decimal("100000.00")
        assert summary.sustainable_year is None
        assert summary.row_count == 1

    def test_three_rows(self, three_row_ledger):
        summary = aggregate(parse_ledger(three_row_ledger))
        assert summary.total_premium_outlay == Decimal("20000.00")
        assert summary.total_policy_charges == Decimal("7810.00")
        assert summary.total_credits == Decimal("2500.00")
        assert summary.final_accumulated_value == Decimal("14690.00")
        assert summary.final_death_benefit == Decimal("500000.00")

    def test_three_row_sustainable_year(self, three_row_ledger):
        """Year 1 (1,000 + 800 < 2,770) fails; year 2 (15,760 + 1,300 >= 2,370) holds."""
        summary = aggregate(parse_ledger(three_row_ledger))
        assert summary.sustainable_year == 2

    def test_empty(self):
        summary = aggregate([])
        assert summary.total_premium_outlay == 0
        assert summary.total_policy_charges == 0
        assert summary.total_credits == 0
        assert summary.final_accumulated_value == 0
        assert summary.final_death_benefit == 0
        assert summary.sustainable_year is None
        assert summary.row_count == 0


class TestAnalyzeLedger:
    def test_rows_and_summary(self, three_row_ledger):
        analysis = analyze_ledger(three_row_ledger)
        assert len(analysis.rows) == 3
        assert analysis.summary.row_count == 3

    def test_no_data_propagates(self):
        with pytest.raises(NoDataFound):
            analyze_ledger("nothing to see")
