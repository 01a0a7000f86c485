"""Tests for header total aggregation."""

import pytest
from decimal import Decimal

from ledgercalc.domain.entities import (
    HEADER_TOTAL_FIELDS,
    AdjustmentTotals,
    DecimalPrecision,
    DetailLine,
    HeaderTotals,
)
from ledgercalc.domain.header_sync import header_total_values
from ledgercalc.domain.line_calculator import recalculate_line, recalculate_lines
from ledgercalc.domain.totals import aggregate_adjustment_totals, aggregate_totals


class TestAggregateTotals:
    """Tests for aggregate_totals."""

    def test_two_lines_without_tax(self):
        """Test 1 x 100 plus 2 x 50 at rate 1 totals 200.00."""
        lines = recalculate_lines(
            [
                DetailLine(item_no=1, quantity=1, unit_price=100, tax_percentage=0),
                DetailLine(item_no=2, quantity=2, unit_price=50, tax_percentage=0),
            ],
            1,
            1,
        )
        totals = aggregate_totals(lines)

        assert totals.base.total == Decimal("200.00")
        assert totals.base.tax == Decimal("0")
        assert totals.base.total_after_tax == Decimal("200.00")

    def test_sample_lines(self, sample_lines):
        """Test base and local totals of three taxed lines."""
        lines = recalculate_lines(sample_lines, Decimal("3.75"), Decimal("3.75"))
        fields = aggregate_totals(lines).as_fields()

        assert fields["tot_amt"] == Decimal("250.00")
        assert fields["gst_amt"] == Decimal("11.00")
        assert fields["tot_amt_aft_gst"] == Decimal("261.00")
        assert fields["tot_local_amt"] == Decimal("937.50")
        assert fields["gst_local_amt"] == Decimal("41.25")
        assert fields["tot_local_amt_aft_gst"] == Decimal("978.75")
        assert fields["tot_cty_amt"] == Decimal("937.50")
        assert fields["gst_cty_amt"] == Decimal("41.25")
        assert fields["tot_cty_amt_aft_gst"] == Decimal("978.75")

    def test_totals_equal_sum_of_line_amounts(self):
        """Test header totals reconcile with rounded line amounts."""
        precision = DecimalPrecision(amt_dec=2, loc_amt_dec=2)
        raw = [
            DetailLine(item_no=n, quantity=Decimal("3"), unit_price=Decimal("0.335"), tax_percentage=Decimal("7"))
            for n in range(1, 4)
        ]
        lines = recalculate_lines(raw, Decimal("1.005"), Decimal("1.005"), precision)
        totals = aggregate_totals(lines, precision)

        assert totals.base.total == sum(line.gross_amount for line in lines)
        assert totals.base.tax == sum(line.tax_amount for line in lines)
        assert totals.local.total_after_tax == sum(line.local_total_amount for line in lines)

    def test_additive_over_partition(self, sample_lines):
        """Test totals of a list equal the sum of totals of its parts."""
        lines = recalculate_lines(sample_lines, Decimal("1.2345"), Decimal("1.2345"))
        whole = aggregate_totals(lines)
        parts = aggregate_totals(lines[:1]) + aggregate_totals(lines[1:])

        assert whole == parts

    def test_empty_list_is_all_zero(self):
        """Test aggregating no lines gives zeros."""
        totals = aggregate_totals([])

        assert totals == HeaderTotals()
        assert all(value == 0 for value in totals.as_fields().values())

    def test_empty_short_circuit_matches_aggregate(self):
        """Test the explicit empty short-circuit equals aggregating an empty list."""
        assert header_total_values([]) == aggregate_totals([]).as_fields()

    def test_country_totals_use_country_precision(self):
        """Test country totals round with the country decimal places."""
        precision = DecimalPrecision(amt_dec=2, loc_amt_dec=2, cty_amt_dec=0)
        line = recalculate_line(
            DetailLine(item_no=1, quantity=10, unit_price=5, tax_percentage=10),
            Decimal("3.75"),
            Decimal("1.25"),
            precision,
            has_country_currency=True,
        )
        totals = aggregate_totals([line], precision, has_country_currency=True)

        assert str(totals.country.total) == "63"
        assert str(totals.local.total) == "187.50"

    def test_country_totals_keep_local_precision_without_country_currency(self):
        """Test country totals mirror local totals when no country currency is kept."""
        precision = DecimalPrecision(amt_dec=2, loc_amt_dec=2, cty_amt_dec=0)
        lines = recalculate_lines(
            [DetailLine(item_no=1, quantity=10, unit_price=5, tax_percentage=10)],
            Decimal("3.75"),
            Decimal("3.75"),
            precision,
        )
        totals = aggregate_totals(lines, precision)

        assert totals.country == totals.local
        assert str(totals.country.total) == "187.50"

    def test_header_field_names(self):
        """Test totals flatten into the nine header fields in order."""
        assert list(aggregate_totals([]).as_fields()) == list(HEADER_TOTAL_FIELDS)


class TestAggregateAdjustmentTotals:
    """Tests for debit/credit netting."""

    def _lines(self, *entries):
        return recalculate_lines(
            [
                DetailLine(item_no=n, quantity=1, unit_price=price, tax_percentage=10, is_debit=is_debit)
                for n, (price, is_debit) in enumerate(entries, start=1)
            ],
            2,
            2,
        )

    def test_debit_outweighs_credit(self):
        """Test net amounts are debit minus credit and positive net is not a debit."""
        result = aggregate_adjustment_totals(self._lines((100, True), (40, False)))

        assert result.is_debit is False
        assert result.totals.base.total == Decimal("60.00")
        assert result.totals.base.tax == Decimal("6.00")
        assert result.totals.base.total_after_tax == Decimal("66.00")
        assert result.totals.local.total == Decimal("120.00")
        assert result.totals.country == result.totals.local

    def test_credit_outweighs_debit(self):
        """Test amounts are absolute and a negative net is a debit."""
        result = aggregate_adjustment_totals(self._lines((30, True), (50, False), (20, False)))

        assert result.is_debit is True
        assert result.totals.base.total == Decimal("40.00")
        assert result.totals.base.total_after_tax == Decimal("44.00")
        assert result.totals.local.tax == Decimal("8.00")

    def test_balanced(self):
        """Test balanced debits and credits net to zero."""
        result = aggregate_adjustment_totals(self._lines((25, True), (25, False)))

        assert result.is_debit is False
        assert result.totals.base.total == Decimal("0")

    def test_empty(self):
        """Test netting no lines gives zeros and no debit."""
        assert aggregate_adjustment_totals([]) == AdjustmentTotals()
        assert header_total_values([], net_debit_credit=True) == AdjustmentTotals().as_fields()

    def test_as_fields_includes_direction(self):
        """Test adjustment fields carry is_debit plus the nine totals; credit only nets to a debit."""
        fields = aggregate_adjustment_totals(self._lines((10, False))).as_fields()

        assert set(fields) == {"is_debit", *HEADER_TOTAL_FIELDS}
        assert fields["is_debit"] is True
        assert fields["tot_amt"] == Decimal("10.00")
