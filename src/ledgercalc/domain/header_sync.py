"""Header sync controller.

Keeps a transaction form's detail amounts and header totals consistent with
its lines and exchange rates. Each trigger (detail change, currency change,
rate edits) recalculates every line, aggregates, and writes lines plus
header fields back to the form in a single update, so the form never shows
lines priced at one rate next to totals priced at another.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ledgercalc.domain import details as detail_ops
from ledgercalc.domain.entities import (
    HEADER_TOTAL_FIELDS,
    AdjustmentTotals,
    DecimalPrecision,
    DetailLine,
    HeaderTotals,
    Totals,
    ZERO,
)
from ledgercalc.domain.errors import DomainError
from ledgercalc.domain.form import FormHandle
from ledgercalc.domain.line_calculator import recalculate_lines
from ledgercalc.domain.rounding import round_amount
from ledgercalc.domain.totals import aggregate_adjustment_totals, aggregate_totals
from ledgercalc.utils.amount_parser import coerce_amount

logger = logging.getLogger(__name__)


class RateProvider(Protocol):
    """Anything that can look up an exchange rate, e.g. ExchangeRateService."""

    def get_rate(
        self, currency_id: int, on_date: date, exh_rate_dec: int = 6, is_local: bool = False
    ) -> Decimal:
        ...


def _zero_totals(decimals: int) -> Totals:
    zero = round_amount(ZERO, decimals)
    return Totals(total=zero, tax=zero, total_after_tax=zero)


def header_total_values(
    lines: Sequence[DetailLine],
    precision: Optional[DecimalPrecision] = None,
    has_country_currency: bool = False,
    net_debit_credit: bool = False,
) -> dict:
    """Compute the header field values for a list of recalculated lines.

    An empty list yields zeros carrying each currency's decimal places.
    """
    if not lines:
        precision = precision or DecimalPrecision()
        cty_dec = precision.cty_amt_dec if has_country_currency else precision.loc_amt_dec
        zeros = HeaderTotals(
            base=_zero_totals(precision.amt_dec),
            local=_zero_totals(precision.loc_amt_dec),
            country=_zero_totals(cty_dec),
        )
        if net_debit_credit:
            return AdjustmentTotals(totals=zeros).as_fields()
        return zeros.as_fields()

    if net_debit_credit:
        return aggregate_adjustment_totals(lines, precision, has_country_currency).as_fields()
    return aggregate_totals(lines, precision, has_country_currency).as_fields()


def recalculate_and_set_header_totals(
    form: FormHandle,
    lines: Sequence[DetailLine],
    precision: Optional[DecimalPrecision] = None,
    has_country_currency: bool = False,
) -> None:
    """Aggregate lines and commit the nine header total fields to the form.

    An empty list sets every field to zero directly.
    """
    values = header_total_values(lines, precision, has_country_currency)
    form.set_values(values)
    form.trigger(HEADER_TOTAL_FIELDS)


class HeaderSyncController:
    """Recalculation entry points for one transaction form."""

    def __init__(
        self,
        form: FormHandle,
        precision: Optional[DecimalPrecision] = None,
        has_country_currency: bool = False,
        rate_service: Optional[RateProvider] = None,
        net_debit_credit: bool = False,
    ):
        """Initialize controller.

        Args:
            form: Host form holding header values and the ``details`` list
            precision: Decimal places per amount kind
            has_country_currency: Company keeps a distinct country currency
            rate_service: Exchange rate lookup used on currency change
            net_debit_credit: Net debit lines against credit lines (adjustments)
        """
        self.form = form
        self.precision = precision or DecimalPrecision()
        self.has_country_currency = has_country_currency
        self.rate_service = rate_service
        self.net_debit_credit = net_debit_credit
        self.rate_error: Optional[DomainError] = None

    def _commit(self, lines: Sequence[DetailLine], rate, cty_rate, **header) -> None:
        recalculated = recalculate_lines(
            lines, rate, cty_rate, self.precision, self.has_country_currency
        )
        values = dict(header)
        values["details"] = recalculated
        values.update(
            header_total_values(
                recalculated,
                self.precision,
                self.has_country_currency,
                self.net_debit_credit,
            )
        )
        self.form.set_values(values)

        names = list(HEADER_TOTAL_FIELDS)
        if self.net_debit_credit:
            names.append("is_debit")
        self.form.trigger(names)

        logger.debug(
            "Committed %d detail line(s) at rate %s / %s", len(recalculated), rate, cty_rate
        )

    def _current_rates(self) -> tuple[Decimal, Decimal]:
        exh_rate = coerce_amount(self.form.get_value("exh_rate"))
        if not self.has_country_currency:
            return exh_rate, exh_rate
        return exh_rate, coerce_amount(self.form.get_value("cty_exh_rate"))

    def _current_lines(self) -> list[DetailLine]:
        return list(self.form.get_value("details") or [])

    def _fetch_rates(self, currency_id: int, account_date: date) -> tuple[Decimal, Decimal]:
        """Look up both rates; raises before returning anything if either is missing."""
        exh_rate = self.rate_service.get_rate(
            currency_id, account_date, self.precision.exh_rate_dec
        )
        if not self.has_country_currency:
            return exh_rate, exh_rate
        cty_exh_rate = self.rate_service.get_rate(
            currency_id, account_date, self.precision.exh_rate_dec, is_local=True
        )
        return exh_rate, cty_exh_rate

    def on_details_changed(self, lines: Optional[Sequence[DetailLine]] = None) -> None:
        """Recalculate after a line was added, edited, deleted or reordered.

        Args:
            lines: New detail list; the form's current list when None
        """
        if lines is None:
            lines = self._current_lines()
        exh_rate, cty_exh_rate = self._current_rates()
        self._commit(lines, exh_rate, cty_exh_rate)

    def on_currency_changed(self, currency_id: int, account_date: Optional[date]) -> bool:
        """Fetch rates for a newly selected currency, then recalculate.

        Lookup failures are logged, kept in ``rate_error`` and both current
        rates are kept; a half-fetched pair is never committed.

        Returns:
            True if the rates were refreshed from the rate service
        """
        exh_rate, cty_exh_rate = self._current_rates()
        refreshed = False
        self.rate_error = None

        if self.rate_service is None:
            logger.warning("No rate service configured; keeping exchange rate %s", exh_rate)
        elif not currency_id or account_date is None:
            logger.info("Currency or account date missing; exchange rate not fetched")
        else:
            try:
                exh_rate, cty_exh_rate = self._fetch_rates(currency_id, account_date)
                refreshed = True
            except DomainError as e:
                self.rate_error = e
                logger.warning("Exchange rate lookup failed: %s", e)

        self._commit(
            self._current_lines(),
            exh_rate,
            cty_exh_rate,
            currency_id=currency_id,
            account_date=account_date,
            exh_rate=exh_rate,
            cty_exh_rate=cty_exh_rate,
        )
        return refreshed

    def on_exchange_rate_changed(self, exh_rate) -> bool:
        """Recalculate after the exchange rate field was edited.

        Without a distinct country currency the country rate follows the
        exchange rate.

        Returns:
            False when the value did not change and nothing was recalculated
        """
        new_rate = coerce_amount(exh_rate)
        if new_rate == coerce_amount(self.form.get_value("exh_rate")):
            return False

        if self.has_country_currency:
            cty_exh_rate = coerce_amount(self.form.get_value("cty_exh_rate"))
        else:
            cty_exh_rate = new_rate

        self._commit(
            self._current_lines(),
            new_rate,
            cty_exh_rate,
            exh_rate=new_rate,
            cty_exh_rate=cty_exh_rate,
        )
        return True

    def on_country_exchange_rate_changed(self, cty_exh_rate) -> bool:
        """Recalculate after the country exchange rate field was edited.

        Returns:
            False when the value did not change and nothing was recalculated
        """
        new_rate = coerce_amount(cty_exh_rate)
        if new_rate == coerce_amount(self.form.get_value("cty_exh_rate")):
            return False

        exh_rate = coerce_amount(self.form.get_value("exh_rate"))
        self._commit(self._current_lines(), exh_rate, new_rate, cty_exh_rate=new_rate)
        return True

    # Detail list edits
    def add_line(self, line: DetailLine) -> DetailLine:
        """Add a line and recalculate. Returns the stored line."""
        lines = detail_ops.add_line(self._current_lines(), line)
        self.on_details_changed(lines)
        return self._current_lines()[-1]

    def update_line(self, line: DetailLine) -> None:
        """Replace the line with the same item number and recalculate."""
        self.on_details_changed(detail_ops.replace_line(self._current_lines(), line))

    def delete_line(self, item_no: int) -> None:
        """Delete one line and recalculate."""
        self.on_details_changed(detail_ops.delete_line(self._current_lines(), item_no))

    def delete_lines(self, item_nos: Sequence[int]) -> None:
        """Delete several lines and recalculate."""
        self.on_details_changed(detail_ops.delete_lines(self._current_lines(), item_nos))

    def reorder_lines(self, item_nos: Sequence[int]) -> None:
        """Reorder lines by item number and recalculate."""
        self.on_details_changed(detail_ops.reorder_lines(self._current_lines(), item_nos))
