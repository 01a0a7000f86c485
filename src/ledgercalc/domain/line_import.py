"""CSV detail line import domain service."""

import csv
import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from ledgercalc.database.base import Database
from ledgercalc.domain.details import add_line, renumber_lines
from ledgercalc.domain.entities import DetailLine
from ledgercalc.domain.errors import DomainError
from ledgercalc.domain.tax import TaxRateService
from ledgercalc.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"quantity", "unit_price"}
TRUE_VALUES = {"1", "true", "yes", "y", "d", "dr", "debit"}
MAX_TAX_PERCENTAGE = Decimal("100")


class LineImportService:
    """Service for reading transaction detail lines from CSV files."""

    def __init__(self, db: Database):
        """Initialize line import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.tax_service = TaxRateService(db)

    def read_lines(self, csv_file_path: str, account_date: Optional[date] = None) -> dict[str, Any]:
        """Read detail lines from a CSV file.

        Recognised columns are item_no, quantity, unit_price, tax_percentage,
        tax_id, is_debit and remarks. A tax_id is resolved against the stored
        tax percentages effective on the account date; an explicit
        tax_percentage wins over it.

        Args:
            csv_file_path: Path to CSV file
            account_date: Date used to resolve tax codes (defaults to today)

        Returns:
            Dict with:
            - lines: list of DetailLine in item number order, renumbered 1..n
            - errors: list of error messages for rows that were skipped

        Raises:
            ValueError: If the file has no header or lacks required columns
            FileNotFoundError: If CSV file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        on_date = account_date or date.today()
        lines: list[DetailLine] = []
        errors = []

        with open(csv_path, "r", encoding="utf-8-sig") as f:
            sample = f.read(1024)
            f.seek(0)
            try:
                delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
            except csv.Error:
                delimiter = ","

            reader = csv.DictReader(f, delimiter=delimiter)

            if reader.fieldnames is None:
                raise ValueError("CSV file has no columns")
            columns = {name.strip() for name in reader.fieldnames if name}
            missing_columns = REQUIRED_COLUMNS - columns
            if missing_columns:
                raise ValueError(
                    f"CSV file missing required columns: {', '.join(sorted(missing_columns))}"
                )

            # Header is row 1
            for row_num, row in enumerate(reader, start=2):
                values = {
                    (key or "").strip(): (value.strip() if value else None)
                    for key, value in row.items()
                }
                try:
                    line = self._row_to_line(values, on_date)
                    lines = add_line(lines, line)
                except (ValueError, DomainError) as e:
                    errors.append(f"Row {row_num}: {e}")
                    continue

        logger.info("Read %d lines from %s with %d errors", len(lines), csv_path, len(errors))
        return {
            "lines": renumber_lines(sorted(lines, key=lambda line: line.item_no)),
            "errors": errors,
        }

    def _row_to_line(self, values: dict[str, Optional[str]], on_date: date) -> DetailLine:
        """Build a detail line from one CSV row."""
        quantity_str = values.get("quantity")
        if not quantity_str:
            raise ValueError("Missing quantity")
        unit_price_str = values.get("unit_price")
        if not unit_price_str:
            raise ValueError("Missing unit_price")

        item_no_str = values.get("item_no")
        try:
            item_no = int(item_no_str) if item_no_str else 0
        except ValueError:
            raise ValueError(f"Invalid item_no: {item_no_str}")
        if item_no < 0:
            raise ValueError(f"Invalid item_no: {item_no_str}")

        return DetailLine(
            item_no=item_no,
            quantity=parse_amount(quantity_str),
            unit_price=parse_amount(unit_price_str),
            tax_percentage=self._resolve_tax(values, on_date),
            is_debit=(values.get("is_debit") or "").lower() in TRUE_VALUES,
            remarks=values.get("remarks"),
        )

    def _resolve_tax(self, values: dict[str, Optional[str]], on_date: date) -> Decimal:
        percentage_str = values.get("tax_percentage")
        if percentage_str:
            percentage = parse_amount(percentage_str.rstrip("%"))
            if not Decimal("0") <= percentage <= MAX_TAX_PERCENTAGE:
                raise ValueError(f"Tax percentage must be between 0 and 100, got {percentage}")
            return percentage

        tax_id_str = values.get("tax_id")
        if tax_id_str:
            try:
                tax_id = int(tax_id_str)
            except ValueError:
                raise ValueError(f"Invalid tax_id: {tax_id_str}")
            return self.tax_service.get_percentage(tax_id, on_date)

        return Decimal("0")
