"""Host form abstraction.

The header sync controller writes into whatever holds the transaction being
edited: a web form, a desktop screen, or the in-memory form below. It only
needs to read values, write a batch of values and ask for re-validation of
named fields.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ledgercalc.domain.entities import HEADER_TOTAL_FIELDS, DetailLine, ZERO


class FormHandle(ABC):
    """Abstract host form interface."""

    @abstractmethod
    def get_value(self, name: str, default: Any = None) -> Any:
        """Get a single field value."""
        pass

    @abstractmethod
    def get_values(self) -> dict[str, Any]:
        """Get a snapshot of every field value."""
        pass

    @abstractmethod
    def set_values(self, values: Mapping[str, Any]) -> None:
        """Write several fields as one update."""
        pass

    @abstractmethod
    def trigger(self, names: Sequence[str]) -> None:
        """Mark fields for re-validation and re-render."""
        pass


class TransactionForm(FormHandle):
    """In-memory transaction form.

    Holds header values and the ``details`` list. Every ``set_values`` call is
    counted in ``commits`` and every ``trigger`` call recorded in ``triggered``.
    """

    def __init__(
        self,
        currency_id: Optional[int] = None,
        exh_rate=ZERO,
        cty_exh_rate=ZERO,
        account_date: Optional[date] = None,
        details: Optional[Sequence[DetailLine]] = None,
    ):
        self._values: dict[str, Any] = {
            "currency_id": currency_id,
            "exh_rate": exh_rate,
            "cty_exh_rate": cty_exh_rate,
            "account_date": account_date,
            "details": list(details or []),
        }
        self._values.update({name: ZERO for name in HEADER_TOTAL_FIELDS})
        self.commits = 0
        self.triggered: list[tuple[str, ...]] = []

    def get_value(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def get_values(self) -> dict[str, Any]:
        values = dict(self._values)
        values["details"] = list(values["details"])
        return values

    def set_values(self, values: Mapping[str, Any]) -> None:
        updates = dict(values)
        if "details" in updates:
            updates["details"] = list(updates["details"])
        self._values.update(updates)
        self.commits += 1

    def trigger(self, names: Sequence[str]) -> None:
        self.triggered.append(tuple(names))

    @property
    def details(self) -> list[DetailLine]:
        return list(self._values["details"])

    def header_totals(self) -> dict[str, Any]:
        """Return the nine header total fields."""
        return {name: self._values[name] for name in HEADER_TOTAL_FIELDS}
