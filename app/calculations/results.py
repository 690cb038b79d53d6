"""
Calculation input and result structures.

Rows carry a stable ``key`` for programmatic lookup alongside the display
label. Labels keep the marker substrings ("Day 1", "Total") that existing
front ends match on.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

Amount = Union[float, str]


class RowKey(str, enum.Enum):
    """Stable identifier for every row the calculators can emit."""

    # Investment line items
    furniture = "furniture"
    rent = "rent"
    security_deposit = "security_deposit"
    llc_ein = "llc_ein"
    utility_deposit = "utility_deposit"
    stocking = "stocking"
    smart_lock = "smart_lock"
    permits = "permits"
    photos = "photos"

    # Investment aggregates
    fee = "fee"
    day_one = "day_one"
    additional = "additional"
    total = "total"

    # Profit rows
    monthly_gross = "monthly_gross"
    monthly_expenses = "monthly_expenses"
    monthly_net = "monthly_net"
    payback_months = "payback_months"
    profit_year_1 = "profit_year_1"
    profit_year_2 = "profit_year_2"
    profit_year_3 = "profit_year_3"
    roi_year_1 = "roi_year_1"
    roi_year_2 = "roi_year_2"
    roi_year_3 = "roi_year_3"


@dataclass
class CostInputs:
    """Investment cost estimates. Everything is USD except ``fee_cad``."""

    furniture_usd: float = 0.0
    rent_usd: float = 0.0
    security_deposit_same_as_rent: bool = True
    security_deposit_usd: float = 0.0
    llc_ein_usd: float = 0.0
    utility_deposit_usd: float = 0.0
    stocking_usd: float = 0.0
    smart_lock_usd: float = 0.0
    permits_usd: float = 0.0
    photos_usd: float = 0.0
    fee_cad: float = 0.0


@dataclass
class ProfitInputs:
    """Monthly revenue and expense estimates in USD."""

    monthly_gross_usd: float = 0.0
    monthly_expenses_usd: float = 0.0


@dataclass(frozen=True)
class CalculationRow:
    """
    One labeled output line.

    ``cad_amount`` is a rounded float or "N/A". ``usd_amount`` is None for
    ratios and month counts, which have no currency.
    """

    key: RowKey
    label: str
    cad_amount: Amount
    usd_amount: Optional[float]

    def to_dict(self) -> dict:
        return {
            "key": self.key.value,
            "label": self.label,
            "cad_amount": self.cad_amount,
            "usd_amount": self.usd_amount,
        }


@dataclass
class InvestmentResult:
    """Itemized investment rows and the unrounded CAD total."""

    rows: List[CalculationRow] = field(default_factory=list)
    total_cad: float = 0.0

    def row(self, key: RowKey) -> CalculationRow:
        return _find_row(self.rows, key)


@dataclass
class ProfitResult:
    """Monthly, payback and three-year profit/ROI rows."""

    rows: List[CalculationRow] = field(default_factory=list)

    def row(self, key: RowKey) -> CalculationRow:
        return _find_row(self.rows, key)


def _find_row(rows: List[CalculationRow], key: RowKey) -> CalculationRow:
    for row in rows:
        if row.key == key:
            return row
    raise KeyError(key.value)
