"""
Profit and ROI Calculations

Projects monthly net profit, the payback timeline and cumulative profit/ROI
for the first three years from the monthly estimates and the total
investment.
"""

import logging
from typing import List, Optional, Union

from app.calculations.currency import (
    NOT_AVAILABLE,
    ROI_PLACES,
    TIMELINE_PLACES,
    round_money,
    round_ratio,
    sanitize_number,
    to_source,
    to_target,
)
from app.calculations.packages import PackageKind
from app.calculations.results import (
    CalculationRow,
    CostInputs,
    ProfitInputs,
    ProfitResult,
    RowKey,
)

logger = logging.getLogger(__name__)

YEAR_ROW_KEYS = (
    (RowKey.profit_year_1, RowKey.roi_year_1),
    (RowKey.profit_year_2, RowKey.roi_year_2),
    (RowKey.profit_year_3, RowKey.roi_year_3),
)


def calculate_payback_months(
    total_investment: float, monthly_net: float
) -> Optional[float]:
    """
    Months of net profit needed to recover the investment.

    Returns None when the property never pays back (net <= 0).
    """
    if monthly_net > 0:
        return total_investment / monthly_net
    return None


def calculate_yearly_profits(
    monthly_net: float, total_investment: float
) -> List[float]:
    """
    Cumulative profit at the end of years 1, 2 and 3.

    Years 2 and 3 add 24 and 36 months of net profit on top of year 1,
    which has already subtracted the investment once. That works out to
    net * 36 - investment for year 2 and net * 48 - investment for year 3.
    """
    year1 = monthly_net * 12 - total_investment
    year2 = monthly_net * 24 + year1
    year3 = monthly_net * 36 + year1
    return [year1, year2, year3]


def calculate_roi(profit: float, total_investment: float) -> Optional[float]:
    """ROI as a raw fraction, or None without an investment to divide by."""
    if total_investment != 0:
        return profit / total_investment
    return None


def _ratio_row(
    key: RowKey, label: str, value: Optional[float], places: int
) -> CalculationRow:
    return CalculationRow(
        key=key,
        label=label,
        cad_amount=NOT_AVAILABLE if value is None else round_ratio(value, places),
        usd_amount=None,
    )


def compute_profit(
    package: Union[PackageKind, str],
    cost_inputs: CostInputs,
    profit_inputs: ProfitInputs,
    rate: float,
    total_investment: float,
) -> ProfitResult:
    """
    Calculate monthly profit, payback timeline and three-year ROI.

    The package and cost inputs do not change the arithmetic; they are
    accepted so callers pass the same context to both calculators.

    Args:
        package: Package identifier
        cost_inputs: Investment cost estimates
        profit_inputs: Monthly gross revenue and expenses in USD
        rate: USD -> CAD exchange rate, must be > 0
        total_investment: Total investment in CAD (InvestmentResult.total_cad)

    Returns:
        ProfitResult rows. Ratios that cannot be computed are "N/A".
    """
    rows: List[CalculationRow] = []
    total_cad = sanitize_number(total_investment)

    gross_usd = sanitize_number(profit_inputs.monthly_gross_usd)
    expenses_usd = sanitize_number(profit_inputs.monthly_expenses_usd)
    gross_cad = to_target(gross_usd, rate)
    expenses_cad = to_target(expenses_usd, rate)
    net_cad = gross_cad - expenses_cad
    net_usd = to_source(net_cad, rate)

    rows.append(
        CalculationRow(
            key=RowKey.monthly_gross,
            label="Est. Monthly Gross Revenue",
            cad_amount=round_money(gross_cad),
            usd_amount=round_money(gross_usd),
        )
    )
    rows.append(
        CalculationRow(
            key=RowKey.monthly_expenses,
            label="Est. Expenses",
            cad_amount=round_money(expenses_cad),
            usd_amount=round_money(expenses_usd),
        )
    )
    rows.append(
        CalculationRow(
            key=RowKey.monthly_net,
            label="Est. Monthly Net Profits",
            cad_amount=round_money(net_cad),
            usd_amount=round_money(net_usd),
        )
    )

    rows.append(
        _ratio_row(
            RowKey.payback_months,
            "Est. ROI Timeline (months)",
            calculate_payback_months(total_cad, net_cad),
            TIMELINE_PLACES,
        )
    )

    yearly_profits = calculate_yearly_profits(net_cad, total_cad)

    for year, (profit_key, _) in enumerate(YEAR_ROW_KEYS, start=1):
        profit = yearly_profits[year - 1]
        rows.append(
            CalculationRow(
                key=profit_key,
                label=f"Est. Total Profits Year {year}",
                cad_amount=round_money(profit),
                usd_amount=round_money(to_source(profit, rate)),
            )
        )

    for year, (_, roi_key) in enumerate(YEAR_ROW_KEYS, start=1):
        rows.append(
            _ratio_row(
                roi_key,
                f"Est. ROI % (Year {year})",
                calculate_roi(yearly_profits[year - 1], total_cad),
                ROI_PLACES,
            )
        )

    logger.debug(
        f"Profit for {package}: net={net_cad:.2f} CAD/month, "
        f"year3={yearly_profits[2]:.2f} CAD"
    )

    return ProfitResult(rows=rows)
