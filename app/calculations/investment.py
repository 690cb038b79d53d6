"""
Investment Calculations

Builds the itemized investment breakdown for a package: each USD cost line
converted to CAD, followed by the fee and the Day 1 / Additional / Total
aggregates.
"""

import logging
from typing import List, Tuple, Union

from app.calculations.currency import (
    round_money,
    sanitize_number,
    to_source,
    to_target,
)
from app.calculations.packages import PackageKind, get_package_profile
from app.calculations.results import (
    CalculationRow,
    CostInputs,
    InvestmentResult,
    RowKey,
)

logger = logging.getLogger(__name__)

# Display labels, in the order the rows are emitted
LINE_ITEM_LABELS = {
    RowKey.furniture: "Furniture Cost",
    RowKey.rent: "Est. 1 Month Rent",
    RowKey.security_deposit: "Est. Security Deposit",
    RowKey.llc_ein: "Est. LLC + EIN",
    RowKey.utility_deposit: "Est. Utility Deposit",
    RowKey.stocking: "Est. Stocking Essentials",
    RowKey.smart_lock: "Est. Smart Lock & Tech Setup",
    RowKey.permits: "Est. Permits & License",
    RowKey.photos: "Est. Professional Photos",
}

FEE_LABEL = "Our Fee"
DAY_ONE_LABEL = "Total Investment Paid to STR Launch (Day 1)"
ADDITIONAL_LABEL = "Est. Additional Investment Required Over Next 60–90 Days"
TOTAL_LABEL = "Est. Total Investment Required"


def effective_security_deposit(inputs: CostInputs) -> float:
    """Security deposit used in the calculation (rent when flagged equal)."""
    if inputs.security_deposit_same_as_rent:
        return sanitize_number(inputs.rent_usd)
    return sanitize_number(inputs.security_deposit_usd)


def build_line_items(
    package: Union[PackageKind, str], inputs: CostInputs
) -> List[Tuple[RowKey, float]]:
    """
    Ordered (key, USD amount) pairs for the package's cost lines.

    Base items come first, then the furnishing extras (stocking, smart lock)
    when the package carries them, then permits, then photos last.
    """
    profile = get_package_profile(package)

    items = [
        (RowKey.furniture, sanitize_number(inputs.furniture_usd)),
        (RowKey.rent, sanitize_number(inputs.rent_usd)),
        (RowKey.security_deposit, effective_security_deposit(inputs)),
        (RowKey.llc_ein, sanitize_number(inputs.llc_ein_usd)),
        (RowKey.utility_deposit, sanitize_number(inputs.utility_deposit_usd)),
    ]

    if profile.includes(RowKey.stocking):
        items.append((RowKey.stocking, sanitize_number(inputs.stocking_usd)))
    if profile.includes(RowKey.smart_lock):
        items.append((RowKey.smart_lock, sanitize_number(inputs.smart_lock_usd)))

    items.append((RowKey.permits, sanitize_number(inputs.permits_usd)))

    if profile.includes(RowKey.photos):
        items.append((RowKey.photos, sanitize_number(inputs.photos_usd)))

    return items


def _money_row(
    key: RowKey, label: str, cad: float, usd: float
) -> CalculationRow:
    return CalculationRow(
        key=key,
        label=label,
        cad_amount=round_money(cad),
        usd_amount=round_money(usd),
    )


def compute_investment(
    package: Union[PackageKind, str],
    inputs: CostInputs,
    rate: float,
) -> InvestmentResult:
    """
    Calculate the investment breakdown.

    Args:
        package: Package identifier
        inputs: Cost estimates (USD, except the CAD fee)
        rate: USD -> CAD exchange rate, must be > 0

    Returns:
        InvestmentResult with line item rows, the fee row, the Day 1,
        Additional and Total aggregates, and the unrounded CAD total
    """
    rows: List[CalculationRow] = []

    # Additional = every line item converted to CAD, fee excluded
    additional_cad = 0.0
    for key, usd in build_line_items(package, inputs):
        cad = to_target(usd, rate)
        additional_cad += cad
        rows.append(_money_row(key, LINE_ITEM_LABELS[key], cad, usd))

    # The fee is entered in CAD; only its USD column is derived
    fee_cad = sanitize_number(inputs.fee_cad)
    fee_usd = to_source(fee_cad, rate)
    rows.append(_money_row(RowKey.fee, FEE_LABEL, fee_cad, fee_usd))

    # Day 1 is the fee alone
    day_one_cad = fee_cad
    rows.append(_money_row(RowKey.day_one, DAY_ONE_LABEL, day_one_cad, fee_usd))

    rows.append(
        _money_row(
            RowKey.additional,
            ADDITIONAL_LABEL,
            additional_cad,
            to_source(additional_cad, rate),
        )
    )

    total_cad = day_one_cad + additional_cad
    rows.append(
        _money_row(RowKey.total, TOTAL_LABEL, total_cad, to_source(total_cad, rate))
    )

    logger.debug(
        f"Investment for {package}: day1={day_one_cad:.2f} "
        f"additional={additional_cad:.2f} total={total_cad:.2f} CAD"
    )

    return InvestmentResult(rows=rows, total_cad=total_cad)
