"""
Full estimate: investment breakdown followed by profit projections, both
computed with the same exchange rate.
"""

from dataclasses import dataclass
from typing import Optional, Union

from app.calculations.investment import compute_investment
from app.calculations.packages import (
    PackageKind,
    derive_monthly_estimates,
    get_package_profile,
)
from app.calculations.profit import compute_profit
from app.calculations.results import (
    CostInputs,
    InvestmentResult,
    ProfitInputs,
    ProfitResult,
)


@dataclass
class EstimateResult:
    """Both result sections with their titles and the inputs that drove them."""

    package: PackageKind
    rate: float
    investment_title: str
    profit_title: str
    investment: InvestmentResult
    profit_inputs: ProfitInputs
    profit: ProfitResult


def default_profit_inputs(
    package: Union[PackageKind, str], cost_inputs: CostInputs
) -> ProfitInputs:
    """Monthly figures estimated from rent with the package multipliers."""
    estimates = derive_monthly_estimates(package, cost_inputs.rent_usd)
    return ProfitInputs(
        monthly_gross_usd=estimates.gross_revenue,
        monthly_expenses_usd=estimates.expenses,
    )


def compute_estimate(
    package: Union[PackageKind, str],
    cost_inputs: CostInputs,
    profit_inputs: Optional[ProfitInputs],
    rate: float,
) -> EstimateResult:
    """
    Run the investment and profit calculators in sequence.

    When profit_inputs is None the monthly gross and expenses are derived
    from the rent entered in cost_inputs.
    """
    profile = get_package_profile(package)
    if profit_inputs is None:
        profit_inputs = default_profit_inputs(profile.kind, cost_inputs)

    investment = compute_investment(profile.kind, cost_inputs, rate)
    profit = compute_profit(
        profile.kind, cost_inputs, profit_inputs, rate, investment.total_cad
    )

    return EstimateResult(
        package=profile.kind,
        rate=rate,
        investment_title=profile.title("investment"),
        profit_title=profile.title("profit"),
        investment=investment,
        profit_inputs=profit_inputs,
        profit=profit,
    )
