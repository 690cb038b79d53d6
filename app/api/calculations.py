"""
Launch estimate calculation API endpoints.

These endpoints accept inputs and return calculated result rows.
Used by the estimator wizard for real-time updates.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from typing import List, Optional, Tuple, Union

from app.calculations.estimate import compute_estimate
from app.calculations.investment import compute_investment
from app.calculations.packages import (
    PackageKind,
    derive_monthly_estimates,
    get_section_title,
)
from app.calculations.profit import compute_profit
from app.calculations.results import CalculationRow, CostInputs, ProfitInputs
from app.services.exchange_rate import (
    ExchangeRateService,
    get_exchange_rate_service,
)

router = APIRouter()


class CostInputsModel(BaseModel):
    """Investment cost estimates (USD except the CAD fee)."""

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

    def to_inputs(self) -> CostInputs:
        return CostInputs(**self.model_dump())


class ProfitInputsModel(BaseModel):
    """Monthly estimates in USD."""

    monthly_gross_usd: float = 0.0
    monthly_expenses_usd: float = 0.0

    def to_inputs(self) -> ProfitInputs:
        return ProfitInputs(**self.model_dump())


class RowResponse(BaseModel):
    """A single result row."""

    key: str
    label: str
    cad_amount: Union[float, str]
    usd_amount: Optional[float] = None


class EstimatesInput(BaseModel):
    """Input for rent-based monthly estimates."""

    package: PackageKind
    rent_usd: float = 0.0


class EstimatesResponse(BaseModel):
    """Monthly gross revenue and expenses derived from rent."""

    package: PackageKind
    monthly_gross_usd: float
    monthly_expenses_usd: float


class InvestmentInput(BaseModel):
    """Input for the investment breakdown."""

    package: PackageKind
    inputs: CostInputsModel = Field(default_factory=CostInputsModel)
    # Omit to use the current exchange rate
    rate: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


class InvestmentResponse(BaseModel):
    """Investment rows and total."""

    package: PackageKind
    title: str
    rate: float
    rate_source: str
    rows: List[RowResponse]
    total_investment_cad: float


class ProfitInput(BaseModel):
    """Input for profit and ROI projections."""

    package: PackageKind
    inputs: CostInputsModel = Field(default_factory=CostInputsModel)
    profit: ProfitInputsModel = Field(default_factory=ProfitInputsModel)
    total_investment_cad: float
    rate: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


class ProfitResponse(BaseModel):
    """Profit and ROI rows."""

    package: PackageKind
    title: str
    rate: float
    rate_source: str
    rows: List[RowResponse]


class SummaryInput(BaseModel):
    """Input for the full estimate. Profit figures default to rent-based ones."""

    package: PackageKind
    inputs: CostInputsModel = Field(default_factory=CostInputsModel)
    profit: Optional[ProfitInputsModel] = None
    rate: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)


class SummaryResponse(BaseModel):
    """Both result sections."""

    package: PackageKind
    rate: float
    rate_source: str
    investment_title: str
    profit_title: str
    profit_inputs: ProfitInputsModel
    investment_rows: List[RowResponse]
    total_investment_cad: float
    profit_rows: List[RowResponse]


def _rows(rows: List[CalculationRow]) -> List[RowResponse]:
    return [RowResponse(**row.to_dict()) for row in rows]


async def _resolve_rate(
    rate: Optional[float], service: ExchangeRateService
) -> Tuple[float, str]:
    """Use the caller's rate if given, otherwise fetch one."""
    if rate is not None:
        return rate, "supplied"

    info = await service.get_exchange_rate()
    return info.usd_to_cad, "live" if info.is_live else "fixed"


@router.post("/estimates", response_model=EstimatesResponse)
async def calculate_estimates(inputs: EstimatesInput):
    """Estimate monthly revenue and expenses from rent."""

    estimates = derive_monthly_estimates(inputs.package, inputs.rent_usd)

    return EstimatesResponse(
        package=inputs.package,
        monthly_gross_usd=estimates.gross_revenue,
        monthly_expenses_usd=estimates.expenses,
    )


@router.post("/investment", response_model=InvestmentResponse)
async def calculate_investment(
    inputs: InvestmentInput,
    service: ExchangeRateService = Depends(get_exchange_rate_service),
):
    """Calculate the itemized investment breakdown."""

    rate, rate_source = await _resolve_rate(inputs.rate, service)
    result = compute_investment(inputs.package, inputs.inputs.to_inputs(), rate)

    return InvestmentResponse(
        package=inputs.package,
        title=get_section_title(inputs.package, "investment"),
        rate=rate,
        rate_source=rate_source,
        rows=_rows(result.rows),
        total_investment_cad=result.total_cad,
    )


@router.post("/profit", response_model=ProfitResponse)
async def calculate_profit(
    inputs: ProfitInput,
    service: ExchangeRateService = Depends(get_exchange_rate_service),
):
    """Calculate monthly profit, payback timeline and three-year ROI."""

    rate, rate_source = await _resolve_rate(inputs.rate, service)
    result = compute_profit(
        inputs.package,
        inputs.inputs.to_inputs(),
        inputs.profit.to_inputs(),
        rate,
        inputs.total_investment_cad,
    )

    return ProfitResponse(
        package=inputs.package,
        title=get_section_title(inputs.package, "profit"),
        rate=rate,
        rate_source=rate_source,
        rows=_rows(result.rows),
    )


@router.post("/summary", response_model=SummaryResponse)
async def calculate_summary(
    inputs: SummaryInput,
    service: ExchangeRateService = Depends(get_exchange_rate_service),
):
    """Calculate the investment breakdown and profit projections together."""

    rate, rate_source = await _resolve_rate(inputs.rate, service)
    profit_inputs = inputs.profit.to_inputs() if inputs.profit else None

    estimate = compute_estimate(
        inputs.package, inputs.inputs.to_inputs(), profit_inputs, rate
    )

    return SummaryResponse(
        package=estimate.package,
        rate=rate,
        rate_source=rate_source,
        investment_title=estimate.investment_title,
        profit_title=estimate.profit_title,
        profit_inputs=ProfitInputsModel(
            monthly_gross_usd=estimate.profit_inputs.monthly_gross_usd,
            monthly_expenses_usd=estimate.profit_inputs.monthly_expenses_usd,
        ),
        investment_rows=_rows(estimate.investment.rows),
        total_investment_cad=estimate.investment.total_cad,
        profit_rows=_rows(estimate.profit.rows),
    )
