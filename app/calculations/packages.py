"""
Package Profiles

Each launch package is described by one table entry: the rent multipliers
used to estimate monthly revenue and expenses, the optional investment line
items it carries, and the titles shown above each results section. Adding a
package is a table edit.
"""

import enum
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Union

from app.calculations.currency import round_money, sanitize_number
from app.calculations.results import RowKey

SECTIONS = ("investment", "profit")


class PackageKind(str, enum.Enum):
    """Launch package identifiers."""

    furnished = "furnished"
    unfurnished1 = "unfurnished1"
    unfurnished2 = "unfurnished2"


@dataclass(frozen=True)
class PackageProfile:
    """Static description of a package."""

    kind: PackageKind
    name: str
    description: str
    heading: str  # e.g. "FURNISHED PACKAGE (1BR/2BR/3BR)"
    revenue_multiplier: float
    expense_multiplier: float
    optional_items: FrozenSet[RowKey] = frozenset()

    def includes(self, key: RowKey) -> bool:
        return key in self.optional_items

    def title(self, section: str) -> str:
        if section == "investment":
            return f"{self.heading} Investment"
        if section == "profit":
            return f"{self.heading} Profits/ROI"
        raise ValueError(f"Unknown section: {section}")


@dataclass(frozen=True)
class MonthlyEstimates:
    """Monthly USD figures derived from rent."""

    gross_revenue: float
    expenses: float


# Line items only the furnished package pays for
FURNISHING_ITEMS = frozenset({RowKey.stocking, RowKey.smart_lock, RowKey.photos})

PACKAGE_PROFILES: Dict[PackageKind, PackageProfile] = {
    PackageKind.furnished: PackageProfile(
        kind=PackageKind.furnished,
        name="Furnished Package",
        description="1BR/2BR/3BR with furniture & amenities",
        heading="FURNISHED PACKAGE (1BR/2BR/3BR)",
        revenue_multiplier=1.58,
        expense_multiplier=1.16,
        optional_items=FURNISHING_ITEMS,
    ),
    PackageKind.unfurnished1: PackageProfile(
        kind=PackageKind.unfurnished1,
        name="Unfurnished Package 1",
        description="1BR/2BR properties",
        heading="UNFURNISHED PACKAGE 1 (1BR/2BR)",
        revenue_multiplier=2.3,
        expense_multiplier=2.7,
    ),
    PackageKind.unfurnished2: PackageProfile(
        kind=PackageKind.unfurnished2,
        name="Unfurnished Package 2",
        description="3BR/4BR properties",
        heading="UNFURNISHED PACKAGE 2 (3BR/4BR)",
        revenue_multiplier=2.3,
        expense_multiplier=2.7,
    ),
}


def resolve_package(package: Union[PackageKind, str]) -> PackageKind:
    """
    Normalize a package identifier.

    Raises:
        ValueError: If the identifier is not a known package
    """
    try:
        return PackageKind(package)
    except ValueError:
        raise ValueError(f"Unknown package: {package}") from None


def get_package_profile(package: Union[PackageKind, str]) -> PackageProfile:
    """Look up the profile for a package."""
    return PACKAGE_PROFILES[resolve_package(package)]


def list_package_profiles() -> List[PackageProfile]:
    """All profiles in selection order."""
    return list(PACKAGE_PROFILES.values())


def derive_monthly_estimates(
    package: Union[PackageKind, str], rent_usd: float
) -> MonthlyEstimates:
    """
    Estimate monthly gross revenue and expenses from one month's rent.

    Args:
        package: Package identifier
        rent_usd: Monthly rent in USD (non-finite values count as 0)

    Returns:
        MonthlyEstimates with both figures rounded to cents
    """
    profile = get_package_profile(package)
    rent = sanitize_number(rent_usd)

    return MonthlyEstimates(
        gross_revenue=round_money(rent * profile.revenue_multiplier),
        expenses=round_money(rent * profile.expense_multiplier),
    )


def get_section_title(package: Union[PackageKind, str], section: str) -> str:
    """Heading for the "investment" or "profit" results section."""
    return get_package_profile(package).title(section)
