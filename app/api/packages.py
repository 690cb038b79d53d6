"""
Package catalogue API endpoints.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List

from app.calculations.packages import (
    PackageKind,
    PackageProfile,
    get_package_profile,
    list_package_profiles,
)

router = APIRouter()


class PackageResponse(BaseModel):
    """Schema for package response."""

    kind: PackageKind
    name: str
    description: str
    revenue_multiplier: float
    expense_multiplier: float
    optional_items: List[str]
    investment_title: str
    profit_title: str


class PackageListResponse(BaseModel):
    """Response for listing packages."""

    packages: List[PackageResponse]
    total: int


def _to_response(profile: PackageProfile) -> PackageResponse:
    return PackageResponse(
        kind=profile.kind,
        name=profile.name,
        description=profile.description,
        revenue_multiplier=profile.revenue_multiplier,
        expense_multiplier=profile.expense_multiplier,
        optional_items=sorted(key.value for key in profile.optional_items),
        investment_title=profile.title("investment"),
        profit_title=profile.title("profit"),
    )


@router.get("", response_model=PackageListResponse)
async def list_packages():
    """List all launch packages."""
    profiles = list_package_profiles()
    return PackageListResponse(
        packages=[_to_response(profile) for profile in profiles],
        total=len(profiles),
    )


@router.get("/{package}", response_model=PackageResponse)
async def get_package(package: str):
    """Get a single package by identifier."""
    try:
        profile = get_package_profile(package)
    except ValueError:
        raise HTTPException(status_code=404, detail="Package not found")
    return _to_response(profile)
