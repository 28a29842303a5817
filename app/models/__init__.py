"""Domain models for the placement policy service."""

from app.models.company import Company
from app.models.eligibility import EligibilityResult
from app.models.policy import (
    CGPAThresholdPolicy,
    DreamCompanyPolicy,
    DreamOfferPolicy,
    MaximumCompaniesPolicy,
    OfferCategoryPolicy,
    OfferTier,
    PlacementPercentagePolicy,
    PolicyConfig,
)
from app.models.statistics import PlacementStatistics
from app.models.student import Student

__all__ = [
    "Student",
    "Company",
    "PolicyConfig",
    "MaximumCompaniesPolicy",
    "DreamOfferPolicy",
    "DreamCompanyPolicy",
    "CGPAThresholdPolicy",
    "PlacementPercentagePolicy",
    "OfferCategoryPolicy",
    "OfferTier",
    "PlacementStatistics",
    "EligibilityResult",
]
