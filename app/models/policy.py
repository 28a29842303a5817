"""Placement policy configuration model.

A ``PolicyConfig`` is an immutable value made of six independently
toggleable sub-policies. The zero value of every sub-policy is disabled
with zeroed parameters.
"""

from dataclasses import dataclass, field
from enum import Enum


class OfferTier(str, Enum):
    """Offer category of a placed student, derived from current salary."""

    L1 = "L1"  # At or above the L1 threshold - no further applications
    L2 = "L2"  # At or above the L2 threshold - needs a salary hike
    L3 = "L3"  # Below the L2 threshold - unrestricted by offer category


@dataclass(frozen=True)
class MaximumCompaniesPolicy:
    """Cap on applications by already-placed students (0 = none allowed)."""

    enabled: bool = False
    max_n: int = 0


@dataclass(frozen=True)
class DreamOfferPolicy:
    """Compare offered salary to the student's declared dream offer."""

    enabled: bool = False


@dataclass(frozen=True)
class DreamCompanyPolicy:
    """Let students apply to their declared dream company."""

    enabled: bool = False


@dataclass(frozen=True)
class CGPAThresholdPolicy:
    """Minimum CGPA for offers at or above the high-salary threshold."""

    enabled: bool = False
    minimum_cgpa: float = 0.0
    high_salary_threshold: float = 0.0


@dataclass(frozen=True)
class PlacementPercentagePolicy:
    """Campus placement rate required before placed students re-apply."""

    enabled: bool = False
    target_percentage: float = 0.0


@dataclass(frozen=True)
class OfferCategoryPolicy:
    """Tier thresholds and the salary hike required of L2 students."""

    enabled: bool = False
    l1_threshold_amount: float = 0.0
    l2_threshold_amount: float = 0.0
    required_hike_percentage: float = 0.0


@dataclass(frozen=True)
class PolicyConfig:
    """Complete placement policy configuration."""

    maximum_companies: MaximumCompaniesPolicy = field(default_factory=MaximumCompaniesPolicy)
    dream_offer: DreamOfferPolicy = field(default_factory=DreamOfferPolicy)
    dream_company: DreamCompanyPolicy = field(default_factory=DreamCompanyPolicy)
    cgpa_threshold: CGPAThresholdPolicy = field(default_factory=CGPAThresholdPolicy)
    placement_percentage: PlacementPercentagePolicy = field(
        default_factory=PlacementPercentagePolicy
    )
    offer_category: OfferCategoryPolicy = field(default_factory=OfferCategoryPolicy)
