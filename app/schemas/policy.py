"""Pydantic schemas for placement policy configuration.

The JSON/YAML wire format uses camelCase keys (``maximumCompanies.maxN``,
``cgpaThreshold.minimumCGPA`` ...). Omitted sub-policies and parameters
decode to disabled/zero. Numeric ranges are not validated.
"""

from dataclasses import asdict

from pydantic import Field

from app.models.policy import (
    CGPAThresholdPolicy,
    DreamCompanyPolicy,
    DreamOfferPolicy,
    MaximumCompaniesPolicy,
    OfferCategoryPolicy,
    PlacementPercentagePolicy,
    PolicyConfig,
)
from app.schemas.base import CamelModel


class MaximumCompaniesSchema(CamelModel):
    """Maximum companies sub-policy."""

    enabled: bool = False
    max_n: int = Field(default=0, description="0 = no applications once placed")


class DreamOfferSchema(CamelModel):
    """Dream offer sub-policy."""

    enabled: bool = False


class DreamCompanySchema(CamelModel):
    """Dream company sub-policy."""

    enabled: bool = False


class CGPAThresholdSchema(CamelModel):
    """CGPA threshold sub-policy."""

    enabled: bool = False
    minimum_cgpa: float = Field(default=0.0, alias="minimumCGPA", description="0.0-10.0")
    high_salary_threshold: float = 0.0


class PlacementPercentageSchema(CamelModel):
    """Placement percentage sub-policy."""

    enabled: bool = False
    target_percentage: float = Field(default=0.0, description="0-100%")


class OfferCategorySchema(CamelModel):
    """Offer category sub-policy."""

    enabled: bool = False
    l1_threshold_amount: float = Field(default=0.0, description="Highest tier")
    l2_threshold_amount: float = Field(default=0.0, description="Middle tier")
    required_hike_percentage: float = Field(default=0.0, description="Hike required of L2")


class PolicyConfigSchema(CamelModel):
    """Complete placement policy configuration."""

    maximum_companies: MaximumCompaniesSchema = Field(default_factory=MaximumCompaniesSchema)
    dream_offer: DreamOfferSchema = Field(default_factory=DreamOfferSchema)
    dream_company: DreamCompanySchema = Field(default_factory=DreamCompanySchema)
    cgpa_threshold: CGPAThresholdSchema = Field(default_factory=CGPAThresholdSchema)
    placement_percentage: PlacementPercentageSchema = Field(
        default_factory=PlacementPercentageSchema
    )
    offer_category: OfferCategorySchema = Field(default_factory=OfferCategorySchema)

    def to_domain(self) -> PolicyConfig:
        """Convert to the immutable domain configuration."""
        return PolicyConfig(
            maximum_companies=MaximumCompaniesPolicy(**self.maximum_companies.model_dump()),
            dream_offer=DreamOfferPolicy(**self.dream_offer.model_dump()),
            dream_company=DreamCompanyPolicy(**self.dream_company.model_dump()),
            cgpa_threshold=CGPAThresholdPolicy(**self.cgpa_threshold.model_dump()),
            placement_percentage=PlacementPercentagePolicy(
                **self.placement_percentage.model_dump()
            ),
            offer_category=OfferCategoryPolicy(**self.offer_category.model_dump()),
        )

    @classmethod
    def from_domain(cls, config: PolicyConfig) -> "PolicyConfigSchema":
        """Build the wire representation of a domain configuration."""
        return cls.model_validate(asdict(config))
