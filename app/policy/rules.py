"""Placement policy rules.

Each rule inspects one (student, company) pair against a configuration
and statistics snapshot and returns a ``RuleOutcome``. Rules never mutate
anything: the pipeline folds outcomes into an ``EvaluationState`` with
``EvaluationState.apply``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum

from app.models.company import Company
from app.models.policy import OfferCategoryPolicy, OfferTier, PolicyConfig
from app.models.statistics import PlacementStatistics
from app.models.student import Student


class Decision(str, Enum):
    """Effect of a rule outcome on the evaluation state."""

    ALLOW = "allow"  # Supporting reason, eligibility unchanged
    BLOCK = "block"  # Mark ineligible and record why
    OVERRIDE = "override"  # Mark eligible and replace every prior reason
    NEUTRAL = "neutral"  # No effect


@dataclass(frozen=True)
class RuleOutcome:
    """Result of evaluating a single rule."""

    decision: Decision
    reason: str = ""
    policy_specifics: str | None = None

    @classmethod
    def allow(cls, reason: str) -> "RuleOutcome":
        return cls(Decision.ALLOW, reason)

    @classmethod
    def block(cls, reason: str) -> "RuleOutcome":
        return cls(Decision.BLOCK, reason)

    @classmethod
    def override(cls, reason: str) -> "RuleOutcome":
        return cls(Decision.OVERRIDE, reason)

    @classmethod
    def neutral(cls) -> "RuleOutcome":
        return cls(Decision.NEUTRAL)


@dataclass(frozen=True)
class EvaluationState:
    """Decision and justification trail carried through the pipeline."""

    is_eligible: bool = True
    reasons: tuple[str, ...] = ()
    policy_specifics: str | None = None

    def apply(self, outcome: RuleOutcome) -> "EvaluationState":
        """Return the state that results from applying ``outcome``."""
        state = self
        if outcome.policy_specifics is not None:
            state = replace(state, policy_specifics=outcome.policy_specifics)

        if outcome.decision == Decision.BLOCK:
            return replace(state, is_eligible=False, reasons=state.reasons + (outcome.reason,))
        if outcome.decision == Decision.ALLOW:
            return replace(state, reasons=state.reasons + (outcome.reason,))
        if outcome.decision == Decision.OVERRIDE:
            return replace(state, is_eligible=True, reasons=(outcome.reason,))
        return state


@dataclass(frozen=True)
class RuleContext:
    """Inputs shared by every rule in one evaluation."""

    student: Student
    company: Company
    config: PolicyConfig
    statistics: PlacementStatistics


def classify_offer_tier(current_salary: float, policy: OfferCategoryPolicy) -> OfferTier:
    """Derive a placed student's offer tier from their current salary.

    Examples:
        >>> policy = OfferCategoryPolicy(True, 2_000_000, 1_000_000, 30)
        >>> classify_offer_tier(2_000_000, policy)
        <OfferTier.L1: 'L1'>
        >>> classify_offer_tier(999_999, policy)
        <OfferTier.L3: 'L3'>
    """
    if current_salary >= policy.l1_threshold_amount:
        return OfferTier.L1
    if current_salary >= policy.l2_threshold_amount:
        return OfferTier.L2
    return OfferTier.L3


class PolicyRule(ABC):
    """Base class for a toggleable placement policy rule."""

    name: str = ""

    @abstractmethod
    def is_enabled(self, config: PolicyConfig) -> bool:
        """Check whether this rule is switched on in ``config``."""

    @abstractmethod
    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        """Evaluate the rule given the state accumulated so far."""


class MaximumCompaniesRule(PolicyRule):
    """Limit how many companies a placed student may apply to."""

    name = "maximum_companies"

    def is_enabled(self, config: PolicyConfig) -> bool:
        return config.maximum_companies.enabled

    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        max_n = context.config.maximum_companies.max_n
        applied = context.student.companies_applied

        if max_n == 0:
            return RuleOutcome.block(
                "Blocked by Maximum Companies Policy: Already placed and "
                "0 additional applications allowed."
            )
        if applied >= max_n:
            return RuleOutcome.block(
                f"Blocked by Maximum Companies Policy: Already applied to "
                f"{applied} companies, max allowed is {max_n}."
            )
        return RuleOutcome.neutral()


class OfferCategoryRule(PolicyRule):
    """Restrict placed students by the tier of the offer they hold.

    L1 students cannot apply anywhere else. L2 students need an offer at
    least ``required_hike_percentage`` above their current salary. L3
    students are not restricted by this rule.
    """

    name = "offer_category"

    def is_enabled(self, config: PolicyConfig) -> bool:
        return config.offer_category.enabled

    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        policy = context.config.offer_category
        current_salary = context.student.current_salary
        offered_salary = context.company.offered_salary
        tier = classify_offer_tier(current_salary, policy)
        specifics = f"Offer category: {tier.value}"

        if tier == OfferTier.L1:
            return RuleOutcome(
                Decision.BLOCK,
                "Blocked by Offer Category Policy: L1 placed students cannot "
                "apply to any other companies.",
                specifics,
            )

        if tier == OfferTier.L2:
            required_hike = current_salary * policy.required_hike_percentage / 100.0
            if offered_salary < current_salary + required_hike:
                return RuleOutcome(
                    Decision.BLOCK,
                    f"Blocked by Offer Category Policy (L2): Company salary "
                    f"({offered_salary:.2f}) does not meet required hike "
                    f"({policy.required_hike_percentage:.2f}% over current "
                    f"salary {current_salary:.2f}).",
                    specifics,
                )

        return RuleOutcome(Decision.NEUTRAL, policy_specifics=specifics)


class DreamOfferRule(PolicyRule):
    """Compare the offered salary with the student's dream offer.

    Never blocks a student who is already blocked and never un-blocks.
    """

    name = "dream_offer"

    def is_enabled(self, config: PolicyConfig) -> bool:
        return config.dream_offer.enabled

    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        offered_salary = context.company.offered_salary
        dream_offer = context.student.dream_offer

        if offered_salary < dream_offer:
            if not state.is_eligible:
                return RuleOutcome.neutral()
            return RuleOutcome.block(
                f"Blocked by Dream Offer Policy: Company salary ({offered_salary:.2f}) "
                f"is less than student's dream offer ({dream_offer:.2f})."
            )

        return RuleOutcome.allow(
            f"Allowed by Dream Offer Policy: Company salary ({offered_salary:.2f}) "
            f"meets or exceeds student's dream offer ({dream_offer:.2f})."
        )


class DreamCompanyRule(PolicyRule):
    """Let a student apply to their declared dream company.

    Overrides any earlier block and discards the reasons behind it.
    """

    name = "dream_company"

    def is_enabled(self, config: PolicyConfig) -> bool:
        return config.dream_company.enabled

    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        company_name = context.company.name
        if company_name != context.student.dream_company:
            return RuleOutcome.neutral()

        if not state.is_eligible:
            return RuleOutcome.override(
                f"Allowed by Dream Company Policy: {company_name} is student's "
                f"declared dream company."
            )
        return RuleOutcome.allow(
            f"Allowed by Dream Company Policy: {company_name} is student's "
            f"declared dream company (already eligible)."
        )


class CGPAThresholdRule(PolicyRule):
    """Require a minimum CGPA for high-salary offers.

    Blocks unconditionally, including after a dream company override.

    Args:
        report_support: Whether to record a supporting reason when the
            student meets the requirement
    """

    name = "cgpa_threshold"

    def __init__(self, report_support: bool = True) -> None:
        self.report_support = report_support

    def is_enabled(self, config: PolicyConfig) -> bool:
        return config.cgpa_threshold.enabled

    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        policy = context.config.cgpa_threshold
        offered_salary = context.company.offered_salary
        cgpa = context.student.cgpa

        if offered_salary < policy.high_salary_threshold:
            return RuleOutcome.neutral()

        if cgpa < policy.minimum_cgpa:
            return RuleOutcome.block(
                f"Blocked by CGPA Threshold Policy: CGPA ({cgpa:.2f}) is below "
                f"minimum ({policy.minimum_cgpa:.2f}) for high-paying offer "
                f"({offered_salary:.2f})."
            )
        if not self.report_support:
            return RuleOutcome.neutral()
        return RuleOutcome.allow(
            f"Allowed by CGPA Threshold Policy: CGPA ({cgpa:.2f}) meets requirement "
            f"({policy.minimum_cgpa:.2f}) for high-paying offer ({offered_salary:.2f})."
        )


class PlacementPercentageRule(PolicyRule):
    """Hold back placed students until campus placement reaches a target."""

    name = "placement_percentage"

    def is_enabled(self, config: PolicyConfig) -> bool:
        return config.placement_percentage.enabled

    def evaluate(self, context: RuleContext, state: EvaluationState) -> RuleOutcome:
        target = context.config.placement_percentage.target_percentage
        current = context.statistics.placement_percentage

        if current < target:
            return RuleOutcome.block(
                f"Blocked by Placement Percentage Policy: Current overall placement "
                f"({current:.2f}%) is below target ({target:.2f}%)."
            )
        return RuleOutcome.allow(
            f"Allowed by Placement Percentage Policy: Current overall placement "
            f"({current:.2f}%) meets or exceeds target ({target:.2f}%)."
        )
