"""Deterministic placement eligibility engine.

Evaluates a (student, company) pair against a policy configuration
snapshot and a placement statistics snapshot. All decisions are:
- Deterministic (same input = same output)
- Explainable (ordered list of reasons)
- Side-effect free (no I/O, no shared mutable state)

Rule order is significant: DreamCompany can reverse an earlier block and
CGPAThreshold can block again after that reversal.
"""

from collections.abc import Sequence

from app.models.company import Company
from app.models.eligibility import EligibilityResult
from app.models.policy import PolicyConfig
from app.models.statistics import PlacementStatistics
from app.models.student import Student
from app.policy.rules import (
    CGPAThresholdRule,
    DreamCompanyRule,
    DreamOfferRule,
    EvaluationState,
    MaximumCompaniesRule,
    OfferCategoryRule,
    PlacementPercentageRule,
    PolicyRule,
    RuleContext,
    RuleOutcome,
)

# Fixed evaluation order for placed students
PLACED_STUDENT_RULES: tuple[PolicyRule, ...] = (
    MaximumCompaniesRule(),
    OfferCategoryRule(),
    DreamOfferRule(),
    DreamCompanyRule(),
    CGPAThresholdRule(),
    PlacementPercentageRule(),
)

# Unplaced students are only gated on CGPA for high-salary offers
UNPLACED_STUDENT_RULES: tuple[PolicyRule, ...] = (
    CGPAThresholdRule(report_support=False),
)

UNPLACED_REASON = "Student is unplaced. No active policies currently block this application."
NO_POLICY_REASON = (
    "No active policies specifically allow or block this application; "
    "student meets general eligibility."
)
UNSPECIFIED_BLOCK_REASON = "Blocked by an unspecified policy configuration."


def run_pipeline(
    rules: Sequence[PolicyRule],
    context: RuleContext,
    state: EvaluationState | None = None,
) -> EvaluationState:
    """Fold the enabled rules, in order, into an evaluation state.

    Disabled rules are skipped entirely.
    """
    if state is None:
        state = EvaluationState()

    for rule in rules:
        if not rule.is_enabled(context.config):
            continue
        state = state.apply(rule.evaluate(context, state))

    return state


class EligibilityEngine:
    """Placement eligibility engine.

    Holds only the rule pipelines, so one instance can serve any number of
    concurrent evaluations.
    """

    def __init__(
        self,
        placed_rules: Sequence[PolicyRule] = PLACED_STUDENT_RULES,
        unplaced_rules: Sequence[PolicyRule] = UNPLACED_STUDENT_RULES,
    ) -> None:
        self.placed_rules = tuple(placed_rules)
        self.unplaced_rules = tuple(unplaced_rules)

    def evaluate(
        self,
        student: Student,
        company: Company,
        config: PolicyConfig,
        statistics: PlacementStatistics,
    ) -> EligibilityResult:
        """Decide whether ``student`` may apply to ``company``.

        Args:
            student: Student record
            company: Company record
            config: Policy configuration snapshot
            statistics: Placement statistics snapshot

        Returns:
            EligibilityResult with decision and ordered reasons
        """
        context = RuleContext(
            student=student,
            company=company,
            config=config,
            statistics=statistics,
        )

        if student.is_placed:
            state = run_pipeline(self.placed_rules, context)
        else:
            state = run_pipeline(self.unplaced_rules, context)
            if state.is_eligible:
                state = state.apply(RuleOutcome.allow(UNPLACED_REASON))

        if not state.reasons:
            fallback = NO_POLICY_REASON if state.is_eligible else UNSPECIFIED_BLOCK_REASON
            state = state.apply(RuleOutcome.allow(fallback))

        return EligibilityResult(
            student_id=student.id,
            student_name=student.name,
            company_id=company.id,
            company_name=company.name,
            is_eligible=state.is_eligible,
            reasons=list(state.reasons),
            policy_specifics=state.policy_specifics,
        )


def evaluate_eligibility(
    student: Student,
    company: Company,
    config: PolicyConfig,
    statistics: PlacementStatistics,
) -> EligibilityResult:
    """Convenience function to evaluate with the default rule pipelines."""
    return EligibilityEngine().evaluate(student, company, config, statistics)
