"""Placement policy evaluation.

Ordered, independently toggleable rules evaluated against a student, a
company and point-in-time snapshots of the policy configuration and the
campus placement statistics.
"""

from app.policy.engine import EligibilityEngine, evaluate_eligibility, run_pipeline
from app.policy.loader import (
    InvalidConfigurationError,
    PolicyFileError,
    decode_policy_config,
    load_policy_file,
)
from app.policy.rules import (
    Decision,
    EvaluationState,
    RuleContext,
    RuleOutcome,
    classify_offer_tier,
)
from app.policy.store import PlacementStatisticsCache, PolicyConfigStore

__all__ = [
    "EligibilityEngine",
    "evaluate_eligibility",
    "run_pipeline",
    "Decision",
    "EvaluationState",
    "RuleContext",
    "RuleOutcome",
    "classify_offer_tier",
    "PolicyConfigStore",
    "PlacementStatisticsCache",
    "InvalidConfigurationError",
    "PolicyFileError",
    "decode_policy_config",
    "load_policy_file",
]
