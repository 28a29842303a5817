#!/usr/bin/env python
"""Eligibility report over the seed roster.

Evaluates every student against every company under a policy file and
prints the decisions, so a policy change can be reviewed before it is
pushed to the running service.

Usage:
    python scripts/eligibility_report.py
    python scripts/eligibility_report.py --policy policies/default-policy.yaml
    python scripts/eligibility_report.py --company C001 --json
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from app.core.config import settings
from app.policy.loader import InvalidConfigurationError, PolicyFileError
from app.services.placement import CompanyNotFoundError, PlacementService


def build_service(policy: Path, data_dir: Path) -> PlacementService:
    """Build a placement service from a policy file and seed directory."""
    report_settings = settings.model_copy(
        update={"policy_file": policy, "data_dir": data_dir}
    )
    return PlacementService.from_settings(report_settings)


def main() -> int:
    """Main entry point for the eligibility report."""
    parser = argparse.ArgumentParser(description="Placement eligibility report")
    parser.add_argument(
        "--policy",
        type=Path,
        default=settings.policy_file,
        help="Policy YAML file to evaluate",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Directory holding students.json and companies.json",
    )
    parser.add_argument(
        "--company",
        action="append",
        help="Restrict to a company id (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit results as JSON",
    )

    args = parser.parse_args()

    try:
        service = build_service(args.policy, args.data_dir)
    except (PolicyFileError, InvalidConfigurationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        companies = (
            [service.get_company(company_id) for company_id in args.company]
            if args.company
            else service.list_companies()
        )
    except CompanyNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    results = [
        service.check_eligibility(student.id, company.id)
        for company in companies
        for student in service.list_students()
    ]

    if args.json:
        print(json.dumps([asdict(result) for result in results], indent=2))
        return 0

    statistics = service.get_statistics()
    print("=" * 60)
    print("PLACEMENT ELIGIBILITY REPORT")
    print("=" * 60)
    print(f"Policy: {args.policy}")
    print(
        f"Students: {statistics.total_students} "
        f"(placed {statistics.placed_students}, {statistics.placement_percentage:.2f}%)"
    )

    for result in results:
        verdict = "ELIGIBLE" if result.is_eligible else "BLOCKED"
        print(f"\n[{verdict}] {result.student_name} -> {result.company_name}")
        for reason in result.reasons:
            print(f"  - {reason}")

    eligible = sum(1 for result in results if result.is_eligible)
    print(f"\nEligible: {eligible}/{len(results)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
