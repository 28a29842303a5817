"""Tests for policy decoding and the YAML policy file loader."""

from pathlib import Path

import pytest

from app.models.policy import PolicyConfig
from app.policy.loader import (
    InvalidConfigurationError,
    PolicyFileError,
    compute_policy_hash,
    decode_policy_config,
    load_policy_file,
)


class TestDecodePolicyConfig:
    """Tests for decoding camelCase payloads."""

    def test_full_payload(self) -> None:
        """Every wire key maps onto the domain configuration."""
        config = decode_policy_config(
            {
                "maximumCompanies": {"enabled": True, "maxN": 3},
                "dreamOffer": {"enabled": True},
                "dreamCompany": {"enabled": False},
                "cgpaThreshold": {
                    "enabled": True,
                    "minimumCGPA": 7.5,
                    "highSalaryThreshold": 1500000,
                },
                "placementPercentage": {"enabled": True, "targetPercentage": 60},
                "offerCategory": {
                    "enabled": True,
                    "l1ThresholdAmount": 2500000,
                    "l2ThresholdAmount": 1200000,
                    "requiredHikePercentage": 25,
                },
            }
        )

        assert config.maximum_companies.max_n == 3
        assert config.dream_offer.enabled is True
        assert config.dream_company.enabled is False
        assert config.cgpa_threshold.minimum_cgpa == 7.5
        assert config.cgpa_threshold.high_salary_threshold == 1500000
        assert config.placement_percentage.target_percentage == 60
        assert config.offer_category.l1_threshold_amount == 2500000
        assert config.offer_category.l2_threshold_amount == 1200000
        assert config.offer_category.required_hike_percentage == 25

    def test_empty_payload_disables_everything(self) -> None:
        """Omitted sub-policies decode to their zero values."""
        assert decode_policy_config({}) == PolicyConfig()

    def test_out_of_range_values_accepted(self) -> None:
        """Only types are checked, not ranges."""
        config = decode_policy_config(
            {
                "placementPercentage": {"enabled": True, "targetPercentage": -20},
                "cgpaThreshold": {"enabled": True, "minimumCGPA": 42},
            }
        )

        assert config.placement_percentage.target_percentage == -20
        assert config.cgpa_threshold.minimum_cgpa == 42

    @pytest.mark.parametrize(
        "payload",
        [
            {"maximumCompanies": {"enabled": True, "maxN": "lots"}},
            {"maximumCompanies": {"enabled": "yes", "maxN": 5}},
            {"maximumCompanies": {"enabled": True, "maxN": "5"}},
            {"dreamOffer": {"enabled": 1}},
            {"cgpaThreshold": {"enabled": True, "minimumCGPA": "7.5"}},
            {"placementPercentage": {"enabled": True, "targetPercentage": "80"}},
            {"maximumCompanies": {"enabled": True, "maxN": 5.5}},
        ],
    )
    def test_wrong_type_rejected(self, payload: dict) -> None:
        """Strings, numbers and bools are never coerced into each other."""
        with pytest.raises(InvalidConfigurationError):
            decode_policy_config(payload)

    def test_int_accepted_for_float(self) -> None:
        """Whole numbers are valid for float parameters."""
        config = decode_policy_config(
            {"offerCategory": {"enabled": True, "l1ThresholdAmount": 2000000}}
        )

        assert config.offer_category.l1_threshold_amount == 2000000

    @pytest.mark.parametrize("payload", [None, [], "policies", 5])
    def test_non_object_rejected(self, payload: object) -> None:
        """The payload must be an object."""
        with pytest.raises(InvalidConfigurationError):
            decode_policy_config(payload)


class TestLoadPolicyFile:
    """Tests for loading policy YAML files."""

    def test_default_policy_values(self) -> None:
        """Shipped defaults match the documented policy."""
        config, policy_hash = load_policy_file()

        assert len(policy_hash) == 64  # SHA256 hex
        assert config.maximum_companies.enabled is True
        assert config.maximum_companies.max_n == 5
        assert config.dream_offer.enabled is True
        assert config.dream_company.enabled is True
        assert config.cgpa_threshold.minimum_cgpa == 7.0
        assert config.cgpa_threshold.high_salary_threshold == 1200000
        assert config.placement_percentage.enabled is False
        assert config.placement_percentage.target_percentage == 80
        assert config.offer_category.l1_threshold_amount == 2000000
        assert config.offer_category.l2_threshold_amount == 1000000
        assert config.offer_category.required_hike_percentage == 30

    def test_hash_matches_content(self, tmp_path: Path) -> None:
        """The returned hash is the SHA256 of the file content."""
        content = "dreamOffer:\n  enabled: true\n"
        path = tmp_path / "policy.yaml"
        path.write_text(content, encoding="utf-8")

        _, policy_hash = load_policy_file(path)

        assert policy_hash == compute_policy_hash(content)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises PolicyFileError."""
        with pytest.raises(PolicyFileError):
            load_policy_file(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparseable YAML raises PolicyFileError."""
        path = tmp_path / "broken.yaml"
        path.write_text("maximumCompanies: [unclosed\n", encoding="utf-8")

        with pytest.raises(PolicyFileError):
            load_policy_file(path)

    def test_empty_file_disables_everything(self, tmp_path: Path) -> None:
        """An empty file is an all-disabled configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        config, _ = load_policy_file(path)

        assert config == PolicyConfig()

    def test_ill_typed_yaml(self, tmp_path: Path) -> None:
        """Well-formed YAML with wrong types raises InvalidConfigurationError."""
        path = tmp_path / "typed.yaml"
        path.write_text("offerCategory:\n  l1ThresholdAmount: high\n", encoding="utf-8")

        with pytest.raises(InvalidConfigurationError):
            load_policy_file(path)
