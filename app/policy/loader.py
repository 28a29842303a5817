"""Policy configuration decoding and YAML policy file loading."""

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from app.models.policy import PolicyConfig
from app.schemas.policy import PolicyConfigSchema

logger = logging.getLogger(__name__)

# Default policy directory
POLICIES_DIR = Path(__file__).parent.parent.parent / "policies"
DEFAULT_POLICY_FILE = POLICIES_DIR / "default-policy.yaml"


class InvalidConfigurationError(Exception):
    """Raised when a policy payload cannot be decoded."""

    pass


class PolicyFileError(Exception):
    """Raised when a policy file is missing or unreadable."""

    pass


def decode_policy_config(payload: Any) -> PolicyConfig:
    """Decode a camelCase policy payload into a ``PolicyConfig``.

    Types are checked strictly (no string-to-number or string-to-bool
    coercion, ints are accepted for floats); out-of-range numbers are
    accepted as-is.

    Args:
        payload: Parsed JSON/YAML mapping

    Returns:
        Decoded configuration

    Raises:
        InvalidConfigurationError: If the payload is not a well-typed mapping
    """
    if not isinstance(payload, dict):
        raise InvalidConfigurationError(
            f"Policy configuration must be an object, got {type(payload).__name__}"
        )

    try:
        schema = PolicyConfigSchema.model_validate(payload, strict=True)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid policy configuration: {e}") from e

    return schema.to_domain()


def compute_policy_hash(content: str) -> str:
    """Compute SHA256 hash of policy file content.

    Logged with the loaded configuration so the active defaults can be
    identified later.
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def load_policy_file(path: Path | None = None) -> tuple[PolicyConfig, str]:
    """Load a policy YAML file and compute its hash.

    Args:
        path: Policy file (defaults to policies/default-policy.yaml)

    Returns:
        Tuple of (decoded configuration, SHA256 hash)

    Raises:
        PolicyFileError: If the file doesn't exist or isn't valid YAML
        InvalidConfigurationError: If the YAML doesn't decode to a policy
    """
    if path is None:
        path = DEFAULT_POLICY_FILE

    if not path.exists():
        raise PolicyFileError(f"Policy file not found: {path}")

    content = path.read_text(encoding="utf-8")
    policy_hash = compute_policy_hash(content)

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise PolicyFileError(f"Policy file is not valid YAML: {path}") from e

    config = decode_policy_config(raw if raw is not None else {})
    logger.info(f"Loaded policy configuration from {path} (sha256={policy_hash[:12]})")

    return config, policy_hash
