"""Centralized configuration.

Settings come from environment variables, optionally loaded from a .env file
in the repo root:
    .env                                - SHEET_RANGES_* settings
    google/service_account_key.json     - default Google service account key

Recognized variables:
    SHEET_RANGES_SERVICE_ACCOUNT        - path to a service account key file
    SHEET_RANGES_VALUE_RENDER_OPTION    - FORMATTED_VALUE, UNFORMATTED_VALUE or FORMULA

This module auto-loads the .env file on import. Variables already present in
the environment take precedence.
"""

import os
from pathlib import Path

# __file__ is src/sheet_ranges/config.py, so 3 levels up
REPO_ROOT = Path(__file__).parent.parent.parent
GOOGLE_DIR = REPO_ROOT / "google"

ENV_FILE = REPO_ROOT / ".env"
GOOGLE_SERVICE_ACCOUNT = GOOGLE_DIR / "service_account_key.json"

SERVICE_ACCOUNT_ENV = "SHEET_RANGES_SERVICE_ACCOUNT"
VALUE_RENDER_OPTION_ENV = "SHEET_RANGES_VALUE_RENDER_OPTION"

VALUE_RENDER_OPTIONS = ("FORMATTED_VALUE", "UNFORMATTED_VALUE", "FORMULA")
DEFAULT_VALUE_RENDER_OPTION = "FORMATTED_VALUE"


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from a file.

    Args:
        env_path: Path to .env file.

    Returns:
        Dictionary of loaded variables.
    """
    loaded = {}
    if not env_path.exists():
        return loaded

    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip()

            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]

            if key and key not in os.environ:
                os.environ[key] = value
                loaded[key] = value

    return loaded


def get_service_account_path() -> Path:
    """Get the service account key path, honoring SHEET_RANGES_SERVICE_ACCOUNT."""
    override = os.environ.get(SERVICE_ACCOUNT_ENV)
    if override:
        return Path(override).expanduser()
    return GOOGLE_SERVICE_ACCOUNT


def get_value_render_option() -> str:
    """Get the default value render option for reads.

    Raises:
        ValueError: If SHEET_RANGES_VALUE_RENDER_OPTION holds an unknown option.
    """
    option = os.environ.get(VALUE_RENDER_OPTION_ENV, DEFAULT_VALUE_RENDER_OPTION).strip().upper()
    if option not in VALUE_RENDER_OPTIONS:
        raise ValueError(
            f"Unknown value render option: {option}. Use one of: {list(VALUE_RENDER_OPTIONS)}"
        )
    return option


def _render_option_status() -> str:
    try:
        return get_value_render_option()
    except ValueError:
        return f"invalid ({os.environ.get(VALUE_RENDER_OPTION_ENV)})"


def get_config_status() -> dict:
    """Get status of the current configuration.

    Returns:
        Dictionary with configuration status.
    """
    service_account = get_service_account_path()
    return {
        "repo_root": str(REPO_ROOT),
        "env_file": ENV_FILE.exists(),
        "service_account": {
            "path": str(service_account),
            "exists": service_account.exists(),
        },
        "value_render_option": _render_option_status(),
    }


# Auto-load .env from repo root on import
_loaded = _load_env_file(ENV_FILE)
