"""
config_loader.py — Phase 00: Orchestration
--------------------------------------------
Loads and validates the dashboard configuration from
phase-00-orchestration/config/dashboard_config.yaml.

Raises clear, descriptive errors if required keys are missing,
so misconfiguration is caught at startup rather than mid-export.
"""

from pathlib import Path
from typing import Any

import yaml


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CONFIG_PATH = Path(__file__).parent / "config" / "dashboard_config.yaml"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_config(path: Path | None = None) -> dict[str, Any]:
    """
    Load and validate dashboard_config.yaml.

    Args:
        path: Optional override of the config location.

    Returns:
        dict: Fully validated configuration dictionary.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError:        If the file is not a mapping or required keys are absent.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Dashboard config not found at: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError(f"{config_path.name} must be a YAML mapping (key: value pairs).")

    _validate(config, config_path)
    return config


def get_value(config: dict, key_path: str, default: Any = None) -> Any:
    """Read a dot-separated key path, returning ``default`` when absent or null."""
    node: Any = config
    for part in key_path.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return default if node is None else node


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

# Keys that must be present (dot-notation for nested paths)
_REQUIRED_KEYS = [
    "dashboard.title",
    "export.output_dir",
    "logging.level",
    "data_root",
]


def _validate(config: dict, config_path: Path) -> None:
    """Validate that all required keys exist in the config."""
    missing = [key_path for key_path in _REQUIRED_KEYS if not _has_key(config, key_path)]

    if missing:
        raise ValueError(
            "Dashboard config is missing required keys:\n  - "
            + "\n  - ".join(missing)
            + f"\n\nCheck: {config_path}"
        )


def _has_key(config: dict, key_path: str) -> bool:
    """Traverse a dot-separated key path in a nested dict."""
    parts = key_path.split(".")
    node = config
    for part in parts:
        if not isinstance(node, dict) or part not in node:
            return False
        node = node[part]
    return True
