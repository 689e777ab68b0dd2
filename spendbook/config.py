"""Configuration file management for spendbook."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from spendbook.store.document import get_default_document_path


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "spendbook" / "config.toml"


def create_default_config(config_path: Path | None = None, document_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
        document_path: Ledger document to point at. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()
    if document_path is None:
        document_path = get_default_document_path()

    default_config: dict[str, Any] = {
        "document": str(document_path),
    }
    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If config file isn't valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_document_path(config_path: Path | None = None) -> Path:
    """Resolve the ledger document path.

    Uses the config's "document" entry when the config file exists and sets
    it, otherwise the default data location.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path to the ledger document.

    Raises:
        tomllib.TOMLDecodeError: If config file isn't valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return get_default_document_path()

    document = load_config(config_path).get("document")
    if isinstance(document, str) and document:
        return Path(document).expanduser()
    return get_default_document_path()
