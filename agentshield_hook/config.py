"""
Configuration for the AgentShield bootstrap hook.

``HookConfig`` is immutable and passed to the hook at construction time.
``load_config`` builds one from the process environment and an optional
``.env`` file, for deployments that install the binary differently.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv, find_dotenv


# Directory this package is installed in; the bundled document lives here
PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_BINARY = "agentshield"
DEFAULT_PROBE_TIMEOUT_MS = 5000
DEFAULT_INSTALL_HINT = "brew install gzhole/tap/agentshield"
DOCUMENT_NAME = "AGENTSHIELD.md"


@dataclass(frozen=True)
class HookConfig:
    """
    Settings for a BootstrapInjector.

    Attributes:
        install_dir: Directory holding the bundled document (default: this package)
        binary: Name of the policy-enforcement executable on PATH
        probe_timeout_ms: Upper bound for ``<binary> version``
        install_hint: Installation guidance shown when the binary is missing
        document_name: File name of the bundled document, also used as the
            injected bootstrap file name
    """
    install_dir: Path = field(default=PACKAGE_DIR)
    binary: str = DEFAULT_BINARY
    probe_timeout_ms: int = DEFAULT_PROBE_TIMEOUT_MS
    install_hint: str = DEFAULT_INSTALL_HINT
    document_name: str = DOCUMENT_NAME

    @property
    def document_path(self) -> Path:
        return Path(self.install_dir) / self.document_name

    @property
    def warning_message(self) -> str:
        """User-facing warning pushed when the binary is unavailable."""
        return f"⚠️ AgentShield hook enabled but binary not found. Install: {self.install_hint}"


def load_env():
    _ = load_dotenv(find_dotenv())


def load_config(install_dir: Optional[Union[str, Path]] = None) -> HookConfig:
    """
    Build a HookConfig from environment variables.

    Reads (after loading a .env file, if one is found):
    - AGENTSHIELD_BINARY
    - AGENTSHIELD_INSTALL_HINT
    - AGENTSHIELD_PROBE_TIMEOUT_MS

    Args:
        install_dir: Override for the document directory

    Returns:
        The resulting HookConfig

    Raises:
        ValueError: If AGENTSHIELD_PROBE_TIMEOUT_MS is not a positive integer
    """
    load_env()

    raw_timeout = os.getenv("AGENTSHIELD_PROBE_TIMEOUT_MS")
    timeout_ms = DEFAULT_PROBE_TIMEOUT_MS
    if raw_timeout:
        try:
            timeout_ms = int(raw_timeout)
        except ValueError:
            raise ValueError(f"AGENTSHIELD_PROBE_TIMEOUT_MS must be an integer, got {raw_timeout!r}")
        if timeout_ms <= 0:
            raise ValueError(f"AGENTSHIELD_PROBE_TIMEOUT_MS must be positive, got {timeout_ms}")

    return HookConfig(
        install_dir=Path(install_dir) if install_dir else PACKAGE_DIR,
        binary=os.getenv("AGENTSHIELD_BINARY") or DEFAULT_BINARY,
        probe_timeout_ms=timeout_ms,
        install_hint=os.getenv("AGENTSHIELD_INSTALL_HINT") or DEFAULT_INSTALL_HINT,
    )
