"""
Availability probes for external executables.

A probe runs a short subcommand (e.g. ``agentshield version``) with a hard
time bound and returns its trimmed standard output.
"""

import subprocess
from abc import ABC, abstractmethod
from typing import List

from .errors import ProbeError
from .logger import logger


class CommandProber(ABC):
    """Abstract capability for probing an external executable."""

    @abstractmethod
    def probe(self, name: str, args: List[str], timeout_ms: int) -> str:
        """
        Run ``name`` with ``args`` and return its stdout, stripped.

        Raises:
            ProbeError: If the executable is missing, exits non-zero, or
                does not finish within ``timeout_ms``
        """
        pass


class SubprocessProber(CommandProber):
    """Probe by spawning the executable from the search path."""

    def probe(self, name: str, args: List[str], timeout_ms: int) -> str:
        cmd = [name] + list(args)
        try:
            # stderr is captured and dropped; undecodable bytes are replaced
            result = subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout_ms / 1000,
                check=True,
            )
        except FileNotFoundError as e:
            raise ProbeError(f"{name} not found in PATH", reason="not_found") from e
        except subprocess.CalledProcessError as e:
            raise ProbeError(f"{name} exited with code {e.returncode}", reason="exit_status") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeError(f"{name} timed out after {timeout_ms}ms", reason="timeout") from e
        except OSError as e:
            raise ProbeError(f"{name} could not be started: {e}", reason="os_error") from e

        logger.debug(f"[probe] {' '.join(cmd)} -> {result.stdout.strip()!r}")
        return result.stdout.strip()
