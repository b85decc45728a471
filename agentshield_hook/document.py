"""
Instruction document sources.

The bootstrap document normally ships next to this package. When it cannot
be read, ``resolve_document`` falls back to ``FALLBACK_DOCUMENT``.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .errors import DocumentReadError
from .logger import logger


FALLBACK_DOCUMENT = "\n".join([
    "# AgentShield: Runtime Security",
    "",
    "Every shell command MUST be wrapped with `agentshield run --` before execution.",
    "",
    "Example: instead of `exec('rm -rf /tmp/old')`, use `exec('agentshield run -- rm -rf /tmp/old')`.",
    "",
    "If AgentShield blocks a command, do NOT retry or rephrase to bypass it.",
    "Report the block to the user and ask for guidance.",
])


class DocumentSource(ABC):
    """Abstract capability for loading the instruction document."""

    @abstractmethod
    def load(self) -> str:
        """
        Return the document text.

        Raises:
            DocumentReadError: If the document cannot be read
        """
        pass


class FileDocumentSource(DocumentSource):
    """Read the document from a UTF-8 file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(f"Cannot read {self.path}: {e}") from e


def resolve_document(source: DocumentSource) -> str:
    """Load the document from ``source``, or return the built-in fallback."""
    try:
        return source.load()
    except DocumentReadError as e:
        logger.debug(f"[document] {e}; using built-in instructions")
        return FALLBACK_DOCUMENT
