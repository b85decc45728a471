"""
AgentShield bootstrap hook.

On agent:bootstrap, checks that the ``agentshield`` binary is available and
adds an AGENTSHIELD.md bootstrap file instructing the agent to route every
shell command through ``agentshield run --`` for policy evaluation.

Usage:
    from agentshield_hook import HookManager, register

    hooks = HookManager()
    register(hooks)
"""

from typing import Optional

from .config import HookConfig
from .document import DocumentSource, FileDocumentSource, resolve_document
from .errors import ProbeError
from .hooks.manager import HookManager
from .hooks.types import AGENT_BOOTSTRAP, BootstrapFile, BootstrapRole, LifecycleEvent
from .logger import logger
from .probe import CommandProber, SubprocessProber


class BootstrapInjector:
    """
    Hook handler that injects the AgentShield instructions at agent bootstrap.

    Every other lifecycle kind is ignored without side effects. If the binary
    cannot be probed the user gets a warning message and nothing is injected.
    """

    def __init__(
        self,
        config: HookConfig,
        prober: Optional[CommandProber] = None,
        document_source: Optional[DocumentSource] = None,
    ):
        """
        Initialize the injector.

        Args:
            config: Hook settings (binary name, timeout, document location)
            prober: Probe used to check the binary (default: SubprocessProber)
            document_source: Where the document is read from
                (default: the file at config.document_path)
        """
        self.config = config
        self.prober = prober or SubprocessProber()
        self.document_source = document_source or FileDocumentSource(config.document_path)

    def __call__(self, event: LifecycleEvent) -> None:
        if not event.matches(AGENT_BOOTSTRAP):
            return

        try:
            version = self.prober.probe(
                self.config.binary, ["version"], self.config.probe_timeout_ms
            )
        except ProbeError:
            logger.warning(f"[agentshield] warning: {self.config.binary} binary not found in PATH")
            event.messages.append(self.config.warning_message)
            return

        content = resolve_document(self.document_source)

        event.context.append_bootstrap_file(BootstrapFile(
            filename=self.config.document_name,
            content=content,
            role=BootstrapRole.SYSTEM,
        ))

        logger.info(f"[agentshield] Bootstrap injected (v{version})")


def create_bootstrap_injector(config: Optional[HookConfig] = None, **kwargs) -> BootstrapInjector:
    """
    Factory function to create a BootstrapInjector.

    Args:
        config: Hook settings (default: HookConfig())
        **kwargs: Passed to the BootstrapInjector constructor

    Returns:
        A configured BootstrapInjector
    """
    return BootstrapInjector(config or HookConfig(), **kwargs)


def register(
    hook_manager: HookManager,
    config: Optional[HookConfig] = None,
    **kwargs
) -> BootstrapInjector:
    """
    Register a BootstrapInjector for agent:bootstrap on ``hook_manager``.

    Returns:
        The registered injector, for later unregistration
    """
    injector = create_bootstrap_injector(config, **kwargs)
    hook_manager.register(AGENT_BOOTSTRAP, injector)
    return injector
