from .bootstrap import BootstrapInjector, create_bootstrap_injector, register
from .config import HookConfig, load_config
from .document import DocumentSource, FileDocumentSource, FALLBACK_DOCUMENT, resolve_document
from .errors import AgentShieldHookError, DocumentReadError, ProbeError
from .hooks import AGENT_BOOTSTRAP, AgentContext, BootstrapFile, BootstrapRole, HookManager, LifecycleEvent
from .probe import CommandProber, SubprocessProber

__version__ = "0.1.0"

__all__ = [
    'AGENT_BOOTSTRAP',
    'AgentContext',
    'AgentShieldHookError',
    'BootstrapFile',
    'BootstrapInjector',
    'BootstrapRole',
    'CommandProber',
    'DocumentReadError',
    'DocumentSource',
    'FALLBACK_DOCUMENT',
    'FileDocumentSource',
    'HookConfig',
    'HookManager',
    'LifecycleEvent',
    'ProbeError',
    'SubprocessProber',
    'create_bootstrap_injector',
    'load_config',
    'register',
    'resolve_document',
]
