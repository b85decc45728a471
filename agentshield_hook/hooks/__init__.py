"""
Lifecycle Hooks Module

Typed host lifecycle contract and a registry for dispatching events to hooks.

Lifecycle events are identified by a "<type>:<action>" kind, e.g.
"agent:bootstrap" when an agent is about to receive its initial context.

Example usage:
    from agentshield_hook.hooks import HookManager, LifecycleEvent

    hooks = HookManager()

    @hooks.on("agent:bootstrap")
    def greet(event):
        event.messages.append("Agent starting")

    hooks.trigger(LifecycleEvent(type="agent", action="bootstrap"))
"""

from .types import AGENT_BOOTSTRAP, AgentContext, BootstrapFile, BootstrapRole, LifecycleEvent
from .manager import HookManager

__all__ = [
    'AGENT_BOOTSTRAP',
    'AgentContext',
    'BootstrapFile',
    'BootstrapRole',
    'LifecycleEvent',
    'HookManager',
]
