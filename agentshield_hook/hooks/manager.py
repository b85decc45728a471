"""
Hook Manager for host lifecycle events.

The HookManager registers hook handlers against a lifecycle kind
("<type>:<action>") and dispatches events to them in registration order.
"""

from typing import Callable, Optional, List, Dict
from .types import LifecycleEvent
from ..logger import logger


# Type alias for hook handlers; return values are ignored
HookHandler = Callable[[LifecycleEvent], None]


class HookManager:
    """
    Registry of lifecycle hooks, keyed by lifecycle kind.

    Example:
        hooks = HookManager()

        @hooks.on("agent:bootstrap")
        def on_bootstrap(event):
            event.messages.append("hello")

        # Or register directly
        hooks.register("agent:bootstrap", my_handler)

        # Dispatch an event to every handler for its kind
        hooks.trigger(event)
    """

    def __init__(self):
        """Initialize the hook manager."""
        self._hooks: Dict[str, List[HookHandler]] = {}

    def on(self, key: str) -> Callable[[HookHandler], HookHandler]:
        """
        Decorator to register a hook handler for a lifecycle kind.

        Args:
            key: Lifecycle kind, e.g. "agent:bootstrap"

        Returns:
            Decorator function
        """
        def decorator(handler: HookHandler) -> HookHandler:
            self.register(key, handler)
            return handler
        return decorator

    def register(self, key: str, handler: HookHandler) -> None:
        """
        Register a hook handler for a lifecycle kind.

        Args:
            key: Lifecycle kind in "<type>:<action>" form
            handler: Callable that takes a LifecycleEvent
        """
        if ":" not in key:
            raise ValueError(f"Invalid lifecycle kind: {key!r}")
        self._hooks.setdefault(key, []).append(handler)
        logger.debug(f"[hooks] Registered handler for {key}: {_handler_name(handler)}")

    def unregister(self, key: str, handler: HookHandler) -> bool:
        """
        Unregister a hook handler.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._hooks.get(key, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def clear(self, key: Optional[str] = None) -> None:
        """Clear hooks for one lifecycle kind, or all hooks if key is None."""
        if key:
            self._hooks.pop(key, None)
        else:
            self._hooks.clear()

    def trigger(self, event: LifecycleEvent) -> None:
        """
        Dispatch an event to all handlers registered for its kind.

        A failing handler is logged and does not stop the remaining handlers.
        """
        for handler in list(self._hooks.get(event.key, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"[hooks] Error in handler {_handler_name(handler)}: {e}")

    def has_hooks(self, key: str) -> bool:
        """Check if any hooks are registered for a lifecycle kind."""
        return bool(self._hooks.get(key))

    def list_hooks(self, key: Optional[str] = None) -> Dict[str, List[str]]:
        """
        List all registered hooks.

        Args:
            key: Optional lifecycle kind to filter by

        Returns:
            Dictionary of lifecycle kind -> list of handler names
        """
        keys = [key] if key else list(self._hooks)
        result = {}
        for k in keys:
            names = [_handler_name(h) for h in self._hooks.get(k, [])]
            if names:
                result[k] = names
        return result


def _handler_name(handler: HookHandler) -> str:
    # Callable instances (e.g. BootstrapInjector) have no __name__
    return getattr(handler, "__name__", type(handler).__name__)
