"""Exceptions raised by the AgentShield hook capabilities."""


class AgentShieldHookError(Exception):
    """Base class for hook errors."""


class ProbeError(AgentShieldHookError):
    """
    The external binary could not be probed.

    Attributes:
        reason: One of "not_found", "exit_status", "timeout", "os_error"
    """

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason


class DocumentReadError(AgentShieldHookError):
    """The bundled instruction document could not be read."""
