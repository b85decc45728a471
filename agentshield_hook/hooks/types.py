"""
Hook types and data structures for the host lifecycle contract.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Optional, Dict, List, Union
from datetime import datetime


# Lifecycle kind this package reacts to, in the host's "<type>:<action>" form
AGENT_BOOTSTRAP = "agent:bootstrap"


class BootstrapRole(Enum):
    """Role under which the agent ingests a bootstrap file."""
    SYSTEM = "system"
    USER = "user"


@dataclass
class BootstrapFile:
    """
    A named document injected into an agent's initial context.

    Attributes:
        filename: Name the agent sees for the document (e.g. AGENTSHIELD.md)
        content: Raw document text
        role: Whether the agent reads it as system or user instructions.
            Roles outside BootstrapRole are kept as plain strings.
        extra: Host keys on the entry this package does not own, kept as-is
    """
    filename: str
    content: str
    role: Union[BootstrapRole, str] = BootstrapRole.SYSTEM
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the host's bootstrap file shape."""
        data = dict(self.extra)
        data.update({
            'filename': self.filename,
            'content': self.content,
            'role': self.role.value if isinstance(self.role, BootstrapRole) else self.role,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BootstrapFile':
        raw_role = data.get('role', BootstrapRole.SYSTEM.value)
        try:
            role = BootstrapRole(raw_role)
        except ValueError:
            role = raw_role
        return cls(
            filename=data['filename'],
            content=data['content'],
            role=role,
            extra={k: v for k, v in data.items() if k not in ('filename', 'content', 'role')},
        )


@dataclass
class AgentContext:
    """
    Mutable, host-owned context carried by a lifecycle event.

    Attributes:
        bootstrap_files: Files the agent reads before acting. None means
            no hook has contributed one yet.
        extra: Host keys this package does not own, kept as-is
    """
    bootstrap_files: Optional[List[BootstrapFile]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def append_bootstrap_file(self, bootstrap_file: BootstrapFile) -> None:
        """Append a file, creating the sequence if absent. Prior entries are kept."""
        if self.bootstrap_files is None:
            self.bootstrap_files = []
        self.bootstrap_files.append(bootstrap_file)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        if self.bootstrap_files is not None:
            data['bootstrapFiles'] = [f.to_dict() for f in self.bootstrap_files]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AgentContext':
        extra = {k: v for k, v in data.items() if k != 'bootstrapFiles'}
        files = data.get('bootstrapFiles')
        return cls(
            bootstrap_files=[BootstrapFile.from_dict(f) for f in files] if files is not None else None,
            extra=extra,
        )


@dataclass
class LifecycleEvent:
    """
    Notification dispatched by the host when an agent lifecycle phase occurs.

    The type/action pair is opaque host vocabulary. Hooks contribute by
    appending to ``context`` and ``messages``; they never replace them.

    Attributes:
        type: Event family (e.g. "agent")
        action: Phase within the family (e.g. "bootstrap")
        context: Shared mutable agent context
        messages: User-facing messages, in order
        timestamp: When the event was created
    """
    type: str
    action: str
    context: AgentContext = field(default_factory=AgentContext)
    messages: List[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def key(self) -> str:
        """Lifecycle kind as "<type>:<action>"."""
        return f"{self.type}:{self.action}"

    def matches(self, key: str) -> bool:
        return self.key == key

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to the host's payload shape."""
        return {
            'type': self.type,
            'action': self.action,
            'context': self.context.to_dict(),
            'messages': list(self.messages),
            'timestamp': self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LifecycleEvent':
        """Build an event from a host payload."""
        event = cls(
            type=data['type'],
            action=data['action'],
            context=AgentContext.from_dict(data['context']),
            messages=list(data['messages']),
        )
        if 'timestamp' in data:
            event.timestamp = datetime.fromisoformat(data['timestamp'])
        return event
