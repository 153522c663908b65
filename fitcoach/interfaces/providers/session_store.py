from abc import ABC, abstractmethod
from typing import Any, ContextManager, Optional


class SessionStore(ABC):
    """Interface for per-session state storage."""

    @abstractmethod
    def get(self, session_id: str) -> Optional[Any]:
        """Return the stored value for a session, or None."""
        pass

    @abstractmethod
    def put(self, session_id: str, value: Any) -> None:
        """Store a value for a session."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Remove a session. Returns True if it existed."""
        pass

    @abstractmethod
    def lock(self, session_id: str) -> ContextManager:
        """Return a re-entrant context manager serializing mutations of one session.

        The lock must stay in force while held, even if the session is
        deleted, evicted or expired meanwhile.
        """
        pass

    @abstractmethod
    def __contains__(self, session_id: str) -> bool:
        pass
