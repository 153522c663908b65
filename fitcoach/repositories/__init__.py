"""
Repository implementations for session state.

This package contains repository implementations that provide
per-session storage for the engine's services.
"""

from fitcoach.repositories.session_store import InMemorySessionStore
