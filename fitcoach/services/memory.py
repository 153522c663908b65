"""
Conversation memory service implementation.

This service keeps a bounded, append-only log of interactions per session
and aggregates satisfaction, intent and mood trends from it.
"""
import logging
from collections import Counter
from typing import ContextManager, List, Optional

from fitcoach.domains.interactions import ConversationTrends, Interaction
from fitcoach.interfaces.providers.session_store import SessionStore
from fitcoach.interfaces.services.memory import (
    ConversationMemoryService as ConversationMemoryServiceInterface,
)
from fitcoach.repositories.session_store import InMemorySessionStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_INTERACTIONS = 50


class ConversationMemoryService(ConversationMemoryServiceInterface):
    """Service for per-session conversation memory and trend analytics."""

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        max_interactions: int = DEFAULT_MAX_INTERACTIONS,
    ):
        """Initialize the memory service.

        Args:
            store: Session store holding each session's interaction list
            max_interactions: Number of most recent interactions kept per session
        """
        if max_interactions < 1:
            raise ValueError("max_interactions must be at least 1")
        self.store = store if store is not None else InMemorySessionStore()
        self.max_interactions = max_interactions

    def lock(self, session_id: str) -> ContextManager:
        return self.store.lock(session_id)

    def record(self, session_id: str, interaction: Interaction) -> None:
        """Append an interaction, evicting the oldest beyond the cap.

        Args:
            session_id: Session the interaction belongs to
            interaction: Completed turn
        """
        with self.store.lock(session_id):
            interactions = list(self.store.get(session_id) or [])
            interactions.append(interaction)
            if len(interactions) > self.max_interactions:
                del interactions[: len(interactions) - self.max_interactions]
            self.store.put(session_id, interactions)
        logger.debug(
            f"Recorded interaction for session {session_id} ({len(interactions)} retained)"
        )

    def history(self, session_id: str) -> List[Interaction]:
        return list(self.store.get(session_id) or [])

    def recent_context(self, session_id: str, limit: int = 5) -> List[Interaction]:
        if limit <= 0:
            return []
        return self.history(session_id)[-limit:]

    def trends(self, session_id: str) -> ConversationTrends:
        """Aggregate a session's interactions.

        Args:
            session_id: Session to analyze

        Returns:
            Average satisfaction, the five most frequent intents, the mood
            sequence and the intents of poorly rated turns. A session with
            no interactions gets the neutral defaults.
        """
        history = self.history(session_id)
        if not history:
            return ConversationTrends()

        average = sum(entry.satisfaction for entry in history) / len(history)

        # Counter keeps first-seen order and most_common() sorts stably.
        intent_counts = Counter(entry.intent for entry in history)
        top_intents = [intent for intent, _ in intent_counts.most_common(5)]

        low_satisfaction: List[str] = []
        for entry in history:
            if entry.satisfaction < 0.5 and entry.intent not in low_satisfaction:
                low_satisfaction.append(entry.intent)

        return ConversationTrends(
            average_satisfaction=average,
            top_intents=top_intents,
            mood_sequence=[entry.mood for entry in history],
            low_satisfaction_intents=low_satisfaction,
        )

    def delete(self, session_id: str) -> None:
        with self.store.lock(session_id):
            self.store.delete(session_id)
        logger.info(f"Deleted conversation memory for session {session_id}")
