"""
Response service implementation.

This service orchestrates a conversational turn: it analyzes the user
message, asks the base recommendation provider for a draft, reshapes the
draft with learned preferences, gathers suggestions and predictions, and
finally records the realized interaction so the next turn can learn from it.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from fitcoach.domains.analysis import IntentAnalysis, SentimentResult
from fitcoach.domains.enums import (
    Complexity,
    EntityKind,
    Mood,
    SentimentLabel,
    Urgency,
)
from fitcoach.domains.interactions import Interaction
from fitcoach.domains.profile import CoachingContext
from fitcoach.domains.responses import BaseRecommendation, ResponsePayload
from fitcoach.interfaces.providers.recommendation import RecommendationProvider
from fitcoach.interfaces.services.analysis import IntentClassificationService
from fitcoach.interfaces.services.memory import ConversationMemoryService
from fitcoach.interfaces.services.patterns import PatternLearningService
from fitcoach.interfaces.services.response import (
    ResponseService as ResponseServiceInterface,
)
from fitcoach.services.intent import context_tag_for

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 6
HISTORY_WINDOW = 10
DEFAULT_SATISFACTION = 0.5

FALLBACK_CONTENT = (
    "I apologize for the technical difficulty. I couldn't put together a "
    "response right now. Please try again in a moment."
)
FALLBACK_SUGGESTIONS = [
    "Try asking again",
    "Ask about your workout plan",
    "Ask about your nutrition",
]
FALLBACK_CONFIDENCE = 0.3

ENTITY_SUGGESTIONS = {
    EntityKind.EXERCISE: ["Focus on {value} today", "Add more {value} to your routine"],
    EntityKind.FOOD: ["Track your {value} intake", "Add {value} to your meal plan"],
    EntityKind.BODY_PART: ["Work on your {value}", "Strengthen your {value}"],
}

SENTIMENT_SUGGESTIONS = {
    SentimentLabel.NEGATIVE: [
        "I'm here to support you",
        "Let's start with something simple",
        "You're doing great, keep going!",
    ],
    SentimentLabel.POSITIVE: [
        "Channel that energy into a workout!",
        "Let's set some ambitious goals!",
        "You're unstoppable!",
    ],
}

URGENCY_SUGGESTIONS = {
    Urgency.HIGH: ["I'll help you right away!", "Let's solve this quickly"],
}

COMPLEXITY_SUGGESTIONS = {
    Complexity.COMPLEX: ["I'll provide detailed analysis", "Let me break this down for you"],
    Complexity.SIMPLE: ["Keep it simple and effective", "Focus on the basics"],
}


def mood_from_sentiment(sentiment: SentimentResult) -> str:
    """Map a sentiment verdict onto the tracked mood scale."""
    if sentiment.label == SentimentLabel.NEGATIVE:
        return Mood.STRUGGLING.value
    if sentiment.label == SentimentLabel.POSITIVE:
        if sentiment.intensity >= 0.7:
            return Mood.EXCITED.value
        return Mood.MOTIVATED.value
    return Mood.NEUTRAL.value


class ResponseService(ResponseServiceInterface):
    """Service for orchestrating personalized coaching responses."""

    def __init__(
        self,
        intent_service: IntentClassificationService,
        memory_service: ConversationMemoryService,
        pattern_service: PatternLearningService,
        recommendation_provider: Optional[RecommendationProvider] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the response service.

        Args:
            intent_service: Message analysis and intent classification
            memory_service: Per-session conversation memory
            pattern_service: Per-session pattern learning
            recommendation_provider: Default base recommendation provider
            clock: Timestamp source for recorded interactions
        """
        self.intent_service = intent_service
        self.memory_service = memory_service
        self.pattern_service = pattern_service
        self.recommendation_provider = recommendation_provider
        self.clock = clock or datetime.now

    def respond(
        self,
        message: str,
        session_id: str,
        context: Optional[CoachingContext] = None,
        provider: Optional[RecommendationProvider] = None,
        satisfaction: Optional[float] = None,
    ) -> ResponsePayload:
        """Process one user message for a session.

        Args:
            message: Raw user message
            session_id: Session the message belongs to
            context: Read-only profile and log snapshot
            provider: Optional provider overriding the default one
            satisfaction: Optional feedback score recorded with the turn

        Returns:
            Response payload; the fallback payload when the provider fails
        """
        message = message or ""
        context = context or CoachingContext()
        provider = provider or self.recommendation_provider
        if satisfaction is None:
            satisfaction = DEFAULT_SATISFACTION
        elif not 0.0 <= satisfaction <= 1.0:
            logger.warning(f"Clamping out-of-range satisfaction {satisfaction}")
            satisfaction = min(max(satisfaction, 0.0), 1.0)

        with self.memory_service.lock(session_id):
            personalized = self.pattern_service.has_pattern(session_id)
            recent = [
                entry.user_message
                for entry in self.memory_service.recent_context(session_id, HISTORY_WINDOW)
            ]
            analysis = self.intent_service.analyze(message, recent)
            mood = mood_from_sentiment(analysis.sentiment)

            try:
                if provider is None:
                    raise RuntimeError("No recommendation provider configured")
                base = provider.generate(
                    message,
                    context.profile,
                    context.workout_history,
                    context.nutrition_log,
                    session_id,
                )
                if not isinstance(base, BaseRecommendation):
                    base = BaseRecommendation.model_validate(base)
            except Exception as e:
                logger.exception(f"Recommendation provider failed for session {session_id}: {e}")
                payload = ResponsePayload(
                    content=FALLBACK_CONTENT,
                    suggestions=list(FALLBACK_SUGGESTIONS),
                    confidence=FALLBACK_CONFIDENCE,
                    personalized=False,
                    analysis=analysis,
                )
                self._remember(
                    session_id,
                    message,
                    payload.content,
                    context_tag_for(analysis.primary_intent),
                    mood,
                    satisfaction,
                    analysis,
                )
                return payload

            context_tag = base.action or context_tag_for(analysis.primary_intent)
            content = self.pattern_service.adapt(session_id, context_tag, mood, base.content)

            suggestions = list(base.suggestions)
            suggestions.extend(self._contextual_suggestions(analysis))
            suggestions.extend(
                self.pattern_service.suggestions_for(
                    session_id, context_tag_for(analysis.primary_intent)
                )
            )

            payload = ResponsePayload(
                content=content,
                suggestions=suggestions[:MAX_SUGGESTIONS],
                action=base.action,
                data=base.data,
                confidence=analysis.confidence,
                personalized=personalized,
                predictions=self.pattern_service.predict(session_id),
                analysis=analysis,
            )

            self._remember(
                session_id, message, content, context_tag, mood, satisfaction, analysis
            )
            logger.debug(
                f"Responded to session {session_id} with intent "
                f"{analysis.primary_intent.value} (personalized={personalized})"
            )
            return payload

    def _contextual_suggestions(self, analysis: IntentAnalysis) -> List[str]:
        suggestions: List[str] = []
        for entity in analysis.entities:
            for template in ENTITY_SUGGESTIONS.get(entity.kind, []):
                suggestions.append(template.format(value=entity.value))
        suggestions.extend(SENTIMENT_SUGGESTIONS.get(analysis.sentiment.label, []))
        suggestions.extend(URGENCY_SUGGESTIONS.get(analysis.urgency, []))
        suggestions.extend(COMPLEXITY_SUGGESTIONS.get(analysis.complexity, []))
        return suggestions

    def _remember(
        self,
        session_id: str,
        message: str,
        content: str,
        context_tag: str,
        mood: str,
        satisfaction: float,
        analysis: IntentAnalysis,
    ) -> None:
        interaction = Interaction(
            timestamp=self.clock(),
            user_message=message,
            ai_response=content,
            context_tag=context_tag,
            mood=mood,
            satisfaction=satisfaction,
            entities=analysis.entities,
            intent=analysis.primary_intent.value,
        )
        self.pattern_service.learn(session_id, interaction)
        self.memory_service.record(session_id, interaction)
