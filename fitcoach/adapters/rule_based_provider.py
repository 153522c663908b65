"""
Rule-based recommendation provider.

Drafts a coaching reply from the message analysis alone: an urgency and
sentiment aware opening, an intent-specific body that mentions the
exercises, foods and body parts the user named, and a closing that matches
the complexity of the question.
"""
import logging
from typing import Any, Dict, List, Optional

from fitcoach.domains.analysis import Entity, IntentAnalysis
from fitcoach.domains.enums import (
    Complexity,
    EntityKind,
    Intent,
    SentimentLabel,
    Urgency,
)
from fitcoach.domains.profile import NutritionEntry, UserProfile, WorkoutSession
from fitcoach.domains.responses import BaseRecommendation
from fitcoach.interfaces.providers.recommendation import RecommendationProvider
from fitcoach.interfaces.services.analysis import IntentClassificationService
from fitcoach.services.intent import IntentClassificationService as DefaultIntentService
from fitcoach.services.intent import context_tag_for

logger = logging.getLogger(__name__)

CONTEXT_RESPONSES: Dict[str, Dict[str, Any]] = {
    "workout": {
        "action": "workout_help",
        "suggestions": [
            "Generate new workout",
            "Modify current workout",
            "Show workout tips",
            "Track my progress",
        ],
    },
    "nutrition": {
        "action": "nutrition_help",
        "suggestions": [
            "Create meal plan",
            "Track my food",
            "Calculate macros",
            "Get nutrition advice",
        ],
    },
    "progress": {
        "action": "progress_analysis",
        "suggestions": [
            "Show detailed analytics",
            "Set new goals",
            "Adjust my plan",
            "Celebrate achievements",
        ],
    },
    "motivation": {
        "action": "motivation_help",
        "suggestions": [
            "Set a small goal for today",
            "Review my achievements",
            "Plan a fun workout",
        ],
    },
    "general": {
        "action": "general_help",
        "suggestions": [
            "Help with workouts",
            "Plan my meals",
            "Track my progress",
            "Get fitness advice",
        ],
    },
}


def values_of(entities: List[Entity], kind: EntityKind) -> List[str]:
    values: List[str] = []
    for entity in entities:
        if entity.kind != kind:
            continue
        value = f"{entity.value:g}" if isinstance(entity.value, float) else str(entity.value)
        value = value.replace("_", " ")
        if value not in values:
            values.append(value)
    return values


class RuleBasedRecommendationProvider(RecommendationProvider):
    """Recommendation provider built from keyword analysis."""

    def __init__(
        self,
        intent_service: Optional[IntentClassificationService] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the provider.

        Args:
            intent_service: Analyzer used to understand the message
            config: Optional settings; ``max_suggestions`` limits the
                number of suggestions returned
        """
        self.intent_service = intent_service or DefaultIntentService()
        self.config = config or {}
        self.max_suggestions = int(self.config.get("max_suggestions", 4))

    def generate(
        self,
        message: str,
        profile: Optional[UserProfile],
        workout_history: List[WorkoutSession],
        nutrition_log: List[NutritionEntry],
        session_id: str,
    ) -> BaseRecommendation:
        analysis = self.intent_service.analyze(message)
        context = context_tag_for(analysis.primary_intent)
        template = CONTEXT_RESPONSES.get(context, CONTEXT_RESPONSES["general"])

        content = self.compose(analysis, profile, workout_history, nutrition_log)
        logger.debug(f"Drafted {context} response for session {session_id}")

        return BaseRecommendation(
            content=content,
            suggestions=template["suggestions"][: self.max_suggestions],
            action=template["action"],
            data={
                "intent": analysis.primary_intent.value,
                "specific_requests": [
                    request.model_dump(mode="json") for request in analysis.specific_requests
                ],
            },
            confidence=analysis.confidence,
            personalized=profile is not None,
        )

    def compose(
        self,
        analysis: IntentAnalysis,
        profile: Optional[UserProfile] = None,
        workout_history: Optional[List[WorkoutSession]] = None,
        nutrition_log: Optional[List[NutritionEntry]] = None,
    ) -> str:
        """Compose the reply text for an analysis."""
        parts: List[str] = []

        if analysis.urgency == Urgency.HIGH:
            parts.append("I understand this is urgent!")
        elif analysis.urgency == Urgency.MEDIUM:
            parts.append("I'll help you with this right away!")

        if analysis.sentiment.label == SentimentLabel.NEGATIVE:
            parts.append("I can see you're feeling frustrated.")
        elif analysis.sentiment.label == SentimentLabel.POSITIVE:
            parts.append("I love your positive energy!")

        parts.append(self._body(analysis, workout_history or [], nutrition_log or []))

        if profile is not None and profile.target_physique:
            parts.append(f"Everything here is geared towards your {profile.target_physique} goal.")

        response = " ".join(parts)
        if analysis.complexity == Complexity.COMPLEX:
            response += (
                "\n\nI've provided a detailed analysis above. "
                "Let me know if you need clarification on any part!"
            )
        elif analysis.complexity == Complexity.SIMPLE:
            response += "\n\nLet me know if you need more details!"
        return response

    def _body(
        self,
        analysis: IntentAnalysis,
        workout_history: List[WorkoutSession],
        nutrition_log: List[NutritionEntry],
    ) -> str:
        detailed = analysis.complexity == Complexity.COMPLEX
        entities = analysis.entities
        intent = analysis.primary_intent

        if intent == Intent.GENERATE_WORKOUT:
            text = "I'll create a personalized workout for you!"
            exercises = values_of(entities, EntityKind.EXERCISE)
            if exercises:
                text += f" I'll include {', '.join(exercises)}."
            body_parts = values_of(entities, EntityKind.BODY_PART)
            if body_parts:
                text += f" I'll focus on your {', '.join(body_parts)}."
            if detailed:
                return text + (
                    " I'll provide detailed explanations for each exercise, including "
                    "proper form, sets, reps, and rest periods."
                )
            return text + " I'll give you a clear, easy-to-follow workout plan."

        if intent == Intent.TRACK_FOOD:
            text = "I'll help you track your nutrition!"
            foods = values_of(entities, EntityKind.FOOD)
            if foods:
                text += f" I can see you mentioned {', '.join(foods)}."
            quantities = values_of(entities, EntityKind.NUMBER)
            if quantities:
                text += f" I'll calculate the macros for {', '.join(quantities)} servings."
            if detailed:
                return text + (
                    " I'll provide detailed macro breakdowns, including protein, "
                    "carbs, fats, and micronutrients."
                )
            return text + " I'll give you a simple macro summary."

        if intent == Intent.ANALYZE_PROGRESS:
            text = "I'll analyze your progress and provide insights!"
            if workout_history or nutrition_log:
                text += (
                    f" You've logged {len(workout_history)} workouts and "
                    f"{len(nutrition_log)} meals so far."
                )
            if detailed:
                return text + (
                    " I'll give you a comprehensive analysis including trends, "
                    "patterns, and predictions."
                )
            return text + " I'll give you a clear overview of how you're doing."

        text = "I'm here to help with your fitness journey!"
        if detailed:
            return text + " I'll provide detailed, science-based advice tailored to your needs."
        return text + " I'll give you clear, actionable advice."
