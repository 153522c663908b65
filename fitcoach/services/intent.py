"""
Intent classification service implementation.

Primary intent is decided by an ordered list of keyword rules: the first
rule whose keywords appear in the message wins, and its sub-rules refine
the result. Urgency, complexity and confidence are weighted keyword scores.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from fitcoach.domains.analysis import (
    Entity,
    IntentAnalysis,
    SentimentResult,
    SpecificRequest,
)
from fitcoach.domains.enums import (
    Complexity,
    EntityKind,
    Intent,
    RequestKind,
    SentimentLabel,
    Urgency,
)
from fitcoach.interfaces.services.analysis import (
    IntentClassificationService as IntentClassificationServiceInterface,
)
from fitcoach.interfaces.services.analysis import TextAnalysisService
from fitcoach.services.nlp import TextAnalysisService as DefaultTextAnalysisService
from fitcoach.services.nlp import count_present

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntentRule:
    """Keyword rule mapping a message to an intent."""

    keywords: Tuple[str, ...]
    intent: Intent
    sub_rules: Tuple["IntentRule", ...] = field(default_factory=tuple)

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)

    def resolve(self, text: str) -> Intent:
        for rule in self.sub_rules:
            if rule.matches(text):
                return rule.resolve(text)
        return self.intent


# Evaluated in order; earlier groups take priority.
INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        ("workout", "exercise", "gym"),
        Intent.WORKOUT_ADVICE,
        (
            IntentRule(("generate", "create", "new"), Intent.GENERATE_WORKOUT),
            IntentRule(("modify", "change", "adjust"), Intent.MODIFY_WORKOUT),
            IntentRule(("harder", "tougher", "challenge"), Intent.HARDER_WORKOUT),
            IntentRule(("easier", "lighter", "gentle"), Intent.EASIER_WORKOUT),
        ),
    ),
    IntentRule(
        ("food", "meal", "eat", "nutrition"),
        Intent.NUTRITION_ADVICE,
        (
            IntentRule(("track", "log", "add"), Intent.TRACK_FOOD),
            IntentRule(("plan", "create", "meal plan"), Intent.CREATE_MEAL_PLAN),
            IntentRule(("macros", "calories", "protein"), Intent.ANALYZE_MACROS),
        ),
    ),
    IntentRule(("progress", "how am i", "doing"), Intent.ANALYZE_PROGRESS),
    IntentRule(("motivation", "encourage", "support"), Intent.PROVIDE_MOTIVATION),
    IntentRule(("what", "how", "why", "?"), Intent.ANSWER_QUESTION),
)

DEFAULT_INTENT = Intent.GENERAL_ADVICE

# Independent of the primary intent; any subset may apply.
SECONDARY_INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(("motivation", "encourage"), Intent.PROVIDE_MOTIVATION),
    IntentRule(("explain", "tell me about"), Intent.PROVIDE_EXPLANATION),
    IntentRule(("schedule", "when", "time"), Intent.SCHEDULE_ADVICE),
    IntentRule(("goal", "target", "aim"), Intent.GOAL_SETTING),
)

HIGH_URGENCY_WORDS = ["urgent", "asap", "immediately", "now", "quick", "fast", "emergency"]
MEDIUM_URGENCY_WORDS = ["soon", "today", "this week", "important", "priority"]

COMPLEX_WORDS = ["explain", "detailed", "comprehensive", "analysis", "breakdown", "scientific"]

INTENT_KEYWORDS: Dict[Intent, List[str]] = {
    Intent.GENERATE_WORKOUT: ["workout", "generate", "create", "new"],
    Intent.TRACK_FOOD: ["food", "track", "log", "add"],
    Intent.ANALYZE_PROGRESS: ["progress", "how am i", "doing"],
}

CONTEXT_TAGS: Dict[Intent, str] = {
    Intent.GENERATE_WORKOUT: "workout",
    Intent.MODIFY_WORKOUT: "workout",
    Intent.HARDER_WORKOUT: "workout",
    Intent.EASIER_WORKOUT: "workout",
    Intent.WORKOUT_ADVICE: "workout",
    Intent.TRACK_FOOD: "nutrition",
    Intent.CREATE_MEAL_PLAN: "nutrition",
    Intent.ANALYZE_MACROS: "nutrition",
    Intent.NUTRITION_ADVICE: "nutrition",
    Intent.ANALYZE_PROGRESS: "progress",
    Intent.PROVIDE_MOTIVATION: "motivation",
}

REQUEST_KINDS = [
    (EntityKind.EXERCISE, RequestKind.EXERCISE),
    (EntityKind.FOOD, RequestKind.FOOD),
    (EntityKind.BODY_PART, RequestKind.BODY_PART),
    (EntityKind.NUMBER, RequestKind.QUANTITY),
]


def context_tag_for(intent: str) -> str:
    """Map an intent to its coarse context tag."""
    try:
        return CONTEXT_TAGS.get(Intent(intent), "general")
    except ValueError:
        return "general"


class IntentClassificationService(IntentClassificationServiceInterface):
    """Keyword cascade intent classifier."""

    def __init__(
        self,
        text_analysis_service: Optional[TextAnalysisService] = None,
        rules: Sequence[IntentRule] = INTENT_RULES,
    ) -> None:
        """Initialize the classifier.

        Args:
            text_analysis_service: Extractor used by ``analyze``
            rules: Ordered primary intent rules
        """
        self.text_analysis_service = (
            text_analysis_service or DefaultTextAnalysisService()
        )
        self.rules = tuple(rules)

    def analyze(self, text: str, recent_messages: Sequence[str] = ()) -> IntentAnalysis:
        text = text or ""
        entities = self.text_analysis_service.extract_entities(text)
        sentiment = self.text_analysis_service.analyze_sentiment(text)
        return self.classify(text, entities, sentiment, recent_messages)

    def classify(
        self,
        text: str,
        entities: List[Entity],
        sentiment: SentimentResult,
        recent_messages: Sequence[str] = (),
    ) -> IntentAnalysis:
        """Classify a message.

        Args:
            text: Raw user message
            entities: Entities extracted from the message
            sentiment: Sentiment of the message
            recent_messages: Earlier messages of the conversation

        Returns:
            Full intent analysis
        """
        lowered = (text or "").lower()

        primary = self.primary_intent(lowered)
        analysis = IntentAnalysis(
            primary_intent=primary,
            secondary_intents=self.secondary_intents(lowered),
            entities=list(entities),
            sentiment=sentiment,
            specific_requests=self.specific_requests(entities),
            urgency=self.urgency(lowered, sentiment),
            complexity=self.complexity(lowered, entities, recent_messages),
            confidence=self.confidence(lowered, entities, primary),
        )
        logger.debug(
            f"Classified message as {analysis.primary_intent.value} "
            f"(urgency={analysis.urgency.value}, complexity={analysis.complexity.value}, "
            f"confidence={analysis.confidence:.2f})"
        )
        return analysis

    def primary_intent(self, lowered: str) -> Intent:
        for rule in self.rules:
            if rule.matches(lowered):
                return rule.resolve(lowered)
        return DEFAULT_INTENT

    def secondary_intents(self, lowered: str) -> List[Intent]:
        return [rule.intent for rule in SECONDARY_INTENT_RULES if rule.matches(lowered)]

    def specific_requests(self, entities: List[Entity]) -> List[SpecificRequest]:
        requests: List[SpecificRequest] = []
        for entity_kind, request_kind in REQUEST_KINDS:
            for entity in entities:
                if entity.kind == entity_kind:
                    requests.append(
                        SpecificRequest(
                            kind=request_kind,
                            value=entity.value,
                            confidence=entity.confidence,
                        )
                    )
        return requests

    def urgency(self, lowered: str, sentiment: SentimentResult) -> Urgency:
        score = (
            count_present(lowered, HIGH_URGENCY_WORDS) * 3
            + count_present(lowered, MEDIUM_URGENCY_WORDS) * 2
            + (1 if sentiment.label == SentimentLabel.NEGATIVE else 0)
        )
        if score >= 3:
            return Urgency.HIGH
        if score >= 1:
            return Urgency.MEDIUM
        return Urgency.LOW

    def complexity(
        self, lowered: str, entities: List[Entity], recent_messages: Sequence[str]
    ) -> Complexity:
        score = count_present(lowered, COMPLEX_WORDS)
        score += len(entities) * 0.1
        score += 0.3 if "?" in lowered else 0
        score += 0.2 if len(recent_messages) > 5 else 0
        if score >= 1.5:
            return Complexity.COMPLEX
        if score >= 0.5:
            return Complexity.MODERATE
        return Complexity.SIMPLE

    def confidence(self, lowered: str, entities: List[Entity], intent: Intent) -> float:
        score = 0.5 + len(entities) * 0.1
        score += count_present(lowered, INTENT_KEYWORDS.get(intent, [])) * 0.15
        return min(score, 1.0)
