"""
Text analysis service implementation.

Extracts typed entities and a sentiment verdict from a free-text message
by scanning fixed dictionaries. Matching is plain substring containment on
the lower-cased text, so one phrase may produce several entities when it
matches several dictionary variants.
"""

import logging
import re
from typing import Dict, List, Tuple

from fitcoach.domains.analysis import Entity, SentimentResult
from fitcoach.domains.enums import EntityKind, SentimentLabel
from fitcoach.interfaces.services.analysis import (
    TextAnalysisService as TextAnalysisServiceInterface,
)

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"\d+(\.\d+)?")

EXERCISE_PATTERNS: Dict[str, List[str]] = {
    "squat": ["squat", "squats", "squatting"],
    "deadlift": ["deadlift", "deadlifts", "deadlifting"],
    "bench_press": ["bench", "bench press", "bench pressing"],
    "push_up": ["push up", "push-ups", "pushups"],
    "pull_up": ["pull up", "pull-ups", "pullups"],
    "plank": ["plank", "planking"],
    "burpee": ["burpee", "burpees"],
    "lunge": ["lunge", "lunges", "lunging"],
    "crunch": ["crunch", "crunches", "crunching"],
    "sit_up": ["sit up", "sit-ups", "situps"],
}

FOOD_PATTERNS: Dict[str, List[str]] = {
    "chicken": ["chicken", "chicken breast", "chicken thigh"],
    "beef": ["beef", "steak", "ground beef"],
    "fish": ["fish", "salmon", "tuna", "cod"],
    "egg": ["egg", "eggs"],
    "rice": ["rice", "white rice", "brown rice"],
    "pasta": ["pasta", "spaghetti", "noodles"],
    "bread": ["bread", "toast", "sandwich"],
    "apple": ["apple", "apples"],
    "banana": ["banana", "bananas"],
    "broccoli": ["broccoli", "broccolis"],
}

BODY_PART_PATTERNS: Dict[str, List[str]] = {
    "chest": ["chest", "pecs", "pectorals"],
    "back": ["back", "lats", "latissimus"],
    "legs": ["legs", "quads", "quadriceps", "hamstrings"],
    "arms": ["arms", "biceps", "triceps"],
    "shoulders": ["shoulders", "delts", "deltoids"],
    "core": ["core", "abs", "abdominals", "stomach"],
}

TIME_PATTERNS: Dict[str, List[str]] = {
    "today": ["today", "this morning", "this afternoon", "this evening"],
    "yesterday": ["yesterday"],
    "tomorrow": ["tomorrow"],
    "this_week": ["this week"],
    "next_week": ["next week"],
}

# Per-kind constants of the dictionary design, not computed scores.
NUMBER_CONFIDENCE = 0.9
PHRASE_CONFIDENCE = 0.8
TIME_CONFIDENCE = 0.9

PHRASE_DICTIONARIES: List[Tuple[EntityKind, Dict[str, List[str]], float]] = [
    (EntityKind.EXERCISE, EXERCISE_PATTERNS, PHRASE_CONFIDENCE),
    (EntityKind.FOOD, FOOD_PATTERNS, PHRASE_CONFIDENCE),
    (EntityKind.BODY_PART, BODY_PART_PATTERNS, PHRASE_CONFIDENCE),
    (EntityKind.TIME, TIME_PATTERNS, TIME_CONFIDENCE),
]

POSITIVE_WORDS = [
    "great", "awesome", "amazing", "excellent", "fantastic", "wonderful",
    "love", "like", "enjoy", "excited", "pumped", "motivated", "ready",
    "crushed", "nailed", "killed", "dominated", "smashed", "destroyed",
]

NEGATIVE_WORDS = [
    "bad", "terrible", "awful", "hate", "dislike", "frustrated", "angry",
    "tired", "exhausted", "sore", "hurt", "pain", "struggling", "stuck",
    "plateau", "not working", "giving up", "quitting", "failing",
]

NEUTRAL_WORDS = ["okay", "fine", "alright", "decent", "average", "normal", "regular"]

STRONG_WORDS = [
    "amazing", "incredible", "fantastic", "terrible", "awful", "hate",
    "love", "crushed", "dominated", "struggling", "failing",
]


def count_present(text: str, words: List[str]) -> int:
    """Count how many of ``words`` occur in ``text``."""
    return sum(1 for word in words if word in text)


class TextAnalysisService(TextAnalysisServiceInterface):
    """Dictionary-based entity and sentiment extraction."""

    def extract_entities(self, text: str) -> List[Entity]:
        """Extract typed entities from a message.

        Args:
            text: Raw user message

        Returns:
            Entities in dictionary order: numbers, exercises, foods,
            body parts, then time references
        """
        text = text or ""
        lowered = text.lower()
        entities: List[Entity] = []

        for match in NUMBER_PATTERN.finditer(text):
            raw = match.group(0)
            entities.append(
                Entity(
                    kind=EntityKind.NUMBER,
                    value=float(raw),
                    raw_text=raw,
                    confidence=NUMBER_CONFIDENCE,
                )
            )

        for kind, dictionary, confidence in PHRASE_DICTIONARIES:
            for value, variants in dictionary.items():
                for variant in variants:
                    if variant in lowered:
                        entities.append(
                            Entity(
                                kind=kind,
                                value=value,
                                raw_text=variant,
                                confidence=confidence,
                            )
                        )

        logger.debug(f"Extracted {len(entities)} entities")
        return entities

    def analyze_sentiment(self, text: str) -> SentimentResult:
        """Score sentiment from lexicon hit ratios.

        Args:
            text: Raw user message

        Returns:
            Winning label, its hit ratio as confidence, and an intensity
            driven by strong wording
        """
        lowered = (text or "").lower()

        counts = [
            (SentimentLabel.POSITIVE, count_present(lowered, POSITIVE_WORDS)),
            (SentimentLabel.NEGATIVE, count_present(lowered, NEGATIVE_WORDS)),
            (SentimentLabel.NEUTRAL, count_present(lowered, NEUTRAL_WORDS)),
        ]
        total = sum(count for _, count in counts)
        if total == 0:
            return SentimentResult(
                label=SentimentLabel.NEUTRAL, confidence=0.5, intensity=0.5
            )

        # max() keeps the first of equal ratios
        label, hits = max(counts, key=lambda item: item[1])
        strong = count_present(lowered, STRONG_WORDS)

        return SentimentResult(
            label=label,
            confidence=hits / total,
            intensity=min(0.5 + strong * 0.1, 1.0),
        )
