from abc import ABC, abstractmethod
from typing import List, Sequence

from fitcoach.domains.analysis import Entity, IntentAnalysis, SentimentResult


class TextAnalysisService(ABC):
    """Interface for entity and sentiment extraction."""

    @abstractmethod
    def extract_entities(self, text: str) -> List[Entity]:
        """Extract typed entities from text."""
        pass

    @abstractmethod
    def analyze_sentiment(self, text: str) -> SentimentResult:
        """Score the sentiment of text."""
        pass


class IntentClassificationService(ABC):
    """Interface for intent classification."""

    @abstractmethod
    def classify(
        self,
        text: str,
        entities: List[Entity],
        sentiment: SentimentResult,
        recent_messages: Sequence[str] = (),
    ) -> IntentAnalysis:
        """Classify a message given its extracted entities and sentiment."""
        pass

    @abstractmethod
    def analyze(self, text: str, recent_messages: Sequence[str] = ()) -> IntentAnalysis:
        """Run extraction and classification on a message."""
        pass
