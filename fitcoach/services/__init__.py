"""
Service implementations for the FitCoach engine.

These services implement the business logic interfaces defined in
fitcoach.interfaces.services.
"""

from fitcoach.services.nlp import TextAnalysisService
from fitcoach.services.intent import IntentClassificationService, IntentRule, context_tag_for
from fitcoach.services.memory import ConversationMemoryService
from fitcoach.services.patterns import PatternLearningService
from fitcoach.services.suggestions import SuggestionEngine
from fitcoach.services.response import ResponseService, mood_from_sentiment
