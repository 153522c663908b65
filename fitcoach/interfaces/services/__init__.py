from fitcoach.interfaces.services.analysis import (
    IntentClassificationService,
    TextAnalysisService,
)
from fitcoach.interfaces.services.memory import ConversationMemoryService
from fitcoach.interfaces.services.patterns import PatternLearningService
from fitcoach.interfaces.services.response import ResponseService
