from fitcoach.interfaces.providers.recommendation import RecommendationProvider
from fitcoach.interfaces.providers.session_store import SessionStore
