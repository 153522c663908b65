"""
Adapters for external collaborators.

These adapters implement the provider interfaces defined in
fitcoach.interfaces.providers.
"""
