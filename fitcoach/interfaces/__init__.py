"""
Abstract interfaces for the FitCoach engine.

These interfaces define the contracts that concrete implementations
must adhere to, following the Dependency Inversion Principle.

This package contains:
- Provider interfaces for session storage and base recommendations
- Service interfaces for analysis, memory, learning and responses
"""
