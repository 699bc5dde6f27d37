"""LifeTracker: budget, habit and goal tracking."""

__version__ = "0.1.0"
