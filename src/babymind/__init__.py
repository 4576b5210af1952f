"""BabyMind - age-bucketed recommendations and completion tracking for parents."""

__version__ = "0.1.0"
