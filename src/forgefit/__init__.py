"""forgefit — offline rule-based workout program generator with adaptive readiness scoring."""

__version__ = "1.0.0"
