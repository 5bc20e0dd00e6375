"""OpenAI-compatible chat gateway with Swift array verse formatting."""

__version__ = "1.0.0"
