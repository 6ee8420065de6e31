"""Scene relay backend: shareable scene links and an LLM chat relay."""

__version__ = "0.1.0"
