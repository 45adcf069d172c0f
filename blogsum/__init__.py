"""Blog summarizer service with English and Urdu output."""

__version__ = "0.1.0"
