"""EchoVerse — gateway HTTP para sintese de voz, traducao e Q&A."""

__version__ = "0.1.0"
