"""Adapters upstream do gateway (Watson + placeholder de Q&A)."""

from __future__ import annotations

from echoverse.providers.interface import Answerer, SpeechRecognizer, SpeechSynthesizer, Translator
from echoverse.providers.placeholder import PlaceholderAnswerer
from echoverse.providers.watson import (
    WatsonLanguageTranslator,
    WatsonSpeechToText,
    WatsonTextToSpeech,
)

__all__ = [
    "Answerer",
    "PlaceholderAnswerer",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "Translator",
    "WatsonLanguageTranslator",
    "WatsonSpeechToText",
    "WatsonTextToSpeech",
]
