"""Suggestions IA (service externe) — jamais bloquantes pour le store."""
from .model import GeminiModel, TextModel, get_default_model
from .service import parse_data_url, suggest_heading_level, suggest_image_alt_text
from .request import SUGGESTIBLE_KINDS, SuggestionRequest, run_suggestion

__all__ = [
    "GeminiModel", "TextModel", "get_default_model",
    "parse_data_url", "suggest_heading_level", "suggest_image_alt_text",
    "SUGGESTIBLE_KINDS", "SuggestionRequest", "run_suggestion",
]
