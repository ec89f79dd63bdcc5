"""
Adaptateur IA — interface TextModel + implémentation Gemini (google-generativeai).
"""
import logging
from typing import Any, List, Optional, Protocol, runtime_checkable

from .. import config

log = logging.getLogger(__name__)


@runtime_checkable
class TextModel(Protocol):
    async def generate(self, contents: List[Any], json_response: bool = False) -> str: ...


class GeminiModel:
    """Appel Gemini asynchrone, renvoie le texte brut de la réponse."""

    def __init__(self, model_name: Optional[str] = None, api_key: Optional[str] = None):
        import google.generativeai as g
        api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        if not api_key:
            log.warning("GEMINI_API_KEY non défini — les suggestions retomberont sur leurs valeurs par défaut")
        g.configure(api_key=api_key)
        self.model_name = model_name or config.GEMINI_MODEL
        self._model = g.GenerativeModel(self.model_name)

    async def generate(self, contents: List[Any], json_response: bool = False) -> str:
        generation_config = {"response_mime_type": "application/json"} if json_response else None
        r = await self._model.generate_content_async(contents, generation_config=generation_config)
        return r.text or ""


_DEFAULT_MODEL: dict = {}


def get_default_model() -> TextModel:
    """GeminiModel partagé (créé au premier appel)."""
    if "gemini" not in _DEFAULT_MODEL:
        _DEFAULT_MODEL["gemini"] = GeminiModel()
    return _DEFAULT_MODEL["gemini"]
