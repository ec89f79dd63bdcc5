"""
Suggestions IA — niveau de titre, texte alternatif d'image.

Aucune erreur ne remonte : toute défaillance (service, JSON invalide, entrée
malformée) retombe sur la valeur par défaut (1 pour le niveau, "" pour l'alt).
"""
import base64
import binascii
import logging
import re
from typing import Optional, Tuple

from pydantic import BaseModel, ValidationError

from .model import TextModel, get_default_model

log = logging.getLogger(__name__)

DEFAULT_LEVEL = 1

_HEADING_PROMPT = (
    "Based on the following text, what is the most appropriate HTML heading level (1-6)? "
    "For example, a main title should be 1, a major section 2, and a subsection 3.\n"
    'Answer with a JSON object of the form {{"level": <integer between 1 and 6>}}.\n\n'
    'Text: "{text}"'
)
_ALT_PROMPT = "Describe this image to be used as alt text for web accessibility. Be concise and descriptive."

_MIME = re.compile(r":(.*?);")


class HeadingLevelSuggestion(BaseModel):
    level: int


def parse_data_url(data_url: str) -> Tuple[str, bytes]:
    """
    "data:image/png;base64,iVBOR..." → ("image/png", b"...")

    Raises:
        ValueError: URL malformée (en-tête, type MIME ou base64 invalides)
    """
    header, sep, data = data_url.partition(",")
    if not sep or not header or not data:
        raise ValueError("data URL invalide")
    m = _MIME.search(header)
    if not m or not m.group(1):
        raise ValueError("type MIME introuvable dans la data URL")
    try:
        raw = base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"payload base64 invalide : {e}") from e
    return m.group(1), raw


async def suggest_heading_level(text: str, model: Optional[TextModel] = None) -> int:
    """Niveau de titre suggéré (1-6). Texte vide → 1 sans appel au service."""
    if not text.strip():
        return DEFAULT_LEVEL

    try:
        model = model or get_default_model()
        raw = await model.generate([_HEADING_PROMPT.format(text=text)], json_response=True)
        level = HeadingLevelSuggestion.model_validate_json(raw.strip()).level
    except ValidationError as e:
        log.error("Réponse niveau de titre invalide : %s", e)
        return DEFAULT_LEVEL
    except Exception as e:
        log.error("Erreur suggestion niveau de titre : %s", e)
        return DEFAULT_LEVEL

    if 1 <= level <= 6:
        return level
    log.warning("Niveau suggéré hors limites (%s) → %d", level, DEFAULT_LEVEL)
    return DEFAULT_LEVEL


async def suggest_image_alt_text(data_url: str, model: Optional[TextModel] = None) -> str:
    """Texte alternatif suggéré pour une image en data URL. Entrée vide → "" sans appel."""
    if not data_url:
        return ""

    try:
        mime_type, raw = parse_data_url(data_url)
        model = model or get_default_model()
        text = await model.generate([_ALT_PROMPT, {"mime_type": mime_type, "data": raw}])
    except Exception as e:
        log.error("Erreur suggestion texte alternatif : %s", e)
        return ""
    return text.strip()
