"""
Configuration — variables d'environnement (avec valeurs par défaut).
"""
import os

GEMINI_API_KEY     = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL       = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
DEFAULT_PAGE_TITLE = os.getenv("DEFAULT_PAGE_TITLE", "My Generated Website")
LOG_LEVEL          = os.getenv("LOG_LEVEL", "INFO")
