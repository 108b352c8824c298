from typing import Dict, List

DEFAULT_MODEL = "gemini-2.5-flash"

# Key under which the Gemini API key is persisted in the credential store
CREDENTIAL_KEY = "gemini_api_key"

AUTO_DETECT = "auto-detect"

TONE_PRESETS: List[str] = [
    "Conversational (default)",
    "Professional",
    "Humorous",
    "Inspirational",
    "Educational",
    "Storytelling",
]

NICHE_OPTIONS: List[Dict[str, str]] = [
    {"value": AUTO_DETECT, "label": "Auto-detect"},
    {"value": "tech", "label": "Technology"},
    {"value": "finance", "label": "Finance"},
    {"value": "health", "label": "Health & Wellness"},
    {"value": "lifestyle", "label": "Lifestyle"},
]

SUGGESTION_COUNT = 20

IMAGE_SEARCH_URL_TEMPLATE = "https://www.google.com/search?tbm=isch&q={query}"
