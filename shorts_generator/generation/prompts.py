from typing import Any, Dict

from shorts_generator.constants import AUTO_DETECT, SUGGESTION_COUNT

NARRATIVE_PROMPT_TEMPLATE = """
You are an expert content creator for social media shorts.
Your task is to generate a short, engaging script based on the following details.
The script should be concise and suitable for a short video format.

Topic: "{topic}"
Tone: "{tone}"

Rules:
- Write the script in English, whatever the language of the topic.
- Plain text only. No markdown, no headings, no bullet symbols.

Generate the script now.
"""

COPYWRITING_PROMPT_TEMPLATE = """
You are a senior YouTube copywriter for short-form videos.
Write the publishing copy for a video about the TOPIC below.

TOPIC: "{topic}"
NICHE: {niche_line}
TONE: "{tone}"

Produce these fields, all in English:
- title: a catchy title, at most 70 characters
- description: a video description of roughly 200-300 words
- tags: 10-15 relevant search tags
- scriptHook: the opening line spoken in the first 3 seconds
- thumbnailIdea: {thumbnail_line}
"""

SUGGESTIONS_PROMPT_TEMPLATE = """
Give me exactly {count} creative topic ideas for short videos related to "{topic}" in the "{niche}" niche.
Format them as a plain numbered list, one idea per line.
Do not add any introduction or conclusion.
"""

# Schema handed to Gemini as response_schema; every field is required
COPYWRITING_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING", "description": "Catchy video title, at most 70 characters."},
        "description": {"type": "STRING", "description": "Video description, roughly 200-300 words."},
        "tags": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "10-15 relevant search tags.",
        },
        "scriptHook": {"type": "STRING", "description": "Opening line for the first seconds of the video."},
        "thumbnailIdea": {"type": "STRING", "description": "Concept for the video thumbnail."},
    },
    "required": ["title", "description", "tags", "scriptHook", "thumbnailIdea"],
}


def normalize_tone(tone: str) -> str:
    """'Conversational (default)' -> 'Conversational'"""
    return (tone or "").strip().removesuffix(" (default)").strip()


def build_narrative_prompt(topic: str, tone: str) -> str:
    return NARRATIVE_PROMPT_TEMPLATE.format(topic=topic.strip(), tone=normalize_tone(tone))


def build_copywriting_prompt(topic: str, niche: str, tone: str, has_image: bool = False) -> str:
    if niche == AUTO_DETECT:
        niche_line = "not given; infer the most fitting niche from the topic"
    else:
        niche_line = f'"{niche}"'

    if has_image:
        thumbnail_line = "a thumbnail concept that builds on the attached image"
    else:
        thumbnail_line = "a thumbnail concept derived from the topic"

    return COPYWRITING_PROMPT_TEMPLATE.format(
        topic=topic.strip(),
        niche_line=niche_line,
        tone=normalize_tone(tone),
        thumbnail_line=thumbnail_line,
    )


def build_suggestions_prompt(topic: str, niche: str) -> str:
    return SUGGESTIONS_PROMPT_TEMPLATE.format(count=SUGGESTION_COUNT, topic=topic.strip(), niche=niche)
