import pytest

from shorts_generator.constants import AUTO_DETECT, SUGGESTION_COUNT
from shorts_generator.generation.prompts import (
    COPYWRITING_SCHEMA,
    build_copywriting_prompt,
    build_narrative_prompt,
    build_suggestions_prompt,
    normalize_tone,
)


@pytest.mark.parametrize(
    "tone, expected",
    [
        ("Conversational (default)", "Conversational"),
        ("Professional", "Professional"),
        ("  Humorous  ", "Humorous"),
        ("Conversational (default)  ", "Conversational"),
        ("Calm (default) Mix", "Calm (default) Mix"),
        ("Calm (default) Mix (default)", "Calm (default) Mix"),
        ("", ""),
    ],
)
def test_normalize_tone(tone, expected):
    assert normalize_tone(tone) == expected


def test_narrative_prompt_embeds_topic_and_clean_tone():
    prompt = build_narrative_prompt("  kasih sayang leopard ke anaknya ", "Conversational (default)")
    assert 'Topic: "kasih sayang leopard ke anaknya"' in prompt
    assert 'Tone: "Conversational"' in prompt
    assert "(default)" not in prompt
    assert "English" in prompt


def test_copywriting_prompt_uses_niche_literally():
    prompt = build_copywriting_prompt("budget travel", "finance", "Professional")
    assert 'NICHE: "finance"' in prompt
    assert "infer" not in prompt


def test_copywriting_prompt_auto_detect_asks_to_infer():
    prompt = build_copywriting_prompt("budget travel", AUTO_DETECT, "Professional")
    assert "infer the most fitting niche" in prompt
    assert AUTO_DETECT not in prompt


def test_copywriting_prompt_thumbnail_line_depends_on_image():
    with_image = build_copywriting_prompt("budget travel", "lifestyle", "Humorous", has_image=True)
    without_image = build_copywriting_prompt("budget travel", "lifestyle", "Humorous")
    assert "attached image" in with_image
    assert "attached image" not in without_image
    assert "derived from the topic" in without_image


def test_copywriting_schema_requires_all_fields():
    assert set(COPYWRITING_SCHEMA["required"]) == {"title", "description", "tags", "scriptHook", "thumbnailIdea"}
    assert set(COPYWRITING_SCHEMA["properties"]) == set(COPYWRITING_SCHEMA["required"])
    assert COPYWRITING_SCHEMA["properties"]["tags"]["items"]["type"] == "STRING"


def test_suggestions_prompt():
    prompt = build_suggestions_prompt("home workouts", "health")
    assert f"exactly {SUGGESTION_COUNT}" in prompt
    assert '"home workouts"' in prompt
    assert '"health"' in prompt
    assert "numbered list" in prompt
