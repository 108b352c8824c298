import json
import logging
import threading
from typing import Any, Dict, List, Optional

import google.generativeai as genai
from pydantic import ValidationError

from shorts_generator.constants import DEFAULT_MODEL
from shorts_generator.generation.errors import (
    EmptyResponse,
    InvalidInput,
    MissingCredential,
    SchemaViolation,
    classify_backend_error,
)
from shorts_generator.generation.prompts import (
    COPYWRITING_SCHEMA,
    build_copywriting_prompt,
    build_narrative_prompt,
    build_suggestions_prompt,
)
from shorts_generator.generation.suggestions import parse_suggestions
from shorts_generator.schemas import CopywritingResult, ImageInput

logger = logging.getLogger(__name__)

# genai.configure sets the key on SDK-global state; hold this from configure until the reply arrives
_gemini_lock = threading.Lock()


def _require_topic(topic: str) -> None:
    if not topic or not topic.strip():
        raise InvalidInput("Topic cannot be empty.")


def _require_credential(credential: Optional[str]) -> None:
    if not credential or not credential.strip():
        raise MissingCredential("API key is missing. Please add your Gemini API key in settings.")


def configure_gemini(credential: str):
    genai.configure(api_key=credential.strip())


def _response_text(resp) -> str:
    # .text raises ValueError when the candidate carries no text part (e.g. blocked)
    try:
        return resp.text or ""
    except ValueError:
        return ""


def _call_model(
    contents: List[Any],
    credential: str,
    model_name: str,
    generation_config: Optional[Dict[str, Any]] = None,
) -> str:
    """One outbound call, no retries. Backend failures come back classified."""
    try:
        with _gemini_lock:
            configure_gemini(credential)
            model = genai.GenerativeModel(model_name)
            resp = model.generate_content(contents, generation_config=generation_config)
    except Exception as exc:
        logger.error("Gemini call failed model=%s: %s", model_name, exc)
        raise classify_backend_error(exc) from exc
    return _response_text(resp)


def _strip_code_fences(txt: str) -> str:
    txt = txt.strip()
    if txt.startswith("```"):
        txt = txt.strip("`")
        # remove "json" hint if present
        if txt.lower().startswith("json"):
            txt = txt[4:]
    return txt.strip()


def generate_narrative(topic: str, tone: str, credential: Optional[str], model_name: str = DEFAULT_MODEL) -> str:
    _require_topic(topic)
    _require_credential(credential)

    prompt = build_narrative_prompt(topic, tone)
    logger.info("generate_narrative topic=%s tone=%s", topic, tone)
    txt = _call_model([prompt], credential, model_name)
    if not txt.strip():
        raise EmptyResponse("Received an empty response from the AI.")
    return txt


def generate_structured_copy(
    topic: str,
    niche: str,
    tone: str,
    credential: Optional[str],
    image: Optional[ImageInput] = None,
    model_name: str = DEFAULT_MODEL,
) -> CopywritingResult:
    _require_topic(topic)
    _require_credential(credential)

    prompt = build_copywriting_prompt(topic, niche, tone, has_image=image is not None)
    contents: List[Any] = [prompt]
    if image is not None:
        contents.append({"mime_type": image.mime_type, "data": image.data})

    generation_config = {
        "response_mime_type": "application/json",
        "response_schema": COPYWRITING_SCHEMA,
    }
    logger.info("generate_structured_copy topic=%s niche=%s image=%s", topic, niche, image is not None)
    txt = _call_model(contents, credential, model_name, generation_config=generation_config)

    if not txt.strip():
        raise SchemaViolation("The AI returned no structured content.")
    try:
        data = json.loads(_strip_code_fences(txt))
    except json.JSONDecodeError as exc:
        logger.warning("Structured copy is not valid JSON: %s", exc)
        raise SchemaViolation("The AI response was not valid JSON.") from exc
    if not isinstance(data, dict):
        raise SchemaViolation("The AI response was not a JSON object.")

    try:
        return CopywritingResult(**data)
    except ValidationError as exc:
        logger.warning("Structured copy validation failed: %s", exc)
        raise SchemaViolation("The AI response is missing required fields.") from exc


def get_suggestions(topic: str, niche: str, credential: Optional[str], model_name: str = DEFAULT_MODEL) -> List[str]:
    _require_topic(topic)
    _require_credential(credential)

    prompt = build_suggestions_prompt(topic, niche)
    logger.info("get_suggestions topic=%s niche=%s", topic, niche)
    raw = _call_model([prompt], credential, model_name)
    if not raw.strip():
        raise EmptyResponse("Received an empty response from the AI.")
    return parse_suggestions(raw)
