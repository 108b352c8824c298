# shorts_generator/schemas.py
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from shorts_generator.constants import AUTO_DETECT, TONE_PRESETS

class GenerateRequest(BaseModel):
    topic: str = Field(..., description="Short, specific video topic")
    niche: str = Field(AUTO_DETECT, description="Niche value, or 'auto-detect'")
    tone: str = Field(TONE_PRESETS[0], description="Tone preset")
    model: Optional[str] = Field(None, description="Gemini model name override")

class NarrativeResponse(BaseModel):
    topic: str
    tone: str
    content: str

class CopywritingResult(BaseModel):
    title: str
    description: str
    tags: List[str]
    scriptHook: str
    thumbnailIdea: str

class SuggestRequest(BaseModel):
    topic: str = Field(..., description="Seed topic for the ideas")
    niche: str = Field(AUTO_DETECT, description="Niche value, or 'auto-detect'")
    model: Optional[str] = Field(None, description="Gemini model name override")

class SuggestResponse(BaseModel):
    suggestions: List[str]

class ImageInput(BaseModel):
    data: bytes
    mime_type: str = "image/png"

class CredentialUpdate(BaseModel):
    api_key: str = Field(..., description="Gemini API key to persist")

class CredentialStatus(BaseModel):
    configured: bool

class ImageSearchResponse(BaseModel):
    url: str

class OptionsResponse(BaseModel):
    tones: List[str]
    niches: List[Dict[str, str]]
