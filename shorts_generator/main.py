import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Header, Query, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shorts_generator.config import settings
from shorts_generator.constants import AUTO_DETECT, CREDENTIAL_KEY, NICHE_OPTIONS, TONE_PRESETS
from shorts_generator.generation.errors import (
    BackendError,
    ContentGenerationError,
    EmptyResponse,
    InvalidCredential,
    InvalidInput,
    MissingCredential,
    SchemaViolation,
)
from shorts_generator.generation.gemini_client import (
    generate_narrative,
    generate_structured_copy,
    get_suggestions,
)
from shorts_generator.schemas import (
    CopywritingResult,
    CredentialStatus,
    CredentialUpdate,
    GenerateRequest,
    ImageInput,
    ImageSearchResponse,
    NarrativeResponse,
    OptionsResponse,
    SuggestRequest,
    SuggestResponse,
)
from shorts_generator.utils.credentials import CredentialStore
from shorts_generator.utils.image_search import build_image_search_url

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

credential_store = CredentialStore(settings.SHORTS_CREDENTIAL_FILE)

STATUS_BY_ERROR = {
    InvalidInput: 422,
    MissingCredential: 401,
    InvalidCredential: 401,
    EmptyResponse: 502,
    SchemaViolation: 502,
    BackendError: 502,
}

NICHE_VALUES = [o["value"] for o in NICHE_OPTIONS]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The saved key is read once; later changes go through PUT /settings/credential
    app.state.credential = credential_store.get(CREDENTIAL_KEY)
    logger.info("Saved API key %s", "loaded" if app.state.credential else "not found")
    yield


app = FastAPI(title="Shorts Content Generator", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ContentGenerationError)
async def handle_generation_error(request: Request, exc: ContentGenerationError):
    status_code = STATUS_BY_ERROR.get(type(exc), 500)
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "error": exc.kind})


def resolve_credential(request: Request, x_api_key: Optional[str] = Header(None)) -> Optional[str]:
    """Header key wins, then the saved key, then GOOGLE_API_KEY."""
    if x_api_key and x_api_key.strip():
        return x_api_key.strip()
    saved = getattr(request.app.state, "credential", None)
    return saved or settings.GOOGLE_API_KEY


def check_choice(value: str, allowed, label: str):
    if value not in allowed:
        raise InvalidInput(f"Unknown {label} '{value}'. Choose one of: {', '.join(allowed)}.")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/options", response_model=OptionsResponse)
def options():
    return OptionsResponse(tones=TONE_PRESETS, niches=NICHE_OPTIONS)


# ---------- Generation ----------
@app.post("/generate", response_model=NarrativeResponse)
def generate(payload: GenerateRequest, credential: Optional[str] = Depends(resolve_credential)):
    check_choice(payload.niche, NICHE_VALUES, "niche")
    check_choice(payload.tone, TONE_PRESETS, "tone")
    content = generate_narrative(
        payload.topic,
        payload.tone,
        credential,
        model_name=payload.model or settings.GEMINI_MODEL,
    )
    return NarrativeResponse(topic=payload.topic.strip(), tone=payload.tone, content=content)


@app.post("/generate/copy", response_model=CopywritingResult)
async def generate_copy(
    topic: str = Form(...),
    niche: str = Form(AUTO_DETECT),
    tone: str = Form(TONE_PRESETS[0]),
    model: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    credential: Optional[str] = Depends(resolve_credential),
):
    check_choice(niche, NICHE_VALUES, "niche")
    check_choice(tone, TONE_PRESETS, "tone")

    image_input = None
    if image is not None and image.filename:
        ct = (image.content_type or "").lower()
        if not ct.startswith("image/"):
            raise InvalidInput("The attached file is not an image.")
        data = await image.read()
        if not data:
            raise InvalidInput("The attached image is empty.")
        image_input = ImageInput(data=data, mime_type=ct)

    return await run_in_threadpool(
        generate_structured_copy,
        topic,
        niche,
        tone,
        credential,
        image=image_input,
        model_name=model or settings.GEMINI_MODEL,
    )


@app.post("/suggest", response_model=SuggestResponse)
def suggest(payload: SuggestRequest, credential: Optional[str] = Depends(resolve_credential)):
    check_choice(payload.niche, NICHE_VALUES, "niche")
    suggestions = get_suggestions(
        payload.topic,
        payload.niche,
        credential,
        model_name=payload.model or settings.GEMINI_MODEL,
    )
    return SuggestResponse(suggestions=suggestions)


# ---------- Settings & shortcuts ----------
@app.get("/settings/credential", response_model=CredentialStatus)
def credential_status(request: Request):
    return CredentialStatus(configured=bool(getattr(request.app.state, "credential", None)))


@app.put("/settings/credential", response_model=CredentialStatus)
def save_credential(payload: CredentialUpdate, request: Request):
    api_key = payload.api_key.strip()
    if not api_key:
        raise InvalidInput("API key cannot be empty.")
    credential_store.set(CREDENTIAL_KEY, api_key)
    request.app.state.credential = api_key
    return CredentialStatus(configured=True)


@app.get("/image-search", response_model=ImageSearchResponse)
def image_search(topic: str = Query("", description="Topic to search images for")):
    return ImageSearchResponse(url=build_image_search_url(topic))


# uvicorn shorts_generator.main:app --reload
