# ============================================================
# CodeAI FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - OpenAI-compatible /v1/chat/completions (JSON or SSE)
#   - renumber-verses / clean-verses commands, in chat or as endpoints
#   - Support for OpenAI, Mistral, Ollama, or a local fallback
# ============================================================

import logging
import os
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field, PositiveInt

# --- Local imports ---
from codeai.settings import Settings, get_settings
from codeai.logging_utils import configure_logging
from codeai.generate import ChatGenerator, Message, TaskError, build_model_client
from codeai.generate.response import build_chat_response, stream_frames, encode_sse
from codeai.verses import VerseTask

logger = logging.getLogger(__name__)

BASE_MODELS = [
    "mistral-small-latest",
    "mistral-medium-latest",
    "mistral-large-latest",
    "gpt-4o",
    "gpt-4o-mini",
]
OLLAMA_MODELS = ["mistral:latest", "deepseek-coder:6.7b"]


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    model: Optional[str] = None
    messages: List[ChatTurn] = Field(min_length=1)
    max_tokens: Optional[PositiveInt] = None
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    stream: Optional[bool] = False


class VerseCommand(BaseModel):
    code: str
    model: Optional[str] = None
    max_tokens: Optional[PositiveInt] = None
    temperature: Optional[float] = Field(default=None, ge=0, le=2)


class HealthResponse(BaseModel):
    ok: bool
    provider: str
    configured: bool
    model: str


class ModelEntry(BaseModel):
    id: str
    object: str = "model"


class ModelsResponse(BaseModel):
    data: List[ModelEntry]


class FormattedCode(BaseModel):
    formatted_code: str


class CleanedCode(BaseModel):
    cleaned_code: str


def create_app(settings: Optional[Settings] = None, model_client=None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # ------------------------------------------------------------
    # 🔧 Model client selection
    # ------------------------------------------------------------
    if model_client is None:
        model_client = build_model_client(settings)
    chat_gen = ChatGenerator(model_client=model_client, settings=settings)
    logger.info(
        "Provider %s (configured=%s), client %s",
        settings.provider, settings.is_configured, type(model_client).__name__,
    )

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.state.settings = settings
    app.state.chat_gen = chat_gen

    def run_verse_command(task: VerseTask, cmd: VerseCommand) -> str:
        params = chat_gen.task_params(cmd.model, cmd.max_tokens, cmd.temperature)
        try:
            return chat_gen.run_command(task, cmd.code, params)
        except TaskError as e:
            raise HTTPException(status_code=e.status_code, detail=e.reason)

    # ------------------------------------------------------------
    # 💬 Chat completions
    # ------------------------------------------------------------
    @app.post("/v1/chat/completions")
    def chat_completions(req: ChatCompletionRequest):
        messages = [Message(role=t.role, content=t.content) for t in req.messages]
        params = chat_gen.chat_params(req.model, req.max_tokens, req.temperature)
        try:
            content = chat_gen.complete(messages, params)
        except TaskError as e:
            raise HTTPException(status_code=e.status_code, detail=e.reason)

        if req.stream:
            frames = stream_frames(content, params.model)
            return StreamingResponse(encode_sse(frames), media_type="text/event-stream")
        return build_chat_response(content, params.model).to_openai()

    # ------------------------------------------------------------
    # 🔢 Verse commands
    # ------------------------------------------------------------
    @app.post("/renumber-verses", response_model=FormattedCode)
    def renumber_verses(cmd: VerseCommand):
        return {"formatted_code": run_verse_command(VerseTask.RENUMBER, cmd)}

    @app.post("/clean-verses", response_model=CleanedCode)
    def clean_verses(cmd: VerseCommand):
        return {"cleaned_code": run_verse_command(VerseTask.CLEAN, cmd)}

    # ------------------------------------------------------------
    # 🤖 Models discovery
    # ------------------------------------------------------------
    @app.get("/v1/models", response_model=ModelsResponse)
    def list_models():
        ids = list(BASE_MODELS)
        if settings.provider == "ollama":
            ids.extend(OLLAMA_MODELS)
        return {"data": [{"id": i, "object": "model"} for i in ids]}

    # ------------------------------------------------------------
    # 🧭 Health checks
    # ------------------------------------------------------------
    @app.get("/health", response_model=HealthResponse)
    def health():
        return {
            "ok": True,
            "provider": settings.AI_PROVIDER,
            "configured": settings.is_configured,
            "model": settings.DEFAULT_MODEL,
        }

    @app.get("/")
    def hello():
        return {"message": f"{settings.APP_NAME} running.", "version": settings.APP_VERSION, "env": settings.ENV}

    if os.path.isdir(settings.PUBLIC_DIR):
        app.mount("/static", StaticFiles(directory=settings.PUBLIC_DIR), name="static")

    return app


app = create_app()
