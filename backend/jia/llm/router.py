"""
LLM gateway routes - thin completion endpoints over the AI engine
"""
from fastapi import APIRouter
import structlog
from jia.ai_engine.chat import load_session, save_session
from jia.ai_engine.service import ai_engine
from jia.core.config import settings
from jia.core.exceptions import ValidationError
from jia.llm.schemas import (
    ChatRequest,
    ChatResponse,
    CompletionResponse,
    EngineRequest,
    ReasonerRequest,
)

router = APIRouter(prefix="/api/v1/llm", tags=["LLM"])
logger = structlog.get_logger()


@router.post("/engine", response_model=CompletionResponse)
def run_engine(request: EngineRequest):
    """Complete a prompt under a system prompt"""
    if not request.prompt:
        raise ValidationError("Prompt is required", details=[{"field": "prompt", "message": "Field required"}])
    result = ai_engine.generate_text(
        request.prompt,
        system_prompt=request.system_prompt or settings.DEFAULT_SYSTEM_PROMPT,
    )
    return CompletionResponse(result=result)


@router.post("/reasoner", response_model=CompletionResponse)
def run_reasoner(request: ReasonerRequest):
    """Complete a bare prompt"""
    if not request.core_prompt:
        raise ValidationError(
            "corePrompt is required",
            details=[{"field": "corePrompt", "message": "Field required"}],
        )
    return CompletionResponse(result=ai_engine.generate_text(request.core_prompt))


@router.post("/chat", response_model=ChatResponse, response_model_by_alias=True)
def chat(request: ChatRequest):
    """Continue a conversation kept per session"""
    if not request.text:
        raise ValidationError("Text is required", details=[{"field": "text", "message": "Field required"}])

    session = load_session(request.session_id)
    reply = ai_engine.chat(session, request.text)
    if not save_session(session):
        logger.warning("chat_session_not_saved", session_id=session.session_id)
    return ChatResponse(session_id=session.session_id, reply=reply)
