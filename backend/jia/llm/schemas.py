"""
LLM gateway Pydantic schemas
"""
from typing import Optional
from pydantic import BaseModel, Field


class EngineRequest(BaseModel):
    system_prompt: Optional[str] = Field(default=None, alias="systemPrompt")
    prompt: Optional[str] = None

    class Config:
        populate_by_name = True


class ReasonerRequest(BaseModel):
    core_prompt: Optional[str] = Field(default=None, alias="corePrompt")

    class Config:
        populate_by_name = True


class CompletionResponse(BaseModel):
    result: str


class ChatRequest(BaseModel):
    """One user turn; omit sessionId to start a new conversation"""
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    text: Optional[str] = None

    class Config:
        populate_by_name = True


class ChatResponse(BaseModel):
    session_id: str = Field(alias="sessionId")
    reply: str

    class Config:
        populate_by_name = True
