"""
Per-session chat state

Each conversation lives in its own ChatSession, stored in Redis under its
session id and passed explicitly to the engine. No history is shared between
callers.
"""
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import structlog

from jia.core.config import settings
from jia.core.redis_client import get_cache, get_cache_key, set_cache

logger = structlog.get_logger()

SYSTEM_GREETING = "You are a helpful assistant."


@dataclass
class ChatSession:
    session_id: str
    messages: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def new(cls, session_id: Optional[str] = None) -> "ChatSession":
        return cls(
            session_id=session_id or str(uuid.uuid4()),
            messages=[{"role": "system", "content": SYSTEM_GREETING}],
        )

    def add_message(self, role: str, content: str) -> None:
        self.messages.append({"role": role, "content": content})


def _session_key(session_id: str) -> str:
    return get_cache_key("chat_session", session_id)


def load_session(session_id: Optional[str]) -> ChatSession:
    """Load a stored session, or start a fresh one"""
    if session_id:
        messages = get_cache(_session_key(session_id))
        if messages:
            return ChatSession(session_id=session_id, messages=messages)
        logger.info("chat_session_started", session_id=session_id)
    return ChatSession.new(session_id)


def save_session(session: ChatSession) -> bool:
    return set_cache(_session_key(session.session_id), session.messages, ttl=settings.CHAT_SESSION_TTL)
