"""
AI engine service - text completion over the OpenAI chat API
"""
import json
import re
from typing import Any, Dict, List, Optional

import openai
import structlog

from jia.core.config import settings
from jia.core.exceptions import AIEngineError

logger = structlog.get_logger()

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)


class AIEngine:
    """Single-request text completion; no streaming, no retries"""

    def __init__(self, client: Optional[openai.OpenAI] = None):
        self.client = client
        if self.client is None and settings.OPENAI_API_KEY:
            try:
                self.client = openai.OpenAI(
                    api_key=settings.OPENAI_API_KEY,
                    base_url=settings.OPENAI_BASE_URL,
                    max_retries=0,
                )
                logger.info("openai_client_initialized", model=settings.OPENAI_MODEL)
            except Exception as e:
                logger.warning("openai_client_init_failed", error=str(e))

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """Send one chat completion request and return the reply text"""
        if not self.client:
            raise AIEngineError("AI provider is not configured")

        try:
            response = self.client.chat.completions.create(
                model=settings.OPENAI_MODEL,
                messages=messages,
                temperature=settings.AI_TEMPERATURE,
                max_tokens=settings.AI_MAX_TOKENS,
            )
        except openai.OpenAIError as e:
            logger.error("completion_failed", error=str(e), model=settings.OPENAI_MODEL)
            raise AIEngineError("AI processing failed", details={"error": str(e)})

        return response.choices[0].message.content or ""

    def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Complete a single prompt, optionally framed by a system prompt"""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return self.complete(messages)

    def chat(self, session, text: str) -> str:
        """
        Continue a conversation held in a ChatSession.
        The session is the only conversation state; callers persist it.
        """
        session.add_message("user", text)
        reply = self.complete(session.messages)
        session.add_message("assistant", reply)
        return reply

    @staticmethod
    def parse_json_response(text: str) -> Any:
        """Parse a JSON reply, tolerating Markdown code fences around it"""
        if not isinstance(text, str):
            raise ValueError("response is not text")
        cleaned = CODE_FENCE_PATTERN.sub("", text).strip()
        return json.loads(cleaned)


# Global instance
ai_engine = AIEngine()
