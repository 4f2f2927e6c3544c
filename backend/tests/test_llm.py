"""
Tests for the AI engine and the LLM gateway routes
"""

from unittest.mock import MagicMock, patch

import openai
import pytest

from jia.ai_engine.chat import ChatSession, load_session, save_session
from jia.ai_engine.service import AIEngine
from jia.core.exceptions import AIEngineError


def completion(text):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = text
    return response


class TestAIEngine:
    """Single-request completions over the OpenAI client."""

    @pytest.fixture
    def openai_client(self):
        return MagicMock()

    @pytest.fixture
    def engine(self, openai_client):
        return AIEngine(client=openai_client)

    def test_generate_text_sends_system_and_user(self, engine, openai_client):
        openai_client.chat.completions.create.return_value = completion("hi")

        assert engine.generate_text("Hello", system_prompt="Be brief") == "hi"

        messages = openai_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": "Be brief"},
            {"role": "user", "content": "Hello"},
        ]

    def test_generate_text_without_system_prompt(self, engine, openai_client):
        openai_client.chat.completions.create.return_value = completion("ok")

        engine.generate_text("Hello")

        messages = openai_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "Hello"}]

    def test_empty_reply(self, engine, openai_client):
        openai_client.chat.completions.create.return_value = completion(None)

        assert engine.generate_text("Hello") == ""

    def test_provider_error(self, engine, openai_client):
        openai_client.chat.completions.create.side_effect = openai.OpenAIError("boom")

        with pytest.raises(AIEngineError) as exc_info:
            engine.generate_text("Hello")
        assert exc_info.value.details == {"error": "boom"}

    def test_not_configured(self):
        with pytest.raises(AIEngineError):
            AIEngine(client=None).generate_text("Hello")

    def test_chat_threads_session(self, engine, openai_client):
        openai_client.chat.completions.create.return_value = completion("Hi Ana")
        session = ChatSession.new("s-1")

        assert engine.chat(session, "I am Ana") == "Hi Ana"
        assert [m["role"] for m in session.messages] == ["system", "user", "assistant"]

    @pytest.mark.parametrize("text", [
        '{"result": "Good Fit"}',
        '```json\n{"result": "Good Fit"}\n```',
        '```\n{"result": "Good Fit"}```',
    ])
    def test_parse_json_response(self, text):
        assert AIEngine.parse_json_response(text) == {"result": "Good Fit"}

    def test_parse_json_response_rejects_prose(self):
        with pytest.raises(ValueError):
            AIEngine.parse_json_response("Sure! Here it is.")


class TestChatSessions:
    """Sessions are stored per id, never shared."""

    def test_new_session_when_nothing_stored(self):
        with patch("jia.ai_engine.chat.get_cache", return_value=None):
            session = load_session("s-1")

        assert session.session_id == "s-1"
        assert session.messages[0]["role"] == "system"

    def test_generates_id_when_missing(self):
        assert load_session(None).session_id

    def test_loads_stored_messages(self):
        stored = [{"role": "system", "content": "x"}, {"role": "user", "content": "hi"}]
        with patch("jia.ai_engine.chat.get_cache", return_value=stored) as get_cache:
            session = load_session("s-1")

        get_cache.assert_called_once_with("chat_session:s-1")
        assert session.messages == stored

    def test_save_uses_session_key(self):
        session = ChatSession.new("s-2")
        with patch("jia.ai_engine.chat.set_cache", return_value=True) as set_cache:
            assert save_session(session)

        assert set_cache.call_args[0][:2] == ("chat_session:s-2", session.messages)


class TestLLMRoutes:
    """POST /api/v1/llm/*"""

    @pytest.fixture
    def generate_text(self):
        with patch("jia.llm.router.ai_engine.generate_text", return_value="done") as mock:
            yield mock

    def test_engine(self, client, generate_text):
        response = client.post("/api/v1/llm/engine", json={"systemPrompt": "Be brief", "prompt": "Hi"})

        assert response.json() == {"result": "done"}
        generate_text.assert_called_once_with("Hi", system_prompt="Be brief")

    def test_engine_default_system_prompt(self, client, generate_text):
        client.post("/api/v1/llm/engine", json={"prompt": "Hi"})

        assert generate_text.call_args.kwargs["system_prompt"].startswith("You are a helpful assistant")

    def test_engine_requires_prompt(self, client, generate_text):
        response = client.post("/api/v1/llm/engine", json={"systemPrompt": "x"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Prompt is required"

    def test_reasoner(self, client, generate_text):
        response = client.post("/api/v1/llm/reasoner", json={"corePrompt": "Think"})

        assert response.json() == {"result": "done"}
        generate_text.assert_called_once_with("Think")

    def test_reasoner_requires_prompt(self, client, generate_text):
        response = client.post("/api/v1/llm/reasoner", json={})

        assert response.status_code == 400

    def test_engine_provider_failure(self, client):
        with patch("jia.llm.router.ai_engine.generate_text", side_effect=AIEngineError()):
            response = client.post("/api/v1/llm/engine", json={"prompt": "Hi"})

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "AI_ENGINE_ERROR"

    def test_chat_keeps_sessions_apart(self, client):
        store = {}

        def fake_load(session_id):
            return ChatSession(session_id, list(store[session_id])) if session_id in store \
                else ChatSession.new(session_id)

        def fake_save(session):
            store[session.session_id] = list(session.messages)
            return True

        with patch("jia.llm.router.load_session", side_effect=fake_load), \
                patch("jia.llm.router.save_session", side_effect=fake_save), \
                patch("jia.llm.router.ai_engine.complete", return_value="ok"):
            first = client.post("/api/v1/llm/chat", json={"sessionId": "a", "text": "one"}).json()
            client.post("/api/v1/llm/chat", json={"sessionId": "a", "text": "two"})
            client.post("/api/v1/llm/chat", json={"sessionId": "b", "text": "three"})

        assert first == {"sessionId": "a", "reply": "ok"}
        assert [m["content"] for m in store["a"] if m["role"] == "user"] == ["one", "two"]
        assert [m["content"] for m in store["b"] if m["role"] == "user"] == ["three"]

    def test_chat_requires_text(self, client):
        response = client.post("/api/v1/llm/chat", json={"sessionId": "a"})

        assert response.status_code == 400
