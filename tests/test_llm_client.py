import importlib

import types

from typeforge.generator import generate_character
from typeforge.types import EnneagramSelection, GeneratorInput


class FakeMsg:
    def __init__(self, content):
        self.content = content


class Choice:
    def __init__(self, content):
        self.message = FakeMsg(content)


class Completion:
    def __init__(self, content):
        self.choices = [Choice(content)]


def _fake_client(content, calls=None):
    def create(**kwargs):
        if calls is not None:
            calls.append(kwargs)
        return Completion(content)

    return types.SimpleNamespace(chat=types.SimpleNamespace(completions=types.SimpleNamespace(create=create)))


def _character():
    return generate_character(
        GeneratorInput(
            attitudinal="VELF",
            enneagram=EnneagramSelection(type=5, wing=4, instinct="sp"),
            mbti="INTJ",
            socionics="ILI",
            seed=3,
        )
    )


def test_chat_text_disabled(monkeypatch):
    # Force backstories off or no key
    monkeypatch.setenv("USE_LLM_BACKSTORY", "false")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    import typeforge.llm_client as lc
    importlib.reload(lc)

    assert lc.get_client() is None
    assert lc.chat_text("system", "hi") is None
    assert lc.generate_backstory(_character()) is None


def test_get_client_enabled_without_key(monkeypatch):
    monkeypatch.setenv("USE_LLM_BACKSTORY", "true")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    import typeforge.llm_client as lc
    importlib.reload(lc)

    assert lc.get_client() is None


def test_chat_text_success(monkeypatch):
    monkeypatch.setenv("USE_LLM_BACKSTORY", "true")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    import typeforge.llm_client as lc
    importlib.reload(lc)

    calls = []
    monkeypatch.setattr(lc, "get_client", lambda: _fake_client("  A scholar of the deep archive.  ", calls))

    out = lc.chat_text("system", "user prompt")
    assert out == "A scholar of the deep archive."
    assert len(calls) == 1
    messages = calls[0]["messages"]
    assert messages[0] == {"role": "system", "content": "system"}
    assert messages[1] == {"role": "user", "content": "user prompt"}


def test_chat_text_empty_content(monkeypatch):
    import typeforge.llm_client as lc

    monkeypatch.setattr(lc, "get_client", lambda: _fake_client("   "))
    assert lc.chat_text("sys", "x") is None


def test_chat_text_client_error(monkeypatch):
    import typeforge.llm_client as lc

    def boom(**kwargs):
        raise RuntimeError("rate limited")

    client = types.SimpleNamespace(chat=types.SimpleNamespace(completions=types.SimpleNamespace(create=boom)))
    monkeypatch.setattr(lc, "get_client", lambda: client)
    assert lc.chat_text("sys", "x") is None


def test_generate_backstory_sends_character_context(monkeypatch):
    import typeforge.llm_client as lc

    calls = []
    monkeypatch.setattr(lc, "get_client", lambda: _fake_client("Once, in the archive...", calls))

    character = _character()
    out = lc.generate_backstory(character)
    assert out == "Once, in the archive..."
    user_prompt = calls[0]["messages"][1]["content"]
    assert character.name in user_prompt
    assert calls[0]["messages"][0]["content"] == lc.BACKSTORY_PROMPT
