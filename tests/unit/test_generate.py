"""Unit tests for the generate completion operation."""

import pytest

from ollama_binding import GenerateResponse, operations


def test_generate_end_to_end(client, fake_host, timing_fields):
    """Test a minimal completion against a canned host reply."""
    fake_host.reply(
        "POST",
        "/api/generate",
        {
            "model": "llama3.2",
            "created_at": "2024-10-15T10:30:00.000000Z",
            "response": "hello",
            "done": True,
            "done_reason": "stop",
            "context": [1, 2, 3],
            **timing_fields,
        },
    )

    result = client.generate(model="llama3.2", prompt="hi")

    assert isinstance(result, GenerateResponse)
    assert result.response == "hello"
    assert result.done is True
    assert result.done_reason == "stop"
    assert result.context == [1, 2, 3]
    assert result.eval_count == 290
    assert result.total_duration == 5043500667


def test_generate_minimal_payload(client, fake_host):
    """Test that unset optional fields are absent, not null."""
    fake_host.reply("POST", "/api/generate", {"model": "llama3.2", "done": True})

    client.generate(model="llama3.2", prompt="hi")

    assert fake_host.last_request.url.path == "/api/generate"
    assert fake_host.last_payload() == {
        "model": "llama3.2",
        "prompt": "hi",
        "stream": False,
    }


def test_generate_full_payload(client, fake_host):
    """Test that every supplied optional field is sent."""
    fake_host.reply("POST", "/api/generate", {"model": "llava", "done": True})

    client.generate(
        model="llava",
        prompt="def add(",
        suffix="return c",
        images=["iVBORw0KGgo="],
        system="You write Python.",
        template="{{ .Prompt }}",
        context=[4, 5],
        raw=False,
        keep_alive="5m",
        format="json",
        options={"temperature": 0},
    )

    assert fake_host.last_payload() == {
        "model": "llava",
        "prompt": "def add(",
        "suffix": "return c",
        "images": ["iVBORw0KGgo="],
        "system": "You write Python.",
        "template": "{{ .Prompt }}",
        "context": [4, 5],
        "raw": False,
        "keep_alive": "5m",
        "format": "json",
        "options": {"temperature": 0},
        "stream": False,
    }


def test_generate_structured_format(client, fake_host):
    """Test that a JSON schema can be passed as format."""
    fake_host.reply("POST", "/api/generate", {"model": "llama3.2", "done": True})
    schema = {"type": "object", "properties": {"age": {"type": "integer"}}}

    client.generate(model="llama3.2", prompt="How old?", format=schema)

    assert fake_host.last_payload()["format"] == schema


def test_generate_error_body(client, fake_host):
    """Test that a host error comes back in the record."""
    fake_host.reply("POST", "/api/generate", {"error": "model not found"}, 404)

    result = client.generate(model="missing", prompt="hi")

    assert result.error == "model not found"
    assert result.response == ""
    assert result.done is False


def test_generate_rejects_unknown_keyword():
    """Test that the operation builder only accepts known request fields."""
    with pytest.raises(TypeError):
        operations.generate("llama3.2", "hi", temprature=0.2)  # type: ignore[call-arg]


def test_chat_operation_keywords():
    """Test that the chat builder takes format, options and keep_alive by name."""
    operation = operations.chat(
        "llama3.2", [], format="json", options={"seed": 1}, keep_alive="1m"
    )

    assert operation.request.to_payload() == {
        "model": "llama3.2",
        "messages": [],
        "format": "json",
        "options": {"seed": 1},
        "keep_alive": "1m",
        "stream": False,
    }
