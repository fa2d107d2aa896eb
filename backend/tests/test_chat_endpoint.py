"""Tests for the REST chat endpoint."""
import httpx
import pytest


@pytest.mark.parametrize("path", ["/openai", "/"])
def test_chat_returns_normalized_completion(client, upstream, path):
    resp = client.post(path, json={"message": "Hi"})

    assert resp.status_code == 200
    assert resp.json() == {
        "content": "Hello there!",
        "model": "gpt-3.5-turbo-0125",
        "finishReason": "stop",
    }
    assert len(upstream.requests) == 1


def test_chat_forwards_message_with_system_prompt(client, upstream):
    client.post("/openai", json={"message": "  What is 2+2?  "})

    request = upstream.requests[0]
    assert request.method == "POST"
    assert request.url.path.endswith("/chat/completions")
    assert request.headers["authorization"] == "Bearer sk-test-key"

    payload = upstream.last_payload()
    assert payload["model"] == "gpt-3.5-turbo"
    assert payload["temperature"] == 0.7
    assert payload["messages"] == [
        {"role": "system", "content": "You are a helpful AI assistant."},
        {"role": "user", "content": "  What is 2+2?  "},
    ]


def test_chat_falls_back_to_requested_model(client, upstream):
    upstream.reply(body={"choices": [{"message": {"content": "ok"}, "finish_reason": "length"}]})

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.json() == {"content": "ok", "model": "gpt-3.5-turbo", "finishReason": "length"}


def test_chat_tolerates_empty_choices(client, upstream):
    upstream.reply(body={"model": "gpt-3.5-turbo", "choices": []})

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.status_code == 200
    assert resp.json() == {"content": "", "model": "gpt-3.5-turbo", "finishReason": None}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"message": ""},
        {"message": "   \n\t"},
        {"message": 42},
        {"message": None},
        ["message"],
        "message",
    ],
)
def test_chat_rejects_missing_or_blank_message(client, upstream, payload):
    resp = client.post("/openai", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"error": "`message` is required."}
    assert upstream.requests == []


@pytest.mark.parametrize("body", [b"{not json", b"", b"\xff"])
def test_chat_rejects_malformed_json(client, upstream, body):
    resp = client.post(
        "/openai", content=body, headers={"Content-Type": "application/json"}
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON body"}
    assert upstream.requests == []


def test_chat_without_api_key_fails_before_upstream(make_client, make_settings, upstream):
    client = make_client(make_settings(openai_api_key=""))

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "OPENAI_API_KEY is not configured."}
    assert upstream.requests == []


def test_chat_reports_upstream_failure(client, upstream):
    upstream.reply(status_code=429, body="rate limited")

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.status_code == 500
    error = resp.json()["error"]
    assert "429" in error
    assert "rate limited" in error
    assert len(upstream.requests) == 1


def test_chat_reports_non_json_upstream_body(client, upstream):
    upstream.reply(status_code=200, body="not json")

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "OpenAI request failed: 200 not json"}


def test_chat_reports_unreachable_upstream(client, upstream):
    upstream.error = httpx.ConnectError("connection refused")

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.status_code == 500
    assert resp.json()["error"].startswith("OpenAI request failed")


def test_chat_rejects_non_post_methods(client, upstream):
    for method in ("get", "put", "delete"):
        resp = getattr(client, method)("/openai")
        assert resp.status_code == 405
        assert resp.text == "Method Not Allowed"
    assert upstream.requests == []


def test_unknown_path_is_not_found(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.text == "Not Found"


def test_unexpected_error_maps_to_500(client, mocker):
    mocker.patch(
        "src.controllers.chat_controller.ChatController.complete",
        side_effect=RuntimeError("boom"),
    )

    resp = client.post("/openai", json={"message": "Hi"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "boom"}
