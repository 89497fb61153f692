import logging

import httpx

from prompt_relay.core import ErrorReason
from prompt_relay.core.config import settings

from conftest import TEST_KEY


def test_generate_template_haiku_scenario(client, upstream):
    resp = client.post(
        "/api/generateTemplate",
        json={"data": {"prompt": "Write a haiku", "systemPrompt": "You are a poet", "schema": {"type": "object"}}},
    )

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"result": upstream.body}
    assert upstream.sent_payload() == {
        "contents": [{"role": "user", "parts": [{"text": "You are a poet\n\nUser Prompt: Write a haiku"}]}],
        "generationConfig": {"responseMimeType": "application/json", "responseSchema": {"type": "object"}},
    }


def test_outbound_call_targets_configured_model_with_key(client, upstream):
    client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})

    sent = upstream.calls[0]
    assert str(sent.url).split("?")[0] == settings.generate_content_url
    assert sent.url.params["key"] == TEST_KEY


def test_revise_text_scenario(client, upstream):
    upstream.body = {"candidates": [{"content": {"parts": [{"text": "The dog runs fast."}]}}]}

    resp = client.post(
        "/api/reviseText",
        json={"data": {"systemPrompt": "Improve clarity", "textToRevise": "the dog run fast"}},
    )

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"result": upstream.body}
    payload = upstream.sent_payload()
    assert payload["contents"][0]["parts"][0]["text"] == "Improve clarity\n\nText to revise:\nthe dog run fast"
    assert "generationConfig" not in payload


def test_empty_prompt_is_invalid_argument_without_network(client, upstream):
    resp = client.post("/api/generateTemplate", json={"data": {"prompt": "", "systemPrompt": "You are a poet"}})

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["status"] == "INVALID_ARGUMENT"
    assert body["error"]["message"] == ErrorReason.MISSING_PROMPT.value
    assert upstream.calls == []


def test_missing_text_to_revise_is_invalid_argument(client, upstream):
    resp = client.post("/api/reviseText", json={"data": {"systemPrompt": "Improve clarity"}})

    assert resp.status_code == 400
    assert resp.json()["error"]["status"] == "INVALID_ARGUMENT"
    assert upstream.calls == []


def test_missing_envelope_is_invalid_argument(client, upstream):
    resp = client.post("/api/generateTemplate", json={"prompt": "p", "systemPrompt": "s"})

    assert resp.status_code == 400
    assert resp.json()["error"]["status"] == "INVALID_ARGUMENT"
    assert upstream.calls == []


def test_wrong_field_type_is_invalid_argument(client, upstream):
    resp = client.post("/api/reviseText", json={"data": {"systemPrompt": ["s"], "textToRevise": "t"}})

    assert resp.status_code == 400
    assert resp.json()["error"]["status"] == "INVALID_ARGUMENT"
    assert upstream.calls == []


def test_upstream_rejection_hides_body(client, upstream):
    upstream.status_code = 403
    upstream.body = {"error": {"code": 403, "message": "API key not valid. Please pass a valid API key."}}

    resp = client.post("/api/generateTemplate", json={"data": {"prompt": "p", "systemPrompt": "s"}})

    assert resp.status_code == 500
    assert resp.json() == {
        "error": {"status": "INTERNAL", "message": ErrorReason.TEMPLATE_FAILED.value},
    }
    assert "API key not valid" not in resp.text


def test_transport_failure_is_internal(client, upstream):
    upstream.exc = httpx.ConnectTimeout("timed out")

    resp = client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})

    assert resp.status_code == 500
    assert resp.json()["error"] == {"status": "INTERNAL", "message": ErrorReason.REVISION_FAILED.value}


def test_failure_does_not_affect_next_invocation(client, upstream):
    upstream.status_code = 500
    first = client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})
    upstream.status_code = 200
    second = client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})

    assert first.status_code == 500
    assert second.status_code == 200
    assert len(upstream.calls) == 2


def test_text_limit_from_settings(client, upstream, monkeypatch):
    monkeypatch.setattr(settings, "MAX_TEXT_CHARS", 5)

    resp = client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "too long"}})

    assert resp.status_code == 400
    assert resp.json()["error"]["details"]["fields"] == ["textToRevise"]
    assert upstream.calls == []


def test_missing_key_is_internal(client, upstream, monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)

    resp = client.post("/api/generateTemplate", json={"data": {"prompt": "p", "systemPrompt": "s"}})

    assert resp.status_code == 500
    assert resp.json()["error"]["status"] == "INTERNAL"
    assert upstream.calls == []


def test_request_id_is_echoed(client):
    resp = client.get("/api/health", headers={"x-request-id": "abc-123"})

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["x-request-id"] == "abc-123"


def test_lone_surrogate_in_request_is_forwarded(client, upstream):
    raw = b'{"data": {"systemPrompt": "s", "textToRevise": "cut emoji \\ud83d"}}'

    resp = client.post("/api/reviseText", content=raw, headers={"content-type": "application/json"})

    assert resp.status_code == 200, resp.text
    assert len(upstream.calls) == 1
    assert b"cut emoji \\ud83d" in upstream.calls[0].content
    assert upstream.sent_payload()["contents"][0]["parts"][0]["text"] == "s\n\nText to revise:\ncut emoji \ud83d"


def test_lone_surrogate_in_upstream_body_is_relayed(client, upstream):
    upstream.body = b'{"candidates": [{"text": "truncated \\ud83d"}]}'

    resp = client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})

    assert resp.status_code == 200, resp.text
    assert b"truncated \\ud83d" in resp.content
    assert resp.json() == {"result": {"candidates": [{"text": "truncated \ud83d"}]}}


def test_non_ascii_upstream_body_round_trips(client, upstream):
    upstream.body = {"candidates": [{"text": "naïve café 🐕"}]}

    resp = client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})

    assert resp.json() == {"result": upstream.body}


def test_explicit_null_schema_is_forwarded(client, upstream):
    client.post("/api/generateTemplate", json={"data": {"prompt": "p", "systemPrompt": "s", "schema": None}})

    assert upstream.sent_payload()["generationConfig"] == {
        "responseMimeType": "application/json",
        "responseSchema": None,
    }


def test_omitted_schema_is_not_forwarded(client, upstream):
    client.post("/api/generateTemplate", json={"data": {"prompt": "p", "systemPrompt": "s"}})

    assert upstream.sent_payload()["generationConfig"] == {"responseMimeType": "application/json"}


def test_access_log_records_operation_and_outcome(client, upstream, caplog):
    upstream.status_code = 503

    with caplog.at_level(logging.INFO, logger="prompt_relay.http"):
        client.post("/api/reviseText", json={"data": {"systemPrompt": "s", "textToRevise": "t"}})

    records = [r for r in caplog.records if r.name == "prompt_relay.http"]
    assert len(records) == 1
    assert records[0].getMessage() == "http.internal"
    assert records[0].operation == "reviseText"
    assert records[0].outcome == "internal"
    assert records[0].status_code == 500
