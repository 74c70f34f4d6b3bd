"""Tests for the FastAPI surface in main.py."""

import main


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_condense_defaults(client):
    html = "<html><head><title>Home</title></head><body><p><b>Hi</b></p></body></html>"
    resp = client.post("/condense", json={"html": html})
    assert resp.status_code == 200
    data = resp.json()
    assert data["content"] == "---\ntitle: Home\n---\n<p>**Hi**</p>"
    assert data["frontmatter"] == {"title": "Home"}
    assert data["input_chars"] == len(html)
    assert data["output_chars"] == len(data["content"])
    assert 0 < data["reduction_pct"] < 100


def test_condense_with_options(client, blog_html):
    resp = client.post(
        "/condense",
        json={"html": blog_html, "options": {"core": True, "markdown": False}},
    )
    assert resp.status_code == 200
    content = resp.json()["content"]
    assert "<nav" not in content
    assert "<li>First item</li>" in content


def test_condense_empty_input(client):
    resp = client.post("/condense", json={"html": ""})
    assert resp.status_code == 200
    assert resp.json()["content"] == ""
    assert resp.json()["reduction_pct"] == 0.0


def test_rejects_unknown_fields(client):
    resp = client.post("/condense", json={"html": "<p>x</p>", "extra": 1})
    assert resp.status_code == 422


def test_rejects_unknown_options(client):
    resp = client.post("/condense", json={"html": "<p>x</p>", "options": {"keepIds": False}})
    assert resp.status_code == 422


def test_rejects_oversized_input(client, monkeypatch):
    monkeypatch.setattr(main, "MAX_INPUT_CHARS", 10)
    resp = client.post("/condense", json={"html": "<p>" + "x" * 50 + "</p>"})
    assert resp.status_code == 413


def test_reduction_pct():
    assert main.reduction_pct(0, 0) == 0.0
    assert main.reduction_pct(200, 50) == 75.0
