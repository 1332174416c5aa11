import string

from texpass.pools import FALLBACK_WARNING, SPECIAL_CHARS
from texweb.api import app, MAX_API_COUNT, MAX_API_LENGTH


def _client():
    app.config["TESTING"] = True
    return app.test_client()


def test_home():
    resp = _client().get("/")
    assert resp.status_code == 200
    assert "version" in resp.get_json()


def test_generate_defaults():
    resp = _client().post("/generate", json={})
    data = resp.get_json()
    assert resp.status_code == 200
    assert len(data["passwords"]) == 1
    assert len(data["passwords"][0]) == 16
    assert data["purpose"] == "general"
    assert data["fallback"] is False


def test_generate_with_options():
    resp = _client().post("/generate", json={"length": 10, "purpose": "windows", "count": 4})
    data = resp.get_json()
    assert len(data["passwords"]) == 4
    for pw in data["passwords"]:
        assert len(pw) == 10
        assert not set(pw) & set("\\/:*?<>|")


def test_generate_fallback_flag():
    resp = _client().post("/generate", json={
        "lowercase": False, "uppercase": False, "numbers": False, "special": False,
    })
    data = resp.get_json()
    assert data["fallback"] is True
    assert all(c in string.ascii_lowercase for c in data["passwords"][0])


def test_bad_input():
    client = _client()
    assert client.post("/generate", json={"length": "long"}).status_code == 400
    assert client.post("/generate", json={"count": MAX_API_COUNT + 1}).status_code == 400


def test_length_limit():
    client = _client()
    resp = client.post("/generate", json={"length": MAX_API_LENGTH + 1})
    assert resp.status_code == 400
    assert "length" in resp.get_json()["error"]
    resp = client.post("/generate", json={"length": MAX_API_LENGTH})
    assert resp.status_code == 200
    assert len(resp.get_json()["passwords"][0]) == MAX_API_LENGTH


def test_class_flags_must_be_booleans():
    client = _client()
    resp = client.post("/generate", json={"special": "false", "numbers": "false"})
    assert resp.status_code == 400
    assert client.post("/generate", json={"lowercase": 0}).status_code == 400

    resp = client.post("/generate", json={"length": 40, "special": False, "numbers": False})
    assert resp.status_code == 200
    pw = resp.get_json()["passwords"][0]
    assert not any(c.isdigit() for c in pw)
    assert not set(pw) & set(SPECIAL_CHARS)


def test_fallback_logged_once_per_request(caplog):
    resp = _client().post("/generate", json={
        "count": 5, "lowercase": False, "uppercase": False, "numbers": False, "special": False,
    })
    assert resp.get_json()["fallback"] is True
    assert caplog.text.count(FALLBACK_WARNING) == 1
