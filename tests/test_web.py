# tests/test_web.py
import pytest

from wordpredictor import EngineConfig
from web.app import create_app


@pytest.fixture
def client(corpus_dir):
    app = create_app(EngineConfig(data_dir=str(corpus_dir), seed=2))
    app.config["TESTING"] = True
    return app.test_client()


def test_form_is_rendered(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Word or Phrase:" in resp.data
    assert b"Go!" in resp.data


def test_button_click_lists_words_in_rank_order(client):
    resp = client.post("/", data={"phrase": "thank you for the"})
    body = resp.get_data(as_text=True)
    assert "Next words:" in body
    assert body.index(">last<") < body.index(">great<")


def test_invalid_input_shows_sentinel(client):
    resp = client.post("/", data={"phrase": "see you in 2020"})
    assert b"BAD INPUT" in resp.data


def test_failure_shows_nothing(client, corpus_dir):
    (corpus_dir / "bigram.txt").unlink()
    body = client.post("/", data={"phrase": "the"}).get_data(as_text=True)
    assert "Next words:" not in body
    assert "BAD INPUT" not in body


def test_api_predict(client):
    resp = client.get("/api/predict", query_string={"text": "for the"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["status"] == "ranked"
    assert data["words"] == ["last", "great"]
    assert data["order"] == 3


def test_api_predict_statuses(client, corpus_dir):
    assert client.get("/api/predict", query_string={"text": "zebra"}).get_json() == {
        "status": "no_prediction", "words": []
    }

    resp = client.get("/api/predict", query_string={"text": "42"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "BAD INPUT"

    (corpus_dir / "bigram.txt").unlink()
    resp = client.get("/api/predict", query_string={"text": "the"})
    assert resp.status_code == 503
    assert resp.get_json()["status"] == "failure"


def test_api_stats(client):
    client.get("/api/predict", query_string={"text": "the"})
    stats = client.get("/api/stats").get_json()
    assert stats["frequencies"]["terms"] == 10
    assert stats["store"]["bigram"]["sampled"] == 7
