from fastapi.testclient import TestClient

from api.main import app
from config import settings
from _helpers import assert_common_report_fields

client = TestClient(app)


def _payload(**overrides):
    data = {
        "transcript": "Um, the situation was tense. My approach was simple.",
        "words": [
            {"word": w, "start": i * 0.5, "end": i * 0.5 + 0.25}
            for i, w in enumerate("Um, the situation was tense. My approach was simple.".split())
        ],
        "volume_history": [{"timestamp": i * 0.5, "level": 45} for i in range(10)],
        "duration_ms": 5000,
        "eye_contact_percentage": 85,
        "posture_score": 90,
    }
    data.update(overrides)
    return data


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "version": settings.APP_VERSION}


def test_performance_report_endpoint():
    r = client.post("/v1/performance-report", json=_payload())
    assert r.status_code == 200, r.text
    data = r.json()
    assert_common_report_fields(data)
    assert data["speech"]["filler_words"]["count"] == 1
    assert data["summary"]["word_count"] == 9


def test_request_id_is_echoed():
    r = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    assert "X-Process-Time-ms" in r.headers


def test_out_of_range_volume_is_rejected():
    payload = _payload(volume_history=[{"timestamp": 0.0, "level": 150}])
    r = client.post("/v1/performance-report", json=payload)
    assert r.status_code == 422


def test_strict_timings_map_to_422(monkeypatch):
    monkeypatch.setattr(settings, "SPEECHCOACH_STRICT_TIMINGS", True)
    words = [
        {"word": "a", "start": 0.0, "end": 1.0},
        {"word": "b", "start": 0.5, "end": 1.5},
    ]
    r = client.post("/v1/performance-report", json=_payload(words=words))
    assert r.status_code == 422
    body = r.json()
    assert body["error"] == "InvalidWordTimingsError"
    assert "ordering" in body["detail"]


def test_stuttering_report_endpoint():
    words = [
        {"word": w, "start": i * 0.5, "end": i * 0.5 + 0.25}
        for i, w in enumerate(["I", "I", "want", "to", "go"])
    ]
    r = client.post("/v1/stuttering-report", json={"words": words})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["repetitions"]["count"] == 1
    assert data["blocks"]["count"] == 0
    assert data["word_count"] == 5
    assert len(data["recommendations"]) >= 1
