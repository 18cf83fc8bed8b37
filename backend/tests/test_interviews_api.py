from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from services import interview_store


def _seed(make_interview):
    make_interview("w1", extracted_variables={"is_woman": True, "favorite_food": "pizza"})
    make_interview("n1", extracted_variables={"is_woman": False})
    make_interview("u1", extracted_variables=None)
    make_interview("w2", extracted_variables={"is_woman": True})


def test_list_all(client, make_interview):
    _seed(make_interview)
    r = client.get("/api/interviews")
    assert r.status_code == 200
    assert [it["call_id"] for it in r.json()] == ["w1", "n1", "u1", "w2"]


def test_list_filters(client, make_interview):
    _seed(make_interview)
    r = client.get("/api/interviews?filter=woman")
    assert [it["call_id"] for it in r.json()] == ["w1", "w2"]
    r = client.get("/api/interviews?filter=not-woman")
    assert [it["call_id"] for it in r.json()] == ["n1"]


def test_unknown_filter_is_rejected(client):
    r = client.get("/api/interviews?filter=everyone")
    assert r.status_code == 422


def test_detail(client, make_interview):
    make_interview(
        "call-65",
        participant_id="P-7",
        duration=65000,
        transcript=[
            {"role": "agent", "message": "Hello"},
            {"role": "user", "message": "Hi"},
            "garbage",
            {"role": "user"},
        ],
        extracted_variables={"is_woman": True, "favorite_food": "pizza", "unexpected": 1},
    )
    r = client.get("/api/interviews/call-65")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["call_id"] == "call-65"
    assert body["participant_id"] == "P-7"
    assert body["duration_text"] == "1m 5s"
    assert body["date"] == "Oct 19"
    assert body["time"] == "03:45 PM"
    assert body["completion_status"] == "completed"
    assert body["transcript"] == [
        {"role": "agent", "message": "Hello"},
        {"role": "user", "message": "Hi"},
    ]
    assert body["extracted_variables"] == {
        "is_woman": True,
        "favorite_food": "pizza",
        "food_reason": None,
    }


def test_detail_not_found(client, make_interview):
    make_interview("abc")
    r = client.get("/api/interviews/missing")
    assert r.status_code == 404
    assert r.json()["detail"] == "Interview not found"


def test_store_failure_is_503(client, monkeypatch):
    def _boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr(interview_store, "list_all", _boom)
    r = client.get("/api/interviews")
    assert r.status_code == 503
    assert r.json()["detail"] == "Interview store unavailable"


def test_status_outside_enum_does_not_break_list(client, db):
    db.execute(
        text(
            "INSERT INTO interviews (id, call_id, created_at, duration, completion_status, transcript) "
            "VALUES ('r1', 'raw-1', '2025-10-19 15:45:00', 0, 'in-progress', '[]'), "
            "('r2', 'raw-2', '2025-10-19 14:45:00', 0, 'voicemail', '[]')"
        )
    )
    db.commit()

    r = client.get("/api/interviews")
    assert r.status_code == 200
    assert [(it["call_id"], it["completion_status"]) for it in r.json()] == [
        ("raw-1", "in_progress"),
        ("raw-2", "voicemail"),
    ]


def test_transcript_defaults_to_empty_when_ingester_omits_it(client, db):
    db.execute(
        text("INSERT INTO interviews (id, call_id, completion_status) VALUES ('s1', 'started-1', 'in_progress')")
    )
    db.commit()

    r = client.get("/api/interviews/started-1")
    assert r.status_code == 200
    assert r.json()["transcript"] == []
    assert r.json()["duration_text"] == "0s"


def test_detail_with_slash_in_call_id(client, make_interview):
    make_interview("team/42")
    r = client.get("/api/interviews/team%2F42")
    assert r.status_code == 200
    assert r.json()["call_id"] == "team/42"
