from fastapi.testclient import TestClient
from liftlog.main import app
import uuid

client = TestClient(app)
def owner(): return f"cm_{uuid.uuid4().hex[:12]}"

def test_program_listing():
    body = client.get("/api/program").json()
    assert body["startDate"] == "2025-11-26"
    assert len(body["days"]) == 9
    assert body["days"][0]["workoutRef"] == "upper_a"
    ss = body["workouts"]["upper_a"]["coreExercises"][2]
    assert ss["kind"] == "superset"
    assert len(ss["subExercises"]) == 2
    assert body["workouts"]["upper_a"]["coreExercises"][0]["isPR"] is True

def test_cycle_for_date():
    body = client.get("/api/program/cycle", params={"date": "2025-11-28"}).json()
    assert body["cycleDay"] == 3
    assert body["autoCycleDay"] == 3
    assert body["day"]["kind"] == "rest"
    assert body["workout"] is None

def test_cycle_before_start_is_day_one():
    body = client.get("/api/program/cycle", params={"date": "2025-01-01"}).json()
    assert body["cycleDay"] == 1
    assert body["workout"]["id"] == "upper_a"

def test_cycle_override():
    body = client.get("/api/program/cycle", params={"date": "2025-11-28", "override": 7}).json()
    assert body["cycleDay"] == 7
    assert body["autoCycleDay"] == 3
    assert body["workout"]["id"] == "arms_delts"

def test_cycle_override_out_of_range():
    assert client.get("/api/program/cycle", params={"override": 10}).status_code == 422

def test_workout_lookup():
    assert client.get("/api/program/workouts/lower_a").json()["name"] == "Lower A"
    r = client.get("/api/program/workouts/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Workout not found"}

def test_draft_without_history():
    r = client.get("/api/workouts/lower_a/draft", params={"sessionId": owner(), "date": "2025-11-27"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["previous"] is None
    draft = body["session"]
    assert draft["cycleDay"] == 2
    assert draft["workoutName"] == "Lower A"
    assert draft["exercises"]["quad_mds"]["sets"] == [{"weight": "", "phaseReps": ["", "", ""]}]
    assert draft["exercises"]["back_squat"]["variation"] == "High Bar"
    assert draft["additionalExercises"]["leg_extension"]["selected"] is False

def test_draft_prefills_from_latest_same_workout():
    sid = owner()
    older = {"id": "1", "workoutId": "lower_a", "date": "2025-11-27",
             "exercises": {"back_squat": {"sets": [{"weight": 225, "reps": 5}]}}}
    newer = {"id": "2", "workoutId": "lower_a", "date": "2025-12-06",
             "exercises": {"back_squat": {"variation": "Safety Bar", "sets": [{"weight": 235, "reps": 5}]}}}
    other = {"id": "3", "workoutId": "upper_b", "date": "2025-12-08"}
    for s in (newer, older, other):
        assert client.post("/api/sessions", json={"sessionId": sid, "session": s}).status_code == 200

    body = client.get("/api/workouts/lower_a/draft", params={"sessionId": sid, "override": 2}).json()
    prev = body["previous"]
    assert prev["recordId"] == "2"
    assert prev["exercises"]["back_squat"] == {"variation": "Safety Bar", "text": "235×5"}
    assert "leg_press" not in prev["exercises"]
    assert body["session"]["cycleDay"] == 2

def test_draft_requires_session_id_and_known_workout():
    assert client.get("/api/workouts/lower_a/draft").status_code == 400
    assert client.get("/api/workouts/nope/draft", params={"sessionId": owner()}).status_code == 404
