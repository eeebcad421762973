"""The Critical Mass 9-day cycle and its workouts."""
from pydantic import TypeAdapter

from liftlog.program.types import CYCLE_LENGTH, ProgramDay, Workout

_CYCLE_DAYS = [
    {"position": 1, "kind": "training", "workoutRef": "upper_a", "name": "Upper A"},
    {"position": 2, "kind": "training", "workoutRef": "lower_a", "name": "Lower A"},
    {"position": 3, "kind": "rest", "name": "Rest"},
    {"position": 4, "kind": "training", "workoutRef": "upper_b", "name": "Upper B"},
    {"position": 5, "kind": "training", "workoutRef": "lower_b", "name": "Lower B"},
    {"position": 6, "kind": "rest", "name": "Rest"},
    {"position": 7, "kind": "training", "workoutRef": "arms_delts", "name": "Arms & Delts"},
    {"position": 8, "kind": "training", "workoutRef": "posterior", "name": "Posterior Chain"},
    {"position": 9, "kind": "rest", "name": "Rest"},
]

_WORKOUTS = [
    {
        "id": "upper_a",
        "name": "Upper A",
        "focus": "Horizontal press and pull, heavy top sets",
        "warmUp": "5 min row, band pull-aparts, 2 ramp-up sets on the first press",
        "coreExercises": [
            {
                "id": "incline_press", "name": "Incline Barbell Press", "setsPrescribed": 3,
                "repRangeLabel": "6-8", "isPR": True,
                "variations": ["Barbell", "Dumbbell", "Smith Machine"],
                "notes": "First set is the PR set; back off 10% after.",
            },
            {
                "id": "chest_row", "name": "Chest-Supported Row", "setsPrescribed": 3,
                "repRangeLabel": "8-10", "variations": ["T-Bar", "Dumbbell"],
            },
            {
                "id": "press_fly_ss", "name": "Press / Fly Superset", "kind": "superset",
                "setsPrescribed": 2, "repRangeLabel": "10-12",
                "subExercises": [
                    {"name": "Flat Dumbbell Press", "repRangeLabel": "10-12"},
                    {"name": "Cable Fly", "repRangeLabel": "12-15"},
                ],
            },
            {
                "id": "pulldown", "name": "Neutral-Grip Pulldown", "setsPrescribed": "2-3",
                "repRangeLabel": "10-12",
            },
        ],
        "additionalExercises": [
            {"id": "face_pull", "name": "Face Pull", "setsPrescribed": 2, "repRangeLabel": "15-20"},
            {"id": "dips", "name": "Weighted Dips", "setsPrescribed": "2", "repRangeLabel": "8-10"},
        ],
        "replacementExercises": [
            {
                "id": "floor_press", "name": "Floor Press", "setsPrescribed": 1,
                "repRangeLabel": "5-6", "notes": "Swap in when the incline press stalls twice.",
            },
        ],
    },
    {
        "id": "lower_a",
        "name": "Lower A",
        "focus": "Squat pattern and quads",
        "warmUp": "Bike 5 min, goblet squats, leg swings",
        "coreExercises": [
            {
                "id": "back_squat", "name": "Back Squat", "setsPrescribed": 3,
                "repRangeLabel": "5-7", "isPR": True, "variations": ["High Bar", "Safety Bar"],
            },
            {
                "id": "leg_press", "name": "Leg Press", "setsPrescribed": 3,
                "repRangeLabel": "10-12",
            },
            {
                "id": "quad_mds", "name": "Quad Mechanical Drop Set", "kind": "drop_set",
                "setsPrescribed": 1, "repRangeLabel": "max reps per phase",
                "phases": ["Sissy Squat", "Heel-Elevated Goblet Squat", "Split Squat"],
            },
            {
                "id": "calf_raise", "name": "Standing Calf Raise", "setsPrescribed": 3,
                "repRangeLabel": "10-15",
            },
        ],
        "additionalExercises": [
            {"id": "leg_extension", "name": "Leg Extension", "setsPrescribed": 2, "repRangeLabel": "15-20"},
        ],
        "replacementExercises": [
            {"id": "hack_squat", "name": "Hack Squat", "setsPrescribed": 1, "repRangeLabel": "6-8"},
        ],
    },
    {
        "id": "upper_b",
        "name": "Upper B",
        "focus": "Vertical press and pull",
        "coreExercises": [
            {
                "id": "ohp", "name": "Standing Overhead Press", "setsPrescribed": 3,
                "repRangeLabel": "5-7", "isPR": True,
            },
            {
                "id": "weighted_pullup", "name": "Weighted Pull-Up", "setsPrescribed": 3,
                "repRangeLabel": "6-8", "variations": ["Pronated", "Neutral", "Chin-Up"],
            },
            {
                "id": "row_pulldown_ss", "name": "Row / Pulldown Superset", "kind": "superset",
                "setsPrescribed": 2, "repRangeLabel": "10-12",
                "subExercises": [
                    {"name": "Cable Row", "repRangeLabel": "10-12"},
                    {"name": "Straight-Arm Pulldown", "repRangeLabel": "12-15"},
                ],
            },
            {
                "id": "delt_mds", "name": "Lateral Delt Mechanical Drop Set", "kind": "drop_set",
                "setsPrescribed": 2, "repRangeLabel": "max reps per phase",
                "phases": ["Strict Lateral Raise", "Partial Lateral Raise", "Upright Row"],
            },
        ],
        "additionalExercises": [
            {"id": "shrug", "name": "Dumbbell Shrug", "setsPrescribed": 2, "repRangeLabel": "12-15"},
        ],
        "replacementExercises": [
            {"id": "seated_db_press", "name": "Seated Dumbbell Press", "setsPrescribed": 1, "repRangeLabel": "8-10"},
        ],
    },
    {
        "id": "lower_b",
        "name": "Lower B",
        "focus": "Hinge pattern and hamstrings",
        "warmUp": "Hip airplanes, light RDLs",
        "coreExercises": [
            {
                "id": "rdl", "name": "Romanian Deadlift", "setsPrescribed": 3,
                "repRangeLabel": "6-8", "isPR": True,
            },
            {
                "id": "bulgarian", "name": "Bulgarian Split Squat", "setsPrescribed": 3,
                "repRangeLabel": "8-10", "notes": "Reps are per leg.",
            },
            {
                "id": "leg_curl", "name": "Seated Leg Curl", "setsPrescribed": "3",
                "repRangeLabel": "10-12",
            },
            {
                "id": "seated_calf", "name": "Seated Calf Raise", "setsPrescribed": 3,
                "repRangeLabel": "12-15",
            },
        ],
        "additionalExercises": [
            {"id": "hip_thrust", "name": "Hip Thrust", "setsPrescribed": "2-3", "repRangeLabel": "8-12"},
            {"id": "back_ext", "name": "Back Extension", "setsPrescribed": "AMRAP", "repRangeLabel": "15+"},
        ],
        "replacementExercises": [
            {"id": "good_morning", "name": "Good Morning", "setsPrescribed": 1, "repRangeLabel": "8"},
        ],
    },
    {
        "id": "arms_delts",
        "name": "Arms & Delts",
        "focus": "Biceps, triceps and side delts",
        "coreExercises": [
            {
                "id": "cg_bench", "name": "Close-Grip Bench Press", "setsPrescribed": 3,
                "repRangeLabel": "6-8", "isPR": True,
            },
            {
                "id": "curl_pushdown_ss", "name": "Curl / Pushdown Superset", "kind": "superset",
                "setsPrescribed": 3, "repRangeLabel": "10-12",
                "subExercises": [
                    {"name": "EZ-Bar Curl", "repRangeLabel": "8-10"},
                    {"name": "Rope Pushdown", "repRangeLabel": "10-12"},
                    {"name": "Hammer Curl", "repRangeLabel": "12-15"},
                ],
            },
            {
                "id": "biceps_mds", "name": "Biceps Mechanical Drop Set", "kind": "drop_set",
                "setsPrescribed": 1, "repRangeLabel": "max reps per phase",
                "phases": ["Incline Curl", "Standing Curl", "Drag Curl"],
            },
            {
                "id": "lateral_raise", "name": "Cable Lateral Raise", "setsPrescribed": 3,
                "repRangeLabel": "12-15", "variations": ["Cable", "Dumbbell"],
            },
        ],
        "additionalExercises": [
            {"id": "wrist_curl", "name": "Wrist Curl", "setsPrescribed": 2, "repRangeLabel": "15-20"},
        ],
    },
    {
        "id": "posterior",
        "name": "Posterior Chain",
        "focus": "Deadlift and upper back",
        "warmUp": "Cat-camel, glute bridges, 3 ramp-up deadlift sets",
        "coreExercises": [
            {
                "id": "deadlift", "name": "Conventional Deadlift", "setsPrescribed": 2,
                "repRangeLabel": "3-5", "isPR": True, "variations": ["Conventional", "Trap Bar"],
            },
            {
                "id": "pendlay_row", "name": "Pendlay Row", "setsPrescribed": 3,
                "repRangeLabel": "6-8",
            },
            {
                "id": "rear_delt_ss", "name": "Rear Delt / Trap Superset", "kind": "superset",
                "setsPrescribed": 2, "repRangeLabel": "12-15",
                "subExercises": [
                    {"name": "Reverse Pec Deck", "repRangeLabel": "12-15"},
                    {"name": "Cable Shrug", "repRangeLabel": "12-15"},
                ],
            },
        ],
        "replacementExercises": [
            {"id": "rack_pull", "name": "Rack Pull", "setsPrescribed": 1, "repRangeLabel": "3-5"},
        ],
    },
]

CYCLE_DAYS: tuple[ProgramDay, ...] = tuple(TypeAdapter(list[ProgramDay]).validate_python(_CYCLE_DAYS))
WORKOUTS: dict[str, Workout] = {w["id"]: Workout.model_validate(w) for w in _WORKOUTS}

if [d.position for d in CYCLE_DAYS] != list(range(1, CYCLE_LENGTH + 1)):
    raise ValueError(f"cycle must list days 1..{CYCLE_LENGTH} in order")
for _day in CYCLE_DAYS:
    if _day.workout_ref and _day.workout_ref not in WORKOUTS:
        raise ValueError(f"day {_day.position} refers to unknown workout {_day.workout_ref!r}")

def get_day(position: int) -> ProgramDay:
    """Program day for a 1-based cycle position."""
    return CYCLE_DAYS[position - 1]

def get_workout(workout_id: str) -> Workout | None:
    return WORKOUTS.get(workout_id)
