"""
Seed data - Initial activity directory.

Provides the built-in Mergington High School activities and a loader
for JSON seed files that replace them.

JSON seed format (same shape as GET /api/activities):

    {
        "Chess Club": {
            "description": "...",
            "schedule": "...",
            "maxParticipants": 12,
            "participants": ["michael@mergington.edu"]
        }
    }
"""

import copy
import json
import logging
from pathlib import Path

from src.domain.ports import Activity

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITIES: tuple[Activity, ...] = (
    Activity(
        name="Chess Club",
        description="Learn strategies and compete in chess tournaments",
        schedule="Fridays, 3:30 PM - 5:00 PM",
        max_participants=12,
        participants=["michael@mergington.edu", "daniel@mergington.edu"],
    ),
    Activity(
        name="Programming Class",
        description="Learn programming fundamentals and build software projects",
        schedule="Tuesdays and Thursdays, 3:30 PM - 4:30 PM",
        max_participants=20,
        participants=["emma@mergington.edu", "sophia@mergington.edu"],
    ),
    Activity(
        name="Math Club",
        description="Solve challenging math problems and prepare for competitions",
        schedule="Wednesdays, 3:30 PM - 4:30 PM",
        max_participants=10,
        participants=["charlotte@mergington.edu", "harper@mergington.edu"],
    ),
    Activity(
        name="Art Workshop",
        description="Explore painting, drawing and sculpture with guided projects",
        schedule="Mondays, 3:30 PM - 5:00 PM",
        max_participants=15,
        participants=["amelia@mergington.edu"],
    ),
    Activity(
        name="Soccer Team",
        description="Join the school soccer team and compete in matches",
        schedule="Tuesdays and Thursdays, 4:00 PM - 5:30 PM",
        max_participants=22,
        participants=["liam@mergington.edu", "noah@mergington.edu"],
    ),
    Activity(
        name="Gym Class",
        description="Physical education and sports activities",
        schedule="Mondays, Wednesdays, Fridays, 2:00 PM - 3:00 PM",
        max_participants=30,
        participants=["john@mergington.edu", "olivia@mergington.edu"],
    ),
    Activity(
        name="Drama Club",
        description="Learn acting skills and participate in school plays",
        schedule="Thursdays, 4:00 PM - 5:30 PM",
        max_participants=20,
        participants=[],
    ),
)


def _is_non_blank(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_activity(activity: Activity) -> None:
    """
    Check an activity record against directory invariants.

    Raises:
        ValueError: If any invariant is violated
    """
    if not _is_non_blank(activity.name):
        raise ValueError("Activity name must be a non-empty string")
    if not _is_non_blank(activity.description):
        raise ValueError(f"{activity.name}: description must be a non-empty string")
    if not _is_non_blank(activity.schedule):
        raise ValueError(f"{activity.name}: schedule must be a non-empty string")
    capacity = activity.max_participants
    if not isinstance(capacity, int) or isinstance(capacity, bool):
        raise ValueError(f"{activity.name}: max_participants must be an integer")
    if activity.max_participants <= 0:
        raise ValueError(f"{activity.name}: max_participants must be positive")
    if not isinstance(activity.participants, list) or not all(
        _is_non_blank(p) for p in activity.participants
    ):
        raise ValueError(f"{activity.name}: participants must be non-empty strings")
    if len(set(activity.participants)) != len(activity.participants):
        raise ValueError(f"{activity.name}: duplicate participants")
    if len(activity.participants) > activity.max_participants:
        raise ValueError(f"{activity.name}: participants exceed max_participants")


def load_seed(path: Path | None = None) -> list[Activity]:
    """
    Load seed activities from a JSON file, or the built-in set.

    Args:
        path: JSON seed file. None selects DEFAULT_ACTIVITIES.

    Returns:
        Validated activity records

    Raises:
        RuntimeError: If the file cannot be read or parsed
        ValueError: If a record violates directory invariants
    """
    if path is None:
        activities = copy.deepcopy(list(DEFAULT_ACTIVITIES))
    else:
        logger.info("Loading seed activities from %s", path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            activities = [
                Activity(
                    name=name,
                    description=record["description"],
                    schedule=record["schedule"],
                    max_participants=record["maxParticipants"],
                    participants=[p.strip() for p in record.get("participants", [])],
                )
                for name, record in raw.items()
            ]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Seed file failed to load: %s - %s", path, e)
            raise RuntimeError(f"Seed file could not be loaded: {path}") from e

    for activity in activities:
        validate_activity(activity)

    return activities
