"""
Room-status aggregation for the dashboard.

Joins students with the cleaning requests for their rooms. Only the most
recent request of a room counts. Rooms that have requests but no current
student are not reported.
"""
from typing import Dict, Iterable, List, Optional

from . import models

NOT_REQUESTED = "Not Requested"
NO_ROOM = "-"


def latest_request_by_room(
    requests: Iterable[models.CleaningRequest],
) -> Dict[str, models.CleaningRequest]:
    """
    Map each room number to its most recent cleaning request.

    ``requests`` must be ordered newest first; the first request seen for a
    room is kept and later ones are ignored.
    """
    latest: Dict[str, models.CleaningRequest] = {}
    for request in requests:
        if request.room_no not in latest:
            latest[request.room_no] = request
    return latest


def room_row(student: models.User, request: Optional[models.CleaningRequest]) -> dict:
    if request is None:
        return {
            "room_no": student.room_no or NO_ROOM,
            "student": student.name,
            "status": NOT_REQUESTED,
            "worker": None,
            "last_request_date": None,
        }
    return {
        "room_no": student.room_no or NO_ROOM,
        "student": student.name,
        "status": request.status,
        "worker": request.assigned_worker_id,
        "last_request_date": request.created_at,
    }


def build_room_status(
    students: Iterable[models.User],
    requests: Iterable[models.CleaningRequest],
) -> dict:
    """
    Build the dashboard payload: one row per student plus summary counts.

    Students sharing a room report the same request.
    """
    latest = latest_request_by_room(requests)
    rooms: List[dict] = [room_row(s, latest.get(s.room_no)) for s in students]

    return {
        "total_rooms": len(rooms),
        "cleaned": sum(1 for r in rooms if r["status"] == "completed"),
        "pending": sum(1 for r in rooms if r["status"] == "pending"),
        "not_requested": sum(1 for r in rooms if r["status"] == NOT_REQUESTED),
        "rooms": rooms,
    }
