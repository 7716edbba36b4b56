from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import models, schemas
from ..deps import get_db
from ..room_status import build_room_status

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/room-status", response_model=schemas.RoomStatusSummary)
def room_status(db: Session = Depends(get_db)):
    """
    Cleaning status of every student's room.

    Each student is reported with the latest cleaning request for their room,
    or ``Not Requested`` when the room has none. No authentication required.
    """
    students = db.query(models.User).filter(models.User.role == "student").all()
    requests = (
        db.query(models.CleaningRequest)
        .order_by(models.CleaningRequest.created_at.desc(), models.CleaningRequest.id.desc())
        .all()
    )
    return build_room_status(students, requests)
