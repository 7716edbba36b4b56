import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from .. import models, schemas
from ..deps import get_db, require_roles
from ..store import persist

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["cleaning"])


def get_cleaning_request(db: Session, request_id: int) -> models.CleaningRequest:
    request = db.get(models.CleaningRequest, request_id)
    if not request:
        raise HTTPException(status_code=404, detail="Cleaning request not found")
    return request


@router.post("/clean", response_model=schemas.CleaningRequestOut)
def create_cleaning_request(
    request_in: schemas.CleaningRequestCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_roles("student")),
):
    """
    Request a room cleaning as the current student. *(Student-only)*

    The room number is taken from the body, not from the student's profile.
    Every call creates a new request in ``pending`` status.
    """
    request = models.CleaningRequest(
        student_id=current_user.id,
        room_no=request_in.room_no,
        preferred_time=request_in.preferred_time,
    )
    request = persist(db, request, "Error creating cleaning request")
    logger.info("Student %s requested cleaning of room %s", current_user.id, request.room_no)
    return request


@router.get("/student/cleanRequests", response_model=List[schemas.CleaningRequestDetail])
def list_own_cleaning_requests(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_roles("student")),
):
    """List the current student's cleaning requests with the assigned worker. *(Student-only)*"""
    return (
        db.query(models.CleaningRequest)
        .options(joinedload(models.CleaningRequest.assigned_worker))
        .filter(models.CleaningRequest.student_id == current_user.id)
        .all()
    )


@router.get("/cleaning/all", response_model=List[schemas.CleaningRequestDetail])
def list_all_cleaning_requests(
    db: Session = Depends(get_db),
    _: models.User = Depends(require_roles("admin")),
):
    """List every cleaning request with student and worker details. *(Admin-only)*"""
    return (
        db.query(models.CleaningRequest)
        .options(
            joinedload(models.CleaningRequest.student),
            joinedload(models.CleaningRequest.assigned_worker),
        )
        .all()
    )


@router.put("/cleaning/{request_id}/assign", response_model=schemas.CleaningRequestDetail)
def assign_worker(
    request_id: int,
    assignment: schemas.WorkerAssignment,
    db: Session = Depends(get_db),
    _: models.User = Depends(require_roles("admin")),
):
    """
    Assign a worker to a cleaning request. *(Admin-only)*

    Only the assignment changes; the request keeps its current status.
    Reassigning replaces the previous worker.

    Raises
    ------
    HTTPException
        - 404 if the request does not exist or ``workerId`` is not a worker.
    """
    request = get_cleaning_request(db, request_id)

    worker = db.get(models.User, assignment.worker_id)
    if not worker or worker.role != "worker":
        raise HTTPException(status_code=404, detail="Worker not found")

    request.assigned_worker_id = worker.id
    request = persist(db, request, "Error assigning worker")
    logger.info("Cleaning request %s assigned to worker %s", request.id, worker.id)
    return request


@router.get("/worker/assigned", response_model=List[schemas.CleaningRequestDetail])
def list_assigned_requests(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_roles("worker")),
):
    """List the cleaning requests assigned to the current worker. *(Worker-only)*"""
    return (
        db.query(models.CleaningRequest)
        .options(joinedload(models.CleaningRequest.student))
        .filter(models.CleaningRequest.assigned_worker_id == current_user.id)
        .all()
    )


@router.put("/cleaning/{request_id}/status", response_model=schemas.CleaningRequestDetail)
def update_status(
    request_id: int,
    status_update: schemas.StatusUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_roles("worker")),
):
    """
    Set the status of a cleaning request. *(Worker-only)*

    Any status string is accepted (in practice ``completed``). The assigned
    worker is left unchanged.

    Raises
    ------
    HTTPException
        - 404 if the request does not exist.
    """
    request = get_cleaning_request(db, request_id)

    request.status = status_update.status
    request = persist(db, request, "Error updating cleaning request")
    logger.info("Worker %s set cleaning request %s to %s", current_user.id, request.id, request.status)
    return request
