import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from .. import models, schemas
from ..deps import get_db, require_roles
from ..store import persist

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["complaints"])


@router.post("/complaint", response_model=schemas.ComplaintOut)
def create_complaint(
    complaint_in: schemas.ComplaintCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_roles("student")),
):
    """
    File a complaint as the current student. *(Student-only)*

    Every call creates a new complaint in ``pending`` status.
    """
    complaint = models.Complaint(
        student_id=current_user.id,
        category=complaint_in.category,
        description=complaint_in.description,
    )
    complaint = persist(db, complaint, "Error creating complaint")
    logger.info("Student %s filed complaint %s", current_user.id, complaint.id)
    return complaint


@router.get("/student/complaints", response_model=List[schemas.ComplaintOut])
def list_own_complaints(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_roles("student")),
):
    """List the current student's complaints. *(Student-only)*"""
    return (
        db.query(models.Complaint)
        .filter(models.Complaint.student_id == current_user.id)
        .all()
    )


@router.get("/complaints/all", response_model=List[schemas.ComplaintDetail])
def list_all_complaints(
    db: Session = Depends(get_db),
    _: models.User = Depends(require_roles("admin")),
):
    """List every complaint with its student's name, email and room. *(Admin-only)*"""
    return (
        db.query(models.Complaint)
        .options(joinedload(models.Complaint.student))
        .all()
    )


@router.put("/complaints/{complaint_id}/resolve", response_model=schemas.ComplaintDetail)
def resolve_complaint(
    complaint_id: int,
    db: Session = Depends(get_db),
    _: models.User = Depends(require_roles("admin")),
):
    """
    Mark a complaint as resolved. *(Admin-only)*

    Resolving an already resolved complaint is accepted and changes nothing.

    Raises
    ------
    HTTPException
        - 404 if the complaint does not exist.
    """
    complaint = db.get(models.Complaint, complaint_id)
    if not complaint:
        raise HTTPException(status_code=404, detail="Complaint not found")

    complaint.status = "resolved"
    complaint = persist(db, complaint, "Error updating complaint")
    logger.info("Complaint %s resolved", complaint.id)
    return complaint
