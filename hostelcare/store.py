import logging

from fastapi import HTTPException
from pybreaker import CircuitBreakerError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .circuit_breaker import store_circuit_breaker

logger = logging.getLogger(__name__)


@store_circuit_breaker
def _commit(db: Session, instance):
    db.add(instance)
    db.commit()
    db.refresh(instance)
    return instance


def persist(db: Session, instance, error_detail: str):
    """
    Add or update ``instance`` and commit.

    Constraint violations roll back and become a 400 carrying
    ``error_detail``; an open circuit fails fast with 503.
    """
    try:
        return _commit(db, instance)
    except IntegrityError as exc:
        db.rollback()
        logger.info("%s: %s", error_detail, exc.orig)
        raise HTTPException(status_code=400, detail=error_detail)
    except CircuitBreakerError:
        db.rollback()
        raise HTTPException(
            status_code=503,
            detail="Store temporarily unavailable (circuit open). Please try again later.",
        )
