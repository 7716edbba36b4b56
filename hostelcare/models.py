from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship, validates

from .database import Base

ROLES = ("admin", "student", "worker")
CONTACT_MAX_DIGITS = 10


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    contact = Column(BigInteger, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False)  # admin, student, worker
    room_no = Column(String, nullable=True)  # only for students

    complaints = relationship("Complaint", back_populates="student")
    cleaning_requests = relationship(
        "CleaningRequest",
        back_populates="student",
        foreign_keys="CleaningRequest.student_id",
    )

    @validates("role")
    def validate_role(self, key, role):
        if role is not None and role not in ROLES:
            raise ValueError(f"Unknown role: {role}")
        return role

    @validates("contact")
    def validate_contact(self, key, contact):
        if contact is None:
            return None
        digits = str(contact).strip()
        if not digits.isdigit() or len(digits) > CONTACT_MAX_DIGITS:
            raise ValueError(f"Contact must be numeric with at most {CONTACT_MAX_DIGITS} digits")
        return int(digits)


class Complaint(Base):
    __tablename__ = "complaints"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    category = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String, nullable=False, default="pending")  # pending, resolved
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    student = relationship("User", back_populates="complaints")


class CleaningRequest(Base):
    __tablename__ = "cleaning_requests"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    room_no = Column(String, nullable=False)
    preferred_time = Column(String, nullable=False)
    # free-form; the dashboard counts "pending" and "completed"
    status = Column(String, nullable=False, default="pending")
    assigned_worker_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    student = relationship("User", back_populates="cleaning_requests", foreign_keys=[student_id])
    assigned_worker = relationship("User", foreign_keys=[assigned_worker_id])
