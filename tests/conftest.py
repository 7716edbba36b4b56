"""
Pytest configuration and shared fixtures for testing the HostelCare API.
"""
import os

# Must be set before the application (and its settings) are imported
os.environ.setdefault("HOSTELCARE_DATABASE_URL", "sqlite://")
os.environ["HOSTELCARE_RATE_LIMIT_ENABLED"] = "false"
os.environ["HOSTELCARE_BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hostelcare.database import Base
from hostelcare.main import app
from hostelcare.deps import get_db, get_password_hash, get_token_service
from hostelcare import models


# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with the test database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def token_service():
    return get_token_service()


def make_user(db_session, name, email, password, role, contact=9876543210, room_no=None):
    user = models.User(
        name=name,
        email=email,
        contact=contact,
        hashed_password=get_password_hash(password),
        role=role,
        room_no=room_no,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session):
    """
    Create an admin user for testing.
    """
    return make_user(db_session, "Admin User", "admin@example.com", "adminpass123", "admin")


@pytest.fixture
def student_user(db_session):
    """
    Create a student living in room 101.
    """
    return make_user(
        db_session, "Student One", "student@example.com", "studentpass123", "student",
        contact=9123456780, room_no="101",
    )


@pytest.fixture
def other_student(db_session):
    """
    Create a second student living in room 102.
    """
    return make_user(
        db_session, "Student Two", "student2@example.com", "student2pass123", "student",
        contact=9123456781, room_no="102",
    )


@pytest.fixture
def worker_user(db_session):
    """
    Create a cleaning worker.
    """
    return make_user(
        db_session, "Worker User", "worker@example.com", "workerpass123", "worker",
        contact=9000000001,
    )


def login(client, email, password):
    response = client.post("/api/login", json={"email": email, "password": password})
    return response.json()["token"]


@pytest.fixture
def admin_token(client, admin_user):
    return login(client, "admin@example.com", "adminpass123")


@pytest.fixture
def student_token(client, student_user):
    return login(client, "student@example.com", "studentpass123")


@pytest.fixture
def other_student_token(client, other_student):
    return login(client, "student2@example.com", "student2pass123")


@pytest.fixture
def worker_token(client, worker_user):
    return login(client, "worker@example.com", "workerpass123")


@pytest.fixture
def sample_complaint(db_session, student_user):
    """
    Create a pending complaint filed by the student.
    """
    complaint = models.Complaint(
        student_id=student_user.id,
        category="Plumbing",
        description="Leaking tap in the bathroom",
    )
    db_session.add(complaint)
    db_session.commit()
    db_session.refresh(complaint)
    return complaint


@pytest.fixture
def sample_cleaning_request(db_session, student_user):
    """
    Create a pending, unassigned cleaning request for room 101.
    """
    request = models.CleaningRequest(
        student_id=student_user.id,
        room_no="101",
        preferred_time="10:00 AM",
    )
    db_session.add(request)
    db_session.commit()
    db_session.refresh(request)
    return request


def get_auth_header(token: str) -> dict:
    """
    Helper function to create authorization header.
    """
    return {"Authorization": f"Bearer {token}"}
