from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Snake_case attributes, camelCase on the wire (``roomNo``, ``createdAt``...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ----- Users -----
class UserCreate(APIModel):
    # Fields are optional here so that a missing value is rejected by the
    # store and reported as a creation error, not as a schema error.
    name: Optional[str] = None
    email: Optional[str] = None
    contact: Optional[Union[int, str]] = None
    password: Optional[str] = None
    role: Optional[str] = None
    room_no: Optional[str] = None


class UserOut(APIModel):
    id: int
    name: str
    email: str
    contact: int
    role: str
    room_no: Optional[str] = None


class UserList(APIModel):
    users: List[UserOut]


# ----- Auth -----
class LoginRequest(APIModel):
    email: str
    password: str


class LoginResponse(APIModel):
    token: str
    user: UserOut


# ----- Expanded references -----
class StudentSummary(APIModel):
    id: int
    name: str
    email: str
    room_no: Optional[str] = None


class WorkerSummary(APIModel):
    id: int
    name: str
    email: str


# ----- Complaints -----
class ComplaintCreate(APIModel):
    category: Optional[str] = None
    description: Optional[str] = None


class ComplaintOut(APIModel):
    id: int
    student_id: int
    category: str
    description: str
    status: str
    created_at: datetime


class ComplaintDetail(ComplaintOut):
    student: Optional[StudentSummary] = None


# ----- Cleaning requests -----
class CleaningRequestCreate(APIModel):
    room_no: Optional[str] = None
    preferred_time: Optional[str] = None


class CleaningRequestOut(APIModel):
    id: int
    student_id: int
    room_no: str
    preferred_time: str
    status: str
    assigned_worker_id: Optional[int] = None
    created_at: datetime


class CleaningRequestDetail(CleaningRequestOut):
    student: Optional[StudentSummary] = None
    assigned_worker: Optional[WorkerSummary] = None


class WorkerAssignment(APIModel):
    worker_id: int


class StatusUpdate(APIModel):
    status: str


# ----- Dashboard -----
class RoomStatusRow(APIModel):
    room_no: str
    student: str
    status: str
    worker: Optional[int] = None
    last_request_date: Optional[datetime] = None


class RoomStatusSummary(APIModel):
    total_rooms: int
    cleaned: int
    pending: int
    not_requested: int
    rooms: List[RoomStatusRow]
