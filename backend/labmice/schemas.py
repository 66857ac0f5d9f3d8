from datetime import datetime, date
from typing import Optional, Any, List, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models speak camelCase; python code uses field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---- inputs -------------------------------------------------------------
# Every field is optional at the wire level so that the stores, not the
# request parser, decide which ones are required.


class RegisterRequest(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class PasswordUpdate(CamelModel):
    id: Optional[str] = None
    password: Optional[str] = None


class MouseCreate(CamelModel):
    name: Optional[str] = None
    sex: Optional[str] = None
    genotype: Union[List[Optional[str]], str, None] = None
    strain: Optional[str] = None
    birth_date: Optional[date] = None
    availability: Optional[bool] = True
    notes: Optional[str] = None
    user_id: Optional[str] = None
    lab_id: Optional[str] = None
    protocol_id: Optional[str] = None
    mother_id: Optional[str] = None
    father_id: Optional[str] = None
    littermates: Union[List[Optional[str]], str, None] = None


class AvailabilityUpdate(CamelModel):
    # checked for a strict bool by the store
    availability: Any = None


class NotesUpdate(CamelModel):
    notes: Optional[str] = None


class LogEntryCreate(CamelModel):
    user_id: Optional[str] = None
    lab_id: Optional[str] = None
    mice: Union[List[Optional[str]], str, None] = None
    content: Optional[str] = None


class LogEntryUpdate(CamelModel):
    content: Optional[str] = None


class LabCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None


class ProtocolCreate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    lab_id: Optional[str] = None


# ---- summaries attached by joins ---------------------------------------


class UserSummary(CamelModel):
    id: UUID
    username: str
    email: str


class LabSummary(CamelModel):
    id: UUID
    name: str


class ProtocolSummary(CamelModel):
    id: UUID
    title: str


class MouseSummary(CamelModel):
    id: UUID
    name: str
    strain: str


# ---- records ------------------------------------------------------------


class UserOut(CamelModel):
    id: UUID
    username: str
    email: str
    role: str
    lab_id: Optional[UUID] = None
    lab: Optional[LabSummary] = None
    created_at: datetime


class LabOut(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    created_at: datetime


class ProtocolOut(CamelModel):
    id: UUID
    title: str
    description: Optional[str] = None
    lab_id: Optional[UUID] = None
    lab: Optional[LabSummary] = None
    created_at: datetime


class MouseOut(CamelModel):
    id: UUID
    name: str
    sex: str
    genotype: List[str]
    strain: str
    birth_date: date
    availability: bool
    notes: Optional[str] = None
    user_id: UUID
    owner: Optional[UserSummary] = None
    lab_id: Optional[UUID] = None
    lab: Optional[LabSummary] = None
    protocol_id: Optional[UUID] = None
    protocol: Optional[ProtocolSummary] = None
    mother_id: Optional[UUID] = None
    mother: Optional[MouseSummary] = None
    father_id: Optional[UUID] = None
    father: Optional[MouseSummary] = None
    littermates: List[UUID] = []
    littermate_summaries: List[Optional[MouseSummary]] = []
    created_at: datetime


class LogEntryOut(CamelModel):
    id: UUID
    user_id: UUID
    user: Optional[UserSummary] = None
    lab_id: UUID
    lab: Optional[LabSummary] = None
    mice: List[UUID]
    mouse_summaries: List[Optional[MouseSummary]] = []
    content: str
    created_at: datetime


# ---- envelopes ----------------------------------------------------------


class MessageOut(CamelModel):
    message: str


class UserResponse(MessageOut):
    user: UserOut


class LabResponse(MessageOut):
    lab: LabOut


class LabsResponse(MessageOut):
    labs: List[LabOut]


class ProtocolResponse(MessageOut):
    protocol: ProtocolOut


class MouseResponse(MessageOut):
    mouse: MouseOut


class MiceResponse(MessageOut):
    mice: List[MouseOut]


class LogEntryResponse(MessageOut):
    log_entry: LogEntryOut


class LogEntriesResponse(MessageOut):
    log_entries: List[LogEntryOut]
