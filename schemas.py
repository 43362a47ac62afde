"""
Schemas for the complaint portal

Each Pydantic model is either a stored record (User, Complaint) or a
request/response payload. Wire names follow the public API (snake_case for
records, camelCase keys for the admin listing).
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class Complaint(BaseModel):
    id: str = Field(..., min_length=1, description="Caller supplied complaint identifier")
    title: str = Field(..., description="Short summary of the complaint")
    summary: str = Field("", description="Free text details")
    severity: int = Field(0, description="Severity, range is not enforced")
    resolved: bool = False


class User(BaseModel):
    id: str = Field("", description="Assigned by the store at registration")
    secret_code: str = Field(..., min_length=1, description="Shared secret, unique per user")
    name: str = ""
    email: str = ""
    role: Literal["admin", "user"] = ROLE_USER
    complaints: List[Complaint] = []

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


class LoginRequest(BaseModel):
    secret_code: str


class ComplaintEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userID")
    user_name: str = Field(..., alias="userName")
    complaint: Complaint


class MessageResponse(BaseModel):
    message: str
