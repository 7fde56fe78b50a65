from typing import Optional
from pydantic import BaseModel, Field

class RegisterRequest(BaseModel):
    # Optional at the schema level: absent and null values are reported
    # by the endpoint's presence check, not by body validation.
    username: Optional[str] = Field(default=None, description="Desired username")
    email: Optional[str] = Field(default=None, description="Contact email address")
    password: Optional[str] = Field(default=None, description="Plain-text password")

    def has_required_fields(self) -> bool:
        return None not in (self.username, self.email, self.password)

class RegisteredUserResponse(BaseModel):
    id: int
    username: str
    email: str

class ErrorResponse(BaseModel):
    error: str
