from typing import Optional

from pydantic import BaseModel, Field

from agentpro.models.domain import Role, Session


class SelectRoleRequest(BaseModel):
    """Request model for choosing a role before signing in."""

    role: Role


class LoginRequest(BaseModel):
    """Request model for signing in."""

    email: str = Field(..., description="Account email")
    password: str = Field(default="", description="Account password")


class RegisterAgentRequest(BaseModel):
    """Request model for creating an agent account."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    agency: str = Field(..., min_length=1)
    password: str = ""


class RegisterPlayerRequest(BaseModel):
    """Request model for creating a player account."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    password: str = ""


class SessionStateResponse(BaseModel):
    """Response model for the authentication state."""

    state: str  # 'onboarding', 'role_selection', 'login_form', 'authenticated'
    is_authenticated: bool
    role_hint: Optional[Role]
    is_loading: bool
    error_message: Optional[str]
    session: Optional[Session]
