from fastapi import APIRouter, Depends, HTTPException

from agentpro.container import get_session_manager
from agentpro.errors import AuthError, LoginInProgressError
from agentpro.models.api.session import (
    LoginRequest,
    RegisterAgentRequest,
    RegisterPlayerRequest,
    SelectRoleRequest,
    SessionStateResponse,
)
from agentpro.services.session_manager import SessionManager

router = APIRouter()


def _state(manager: SessionManager) -> SessionStateResponse:
    return SessionStateResponse(
        state=manager.state.value,
        is_authenticated=manager.is_authenticated,
        role_hint=manager.role_hint,
        is_loading=manager.is_loading,
        error_message=manager.error_message,
        session=manager.session,
    )


def _auth_failure(error: AuthError) -> HTTPException:
    if isinstance(error, LoginInProgressError):
        return HTTPException(status_code=409, detail=error.user_message)
    return HTTPException(status_code=401, detail=error.user_message)


@router.get("", response_model=SessionStateResponse)
async def get_session_state(
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    """Current authentication state, session and retained error."""
    return _state(manager)


@router.post("/onboarding/complete", response_model=SessionStateResponse)
async def complete_onboarding(
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    manager.complete_onboarding()
    return _state(manager)


@router.post("/role", response_model=SessionStateResponse)
async def select_role(
    request: SelectRoleRequest,
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    """Pick agent or player before signing in. The choice wins over stored data."""
    manager.select_role(request.role)
    return _state(manager)


@router.post("/login", response_model=SessionStateResponse)
async def login(
    request: LoginRequest,
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    """
    Sign in with email and password.

    Unknown emails get a demo account. Failures return 401 and leave the
    message on the session state; a concurrent attempt returns 409.
    """
    try:
        await manager.login(request.email, request.password)
    except AuthError as e:
        raise _auth_failure(e)
    return _state(manager)


@router.post("/register/agent", response_model=SessionStateResponse)
async def register_agent(
    request: RegisterAgentRequest,
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    try:
        await manager.register_agent(
            request.name, request.email, request.agency, request.password
        )
    except AuthError as e:
        raise _auth_failure(e)
    return _state(manager)


@router.post("/register/player", response_model=SessionStateResponse)
async def register_player(
    request: RegisterPlayerRequest,
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    try:
        await manager.register_player(
            request.name, request.email, request.position, request.password
        )
    except AuthError as e:
        raise _auth_failure(e)
    return _state(manager)


@router.post("/logout", response_model=SessionStateResponse)
async def logout(
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    manager.logout()
    return _state(manager)


@router.post("/reset", response_model=SessionStateResponse)
async def reset(
    manager: SessionManager = Depends(get_session_manager),
) -> SessionStateResponse:
    """Back to onboarding, as on a fresh app start."""
    manager.reset()
    return _state(manager)
