import asyncio
import logging
import random
import uuid
from enum import Enum
from typing import Awaitable, Callable, Optional
from uuid import UUID

from agentpro.errors import AuthError, LoginInProgressError
from agentpro.models.domain import (
    AgentProfile,
    AgentRecord,
    ContractStatus,
    PlayerProfile,
    PlayerRecord,
    Role,
    Session,
    UserRecord,
)
from agentpro.repositories.credential_repository import CredentialRepository

logger = logging.getLogger(__name__)


class AuthState(str, Enum):
    ONBOARDING = "onboarding"
    ROLE_SELECTION = "role_selection"
    LOGIN_FORM = "login_form"
    AUTHENTICATED = "authenticated"


class SessionManager:
    """Authentication state machine for the current actor.

    onboarding -> role_selection -> login_form -> authenticated, and
    ``logout`` back to role_selection. A role picked with ``select_role``
    takes precedence over the role stored with the credential record.
    """

    def __init__(
        self,
        credentials: CredentialRepository,
        login_delay: float = 0.5,
        register_delay: float = 0.3,
    ):
        self.credentials = credentials
        self.login_delay = login_delay
        self.register_delay = register_delay

        self.state = AuthState.ONBOARDING
        self.session: Optional[Session] = None
        self.role_hint: Optional[Role] = None
        self.is_loading = False
        self.error_message: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED

    def reset(self) -> None:
        """Return to the onboarding screen with nothing selected."""
        self.state = AuthState.ONBOARDING
        self.session = None
        self.role_hint = None
        self.error_message = None

    def complete_onboarding(self) -> None:
        if self.state is AuthState.AUTHENTICATED:
            logger.warning("Ignoring complete_onboarding while authenticated")
            return
        self.state = AuthState.ROLE_SELECTION

    def select_role(self, role: Role) -> None:
        if self.state not in (AuthState.ROLE_SELECTION, AuthState.LOGIN_FORM):
            logger.warning(f"Ignoring role selection in state {self.state.value}")
            return
        self.role_hint = role
        self.state = AuthState.LOGIN_FORM

    async def login(self, email: str, password: str) -> Session:
        """Sign in, provisioning a demo account for unknown emails.

        Allowed from any state; signing in before a role was picked is
        logged, and the role then comes from the stored record.
        """
        if self.state in (AuthState.ONBOARDING, AuthState.ROLE_SELECTION):
            logger.warning(f"Sign in requested from state {self.state.value}")
        return await self._authenticate(lambda: self._login(email, password))

    async def register_agent(
        self, name: str, email: str, agency: str, password: str
    ) -> Session:
        """Create (or overwrite) an agent account and sign in as it."""
        record = AgentRecord(
            id=str(uuid.uuid4()), name=name, email=email.strip(), agency=agency
        )
        return await self._authenticate(lambda: self._register(record))

    async def register_player(
        self, name: str, email: str, position: str, password: str
    ) -> Session:
        """Create (or overwrite) a player account and sign in as it."""
        record = PlayerRecord(
            name=name,
            email=email.strip(),
            position=position,
            invite_code=_invite_code(),
        )
        return await self._authenticate(lambda: self._register(record))

    def logout(self) -> None:
        if self.session is not None:
            logger.info(f"Signed out {self.session.display_name}")
        self.session = None
        self.role_hint = None
        self.error_message = None
        self.state = AuthState.ROLE_SELECTION

    async def _authenticate(self, attempt: Callable[[], Awaitable[Session]]) -> Session:
        if self.is_loading:
            raise LoginInProgressError()

        self.is_loading = True
        self.error_message = None
        try:
            session = await attempt()
        except AuthError as e:
            logger.error(f"Authentication error: {e.user_message}")
            self.error_message = e.user_message
            raise
        finally:
            self.is_loading = False

        self._apply(session)
        return session

    async def _login(self, email: str, password: str) -> Session:
        await asyncio.sleep(self.login_delay)

        email = email.strip()
        if not email:
            raise AuthError("Invalid credentials.")

        record = await self.credentials.lookup(email)
        if record is None:
            record = await self.credentials.save(self._provision(email))
            logger.info(f"Provisioned demo {record.role} account for {email}")

        return self._build_session(record, self._resolve_role(record))

    async def _register(self, record: UserRecord) -> Session:
        await asyncio.sleep(self.register_delay)
        if not record.email:
            raise AuthError("Invalid credentials.")
        await self.credentials.save(record)
        # Registration names the role explicitly
        return self._build_session(record, Role(record.role))

    def _provision(self, email: str) -> UserRecord:
        role = self.role_hint or (
            Role.AGENT if "agent" in email.lower() else Role.PLAYER
        )
        if role is Role.AGENT:
            return AgentRecord(
                id=str(uuid.uuid4()),
                name="Agent Demo",
                email=email,
                agency="Demo Agency",
            )
        return PlayerRecord(
            name="Demo Player",
            email=email,
            position="Midfielder",
            age=23,
            club="Demo FC",
            contract_status=ContractStatus.FREE,
            market_value="3M €",
            invite_code=_invite_code(),
        )

    def _resolve_role(self, record: UserRecord) -> Role:
        if self.role_hint is not None:
            return self.role_hint
        if record.role:
            return Role(record.role)
        return Role.PLAYER

    def _build_session(self, record: UserRecord, role: Role) -> Session:
        if role is Role.AGENT:
            agent = AgentProfile(
                id=str(record.id),
                name=record.name,
                email=record.email,
                agency=record.agency if isinstance(record, AgentRecord) else "Agency",
            )
            return Session(role=role, agent=agent)

        if isinstance(record, PlayerRecord):
            player = PlayerProfile(
                id=record.id,
                name=record.name,
                email=record.email,
                position=record.position,
                age=record.age,
                club=record.club,
                contract_status=record.contract_status,
                market_value=record.market_value,
                avatar=record.avatar,
                invite_code=record.invite_code,
            )
        else:
            # Agent account signing in on the player side
            defaults = PlayerRecord(name=record.name, email=record.email)
            player = PlayerProfile(
                id=_player_id_for(record.email),
                **defaults.model_dump(exclude={"role", "id"}),
            )
        return Session(role=role, player=player)

    def _apply(self, session: Session) -> None:
        self.session = session
        self.role_hint = session.role
        self.state = AuthState.AUTHENTICATED
        logger.info(f"Signed in {session.display_name} as {session.role.value}")


def _invite_code() -> str:
    return f"{random.randint(100000, 999999):06d}"


def _player_id_for(email: str) -> UUID:
    return uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{email.lower()}")
