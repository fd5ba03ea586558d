class AgentProError(Exception):
    """Base class for errors surfaced to the UI layer."""

    default_message = "Something went wrong."

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def user_message(self) -> str:
        """Human-readable message retained for display."""
        return self.message


class AuthError(AgentProError):
    """Credential lookup, provisioning or registration failed."""

    default_message = "Sign in failed."


class LoginInProgressError(AuthError):
    """A login or registration is already running for this session manager."""

    default_message = "A sign in is already in progress."


class NotFoundError(AgentProError):
    """A keyed lookup (player, chat) did not resolve."""

    default_message = "Not found."
