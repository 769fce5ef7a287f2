class PicovicoError(Exception):
    """Base exception for all Picovico SDK errors."""

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class AuthenticationError(PicovicoError):
    """Raised when login tokens are missing, invalid or expired (401/403)."""


class NotFoundError(PicovicoError):
    """Raised when the requested resource does not exist (404)."""


class NotLoggedInError(AuthenticationError):
    """Raised before sending a request that needs login tokens when none are set.

    Call :meth:`Picovico.login` or :meth:`Picovico.set_login_tokens` first.
    """
