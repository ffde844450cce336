"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (empty content, length bounds, bad enum values)."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a verified session and none is present."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own or lacks the role."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with an existing row."""

    def __init__(self, message: str, existing_id: str | None = None):
        self.existing_id = existing_id
        super().__init__(message)


class AuthError(DomainError):
    """Login flow failure.

    Every subclass carries the machine-readable code that the callback
    forwards to the browser as ``?error=<code>``.
    """

    default_code = "server_error"

    def __init__(self, message: str | None = None, code: str | None = None):
        self.code = code or self.default_code
        super().__init__(message or self.code)


class AuthStateMismatch(AuthError):
    """Anti-forgery state missing or different from the stored cookie."""

    default_code = "invalid_state"


class AuthCodeMissing(AuthError):
    """Provider redirected back without an authorization code."""

    default_code = "no_code"


class AuthCodeExchangeFailed(AuthError):
    """Token endpoint rejected the authorization code."""

    default_code = "token_exchange_failed"


class AuthIdentityFetchFailed(AuthError):
    """Remote profile could not be fetched with the access token."""

    default_code = "user_fetch_failed"


class AuthProfileUpsertFailed(AuthError):
    """Local account could not be written.

    Codes: update_failed, auth_creation_failed, profile_creation_failed.
    """

    default_code = "profile_creation_failed"


class AuthServiceMisconfigured(AuthError):
    """Client credentials or identity store capability missing.

    Codes: config_error, service_role_required.
    """

    default_code = "config_error"
