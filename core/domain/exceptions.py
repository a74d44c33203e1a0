"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class NotFoundError(DomainException):
    """Base exception for unknown entities or tokens."""

    pass


class ValidationError(DomainException):
    """Raised when input is malformed or violates a uniqueness rule."""

    def __init__(self, message: str = "Invalid request", code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class DistributorNotFoundError(NotFoundError):
    """Raised when a distributor is not found."""

    def __init__(self, message: str = "Distributor not found"):
        super().__init__(message, code="DISTRIBUTOR_NOT_FOUND")


class LocationNotFoundError(NotFoundError):
    """Raised when a location is not found."""

    def __init__(self, message: str = "Location not found"):
        super().__init__(message, code="LOCATION_NOT_FOUND")


class SellerNotFoundError(NotFoundError):
    """Raised when a seller is not found."""

    def __init__(self, message: str = "Seller not found"):
        super().__init__(message, code="SELLER_NOT_FOUND")


class DuplicateEmailError(ValidationError):
    """Raised when an account email is already in use."""

    def __init__(self, message: str = "Email already in use"):
        super().__init__(message, code="DUPLICATE_EMAIL")


class ActivationException(DomainException):
    """Base exception for activation-state errors."""

    pass


class ActivationBlockedError(ActivationException):
    """Raised when an inactive ancestor blocks an activation."""

    def __init__(self, message: str, blocker_kind: str = None, blocker_id=None):
        super().__init__(message, code="BLOCKED_BY_ANCESTOR")
        self.blocker_kind = blocker_kind
        self.blocker_id = blocker_id


class ConcurrentStatusChangeError(ActivationException):
    """Raised when the active flag changed between read and write."""

    def __init__(
        self, message: str = "Status was changed by another request, reload and retry"
    ):
        super().__init__(message, code="CONCURRENT_STATUS_CHANGE")


class AccessTokenException(DomainException):
    """Base exception for customer access token errors."""

    pass


class AccessTokenNotFoundError(AccessTokenException, NotFoundError):
    """Raised when an access token is unknown."""

    def __init__(self, message: str = "Invalid or expired access token"):
        DomainException.__init__(self, message, code="ACCESS_TOKEN_NOT_FOUND")


class AccessTokenExpiredError(AccessTokenException):
    """Raised when an access token is past its expiry."""

    def __init__(self, message: str = "Access token has expired"):
        super().__init__(message, code="ACCESS_TOKEN_EXPIRED")


class AccessTokenRequiredError(AccessTokenException, ValidationError):
    """Raised when the token parameter is missing."""

    def __init__(self, message: str = "Access token is required"):
        DomainException.__init__(self, message, code="ACCESS_TOKEN_REQUIRED")


class AuthenticationException(DomainException):
    """Base exception for authentication and authorization errors."""

    pass


class InvalidCredentialsError(AuthenticationException):
    """Raised when an email/password pair does not match an active account."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class AccountNotFoundError(NotFoundError):
    """Raised when an account is not found."""

    def __init__(self, message: str = "Account not found"):
        super().__init__(message, code="ACCOUNT_NOT_FOUND")
