"""Domain errors raised by services and rendered as ``{"error": message}``."""


class MarketplaceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(MarketplaceError):
    status_code = 401
    default_message = "Not authenticated"


class Forbidden(MarketplaceError):
    status_code = 403
    default_message = "Not authorized"


class ValidationError(MarketplaceError):
    status_code = 400
    default_message = "Missing required fields"


class NotFound(MarketplaceError):
    status_code = 404
    default_message = "Not found"


class Conflict(MarketplaceError):
    status_code = 409
    default_message = "Already exists"


class InvalidState(MarketplaceError):
    status_code = 400
    default_message = "Invalid state"


class Internal(MarketplaceError):
    pass
