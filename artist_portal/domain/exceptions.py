from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class UnauthenticatedError(DomainError):
    """No valid session for the request."""


class InvalidPasscodeError(DomainError):
    """Demo passcode did not match."""


class ForbiddenError(DomainError):
    """Valid session, but the role or ownership check failed."""


class NotFoundError(DomainError):
    """Referenced entity does not exist."""


class UserNotFoundError(NotFoundError):
    """User id is unknown."""


class PlanNotFoundError(NotFoundError):
    """Plan id is unknown."""


class AddonNotFoundError(NotFoundError):
    """Add-on id is unknown."""


class ProjectNotFoundError(NotFoundError):
    """Project id is unknown."""


class DeliverableNotFoundError(NotFoundError):
    """Deliverable id is unknown."""


class BookingNotFoundError(NotFoundError):
    """Booking id is unknown."""
