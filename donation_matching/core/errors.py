# donation_matching/core/errors.py

class MatchingError(Exception):
    pass

class NotFoundError(MatchingError):
    """The organization id does not resolve to a profile."""

class InvalidProfileError(MatchingError):
    """The profile exists but lacks a field matching needs (city, location)."""

class MissingOrganizationIdError(MatchingError, ValueError):
    """No organization id was given."""
