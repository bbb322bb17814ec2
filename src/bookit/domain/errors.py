"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or reference does not exist."""


class TemplateNotFoundError(NotFoundError):
    """No booking template exists for the requested code."""


class InvalidMatcherError(ValidationError):
    """A booking template's matcher pattern cannot be used.

    Carries the offending template so batch matching can report it
    without aborting.
    """

    def __init__(self, message: str, template=None):
        super().__init__(message)
        self.template = template


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_code_not_found(code: str) -> str:
    """Return message for missing account by code."""
    return f"Account '{code}' not found"


def template_not_found(code: str) -> str:
    """Return message for missing booking template by code."""
    return f"BookingTemplate not found for '{code}'"


def template_id_not_found(template_id: int) -> str:
    """Return message for missing booking template by ID."""
    return f"BookingTemplate {template_id} not found"


def reference_not_found(reference_type: str, reference_id) -> str:
    """Return message for a reference that does not resolve."""
    return f"{reference_type} {reference_id} not found"


def unknown_reference_type(reference_type: str) -> str:
    """Return message for an unsupported reference type."""
    return f"Unknown reference type '{reference_type}'"


def invalid_matcher(code: str, reason: str) -> str:
    """Return message for an unusable matcher pattern."""
    return f"Invalid matcher for template '{code}': {reason}"


def duplicate_code(kind: str, code: str) -> str:
    """Return message for a duplicate code."""
    return f"{kind} with code '{code}' already exists"
