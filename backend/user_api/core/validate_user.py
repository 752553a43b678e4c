"""User Validation: field rules applied before any insert or update.

Invariants:
    - PURE: no IO, no DNS lookups, no side effects
    - Every rule runs; all failures are collected (no short-circuit)
    - Errors are returned in field order: name, email, password
    - Email format is checked only when the email is non-empty

Design Decisions:
    - email-validator with deliverability and global-deliverability checks off:
      dotless domains (ana@corp) and .test domains are accepted
    - Whitespace-only values count as empty
"""

from email_validator import EmailNotValidError, validate_email

from user_api.core.domain_types import FieldError, UserRecord

NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Email is invalid."
PASSWORD_REQUIRED = "Password is required."


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    """Syntax check for an email address."""
    try:
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def validate_user(candidate: UserRecord) -> list[FieldError]:
    """Check a candidate user; an empty list means valid."""
    errors: list[FieldError] = []
    if _is_blank(candidate.name):
        errors.append(FieldError("name", NAME_REQUIRED))
    if _is_blank(candidate.email):
        errors.append(FieldError("email", EMAIL_REQUIRED))
    elif not is_valid_email(candidate.email):
        errors.append(FieldError("email", EMAIL_INVALID))
    if _is_blank(candidate.password):
        errors.append(FieldError("password", PASSWORD_REQUIRED))
    return errors
