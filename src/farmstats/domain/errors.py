"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """

    retryable = False


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class InvalidRequest(ValidationError):
    """Analytics query parameters are out of range or unknown."""


class InvalidCurrencyMix(DomainError):
    """Transactions of one farm are recorded in more than one currency."""


class UpstreamUnavailable(DomainError):
    """A record reader failed; the caller may retry the request."""

    retryable = True


def invalid_year(year: object, min_year: int, max_year: int) -> str:
    """Return message for a year outside the supported range."""
    return f"Invalid year '{year}': expected a year between {min_year} and {max_year}"


def invalid_choice(name: str, value: object, choices: list[str]) -> str:
    """Return message for a parameter that is not one of its allowed values."""
    return f"Invalid {name} '{value}': expected one of {', '.join(choices)}"


def currency_mix(currencies: set[str]) -> str:
    """Return message for transactions recorded in several currencies."""
    return (
        f"Transactions use more than one currency ({', '.join(sorted(currencies))}); "
        "analytics require a single reporting currency"
    )


def upstream_unavailable(resource: str, farm_id: str) -> str:
    """Return message when records could not be read."""
    return f"Could not load {resource} for farm '{farm_id}'; try again later"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def flock_not_found(flock_id: int) -> str:
    """Return message for missing flock."""
    return f"Flock {flock_id} not found"


def score_out_of_range(name: str, value: float) -> str:
    """Return message for a flock score outside 0-100."""
    return f"{name} must be between 0 and 100, got {value}"
