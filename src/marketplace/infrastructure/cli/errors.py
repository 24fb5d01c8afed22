"""Maps domain failures to CLI exit statuses.

The exit codes play the role HTTP status codes play for a web front end:
1 for a rejected request, 3 for forbidden, 4 for not found, 5 for
a conflict with existing state.
"""

from __future__ import annotations

import click

from marketplace.domain.exceptions import (
    ConcurrentUpdateError,
    DomainException,
    DuplicateStoreError,
    DuplicateUserError,
    EntityNotFoundError,
    NoStoreError,
    NotAuthorizedError,
    StoreNotApprovedError,
)

EXIT_REJECTED = 1
EXIT_FORBIDDEN = 3
EXIT_NOT_FOUND = 4
EXIT_CONFLICT = 5

_EXIT_CODES: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, EXIT_NOT_FOUND),
    (NoStoreError, EXIT_FORBIDDEN),
    (NotAuthorizedError, EXIT_FORBIDDEN),
    (StoreNotApprovedError, EXIT_FORBIDDEN),
    (DuplicateStoreError, EXIT_CONFLICT),
    (DuplicateUserError, EXIT_CONFLICT),
    (ConcurrentUpdateError, EXIT_CONFLICT),
]


def exit_code_for(exc: DomainException) -> int:
    for kind, code in _EXIT_CODES:
        if isinstance(exc, kind):
            return code
    return EXIT_REJECTED


def domain_error(exc: DomainException) -> click.ClickException:
    error = click.ClickException(str(exc))
    error.exit_code = exit_code_for(exc)
    return error


def forbidden(message: str) -> click.ClickException:
    error = click.ClickException(message)
    error.exit_code = EXIT_FORBIDDEN
    return error
