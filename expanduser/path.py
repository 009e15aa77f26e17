from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from .errors import CurrentUserHomeNotFound, InvalidTildeExpression, UserHomeNotFound, UserNotFound
from .parse import CurrentUser, Invalid, NamedUser, NoTilde, PathInput, TildeExpression, classify
from .users import SystemUserDirectory, UserDirectory


def expand_user(path: PathInput, users: UserDirectory | None = None) -> Path:
    """Expand a leading ``~`` or ``~user`` into that user's home directory.

    Paths without a leading tilde come back as ``Path(path)``, so pathlib's
    own cleanup still applies (``""`` becomes ``.``, ``./x`` becomes ``x``).
    Raises an ``ExpandUserError`` subclass when the home cannot be found.
    """
    return resolve(classify(path), users)


def resolve(expr: TildeExpression, users: UserDirectory | None = None) -> Path:
    if isinstance(expr, NoTilde):
        return Path(expr.original)
    if isinstance(expr, Invalid):
        raise InvalidTildeExpression(expr.original)
    if users is None:
        users = SystemUserDirectory()

    if isinstance(expr, CurrentUser):
        home = users.current_user_home()
        if not home:
            raise CurrentUserHomeNotFound()
        return _join(home, expr.suffix)

    if not _is_lookup_name(expr.username):
        raise InvalidTildeExpression(expr.username)
    home = users.home_of(expr.username)
    if home is None:
        raise UserNotFound(expr.username)
    if not home:
        raise UserHomeNotFound(expr.username)
    return _join(home, expr.suffix)


def _is_lookup_name(username: str) -> bool:
    # pwd needs a NUL-free name that encodes to filesystem bytes
    if "\x00" in username:
        return False
    try:
        username.encode(sys.getfilesystemencoding(), "surrogateescape")
    except UnicodeEncodeError:
        return False
    return True


def _join(home: str, suffix: Optional[str]) -> Path:
    # an absolute suffix would replace home
    rest = suffix.lstrip("/") if suffix else ""
    if not rest:
        return Path(home)
    return Path(home) / rest
