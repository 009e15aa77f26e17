from .errors import (
    CurrentUserHomeNotFound,
    ExpandUserError,
    InvalidTildeExpression,
    UserHomeNotFound,
    UserNotFound,
)
from .parse import CurrentUser, Invalid, NamedUser, NoTilde, TildeExpression, classify
from .path import expand_user, resolve
from .users import SystemUserDirectory, UserDirectory

__all__ = [
    "CurrentUserHomeNotFound",
    "ExpandUserError",
    "InvalidTildeExpression",
    "UserHomeNotFound",
    "UserNotFound",
    "CurrentUser",
    "Invalid",
    "NamedUser",
    "NoTilde",
    "TildeExpression",
    "classify",
    "expand_user",
    "resolve",
    "SystemUserDirectory",
    "UserDirectory",
]
