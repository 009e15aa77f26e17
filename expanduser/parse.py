from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class NoTilde:
    original: str


@dataclass(frozen=True)
class CurrentUser:
    suffix: Optional[str] = None


@dataclass(frozen=True)
class NamedUser:
    username: str
    suffix: Optional[str] = None


@dataclass(frozen=True)
class Invalid:
    original: str


TildeExpression = Union[NoTilde, CurrentUser, NamedUser, Invalid]

PathInput = Union[str, bytes, os.PathLike]


def classify(path: PathInput) -> TildeExpression:
    """Sort a path into one of the tilde expression shapes.

    Only a leading ``~`` is significant; tildes further along are literal.
    Usernames are not validated here, the user database decides whether a
    name exists.
    """
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        try:
            text = raw.decode(sys.getfilesystemencoding())
        except UnicodeDecodeError:
            return Invalid(raw.decode("utf-8", errors="backslashreplace"))
    else:
        text = raw

    if not text.startswith("~"):
        return NoTilde(text)
    if text == "~":
        return CurrentUser()
    if text.startswith("~/"):
        return CurrentUser(text[2:])
    username, sep, rest = text[1:].partition("/")
    if not sep:
        return NamedUser(username)
    return NamedUser(username, rest)
