from __future__ import annotations

import os
import pwd
from typing import Optional, Protocol


class UserDirectory(Protocol):
    """Home directory lookups the resolver needs from the host.

    ``home_of`` returns None when the user does not exist and an empty string
    when the user exists without a home directory.
    """

    def current_user_home(self) -> Optional[str]:
        ...

    def home_of(self, username: str) -> Optional[str]:
        ...


class SystemUserDirectory:
    """Reads the passwd database, honouring ``HOME`` for the current user."""

    def current_user_home(self) -> Optional[str]:
        home = os.environ.get("HOME")
        if home:
            return home
        try:
            return pwd.getpwuid(os.geteuid()).pw_dir
        except KeyError:
            return None

    def home_of(self, username: str) -> Optional[str]:
        try:
            return pwd.getpwnam(username).pw_dir
        except KeyError:
            return None
