from __future__ import annotations


class ExpandUserError(RuntimeError):
    pass


class CurrentUserHomeNotFound(ExpandUserError):
    def __init__(self) -> None:
        super().__init__("current user's home directory not found")


class UserNotFound(ExpandUserError):
    def __init__(self, user: str) -> None:
        super().__init__(f"user {user} not found")
        self.user = user


class UserHomeNotFound(ExpandUserError):
    def __init__(self, user: str) -> None:
        super().__init__(f"home directory for {user} not found")
        self.user = user


class InvalidTildeExpression(ExpandUserError):
    def __init__(self, expr: str) -> None:
        super().__init__(f"failed to expand tilde expression: {expr}")
        self.expr = expr
