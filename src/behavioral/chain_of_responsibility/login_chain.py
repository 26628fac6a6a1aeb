"""
Chain of Responsibility (Behavioral): user login validation.

Intent:
    Validate a login step by step instead of in one large if/elif block.
    Each handler checks one thing; on failure it stops the chain, on success
    it may enrich the request and pass it on.

Flow:
    UserExistsHandler -> PasswordHandler -> RoleHandler

Notes:
    - UserExistsHandler attaches `user_data` to the request; later handlers
      read it and do not look the user up again.
    - A request that reaches the end of the chain without a decision is
      dropped and `handle` returns None.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UserRecord:
    """Stored credentials of a known user.

    :ivar password: Expected password.
    :ivar role: Role granted to the user (e.g., "admin").
    """
    password: str
    role: str


DEFAULT_USERS: Mapping[str, UserRecord] = MappingProxyType({
    "alice": UserRecord(password="1234", role="admin"),
    "bob": UserRecord(password="abcd", role="user"),
})


@dataclass(slots=True)
class LoginRequest:
    """Mutable request threaded through the chain.

    :ivar username: Name the user logs in with.
    :ivar password: Password supplied by the user.
    :ivar user_data: Stored record, attached by UserExistsHandler.
    """
    username: str
    password: str
    user_data: Optional[UserRecord] = None


@dataclass(slots=True)
class LoginResult:
    """Outcome of a login attempt.

    :ivar success: Whether the user is logged in.
    :ivar stage: Name of the handler that decided the outcome.
    :ivar message: Short human-readable description.
    """
    success: bool
    stage: str
    message: str = ""


class BaseHandler:
    """Handler defining the chaining protocol.

    The default `handle` only forwards; concrete handlers override it and call
    `_delegate` once their own check passes.

    :param next_handler: Optional next handler in the chain.
    :param log: Logger used to report outcomes; defaults to the module logger.
    """

    stage = "base"

    def __init__(self, next_handler: Optional["BaseHandler"] = None,
                 log: Optional[logging.Logger] = None) -> None:
        self._next: Optional["BaseHandler"] = next_handler
        self._log = log or logger

    @property
    def next_handler(self) -> Optional["BaseHandler"]:
        return self._next

    def set_next(self, handler: "BaseHandler") -> "BaseHandler":
        """Set the next handler in a fluent manner and return it.

        :param handler: The next handler to delegate to.
        :return: The same handler to allow fluent chain building.
        """
        self._next = handler
        return handler

    def handle(self, request: LoginRequest) -> Optional[LoginResult]:
        """Forward the request unchanged.

        :param request: The incoming request.
        :return: Result from further down the chain, or None if nobody decided.
        """
        return self._delegate(request)

    def _delegate(self, request: LoginRequest) -> Optional[LoginResult]:
        """Delegate handling to the next handler if present.

        :param request: The incoming request.
        :return: Next handler's result, or None when there is no next handler.
        """
        if self._next is not None:
            return self._next.handle(request)
        self._log.debug("Request for '%s' reached the end of the chain unhandled", request.username)
        return None

    def _reject(self, message: str) -> LoginResult:
        self._log.warning("%s: %s", self.stage, message)
        return LoginResult(success=False, stage=self.stage, message=message)


class UserExistsHandler(BaseHandler):
    """Looks the user up and attaches the stored record to the request.

    :param users: User table; defaults to DEFAULT_USERS.
    """

    stage = "user_exists"

    def __init__(self, users: Optional[Mapping[str, UserRecord]] = None,
                 next_handler: Optional[BaseHandler] = None,
                 log: Optional[logging.Logger] = None) -> None:
        super().__init__(next_handler, log)
        self._users = DEFAULT_USERS if users is None else users

    def handle(self, request: LoginRequest) -> Optional[LoginResult]:
        record = self._users.get(request.username)
        if record is None:
            return self._reject("User does not exist!")

        request.user_data = record
        return self._delegate(request)


class PasswordHandler(BaseHandler):
    """Compares the supplied password with the attached record."""

    stage = "password"

    def handle(self, request: LoginRequest) -> Optional[LoginResult]:
        if request.user_data is None:
            return self._reject("User data missing")
        if request.user_data.password != request.password:
            return self._reject("Incorrect password!")

        return self._delegate(request)


class RoleHandler(BaseHandler):
    """Grants the login when the user holds the required role.

    :param required_role: Role the user must have.
    """

    stage = "role"

    def __init__(self, required_role: str,
                 next_handler: Optional[BaseHandler] = None,
                 log: Optional[logging.Logger] = None) -> None:
        super().__init__(next_handler, log)
        self.required_role = required_role

    def handle(self, request: LoginRequest) -> Optional[LoginResult]:
        if request.user_data is None:
            return self._reject("User data missing")
        if request.user_data.role != self.required_role:
            return self._reject("Access denied! Role is not valid.")

        self._log.info("User '%s' successfully logged in", request.username)
        return LoginResult(success=True, stage=self.stage, message="User successfully logged in!")


def build_login_chain(required_role: str = "admin",
                      users: Optional[Mapping[str, UserRecord]] = None,
                      log: Optional[logging.Logger] = None) -> BaseHandler:
    """Build the canonical chain (UserExists -> Password -> Role).

    :param required_role: Role required by the final stage.
    :param users: Optional user table for the existence stage.
    :param log: Logger shared by every handler; defaults to the module logger.
    :return: The head of the handler chain.
    """
    head = UserExistsHandler(users, log=log)
    head.set_next(PasswordHandler(log=log)).set_next(RoleHandler(required_role, log=log))
    return head


__all__ = [
    "UserRecord",
    "DEFAULT_USERS",
    "LoginRequest",
    "LoginResult",
    "BaseHandler",
    "UserExistsHandler",
    "PasswordHandler",
    "RoleHandler",
    "build_login_chain",
]
