import logging

import pytest
from behavioral.chain_of_responsibility.login_chain import (
    BaseHandler, LoginRequest, LoginResult, PasswordHandler, RoleHandler, UserExistsHandler,
    UserRecord, build_login_chain,
)


@pytest.fixture
def chain():
    user_exists = UserExistsHandler()
    user_exists.set_next(PasswordHandler()).set_next(RoleHandler("admin"))
    return user_exists


@pytest.mark.unit
def test_set_next_returns_the_argument():
    a, b, c = BaseHandler(), BaseHandler(), BaseHandler()
    assert a.set_next(b).set_next(c) is c
    assert a.next_handler is b and b.next_handler is c and c.next_handler is None


@pytest.mark.unit
def test_unknown_user_stops_at_existence_check(chain, caplog):
    req = LoginRequest(username="charlie", password="1234")
    with caplog.at_level(logging.WARNING):
        res = chain.handle(req)
    assert isinstance(res, LoginResult) and res.success is False
    assert res.stage == "user_exists"
    assert req.user_data is None
    assert "User does not exist!" in caplog.text


@pytest.mark.unit
def test_wrong_password_stops_at_credential_check(chain):
    req = LoginRequest(username="alice", password="wrongpass")
    res = chain.handle(req)
    assert res.success is False and res.stage == "password"
    assert req.user_data == UserRecord("1234", "admin")


@pytest.mark.unit
def test_wrong_role_stops_at_role_check(chain):
    res = chain.handle(LoginRequest(username="bob", password="abcd"))
    assert res.success is False and res.stage == "role"
    assert "Access denied" in res.message


@pytest.mark.unit
def test_valid_admin_logs_in(chain):
    res = chain.handle(LoginRequest(username="alice", password="1234"))
    assert res.success is True and res.stage == "role"


@pytest.mark.unit
def test_builder_with_custom_users_and_role():
    users = {"bob": UserRecord("abcd", "user")}
    chain = build_login_chain(required_role="user", users=users)
    assert chain.handle(LoginRequest("bob", "abcd")).success is True
    assert chain.handle(LoginRequest("alice", "1234")).stage == "user_exists"


@pytest.mark.unit
def test_unclaimed_request_is_dropped():
    head = UserExistsHandler()
    head.set_next(PasswordHandler())
    assert head.handle(LoginRequest("alice", "1234")) is None


@pytest.mark.unit
@pytest.mark.parametrize("handler, stage", [
    (PasswordHandler(), "password"),
    (RoleHandler("admin"), "role"),
])
def test_handler_without_user_data_fails_at_its_stage(handler, stage):
    res = handler.handle(LoginRequest("alice", "1234"))
    assert res.success is False and res.stage == stage
    assert res.message == "User data missing"


@pytest.mark.unit
def test_builder_passes_injected_logger_to_every_stage():
    messages = []

    class Collect(logging.Handler):
        def emit(self, record):
            messages.append(record.getMessage())

    log = logging.getLogger("login-chain-test")
    log.setLevel(logging.DEBUG)
    handler = Collect()
    log.addHandler(handler)
    try:
        chain = build_login_chain(log=log)
        chain.handle(LoginRequest("charlie", "1234"))
        chain.handle(LoginRequest("alice", "wrongpass"))
        chain.handle(LoginRequest("bob", "abcd"))
        chain.handle(LoginRequest("alice", "1234"))
    finally:
        log.removeHandler(handler)
    assert messages == [
        "user_exists: User does not exist!",
        "password: Incorrect password!",
        "role: Access denied! Role is not valid.",
        "User 'alice' successfully logged in",
    ]
