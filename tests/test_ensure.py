import asyncio
import logging

import pytest

from punjab import (
    AsyncPolicyException,
    InvalidPolicyResultException,
    Policy,
    PolicyNotAuthorizedException,
    PolicyNotFoundException,
    UnknownActionException,
    check,
    check_sync,
    ensure,
    ensure_sync,
)


class PostPolicy(Policy):
    def index(self) -> bool:
        return self.user is not None

    def update(self, force_fail: bool = False) -> bool:
        if force_fail:
            return False
        return self.user.id == self.record.author_id

    async def destroy(self) -> bool:
        await asyncio.sleep(0)
        return self.user.id == self.record.author_id


class Post:
    policy = PostPolicy

    def __init__(self, author_id: int = 1):
        self.author_id = author_id


@pytest.mark.asyncio
async def test_signed_in_users_can_index(make_user):
    assert await ensure(make_user(1), Post(), "index") is None


@pytest.mark.asyncio
async def test_null_users_cannot_index():
    with pytest.raises(PolicyNotAuthorizedException):
        await ensure(None, Post(), "index")


@pytest.mark.asyncio
async def test_author_can_update_post(make_user):
    await ensure(make_user(1), Post(1), "update")


@pytest.mark.asyncio
async def test_other_users_cannot_update_post(make_user):
    with pytest.raises(PolicyNotAuthorizedException):
        await ensure(make_user(1), Post(2), "update")


@pytest.mark.asyncio
async def test_author_can_update_post_depending_on_an_external_parameter(make_user):
    await ensure(make_user(1), Post(1), "update")
    with pytest.raises(PolicyNotAuthorizedException):
        await ensure(make_user(1), Post(1), "update", True)


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id, author_id", [(1, 1), (1, 2), (2, 2), (3, 1)])
@pytest.mark.parametrize("ability", ["update", "destroy"])
async def test_ensure_raises_exactly_when_check_denies(make_user, user_id, author_id, ability):
    user, post = make_user(user_id), Post(author_id)
    allowed = await check(user, post, ability)

    if allowed:
        await ensure(user, post, ability)
    else:
        with pytest.raises(PolicyNotAuthorizedException):
            await ensure(user, post, ability)


@pytest.mark.asyncio
async def test_denial_carries_diagnostics(make_user):
    post = Post(2)
    with pytest.raises(PolicyNotAuthorizedException) as exc_info:
        await ensure(make_user(1), post, "update")

    error = exc_info.value
    assert error.ability == "update"
    assert error.record is post
    assert error.policy_name == "PostPolicy"
    assert error.http_status_code == 403
    assert error.error_type == "insufficient_privileges"
    assert error.message == "Insufficient privileges to update Post"


@pytest.mark.asyncio
async def test_denial_is_logged(caplog):
    with caplog.at_level(logging.INFO):
        with pytest.raises(PolicyNotAuthorizedException):
            await ensure(None, Post(), "index")

    assert "[POLICY] Denied PostPolicy.index on Post" in caplog.text


@pytest.mark.asyncio
async def test_resolution_errors_are_not_reported_as_denials(make_user):
    class Orphan:
        pass

    with pytest.raises(PolicyNotFoundException):
        await ensure(make_user(1), Orphan(), "index")

    with pytest.raises(UnknownActionException):
        await ensure(make_user(1), Post(1), "publish")


@pytest.mark.asyncio
async def test_invalid_results_are_not_reported_as_denials():
    class LoosePolicy(Policy):
        def show(self):
            return None

    class Record:
        policy = LoosePolicy

    with pytest.raises(InvalidPolicyResultException):
        await ensure(None, Record(), "show")


# --------------- sync API ---------------

def test_check_sync_answers_plain_abilities(make_user):
    assert check_sync(make_user(1), Post(1), "update") is True
    assert check_sync(make_user(1), Post(1), "update", True) is False
    assert check_sync(None, Post(1), "index") is False


def test_ensure_sync_gates_plain_abilities(make_user):
    assert ensure_sync(make_user(1), Post(1), "index") is None
    with pytest.raises(PolicyNotAuthorizedException):
        ensure_sync(None, Post(1), "index")


def test_sync_api_refuses_async_abilities(make_user):
    with pytest.raises(AsyncPolicyException) as exc_info:
        check_sync(make_user(1), Post(1), "destroy")
    assert exc_info.value.member == "destroy"

    with pytest.raises(AsyncPolicyException):
        ensure_sync(make_user(1), Post(1), "destroy")


def test_sync_api_refuses_async_before_hook(make_user):
    class GuardedPolicy(Policy):
        async def before(self, ability):
            return None

        def index(self) -> bool:
            return True

    class Record:
        policy = GuardedPolicy

    with pytest.raises(AsyncPolicyException) as exc_info:
        check_sync(make_user(1), Record(), "index")
    assert exc_info.value.member == "before"


def test_sync_api_propagates_resolution_errors():
    class Orphan:
        pass

    with pytest.raises(PolicyNotFoundException):
        ensure_sync(None, Orphan(), "index")
