from __future__ import annotations

import json

import pytest

from artes_service.infrastructure.ws.registry import ConnectionRegistry
from artes_service.infrastructure.ws.router import MessageRouter
from tests.conftest import FakeSocket


@pytest.fixture
def registry():
    registry = ConnectionRegistry()
    registry.open("c1", FakeSocket())
    return registry


@pytest.fixture
def replies():
    return []


@pytest.fixture
def reply(replies):
    async def _reply(raw: str) -> None:
        replies.append(raw)

    return _reply


@pytest.mark.asyncio
async def test_register_frame_updates_registry(registry, reply, replies):
    router = MessageRouter(registry)

    await router.handle(
        "c1", json.dumps({"type": "register", "userId": "u1", "empresaId": 7}), reply,
    )

    conn = registry.get("c1")
    assert conn.user_id == "u1"
    assert conn.company_id == 7
    assert replies == []


@pytest.mark.asyncio
async def test_numeric_user_id_is_stored_as_text(registry, reply):
    router = MessageRouter(registry)

    await router.handle("c1", '{"type":"register","userId":12,"empresaId":3}', reply)

    assert registry.get("c1").user_id == "12"


@pytest.mark.asyncio
async def test_register_switches_company(registry, reply):
    router = MessageRouter(registry)

    await router.handle("c1", '{"type":"register","userId":"u1","empresaId":7}', reply)
    await router.handle("c1", '{"type":"register","userId":"u1","empresaId":8}', reply)

    assert registry.get("c1").company_id == 8
    assert len(registry) == 1


@pytest.mark.asyncio
async def test_register_without_company_clears_it(registry, reply):
    router = MessageRouter(registry)

    await router.handle("c1", '{"type":"register","userId":"u1","empresaId":7}', reply)
    await router.handle("c1", '{"type":"register","userId":"u1"}', reply)

    assert registry.get("c1").company_id is None


@pytest.mark.asyncio
async def test_register_without_user_is_ignored(registry, reply):
    router = MessageRouter(registry)

    await router.handle("c1", '{"type":"register","empresaId":7}', reply)

    conn = registry.get("c1")
    assert conn.registered is False
    assert conn.company_id is None


@pytest.mark.asyncio
async def test_ping_replies_pong_without_touching_registry(registry, reply, replies):
    router = MessageRouter(registry)
    await router.handle("c1", '{"type":"register","userId":"u1","empresaId":7}', reply)
    seen = registry.get("c1").last_seen

    await router.handle("c1", '{"type":"ping"}', reply)

    assert [json.loads(r) for r in replies] == [{"type": "pong"}]
    conn = registry.get("c1")
    assert conn.last_seen == seen
    assert conn.company_id == 7


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "{",
        '["register"]',
        '{"userId":"u1"}',
        '{"type":"register","userId":"u1","empresaId":"seven"}',
    ],
)
async def test_malformed_frames_are_dropped(registry, reply, replies, raw):
    router = MessageRouter(registry)

    await router.handle("c1", raw, reply)

    assert replies == []
    assert registry.get("c1").registered is False


@pytest.mark.asyncio
async def test_unknown_type_is_ignored(registry, reply, replies):
    router = MessageRouter(registry)

    await router.handle("c1", '{"type":"subscribe","channel":"x"}', reply)

    assert replies == []
    assert registry.get("c1").registered is False
    assert len(registry) == 1


@pytest.mark.asyncio
async def test_binary_json_frame_is_routed(registry, reply, replies):
    router = MessageRouter(registry)

    await router.handle("c1", b'{"type":"register","userId":"u1","empresaId":7}', reply)
    await router.handle("c1", b"\x80\x81\x82", reply)
    await router.handle("c1", b'{"type":"ping"}', reply)

    assert registry.get("c1").company_id == 7
    assert [json.loads(r) for r in replies] == [{"type": "pong"}]
