import threading

import pytest

from conftest import join_players
from teamwordle.config.game_settings import ROOM_CODE_ALPHABET
from teamwordle.services.exceptions import RoomFullError, RoomNotFoundError
from teamwordle.services.room_registry import RoomRegistry


def test_create_generates_unique_readable_code(registry):
    room = registry.create()

    assert len(room.room_id) == 6
    assert all(c in ROOM_CODE_ALPHABET for c in room.room_id)
    assert room.max_rounds == 5
    assert registry.get(room.room_id) is room


def test_create_retries_on_code_collision(catalog):
    codes = iter(['AAAAAA', 'AAAAAA', 'AAAAAA', 'BBBBBB'])
    registry = RoomRegistry(catalog, code_factory=lambda length: next(codes))

    first = registry.create()
    second = registry.create()

    assert first.room_id == 'AAAAAA'
    assert second.room_id == 'BBBBBB'
    assert len(registry.rooms()) == 2


@pytest.mark.parametrize('requested, expected', [
    (3, 3),
    (1, 1),
    (10, 10),
    (0, 5),
    (11, 5),
    (None, 5),
    (True, 5),
    ('3', 5),
])
def test_create_validates_round_count(registry, requested, expected):
    assert registry.create(requested).max_rounds == expected


def test_get_is_case_insensitive(registry):
    room = registry.create()

    assert registry.get(room.room_id.lower()) is room
    assert registry.get(f'  {room.room_id} ') is room
    assert registry.get('') is None
    assert registry.get(None) is None
    assert registry.get('ZZZZZZ') is None


def test_join_unknown_room_raises(registry):
    with pytest.raises(RoomNotFoundError) as exc:
        registry.join('NOPE42', 'h1', 'Alice')

    assert 'not found' in exc.value.message


def test_join_full_room_raises(registry):
    room = registry.create()
    join_players(room, 5)

    with pytest.raises(RoomFullError):
        registry.join(room.room_id, 'h6', 'Late')


def test_leave_reaps_room_nobody_played_in(registry):
    room = registry.create()
    registry.join(room.room_id, 'h1', 'Alice')

    registry.leave(room.room_id, 'h1')

    assert registry.get(room.room_id) is None


def test_leave_keeps_room_with_remaining_players(registry):
    room = registry.create()
    registry.join(room.room_id, 'h1', 'Alice')
    registry.join(room.room_id, 'h2', 'Bob')

    events = registry.leave(room.room_id, 'h1')

    assert [e.name for e in events] == ['roster']
    assert registry.get(room.room_id) is room


def test_room_with_history_survives_empty(registry):
    room = registry.create()
    join_players(room, 5)
    for i, letter in enumerate('SLATE'):
        room.submit_letter(f'p{i}', letter)

    for i in range(5):
        registry.leave(room.room_id, f'p{i}')

    assert registry.get(room.room_id) is room
    assert not registry.reap(room.room_id)


def test_fresh_room_without_players_can_be_reaped(registry):
    room = registry.create()

    assert registry.reap(room.room_id)
    assert not registry.reap(room.room_id)
    assert registry.rooms() == []


def test_concurrent_creates_never_share_a_code(catalog):
    # tiny code space forces collisions between threads
    registry = RoomRegistry(catalog, code_length=2)
    barrier = threading.Barrier(8)
    created = []

    def worker():
        barrier.wait()
        for _ in range(10):
            created.append(registry.create().room_id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(created) == 80
    assert len(set(created)) == 80
    assert len(registry.rooms()) == 80


def test_normalize_code():
    assert RoomRegistry.normalize_code(' ab12cd ') == 'AB12CD'
