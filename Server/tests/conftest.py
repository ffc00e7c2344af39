import os
import random
import sys

import pytest

# Ensure the server root (containing the `teamwordle` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

from teamwordle import create_app
from teamwordle.config import TestingConfig
from teamwordle.services.room import Room
from teamwordle.services.room_registry import RoomRegistry
from teamwordle.services.word_catalog import WordCatalog
from teamwordle.websocket.gateway import SessionGateway

ANSWER = 'CRANE'
VOCABULARY = ['CRANE', 'SLATE', 'TRACE', 'CRATE', 'SPEED', 'ERASE', 'BRINE']


class RecordingEmitter:
    """Collects (event, payload, handle) tuples instead of writing to sockets."""

    def __init__(self):
        self.sent = []
        self.broken = set()

    def __call__(self, event, payload, handle):
        if handle in self.broken:
            raise ConnectionError(f'{handle} is closed')
        self.sent.append((event, payload, handle))

    def events_for(self, handle, name=None):
        return [(event, payload) for event, payload, target in self.sent
                if target == handle and (name is None or event == name)]

    def names_for(self, handle):
        return [event for event, _ in self.events_for(handle)]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def catalog():
    return WordCatalog(allowed_words=VOCABULARY, answer_words=[ANSWER], rng=random.Random(7))


@pytest.fixture()
def room(catalog):
    return Room('ROOM01', catalog, max_rounds=5)


@pytest.fixture()
def registry(catalog):
    return RoomRegistry(catalog, default_max_rounds=5)


@pytest.fixture()
def emitter():
    return RecordingEmitter()


@pytest.fixture()
def gateway(registry, emitter):
    return SessionGateway(registry, emitter)


@pytest.fixture()
def word_files(tmp_path):
    allowed = tmp_path / 'words_allowed.txt'
    answers = tmp_path / 'words_answers.txt'
    allowed.write_text('\n'.join(w.lower() for w in VOCABULARY) + '\n', encoding='utf-8')
    answers.write_text(ANSWER + '\n', encoding='utf-8')
    return str(allowed), str(answers)


@pytest.fixture()
def flask_app(word_files):
    allowed_path, answers_path = word_files

    class TestConfig(TestingConfig):
        WORDS_ALLOWED_PATH = allowed_path
        WORDS_ANSWERS_PATH = answers_path
        MAX_ROUNDS = 5

    application, socketio = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def socketio(flask_app):
    return flask_app.socketio


def join_players(room, count=5):
    """Join handles p0..p{count-1}; returns their participants in slot order."""
    return [room.join(f'p{i}', f'Player {i}')[0] for i in range(count)]


def event_names(events):
    return [event.name for event in events]
