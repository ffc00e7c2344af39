"""
Session Gateway

Binds each real-time connection to one room, turns inbound action envelopes
into Room calls and fans the resulting events out to the room's connections.
The gateway holds no game state of its own; the Room is the source of truth.
"""

import json
from typing import Any, Callable, Dict, List, Optional

from ..models.game import RoomEvent
from ..services.exceptions import LobbyError
from ..services.room import Room
from ..services.room_registry import RoomRegistry
from ..utils.decorators import room_bound
from ..utils.game_logger import game_logger

# emit(event_name, payload, connection_handle)
Emitter = Callable[[str, Dict[str, Any], str], None]


class SessionGateway:
    """
    Routes messages between connections and rooms.

    Args:
        registry: Room registry connections are attached through
        emit: Callable delivering one event to one connection
    """

    def __init__(self, registry: RoomRegistry, emit: Emitter):
        self.registry = registry
        self._emit = emit
        self.bindings: Dict[str, str] = {}  # connection handle -> room id
        self._actions: Dict[str, Callable[[Room, str, Dict], List[RoomEvent]]] = {
            'previewLetter': lambda room, handle, data: room.preview_letter(handle, data.get('letter')),
            'submitLetter': lambda room, handle, data: room.submit_letter(handle, data.get('letter')),
            'fillSlot': lambda room, handle, data: room.auto_fill_slot(handle, data.get('slot')),
            'claimSlot': lambda room, handle, data: room.claim_slot(handle, data.get('slot')),
            'unlockMySlot': lambda room, handle, data: room.unlock_my_slot(handle),
            'requestReset': lambda room, handle, data: room.reset(),
            'setName': lambda room, handle, data: room.set_name(handle, data.get('name')),
            'setColor': lambda room, handle, data: room.set_color(handle, data.get('color')),
        }

    def connect(self, handle: str, room_code: Optional[str], name=None) -> bool:
        """
        Attach a new connection to a room.

        Returns:
            True if the connection was bound; False if it must be closed
            (the connection has already been sent an error event)
        """
        # Mark the connection live before joining so broadcasts racing with
        # the join still reach it.
        pending = RoomRegistry.normalize_code(room_code) if room_code else None
        if pending:
            self.bindings[handle] = pending

        try:
            room, participant, events = self.registry.join(room_code, handle, name)
        except LobbyError as e:
            self.bindings.pop(handle, None)
            game_logger.log_user_action(handle, 'connect_rejected', pending, reason=e.message)
            self._send(handle, RoomEvent('error', {'message': e.message}, target=handle))
            return False
        except Exception as e:
            self.bindings.pop(handle, None)
            game_logger.log_error(handle, e, 'connect', pending)
            self._send(handle, RoomEvent('error', {'message': LobbyError.message}, target=handle))
            return False

        self.bindings[handle] = room.room_id
        game_logger.log_user_action(handle, 'connect', room.room_id, slot=participant.slot)
        self.deliver(room, events)
        return True

    def disconnect(self, handle: str) -> None:
        """Release the connection's slot and let the registry reap the room."""
        room_id = self.bindings.pop(handle, None)
        if room_id is None:
            return

        room = self.registry.get(room_id)
        events = self.registry.leave(room_id, handle)
        game_logger.log_user_action(handle, 'disconnect', room_id)
        if room is not None:
            self.deliver(room, events)

    def dispatch_envelope(self, handle: str, raw) -> None:
        """Handle a ``type``-tagged envelope (JSON text or an object)."""
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode('utf-8')
            except UnicodeDecodeError:
                return
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                return
        if not isinstance(raw, dict) or not isinstance(raw.get('type'), str):
            return
        self.dispatch(handle, raw['type'], raw)

    @room_bound
    def dispatch(self, handle: str, kind: str, payload=None, room: Room = None) -> None:
        """Run one action against the caller's room. Malformed input is dropped."""
        action = self._actions.get(kind)
        if action is None:
            return
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return

        game_logger.log_user_action(handle, kind, room.room_id)
        try:
            events = action(room, handle, payload)
        except Exception as e:
            game_logger.log_error(handle, e, kind, room.room_id)
            return
        self.deliver(room, events)

    def deliver(self, room: Room, events: List[RoomEvent]) -> None:
        """
        Send events to their recipients.

        Broadcasts go to every connection bound to the room that is still
        live; a failing connection does not stop delivery to the others.
        """
        if not events:
            return
        handles = room.connection_handles()
        for event in events:
            targets = handles if event.is_broadcast else [event.target]
            for target in targets:
                if target not in self.bindings:
                    continue
                self._send(target, event)

    def _send(self, handle: str, event: RoomEvent) -> None:
        try:
            self._emit(event.name, event.payload, handle)
        except Exception as e:
            game_logger.log_error(handle, e, f'emit:{event.name}')
