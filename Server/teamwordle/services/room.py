"""
Room Service

The state machine behind one team game: slot locking, guess assembly,
scoring, round progression and the events that keep every connected
player's board in sync.
"""

import threading
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import (
    AUTO_OWNER_TOKEN,
    CLIENT_TOKEN_LENGTH,
    DEFAULT_MAX_ROUNDS,
    SLOT_COUNT,
)
from ..models.game import ResolvedGuess, RoomEvent, RoomStatus, Slot, fresh_slots
from ..models.participant import Participant
from ..utils.decorators import synchronized
from ..utils.game_logger import game_logger
from ..utils.helpers import (
    make_code,
    normalize_letter,
    parse_slot_index,
    pick_available_color,
    sanitize_color,
    sanitize_name,
)
from .exceptions import RoomFullError
from .scoring import score_guess
from .word_catalog import WordCatalog


class Room:
    """
    One isolated game session.

    Every public method holds the room lock for the whole transition and
    returns the events it produced; callers deliver them after the lock is
    released. A round is evaluated by whichever lock lands fifth, so five
    concurrent submissions resolve the row exactly once.
    """

    def __init__(self, room_id: str, catalog: WordCatalog, max_rounds: int = DEFAULT_MAX_ROUNDS):
        self.room_id = room_id
        self.catalog = catalog
        self.max_rounds = max_rounds
        self.answer = catalog.draw_answer()
        self.round = 0
        self.status = RoomStatus.FILLING
        self.slots: List[Slot] = fresh_slots(SLOT_COUNT)
        self.history: List[ResolvedGuess] = []
        self.players: Dict[int, Participant] = {}
        self.created_at = datetime.now()
        self._lock = threading.RLock()
        self._ensure_answer()

    @property
    def in_progress(self) -> bool:
        return self.status is RoomStatus.FILLING

    # -- membership --

    @synchronized
    def join(self, handle: str, name) -> Tuple[Participant, List[RoomEvent]]:
        """
        Bind a connection to the lowest free slot.

        Raises:
            RoomFullError: if every slot already has a connection
        """
        slot = next((i for i in range(SLOT_COUNT) if i not in self.players), None)
        if slot is None:
            raise RoomFullError(f"Lobby full ({SLOT_COUNT}/{SLOT_COUNT}).")

        participant = Participant(
            handle=handle,
            token=make_code(CLIENT_TOKEN_LENGTH),
            name=sanitize_name(name),
            color=pick_available_color(p.color for p in self.players.values()),
            slot=slot
        )
        self.players[slot] = participant
        game_logger.log_game_event(self.room_id, 'player_joined', handle, slot=slot, name=participant.name)

        return participant, [
            RoomEvent('join', self.snapshot(participant), target=handle),
            self._roster_event()
        ]

    @synchronized
    def leave(self, handle: str) -> List[RoomEvent]:
        """Release the connection's slot. Locked letters stay part of the row."""
        participant = self._participant(handle)
        if participant is None:
            return []

        slot = participant.slot
        del self.players[slot]
        events = []
        if not self.slots[slot].locked:
            had_preview = bool(self.slots[slot].letter)
            self.slots[slot] = Slot()
            if had_preview:
                events.append(self._slot_event(slot))
        events.append(self._roster_event())

        game_logger.log_game_event(self.room_id, 'player_left', handle, slot=slot,
                                   slot_locked=self.slots[slot].locked)
        return events

    def is_abandoned(self) -> bool:
        """True when nobody is connected and no round was ever played."""
        with self._lock:
            return not self.players and not self.history

    def connection_handles(self) -> List[str]:
        with self._lock:
            return [p.handle for p in self.players.values()]

    # -- player actions --

    @synchronized
    def preview_letter(self, handle: str, raw_letter) -> List[RoomEvent]:
        """Show a tentative letter in the caller's unlocked slot ("" clears it)."""
        participant = self._participant(handle)
        if participant is None or not self.in_progress:
            return []
        slot = participant.slot
        if self.slots[slot].locked:
            return []

        self.slots[slot] = Slot(locked=False, letter=normalize_letter(raw_letter))
        return [self._slot_event(slot)]

    @synchronized
    def submit_letter(self, handle: str, raw_letter) -> List[RoomEvent]:
        """Lock the caller's slot with a letter. The first lock wins."""
        participant = self._participant(handle)
        if participant is None:
            return []
        if not self.in_progress:
            return [self._error(handle, "Game over. Start a new round.")]

        letter = normalize_letter(raw_letter)
        if not letter:
            return [self._error(handle, "Enter one A-Z letter.")]

        slot = participant.slot
        if self.slots[slot].locked:
            return []

        self.slots[slot] = Slot(locked=True, letter=letter, owner_token=participant.token)
        return [self._slot_event(slot)] + self._evaluate_if_ready()

    @synchronized
    def auto_fill_slot(self, handle: str, raw_index) -> List[RoomEvent]:
        """Fill an unstaffed slot with the answer's letter at that position."""
        if not self.in_progress:
            return []
        self._ensure_answer()

        index = parse_slot_index(raw_index, SLOT_COUNT)
        if index is None:
            return [self._error(handle, "Invalid slot index.")]
        if index in self.players:
            return [self._error(handle, "That slot is occupied by a player.")]
        if self.slots[index].locked:
            return []

        self.slots[index] = Slot(locked=True, letter=self.answer[index], owner_token=AUTO_OWNER_TOKEN)
        game_logger.log_game_event(self.room_id, 'slot_auto_filled', handle, slot=index)
        return [self._slot_event(index)] + self._evaluate_if_ready()

    @synchronized
    def claim_slot(self, handle: str, raw_index) -> List[RoomEvent]:
        """
        Move the caller to a free slot.

        Rejected when the target has a connection, or when the caller's
        current slot is locked and the row has not resolved yet.
        """
        participant = self._participant(handle)
        if participant is None or not self.in_progress:
            return []

        target = parse_slot_index(raw_index, SLOT_COUNT)
        if target is None:
            return [self._error(handle, "Invalid slot index.")]
        if target in self.players:
            return [self._error(handle, "That slot is already taken.")]

        current = participant.slot
        if self.slots[current].locked and self._locked_count() < SLOT_COUNT:
            return [self._error(handle, "You've already locked this row; switch after reveal.")]

        events = []
        del self.players[current]
        if not self.slots[current].locked:
            self.slots[current] = Slot()
            events.append(self._slot_event(current))

        self.players[target] = participant
        participant.slot = target

        events.append(RoomEvent('slotClaimed', {'slot': target}, target=handle))
        events.append(self._roster_event())
        return events

    @synchronized
    def unlock_slot(self, index: int) -> List[RoomEvent]:
        """Retract a slot before the row resolves."""
        slot = parse_slot_index(index, SLOT_COUNT)
        if not self.in_progress or slot is None:
            return []
        self.slots[slot] = Slot()
        return [self._slot_event(slot)]

    @synchronized
    def unlock_my_slot(self, handle: str) -> List[RoomEvent]:
        participant = self._participant(handle)
        if participant is None:
            return []
        return self.unlock_slot(participant.slot)

    @synchronized
    def reset(self) -> List[RoomEvent]:
        """Start over with a new answer. Only honored once the game has ended."""
        if not self.status.is_terminal:
            return []

        self.answer = self.catalog.draw_answer()
        self.round = 0
        self.history = []
        self.slots = fresh_slots(SLOT_COUNT)
        self.status = RoomStatus.FILLING
        self._ensure_answer()

        game_logger.log_game_event(self.room_id, 'room_reset')
        return [RoomEvent('reset', {
            'round': 0,
            'maxRounds': self.max_rounds,
            'slots': self._slots_view()
        })]

    @synchronized
    def set_name(self, handle: str, raw_name) -> List[RoomEvent]:
        participant = self._participant(handle)
        if participant is None:
            return []
        participant.name = sanitize_name(raw_name)
        return [self._roster_event()]

    @synchronized
    def set_color(self, handle: str, raw_color) -> List[RoomEvent]:
        participant = self._participant(handle)
        if participant is None:
            return []
        color = sanitize_color(raw_color)
        if color is None:
            return [self._error(handle, "Invalid color.")]
        participant.color = color
        return [self._roster_event()]

    # -- views --

    @synchronized
    def snapshot(self, participant: Participant) -> Dict:
        """Full state sent to a connection when it joins."""
        return {
            'lobbyId': self.room_id,
            'slot': participant.slot,
            'name': participant.name,
            'color': participant.color,
            'clientId': participant.token,
            'maxRounds': self.max_rounds,
            'round': self.round,
            'status': self.status.value,
            'history': [entry.to_dict() for entry in self.history],
            'slots': self._slots_view()
        }

    @synchronized
    def roster_view(self) -> List[Dict]:
        roster = []
        for i in range(SLOT_COUNT):
            participant = self.players.get(i)
            entry = {'slot': i, 'occupied': participant is not None, 'name': None, 'color': None}
            if participant is not None:
                entry.update(participant.roster_entry())
            roster.append(entry)
        return roster

    @synchronized
    def summary(self, reveal: bool = False) -> Dict:
        """Operator view of the room (answer hidden unless reveal)."""
        return {
            'id': self.room_id,
            'round': self.round,
            'maxRounds': self.max_rounds,
            'status': self.status.value,
            'inProgress': self.in_progress,
            'answer': self.answer if reveal else '(hidden)',
            'hasAnswer': self._answer_is_valid(),
            'historyLen': len(self.history),
            'players': len(self.players),
            'createdAt': self.created_at.isoformat()
        }

    # -- internals (lock held) --

    def _evaluate_if_ready(self) -> List[RoomEvent]:
        self._ensure_answer()

        waiting_for = [i for i, slot in enumerate(self.slots) if not slot.locked]
        if waiting_for:
            return [RoomEvent('waiting', {'waitingFor': waiting_for})]

        guess = "".join(slot.letter.upper() for slot in self.slots)
        if len(guess) != SLOT_COUNT or not all(normalize_letter(c) for c in guess):
            for slot in self.slots:
                slot.locked = False
                slot.owner_token = None
            game_logger.log_anomaly(self.room_id, 'row_force_unlocked', guess=guess)
            return [RoomEvent('rowUnlocked', {'slots': self._slots_view()})]

        is_valid = self.catalog.is_allowed(guess)
        colors = score_guess(guess, self.answer)
        correct = guess == self.answer

        self.history.append(ResolvedGuess(guess=guess, colors=colors, invalid=not is_valid))
        events = [RoomEvent('reveal', {
            'guess': guess,
            'colors': [status.value for status in colors],
            'correct': correct,
            'round': self.round,
            'invalid': not is_valid
        })]
        game_logger.log_game_event(self.room_id, 'guess_revealed', round=self.round,
                                   correct=correct, invalid=not is_valid)

        if correct:
            self.status = RoomStatus.WON
            events.append(self._game_over_event('solved'))
            return events

        self.round += 1
        if self.round >= self.max_rounds:
            self.status = RoomStatus.EXHAUSTED
            events.append(self._game_over_event('out_of_rounds'))
            return events

        self.slots = fresh_slots(SLOT_COUNT)
        events.append(RoomEvent('newRow', {'round': self.round, 'slots': self._slots_view()}))
        return events

    def _game_over_event(self, reason: str) -> RoomEvent:
        game_logger.log_game_event(self.room_id, 'game_over', reason=reason, rounds_used=len(self.history))
        return RoomEvent('gameOver', {'reason': reason, 'answer': self.answer})

    def _answer_is_valid(self) -> bool:
        return isinstance(self.answer, str) and len(self.answer) == SLOT_COUNT \
            and all(normalize_letter(c) == c for c in self.answer)

    def _ensure_answer(self) -> None:
        if not self._answer_is_valid():
            broken = self.answer
            self.answer = self.catalog.draw_answer()
            game_logger.log_anomaly(self.room_id, 'answer_replaced', previous=repr(broken))

    def _participant(self, handle: Optional[str]) -> Optional[Participant]:
        for participant in self.players.values():
            if participant.handle == handle:
                return participant
        return None

    def _locked_count(self) -> int:
        return sum(1 for slot in self.slots if slot.locked)

    def _slots_view(self) -> List[Dict]:
        return [slot.to_dict() for slot in self.slots]

    def _slot_event(self, index: int) -> RoomEvent:
        return RoomEvent('slotUpdate', {'slot': index, 'slotState': self.slots[index].to_dict()})

    def _roster_event(self) -> RoomEvent:
        return RoomEvent('roster', {'players': self.roster_view()})

    @staticmethod
    def _error(handle: Optional[str], message: str) -> RoomEvent:
        return RoomEvent('error', {'message': message}, target=handle)
