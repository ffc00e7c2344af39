"""
Lobby Exceptions

Capacity errors raised while binding a connection to a room. Input errors
inside a room are reported as error events instead.
"""


class LobbyError(Exception):
    """Base class for errors that prevent a connection from joining a room."""

    message = "Unable to join lobby."

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class RoomNotFoundError(LobbyError):
    message = "Lobby not found. Use Refresh Room Code to start one."


class RoomFullError(LobbyError):
    message = "Lobby full."
