"""
Concurrency and Routing Decorators

Contains decorators shared by the room state machine and the session gateway.
"""

from functools import wraps


def synchronized(method):
    """
    Run a method while holding the instance's ``_lock``.
    """
    @wraps(method)
    def decorated_function(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return decorated_function


def room_bound(method):
    """Decorator for gateway handlers that need the caller's room.

    Looks up the room the connection is bound to and passes it as ``room``.
    Calls from connections that are not bound to a live room are dropped.
    """
    @wraps(method)
    def decorated_function(self, handle, *args, **kwargs):
        room_id = self.bindings.get(handle)
        room = self.registry.get(room_id) if room_id else None
        if room is None:
            return None

        kwargs['room'] = room
        return method(self, handle, *args, **kwargs)

    return decorated_function
