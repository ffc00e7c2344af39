"""
WebSocket Event Handlers

Binds Socket.IO events to the session gateway.

Clients connect with ``?lobby=<code>&name=<display name>`` and send actions
either as named events (``emit('submitLetter', {'letter': 'A'})``) or as a
``type``-tagged envelope through ``send``.
"""

from flask import request

from .gateway import SessionGateway


def register_websocket_handlers(socketio, registry) -> SessionGateway:
    """Register all WebSocket event handlers and return the gateway they use."""

    def emit_to(event, payload, handle):
        socketio.emit(event, payload, to=handle)

    gateway = SessionGateway(registry, emit_to)

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Bind the connection to its room, or refuse it."""
        auth = auth if isinstance(auth, dict) else {}
        room_code = request.args.get('lobby') or auth.get('lobby')
        name = request.args.get('name') or auth.get('name')
        if not gateway.connect(request.sid, room_code, name):
            return False

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Release the connection's slot."""
        gateway.disconnect(request.sid)

    @socketio.on('message')
    def handle_message(data):
        gateway.dispatch_envelope(request.sid, data)

    @socketio.on('json')
    def handle_json(data):
        gateway.dispatch_envelope(request.sid, data)

    @socketio.on('*')
    def handle_action(event, data=None):
        """Named action events; unknown names are ignored by the gateway."""
        gateway.dispatch(request.sid, event, data)

    return gateway
