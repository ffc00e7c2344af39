"""
WebSocket Package

Contains the session gateway and its Socket.IO event bindings.
"""

from .gateway import SessionGateway
from .handlers import register_websocket_handlers

__all__ = ['SessionGateway', 'register_websocket_handlers']
