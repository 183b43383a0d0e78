"""Infrastructure components for simulation"""

from .message_broker import MessageBroker

__all__ = [
    'MessageBroker',
]
