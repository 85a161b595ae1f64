"""Client-side value types for the rosbridge JSON protocol.

The package exposes the primitives (time, duration) and the generic message
wrapper used when embedding them into larger protocol messages. Transport,
subscriptions and service calls live outside this package.
"""

from .core.errors import ConfigurationError, ParseError, RosbridgeError
from .messages import Message
from .primitives import Clock, Duration, Primitive, Time

__all__ = [
    "Clock",
    "ConfigurationError",
    "Duration",
    "Message",
    "ParseError",
    "Primitive",
    "RosbridgeError",
    "Time",
]
