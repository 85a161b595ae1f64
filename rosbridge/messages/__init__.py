"""Generic message wrapper used to carry structured JSON values."""
from .message import Message

__all__ = ["Message"]
