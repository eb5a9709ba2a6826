"""hushbot - lets a chat agent decide when to go quiet in a room."""

__version__ = "0.1.0"
