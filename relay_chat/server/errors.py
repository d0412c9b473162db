"""Errors reported back to the connection that caused them."""


class ChatError(Exception):
    """Base class for client-facing errors; the message is sent as-is."""


class ValidationError(ChatError):
    """Empty or whitespace-only display name or message content."""


class UnauthenticatedError(ChatError):
    """A chat message arrived from a connection that never joined."""
