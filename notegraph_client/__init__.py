from .client import ApiError, NoteGraphClient, SessionExpired, TokenStore
from .graph import mark_roots
from .tokens import decode_token_payload, token_expires_within

__all__ = [
    "ApiError",
    "NoteGraphClient",
    "SessionExpired",
    "TokenStore",
    "decode_token_payload",
    "mark_roots",
    "token_expires_within",
]
