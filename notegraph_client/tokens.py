import logging
import time

import jwt

logger = logging.getLogger(__name__)


def decode_token_payload(token):
    """Read a JWT's claims without verifying its signature. Returns None if malformed."""
    if not token:
        return None
    try:
        return jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.PyJWTError as exc:
        logger.warning("Could not decode token: %s", exc)
        return None


def token_expires_within(token, grace, now=None):
    payload = decode_token_payload(token)
    if not payload or "exp" not in payload:
        return True
    now = time.time() if now is None else now
    return payload["exp"] - grace <= now
