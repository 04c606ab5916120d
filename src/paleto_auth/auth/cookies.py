"""
paleto_auth.auth.cookies

Signed session cookie helpers.

Responsibilities:
- Wrap the opaque session id in a short HS256 JWT so a forged or edited
  cookie never reaches the session store.
- Decode and validate the cookie with strict claim requirements (iss/exp/iat/sub).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError


@dataclass(frozen=True, slots=True)
class CookieSigner:
    secret: str
    issuer: str = "paleto-auth"
    alg: str = "HS256"


class CookieValidationError(Exception):
    pass


def sign_session_id(*, signer: CookieSigner, session_id: str, ttl: timedelta) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": signer.issuer,
        "sub": session_id,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, signer.secret, algorithm=signer.alg)


def read_session_id(*, signer: CookieSigner, cookie: str) -> str:
    try:
        payload = jwt.decode(
            cookie,
            signer.secret,
            algorithms=[signer.alg],
            issuer=signer.issuer,
            options={"require": ["exp", "iat", "iss", "sub"]},
        )
    except InvalidTokenError as e:
        raise CookieValidationError(str(e)) from e
    return str(payload["sub"])


# --- Module Notes -----------------------------------------------------------
# The JWT only authenticates the id; the identity itself lives in the session store,
# so logout takes effect immediately even while the cookie is still unexpired.
