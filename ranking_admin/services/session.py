"""
Admin Session Codec

The payload lives in Flask's signed session cookie (``admin-session``).
Cookie flags and the 24 hour lifetime come from Config. A payload that
cannot be decoded is treated as absent.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from flask import session

SESSION_KEY = 'admin'


@dataclass(frozen=True)
class SessionView:
    """Projection of an admin user that is safe to expose to templates."""
    id: int
    email: str
    name: str
    role: str

    @classmethod
    def from_user(cls, user) -> 'SessionView':
        return cls(id=user.id, email=user.email, name=user.name, role=user.role)


@dataclass(frozen=True)
class SessionPayload:
    user_id: int
    email: str
    name: str
    role: str


def write_session(user) -> SessionPayload:
    payload = SessionPayload(user_id=user.id, email=user.email, name=user.name, role=user.role)
    session.permanent = True
    session[SESSION_KEY] = asdict(payload)
    return payload


def read_session() -> Optional[SessionPayload]:
    raw = session.get(SESSION_KEY)
    if not isinstance(raw, dict):
        return None
    
    user_id = raw.get('user_id')
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        return None
    
    return SessionPayload(
        user_id=user_id,
        email=str(raw.get('email') or ''),
        name=str(raw.get('name') or ''),
        role=str(raw.get('role') or ''),
    )


def clear_session():
    session.clear()
