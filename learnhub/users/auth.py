"""
learnhub/users/auth.py
Demo sign-in. No credentials are checked: after a short simulated OAuth
delay a fixed demo identity is created and kept in profile storage.
"""
from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from typing import Callable, Optional

from flask_login import UserMixin

log = logging.getLogger(__name__)

AUTH_STORAGE_KEY = "ai-learning-hub-auth"


@dataclass
class AuthUser(UserMixin):
    id: str
    email: str
    name: Optional[str] = None
    photo_url: Optional[str] = None

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "AuthUser":
        if not isinstance(data, dict):
            raise TypeError("auth blob must be a JSON object")
        return cls(
            id=str(data["id"]),
            email=str(data["email"]),
            name=data.get("name"),
            photo_url=data.get("photo_url"),
        )


class AuthState:
    def __init__(self, storage, delay: float = 1.0,
                 sleep: Callable[[float], None] = time.sleep,
                 user: Optional[AuthUser] = None) -> None:
        self.storage = storage
        self.delay = delay
        self._sleep = sleep
        self.user = user
        self.is_loading = False

    @classmethod
    def load(cls, storage, **kwargs) -> "AuthState":
        raw = storage.get_item(AUTH_STORAGE_KEY)
        user = None
        if raw is not None:
            try:
                user = AuthUser.from_dict(json.loads(raw))
            except (json.JSONDecodeError, TypeError, ValueError, KeyError) as exc:
                log.warning("Stored auth user for %r is unreadable: %s", storage, exc)
        return cls(storage, user=user, **kwargs)

    @property
    def is_signed_in(self) -> bool:
        return self.user is not None

    def sign_in_with_google(self) -> AuthUser:
        """Simulated OAuth round trip. Always succeeds with the demo identity."""
        self.is_loading = True
        try:
            self._sleep(self.delay)
            user = AuthUser(
                id=f"user_{int(time.time() * 1000)}",
                email="demo@example.com",
                name="Demo User",
                photo_url=None,
            )
            self.storage.set_item(AUTH_STORAGE_KEY, json.dumps(user.to_dict()))
            self.user = user
            return user
        finally:
            self.is_loading = False

    def sign_out(self) -> None:
        self.user = None
        self.storage.remove_item(AUTH_STORAGE_KEY)
