"""
learnhub/state.py
Per-request access to the two profile-scoped state objects.

The browser profile is identified by a random id kept in the signed
session cookie. Each request builds its own ProgressTracker / AuthState
around that profile's storage and keeps it on flask.g; views fetch them
once and pass them along explicitly. release_profile_state drops them
again when the request ends.
"""
from __future__ import annotations

from uuid import uuid4

from flask import current_app, g, has_request_context, session

from learnhub.progress.tracker import ProgressTracker
from learnhub.storage import ProfileStorage
from learnhub.users.auth import AuthState

PROFILE_SESSION_KEY = "profile_id"


class ProviderScopeError(RuntimeError):
    """State accessor used where no browser profile is bound."""


def _require_request(accessor: str) -> None:
    if not has_request_context():
        raise ProviderScopeError(
            f"{accessor}() must be used within a request bound to a browser profile"
        )


def profile_id() -> str:
    _require_request("profile_id")
    pid = session.get(PROFILE_SESSION_KEY)
    if not pid:
        pid = uuid4().hex
        session[PROFILE_SESSION_KEY] = pid
        session.permanent = True
    return pid


def profile_storage() -> ProfileStorage:
    _require_request("profile_storage")
    if "profile_storage" not in g:
        g.profile_storage = ProfileStorage(profile_id())
    return g.profile_storage


def current_progress() -> ProgressTracker:
    _require_request("current_progress")
    if "progress_tracker" not in g:
        g.progress_tracker = ProgressTracker.load(profile_storage())
    return g.progress_tracker


def current_auth() -> AuthState:
    _require_request("current_auth")
    if "auth_state" not in g:
        g.auth_state = AuthState.load(
            profile_storage(),
            delay=current_app.config.get("AUTH_SIGN_IN_DELAY", 1.0),
        )
    return g.auth_state


def release_profile_state(exc=None) -> None:
    """teardown_request hook: g outlives the request when an app context is reused."""
    for name in ("profile_storage", "progress_tracker", "auth_state"):
        g.pop(name, None)
