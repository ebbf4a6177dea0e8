"""
learnhub/storage.py
Per-profile durable storage with a local-storage style interface:
get_item / set_item / remove_item over string values.
"""
from __future__ import annotations

from typing import Optional

from flask import current_app

from learnhub import db
from learnhub.models import StorageEntry


class ProfileStorage:
    """Durable key/value store scoped to one browser profile."""

    def __init__(self, profile_id: str) -> None:
        if not profile_id:
            raise ValueError("profile_id is required")
        self.profile_id = profile_id

    def _row(self, key: str) -> Optional[StorageEntry]:
        # Rows may have been rewritten by a grading thread's session.
        return StorageEntry.query.filter_by(
            profile_id=self.profile_id, key=key
        ).populate_existing().first()

    def get_item(self, key: str) -> Optional[str]:
        row = self._row(key)
        return row.value if row else None

    def set_item(self, key: str, value: str) -> None:
        row = self._row(key)
        if row:
            row.value = value
        else:
            db.session.add(StorageEntry(
                profile_id=self.profile_id,
                key=key,
                value=value,
            ))
        self._commit()

    def remove_item(self, key: str) -> None:
        StorageEntry.query.filter_by(
            profile_id=self.profile_id, key=key
        ).delete()
        self._commit()

    def _commit(self) -> None:
        try:
            db.session.commit()
        except Exception:
            current_app.logger.exception("Storage write failed for %s", self.profile_id)
            db.session.rollback()
            raise

    def __repr__(self):
        return f"ProfileStorage('{self.profile_id}')"
