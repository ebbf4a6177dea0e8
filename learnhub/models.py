from datetime import datetime, timezone
from learnhub import db


class StorageEntry(db.Model):
    """
    One durable key/value blob per browser profile × key.
    Plays the part of the browser's local storage: values are JSON text,
    every write overwrites the whole blob (last write wins).
    """
    __tablename__ = 'storage_entry'

    id         = db.Column(db.Integer, primary_key=True)
    profile_id = db.Column(db.String(64), nullable=False, index=True)
    key        = db.Column(db.String(120), nullable=False)
    value      = db.Column(db.Text, nullable=False)
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        db.UniqueConstraint('profile_id', 'key', name='uq_profile_key'),
    )

    def __repr__(self):
        return f"StorageEntry(profile={self.profile_id}, key={self.key}, {len(self.value)} chars)"
