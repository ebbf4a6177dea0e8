"""
learnhub/progress/tracker.py

Learner progress bookkeeping: points → level → badges, plus the
append-only log of completed activities and modules.

A ProgressTracker is built explicitly around a storage object (anything
with get_item / set_item / remove_item) and owns one UserProgress record.
Every mutation updates the record in memory, re-evaluates badges and then
writes the whole record back to storage.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Set, Union

from learnhub.gamification import (
    Badge, ProgressCounters, calculate_level, default_badges,
    evaluate_badges, level_progress, reconcile_badges,
)
from learnhub.learn.content import PATH_MODULES

log = logging.getLogger(__name__)

STORAGE_KEY = "ai-learning-hub-progress"
MODULE_PREFIX = "module"


# ── Completion keys ───────────────────────────────────────────────────────────

class ActivityKey(NamedTuple):
    path_id: str
    module_id: str
    activity_id: str

    def encode(self) -> str:
        return f"{self.path_id}:{self.module_id}:{self.activity_id}"


class ModuleKey(NamedTuple):
    path_id: str
    module_id: str

    def encode(self) -> str:
        return f"{MODULE_PREFIX}:{self.path_id}:{self.module_id}"


CompletionKey = Union[ActivityKey, ModuleKey]


def decode_completion_key(raw: str) -> Optional[CompletionKey]:
    """Parse a stored 'p:m:a' or 'module:p:m' string. None if malformed."""
    if not isinstance(raw, str):
        return None
    parts = raw.split(":")
    if len(parts) != 3 or not all(parts):
        return None
    if parts[0] == MODULE_PREFIX:
        return ModuleKey(parts[1], parts[2])
    return ActivityKey(*parts)


class PathProgress(NamedTuple):
    completed: int
    total: int


# ── Record ────────────────────────────────────────────────────────────────────

@dataclass
class UserProgress:
    total_points: int = 0
    level: int = 1
    badges: List[Badge] = field(default_factory=default_badges)
    completed: List[CompletionKey] = field(default_factory=list)
    streak_days: int = 0
    # Stored completion strings that do not decode. Kept and counted, never queried.
    unreadable: List[str] = field(default_factory=list)

    def counters(self) -> ProgressCounters:
        logged = len(self.completed) + len(self.unreadable)
        return ProgressCounters(self.total_points, logged, self.streak_days)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_points":         self.total_points,
            "level":                self.level,
            "badges":               [b.to_dict() for b in self.badges],
            "completed_activities": [k.encode() for k in self.completed] + self.unreadable,
            "streak_days":          self.streak_days,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProgress":
        """
        Rebuild from a stored blob. Badges are reconciled against the
        current catalogue and the level is recomputed from points.
        Raises ValueError / TypeError on anything that is not a progress blob.
        """
        if not isinstance(data, dict):
            raise TypeError("progress blob must be a JSON object")

        points = int(data.get("total_points", 0))
        streak = int(data.get("streak_days", 0))
        if points < 0 or streak < 0:
            raise ValueError("negative counters in stored progress")

        raw_badges = data.get("badges") or []
        raw_keys = data.get("completed_activities") or []
        if not isinstance(raw_badges, list) or not isinstance(raw_keys, list):
            raise TypeError("badges and completed_activities must be lists")

        completed: List[CompletionKey] = []
        unreadable: List[str] = []
        seen: Set[CompletionKey] = set()
        for raw in raw_keys:
            key = decode_completion_key(raw)
            if key is None:
                if not isinstance(raw, str):
                    raise TypeError(f"completion key must be a string, got {raw!r}")
                log.warning("Keeping unreadable completion key %r", raw)
                if raw not in unreadable:
                    unreadable.append(raw)
                continue
            if key not in seen:
                seen.add(key)
                completed.append(key)

        return cls(
            total_points=points,
            level=calculate_level(points),
            badges=reconcile_badges(raw_badges),
            completed=completed,
            streak_days=streak,
            unreadable=unreadable,
        )


# ── Tracker ───────────────────────────────────────────────────────────────────

class ProgressTracker:
    def __init__(self, storage, progress: Optional[UserProgress] = None) -> None:
        self.storage = storage
        self.progress = progress or UserProgress()
        self._seen: Set[CompletionKey] = set(self.progress.completed)

    @classmethod
    def load(cls, storage) -> "ProgressTracker":
        """Read the stored record; fall back to defaults when absent or corrupt."""
        raw = storage.get_item(STORAGE_KEY)
        if raw is None:
            return cls(storage)
        try:
            progress = UserProgress.from_dict(json.loads(raw))
        except (json.JSONDecodeError, TypeError, ValueError, KeyError) as exc:
            log.warning("Stored progress for %r is unreadable, using defaults: %s",
                        storage, exc)
            return cls(storage)
        return cls(storage, progress)

    # ── Persistence ───────────────────────────────────────────────────────

    def save(self) -> None:
        self.storage.set_item(STORAGE_KEY, json.dumps(self.progress.to_dict()))

    def _refresh(self) -> List[str]:
        """Re-run badge rules, persist, and return newly earned badge ids."""
        p = self.progress
        p.badges, unlocked = evaluate_badges(p.badges, p.counters())
        for badge_id in unlocked:
            log.info("Badge unlocked: %s", badge_id)
        self.save()
        return unlocked

    def _append(self, key: CompletionKey) -> bool:
        if key in self._seen:
            return False
        self._seen.add(key)
        self.progress.completed.append(key)
        self._refresh()
        return True

    # ── Mutators ──────────────────────────────────────────────────────────

    def add_points(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"points must be non-negative, got {points}")
        p = self.progress
        p.total_points += points
        p.level = calculate_level(p.total_points)
        self._refresh()

    def complete_activity(self, activity_id: str, module_id: str, path_id: str) -> bool:
        """Record an activity; False if it was already recorded. Awards no points."""
        return self._append(ActivityKey(path_id, module_id, activity_id))

    def complete_module(self, module_id: str, path_id: str) -> bool:
        return self._append(ModuleKey(path_id, module_id))

    def record_activity(self, activity_id: str, module_id: str,
                        path_id: str, points: int) -> int:
        """
        Completion and its points as one step. Points are only awarded the
        first time; returns the points actually awarded.
        """
        if not self.complete_activity(activity_id, module_id, path_id):
            return 0
        self.add_points(points)
        return points

    def increment_streak(self) -> None:
        self.progress.streak_days += 1
        self._refresh()

    def unlock_badge(self, badge_id: str) -> bool:
        """Force a badge to earned, bypassing its rule."""
        p = self.progress
        for i, badge in enumerate(p.badges):
            if badge.id == badge_id:
                if badge.earned:
                    return False
                p.badges[i] = badge.mark_earned()
                log.info("Badge unlocked manually: %s", badge_id)
                self.save()
                return True
        return False

    def reset(self) -> None:
        self.progress = UserProgress()
        self._seen = set()
        self.save()

    # ── Queries ───────────────────────────────────────────────────────────

    def is_activity_completed(self, activity_id: str,
                              module_id: Optional[str] = None,
                              path_id: Optional[str] = None) -> bool:
        return any(
            isinstance(k, ActivityKey)
            and k.activity_id == activity_id
            and (module_id is None or k.module_id == module_id)
            and (path_id is None or k.path_id == path_id)
            for k in self.progress.completed
        )

    def is_module_completed(self, module_id: str, path_id: Optional[str] = None) -> bool:
        # A module marker or any activity recorded under the module counts.
        return any(
            k.module_id == module_id and (path_id is None or k.path_id == path_id)
            for k in self.progress.completed
        )

    def get_path_progress(self, path_id: str) -> PathProgress:
        modules = PATH_MODULES.get(path_id, ())
        touched = {
            k.module_id for k in self.progress.completed if k.path_id == path_id
        }
        completed = sum(1 for module_id in modules if module_id in touched)
        return PathProgress(completed=completed, total=len(modules))

    def earned_badge_ids(self) -> Set[str]:
        return {b.id for b in self.progress.badges if b.earned}

    def to_dict(self) -> Dict[str, Any]:
        data = self.progress.to_dict()
        data["level_progress"] = level_progress(self.progress.total_points)
        return data
