"""
learnhub/gamification.py
Badge catalogue, badge unlock rules and level arithmetic.
Everything here is pure: no storage, no Flask.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Tuple

POINTS_PER_LEVEL = 50


# ── Badges ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Badge:
    id: str
    name: str
    description: str
    icon: str
    requirement: int
    category: str      # "reading" | "writing" | "speaking" | "listening" | "general"
    earned: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def mark_earned(self) -> "Badge":
        return self if self.earned else replace(self, earned=True)


BADGES: Tuple[Badge, ...] = (
    Badge("first-steps", "First Steps",
          "Complete your first learning activity", "🎯", 1, "general"),
    Badge("reading-novice", "Reading Novice",
          "Complete 5 reading activities", "📖", 5, "reading"),
    Badge("code-explorer", "Code Explorer",
          "Earn 100 points", "🚀", 100, "general"),
    Badge("vocabulary-master", "Vocabulary Master",
          "Complete 10 vocabulary exercises", "💡", 10, "writing"),
    Badge("ai-architect", "AI Architect",
          "Complete all architecture modules", "🏗️", 8, "reading"),
    Badge("streak-warrior", "Streak Warrior",
          "Maintain a 7-day learning streak", "🔥", 7, "general"),
    Badge("low-code-builder", "Low-Code Builder",
          "Earn 300 points in Low-Code Architecture", "🔧", 300, "general"),
    Badge("vibe-master", "Vibe Master",
          "Complete 20 activities in Vibe Coding", "✨", 20, "general"),
    Badge("polyglot-learner", "Polyglot Learner",
          "Earn 500 total points across all paths", "🌟", 500, "general"),
    Badge("voice-pioneer", "Voice Pioneer",
          "Complete 5 voice recording activities", "🎤", 5, "speaking"),
    Badge("writer-extraordinaire", "Writer Extraordinaire",
          "Complete 5 open-text writing activities", "✍️", 5, "writing"),
)

BADGES_BY_ID: Dict[str, Badge] = {b.id: b for b in BADGES}


def default_badges() -> List[Badge]:
    """Fresh, unearned copy of the catalogue in catalogue order."""
    return [replace(b, earned=False) for b in BADGES]


# ── Unlock rules ──────────────────────────────────────────────────────────────

class ProgressCounters(NamedTuple):
    total_points: int
    completed_count: int
    streak_days: int


def _activities_at_least(n: int) -> Callable[[ProgressCounters], bool]:
    return lambda c: c.completed_count >= n


def _points_at_least(n: int) -> Callable[[ProgressCounters], bool]:
    return lambda c: c.total_points >= n


def _streak_at_least(n: int) -> Callable[[ProgressCounters], bool]:
    return lambda c: c.streak_days >= n


# badge id → predicate. Badges absent from this table (voice-pioneer,
# writer-extraordinaire) are only ever earned through a manual unlock.
BADGE_RULES: Dict[str, Callable[[ProgressCounters], bool]] = {
    "first-steps":       _activities_at_least(1),
    "reading-novice":    _activities_at_least(5),
    "ai-architect":      _activities_at_least(8),
    "vocabulary-master": _activities_at_least(10),
    "vibe-master":       _activities_at_least(20),
    "code-explorer":     _points_at_least(100),
    "low-code-builder":  _points_at_least(300),
    "polyglot-learner":  _points_at_least(500),
    "streak-warrior":    _streak_at_least(7),
}


def evaluate_badges(badges: Iterable[Badge],
                    counters: ProgressCounters) -> Tuple[List[Badge], List[str]]:
    """
    Apply BADGE_RULES to every unearned badge.
    Returns (updated badge list, ids newly earned by this pass).
    Earned badges are passed through untouched.
    """
    updated: List[Badge] = []
    unlocked: List[str] = []
    for badge in badges:
        rule = BADGE_RULES.get(badge.id)
        if not badge.earned and rule is not None and rule(counters):
            badge = badge.mark_earned()
            unlocked.append(badge.id)
        updated.append(badge)
    return updated, unlocked


def reconcile_badges(stored: Iterable[Dict[str, Any]]) -> List[Badge]:
    """
    Rebuild the badge list from the current catalogue, carrying over only
    the earned flag from stored data. Unknown stored ids are dropped.
    """
    earned_ids = {
        b["id"] for b in stored
        if isinstance(b, dict) and b.get("earned") is True and "id" in b
    }
    return [replace(b, earned=b.id in earned_ids) for b in BADGES]


# ── Levels ────────────────────────────────────────────────────────────────────

def calculate_level(points: int) -> int:
    return points // POINTS_PER_LEVEL + 1


def points_for_next_level(points: int) -> int:
    return calculate_level(points) * POINTS_PER_LEVEL


def level_progress(points: int) -> Dict[str, int]:
    """Numbers behind the level progress bar."""
    level = calculate_level(points)
    start = (level - 1) * POINTS_PER_LEVEL
    return {
        "level":               level,
        "points":              points,
        "current_level_start": start,
        "next_level_points":   points_for_next_level(points),
        "percent":             int((points - start) * 100 / POINTS_PER_LEVEL),
    }
