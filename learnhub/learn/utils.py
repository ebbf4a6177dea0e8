from learnhub.learn.content import get_next_module
from learnhub.progress.tracker import ProgressTracker


# ── Helpers ───────────────────────────────────────────────────────────────────
def finish_activity(tracker: ProgressTracker, path_id: str, mod: dict, activity: dict) -> dict:
    """
    Record one finished activity with its points and, when it was the last
    one in the module, the module itself. Returns the response payload
    shared by the completion route and the grading desk.
    """
    before = tracker.earned_badge_ids()
    points = tracker.record_activity(activity["id"], mod["id"], path_id, activity["points"])

    module_completed = all(
        tracker.is_activity_completed(a["id"], mod["id"], path_id)
        for a in mod["activities"]
    )
    if module_completed:
        tracker.complete_module(mod["id"], path_id)

    nxt = get_next_module(path_id, mod["id"])
    return {
        "activity_id":      activity["id"],
        "already_done":     points == 0,
        "points_earned":    points,
        "total_points":     tracker.progress.total_points,
        "level":            tracker.progress.level,
        "module_completed": module_completed,
        "new_badges":       sorted(tracker.earned_badge_ids() - before),
        "next_module":      nxt["id"] if (module_completed and nxt) else None,
    }


def _module_summary(tracker: ProgressTracker, path_id: str, mod: dict) -> dict:
    activities = mod["activities"]
    done = sum(
        1 for a in activities
        if tracker.is_activity_completed(a["id"], mod["id"], path_id)
    )
    return {
        "id":             mod["id"],
        "title":          mod["title"],
        "description":    mod["description"],
        "points":         mod["points"],
        "estimated_time": mod["estimated_time"],
        "completed":      tracker.is_module_completed(mod["id"], path_id),
        "done":           done,
        "total":          len(activities),
    }
