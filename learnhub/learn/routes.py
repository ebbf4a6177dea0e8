from __future__ import annotations

from flask import Blueprint, abort, current_app, jsonify, request

from learnhub.learn.content import (
    GRADED_TYPES, get_activity, get_learning_path, get_module,
    get_next_module, get_total_path_points, score_quiz, validate_activity,
)
from learnhub.learn.utils import _module_summary, finish_activity
from learnhub.progress.tracker import ProgressTracker
from learnhub.state import current_progress

learn = Blueprint('learn', __name__)


def _activity_view(tracker: ProgressTracker, path_id: str, module_id: str, activity: dict) -> dict:
    """Invalid payloads are reported inline instead of failing the module."""
    view = {
        "id":        activity["id"],
        "type":      activity["type"],
        "title":     activity["title"],
        "points":    activity["points"],
        "completed": tracker.is_activity_completed(activity["id"], module_id, path_id),
    }
    error = validate_activity(activity)
    if error:
        view.update({"invalid": True, "error": error})
    else:
        view["data"] = activity["data"]
    return view


# ── Routes ──────────────────────────────────────────────────────────────────
@learn.route("/learn/<path_id>")
def path_page(path_id):
    path = get_learning_path(path_id)
    if not path:
        abort(404)

    tracker = current_progress()
    progress = tracker.get_path_progress(path_id)
    return jsonify({
        "id":           path["id"],
        "title":        path["title"],
        "description":  path["description"],
        "total_points": get_total_path_points(path_id),
        "completed":    progress.completed,
        "total":        progress.total,
        "modules":      [_module_summary(tracker, path_id, m) for m in path["modules"]],
    })


@learn.route("/learn/<path_id>/<module_id>")
def module_page(path_id, module_id):
    mod = get_module(path_id, module_id)
    if not mod:
        abort(404)

    tracker = current_progress()
    activities = [_activity_view(tracker, path_id, module_id, a) for a in mod["activities"]]
    done = sum(1 for a in activities if a["completed"])
    nxt = get_next_module(path_id, module_id)
    return jsonify({
        "path_id":        path_id,
        "id":             mod["id"],
        "title":          mod["title"],
        "description":    mod["description"],
        "points":         mod["points"],
        "estimated_time": mod["estimated_time"],
        "activities":     activities,
        "done":           done,
        "total":          len(activities),
        "pct":            int(done * 100 / len(activities)) if activities else 0,
        "completed":      tracker.is_module_completed(module_id, path_id),
        "next_module":    {"id": nxt["id"], "title": nxt["title"]} if nxt else None,
    })


@learn.route("/learn/<path_id>/<module_id>/<activity_id>/complete", methods=["POST"])
def complete_activity(path_id, module_id, activity_id):
    """Mark a client-side activity (reading, quiz, vocabulary, ...) complete."""
    mod = get_module(path_id, module_id)
    activity = get_activity(path_id, module_id, activity_id)
    if not activity:
        return jsonify({"success": False, "message": "Activity not found"}), 404

    if activity["type"] in GRADED_TYPES:
        return jsonify({
            "success": False,
            "message": "Submit this activity for feedback to complete it.",
        }), 400

    error = validate_activity(activity)
    if error:
        return jsonify({"success": False, "invalid": True, "message": error}), 422

    tracker = current_progress()
    result = finish_activity(tracker, path_id, mod, activity)

    if activity["type"] == "quiz":
        answers = (request.get_json(silent=True) or {}).get("answers")
        if isinstance(answers, list):
            questions = activity["data"]["questions"]
            result["quiz_score"] = score_quiz(questions, answers)
            result["quiz_total"] = len(questions)

    if result["new_badges"]:
        current_app.logger.info("Badges earned on %s: %s", activity_id, result["new_badges"])

    if result["already_done"]:
        message = "Already completed!"
    else:
        message = f"+{result['points_earned']} points earned!"
    return jsonify({"success": True, "message": message, **result})
