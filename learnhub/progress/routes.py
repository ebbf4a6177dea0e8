from flask import Blueprint, current_app, jsonify

from learnhub.state import current_progress

progress = Blueprint('progress', __name__)


@progress.route("/progress")
def summary():
    return jsonify(current_progress().to_dict())


@progress.route("/progress/streak", methods=["POST"])
def increment_streak():
    tracker = current_progress()
    before = tracker.earned_badge_ids()
    tracker.increment_streak()
    return jsonify({
        "streak_days": tracker.progress.streak_days,
        "new_badges":  sorted(tracker.earned_badge_ids() - before),
    })


@progress.route("/progress/badges/<badge_id>/unlock", methods=["POST"])
def unlock_badge(badge_id):
    tracker = current_progress()
    if badge_id not in {b.id for b in tracker.progress.badges}:
        return jsonify({"success": False, "message": "Badge not found"}), 404
    changed = tracker.unlock_badge(badge_id)
    return jsonify({"success": True, "badge_id": badge_id, "already_earned": not changed})


@progress.route("/progress/reset", methods=["POST"])
def reset():
    current_progress().reset()
    current_app.logger.info("Progress reset")
    return jsonify({"success": True})
