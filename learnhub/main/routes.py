from flask import Blueprint, jsonify
from learnhub.gamification import level_progress
from learnhub.learn.content import get_all_paths, get_total_path_points
from learnhub.state import current_auth, current_progress

main = Blueprint('main', __name__)


@main.route("/")
@main.route("/home")
def home():
    tracker = current_progress()
    user = current_auth().user
    p = tracker.progress

    paths = []
    for path in get_all_paths():
        prog = tracker.get_path_progress(path["id"])
        paths.append({
            "id":           path["id"],
            "title":        path["title"],
            "description":  path["description"],
            "modules":      len(path["modules"]),
            "total_points": get_total_path_points(path["id"]),
            "completed":    prog.completed,
            "total":        prog.total,
            "pct":          int(prog.completed * 100 / prog.total) if prog.total else 0,
        })

    return jsonify({
        "user":         user.to_dict() if user else None,
        "total_points": p.total_points,
        "streak_days":  p.streak_days,
        "level":        level_progress(p.total_points),
        "badges":       [b.to_dict() for b in p.badges],
        "paths":        paths,
    })
