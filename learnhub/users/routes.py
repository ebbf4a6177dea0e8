from flask import Blueprint, current_app, jsonify
from flask_login import current_user, login_required, login_user, logout_user

from learnhub import login_manager
from learnhub.state import current_auth

users = Blueprint('users', __name__)


@login_manager.user_loader
def load_user(user_id):
    user = current_auth().user
    if user and user.get_id() == user_id:
        return user
    return None


@users.route("/auth/google", methods=["POST"])
@users.route("/auth/sign-up", methods=["POST"])
def sign_in_with_google():
    """Sign-in and sign-up both go through the same demo OAuth stub."""
    auth = current_auth()
    user = auth.sign_in_with_google()
    login_user(user, remember=True)
    current_app.logger.info("Demo user signed in: %s", user.id)
    return jsonify({"success": True, "user": user.to_dict()})


@users.route("/auth/sign-out", methods=["POST"])
def sign_out():
    auth = current_auth()
    auth.sign_out()
    logout_user()
    return jsonify({"success": True})


@users.route("/auth/me")
@login_required
def me():
    return jsonify({"user": current_user.to_dict()})
