import os


def _database_uri() -> str:
    # Render/Heroku style URLs still use the legacy scheme.
    url = os.environ.get('DATABASE_URL') or os.environ.get('SQLALCHEMY_DATABASE_URI')
    if not url:
        return 'sqlite:///learnhub.db'
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-me')
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SESSION_COOKIE_SAMESITE = os.environ.get('SESSION_COOKIE_SAMESITE', 'Lax')

    SOCKETIO_ASYNC_MODE = os.environ.get('SOCKETIO_ASYNC_MODE', 'eventlet')

    # Simulated latency, in seconds
    AUTH_SIGN_IN_DELAY      = float(os.environ.get('AUTH_SIGN_IN_DELAY', 1.0))
    OPEN_TEXT_GRADING_DELAY = float(os.environ.get('OPEN_TEXT_GRADING_DELAY', 2.0))
    VOICE_GRADING_DELAY     = float(os.environ.get('VOICE_GRADING_DELAY', 3.0))
