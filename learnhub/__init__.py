from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_socketio import SocketIO
from learnhub.config import Config
from flask_migrate import Migrate


db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
login_manager.login_message_category = 'info'
socketio = SocketIO()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    login_manager.init_app(app)
    socketio.init_app(app, async_mode=app.config.get("SOCKETIO_ASYNC_MODE"))
    migrate.init_app(app, db)

    from learnhub.main.routes import main
    from learnhub.users.routes import users
    from learnhub.learn.routes import learn
    from learnhub.progress.routes import progress
    from learnhub.grading import desk   # registers the socket handlers
    from learnhub.state import release_profile_state

    app.register_blueprint(main)
    app.register_blueprint(users)
    app.register_blueprint(learn)
    app.register_blueprint(progress)
    app.teardown_request(release_profile_state)

    return app
