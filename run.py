# Must run before anything imports socket or threading
import eventlet
eventlet.monkey_patch()

import logging
import os

from flask_migrate import init, migrate, upgrade
from sqlalchemy import inspect

from learnhub import create_app, db, socketio

app = create_app()
log = logging.getLogger("learnhub.run")


def setup_database():
    """Create the storage table on first boot, otherwise apply pending migrations."""
    with app.app_context():
        tables = inspect(db.engine).get_table_names()
        log.info("Found tables: %s", tables)

        if "storage_entry" in tables:
            upgrade()
            return

        if not os.path.exists("migrations"):
            init()
        migrate(message="Initial migration")
        upgrade()
        log.info("Tables now: %s", inspect(db.engine).get_table_names())


if os.environ.get("RENDER") or os.environ.get("DATABASE_URL"):
    setup_database()
else:
    with app.app_context():
        db.create_all()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    socketio.run(app, debug=True)
