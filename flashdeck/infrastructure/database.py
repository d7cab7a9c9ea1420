from flask import current_app, g
from pymongo import MongoClient
from werkzeug.local import LocalProxy


def _get_client() -> MongoClient:
    client = current_app.extensions.get('mongo_client')
    if client is None:
        # tz_aware so edited_at comes back as an aware UTC datetime
        client = MongoClient(
            current_app.config['MONGO_URI'],
            serverSelectionTimeoutMS=current_app.config.get('MONGO_TIMEOUT_MS', 5000),
            tz_aware=True,
        )
        current_app.extensions['mongo_client'] = client
    return client


def get_db():
    """
    Returns the MongoDB database named in MONGO_URI (mongodb://host:port/flashdeck),
    cached on `g` for the current app context.
    """
    if 'db' not in g:
        g.db = _get_client().get_database()
    return g.db


def ping_database() -> None:
    """Raises if MongoDB cannot be reached."""
    get_db().command('ping')


def init_app(app):
    """Initialize the database with the Flask app."""
    @app.teardown_appcontext
    def release_db(exception):
        # Only the per-context handle is dropped; the client lives in app.extensions
        g.pop('db', None)


# Use a LocalProxy to access the db connection within the application context
db = LocalProxy(get_db)
