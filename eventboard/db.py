from flask import current_app
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, scoped_session
from sqlalchemy.pool import StaticPool

from .models import Base


class Database:
    """Engine plus thread-local session, owned by the Flask app.

    Created once by the app factory and disposed on shutdown; request code
    reaches it through ``get_session()``.
    """

    def __init__(self, url):
        self.url = url
        if url.startswith('sqlite'):
            kwargs = {'connect_args': {'check_same_thread': False}}
            # in-memory databases only live as long as their one connection
            if ':memory:' in url or url in ('sqlite://', 'sqlite:///'):
                kwargs['poolclass'] = StaticPool
            self.engine = create_engine(url, **kwargs)
        else:
            self.engine = create_engine(url, pool_pre_ping=True)
        self.session = scoped_session(sessionmaker(bind=self.engine))

    def init_app(self, app):
        app.extensions['database'] = self
        app.teardown_appcontext(self.remove)

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def ping(self):
        with self.engine.connect() as conn:
            conn.execute(text('SELECT 1'))

    def remove(self, exc=None):
        self.session.remove()

    def dispose(self):
        self.session.remove()
        self.engine.dispose()


def get_database():
    return current_app.extensions['database']


def get_session():
    return get_database().session
