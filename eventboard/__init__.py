import logging

import click
from flask import Flask, jsonify, request
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import Config
from .db import Database
from .errors import ServiceError, StoreError
from .routes import api

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    CORS(app, origins=app.config['CORS_ORIGINS'])

    db = Database(app.config['DATABASE_URL'])
    db.init_app(app)
    if app.config['CREATE_TABLES']:
        db.create_all()

    app.register_blueprint(api)
    register_error_handlers(app)

    @app.before_request
    def log_request_info():
        # bodies carry passwords, so only the route is logged
        app.logger.info('%s %s', request.method, request.path)

    @app.cli.command('init-db')
    def init_db_command():
        """Create all tables in DATABASE_URL."""
        db.create_all()
        click.echo(f'Initialized {db.url}')

    return app


def configure_logging(app):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, '%Y-%m-%d %H:%M:%S'))
    # replaces Flask's shared default handler on this app's logger only
    app.logger.handlers.clear()
    app.logger.addHandler(handler)
    app.logger.setLevel(app.config['LOG_LEVEL'])


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def service_error(e):
        app.logger.info('%s %s rejected: %s', request.method, request.path, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def store_error(e):
        app.logger.exception('store failure on %s %s', request.method, request.path)
        app.extensions['database'].session.rollback()
        err = StoreError()
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'status': 'error', 'message': e.name}), e.code

    @app.errorhandler(500)
    def server_error(e):
        app.logger.error('unhandled error on %s %s: %s', request.method, request.path, e)
        err = StoreError()
        return jsonify(err.to_dict()), 500
