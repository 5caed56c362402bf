import os

from flask import Blueprint, current_app, jsonify, request

from . import leaderboard, submissions, tasks, users
from .db import get_database, get_session
from .models import isoformat, utcnow

api = Blueprint('api', __name__, url_prefix='/api')


def ok(message=None, **data):
    payload = {'status': 'success'}
    if message is not None:
        payload['message'] = message
    payload.update(data)
    return jsonify(payload)


def json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@api.route('/submit-form', methods=['POST'])
def submit_form():
    users.register(get_session(), json_body(),
                   hash_method=current_app.config['PASSWORD_HASH_METHOD'])
    return ok('Registration successful')


@api.route('/sign-in', methods=['POST'])
def sign_in():
    data = json_body()
    users.authenticate(get_session(), data.get('email'), data.get('password'))
    return ok('Login successful')


@api.route('/admin/upload-task', methods=['POST'])
def upload_task():
    tasks.create_task(get_session(), json_body())
    return ok('Task uploaded successfully')


@api.route('/tasks', methods=['GET'])
def list_tasks():
    return ok(tasks=tasks.list_tasks(get_session()))


@api.route('/submit-task', methods=['POST'])
def submit_task():
    data = json_body()
    submissions.submit(get_session(), data.get('email'), data.get('taskId'), data.get('link'))
    return ok('Task submitted successfully')


@api.route('/admin/update-points', methods=['POST'])
def update_points():
    data = json_body()
    submissions.award_points(get_session(), data.get('email'), data.get('taskId'),
                             data.get('pointsAwarded'))
    return ok('Points updated successfully')


@api.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    return ok(leaderboard=leaderboard.get_leaderboard(get_session()))


@api.route('/profile', methods=['GET'])
def profile():
    return ok(profile=users.get_profile(get_session(), request.args.get('email')))


@api.route('/health', methods=['GET'])
def health():
    """Confirm which process answered and that the store is reachable."""
    get_database().ping()
    return ok(pid=os.getpid(), time=isoformat(utcnow()))
