import pytest

from eventboard import create_app


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'DATABASE_URL': 'sqlite://',
        'PASSWORD_HASH_METHOD': 'pbkdf2:sha256:1000',
        'CREATE_TABLES': True,
    })
    yield app
    app.extensions['database'].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    db = app.extensions['database']
    yield db.session
    db.session.remove()


def registration(**overrides):
    form = {
        'name': 'Asha',
        'phone': '9999999999',
        'state': 'Kerala',
        'district': 'Ernakulam',
        'representative_type': 'college',
        'college': 'CUSAT',
        'school': 'St. Marys',
        'year_of_study': '2',
        'email': 'a@x.com',
        'password': 'pw1234',
    }
    form.update(overrides)
    return form


@pytest.fixture
def register(client):
    def _register(**overrides):
        return client.post('/api/submit-form', json=registration(**overrides))
    return _register


@pytest.fixture
def make_task(client):
    """Upload a task and return its id."""
    def _make_task(title='T1', description='D', points=20, **extra):
        body = dict(title=title, description=description, points=points, **extra)
        resp = client.post('/api/admin/upload-task', json=body)
        assert resp.status_code == 200, resp.get_json()
        listed = client.get('/api/tasks').get_json()['tasks']
        return listed[-1]['id']
    return _make_task


@pytest.fixture
def award(client):
    def _award(email, task_id, points):
        return client.post('/api/admin/update-points',
                           json={'email': email, 'taskId': task_id, 'pointsAwarded': points})
    return _award


@pytest.fixture
def form():
    return registration()
