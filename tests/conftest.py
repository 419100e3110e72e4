import pytest

from acadreq import create_app
from acadreq.models import db as _db, Role, User
from acadreq.services import AuthService, RequestService


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'acadreq_test.db'}",
    })
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()
        _db.engine.dispose()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(db):
    return RequestService(db.session)


@pytest.fixture
def make_user(db):
    def _make_user(role, name=None, email=None, password='secret123'):
        role = Role(role)
        count = User.query.count() + 1
        user = User(
            name=name or f"{role.value.title()} {count}",
            email=email or f"{role.value}{count}@university.edu",
            role=role,
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture
def student(make_user):
    return make_user('student')


@pytest.fixture
def staff(make_user):
    return make_user('staff')


@pytest.fixture
def hod(make_user):
    return make_user('hod')


@pytest.fixture
def admin(make_user):
    return make_user('admin')


@pytest.fixture
def auth_header():
    def _auth_header(user):
        return {'Authorization': f"Bearer {AuthService.issue_token(user)}"}
    return _auth_header
