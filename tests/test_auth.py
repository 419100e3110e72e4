from datetime import timedelta

import jwt
import pytest

from acadreq.models import Role, User
from acadreq.services import AuthService
from acadreq.utils import ValidationError, AuthenticationError, utcnow


def test_register_stores_hashed_password(db):
    user = AuthService.register('Alice Student', 'Alice@University.edu', 'alice123')

    assert user.id is not None
    assert user.email == 'alice@university.edu'
    assert user.role == Role.STUDENT
    assert user.password_hash != 'alice123'
    assert user.check_password('alice123')
    assert 'password_hash' not in user.to_dict()


@pytest.mark.parametrize('name, email, password, role, message', [
    ('', 'a@b.edu', 'secret1', 'student', 'Name is required'),
    ('Al', 'not-an-email', 'secret1', 'student', 'valid email'),
    ('Al', 'a@b.edu', '123', 'student', 'at least 6 characters'),
    ('Al', 'a@b.edu', 'secret1', 'dean', 'Invalid role'),
])
def test_register_validation(db, name, email, password, role, message):
    with pytest.raises(ValidationError, match=message):
        AuthService.register(name, email, password, role)
    assert User.query.count() == 0


def test_register_rejects_duplicate_email(db, student):
    with pytest.raises(ValidationError, match='already exists'):
        AuthService.register('Someone', student.email.upper(), 'secret123')


def test_authenticate(db, student):
    assert AuthService.authenticate(student.email, 'secret123').id == student.id

    with pytest.raises(AuthenticationError, match='Invalid email or password'):
        AuthService.authenticate(student.email, 'wrong-password')
    with pytest.raises(AuthenticationError):
        AuthService.authenticate('nobody@university.edu', 'secret123')


def test_token_round_trip(app, hod):
    token = AuthService.issue_token(hod)

    payload = AuthService.decode_token(token)
    assert payload['uid'] == hod.id
    assert payload['role'] == 'hod'
    assert AuthService.get_user_from_token(token).id == hod.id


def test_expired_token_is_refused(app, hod):
    token = jwt.encode({'uid': hod.id, 'exp': utcnow() - timedelta(minutes=1)},
                       app.config['JWT_SECRET'], algorithm='HS256')

    with pytest.raises(AuthenticationError, match='Token expired'):
        AuthService.decode_token(token)


def test_foreign_token_is_refused(app, hod):
    token = jwt.encode({'uid': hod.id}, 'some-other-secret', algorithm='HS256')

    with pytest.raises(AuthenticationError, match='Invalid token'):
        AuthService.decode_token(token)


def test_token_for_deleted_user_is_refused(app, db, make_user):
    user = make_user('staff')
    token = AuthService.issue_token(user)
    db.session.delete(user)
    db.session.commit()

    with pytest.raises(AuthenticationError, match='User not found'):
        AuthService.get_user_from_token(token)


def test_me_requires_token(client):
    response = client.get('/api/auth/me')

    assert response.status_code == 401
    assert response.get_json()['success'] is False


def test_me_returns_current_user(client, staff, auth_header):
    response = client.get('/api/auth/me', headers=auth_header(staff))

    assert response.status_code == 200
    assert response.get_json()['user']['email'] == staff.email


@pytest.mark.parametrize('path, method, allowed', [
    ('/api/student/requests', 'get', 'student'),
    ('/api/staff/requests', 'get', 'staff'),
    ('/api/hod/requests', 'get', 'hod'),
    ('/api/admin/requests', 'get', 'admin'),
])
def test_role_guards(client, make_user, auth_header, path, method, allowed):
    for role in ('student', 'staff', 'hod', 'admin'):
        user = make_user(role)
        response = getattr(client, method)(path, headers=auth_header(user))
        if role == allowed:
            assert response.status_code == 200, role
        else:
            assert response.status_code == 403, role
            assert f"Your role: {role}" in response.get_json()['message']


def test_register_and_login_endpoints(client):
    response = client.post('/api/auth/register', json={
        'name': 'Jane Staff', 'email': 'staff@university.edu',
        'password': 'staff123', 'role': 'staff',
    })
    assert response.status_code == 201
    assert response.get_json()['user']['role'] == 'staff'

    response = client.post('/api/auth/login', json={'email': 'staff@university.edu', 'password': 'staff123'})
    body = response.get_json()
    assert response.status_code == 200
    assert body['token']

    response = client.get('/api/staff/requests', headers={'Authorization': f"Bearer {body['token']}"})
    assert response.status_code == 200


def test_login_failures(client, student):
    assert client.post('/api/auth/login', json={'email': student.email}).status_code == 400
    response = client.post('/api/auth/login', json={'email': student.email, 'password': 'nope-nope'})
    assert response.status_code == 401
    assert response.get_json()['message'] == 'Invalid email or password'
