import pytest

from appointment_api.auth.passwords import verify_password
from appointment_api.core.exceptions import DuplicateUsername, InvalidCredentials, InvalidInput
from appointment_api.models.user import Role, User
from appointment_api.services import auth_service


def test_register_user_stores_hashed_password(db) -> None:
    user = auth_service.register_user(db, 'studentA1', 'password', 'student')

    stored = db.query(User).filter(User.username == 'studentA1').one()
    assert stored.id == user.id
    assert stored.role is Role.STUDENT
    assert stored.hashed_password != 'password'
    assert verify_password('password', stored.hashed_password)


def test_register_user_rejects_duplicate_username(db) -> None:
    auth_service.register_user(db, 'professorP1', 'password', 'professor')

    with pytest.raises(DuplicateUsername) as exception_info:
        auth_service.register_user(db, 'professorP1', 'another', 'student')

    assert exception_info.value.message == 'Username already exists'
    assert db.query(User).count() == 1


@pytest.mark.parametrize(
    ('username', 'password', 'role'),
    [
        (None, 'password', 'student'),
        ('   ', 'password', 'student'),
        ('studentA1', '', 'student'),
        ('studentA1', 'password', None),
    ],
)
def test_register_user_requires_all_fields(db, username, password, role) -> None:
    with pytest.raises(InvalidInput) as exception_info:
        auth_service.register_user(db, username, password, role)

    assert exception_info.value.message == 'Username, password and role are required'


def test_register_user_rejects_unknown_role(db) -> None:
    with pytest.raises(InvalidInput) as exception_info:
        auth_service.register_user(db, 'dean', 'password', 'admin')

    assert exception_info.value.message == 'Invalid role'


def test_authenticate_user_returns_matching_user(db, make_user) -> None:
    user = make_user('studentA1', Role.STUDENT)

    assert auth_service.authenticate_user(db, 'studentA1', 'password').id == user.id


@pytest.mark.parametrize(
    ('username', 'password'),
    [
        ('studentA1', 'wrong'),
        ('nobody', 'password'),
        ('studentA1', None),
    ],
)
def test_authenticate_user_rejects_bad_credentials(db, make_user, username, password) -> None:
    make_user('studentA1', Role.STUDENT)

    with pytest.raises(InvalidCredentials):
        auth_service.authenticate_user(db, username, password)
