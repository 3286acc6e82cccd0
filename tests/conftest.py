import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from appointment_api.auth.passwords import hash_password  # noqa: E402
from appointment_api.core.config import Settings, get_settings  # noqa: E402
from appointment_api.database import Base, get_db, init_db  # noqa: E402
from appointment_api.main import create_app  # noqa: E402
from appointment_api.models.user import Role, User  # noqa: E402

TEST_PASSWORD = 'password'


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret_key='test-secret', bcrypt_rounds=4)


@pytest.fixture
def engine():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(session_factory, settings):
    app = create_app(settings)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make_user(username: str, role: Role, password: str = TEST_PASSWORD) -> User:
        user = User(username=username, hashed_password=hash_password(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def login(client):
    def _login(username: str, password: str = TEST_PASSWORD) -> dict[str, str]:
        response = client.post('/auth/login', json={'username': username, 'password': password})
        assert response.status_code == 200
        return {'Authorization': f"Bearer {response.json()['token']}"}

    return _login
