import pytest

from ranking_admin import create_app
from ranking_admin.config import TestConfig
from ranking_admin.extensions import db
from ranking_admin.services import RankingDraft, create_ranking
from ranking_admin.services.auth import register_admin

ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'admin-pass-123'


@pytest.fixture()
def app():
    # No app context is kept pushed here: each test client request gets its
    # own context, so Flask-Login reloads the user on every request.
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture()
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_user(app):
    with app.app_context():
        user = register_admin(ADMIN_EMAIL, ADMIN_PASSWORD, 'Admin User')
        return user.id


@pytest.fixture()
def logged_in_client(client, admin_user):
    r = client.post('/admin', data={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert r.status_code == 302
    return client


@pytest.fixture()
def make_ranking(app):
    def _make(account_name, followers, **fields):
        with app.app_context():
            ranking = create_ranking(RankingDraft(account_name=account_name, followers=followers, **fields))
            return ranking.id
    return _make
