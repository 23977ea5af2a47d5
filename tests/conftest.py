from pathlib import Path
import sys

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ballotbox import create_app
from ballotbox.extensions import db
from ballotbox.services.election import Election
from ballotbox.services.identity import issue_identity_token

ADMIN = "admin-1"


@pytest.fixture()
def app(tmp_path: Path):
    db_file = tmp_path / "test.sqlite3"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
            "SECRET_KEY": "test-secret",
            "ELECTION_ADMIN_IDENTITY": ADMIN,
        }
    )

    with app.app_context():
        driver = db.engine.url.drivername
        if driver != "sqlite":
            raise RuntimeError(
                f"Test database must be SQLite, got '{driver}'. Refusing to run destructive test setup."
            )
        db.drop_all()
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def auth_headers(app):
    def build(identity):
        with app.app_context():
            token = issue_identity_token(identity)
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture()
def admin_headers(auth_headers):
    return auth_headers(ADMIN)


@pytest.fixture()
def events():
    return []


@pytest.fixture()
def election(events):
    return Election(ADMIN, event_sink=events.append)
