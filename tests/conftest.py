import pytest
from videolink import create_app
from videolink.extensions import db as _db


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(app):
    return {
        "X-Admin-Token": app.config["ADMIN_API_TOKEN"],
        "X-Admin-User": "alice",
    }


@pytest.fixture
def db(app):
    """Per-test database session; rows committed by services are wiped after."""
    with app.app_context():
        _db.session.begin_nested()
        yield _db
        _db.session.rollback()
        for table in reversed(_db.metadata.sorted_tables):
            _db.session.execute(table.delete())
        _db.session.commit()
