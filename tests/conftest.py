import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')
from models import db


@pytest.fixture(scope='session')
def app_instance(tmp_path_factory):
    from app import create_app
    from app.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite:///:memory:',
        UPLOAD_FOLDER=str(tmp_path_factory.mktemp('uploads')),
    )
    return app


@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture()
def make_app(tmp_path):
    """Build a throwaway app from TestingConfig with some settings overridden."""
    from app import create_app
    from app.config import TestingConfig

    def _make(**overrides):
        overrides.setdefault('UPLOAD_FOLDER', str(tmp_path / 'uploads'))
        config = type('OverriddenTestingConfig', (TestingConfig,), overrides)
        return create_app(config)

    return _make
