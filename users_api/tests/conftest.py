import pytest
import structlog

from users_api.app import create_app
from users_api.config.settings import Settings

VALID_TOKEN = "valid_token"


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the environment, logging into a temp directory"""
    return Settings(
        _env_file=None,
        auth_token=VALID_TOKEN,
        log_dir=str(tmp_path / "logs"),
        log_to_console=False,
        log_level="DEBUG",
    )


@pytest.fixture
def app(test_settings):
    app = create_app(test_settings)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration made by a test"""
    yield
    structlog.reset_defaults()
