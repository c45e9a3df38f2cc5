import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from brandix.app.config import Config
from brandix.app.factory import create_app
from brandix.app.seed import SAMPLE_TILES
from brandix.modules.catalog.records import TileRecord


class TestConfig(Config):
    # Use SQLite in tests for simplicity.
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    AUTO_SEED = True
    WHATSAPP_NUMBER = "917016753977"
    INQUIRY_WEBHOOK_URL = None
    DEFAULT_TILE_AREA = 0.36


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def tiles():
    """The sample catalog as records, ids in seed order."""
    return [
        TileRecord(
            id=i,
            name=name,
            category=category,
            size=size,
            finish=finish,
            image_url=image_url,
            description=description,
        )
        for i, (name, category, size, finish, image_url, description) in enumerate(SAMPLE_TILES, start=1)
    ]
