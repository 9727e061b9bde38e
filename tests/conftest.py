from datetime import date

import pytest

from app import create_app
from store import HotelStore
from storage import Storage

TODAY = date(2024, 1, 2)


@pytest.fixture
def data_dir(tmp_path):
    return str(tmp_path)


@pytest.fixture
def hotel(data_dir):
    return HotelStore(Storage(data_dir), clock=lambda: TODAY)


@pytest.fixture
def client(hotel):
    app = create_app(hotel)
    app.config["TESTING"] = True
    return app.test_client()
