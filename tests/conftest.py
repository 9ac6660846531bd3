from datetime import datetime

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from trackify.config.config_loader import ConfigLoader
from trackify.database.mongodb_manager import MongoDBManager
from trackify.utils.logger import configure_logging

DELHI = "28°36'50.2\"N 77°12'30.0\"E"


@pytest.fixture(scope="session", autouse=True)
def log_to_tmp(tmp_path_factory):
    configure_logging({"logging": {"log_dir": str(tmp_path_factory.mktemp("logs"))}})


class FakeDatabase:
    def __init__(self, error=None):
        self.error = error

    def command(self, name):
        if self.error is not None:
            raise self.error
        return {"ok": 1.0}


class FakeCollection:
    """Stands in for a pymongo collection: equality filters only."""

    def __init__(self, documents=(), error=None):
        self.documents = list(documents)
        self.error = error
        self.database = FakeDatabase(error)
        self.queries = []

    def find(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return iter([dict(document) for document in self.documents
                     if all(document.get(key) == value for key, value in query.items())])


def make_document(plate="DL01AB1234", location=DELHI, **overrides):
    document = {
        "_id": ObjectId(),
        "frame_nmr": 120,
        "car_id": 7,
        "license_plate_text": plate,
        "camera_number": "CAM-01",
        "license_number_score": 0.93,
        "location": location,
        "timestamp": datetime(2024, 5, 1, 10, 15, 0),
        "__v": 0,
    }
    document.update(overrides)
    return document


@pytest.fixture
def config():
    return ConfigLoader.default_config()


@pytest.fixture
def documents():
    return [
        make_document(),
        make_document(plate="MH12XY9876", location="19°4'34.0\"N 72°52'39.0\"E", car_id=8),
        make_document(plate="dl01ab1234", car_id=9),
    ]


@pytest.fixture
def collection(documents):
    return FakeCollection(documents)


@pytest.fixture
def db(config, collection):
    return MongoDBManager(config, collection=collection)


@pytest.fixture
def broken_db(config):
    return MongoDBManager(config, collection=FakeCollection(
        error=ServerSelectionTimeoutError("localhost:27017: connection refused")))
