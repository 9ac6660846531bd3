from typing import List, Optional
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pydantic import ValidationError
from trackify.database.errors import StorageError
from trackify.database.models import Sighting
from trackify.utils.logger import get_logger


class MongoDBManager:
    def __init__(self, config: dict, collection: Optional[Collection] = None):
        self.logger = get_logger(__name__)
        self.config = config['mongodb']
        self.mongo_client = None

        if collection is not None:
            self.sightings_collection = collection
            self.db = collection.database
        else:
            self._connect()

    def _connect(self):
        self.mongo_client = MongoClient(
            self.config['connection_string'],
            serverSelectionTimeoutMS=self.config['server_selection_timeout_ms'])

        self.db = self.mongo_client[self.config['database_name']]
        self.sightings_collection = self.db[self.config['sightings_collection']]

        # not fatal: each query reports an unreachable server itself
        try:
            self.mongo_client.admin.command('ping')
            self.logger.info(f"MongoDB connection established: {self.config['database_name']}")
        except PyMongoError as e:
            self.logger.error(f"Error connecting to MongoDB: {e}")

    def find_sightings(self, plate_text: Optional[str] = None) -> List[Sighting]:
        query = {}
        if plate_text:
            query = {"license_plate_text": plate_text}

        try:
            documents = list(self.sightings_collection.find(query))
        except PyMongoError as e:
            self.logger.error(f"MongoDB error while querying sightings {query}: {e}")
            raise StorageError(str(e)) from e

        try:
            sightings = [Sighting.model_validate(document) for document in documents]
        except ValidationError as e:
            self.logger.error(f"Invalid stored sighting: {e}")
            raise StorageError(str(e)) from e

        self.logger.info(f"Found {len(sightings)} sightings for query {query}")
        return sightings

    def ping(self) -> bool:
        try:
            self.db.command('ping')
            return True
        except PyMongoError as e:
            self.logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self):
        if self.mongo_client is not None:
            self.mongo_client.close()
            self.logger.info("MongoDB connection closed")
