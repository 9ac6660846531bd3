from typing import List, Optional
import requests
from pydantic import ValidationError
from trackify.core.location.markers import MarkerSet
from trackify.database.models import Sighting
from trackify.utils.logger import get_logger

FETCH_ERROR_MESSAGE = "Error fetching data"


class VehicleLookupError(Exception):
    def __init__(self, message: str = FETCH_ERROR_MESSAGE):
        super().__init__(message)


class LookupClient:
    def __init__(self, api_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.logger = get_logger(__name__)
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: dict) -> "LookupClient":
        return cls(config['client']['api_url'], timeout=config['client']['timeout'])

    def _get(self, path: str, params: dict):
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Request to {url} failed: {e}")
            raise VehicleLookupError() from e

    def fetch_sightings(self, plate_text: Optional[str] = None) -> List[Sighting]:
        params = {"numberPlate": plate_text} if plate_text else {}
        payload = self._get("/api/vehicles", params)

        try:
            return [Sighting.model_validate(document) for document in payload]
        except (TypeError, ValidationError) as e:
            self.logger.error(f"Unexpected sighting in response: {e}")
            raise VehicleLookupError() from e

    def fetch_markers(self, plate_text: Optional[str] = None, on_invalid: str = "skip") -> MarkerSet:
        params = {"onInvalid": on_invalid}
        if plate_text:
            params["numberPlate"] = plate_text
        payload = self._get("/api/vehicles/markers", params)

        try:
            return MarkerSet.model_validate(payload)
        except ValidationError as e:
            self.logger.error(f"Unexpected markers response: {e}")
            raise VehicleLookupError() from e

    def close(self):
        self.session.close()
