import threading
from typing import List
from trackify.client.lookup_client import LookupClient, VehicleLookupError
from trackify.core.location.markers import Marker, SkippedLocation, build_markers
from trackify.database.models import Sighting
from trackify.utils.logger import get_logger


class SearchSession:
    """State behind the search form: input, loading/error flags, results and markers.

    Every search gets a sequence number from ``begin``; only the response for
    the most recent number is applied, so a slow earlier request can never
    overwrite the results of a later one.
    """

    def __init__(self):
        self.logger = get_logger(__name__)
        self.lock = threading.Lock()
        self.latest_seq = 0

        self.plate_text = ""
        self.loading = False
        self.error = ""
        self.vehicles: List[Sighting] = []
        self.markers: List[Marker] = []
        self.skipped: List[SkippedLocation] = []

    def begin(self, plate_text: str = "") -> int:
        with self.lock:
            self.latest_seq += 1
            self.plate_text = plate_text
            self.error = ""
            self.loading = True
            return self.latest_seq

    def complete(self, seq: int, vehicles: List[Sighting]) -> bool:
        marker_set = build_markers(vehicles)
        with self.lock:
            if seq != self.latest_seq:
                self.logger.info(f"Discarding stale response #{seq} (latest #{self.latest_seq})")
                return False
            self.vehicles = list(vehicles)
            self.markers = marker_set.markers
            self.skipped = marker_set.skipped
            self.loading = False
            return True

    def fail(self, seq: int, message: str) -> bool:
        with self.lock:
            if seq != self.latest_seq:
                self.logger.info(f"Discarding stale error #{seq} (latest #{self.latest_seq})")
                return False
            self.error = message
            self.loading = False
            return True

    def search(self, client: LookupClient, plate_text: str = "") -> bool:
        seq = self.begin(plate_text)
        try:
            vehicles = client.fetch_sightings(plate_text or None)
        except VehicleLookupError as e:
            return self.fail(seq, str(e))
        return self.complete(seq, vehicles)
