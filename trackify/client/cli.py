import cmd
from typing import List
from trackify.client.lookup_client import LookupClient, VehicleLookupError
from trackify.client.search_session import SearchSession
from trackify.config.config_loader import ConfigLoader
from trackify.database.models import Sighting
from trackify.utils.logger import configure_logging

TABLE_COLUMNS = ("Number Plate", "Car ID", "Camera Number", "Location", "Date Time")


def format_table(vehicles: List[Sighting]) -> str:
    rows = [(v.plate_text, str(v.car_id), v.camera_id, v.location,
             v.timestamp.strftime("%Y-%m-%d %H:%M:%S")) for v in vehicles]
    widths = [max(len(row[i]) for row in rows + [TABLE_COLUMNS]) for i in range(len(TABLE_COLUMNS))]

    lines = ["  ".join(col.ljust(w) for col, w in zip(TABLE_COLUMNS, widths)),
             "  ".join("-" * w for w in widths)]
    for row in rows:
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    return "\n".join(lines)


class TrackifyShell(cmd.Cmd):
    """Interactive vehicle lookup against the Trackify API."""
    intro = 'Trackify - effortlessly track any vehicle. Type help or ? for commands.\n'
    prompt = '(trackify)> '

    def __init__(self, client: LookupClient, stdout=None):
        super().__init__(stdout=stdout)
        self.client = client
        self.session = SearchSession()

    def _print(self, text: str = ""):
        self.stdout.write(text + "\n")

    def do_search(self, arg):
        """
        search <plate>
        Exact, case-sensitive match. Without a plate, lists every sighting.
        Ex: search DL01AB1234
        """
        self.session.search(self.client, arg.strip())
        if self.session.error:
            self._print(self.session.error)
            return

        if not self.session.vehicles:
            self._print("No vehicles found")
            return

        self._print(format_table(self.session.vehicles))
        self._print()
        for index, marker in enumerate(self.session.markers, start=1):
            self._print(f"Vehicle {index}: {marker.label} @ {marker.latitude:.4f}, {marker.longitude:.4f}")
        for skipped in self.session.skipped:
            self._print(f"No marker for {skipped.id}: {skipped.reason}")

    def do_all(self, arg):
        """all - list every sighting"""
        self.do_search("")

    def do_markers(self, arg):
        """
        markers [plate]
        Map markers computed by the server.
        """
        try:
            marker_set = self.client.fetch_markers(arg.strip() or None)
        except VehicleLookupError as e:
            self._print(str(e))
            return

        if not marker_set.markers:
            self._print("No markers")
        for marker in marker_set.markers:
            self._print(f"{marker.label}: {marker.latitude:.4f}, {marker.longitude:.4f}")
        for skipped in marker_set.skipped:
            self._print(f"No marker for {skipped.id}: {skipped.reason}")

    def do_exit(self, arg):
        """Close the client and quit."""
        self.client.close()
        return True

    do_quit = do_exit
    do_EOF = do_exit


def main():
    config = ConfigLoader.load_config()
    configure_logging(config)
    try:
        TrackifyShell(LookupClient.from_config(config)).cmdloop()
    except KeyboardInterrupt:
        print("\nExiting...")


if __name__ == '__main__':
    main()
