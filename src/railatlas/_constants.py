"""Internal constants shared across the library."""

USER_AGENT = "railatlas/1.0"

STATIONS_FILE = "stations.csv"
STATION_NAMES_FILE = "station_names.csv"
EVENTS_FILE = "events.csv"
SEGMENTS_FILE = "segments.csv"

#: ``current_status`` assumed for stations whose source row leaves it blank.
DEFAULT_STATION_STATUS = "open"
#: ``current_status`` value that forces a built station to ``closed``.
STATUS_CLOSED = "closed"

NAME_KEY_PREFIX = "name:"
