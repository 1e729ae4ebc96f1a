"""Fixed defaults for the paddock data layer."""

DEFAULT_BASE_URL = "https://api.jolpi.ca/ergast/f1/current/last"
DEFAULT_TIMEOUT = 30.0

QUALIFYING_ENDPOINT = "/qualifying.json"
RESULTS_ENDPOINT = "/results.json"

# Standings live on the season resource, one level above the last race
DEFAULT_STANDINGS_URL = "https://api.jolpi.ca/ergast/f1/current"
DRIVER_STANDINGS_ENDPOINT = "/driverStandings.json"
CONSTRUCTOR_STANDINGS_ENDPOINT = "/constructorStandings.json"

BETS_CSV = "./bets.csv"
USERS_CSV = "./users.csv"
EVENTS_CSV = "./events.csv"

# Event dates are stored in UTC, e.g. "2024-05-26 13:00:00 UTC"
EVENT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
DISPLAY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"
CEST_ZONE = "Europe/Berlin"
EST_ZONE = "America/New_York"
DEFAULT_USER_ZONE = "Europe/Berlin"

ANY = "any"
NOTIFY = "notify"
