"""Configuration constants for Campus Navigator.

All configurable parameters are centralized here for easy tuning.
Deployment values (data store URL, keys, signed-in user) are read from
environment variables (or a .env file) once at import via pydantic-settings.

Classes:
    AppConfig: UI application settings
    MapConfig: Overview center and camera zoom levels
    CategoryConfig: Closed category enumeration and its colors
    StyleConfig: Map marker colors and sizes
    MarkerConfig: Custom marker defaults
    LocationConfig: Host position source parameters
    DataStoreConfig: Remote data store connection
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig:
    """UI application settings."""

    TITLE = "Campus Navigation"
    SUBTITLE = "Navigate SRM University Kattankulathur with ease"
    ICON = "🧭"
    LAYOUT = "wide"


class MapConfig:
    """Default map view parameters."""

    # Overview center: SRM University, Kattankulathur campus
    START_CENTER_LAT = 12.8230
    START_CENTER_LON = 80.0408

    # Higher number = more zoomed in
    OVERVIEW_ZOOM = 16  # Idle camera, whole campus visible
    FOCUS_ZOOM = 18  # Camera after selecting a location

    # Animated "fly" transition when focusing a location
    FLY_DURATION_MS = 1500

    MAP_HEIGHT = 640


class CategoryConfig:
    """Closed category enumeration (UI order) and category colors."""

    ALL = "All"

    NAMES = [
        "Academic",
        "Administrative",
        "Hostel",
        "Food & Dining",
        "Sports",
        "Healthcare",
        "Transportation",
        "Banking",
        "Shopping",
        "Events",
        "Fitness",
    ]

    # Selector options shown in the sidebar, "All" first
    SELECTOR_OPTIONS = [ALL] + NAMES

    # Categories missing here fall back to DEFAULT_COLOR
    COLORS = {
        "Academic": "#f56565",  # red
        "Administrative": "#ed8936",  # orange
        "Hostel": "#4299e1",  # blue
        "Food & Dining": "#48bb78",  # green
        "Sports": "#9f7aea",  # purple
        "Healthcare": "#38b2ac",  # teal
    }
    DEFAULT_COLOR = "#718096"  # gray

    assert set(COLORS.keys()) <= set(NAMES), "Color table references unknown category"


class StyleConfig:
    """Map marker styling."""

    USER_POSITION_COLOR = "#e53e3e"
    SELECTED_OUTLINE_RGBA = [37, 99, 235, 255]

    POI_RADIUS_PX = 9
    SELECTED_RADIUS_PX = 13
    CUSTOM_MARKER_RADIUS_PX = 9
    USER_POSITION_RADIUS_PX = 10

    BASEMAP_TILES = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
    BASEMAP_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'


class MarkerConfig:
    """Custom marker defaults."""

    ICON = "map-pin"  # Fixed icon tag stored with every custom marker
    DEFAULT_COLOR = "#3b82f6"
    LATITUDE_PLACEHOLDER = "12.8230"
    LONGITUDE_PLACEHOLDER = "80.0408"


class LocationConfig:
    """Host position source parameters."""

    TERMUX_COMMAND = "termux-location"
    TERMUX_PROVIDER = "gps"
    TIMEOUT_S = 30.0


class DataStoreSettings(BaseSettings):
    """Deployment values from the environment (SUPABASE_URL, SUPABASE_ANON_KEY, ...)."""

    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_access_token: str = ""
    campus_navigator_user_id: str = ""
    campus_navigator_timeout_s: float = 15.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


_settings = DataStoreSettings()


class DataStoreConfig:
    """Remote data store (Supabase PostgREST) connection."""

    URL = _settings.supabase_url
    ANON_KEY = _settings.supabase_anon_key
    ACCESS_TOKEN = _settings.supabase_access_token or None
    USER_ID = _settings.campus_navigator_user_id or None
    TIMEOUT_S = _settings.campus_navigator_timeout_s

    REST_PATH = "/rest/v1"
    CATALOG_TABLE = "campus_locations"
    MARKERS_TABLE = "custom_markers"

    @classmethod
    def is_configured(cls) -> bool:
        """True when both the store URL and API key are set."""
        return bool(cls.URL and cls.ANON_KEY)
