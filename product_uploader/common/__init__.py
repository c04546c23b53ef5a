# Common utilities
from .csv_utils import configure_csv, load_rows, read_csv
from .log_config import setup_logging
from .settings import (
    DEFAULT_API_VERSION,
    MissingConfigError,
    UploaderSettings,
    load_settings,
)
