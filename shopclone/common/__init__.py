# Common utilities
from .config_loader import CloneSettings, load_clone_settings, load_config
from .log_config import setup_logging
