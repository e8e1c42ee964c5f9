from .app_config import (
    AppConfig,
    DasipConfig,
    DEFAULT_CONFIG_FILE,
    DEFAULT_DASIP_FILE,
    DEFAULT_TEMPLATES_FILE,
    load_app_config,
    load_dasip_config,
)
