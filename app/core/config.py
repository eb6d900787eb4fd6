import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

STAGING_LAYOUTS = ("nested", "flat")
PRESENTATION_UPDATE_MODES = ("sidecar", "in_place")
DOWNLOAD_NAME_RULES = ("strip_prefix", "verbatim")


def _choice(name: str, default: str, allowed: tuple) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)} (got '{value}')")
    return value


class Config:
    """Central configuration for the document service.

    Values are read from the environment when the instance is created, so a
    fresh ``Config()`` picks up variables set after import.
    """

    def __init__(self):
        self.WEB_ROOT = Path(os.getenv('WEB_ROOT', 'wwwroot'))
        self.UPLOADS_DIR = os.getenv('UPLOADS_DIR', 'uploads')

        # nested: uploads/<name>/<name>, flat: uploads/<name>
        self.STAGING_LAYOUT = _choice('STAGING_LAYOUT', 'nested', STAGING_LAYOUTS)
        self.PRESENTATION_UPDATE_MODE = _choice(
            'PRESENTATION_UPDATE_MODE', 'sidecar', PRESENTATION_UPDATE_MODES
        )
        self.DOWNLOAD_NAME_RULE = _choice('DOWNLOAD_NAME_RULE', 'strip_prefix', DOWNLOAD_NAME_RULES)

        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.ENVIRONMENT = os.getenv('ENVIRONMENT', 'production')


settings = Config()
