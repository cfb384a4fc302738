from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Central settings object.
    Values come from env vars; locally you can use backend/.env.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Where the catalog + offer tables live.
    # If DATA_BASE_URL is set, tables are fetched over HTTP instead of read from DATA_DIR.
    DATA_DIR: Path = PACKAGE_DIR / "data"
    DATA_BASE_URL: str = ""
    CATALOG_PATH: str = "/Credit-Card-Products.csv"
    FETCH_TIMEOUT_SECONDS: float = 30.0

    # Search behaviour
    DEBOUNCE_SECONDS: float = 0.3
    MAX_DROPDOWN_MATCHES: int = 50

    LOG_LEVEL: str = "INFO"

    # Versioning
    APP_VERSION: str = "0.1.0"
    BUILD_ID: str = "dev"


# ✅ MUST EXIST: other modules import this
settings = Settings()
