from enum import Enum
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    html_dir: Path = PACKAGE_DIR / "assets" / "html"
    assets_dir: Path = PACKAGE_DIR / "assets"
    # Base url of the meal lookup api the search page talks to. Defaults to
    # the /api this app serves on host:port.
    api_url: str = ""
    mealdb_api_url: str = "https://www.themealdb.com/api/json/v1/1"
    timeout: float = 20
    serve_api: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _default_api_url(self) -> "Config":
        if not self.api_url:
            host = "127.0.0.1" if self.host in ("0.0.0.0", "::", "") else self.host
            self.api_url = f"http://{host}:{self.port}/api"
        return self

    @property
    def debug(self) -> bool:
        return self.env == Env.local
