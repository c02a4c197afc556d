from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path("data")
    # Security: the default key is for local development only; set JOBBOARD_SECRET_KEY in production.
    secret_key: str = "dev-only-change-me"
    token_salt: str = "session"
    token_ttl_seconds: int = 7 * 24 * 3600  # 7 days
    cookie_name: str = "token"
    cookie_secure: bool = False
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]
    job_listing_cap: int = 50
    candidate_page_size: int = 10
    candidate_max_page_size: int = 100
    default_jobseeker_location: str = "Kenya"
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "jobboard.sqlite"

    model_config = {"env_prefix": "JOBBOARD_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
