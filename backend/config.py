import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # LLM collaborator (Gemini). Empty key = analysis/planning degrade to heuristics.
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    llm_timeout_s: float = 30.0

    # Listings provider (JSearch on RapidAPI). Empty key = search is unavailable.
    rapidapi_key: str = ""
    rapidapi_host: str = "jsearch.p.rapidapi.com"
    provider_timeout_s: float = 15.0
    search_num_pages: int = 3

    # Optional durable store; empty = process-local store
    mongodb_uri: str = ""
    mongodb_db: str = "jobhunt"

    max_upload_size_mb: int = 10
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    rate_limit_enabled: bool = True
    llm_rate_limit: str = "10/minute"
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def llm_configured(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def provider_configured(self) -> bool:
        return bool(self.rapidapi_key)


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
