from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Planboard"
    API_V1_STR: str = "/api/v1"
    FRONTEND_HOST: str = "http://localhost:9002"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # Observability Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    ENABLE_METRICS: bool = True

    # Planning board layout
    LANE_CEILING: int = 10  # highest lane searched before a task is clamped
    DEFAULT_VIEW_MODE: Literal["hourly", "daily", "weekly", "monthly"] = "daily"
    DEFAULT_ROW_HEIGHT_LEVEL: Literal["small", "medium", "large"] = "medium"
    DEFAULT_ZOOM: float = 50.0
    MAX_TIMELINE_UNITS: int = 10_000  # upper bound on unit indices per request
    MAX_TASKS_PER_REQUEST: int = 5_000

    @model_validator(mode="after")
    def _check_layout_limits(self) -> Self:
        if self.LANE_CEILING < 1:
            raise ValueError("LANE_CEILING must be at least 1")
        if self.DEFAULT_ZOOM <= 0:
            raise ValueError("DEFAULT_ZOOM must be positive")
        if self.MAX_TIMELINE_UNITS < 1 or self.MAX_TASKS_PER_REQUEST < 1:
            raise ValueError("request limits must be at least 1")
        return self


settings = Settings()
