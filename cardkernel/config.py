from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./cardkernel.db"
    default_tz: str = "UTC"
    kernel_api_key: str | None = None
    log_level: str = "INFO"

    # Evaluation throttle (seconds between full ladder runs)
    cards_evaluation_cooldown_seconds: float = 2.0

    # Time-of-day gates (local hour, 0-23)
    cards_streak_at_risk_hour: int = 19
    cards_evening_hour: int = 17
    cards_almost_there_ratio: float = 0.5  # AlmostThere when progress in [ratio, 1.0)

    # Tip rotation
    cards_recent_tip_capacity: int = 25  # RecencyLedger length
    cards_recent_tip_widen_window: int = 10  # Still excluded once every tip was seen recently

    # Daily caps
    cards_max_shows_per_day: int = 1  # Every tier 1 / tier 2 card
    cards_tip_max_shows_per_day: int = 999  # Tips are the fallback, effectively uncapped

    # Feature id whose free uses drive the TryFeatureX card
    cards_gated_feature_id: str = "intervals"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
