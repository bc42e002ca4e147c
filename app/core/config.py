from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Coupon API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Store
    SEED_COUPONS: bool = True

    # Lookaside cache for the coupon listing
    CACHE_ENABLED: bool = True
    CACHE_ABSOLUTE_EXPIRATION_SECONDS: float = 10
    CACHE_SLIDING_EXPIRATION_SECONDS: float = 120
    CACHE_INVALIDATE_ON_WRITE: bool = False

    # Cache-Control max-age sent with single coupon reads
    COUPON_CACHE_MAX_AGE_SECONDS: int = 10

    # Validation
    COUPON_NAME_MAX_LENGTH: int = 100
    REPORT_ALL_VALIDATION_ERRORS: bool = False

    @property
    def version(self) -> str:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            return pkg_version("coupon-api")
        except PackageNotFoundError:
            return "0.0.0-dev"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
