from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "LEASE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Arithmetic (significant digits, ROUND_HALF_UP)
    decimal_precision: int = 20

    # Differences at or under this are not meaningful
    tie_threshold: Decimal = Decimal("100")

    # Extension
    default_extension_months: int = 6
    extension_incomplete_after_months: int = 3  # Extension only applies near lease end

    # Lease transfer defaults (midpoint of the $75-$895 range seen across lessors)
    default_transfer_fee: Decimal = Decimal("400")
    default_marketplace_fee: Decimal = Decimal("100")
    default_registration_fee: Decimal = Decimal("150")

    # Early termination fee assumed when projecting the timeline
    timeline_early_termination_fee: Decimal = Decimal("500")


settings = Settings()
