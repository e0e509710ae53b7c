from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Ledger'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Platform configuration (initial values of the PlatformConfig singleton)
    PLATFORM_OWNER: str = 'deployer'
    DEFAULT_PLATFORM_FEE_PERCENT: int = 5
    DEFAULT_MIN_TICKET_PRICE: int = 1_000_000

    # Refund liability horizon, in heights (144 heights ~ 1 day)
    MAX_REFUND_WINDOW: int = 4320

    # Host clock
    GENESIS_HEIGHT: int = 0

    # Payment rail identity holding ticket proceeds until refund/withdrawal
    ESCROW_ACCOUNT: str = 'platform-escrow'

    # When enabled, purchase-ticket fails with EventExpired once the event height is reached
    RESTRICT_PURCHASE_AFTER_EVENT: bool = False

    # Text bounds for event fields
    MAX_EVENT_NAME_LENGTH: int = 100
    MAX_EVENT_DESCRIPTION_LENGTH: int = 500
    MAX_EVENT_VENUE_LENGTH: int = 100
    MAX_EVENT_CATEGORY_LENGTH: int = 50

    @field_validator('DEFAULT_PLATFORM_FEE_PERCENT')
    @classmethod
    def validate_fee_percent(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError('DEFAULT_PLATFORM_FEE_PERCENT must be between 0 and 100')
        return v

    @field_validator(
        'DEFAULT_MIN_TICKET_PRICE',
        'MAX_REFUND_WINDOW',
        'GENESIS_HEIGHT',
        'MAX_EVENT_NAME_LENGTH',
        'MAX_EVENT_DESCRIPTION_LENGTH',
        'MAX_EVENT_VENUE_LENGTH',
        'MAX_EVENT_CATEGORY_LENGTH',
    )
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError('value must be non-negative')
        return v

    @property
    def EVENT_TEXT_BOUNDS(self) -> dict[str, int]:
        return {
            'name': self.MAX_EVENT_NAME_LENGTH,
            'description': self.MAX_EVENT_DESCRIPTION_LENGTH,
            'venue': self.MAX_EVENT_VENUE_LENGTH,
            'category': self.MAX_EVENT_CATEGORY_LENGTH,
        }


settings = Settings()  # type: ignore
