from functools import lru_cache
import os
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    timezone: str = Field(default="UTC")
    log_level: str = Field(default="INFO")
    reject_negative_amounts: bool = Field(default=False)

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        timezone=os.getenv("LEDGER_TIMEZONE", Settings.model_fields["timezone"].default),
        log_level=os.getenv("LOG_LEVEL", Settings.model_fields["log_level"].default).upper(),
        reject_negative_amounts=bool(int(os.getenv("REJECT_NEGATIVE_AMOUNTS", "0"))),
    )
