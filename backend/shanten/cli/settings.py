"""Command line configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class CliSettings(BaseSettings):
    model_config = {"env_prefix": "SHANTEN_"}

    # Directory for timestamped log files; stderr only when unset
    log_dir: str | None = Field(default=None, min_length=1)

    # False scores normal-form decompositions with the uncapped block formula
    cap_blocks: bool = True
