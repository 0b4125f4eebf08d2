from pydantic_settings import BaseSettings
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000

    log_level: LogLevel = "INFO"  # DEBUG also logs every unmapped codepoint

    require_auth: bool = False
    api_key: str = "dummy-local-key"

    max_input_chars: int = 100_000  # per POST /v1/transliterate request

    final_newline: bool = True  # CLI: terminate output with "\n" like the classic filter

    class Config:
        env_file = ".env"
        extra = "ignore"
