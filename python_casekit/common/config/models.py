from pydantic_settings import BaseSettings, SettingsConfigDict

from common.models import CaseStyle

class LoggingConfig(BaseSettings):
    level: str = "INFO"
    format: str = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")

class CaseConfig(BaseSettings):
    default_style: CaseStyle = CaseStyle.CAMEL
    keep_digits: bool = False

    model_config = SettingsConfigDict(env_prefix="CASE_")

class AppConfig(BaseSettings):
    name: str = "casekit"

    logging: LoggingConfig = LoggingConfig()
    case: CaseConfig = CaseConfig()

    model_config = SettingsConfigDict(env_file=".env", env_nested_delimiter="__")
