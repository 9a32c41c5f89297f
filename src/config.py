import argparse
from decimal import Decimal
from enum import StrEnum
import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class ConfigMode(StrEnum):
    LOCAL = "local"
    LOCAL_TESTS = "local-tests"
    PROD = "prod"


class _Currency(BaseModel):
    symbol: str = Field(default="$")
    precision: int = Field(default=2, ge=0)


class _Logging(BaseModel):
    error_log_path: str = Field(default="logs/errors.log")


class _CatalogProduct(BaseModel):
    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    price: Decimal = Field(ge=0)


class Config(BaseSettings):
    model_config = SettingsConfigDict(extra="allow")
    mode: ConfigMode = ConfigMode.LOCAL
    currency: _Currency = Field(default=_Currency())
    logging: _Logging = Field(default=_Logging())
    catalog: list[_CatalogProduct] = Field(default_factory=list)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_file_path = init_settings.init_kwargs.get("yaml_file")  # type: ignore
        if not yaml_file_path:
            raise Exception("Missing required init arg: yaml_file")
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file_path),
        )

    @property
    def debug(self):
        return self.mode != ConfigMode.PROD


def init_config(
    parse_cli: bool = True, config_path: Path | str | None = None
) -> Config:
    cli_args = None
    if parse_cli:
        parser = argparse.ArgumentParser()
        parser.add_argument(
            "--config-path",
            help="Path to the configuration file",
            dest="config_path",
        )
        cli_args, _ = parser.parse_known_args(sys.argv)
    final_cfg_path = config_path or getattr(cli_args, "config_path", None)
    if env_mode := os.environ.get("MODE"):
        final_cfg_path = final_cfg_path or (Path() / "config" / (env_mode + ".yaml"))
    if not final_cfg_path:
        raise ValueError(
            """Missing config_path. Provide it using a cli flag --config-path or a function arg.
            Also you can specify MODE env variable to find config by its value"""
        )
    if not Path(final_cfg_path).exists():
        raise ValueError("Config path doesn't exist: %s" % final_cfg_path)
    return Config(yaml_file=final_cfg_path)  # type: ignore
