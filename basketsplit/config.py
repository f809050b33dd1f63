import json
import os
import re
from pathlib import Path

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from basketsplit.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['basketsplit.yaml', 'basketsplit.yml', 'basketsplit.json']

_ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')


class SplitConfig(BaseSettings):
    """Settings for a basketsplit run."""

    model_config = SettingsConfigDict(env_prefix='BASKETSPLIT_')

    catalogue: str = Field(
        ..., description='Path or URL to the catalogue of products and delivery methods.'
    )

    basket: str | None = Field(
        None, description='Optional path or URL to the basket to split.'
    )

    output: str | None = Field(
        None, description='Optional file to write the result to, stdout if omitted.'
    )

    strict: bool = Field(
        False, description='Reject catalogue products that list no delivery method.'
    )

    indent: int = Field(4, ge=0, le=8, description='JSON indentation of the result.')

    @field_validator('catalogue')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('catalogue must not be empty')
        return value


def _expand_env_vars(text: str) -> str:
    """Replace ``${VAR}`` with the value of VAR, leaving unknown names as is."""
    return _ENV_VAR_PATTERN.sub(
        lambda match: os.environ.get(match.group(1), match.group(0)), text
    )


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(_expand_env_vars(Path(path).read_text())) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(_expand_env_vars(Path(path).read_text()))


def _load_file(path: str | Path) -> dict:
    try:
        if Path(path).suffix.lower() == '.json':
            return load_json(path)
        return load_yaml(path)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f'Unreadable configuration file: {e}', config_path=str(path)
        ) from e


def _validation_error(
    e: ValidationError, config_path: str | None = None
) -> ConfigurationError:
    error = e.errors()[0]
    field = '.'.join(str(part) for part in error['loc']) or None
    return ConfigurationError(
        f'Invalid configuration: {error["msg"]}', config_path=config_path, field=field
    )


def _validate(data: dict, config_path: str | None = None) -> SplitConfig:
    try:
        return SplitConfig.model_validate(data)
    except ValidationError as e:
        raise _validation_error(e, config_path) from e


def from_environment(**values) -> SplitConfig:
    """Build settings from ``values`` plus ``BASKETSPLIT_*`` environment variables.

    Raises:
        ConfigurationError: If the combined settings are invalid.
    """
    try:
        return SplitConfig(**values)
    except ValidationError as e:
        raise _validation_error(e) from e


def create_default_config() -> dict:
    """Return a starter configuration, as written by ``basketsplit init``."""
    return {
        'catalogue': './config.json',
        'basket': './basket.json',
        'output': None,
        'strict': False,
        'indent': 4,
    }


def get_config(path: str | None = None) -> SplitConfig:
    """Load configuration from a file, pyproject.toml or the environment.

    Raises:
        FileNotFoundError: If no configuration source exists.
        ConfigurationError: If the configuration found is invalid.
    """
    if path:
        return _validate(_load_file(path), config_path=path)

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return _validate(_load_file(candidate), config_path=str(candidate))

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(pyproject_path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f'Unreadable configuration file: {e}', config_path=str(pyproject_path)
            ) from e
        tools = pyproject.get('tool', {})

        if 'basketsplit' in tools:
            return _validate(tools['basketsplit'], config_path=str(pyproject_path))

    if os.environ.get('BASKETSPLIT_CATALOGUE'):
        return from_environment()

    raise FileNotFoundError('config not found')
