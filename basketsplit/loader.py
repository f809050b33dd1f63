"""Loading catalogues and baskets from files and URLs.

This module reads the two input documents of a split: the catalogue
(``{product: [method, ...]}``) and the basket (``[product, ...]``). Both can
come from HTTP(S) URLs or from any path ``universal_pathlib`` understands,
in JSON or YAML.
"""

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml
from pydantic import TypeAdapter, ValidationError
from upath import UPath

from basketsplit.catalogue import Catalogue
from basketsplit.exceptions import BasketLoadError, ConfigLoadError, SourceLoadError

logger = logging.getLogger(__name__)

_BASKET_ADAPTER = TypeAdapter(list[str])


class SourceLoader:
    """Loads catalogue and basket documents from URLs or file paths.

    Features:
        - Load from URLs (http/https), local paths or fsspec paths (s3://, ...)
        - JSON and YAML, picked by file suffix or response content type
        - Every failure surfaces as a ``SourceLoadError`` subclass

    Example:
        >>> loader = SourceLoader()
        >>> catalogue = loader.load_catalogue('https://shop.example.com/config.json')
        >>> basket = loader.load_basket('./basket-1.json')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
            base_path: Base path for resolving relative file paths.
                      Defaults to current working directory.
        """
        self._http_client = http_client
        self._base_path = UPath(base_path) if base_path else UPath(Path.cwd())

    def load_catalogue(self, source: str, strict: bool = False) -> Catalogue:
        """Load and validate a catalogue.

        Args:
            source: URL or file path of the catalogue document.
            strict: Reject products listing no delivery method.

        Raises:
            ConfigLoadError: If the catalogue cannot be read, parsed or validated.
        """
        content = self._load(source, ConfigLoadError)
        return Catalogue(content, source=source, strict=strict)

    def load_basket(self, source: str) -> list[str]:
        """Load a basket as an ordered list of product names.

        Raises:
            BasketLoadError: If the basket cannot be read, parsed or validated.
        """
        content = self._load(source, BasketLoadError)
        try:
            return _BASKET_ADAPTER.validate_python(content)
        except ValidationError as e:
            raise BasketLoadError(source, cause=e) from e

    def _load(self, source: str, error: type[SourceLoadError]) -> Any:
        logger.debug(f'Loading {error.kind} from {source}')
        try:
            if self._is_url(source):
                return self._load_from_url(source)
            return self._load_from_file(source)
        except SourceLoadError as e:
            raise error(source, cause=e.cause) from e.cause

    def _is_url(self, text: str) -> bool:
        """Check if a string is an HTTP(S) URL."""
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https')
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> Any:
        """Load document content from a URL."""
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            yaml_like = 'yaml' in content_type or url.endswith(('.yaml', '.yml'))
            return self._parse(response.text, yaml_like)

        except httpx.HTTPError as e:
            raise SourceLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SourceLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> Any:
        """Load document content from a file."""
        path = UPath(file_path)
        if not path.is_absolute():
            path = self._base_path / file_path

        if not path.exists():
            raise SourceLoadError(
                file_path, cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            return self._parse(content, path.suffix.lower() in ('.yaml', '.yml'))
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise SourceLoadError(file_path, cause=e)
        except OSError as e:
            raise SourceLoadError(file_path, cause=e)

    @staticmethod
    def _parse(content: str, yaml_like: bool) -> Any:
        if yaml_like:
            return yaml.safe_load(content)
        return json.loads(content)


def load_catalogue(source: str, strict: bool = False) -> Catalogue:
    """Load a catalogue with a default ``SourceLoader``."""
    return SourceLoader().load_catalogue(source, strict=strict)


def load_basket(source: str) -> list[str]:
    """Load a basket with a default ``SourceLoader``."""
    return SourceLoader().load_basket(source)
