"""Custom exceptions for basketsplit.

This module defines the hierarchy of exceptions raised by the library so that
callers can tell a broken catalogue apart from a broken basket or a failed
write, and catch everything with a single except clause when they don't care.
"""


class BasketSplitError(Exception):
    """Base exception for all basketsplit errors.

    Example:
        try:
            splitter = BasketSplitter.from_source('config.json')
        except BasketSplitError as e:
            print(f"basketsplit error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SourceLoadError(BasketSplitError):
    """Failed to load a document from a file path or URL.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    kind = 'document'

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load {self.kind} from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ConfigLoadError(SourceLoadError):
    """The catalogue could not be loaded or is malformed.

    Raised when the catalogue source is unreachable, is not valid JSON/YAML,
    or does not have the shape ``{product: [method, ...]}``. A splitter is
    never constructed from a catalogue that raised this error.
    """

    kind = 'catalogue'


class BasketLoadError(SourceLoadError):
    """The basket could not be loaded or is not a list of product names."""

    kind = 'basket'


class ConfigurationError(BasketSplitError):
    """Error in the basketsplit settings.

    Attributes:
        config_path: The path to the settings file, if applicable.
        field: The specific settings field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(BasketSplitError):
    """Error writing a split result.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
