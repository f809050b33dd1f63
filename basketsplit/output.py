"""Writing split results.

Results are emitted as a JSON object whose key order is the order in which
delivery methods were selected and whose lists keep basket order. Several
baskets are written as one object keyed by basket source.
"""

import json
from pathlib import Path
from typing import Any

from upath import UPath

from basketsplit.exceptions import OutputError


class ResultWriter:
    """Renders split results as JSON and writes them to disk.

    Example:
        >>> writer = ResultWriter()
        >>> writer.write({'Courier': ['Steak']}, Path('out/result.json'))
    """

    def __init__(self, indent: int | None = 4):
        self.indent = indent

    def dumps(self, result: dict[str, Any]) -> str:
        return json.dumps(result, indent=self.indent, ensure_ascii=False)

    def write(self, result: dict[str, Any], path: UPath | Path | str) -> None:
        """Write ``result`` as JSON to ``path``, creating parent directories.

        Raises:
            OutputError: If the file cannot be written.
        """
        path = UPath(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.dumps(result) + '\n', encoding='utf-8')
        except OSError as e:
            raise OutputError(str(path), cause=e) from e
