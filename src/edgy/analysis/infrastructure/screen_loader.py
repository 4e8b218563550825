"""
Screen export loader.

Accepts the document shapes the plugin and the batch interface produce:
- {"screens": [Screen, ...], ...}
- [Screen, ...]
- a single Screen object
"""

import json
from pathlib import Path
from typing import Any, List

from edgy.analysis.domain.models import Screen
from edgy.shared.domain.exceptions import ScreenFileError
from edgy.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def parse_screens(data: Any, source: str = "<memory>") -> List[Screen]:
    """
    Convert a decoded screen export into Screen models.

    Raises:
        ScreenFileError: If the document is not a screen export
    """
    if isinstance(data, dict) and data.get("screens") is not None:
        data = data["screens"]

    items = data if isinstance(data, list) else [data]

    screens: List[Screen] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ScreenFileError(
                f"Screen #{index} in {source} is not an object",
                context={"source": source, "index": index},
            )
        try:
            screens.append(Screen.from_json(item))
        except RecursionError as e:
            raise ScreenFileError(
                f"Screen #{index} in {source} is nested too deeply",
                context={"source": source, "index": index},
            ) from e
        except (AttributeError, TypeError, ValueError) as e:
            raise ScreenFileError(
                f"Screen #{index} in {source} is malformed: {e}",
                context={"source": source, "index": index},
            ) from e
    return screens


def load_screens_file(path: Path | str) -> List[Screen]:
    """
    Read and parse a screen export file.

    Raises:
        ScreenFileError: If the file is missing, unreadable or not valid JSON
    """
    path = Path(path)
    if not path.is_file():
        raise ScreenFileError(f"Screen file not found: {path}", context={"path": str(path)})

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ScreenFileError(f"Cannot read screen file {path}: {e}", context={"path": str(path)}) from e
    except (json.JSONDecodeError, RecursionError) as e:
        raise ScreenFileError(f"Invalid JSON in {path}: {e}", context={"path": str(path)}) from e

    screens = parse_screens(data, source=str(path))
    logger.debug("screen_file_loaded", path=str(path), screen_count=len(screens))
    return screens
