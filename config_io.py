from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


def load_json_config(path: Path) -> Dict[str, Any]:
    """Read the solver's JSON config (glyphs, colors, logging).

    Raises:
        FileNotFoundError: If the file does not exist.
        SystemExit: If the file is not a JSON object, with a friendly message.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SystemExit(
            f"\nERROR: Your config is not valid JSON.\n"
            f"File: {path}\n"
            f"Line {e.lineno}, Col {e.colno}\n"
            f"{e.msg}\n\n"
            f'Common fix: colors are lists like [230, 90, 70], glyphs are strings like "+".\n'
        )
    if not isinstance(data, dict):
        raise SystemExit(
            f"\nERROR: Config {path} must be a JSON object, "
            f'e.g. {{"symbols": {{"routed": "+"}}}}.\n'
        )
    return data
