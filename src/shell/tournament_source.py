"""Tournament Data Source - Imperative Shell.

Loads the tournament collection from a YAML or JSON export of the remote
query layer. Parsing is done by the core module.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from src.core.tournament import TournamentRecord, parse_tournaments


logger = logging.getLogger(__name__)


class _TournamentLoader(yaml.SafeLoader):
    """SafeLoader that keeps leading-zero numbers such as zip codes as strings.

    Plain YAML 1.1 would read an unquoted 07102 as the octal int 3650.
    """


_TournamentLoader.yaml_implicit_resolvers = {
    first: list(resolvers)
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_TournamentLoader.yaml_implicit_resolvers["0"].insert(
    0, ("tag:yaml.org,2002:str", re.compile(r"^0[0-9]+$"))
)


def _extract_rows(data: Any) -> list[dict[str, Any]]:
    """Accept either a bare list or {"tournaments": [...]}."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("tournaments", [])
    if not isinstance(data, list):
        raise ValueError("Tournament data must be a list or a mapping with 'tournaments'")
    return [row for row in data if isinstance(row, dict)]


def load_tournaments(path: str | Path) -> list[TournamentRecord]:
    """Load and parse tournaments from a file.

    This method performs file I/O. Files ending in .json are read as JSON,
    anything else as YAML.

    Args:
        path: Path to the data file

    Returns:
        Parsed tournaments in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has the wrong shape or invalid JSON
        yaml.YAMLError: If the file is invalid YAML
    """
    path = Path(path)

    logger.info("Loading tournaments from %s", path)

    with open(path, "r") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.load(f, Loader=_TournamentLoader)

    rows = _extract_rows(data)
    tournaments = parse_tournaments(rows)

    skipped = len(rows) - len(tournaments)
    if skipped:
        logger.warning("Skipped %d invalid tournament rows", skipped)

    logger.info("Loaded %d tournaments", len(tournaments))

    return tournaments
