import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from routegraph.models import Entity

logger = logging.getLogger(__name__)

# Column layout of the social media users export: id, name, ..., country (7th).
ID_COLUMN = 0
NAME_COLUMN = 1
ATTRIBUTE_COLUMN = 6
MIN_COLUMNS = 7


def read_entities(
    stream: Iterable[str],
    *,
    attribute_column: int = ATTRIBUTE_COLUMN,
    min_columns: int = MIN_COLUMNS,
) -> List[Entity]:
    """Read entities from a comma-delimited stream with a header row.

    Short rows are skipped silently; rows whose id is not an integer are
    skipped with a warning. Neither stops the read.
    """
    needed = max(min_columns, attribute_column + 1, NAME_COLUMN + 1)
    entities: List[Entity] = []
    reader = csv.reader(stream)
    next(reader, None)  # header
    for idx, row in enumerate(reader, start=2):  # header is line 1
        if len(row) < needed:
            logger.debug("Skipping short row at line %d (%d column(s))", idx, len(row))
            continue
        try:
            entity_id = int(row[ID_COLUMN].strip())
        except ValueError:
            logger.warning("Skipping row at line %d: invalid id %r", idx, row[ID_COLUMN])
            continue
        entities.append(Entity(entity_id, row[NAME_COLUMN], row[attribute_column]))
    return entities


def load_entities(
    path: Union[str, Path],
    *,
    attribute_column: int = ATTRIBUTE_COLUMN,
    min_columns: int = MIN_COLUMNS,
) -> List[Entity]:
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV not found: {filepath}")
    with filepath.open("r", newline="", encoding="utf-8-sig") as f:
        entities = read_entities(f, attribute_column=attribute_column, min_columns=min_columns)
    logger.info("Loaded %d entit(ies) from %s", len(entities), filepath)
    return entities
