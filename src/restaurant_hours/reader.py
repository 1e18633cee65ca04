from typing import Optional
from pathlib import Path
import logging
import warnings

import pandas as pd

from restaurant_hours.catalog import Catalog, parse_catalog
from restaurant_hours.context import Context
from restaurant_hours.util import EmptyCatalog

log = logging.getLogger(__name__)

COLUMNS = ["name", "hours"]


def read_rows(path: str | Path) -> list[tuple[str, str]]:
    """
    Read a header-less CSV file of `"name","hours"` rows.

    Missing cells come back as empty strings. Columns past the second are
    dropped with a warning.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", pd.errors.ParserWarning)
            frame = pd.read_csv(
                path,
                header=None,
                names=COLUMNS,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding="utf-8",
            )
    except pd.errors.EmptyDataError as err:
        raise EmptyCatalog(f"no rows in {path}") from err

    for warning in caught:
        if issubclass(warning.category, pd.errors.ParserWarning):
            log.warning(f"{path}: extra columns ignored: {warning.message}")

    frame = frame.fillna("")
    log.debug(f"Read {len(frame)} rows from {path}")
    return list(frame.itertuples(index=False, name=None))


def load_catalog(path: str | Path, ctx: Optional[Context] = None) -> Catalog:
    return parse_catalog(read_rows(path), ctx)
