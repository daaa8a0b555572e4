from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)

_EXCEL_ENGINES = {".xlsx": "openpyxl", ".xlsm": "openpyxl", ".xls": "xlrd"}


def load_expeditions(path: Union[str, Path], *, low_memory: bool = False) -> pd.DataFrame:
    """
    Load a raw expeditions table from a delimited text file or a spreadsheet.
    Columns are returned as found; see data_prep.records.canonicalize_columns().
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix in (".csv", ".txt"):
        df = pd.read_csv(p, low_memory=low_memory)
    elif suffix == ".tsv":
        df = pd.read_csv(p, sep="\t", low_memory=low_memory)
    elif suffix in _EXCEL_ENGINES:
        df = pd.read_excel(p, engine=_EXCEL_ENGINES[suffix])
    else:
        raise ValueError(f"Unsupported expeditions file type: {suffix or p.name!r}")

    logger.debug(f"Loaded {len(df)} rows x {len(df.columns)} columns from {p}")
    return df
