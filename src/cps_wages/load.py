"""Load the CPS 1985 wage sample into a validated polars DataFrame.

The loader never imputes: a missing, unparseable or out-of-range value aborts
the load with a ParseError naming the column and the (1-based) data row.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import asdict
from pathlib import Path

import polars as pl

from cps_wages.config import (
    COLUMN_MAPPING,
    MARITAL_STATUS_CODES,
    OCCUPATION_NAMES,
    RACE_CODES,
    SEX_CODES,
)
from cps_wages.errors import LoadError, MissingColumnError, ParseError
from cps_wages.models import WORKER_SCHEMA, WorkerRecord

logger = logging.getLogger(__name__)

CODE_TABLES: dict[str, dict[int, str]] = {
    "sex": SEX_CODES,
    "marital_status": MARITAL_STATUS_CODES,
    "race": RACE_CODES,
}

# (column, valid when, reason)
DOMAIN_RULES: list[tuple[str, pl.Expr, str]] = [
    ("wage", pl.col("wage").is_finite() & (pl.col("wage") > 0), "wage must be positive"),
    (
        "occupation",
        pl.col("occupation").is_in(list(OCCUPATION_NAMES)),
        "unknown occupation code",
    ),
    ("education", pl.col("education") >= 0, "education must be non-negative"),
    ("experience", pl.col("experience") >= 0, "experience must be non-negative"),
    ("age", pl.col("age") > 0, "age must be positive"),
]


def _raise_first(df: pl.DataFrame, column: str, invalid: pl.Expr, reason: str) -> None:
    """Raise ParseError for the first row matching ``invalid``, if any."""
    offending = df.with_row_index("__row").filter(invalid)
    if offending.is_empty():
        return
    row = offending.row(0, named=True)
    raise ParseError(column, row["__row"] + 1, row[column], reason)


def _check_complete(df: pl.DataFrame) -> None:
    for column, dtype in df.schema.items():
        missing = pl.col(column).is_null()
        if dtype == pl.String:
            missing = missing | (pl.col(column) == "")
        _raise_first(df, column, missing, "missing value")


def _cast(df: pl.DataFrame, dtypes: dict[str, pl.DataType]) -> pl.DataFrame:
    """Cast string columns, failing on the first value that does not convert."""
    cast = df.with_columns(
        [pl.col(name).cast(dtype, strict=False) for name, dtype in dtypes.items()]
    )
    for name, dtype in dtypes.items():
        failed = cast[name].is_null() & df[name].is_not_null()
        _raise_first(
            df.with_columns(failed.alias("__failed")),
            name,
            pl.col("__failed"),
            f"not a valid {dtype}",
        )
    return cast


def _check_domains(df: pl.DataFrame) -> None:
    for column, valid, reason in DOMAIN_RULES:
        _raise_first(df, column, ~valid, reason)


def _decode(df: pl.DataFrame) -> pl.DataFrame:
    """Replace integer codes with their Enum labels."""
    for column, codes in CODE_TABLES.items():
        _raise_first(df, column, ~pl.col(column).is_in(list(codes)), f"unknown {column} code")
    return df.with_columns(
        [
            pl.col(column).replace_strict(codes, return_dtype=WORKER_SCHEMA[column])
            for column, codes in CODE_TABLES.items()
        ]
    )


def load_workers(path: str | Path) -> pl.DataFrame:
    """Read the wage CSV and return one validated row per worker.

    Args:
        path: CSV file with a header containing at least the columns in
            config.COLUMN_MAPPING (case-sensitive)

    Returns:
        DataFrame with columns wage, occupation, education, experience, age,
        sex, marital_status, race

    Raises:
        LoadError: If the file does not exist
        MissingColumnError: If a required column is absent
        ParseError: If a value is missing, unparseable or out of range
    """
    path = Path(path)
    if not path.is_file():
        raise LoadError(f"Dataset not found: {path}")

    # Read everything as text so bad values are reported, not silently inferred
    raw = pl.read_csv(path, infer_schema_length=0)

    missing = [column for column in COLUMN_MAPPING if column not in raw.columns]
    if missing:
        raise MissingColumnError(missing)

    df = (
        raw.select(list(COLUMN_MAPPING))
        .rename(COLUMN_MAPPING)
        .with_columns(pl.all().str.strip_chars())
    )
    _check_complete(df)

    df = _cast(
        df,
        {
            name: pl.Float64 if name == "wage" else pl.Int64
            for name in COLUMN_MAPPING.values()
        },
    )
    _check_domains(df)
    df = _decode(df)

    logger.info("Loaded %d workers from %s", df.height, path)
    return df


def frame_from_records(records: Iterable[WorkerRecord]) -> pl.DataFrame:
    """Build a validated worker DataFrame from WorkerRecord objects."""
    text_schema = {
        name: pl.String if isinstance(dtype, pl.Enum) else dtype
        for name, dtype in WORKER_SCHEMA.items()
    }
    df = pl.DataFrame([asdict(record) for record in records], schema=text_schema)

    _check_complete(df)
    _check_domains(df)
    for column, codes in CODE_TABLES.items():
        _raise_first(
            df,
            column,
            ~pl.col(column).is_in(list(codes.values())),
            f"unknown {column} label",
        )
    return df.cast(WORKER_SCHEMA)


def iter_records(df: pl.DataFrame) -> Iterator[WorkerRecord]:
    """Yield one WorkerRecord per row; derived columns are ignored."""
    for row in df.select(list(WORKER_SCHEMA)).iter_rows(named=True):
        yield WorkerRecord(**row)
