"""Aggregations feeding the wage report.

Every function takes a worker DataFrame and returns a new, keyed DataFrame
(or a scalar). Groups come from polars ``group_by``, so the groups of a key
always partition the input and groups with no rows never appear.

Correlations that cannot be computed (fewer than two rows, or a field with no
variance) are reported as ``None`` rather than 0.0, and show up as null cells
in tables.
"""

import logging
from collections.abc import Sequence

import numpy as np
import polars as pl
from scipy import stats

from cps_wages.config import NUMERIC_FIELDS

logger = logging.getLogger(__name__)


def _as_keys(by: str | Sequence[str]) -> list[str]:
    return [by] if isinstance(by, str) else list(by)


def group_mean(
    df: pl.DataFrame, by: str | Sequence[str], value: str = "wage"
) -> pl.DataFrame:
    """Mean of ``value`` per group.

    Args:
        df: Worker DataFrame
        by: Key column(s)
        value: Column to average

    Returns:
        DataFrame with the key columns, ``mean_<value>`` and ``count``,
        sorted by key
    """
    keys = _as_keys(by)
    return (
        df.group_by(keys)
        .agg(
            pl.col(value).mean().alias(f"mean_{value}"),
            pl.len().alias("count"),
        )
        .sort(keys)
    )


def as_mapping(df: pl.DataFrame, by: str | Sequence[str], value: str) -> dict:
    """Turn a keyed aggregate into ``{key: value}``.

    Single-column keys map from the bare value, multi-column keys from tuples.
    """
    keys = _as_keys(by)
    if len(keys) == 1:
        return dict(zip(df[keys[0]].to_list(), df[value].to_list()))
    return {
        tuple(row[:-1]): row[-1] for row in df.select(keys + [value]).iter_rows()
    }


def pearson_correlation(df: pl.DataFrame, field_a: str, field_b: str) -> float | None:
    """Pearson correlation of two columns, or None when it is undefined."""
    if df.height < 2:
        logger.debug(
            "Correlation of %s and %s undefined for %d rows", field_a, field_b, df.height
        )
        return None

    a = df[field_a].to_numpy().astype(float)
    b = df[field_b].to_numpy().astype(float)
    if np.ptp(a) == 0 or np.ptp(b) == 0:
        logger.debug("Correlation of %s and %s undefined: zero variance", field_a, field_b)
        return None

    return float(stats.pearsonr(a, b).statistic)


def correlation_table(
    df: pl.DataFrame,
    by: str = "sex",
    target: str = "wage",
    fields: Sequence[str] = ("age", "experience"),
) -> pl.DataFrame:
    """Correlation of ``target`` with each of ``fields``, one row per group."""
    rows = []
    for (key,), group in df.sort(by).group_by(by, maintain_order=True):
        row = {by: key}
        for field in fields:
            row[field] = pearson_correlation(group, target, field)
        rows.append(row)

    key_dtype = df.schema[by]
    schema = {by: pl.String if isinstance(key_dtype, pl.Enum) else key_dtype}
    schema.update({field: pl.Float64 for field in fields})
    return pl.DataFrame(rows, schema=schema).cast({by: key_dtype})


def cross_tabulate(
    df: pl.DataFrame,
    key_a: str,
    key_b: str,
    normalize_by: str | None = None,
    facet: str | None = None,
) -> pl.DataFrame:
    """Count rows per (key_a, key_b) pair.

    Args:
        df: Worker DataFrame
        key_a: First key column
        key_b: Second key column
        normalize_by: None for counts only; ``key_a`` or ``key_b`` to add
            ``proportion`` = count / total count for that key; "all" to divide
            by the grand total
        facet: Optional column splitting the table into independent panels;
            counts and proportions are then computed within each panel

    Returns:
        Long-format DataFrame with (facet,) key_a, key_b, count (and proportion)

    Raises:
        ValueError: If normalize_by is not None, "all", key_a or key_b
    """
    panels = [facet] if facet else []
    keys = panels + [key_a, key_b]
    counts = df.group_by(keys).agg(pl.len().alias("count")).sort(keys)
    if normalize_by is None:
        return counts

    if normalize_by == "all":
        total = pl.col("count").sum()
    elif normalize_by in (key_a, key_b):
        total = pl.col("count").sum()
        panels = panels + [normalize_by]
    else:
        raise ValueError(
            f"normalize_by must be None, 'all', {key_a!r} or {key_b!r}, got {normalize_by!r}"
        )
    if panels:
        total = total.over(panels)
    return counts.with_columns((pl.col("count") / total).alias("proportion"))


def summary_statistics(
    df: pl.DataFrame, fields: Sequence[str] = NUMERIC_FIELDS
) -> pl.DataFrame:
    """Descriptive statistics, one row per numeric field."""
    rows = []
    for field in fields:
        series = df[field].cast(pl.Float64)
        rows.append(
            {
                "field": field,
                "count": series.len(),
                "mean": series.mean(),
                "std": series.std(),
                "min": series.min(),
                "median": series.median(),
                "max": series.max(),
                "skewness": series.skew(),
                "kurtosis": series.kurtosis(),
            }
        )

    schema = {"field": pl.String, "count": pl.Int64}
    schema.update(
        {
            name: pl.Float64
            for name in ["mean", "std", "min", "median", "max", "skewness", "kurtosis"]
        }
    )
    return pl.DataFrame(rows, schema=schema)
