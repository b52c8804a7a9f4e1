"""Load -> derive -> filter -> aggregate, producing every table the report draws."""

from dataclasses import dataclass
from pathlib import Path

import polars as pl

from cps_wages.aggregate import (
    correlation_table,
    cross_tabulate,
    group_mean,
    summary_statistics,
)
from cps_wages.config import CATEGORICAL_FIELDS, MAX_WAGE, NUMERIC_FIELDS, UNCLASSIFIED
from cps_wages.features import derive, outlier_filter
from cps_wages.load import load_workers


@dataclass(frozen=True)
class ReportTables:
    """Aggregated inputs for each chart in the report.

    Attributes:
        summary: Descriptive statistics per numeric field (histograms, mean lines)
        category_counts: Worker count per value of each categorical field
        mean_wage_by: Mean wage per value of each categorical field
        wage_correlations: Wage correlation with age and experience, per sex
        mean_wage_by_age_group_and_sex: Mean wage per (age_group, sex)
        occupation_by_age_group_and_sex: Count per (sex, age_group, occupation_class)
        occupation_share_by_sex: Share of each occupation_class within each sex
    """

    summary: pl.DataFrame
    category_counts: dict[str, pl.DataFrame]
    mean_wage_by: dict[str, pl.DataFrame]
    wage_correlations: pl.DataFrame
    mean_wage_by_age_group_and_sex: pl.DataFrame
    occupation_by_age_group_and_sex: pl.DataFrame
    occupation_share_by_sex: pl.DataFrame


def prepare_workers(path: str | Path, max_wage: float = MAX_WAGE) -> pl.DataFrame:
    """Load the dataset, add derived features and drop wage outliers."""
    return outlier_filter(derive(load_workers(path)), max_wage)


def build_report_tables(df: pl.DataFrame) -> ReportTables:
    """Compute every aggregate the report renders from a prepared worker frame.

    Workers in the UNCLASSIFIED age group are left out of the age-group tables.
    """
    classified = df.filter(pl.col("age_group") != UNCLASSIFIED)
    return ReportTables(
        summary=summary_statistics(df, NUMERIC_FIELDS),
        category_counts={
            field: df.group_by(field).agg(pl.len().alias("count")).sort(field)
            for field in CATEGORICAL_FIELDS
        },
        mean_wage_by={field: group_mean(df, field) for field in CATEGORICAL_FIELDS},
        wage_correlations=correlation_table(df, by="sex", fields=("age", "experience")),
        mean_wage_by_age_group_and_sex=group_mean(classified, ["age_group", "sex"]),
        occupation_by_age_group_and_sex=cross_tabulate(
            classified, "age_group", "occupation_class", facet="sex"
        ),
        occupation_share_by_sex=cross_tabulate(
            df, "sex", "occupation_class", normalize_by="sex"
        ),
    )
