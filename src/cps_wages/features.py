"""Derived categorical features and the wage outlier filter."""

import logging

import polars as pl

from cps_wages.config import (
    AGE_BREAKS,
    AGE_GROUPS,
    BACHELOR_MAX_YEARS,
    EDUCATION_LEVELS,
    HIGH_SCHOOL_MAX_YEARS,
    MAX_WAGE,
    OCCUPATION_CLASSES,
    OCCUPATION_NAMES,
    UNCLASSIFIED,
)
from cps_wages.models import AGE_GROUP, EDUCATION_LEVEL, OCCUPATION_CLASS, OCCUPATION_NAME

logger = logging.getLogger(__name__)


def education_level_expr() -> pl.Expr:
    """Years of education -> High School (<= 12), Bachelor (13-15), Master (> 15)."""
    education = pl.col("education")
    high_school, bachelor, master = EDUCATION_LEVELS
    return (
        pl.when(education <= HIGH_SCHOOL_MAX_YEARS)
        .then(pl.lit(high_school))
        .when(education <= BACHELOR_MAX_YEARS)
        .then(pl.lit(bachelor))
        .otherwise(pl.lit(master))
        .cast(EDUCATION_LEVEL)
        .alias("education_level")
    )


def age_group_expr() -> pl.Expr:
    """Age -> "18-21" ... "60-64", lower bound inclusive, upper bound exclusive.

    Ages below 18 or from 65 on have no bucket and map to UNCLASSIFIED.
    """
    age = pl.col("age")
    (low, high, label), *rest = zip(AGE_BREAKS[:-1], AGE_BREAKS[1:], AGE_GROUPS)
    expr = pl.when((age >= low) & (age < high)).then(pl.lit(label))
    for low, high, label in rest:
        expr = expr.when((age >= low) & (age < high)).then(pl.lit(label))
    return expr.otherwise(pl.lit(UNCLASSIFIED)).cast(AGE_GROUP).alias("age_group")


def occupation_class_expr() -> pl.Expr:
    """Occupation code -> compensation class (total over codes 1-6)."""
    mapping = {
        code: label for label, codes in OCCUPATION_CLASSES.items() for code in codes
    }
    return (
        pl.col("occupation")
        .replace_strict(mapping, return_dtype=OCCUPATION_CLASS)
        .alias("occupation_class")
    )


def occupation_name_expr() -> pl.Expr:
    return (
        pl.col("occupation")
        .replace_strict(OCCUPATION_NAMES, return_dtype=OCCUPATION_NAME)
        .alias("occupation_name")
    )


def derive(df: pl.DataFrame) -> pl.DataFrame:
    """Append education_level, age_group, occupation_class and occupation_name.

    Row-wise and pure: the input frame is left untouched and every original
    column is carried over unchanged.
    """
    derived = df.with_columns(
        education_level_expr(),
        age_group_expr(),
        occupation_class_expr(),
        occupation_name_expr(),
    )

    unclassified = derived.filter(pl.col("age_group") == UNCLASSIFIED).height
    if unclassified:
        logger.warning(
            "%d workers fall outside ages %d-%d and are marked %s",
            unclassified,
            AGE_BREAKS[0],
            AGE_BREAKS[-1] - 1,
            UNCLASSIFIED,
        )
    return derived


def outlier_filter(df: pl.DataFrame, max_wage: float = MAX_WAGE) -> pl.DataFrame:
    """Drop every worker whose wage is at or above ``max_wage``."""
    filtered = df.filter(pl.col("wage") < max_wage)
    logger.info(
        "Outlier filter (wage < %s): kept %d of %d workers",
        max_wage,
        filtered.height,
        df.height,
    )
    return filtered
