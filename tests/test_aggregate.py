"""Tests for group means, correlations and cross tabulations."""

import polars as pl
import pytest

from cps_wages import (
    as_mapping,
    correlation_table,
    cross_tabulate,
    derive,
    group_mean,
    pearson_correlation,
    summary_statistics,
)


@pytest.fixture
def mixed_workers(make_workers):
    """Eight workers spread over sex, marital status and occupation."""
    return derive(
        make_workers(
            {"wage": 5.0, "sex": "male", "marital_status": "married", "occupation": 1},
            {"wage": 7.0, "sex": "male", "marital_status": "not-married", "occupation": 2},
            {"wage": 9.0, "sex": "male", "marital_status": "married", "occupation": 5},
            {"wage": 11.0, "sex": "male", "marital_status": "married", "occupation": 6},
            {"wage": 4.0, "sex": "female", "marital_status": "married", "occupation": 3},
            {"wage": 6.0, "sex": "female", "marital_status": "not-married", "occupation": 3},
            {"wage": 8.0, "sex": "female", "marital_status": "not-married", "occupation": 4},
            {"wage": 10.0, "sex": "female", "marital_status": "married", "occupation": 1},
        )
    )


class TestGroupMean:
    """Tests for mean wage per group."""

    def test_arithmetic_mean(self, make_workers):
        df = make_workers({"wage": 5.0}, {"wage": 10.0}, {"wage": 15.0})

        result = group_mean(df, "sex")

        assert result.height == 1
        assert result["mean_wage"][0] == pytest.approx(10.0)
        assert result["count"][0] == 3

    def test_groups_partition_input(self, mixed_workers):
        """Every worker lands in exactly one group."""
        result = group_mean(mixed_workers, ["sex", "marital_status"])

        assert result["count"].sum() == mixed_workers.height
        assert not result.select("sex", "marital_status").is_duplicated().any()

    def test_empty_groups_omitted(self, make_workers):
        """Categories with no workers do not appear, even for Enum keys."""
        df = derive(make_workers({"education": 12}, {"education": 16}))

        result = group_mean(df, "education_level")

        assert result["education_level"].to_list() == ["High School", "Master"]
        assert result["mean_wage"].null_count() == 0

    def test_sorted_by_category_order(self, mixed_workers):
        result = group_mean(mixed_workers, "occupation_class")
        assert result["occupation_class"].to_list() == [
            "High-compensation",
            "Average-compensation",
            "Other",
        ]

    def test_other_value_column(self, make_workers):
        df = make_workers({"age": 20}, {"age": 30})
        result = group_mean(df, "sex", value="age")
        assert result["mean_age"][0] == pytest.approx(25.0)

    def test_empty_input(self, make_workers):
        assert group_mean(make_workers(), "sex").is_empty()


class TestAsMapping:
    """Tests for turning aggregates into dicts."""

    def test_single_key(self, mixed_workers):
        mapping = as_mapping(group_mean(mixed_workers, "sex"), "sex", "mean_wage")
        assert mapping == {"male": pytest.approx(8.0), "female": pytest.approx(7.0)}

    def test_tuple_keys(self, mixed_workers):
        result = group_mean(mixed_workers, ["sex", "marital_status"])
        mapping = as_mapping(result, ["sex", "marital_status"], "count")

        assert mapping[("male", "married")] == 3
        assert mapping[("female", "not-married")] == 2
        assert ("male", "not-married") in mapping


class TestPearsonCorrelation:
    """Tests for the Pearson correlation and its undefined cases."""

    def test_perfect_increasing(self, make_workers):
        df = make_workers(
            *({"wage": 2.0 * age, "age": age} for age in [20, 30, 40, 50])
        )
        assert pearson_correlation(df, "wage", "age") == pytest.approx(1.0)

    def test_perfect_decreasing(self, make_workers):
        df = make_workers(
            *({"wage": 100.0 - age, "age": age} for age in [20, 30, 40, 50])
        )
        assert pearson_correlation(df, "wage", "age") == pytest.approx(-1.0)

    def test_within_bounds(self, mixed_workers):
        r = pearson_correlation(mixed_workers, "wage", "occupation")
        assert -1.0 <= r <= 1.0

    def test_single_row_undefined(self, make_workers):
        assert pearson_correlation(make_workers({}), "wage", "age") is None

    def test_empty_undefined(self, make_workers):
        assert pearson_correlation(make_workers(), "wage", "age") is None

    def test_zero_variance_undefined(self, make_workers):
        """A constant field gives None, never 0.0."""
        df = make_workers({"wage": 5.0, "age": 30}, {"wage": 9.0, "age": 30})
        assert pearson_correlation(df, "wage", "age") is None


class TestCorrelationTable:
    """Tests for per-group correlation tables."""

    def test_one_row_per_sex(self, make_workers):
        df = make_workers(
            {"wage": 8.0, "sex": "male", "age": 20, "experience": 2},
            {"wage": 12.0, "sex": "male", "age": 40, "experience": 18},
            {"wage": 10.0, "sex": "male", "age": 30, "experience": 10},
            {"wage": 6.0, "sex": "female", "age": 20, "experience": 18},
            {"wage": 4.0, "sex": "female", "age": 40, "experience": 2},
        )

        table = correlation_table(df, by="sex", fields=("age", "experience"))

        assert table.columns == ["sex", "age", "experience"]
        rows = {row["sex"]: row for row in table.iter_rows(named=True)}
        assert rows["male"]["age"] == pytest.approx(1.0)
        assert rows["male"]["experience"] == pytest.approx(1.0)
        assert rows["female"]["age"] == pytest.approx(-1.0)
        assert rows["female"]["experience"] == pytest.approx(1.0)

    def test_undefined_is_null(self, make_workers):
        """A group with a single worker shows a null cell."""
        df = make_workers(
            {"wage": 8.0, "sex": "male", "age": 20},
            {"wage": 12.0, "sex": "male", "age": 40},
            {"wage": 6.0, "sex": "female", "age": 20},
        )

        table = correlation_table(df, by="sex", fields=("age",))

        female = table.filter(pl.col("sex") == "female")
        assert female["age"].null_count() == 1
        assert table.schema["age"] == pl.Float64


class TestCrossTabulate:
    """Tests for cross tabulation."""

    def test_counts(self, mixed_workers):
        table = cross_tabulate(mixed_workers, "sex", "occupation_class")
        counts = as_mapping(table, ["sex", "occupation_class"], "count")

        assert counts[("male", "High-compensation")] == 2
        assert counts[("female", "Average-compensation")] == 3
        assert ("female", "Other") not in counts
        assert table["count"].sum() == mixed_workers.height

    def test_normalize_by_key(self, mixed_workers):
        """Proportions add up to 1 within each value of the marginal key."""
        table = cross_tabulate(
            mixed_workers, "sex", "occupation_class", normalize_by="sex"
        )

        totals = table.group_by("sex").agg(pl.col("proportion").sum())
        assert totals["proportion"].to_list() == pytest.approx([1.0, 1.0])

        shares = as_mapping(table, ["sex", "occupation_class"], "proportion")
        assert shares[("female", "Average-compensation")] == pytest.approx(0.75)
        assert shares[("male", "Other")] == pytest.approx(0.25)

    def test_normalize_all(self, mixed_workers):
        table = cross_tabulate(
            mixed_workers, "sex", "occupation_class", normalize_by="all"
        )
        assert table["proportion"].sum() == pytest.approx(1.0)

    def test_facet(self, mixed_workers):
        """Facets are independent panels; proportions normalize within them."""
        table = cross_tabulate(
            mixed_workers,
            "marital_status",
            "occupation_class",
            normalize_by="marital_status",
            facet="sex",
        )

        assert table.columns[:3] == ["sex", "marital_status", "occupation_class"]
        totals = table.group_by("sex", "marital_status").agg(pl.col("proportion").sum())
        assert totals["proportion"].to_list() == pytest.approx([1.0] * totals.height)

    def test_invalid_normalize_by(self, mixed_workers):
        with pytest.raises(ValueError, match="normalize_by must be"):
            cross_tabulate(mixed_workers, "sex", "occupation_class", normalize_by="age")


class TestSummaryStatistics:
    """Tests for descriptive statistics."""

    def test_values(self, make_workers):
        df = make_workers(
            {"wage": 5.0, "age": 20},
            {"wage": 10.0, "age": 30},
            {"wage": 15.0, "age": 40},
        )

        summary = summary_statistics(df, ["wage", "age"])
        wage = summary.row(0, named=True)

        assert summary["field"].to_list() == ["wage", "age"]
        assert wage["count"] == 3
        assert wage["mean"] == pytest.approx(10.0)
        assert wage["median"] == pytest.approx(10.0)
        assert wage["std"] == pytest.approx(5.0)
        assert wage["min"] == pytest.approx(5.0)
        assert wage["max"] == pytest.approx(15.0)
        assert wage["skewness"] == pytest.approx(0.0)
