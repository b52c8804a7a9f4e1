# ---
# jupyter:
#   jupytext:
#     cell_metadata_filter: title,-all
#     formats: ipynb,py:percent
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.17.3
#   kernelspec:
#     display_name: CPS Wages
#     language: python
#     name: cps-wages
# ---

# %% [markdown]
# The Current Population Survey (CPS) 1985 wage sample is used for this report: 534 workers, each with an hourly wage and a handful of demographic and professional attributes.
#
# The goal is to understand how the hourly wage relates to gender, education, experience, age, marital status, race and occupation.

# %% Imports
# Imports
from pathlib import Path

import matplotlib.pyplot as plt
import polars as pl
import seaborn as sns

from cps_wages import build_report_tables, derive, load_workers, outlier_filter
from cps_wages.config import FIGURES_PATH, MAX_WAGE, NUMERIC_FIELDS, RAW_FILE_PATH

# %% Load dataset
# Read Raw Data
PROJECT_ROOT: Path = Path("../..")
FILE_NAME: Path = PROJECT_ROOT / RAW_FILE_PATH
FIGURES_DIR: Path = PROJECT_ROOT / FIGURES_PATH
DATASET: pl.DataFrame = load_workers(FILE_NAME)

# %% [markdown]
# # The Raw Survey Dataset
# The loader keeps the 8 relevant columns, renames them and decodes the categorical codes (sex, marital status, race).

# %% What's in the raw dataset?
DATASET.describe()

# %% [markdown]
# # Dataset Overview

# %%
print(f"Total rows: {DATASET.shape[0]:,}")
print(f"Total columns: {DATASET.shape[1]}")
print(f"Memory usage: {DATASET.estimated_size('kb'):.2f} KB")

# The loader refuses incomplete files, so this is a sanity check rather than a cleaning step
assert DATASET.null_count().sum_horizontal().item() == 0, "Unexpected missing values"
print("\nNo missing values.")

# %% [markdown]
# # Derived Features
# Three numeric fields are grouped into categories for the group comparisons below:
# - `education_level`: High School (12 years or less), Bachelor (13 to 15 years), Master (more than 15 years)
# - `age_group`: "18-21", "22-25", "26-29", then 5-year bins up to "60-64"
# - `occupation_class`: High-compensation (Management, Professional), Average-compensation (Sales, Clerical, Service), Other

# %%
df = derive(DATASET)
df.select("education", "education_level", "age", "age_group", "occupation_name", "occupation_class").head(10)

# %% [markdown]
# # Outliers
# Let's check the wage distribution for extreme values before comparing groups.

# %%
print("Wage Skewness and Kurtosis")
print(f"Skewness: {df['wage'].skew():.2f}")
print(f"Kurtosis: {df['wage'].kurtosis():.2f}")
print(f"\nMaximum wage: ${df['wage'].max():.2f}/hour")
display(df.sort("wage", descending=True).head(5))

# %% [markdown]
# A single worker sits far above everyone else. We drop every wage at or above $40/hour before any comparison.

# %%
df_clean = outlier_filter(df, MAX_WAGE)

print(
    f"Rows after filtering outliers: {df_clean.shape[0]} (lost {df.shape[0] - df_clean.shape[0]} rows)"
)
print(f"Skewness: {df_clean['wage'].skew():.2f}")
print(f"Kurtosis: {df_clean['wage'].kurtosis():.2f}")

# %% [markdown]
# # Descriptive Statistics

# %%
tables = build_report_tables(df_clean)
summary = tables.summary
summary

# %% [markdown]
# # Numeric Feature Distributions
# Histograms of each numeric field, with the mean marked.

# %%
coolwarm = sns.color_palette("coolwarm", 8)
means = dict(zip(summary["field"], summary["mean"]))
labels = {
    "wage": "Hourly Wage (USD)",
    "education": "Education (Years)",
    "experience": "Experience (Years)",
    "age": "Age (Years)",
}

fig, axes = plt.subplots(2, 2, figsize=(16, 10))  # pyright: ignore[reportUnknownMemberType]

for ax, field in zip(axes.flat, NUMERIC_FIELDS):
    sns.histplot(df_clean, x=field, bins=20, color=coolwarm[1], ax=ax)
    ax.axvline(
        means[field],
        color="red",
        linestyle="--",
        label=f"Mean: {means[field]:.1f}",
    )
    ax.set_title(f"{labels[field]} Distribution")
    ax.set_xlabel(labels[field])
    ax.set_ylabel("Frequency")
    ax.legend()

plt.tight_layout()
plt.savefig(f"{FIGURES_DIR}/numeric_distributions.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# The wage is right-skewed even after filtering, with most workers under $15/hour.
#
# Education is concentrated at 12 years (high school diploma), while experience and age both skew young.

# %% [markdown]
# # Categorical Features
# Let's look at how workers are spread across each categorical field, and the mean wage of each category.

# %%
categorical_fields = [
    "occupation_name",
    "sex",
    "marital_status",
    "race",
]

fig, axes = plt.subplots(2, 4, figsize=(22, 10))  # pyright: ignore[reportUnknownMemberType]

for i, field in enumerate(categorical_fields):
    counts = tables.category_counts[field]
    sns.barplot(counts, x=field, y="count", hue=field, palette="winter", legend=False, ax=axes[0][i])
    axes[0][i].set_title(f"Workers by {field.replace('_', ' ').title()}")
    axes[0][i].set_xlabel("")
    axes[0][i].tick_params(axis="x", rotation=30)

    mean_wage = tables.mean_wage_by[field]
    sns.barplot(mean_wage, x=field, y="mean_wage", hue=field, palette="autumn", legend=False, ax=axes[1][i])
    axes[1][i].set_title(f"Mean Wage by {field.replace('_', ' ').title()}")
    axes[1][i].set_xlabel("")
    axes[1][i].set_ylabel("Mean Hourly Wage")
    axes[1][i].tick_params(axis="x", rotation=30)

plt.tight_layout()
plt.savefig(f"{FIGURES_DIR}/categorical_distributions.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# Management and Professional workers earn the most on average, Service workers the least.
#
# Men out-earn women, married workers out-earn unmarried ones, and the race categories are heavily dominated by Caucasian respondents.

# %% [markdown]
# # Wage by Group
# Boxplots of the hourly wage for education level, race, marital status and sex, side by side.

# %%
boxplot_fields = {
    "education_level": "Education Level",
    "race": "Race",
    "marital_status": "Marital Status",
    "sex": "Sex",
}

fig, axes = plt.subplots(1, 4, figsize=(22, 6), sharey=True)  # pyright: ignore[reportUnknownMemberType]

for ax, (field, title) in zip(axes, boxplot_fields.items()):
    sns.boxplot(data=df_clean, x=field, y="wage", color=coolwarm[2], ax=ax)
    ax.set_title(f"{title} to Hourly Wage")
    ax.set_xlabel(title)
    ax.set_ylabel("Hourly Wage")

plt.tight_layout()
plt.savefig(f"{FIGURES_DIR}/wage_boxplots.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# The median wage climbs with each education level, and the Master group also has the widest spread.
#
# Differences by race and marital status are smaller than those by education and sex.

# %% [markdown]
# # Gender

# %% Gender vs Wage
mean_by_sex = tables.mean_wage_by["sex"].select("sex", "mean_wage")
display(mean_by_sex)

palette = dict(zip(["male", "female"], sns.color_palette("YlOrBr", 2)))

fig, ax = plt.subplots(figsize=(12, 6))  # pyright: ignore[reportUnknownMemberType]
sns.kdeplot(df_clean, x="wage", hue="sex", palette=palette, fill=True, common_norm=False, ax=ax)
for sex, mean_wage in mean_by_sex.iter_rows():
    ax.axvline(mean_wage, color=palette[sex], linestyle="--", label=f"{sex} mean: ${mean_wage:.2f}")

ax.set_title("Hourly Wage Density by Sex")
ax.set_xlabel("Hourly Wage")
ax.legend()

plt.savefig(f"{FIGURES_DIR}/wage_density_by_sex.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# The female distribution is shifted to the left and more concentrated at low wages, and the gap between the two means is visible at a glance.
#
# Whether this gap holds after accounting for experience and age is the subject of the next notebook.

# %% [markdown]
# # Key Findings
# 1. Target Variable (Hourly Wage)
#    - Distribution: Right-Skewed, even after dropping wages of $40/hour or more
# 2. Sample Size
#    - Complete dataset, no missing values; one extreme wage removed
# 3. Education
#    - Median wage grows with every education level
# 4. Gender
#    - Men earn more than women on average, and the female wage distribution is concentrated at the low end
# 5. Occupation
#    - Management and Professional occupations pay the most; these form the High-compensation class used later

# %%
