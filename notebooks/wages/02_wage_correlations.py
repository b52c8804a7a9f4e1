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
# # Wage Correlations
# The first notebook showed a clear wage gap between men and women.
#
# Here we check whether experience, age and occupation explain part of it:
# 1. Correlation of wage with age and experience, within each sex.
# 2. Wage against experience, with a linear trend for each sex.
# 3. Mean wage across age groups.
# 4. How men and women are spread across occupation compensation classes.

# %% Imports
# Imports
from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns

from cps_wages import build_report_tables, prepare_workers
from cps_wages.config import FIGURES_PATH, MAX_WAGE, RAW_FILE_PATH

# %%
# Constants
PROJECT_ROOT: Path = Path("../..")
FILE_NAME: Path = PROJECT_ROOT / RAW_FILE_PATH
FIGURES_DIR: Path = PROJECT_ROOT / FIGURES_PATH

# Load, derive and filter in one go (steps explained in the EDA notebook)
df = prepare_workers(FILE_NAME, MAX_WAGE)
tables = build_report_tables(df)

print(f"Workers: {df.shape[0]:,} (wage < ${MAX_WAGE:.0f}/hour)")

# %% [markdown]
# # Correlation Table
# Pearson correlation of the hourly wage with age and with experience, computed separately for men and women.
#
# An empty cell means the correlation is undefined for that group (fewer than two workers, or no variation).

# %%
tables.wage_correlations

# %% [markdown]
# # Wage vs Experience

# %%
p = sns.lmplot(
    df,
    x="experience",
    y="wage",
    col="sex",
    hue="sex",
    palette="YlOrBr",
    scatter_kws={"alpha": 0.5},
    height=6,
)
p.set_axis_labels("Experience (Years)", "Hourly Wage")
p.set_titles("{col_name}")
plt.savefig(f"{FIGURES_DIR}/wage_experience_by_sex.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# Both trend lines are fairly flat and the scatter is wide: experience alone explains little of the wage.
#
# The male trend sits above the female one across the whole experience range, so the gap is not an experience effect.

# %% [markdown]
# # Wage by Age Group

# %%
# Workers outside ages 18-64 are already left out of the age-group tables
data = tables.mean_wage_by_age_group_and_sex
display(data)

fig, ax = plt.subplots(figsize=(14, 6))  # pyright: ignore[reportUnknownMemberType]
sns.lineplot(data, x="age_group", y="mean_wage", hue="sex", palette="YlOrBr", marker="o", ax=ax)
ax.set_title("Mean Hourly Wage by Age Group")
ax.set_xlabel("Age Group")
ax.set_ylabel("Mean Hourly Wage")

plt.savefig(f"{FIGURES_DIR}/wage_age_group_by_sex.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# Mean wages rise through the twenties and thirties for both sexes, with the male line above the female one in almost every age group.
#
# The oldest groups hold few workers, so their means move around more.

# %% [markdown]
# # Occupation Compensation Class
# Occupations are grouped by how well they pay: Management and Professional are High-compensation, Sales, Clerical and Service are Average-compensation.

# %%
p = sns.catplot(
    tables.occupation_by_age_group_and_sex,
    kind="bar",
    x="age_group",
    y="count",
    hue="occupation_class",
    col="sex",
    palette="winter",
    height=6,
    aspect=1.3,
)
p.set_axis_labels("Age Group", "Workers")
p.set_titles("{col_name}")
p.tick_params(axis="x", rotation=45)
plt.savefig(f"{FIGURES_DIR}/occupation_class_by_age_group.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %%
share = tables.occupation_share_by_sex
display(share.pivot(index="sex", on="occupation_class", values="proportion"))

fig, ax = plt.subplots(figsize=(10, 6))  # pyright: ignore[reportUnknownMemberType]
sns.barplot(share, x="sex", y="proportion", hue="occupation_class", palette="winter", ax=ax)
ax.set_title("Occupation Class Share by Sex")
ax.set_xlabel("Sex")
ax.set_ylabel("Share of Workers")

plt.savefig(f"{FIGURES_DIR}/occupation_class_share_by_sex.png", dpi=300)  # pyright: ignore[reportUnknownMemberType]
plt.show()  # pyright: ignore[reportUnknownMemberType]

# %% [markdown]
# Within each sex the shares add up to 1.
#
# Women are more concentrated in the Average-compensation class (mostly clerical and service jobs), which accounts for part of the wage gap.

# %% [markdown]
# # Key Findings
# 1. Correlations
#    - Wage correlates positively but weakly with both age and experience, for men and for women
# 2. Experience
#    - Men earn more than women at every level of experience
# 3. Age
#    - Mean wage rises with age into the forties for both sexes, with a persistent gap
# 4. Occupation
#    - Occupation mix differs by sex: the Average-compensation class is relatively larger among women
# 5. Caveats
#    - The sample is small (534 workers) and some age group x sex cells hold only a handful of workers

# %%
