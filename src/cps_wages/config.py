"""Configuration for the CPS 1985 wage report.

Defines source columns, codebook tables, bucket thresholds and default paths.
"""

# Paths (relative to the repository root)
RAW_FILE_PATH: str = "data/raw/cps_85_wages.csv"
FIGURES_PATH: str = "figures"

# Source columns -> snake_case names. Anything else in the file is dropped.
COLUMN_MAPPING: dict[str, str] = {
    "WAGE": "wage",
    "OCCUPATION": "occupation",
    "EDUCATION": "education",
    "EXPERIENCE": "experience",
    "AGE": "age",
    "SEX": "sex",
    "MARR": "marital_status",
    "RACE": "race",
}

NUMERIC_FIELDS: list[str] = ["wage", "education", "experience", "age"]

# Codebook
SEX_CODES: dict[int, str] = {0: "male", 1: "female"}
MARITAL_STATUS_CODES: dict[int, str] = {0: "not-married", 1: "married"}
RACE_CODES: dict[int, str] = {1: "other", 2: "hispanic", 3: "caucasian"}
OCCUPATION_NAMES: dict[int, str] = {
    1: "Management",
    2: "Sales",
    3: "Clerical",
    4: "Service",
    5: "Professional",
    6: "Other",
}

# Wages at or above this are treated as outliers
MAX_WAGE: float = 40.0

# Education buckets: (upper bound inclusive, label); anything above is the last label
EDUCATION_LEVELS: list[str] = ["High School", "Bachelor", "Master"]
HIGH_SCHOOL_MAX_YEARS = 12
BACHELOR_MAX_YEARS = 15

# Age buckets: lower-inclusive, upper-exclusive
AGE_BREAKS: list[int] = [18, 22, 26, 30, 35, 40, 45, 50, 55, 60, 65]
AGE_GROUPS: list[str] = [
    f"{low}-{high - 1}" for low, high in zip(AGE_BREAKS[:-1], AGE_BREAKS[1:])
]
UNCLASSIFIED = "Unclassified"

# Occupation compensation classes
OCCUPATION_CLASSES: dict[str, list[int]] = {
    "High-compensation": [1, 5],
    "Average-compensation": [2, 3, 4],
    "Other": [6],
}

# Categorical fields shown in the per-category bar charts
CATEGORICAL_FIELDS: list[str] = [
    "occupation_name",
    "sex",
    "marital_status",
    "race",
    "education_level",
    "age_group",
    "occupation_class",
]
