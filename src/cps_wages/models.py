"""Worker record model and the polars schema it maps to."""

from dataclasses import dataclass

import polars as pl

from cps_wages.config import (
    AGE_GROUPS,
    EDUCATION_LEVELS,
    MARITAL_STATUS_CODES,
    OCCUPATION_CLASSES,
    OCCUPATION_NAMES,
    RACE_CODES,
    SEX_CODES,
    UNCLASSIFIED,
)

# Enum dtypes keep the codebook order through group_by, sort and plots
SEX = pl.Enum(list(SEX_CODES.values()))
MARITAL_STATUS = pl.Enum(list(MARITAL_STATUS_CODES.values()))
RACE = pl.Enum(list(RACE_CODES.values()))
OCCUPATION_NAME = pl.Enum(list(OCCUPATION_NAMES.values()))
EDUCATION_LEVEL = pl.Enum(EDUCATION_LEVELS)
AGE_GROUP = pl.Enum(AGE_GROUPS + [UNCLASSIFIED])
OCCUPATION_CLASS = pl.Enum(list(OCCUPATION_CLASSES))

WORKER_SCHEMA: dict[str, pl.DataType] = {
    "wage": pl.Float64,
    "occupation": pl.Int64,
    "education": pl.Int64,
    "experience": pl.Int64,
    "age": pl.Int64,
    "sex": SEX,
    "marital_status": MARITAL_STATUS,
    "race": RACE,
}


@dataclass(frozen=True)
class WorkerRecord:
    """One CPS respondent.

    Attributes:
        wage: Hourly wage in dollars
        occupation: Occupation code (1-6, see config.OCCUPATION_NAMES)
        education: Years of education
        experience: Years of work experience
        age: Age in years
        sex: "male" or "female"
        marital_status: "married" or "not-married"
        race: "other", "hispanic" or "caucasian"
    """

    wage: float
    occupation: int
    education: int
    experience: int
    age: int
    sex: str
    marital_status: str
    race: str
