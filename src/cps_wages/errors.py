"""Errors raised while loading the wage dataset."""


class LoadError(ValueError):
    """The dataset could not be loaded."""


class MissingColumnError(LoadError):
    """One or more required columns are absent from the header."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required columns: {', '.join(missing)}")


class ParseError(LoadError):
    """A value is missing, cannot be coerced, or falls outside its domain."""

    def __init__(self, column: str, row: int, value: object, reason: str):
        self.column = column
        self.row = row
        self.value = value
        super().__init__(f"Invalid value {value!r} in column {column} (row {row}): {reason}")
