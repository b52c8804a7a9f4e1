"""Wage determinants in the CPS 1985 sample.

Core of the wage report: loading, derived features and aggregations.
Rendering lives in the notebooks under notebooks/wages/.
"""

from .aggregate import as_mapping as as_mapping
from .aggregate import correlation_table as correlation_table
from .aggregate import cross_tabulate as cross_tabulate
from .aggregate import group_mean as group_mean
from .aggregate import pearson_correlation as pearson_correlation
from .aggregate import summary_statistics as summary_statistics
from .errors import LoadError as LoadError
from .errors import MissingColumnError as MissingColumnError
from .errors import ParseError as ParseError
from .features import derive as derive
from .features import outlier_filter as outlier_filter
from .load import frame_from_records as frame_from_records
from .load import iter_records as iter_records
from .load import load_workers as load_workers
from .models import WorkerRecord as WorkerRecord
from .pipeline import ReportTables as ReportTables
from .pipeline import build_report_tables as build_report_tables
from .pipeline import prepare_workers as prepare_workers
