"""Type inference module.

Classifies columns as Numeric or Text from a sampled prefix of values.
"""

from sheetsense.analysis.typing.inference import (
    get_column_profiles,
    infer_column_profiles,
    numeric_columns,
    profile_column,
    sample_values,
    text_columns,
)
from sheetsense.analysis.typing.models import ColumnProfile

__all__ = [
    "get_column_profiles",
    "infer_column_profiles",
    "profile_column",
    "sample_values",
    "numeric_columns",
    "text_columns",
    "ColumnProfile",
]
