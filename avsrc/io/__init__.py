"""Input/output helpers for record files, configuration and reports."""

from .config import (
    PathsConfig,
    load_cost_matrix,
    load_discretizer_config,
    load_paths_config,
    load_scoring_policy,
    load_settings_config,
    load_yaml_config,
)
from .file_locator import (
    ensure_directory,
    get_config_path,
    get_data_path,
    resolve_path,
)
from .prediction_log import format_prediction, open_prediction_log
from .records import load_labeled_sequences, read_records
from .reports import (
    format_summary,
    format_transition_matrices,
    format_transition_matrix,
    transition_matrix,
)
from .schemas import SequenceRecord, parse_record_line

__all__ = [
    "PathsConfig",
    "SequenceRecord",
    "ensure_directory",
    "format_prediction",
    "format_summary",
    "format_transition_matrices",
    "format_transition_matrix",
    "get_config_path",
    "get_data_path",
    "load_cost_matrix",
    "load_discretizer_config",
    "load_labeled_sequences",
    "load_paths_config",
    "load_scoring_policy",
    "load_settings_config",
    "load_yaml_config",
    "open_prediction_log",
    "parse_record_line",
    "read_records",
    "resolve_path",
    "transition_matrix",
]
