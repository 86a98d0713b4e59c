from .console import SELECTION_HEADINGS, format_letter_distribution, format_selections
from .export import (
    OUT_DIR,
    export_all,
    export_letter_distribution,
    export_optimal_words,
    export_unique_optimal_words,
    write_csv_if_absent,
)

__all__ = [
    "SELECTION_HEADINGS", "format_letter_distribution", "format_selections",
    "OUT_DIR", "export_all", "export_letter_distribution", "export_optimal_words",
    "export_unique_optimal_words", "write_csv_if_absent",
]
