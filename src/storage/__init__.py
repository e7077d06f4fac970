"""Storage and export providers (JSON / Parquet)."""

from .json_store import load_parsed_data, save_augmented_data
from .parquet_store import training_rows, write_training_table

__all__ = [
	"load_parsed_data",
	"save_augmented_data",
	"training_rows",
	"write_training_table",
]
