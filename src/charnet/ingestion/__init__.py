"""Dataset loading."""

from charnet.ingestion.loader import Dataset, DatasetError, load_dataset, parse_dataset

__all__ = [
    "Dataset",
    "DatasetError",
    "load_dataset",
    "parse_dataset",
]
