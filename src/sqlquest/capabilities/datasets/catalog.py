"""Dataset catalog: built-in public schemas plus configured extras."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import yaml

from .builtin import BUILTIN_DATASETS
from .models import SchemaDescriptor

logger = logging.getLogger(__name__)


class DatasetNotFoundError(KeyError):
    """Raised when a dataset id is not present in the catalog."""


class DatasetCatalog:
    """In-memory registry of schema descriptors keyed by dataset id."""

    def __init__(self, datasets: Optional[Iterable[SchemaDescriptor]] = None):
        self._datasets: Dict[str, SchemaDescriptor] = {}
        for dataset in datasets or []:
            self.register(dataset)

    @classmethod
    def builtin(cls) -> "DatasetCatalog":
        return cls(SchemaDescriptor.model_validate(d) for d in BUILTIN_DATASETS)

    @classmethod
    def from_yaml(
        cls, path: Union[str, Path], *, include_builtin: bool = True
    ) -> "DatasetCatalog":
        """Load descriptors from a YAML file.

        The file holds either a list of descriptors or a mapping with a
        top-level ``datasets`` list. Entries with an id already in the
        catalog replace the earlier descriptor.
        """
        catalog = cls.builtin() if include_builtin else cls()
        with Path(path).open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f) or []

        if isinstance(payload, dict):
            payload = payload.get("datasets", [])
        if not isinstance(payload, list):
            raise ValueError(f"Dataset file {path} must contain a list of datasets")

        for entry in payload:
            catalog.register(SchemaDescriptor.model_validate(entry))
        logger.info("Loaded %d dataset(s) from %s", len(payload), path)
        return catalog

    def register(self, dataset: SchemaDescriptor) -> None:
        if dataset.id in self._datasets:
            logger.info("Replacing dataset %s", dataset.id)
        self._datasets[dataset.id] = dataset

    def get(self, dataset_id: str) -> SchemaDescriptor:
        try:
            return self._datasets[dataset_id]
        except KeyError:
            raise DatasetNotFoundError(dataset_id) from None

    def list(self) -> List[SchemaDescriptor]:
        return list(self._datasets.values())

    def __contains__(self, dataset_id: object) -> bool:
        return dataset_id in self._datasets

    def __len__(self) -> int:
        return len(self._datasets)
