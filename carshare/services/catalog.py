"""Static car and company reference data, loaded once and shared read-only"""
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from carshare.core.config import settings
from carshare.core.errors import CatalogError
from carshare.schemas.catalog import Catalog

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> Catalog:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        catalog = Catalog.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e

    logger.info(f"Loaded catalog {path}: {len(catalog.companies)} companies, {len(catalog.cars)} cars")
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return load_catalog(settings.CATALOG_PATH)
