# src/city_search/io/config.py
from pathlib import Path

import yaml
from pydantic import ValidationError

from city_search.config.models import AppModel
from city_search.errors import DataSourceError


def load_config(path: str | Path) -> AppModel:
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise DataSourceError(f"Cannot read config {str(path)!r}: {e}") from e
    except yaml.YAMLError as e:
        raise DataSourceError(f"Invalid YAML in {str(path)!r}: {e}") from e
    try:
        # empty file => defaults
        return AppModel.model_validate(raw or {})
    except ValidationError as e:
        raise DataSourceError(f"Invalid config {str(path)!r}: {e}") from e
