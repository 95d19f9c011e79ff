"""Loading extractor configuration.

The built-in catalog is the default. A JSON file may override either key:

    {
      "catalog": {"acme": [".acme-job-body"], "generic": [".description"]},
      "keywords": ["the role", "responsibilities"]
    }

Keys that are left out fall back to the built-in values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .models import ExtractorConfig

logger = logging.getLogger(__name__)


def load_config(path: Optional[Union[str, Path]] = None) -> ExtractorConfig:
    """Return the extractor config from `path`, or the defaults when path is None.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the file is not valid JSON or fails validation.
    """
    if path is None:
        return ExtractorConfig()

    p = Path(path).expanduser()
    raw = p.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{p}: invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a JSON object, got {type(data).__name__}")

    try:
        config = ExtractorConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"{p}: invalid extractor config: {exc}") from exc

    logger.debug(
        "Loaded config from %s: %d categories, %d selectors, %d keywords",
        p, len(config.catalog), len(config.selectors), len(config.keywords),
    )
    return config
