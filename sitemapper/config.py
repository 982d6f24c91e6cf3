"""
Loading and validation of the Sitemapper crawler configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


class CrawlerConfig(BaseModel):
    """Settings for a single crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    depth: int = Field(2, ge=0, description="Declared link depth; not enforced by the crawler.")
    concurrency: int = Field(10, ge=1, description="Number of pages fetched in parallel.")
    timeout: float = Field(10.0, gt=0, description="Timeout for one request (seconds).")
    max_duration: Optional[float] = Field(
        None, gt=0, description="Stop the crawl after this many seconds and keep what was found."
    )
    user_agent: str = Field("SitemapperBot/1.0", min_length=1, description="User-Agent header.")
    script_attr: Literal["src", "href"] = Field(
        "src", description="Attribute read from <script> tags; 'href' is the legacy rule."
    )


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    With *path* None the default ``configs/default.yaml`` is used when present,
    otherwise the built-in defaults. An explicit path that does not exist
    raises FileNotFoundError. *overrides* that are not None replace file values.
    """
    data: dict[str, Any] = {}
    if path is None:
        if DEFAULT_CONFIG_PATH.is_file():
            data = _read_file(DEFAULT_CONFIG_PATH)
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))
        data = _read_file(path_obj)

    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)


def _read_file(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path)
    if suffix == ".json":
        return _read_json(path)
    raise ValueError(f"Unsupported config format: {suffix}")
