"""Configuration loading and management for textmagnet.

Thresholds used by the clustering engines are gathered in one frozen
dataclass. Configuration sources are merged in priority order:
    1. Defaults (defined in ClusteringConfig)
    2. Project config (./textmagnet.toml)
    3. Explicit config file (if config_file provided)
    4. Environment variables (TEXTMAGNET_* prefix)
    5. Keyword overrides

Example:
    >>> config = load_config(min_edge_score=0.3)
    >>> config.min_edge_score
    0.3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import InvalidConfigError

# Bounds of the project overlap threshold
MIN_OVERLAP = 3
MAX_OVERLAP = 30


@dataclass(frozen=True)
class ClusteringConfig:
    """Thresholds and tuning parameters for indexing and clustering.

    Attributes:
        Graph clustering:
            edge_distance_threshold: Pairs at or below this suffix score need
                two shared labels (or a shared suffix) to become an edge
            min_label_length: Shortest word kept as a shared label
            min_edge_score: Forest edges need at least this weight

        Orphan reattachment:
            orphan_distance_threshold: Parents scoring below this are skipped
                unless they share the orphan's suffix
            orphan_passes: Number of reattachment passes

        K-means:
            kmeans_max_iterations: Safety limit on reassignment rounds

        Project clustering:
            wordset_overlap: Shared-word count a pair must exceed (clamped to [3, 30])

        Pruning:
            prune_weight: Scale applied to the typicality radius
            typicality_bandwidth: Gaussian kernel width for typicality scores

        Harvesting:
            harvest_timeout_seconds: Graceful wait before pending tasks are cancelled
            max_harvest_workers_per_cpu: Upper bound on the corpus-size factor of the pool
    """

    # === Graph clustering ===
    edge_distance_threshold: float = 0.6
    min_label_length: int = 3
    min_edge_score: float = 0.2

    # === Orphan reattachment ===
    orphan_distance_threshold: float = 0.6
    orphan_passes: int = 2

    # === K-means ===
    kmeans_max_iterations: int = 100

    # === Project clustering ===
    wordset_overlap: int = MIN_OVERLAP

    # === Pruning ===
    prune_weight: float = 1.0
    typicality_bandwidth: float = 0.3

    # === Harvesting ===
    harvest_timeout_seconds: float = 500.0
    max_harvest_workers_per_cpu: int = 10

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        # Scores are normalized to [0, 1]
        for field_name in (
            "edge_distance_threshold",
            "min_edge_score",
            "orphan_distance_threshold",
        ):
            value = getattr(self, field_name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(field_name, value, "must be between 0.0 and 1.0")

        if self.min_label_length < 1:
            raise InvalidConfigError("min_label_length", self.min_label_length, "must be at least 1")
        if self.orphan_passes < 0:
            raise InvalidConfigError("orphan_passes", self.orphan_passes, "must be non-negative")
        if self.kmeans_max_iterations < 1:
            raise InvalidConfigError(
                "kmeans_max_iterations", self.kmeans_max_iterations, "must be at least 1"
            )
        if self.prune_weight <= 0:
            raise InvalidConfigError("prune_weight", self.prune_weight, "must be positive")
        if self.typicality_bandwidth <= 0:
            raise InvalidConfigError(
                "typicality_bandwidth", self.typicality_bandwidth, "must be positive"
            )
        if self.harvest_timeout_seconds < 0:
            raise InvalidConfigError(
                "harvest_timeout_seconds", self.harvest_timeout_seconds, "must be non-negative"
            )
        if self.max_harvest_workers_per_cpu < 1:
            raise InvalidConfigError(
                "max_harvest_workers_per_cpu",
                self.max_harvest_workers_per_cpu,
                "must be at least 1",
            )

    @property
    def overlap_threshold(self) -> int:
        """Project overlap threshold clamped to [3, 30]."""
        return min(max(self.wordset_overlap, MIN_OVERLAP), MAX_OVERLAP)


# Default configuration (singleton)
DEFAULT_CONFIG = ClusteringConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> ClusteringConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit TOML file path
        **overrides: Direct overrides (highest priority)

    Returns:
        Validated ClusteringConfig instance

    Raises:
        InvalidConfigError: If a config file is missing or invalid
    """
    merged: dict = {}

    # 1. Project config
    project_config = Path.cwd() / "textmagnet.toml"
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    # 2. Explicit config file (highest priority from files)
    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config_file", config_file, "file not found")
        merged.update(_load_toml_section(config_file))

    # 3. Environment variables (TEXTMAGNET_* prefix)
    merged.update(_load_env_vars())

    # 4. Keyword overrides
    merged.update(overrides)

    known = {f.name for f in fields(ClusteringConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    return ClusteringConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from TEXTMAGNET_* environment variables.

    Example: TEXTMAGNET_MIN_EDGE_SCORE=0.3, TEXTMAGNET_ORPHAN_PASSES=1

    Returns:
        Dict of field_name -> parsed_value for any TEXTMAGNET_* vars found.
    """
    type_hints = get_type_hints(ClusteringConfig)

    result: dict[str, Any] = {}

    for field_name in ClusteringConfig.__dataclass_fields__:
        env_key = f"TEXTMAGNET_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        try:
            if type_hint is int:
                result[field_name] = int(env_value)
            elif type_hint is float:
                result[field_name] = float(env_value)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _load_toml_section(path: Path) -> dict:
    """Load a TOML file and return its settings.

    Settings may sit at the top level or under a [clustering] table.
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config_file", path, str(e))

    section = data.get("clustering", data)
    if not isinstance(section, dict):
        raise InvalidConfigError("clustering", section, "expected a table")
    return dict(section)
