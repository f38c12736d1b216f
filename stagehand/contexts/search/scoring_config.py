"""
Scoring weights for relevance ranking.

The defaults reproduce the established ranking behavior. Overrides live in a
YAML file whose keys mirror ScoringWeights fields; later keys replace defaults:

    # weights.yaml
    title_exact: 120
    recent_window_days: 7

The file is located via the explicit path argument or the
STAGEHAND_SCORING_WEIGHTS environment variable.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from stagehand.contexts.search.exceptions import ScoringConfigError

load_dotenv()
SCORING_WEIGHTS_ENV = "STAGEHAND_SCORING_WEIGHTS"


@dataclass(frozen=True)
class ScoringWeights:
    """
    Score contributions and limits used by the scorer and aggregator.

    Tag mode uses tag_mode_*; text mode uses the title/tag/body weights.
    Recency applies in both modes.
    """

    # Tag mode
    tag_mode_exact: int = 90
    tag_mode_partial: int = 60

    # Text mode: title
    title_exact: int = 100
    title_prefix: int = 80
    title_contains: int = 65

    # Text mode: tags
    tag_exact: int = 70
    tag_partial: int = 45

    # Text mode: description / notes / content
    body_only: int = 30
    body_bonus: int = 15

    # Recency
    recent: int = 10
    recent_window_days: float = 14

    # Aggregation
    top_matches_limit: int = 6


DEFAULT_WEIGHTS = ScoringWeights()


def _validate(weights: ScoringWeights, config_path: Optional[Path]) -> ScoringWeights:
    for f in fields(weights):
        value = getattr(weights, f.name)
        if f.name in ("recent_window_days", "top_matches_limit"):
            if value <= 0:
                raise ScoringConfigError(
                    f"Must be positive, got {value}", config_path=config_path, field_name=f.name
                )
        elif value < 0:
            raise ScoringConfigError(
                f"Weights cannot be negative, got {value}", config_path=config_path, field_name=f.name
            )
    return weights


def load_scoring_weights(config_path: Path = None) -> ScoringWeights:
    """
    Load scoring weights, merging YAML overrides over the defaults.

    Args:
        config_path: Optional overrides file (defaults to STAGEHAND_SCORING_WEIGHTS;
                     when neither is set the defaults are returned)

    Returns:
        Validated ScoringWeights

    Raises:
        ScoringConfigError: If the file is missing, has unknown keys, wrong types,
                            or out-of-range values
    """
    if config_path is None:
        env_path = os.getenv(SCORING_WEIGHTS_ENV)
        if not env_path:
            return DEFAULT_WEIGHTS
        config_path = Path(env_path)

    config_path = Path(config_path)
    if not config_path.exists():
        raise ScoringConfigError("Weights file not found", config_path=config_path)

    try:
        overrides = OmegaConf.load(config_path)
        if overrides is None or not OmegaConf.is_dict(overrides):
            raise ScoringConfigError(
                "Weights file must contain a mapping of weight names to values",
                config_path=config_path,
            )
        merged = OmegaConf.merge(OmegaConf.structured(ScoringWeights), overrides)
        weights = OmegaConf.to_object(merged)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise ScoringConfigError(f"Invalid weights file: {e}", config_path=config_path) from e

    return _validate(weights, config_path)
