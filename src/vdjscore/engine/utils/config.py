"""Configuration loading for the scoring engine.

Reads YAML files and provides typed access to the scoring, engine and
logging parameters.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from vdjscore.engine.analysis.aligners import AsyncPairwiseAlignmentEngine
    from vdjscore.engine.analysis.scoring import PositionalAlignmentScoring


@dataclass
class ScoringSettings:
    substitution_matrix: str = "BLOSUM62"
    gap_penalty: float = -5.0
    positional_sigma: float = 1.0
    positional_mu: float = 0.0
    score_threshold: float = 0.0


@dataclass
class EngineSettings:
    max_threads: int = 4
    mode: str = "global"


@dataclass
class LoggingSettings:
    level: str = "INFO"
    file: str = ""
    console: bool = True


@dataclass
class Settings:
    """Top-level configuration."""
    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    engine: EngineSettings = field(default_factory=EngineSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def _build_dataclass(cls, data: dict | None):
    """Build a flat settings dataclass from a dict, ignoring unknown keys."""
    if data is None:
        return cls()
    field_names = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in field_names})


def load_config(path: str | Path) -> Settings:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Settings with every missing section and key defaulted.
    """
    path = Path(path)
    with open(path, "r") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return Settings()

    settings = Settings(
        scoring=_build_dataclass(ScoringSettings, raw.get("scoring")),
        engine=_build_dataclass(EngineSettings, raw.get("engine")),
        logging=_build_dataclass(LoggingSettings, raw.get("logging")),
    )
    # imported late, the logging helpers depend on this module
    from vdjscore.engine.utils.logging import get_logger
    get_logger("utils.config").info(
        "Loaded configuration from %s (matrix=%s, sigma=%s, mu=%s)",
        path,
        settings.scoring.substitution_matrix,
        settings.scoring.positional_sigma,
        settings.scoring.positional_mu,
    )
    return settings


def save_config(settings: Settings, path: str | Path) -> None:
    """Write settings to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(dataclasses.asdict(settings), f, default_flow_style=False, sort_keys=False)


def build_scoring(settings: ScoringSettings) -> "PositionalAlignmentScoring":
    """Build the positional scoring described by ``settings``.

    Raises:
        NoSuchSubstitutionMatrixException: the named matrix is unknown.
    """
    from vdjscore.engine.analysis.scoring import PositionalAlignmentScoring
    from vdjscore.engine.structures.scoring import LinearGapScoring

    return PositionalAlignmentScoring(
        scoring=LinearGapScoring.from_matrix_name(settings.substitution_matrix, settings.gap_penalty),
        positional_sigma=settings.positional_sigma,
        positional_mu=settings.positional_mu,
        score_threshold=settings.score_threshold,
    )


def build_engine(settings: Settings) -> "AsyncPairwiseAlignmentEngine":
    """Build an alignment engine that aligns and scores under ``settings``.

    The aligner uses the same substitution matrix and gap penalty as the
    positional scoring, in the configured alignment mode.
    """
    from vdjscore.engine.analysis.aligners import AsyncPairwiseAlignmentEngine

    scoring = build_scoring(settings.scoring)
    aligner = scoring.scoring.build_aligner(settings.engine.mode)
    return AsyncPairwiseAlignmentEngine(aligner, scoring, settings.engine.max_threads)
