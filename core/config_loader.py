import logging
import math
import os
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)


class ScoringWeights(BaseModel):
    """
    Weights for the final score.

    final = skill * w_skill + experience * w_exp + education * w_edu + project * w_proj

    Each weight must be in [0, 1]. The weights are expected to sum to 1.0;
    other sums are accepted with a warning.
    """
    skill: float = Field(default=0.50, ge=0.0, le=1.0)
    experience: float = Field(default=0.30, ge=0.0, le=1.0)
    education: float = Field(default=0.10, ge=0.0, le=1.0)
    project: float = Field(default=0.10, ge=0.0, le=1.0)

    @model_validator(mode='after')
    def _warn_on_unbalanced_sum(self) -> 'ScoringWeights':
        total = self.skill + self.experience + self.education + self.project
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            logger.warning(f"Scoring weights sum to {total:.4f}, expected 1.0")
        return self


class ScoringConfig(BaseModel):
    """Configuration for the ScoringService."""
    weights: ScoringWeights = Field(default_factory=ScoringWeights)


class ExtractionConfig(BaseModel):
    """Configuration for profile extraction."""
    # Projects summary is truncated to this many characters (plus a "..." marker)
    projects_summary_max_chars: int = Field(default=1000, gt=0)


class RankingConfig(BaseModel):
    """Configuration for the RankingService."""
    # Worker threads used to score candidates of one batch; 1 = sequential
    max_workers: int = Field(default=4, ge=1)


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///resume_screener.db"


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), use the repo root copy
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data: Optional[dict] = yaml.safe_load(f)

    data = data or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if not data.get('database'):
            data['database'] = {}
        data['database']['url'] = env_db_url

    # Allow env var override for ranking parallelism
    env_workers = os.environ.get("RANKING_MAX_WORKERS")
    if env_workers:
        if not data.get('ranking'):
            data['ranking'] = {}
        data['ranking']['max_workers'] = env_workers

    return AppConfig(**data)
