from dotenv import load_dotenv
from dataclasses import dataclass, fields
from pathlib import Path
import json
import logging
import math
import os

from sitescore.constants import (
    DEFAULT_DOMAIN_LOOKUP_TIMEOUT_SECONDS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

load_dotenv()  # Loads variables from .env file

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Configuration for the site analyzer."""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    domain_lookup_timeout: float = DEFAULT_DOMAIN_LOOKUP_TIMEOUT_SECONDS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("SITESCORE_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=float(os.getenv("SITESCORE_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
            max_redirects=int(os.getenv("SITESCORE_MAX_REDIRECTS", str(DEFAULT_MAX_REDIRECTS))),
            domain_lookup_timeout=float(
                os.getenv(
                    "SITESCORE_DOMAIN_LOOKUP_TIMEOUT",
                    str(DEFAULT_DOMAIN_LOOKUP_TIMEOUT_SECONDS),
                )
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@dataclass
class WeightTable:
    """Per-category weights used to combine sub-scores.

    The stock weights add up to 1.20. They are renormalised by their total
    when the final score is computed, so any non-negative table with a
    positive sum keeps the final score within 0-100.
    """

    seo: float = 0.25
    required_pages: float = 0.15
    security: float = 0.15
    domain_age: float = 0.10
    content: float = 0.15
    images: float = 0.10
    meta: float = 0.10
    performance: float = 0.10
    accessibility: float = 0.10

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"Weight for '{f.name}' must be a finite number")
            if value < 0:
                raise ValueError(f"Weight for '{f.name}' must not be negative")
        if self.total <= 0:
            raise ValueError("Weights must add up to a positive total")

    @property
    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))

    def normalized(self) -> dict[str, float]:
        """Weights scaled so that they add up to 1.0."""
        total = self.total
        return {f.name: getattr(self, f.name) / total for f in fields(self)}

    @classmethod
    def from_env(cls) -> "WeightTable":
        """Load weights from environment variables.

        Environment variables should be prefixed with SITESCORE_WEIGHT_
        e.g., SITESCORE_WEIGHT_SEO=0.3

        Returns:
            WeightTable with values from environment
        """
        values = {}
        prefix = "SITESCORE_WEIGHT_"

        for f in fields(cls):
            env_value = os.getenv(f"{prefix}{f.name.upper()}")
            if env_value is None:
                continue
            try:
                value = float(env_value)
            except ValueError:
                continue  # Keep default if conversion fails
            if math.isfinite(value):
                values[f.name] = value

        return cls(**values)

    @classmethod
    def from_file(cls, path: str) -> "WeightTable":
        """Load weights from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            WeightTable with values from file
        """
        file_path = Path(path)

        if not file_path.exists():
            logger.warning(f"Weights file {path} not found, using default weights")
            return cls()

        with open(file_path, 'r') as f:
            config = json.load(f)

        weight_config = config.get('weights', config)
        names = {f.name for f in fields(cls)}

        return cls(**{k: float(v) for k, v in weight_config.items() if k in names})

    def to_dict(self) -> dict:
        """Convert weights to dictionary.

        Returns:
            Dictionary of all weight values
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Global default weights instance
default_weights = WeightTable()
