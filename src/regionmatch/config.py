from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .logging import parse_level

METHODS = ("simple", "hashtable")


class ConfigError(ValueError):
    """Raised when run settings violate their preconditions."""


@dataclass
class Settings:
    method: str = "simple"
    seed_size: int = 5
    table_size: int = 1_000_000
    compare_fraction: float = 0.05
    output_dir: Path = Path(".")
    filenames: List[Path] = field(default_factory=list)
    log_level: Optional[str] = None

    def validate(self) -> None:
        """Check every setting, raising ConfigError on the first violation."""
        if self.method not in METHODS:
            raise ConfigError(f"Unknown method {self.method!r}, expected one of {', '.join(METHODS)}")
        if self.seed_size < 1:
            raise ConfigError(f"Seed size must be positive, got {self.seed_size}")
        if self.table_size < 1:
            raise ConfigError(f"Table size must be positive, got {self.table_size}")
        if not 0.0 < self.compare_fraction <= 1.0:
            raise ConfigError(f"Compare fraction must be in (0, 1], got {self.compare_fraction}")
        if not self.filenames:
            raise ConfigError("At least one image filename is required")
        if self.log_level is not None:
            try:
                parse_level(self.log_level)
            except ValueError as exc:
                raise ConfigError(str(exc)) from exc
