from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    max_depth: int = int(os.getenv("CHRONOALGEBRA_MAX_DEPTH", "16"))
    log_level: str = os.getenv("CHRONOALGEBRA_LOG_LEVEL", "WARNING")

SETTINGS = Settings()
