# ttt_scoreboard/config.py
from dataclasses import dataclass
from typing import Optional
import os

ORGANIZATION_NAME = "ttt-scoreboard"
APPLICATION_NAME = "ttt-scoreboard"
SCORE_KEY = "ttt_score"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    organization: str = ORGANIZATION_NAME
    application: str = APPLICATION_NAME
    score_key: str = SCORE_KEY
    settings_path: Optional[str] = None  # ini file; None means native QSettings location
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "AppConfig":
        env = os.environ if environ is None else environ
        cfg = cls()
        if env.get("TTT_SETTINGS_PATH"):
            cfg.settings_path = env["TTT_SETTINGS_PATH"]
        if env.get("TTT_SCORE_KEY"):
            cfg.score_key = env["TTT_SCORE_KEY"]
        if env.get("TTT_LOG_LEVEL"):
            cfg.log_level = normalize_log_level(env["TTT_LOG_LEVEL"])
        return cfg


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in LOG_LEVELS else "INFO"
