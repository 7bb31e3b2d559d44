import json
import logging
import math

from PySide6.QtCore import QSettings

from .config import SCORE_KEY
from .game_logic import Player, empty_score

logger = logging.getLogger(__name__)


def parse_score(raw):
    """
    Turn a stored score record into a score dict.

    Anything unreadable counts as zero. Each field is checked on its own,
    so ``{"X": 3, "O": "abc"}`` still keeps X's three wins.
    """
    score = empty_score()
    if raw is None or raw == "":
        return score
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("unreadable score record %r: %s", raw, exc)
        return score
    if not isinstance(data, dict):
        logger.warning("score record is not an object: %r", data)
        return score
    for player in Player:
        score[player] = _parse_count(data.get(player.value))
    return score


def _parse_count(value):
    # bool is an int subclass, but never a valid count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        return 0
    return int(value) if value >= 0 else 0


def dump_score(score):
    return json.dumps({player.value: int(score.get(player, 0)) for player in Player})


class ScoreStore:
    """
    load/save the score record; never raises
    """
    def load_score(self):
        raise NotImplementedError

    def save_score(self, score):
        raise NotImplementedError


class MemoryScoreStore(ScoreStore):
    """
    keeps the record text in memory (tests, headless runs)
    """
    def __init__(self, raw=None):
        self.raw = raw
        self.saves = 0

    def load_score(self):
        return parse_score(self.raw)

    def save_score(self, score):
        self.raw = dump_score(score)
        self.saves += 1


class QSettingsScoreStore(ScoreStore):
    """
    score record kept as json text under one QSettings key
    """
    def __init__(self, settings=None, key=SCORE_KEY):
        self.settings = settings if settings is not None else QSettings()
        self.key = key

    @classmethod
    def from_config(cls, config):
        if config.settings_path:
            settings = QSettings(config.settings_path, QSettings.Format.IniFormat)
        else:
            settings = QSettings(config.organization, config.application)
        return cls(settings, key=config.score_key)

    def load_score(self):
        try:
            raw = self.settings.value(self.key)
        except (RuntimeError, TypeError) as exc:
            logger.warning("could not read score from settings: %s", exc)
            return empty_score()
        if raw is not None and not isinstance(raw, str):
            logger.warning("score record has unexpected type %s", type(raw).__name__)
            return empty_score()
        return parse_score(raw)

    def save_score(self, score):
        # best effort: in-memory score stays authoritative
        try:
            self.settings.setValue(self.key, dump_score(score))
            self.settings.sync()
        except (RuntimeError, TypeError, ValueError, OSError) as exc:
            logger.warning("could not save score: %s", exc)
            return
        if self.settings.status() != QSettings.Status.NoError:
            logger.warning("could not save score: settings status %s", self.settings.status())
