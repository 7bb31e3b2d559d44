import json

import pytest
from PySide6.QtCore import QSettings

from ttt_scoreboard.config import AppConfig
from ttt_scoreboard.game_logic import GameLogic, Player
from ttt_scoreboard.score_store import (
    MemoryScoreStore,
    QSettingsScoreStore,
    dump_score,
    parse_score,
)

X, O = Player.X, Player.O
ZERO = {X: 0, O: 0}


class TestParseScore:
    @pytest.mark.parametrize("raw", [None, "", "not json", "{", "[1, 2]", "7", "null", '"X"'])
    def test_unreadable_record_is_zero(self, raw):
        assert parse_score(raw) == ZERO

    def test_valid_record(self):
        assert parse_score('{"X": 3, "O": 11}') == {X: 3, O: 11}

    def test_fields_default_independently(self):
        assert parse_score('{"X": 3, "O": "abc"}') == {X: 3, O: 0}
        assert parse_score('{"O": 2}') == {X: 0, O: 2}

    @pytest.mark.parametrize("value", ["true", "false", "-1", "1.5", "NaN", "Infinity", "[]", "{}", '"4"'])
    def test_bad_counts_are_zero(self, value):
        assert parse_score('{"X": %s, "O": 1}' % value) == {X: 0, O: 1}

    def test_whole_float_is_accepted(self):
        assert parse_score('{"X": 2.0, "O": 0}') == {X: 2, O: 0}

    def test_extra_keys_ignored(self):
        assert parse_score('{"X": 1, "O": 1, "draws": 9}') == {X: 1, O: 1}

    def test_dump_format(self):
        assert json.loads(dump_score({X: 2, O: 5})) == {"X": 2, "O": 5}


class TestMemoryScoreStore:
    def test_empty(self):
        assert MemoryScoreStore().load_score() == ZERO

    def test_save_then_load(self):
        store = MemoryScoreStore()
        store.save_score({X: 1, O: 4})
        assert store.load_score() == {X: 1, O: 4}
        assert store.saves == 1


class FailingSettings:
    """stands in for a settings backend that cannot write"""

    def value(self, key):
        raise RuntimeError("storage unavailable")

    def setValue(self, key, value):
        raise RuntimeError("quota exceeded")

    def sync(self):
        pass

    def status(self):
        return QSettings.Status.AccessError


class TestQSettingsScoreStore:
    @pytest.fixture
    def ini_path(self, tmp_path, qapp):
        return str(tmp_path / "scores.ini")

    def _store(self, path):
        return QSettingsScoreStore(QSettings(path, QSettings.Format.IniFormat))

    def test_missing_key_is_zero(self, ini_path):
        assert self._store(ini_path).load_score() == ZERO

    def test_persists_across_instances(self, ini_path):
        self._store(ini_path).save_score({X: 2, O: 1})
        assert self._store(ini_path).load_score() == {X: 2, O: 1}

    def test_record_is_json_text(self, ini_path):
        self._store(ini_path).save_score({X: 2, O: 1})
        raw = QSettings(ini_path, QSettings.Format.IniFormat).value("ttt_score")
        assert json.loads(raw) == {"X": 2, "O": 1}

    def test_corrupt_record_is_zero(self, ini_path):
        settings = QSettings(ini_path, QSettings.Format.IniFormat)
        settings.setValue("ttt_score", "not json")
        settings.sync()
        assert self._store(ini_path).load_score() == ZERO

    def test_custom_key(self, ini_path):
        settings = QSettings(ini_path, QSettings.Format.IniFormat)
        QSettingsScoreStore(settings, key="other").save_score({X: 9, O: 0})
        assert QSettingsScoreStore(settings).load_score() == ZERO
        assert QSettingsScoreStore(settings, key="other").load_score() == {X: 9, O: 0}

    def test_from_config_uses_ini_path(self, ini_path):
        config = AppConfig(settings_path=ini_path, score_key="scores")
        store = QSettingsScoreStore.from_config(config)
        store.save_score({X: 1, O: 0})
        assert store.key == "scores"
        assert self._store(ini_path).load_score() == ZERO
        assert QSettingsScoreStore.from_config(config).load_score() == {X: 1, O: 0}

    def test_write_failure_is_swallowed(self):
        store = QSettingsScoreStore(FailingSettings())
        store.save_score({X: 1, O: 0})

    def test_read_failure_is_zero(self):
        assert QSettingsScoreStore(FailingSettings()).load_score() == ZERO

    def test_game_keeps_scoring_when_storage_fails(self):
        game = GameLogic(QSettingsScoreStore(FailingSettings()))
        for index in (0, 3, 1, 4, 2):
            game.apply_move(index)
        assert game.score == {X: 1, O: 0}
        game.reset_all()
        assert game.score == ZERO
