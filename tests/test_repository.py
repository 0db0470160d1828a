"""Tests for the profile repository and its backends."""

from __future__ import annotations

import json
from unittest.mock import patch

from sqlalchemy import create_engine

from tungsten.engine.assessment import default_answers
from tungsten.engine.models import Gender, Profile, UnitSystem, VO2Entry
from tungsten.engine.repository import (
    ANSWERS_KEY,
    VO2_SERIES_KEY,
    JsonFileStore,
    MemoryStore,
    ProfileRepository,
    RecordStore,
    SqlStore,
)

from tests.conftest import FlakyStore, make_profile


class TestBackends:
    def test_protocol(self, tmp_path):
        assert isinstance(MemoryStore(), RecordStore)
        assert isinstance(JsonFileStore(tmp_path / "s.json"), RecordStore)

    def test_json_file_roundtrip(self, tmp_path):
        store = JsonFileStore(tmp_path / "nested" / "state.json")
        assert store.read("answers") is None
        store.write("answers", '{"sleep": 2}')
        store.write("profile.age", "41")
        assert JsonFileStore(tmp_path / "nested" / "state.json").read("profile.age") == "41"
        on_disk = json.loads((tmp_path / "nested" / "state.json").read_text())
        assert set(on_disk) == {"answers", "profile.age"}

    def test_sql_roundtrip(self, tmp_path):
        store = SqlStore(create_engine(f"sqlite:///{tmp_path / 'state.db'}"))
        assert store.read("profile.age") is None
        store.write("profile.age", "41")
        store.write("profile.age", "42")
        assert store.read("profile.age") == "42"


class TestProfileRecords:
    def test_fresh_store_gives_defaults(self, repository):
        profile = repository.load_profile()
        assert profile == Profile()
        assert profile.unit_system == UnitSystem.imperial

    def test_fields_are_keyed_individually(self, store, repository):
        repository.save_profile(make_profile(name="Ana"))
        assert store.records["profile.name"] == '"Ana"'
        assert store.records["profile.gender"] == '"male"'
        assert json.loads(store.records["profile.weight"]) == 86.2

    def test_roundtrip(self, repository):
        profile = make_profile(gender="female", cycle_phase="luteal", cooper_meters=2400)
        repository.save_profile(profile)
        assert repository.load_profile() == profile

    def test_save_single_field(self, store, repository):
        profile = make_profile(age=44)
        repository.save_profile_field(profile, "age")
        assert set(store.records) == {"profile.age"}
        assert repository.load_profile().age == 44

    def test_invalid_stored_enum_falls_back(self, store, repository):
        store.write("profile.gender", '"robot"')
        store.write("profile.age", "52")
        profile = repository.load_profile()
        assert profile.gender == Gender.male
        assert profile.age == 52

    def test_undecodable_record_ignored(self, store, repository):
        store.write("profile.age", "{not json")
        assert repository.load_profile().age == 30


class TestAnswersAndSeries:
    def test_answers_default(self, repository):
        assert repository.load_answers() == default_answers()

    def test_answers_roundtrip_normalises(self, store, repository):
        store.write(ANSWERS_KEY, json.dumps({"sleep": 9, "focus": "2", "extra": 4}))
        answers = repository.load_answers()
        assert answers["sleep"] == 5
        assert answers["focus"] == 2
        assert "extra" not in answers

    def test_answers_wrong_type(self, store, repository):
        store.write(ANSWERS_KEY, "[1, 2, 3]")
        assert repository.load_answers() == default_answers()

    def test_series_roundtrip(self, store, repository):
        series = [VO2Entry(date="2026-10-16", value=41.0), VO2Entry(date="2026-10-17", value=42.4)]
        assert repository.save_vo2_series(series)
        assert json.loads(store.records[VO2_SERIES_KEY])[1] == {"date": "2026-10-17", "value": 42.4}
        assert repository.load_vo2_series() == series


class TestFailures:
    def test_read_failure_returns_defaults(self):
        store = FlakyStore()
        repo = ProfileRepository(store)
        repo.save_answers({**default_answers(), "sleep": 1})
        store.fail_reads = True
        assert repo.load_answers() == default_answers()
        assert repo.load_profile() == Profile()
        assert repo.load_vo2_series() == []

    def test_write_failure_is_swallowed(self):
        store = FlakyStore()
        store.fail_writes = True
        repo = ProfileRepository(store)
        assert repo.save_answers(default_answers()) is False
        assert repo.save_profile(Profile()) is False
        assert store.records == {}

    def test_corrupt_json_file_reads_as_defaults(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{broken")
        repo = ProfileRepository(JsonFileStore(path))
        assert repo.load_profile() == Profile()
        assert repo.save_answers(default_answers()) is True
        assert repo.load_answers() == default_answers()

    def test_failed_replace_leaves_no_temp_file(self, tmp_path):
        path = tmp_path / "state.json"
        repo = ProfileRepository(JsonFileStore(path))
        assert repo.save_answers(default_answers()) is True
        with patch("tungsten.engine.repository.os.replace", side_effect=OSError("disk full")):
            assert repo.save_answers({**default_answers(), "sleep": 1}) is False
        assert [p.name for p in tmp_path.iterdir()] == ["state.json"]
        assert repo.load_answers() == default_answers()
