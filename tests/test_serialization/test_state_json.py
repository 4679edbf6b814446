"""Tests for AppState <-> JSON conversion and backup validation."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from forgefit.exceptions import InvalidProfileError, InvalidStateError
from forgefit.models.app_state import AppState, TrainingStats
from forgefit.models.history import HistoryLog
from forgefit.models.scoring_state import ScoringState
from forgefit.serialization.state_json import (
    dumps_state,
    loads_state,
    profile_from_dict,
    profile_to_dict,
    program_to_dict,
    state_from_dict,
    state_to_dict,
)


@pytest.fixture
def populated_state(sample_program, gym_profile) -> AppState:
    sample_program.week[0].exercises[0].working_weight = "80kg"
    sample_program.week[0].exercises[0].completed_sets = 2
    sample_program.week[1].exercises[0].notes = "belt on top set"
    return AppState(
        profile=gym_profile,
        program=sample_program,
        today_index=1,
        history=[
            HistoryLog(
                id="h1", date="2026-03-01", day_label="Upper A", focus="Upper",
                goal="hypertrophy", mode="gym", completed_pct=0.833, intensity="hard",
                rating=4, readiness=57, summary="Finished Upper A",
            ),
        ],
        stats=TrainingStats(streak=1, last_log_date="2026-03-01"),
        scoring=ScoringState(
            fatigue=47.0, recovery=41.0, performance=66.0,
            last_updated=datetime(2026, 3, 1, 19, 30), week_counter=2,
        ),
    )


class TestEncoding:
    def test_camel_case_keys(self, populated_state: AppState) -> None:
        data = state_to_dict(populated_state)
        assert data["todayIndex"] == 1
        assert data["profile"]["preferredSplit"] == "auto"
        assert data["scoring"]["lastUpdated"] == "2026-03-01T19:30:00"
        assert data["scoring"]["deloadSuggestedAtWeek"] is None
        ex = data["program"]["week"][0]["exercises"][0]
        assert ex["workingWeight"] == "80kg"
        assert ex["prescription"]["rpeHint"]

    def test_empty_state(self) -> None:
        data = state_to_dict(AppState())
        assert data["profile"] is None
        assert data["program"] is None
        assert data["history"] == []

    def test_program_dict_is_json_serializable(self, sample_program) -> None:
        json.dumps(program_to_dict(sample_program))


class TestRoundTrip:
    def test_full_state(self, populated_state: AppState) -> None:
        restored = loads_state(dumps_state(populated_state))
        assert restored.profile == populated_state.profile
        assert restored.program == populated_state.program
        assert restored.history == populated_state.history
        assert restored.stats == populated_state.stats
        assert restored.scoring == populated_state.scoring
        assert restored.today_index == 1

    def test_unicode_survives(self, populated_state: AppState) -> None:
        text = dumps_state(populated_state)
        assert "RPE 7–9" in text


class TestDecoding:
    def test_missing_keys_fall_back_to_defaults(self) -> None:
        state = loads_state("{}")
        assert state.profile is None
        assert state.program is None
        assert state.scoring == ScoringState()
        assert state.stats == TrainingStats()

    def test_partial_scoring_merges_defaults(self) -> None:
        state = loads_state('{"scoring": {"fatigue": 60}}')
        assert state.scoring.fatigue == 60.0
        assert state.scoring.recovery == 55.0

    def test_utc_timestamp_becomes_naive(self) -> None:
        state = loads_state('{"scoring": {"lastUpdated": "2026-03-01T10:00:00.000Z"}}')
        assert state.scoring.last_updated is not None
        assert state.scoring.last_updated.tzinfo is None

    @pytest.mark.parametrize(
        "text",
        ["not json", "[]", "null", '{"history": {}}', '{"todayIndex": "1"}',
         '{"scoring": {"fatigue": 140}}', '{"scoring": {"fatigue": true}}',
         '{"scoring": {"lastUpdated": "yesterday"}}',
         '{"history": [{"date": "2026-03-01", "completedPct": 1.5, "rating": 3}]}',
         '{"history": [{"date": "2026-03-01", "completedPct": 1, "rating": 0}]}'],
    )
    def test_malformed_documents_rejected(self, text: str) -> None:
        with pytest.raises(InvalidStateError):
            loads_state(text)

    @pytest.mark.parametrize(
        "text",
        ['{"stats": {"streak": 2, "lastLogDate": "yesterday"}}',
         '{"history": [{"date": "soon", "completedPct": 1, "rating": 3}]}',
         '{"scoring": {"lastUpdated": "0001-01-01T00:00:00+05:00"}}',
         '{"scoring": {"fatigue": ' + "9" * 400 + "}}",
         '{"history": [{"date": "2026-03-01", "completedPct": ' + "9" * 400 + ', "rating": 3}]}',
         '{"scoring": {"fatigue": ' + "1" * 5000 + "}}",
         '{"scoring": {"fatigue": NaN}}',
         "[" * 100000],
    )
    def test_bad_dates_and_overflowing_numbers_rejected(self, text: str) -> None:
        with pytest.raises(InvalidStateError):
            loads_state(text)

    def test_iso_dates_accepted(self) -> None:
        state = loads_state(
            '{"stats": {"streak": 2, "lastLogDate": "2026-03-01"},'
            ' "history": [{"date": "2026-03-01", "completedPct": 0.5, "rating": 3}]}'
        )
        assert state.stats.last_log_date == "2026-03-01"
        assert state.history[0].date == "2026-03-01"

    def test_prescription_out_of_range(self, populated_state: AppState) -> None:
        data = state_to_dict(populated_state)
        data["program"]["week"][0]["exercises"][0]["prescription"]["sets"] = 12
        with pytest.raises(InvalidStateError, match="sets"):
            state_from_dict(data)

    def test_completed_sets_above_target(self, populated_state: AppState) -> None:
        data = state_to_dict(populated_state)
        data["program"]["week"][0]["exercises"][0]["completedSets"] = 9
        with pytest.raises(InvalidStateError):
            state_from_dict(data)

    def test_today_index_outside_week(self, populated_state: AppState) -> None:
        data = state_to_dict(populated_state)
        data["todayIndex"] = 4
        with pytest.raises(InvalidStateError, match="todayIndex"):
            state_from_dict(data)

    def test_error_carries_path(self, populated_state: AppState) -> None:
        data = state_to_dict(populated_state)
        del data["program"]["week"][1]["exercises"][2]["name"]
        with pytest.raises(InvalidStateError) as excinfo:
            state_from_dict(data)
        assert excinfo.value.path == "program.week[1].exercises[2]"


class TestProfile:
    def test_round_trip(self, home_profile) -> None:
        assert profile_from_dict(profile_to_dict(home_profile)) == home_profile

    def test_defaults_for_missing_fields(self) -> None:
        profile = profile_from_dict({"days": 5})
        assert profile.days == 5
        assert profile.mode == "gym"
        assert profile.smart_adapt is True

    @pytest.mark.parametrize(
        "data",
        [{"mode": "outdoor"}, {"goal": "bulk"}, {"level": "elite"}, {"tone": "loud"},
         {"days": 0}, {"minutes": -5}, {"days": "4"}, {"days": True}, {"smartAdapt": "yes"}],
    )
    def test_invalid(self, data: dict) -> None:
        with pytest.raises(InvalidProfileError):
            profile_from_dict(data)

    def test_profile_error_is_a_state_error(self) -> None:
        with pytest.raises(InvalidStateError):
            loads_state('{"profile": {"goal": "bulk"}}')
