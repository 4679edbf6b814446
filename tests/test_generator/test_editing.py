"""Tests for in-place plan edits: swap, notes, working weight, set tracking."""

from __future__ import annotations

from forgefit.generator.editing import (
    MAX_SWAP_CANDIDATES,
    adjust_completed_sets,
    reset_completed_sets,
    set_working_weight,
    swap_candidates,
    swap_exercise,
    update_note,
)


class TestSwapCandidates:
    def test_alternatives_first_then_same_category(self, sample_program) -> None:
        bench = sample_program.week[0].exercises[0]
        candidates = swap_candidates(bench)
        assert candidates[:3] == ["Dumbbell Bench Press", "Machine Chest Press", "Push-ups"]
        assert "Incline Dumbbell Press" in candidates

    def test_capped_unique_and_excludes_self(self, sample_program) -> None:
        for day in sample_program.week:
            for ex in day.exercises:
                candidates = swap_candidates(ex)
                assert len(candidates) <= MAX_SWAP_CANDIDATES
                assert len(candidates) == len(set(candidates))
                assert ex.name not in candidates

    def test_bench_fills_the_cap(self, sample_program) -> None:
        assert len(swap_candidates(sample_program.week[0].exercises[0])) == MAX_SWAP_CANDIDATES


class TestSwapExercise:
    def test_swap_keeps_volume_and_rederives_rest(self, sample_program) -> None:
        day = sample_program.week[0]
        before = len(day.exercises)
        bench = day.exercises[0]
        bench.completed_sets = 2
        bench.notes = "felt good"

        assert swap_exercise(sample_program, 0, 0, "Push-ups")

        swapped = day.exercises[0]
        assert len(day.exercises) == before
        assert swapped.name == "Push-ups"
        assert swapped.environment == "home"
        assert swapped.alternatives == ("Knee Push-ups", "Feet-elevated Push-ups", "Diamond Push-ups")
        assert (swapped.prescription.sets, swapped.prescription.reps) == (3, 8)
        # Push-ups are isolation under the hypertrophy scheme
        assert swapped.prescription.rest == 75
        assert swapped.completed_sets == 0
        assert swapped.notes == "felt good"

    def test_alternative_outside_catalog_rejected(self, sample_program) -> None:
        lat = sample_program.week[0].exercises[4]
        assert lat.name == "Lat Pulldown"
        assert not swap_exercise(sample_program, 0, 4, "One-arm Cable Pulldown")
        assert sample_program.week[0].exercises[4].name == "Lat Pulldown"

    def test_other_category_rejected(self, sample_program) -> None:
        assert not swap_exercise(sample_program, 0, 0, "Pull-ups")
        assert sample_program.week[0].exercises[0].name == "Barbell Bench Press"

    def test_out_of_range(self, sample_program) -> None:
        assert not swap_exercise(sample_program, 9, 0, "Push-ups")
        assert not swap_exercise(sample_program, 0, 99, "Push-ups")


class TestNotesAndWeight:
    def test_note_is_trimmed(self, sample_program) -> None:
        assert update_note(sample_program, 1, 0, "  keep heels down  ")
        assert sample_program.week[1].exercises[0].notes == "keep heels down"

    def test_weight(self, sample_program) -> None:
        assert set_working_weight(sample_program, 0, 0, " 60kg ")
        assert sample_program.week[0].exercises[0].working_weight == "60kg"

    def test_out_of_range_is_noop(self, sample_program) -> None:
        assert not update_note(sample_program, -1, 0, "x")
        assert not set_working_weight(sample_program, 0, 42, "x")


class TestSetTracking:
    def test_increment_capped_at_target(self, sample_program) -> None:
        for _ in range(10):
            adjust_completed_sets(sample_program, 0, 0, 1)
        ex = sample_program.week[0].exercises[0]
        assert ex.completed_sets == ex.prescription.sets

    def test_decrement_floored_at_zero(self, sample_program) -> None:
        adjust_completed_sets(sample_program, 0, 0, -1)
        assert sample_program.week[0].exercises[0].completed_sets == 0

    def test_day_completion(self, sample_program) -> None:
        day = sample_program.week[0]
        adjust_completed_sets(sample_program, 0, 0, 3)
        assert day.completion == 3 / day.total_sets

    def test_reset_day(self, sample_program) -> None:
        for i in range(len(sample_program.week[0].exercises)):
            adjust_completed_sets(sample_program, 0, i, 2)
        reset_completed_sets(sample_program, 0)
        assert sample_program.week[0].completed_sets == 0
        reset_completed_sets(sample_program, 99)
