"""
Unit tests for InMemoryActivityRepository.

Tests verify:
- Atomic signup checks (not found, duplicate, capacity)
- Unregister checks (not found, not signed up)
- Snapshot isolation
- Seed handling
"""

import pytest

from src.adapters.repository.memory import InMemoryActivityRepository
from src.domain.ports import Activity, ActivityRepository, SignupOutcome, UnregisterOutcome


class TestRepositoryProtocol:
    """Tests for ActivityRepository protocol compliance."""

    def test_no_explicit_inheritance(self) -> None:
        """InMemoryActivityRepository uses structural subtyping, not inheritance."""
        assert InMemoryActivityRepository.__bases__ == (object,)

    def test_satisfies_protocol(self, repository: InMemoryActivityRepository) -> None:
        """Repository can be passed where ActivityRepository is expected."""

        def accepts_repository(r: ActivityRepository) -> int:
            return len(r.list_activities())

        assert accepts_repository(repository) == 2


class TestSeeding:
    """Tests for repository construction."""

    def test_empty_repository(self) -> None:
        """Repository without seed is empty."""
        repo = InMemoryActivityRepository()
        assert len(repo) == 0
        assert repo.list_activities() == {}

    def test_seed_is_copied(self, seed_activities: list[Activity]) -> None:
        """Mutating seed objects after construction does not affect the directory."""
        repo = InMemoryActivityRepository(seed_activities)
        seed_activities[0].participants.append("late@mergington.edu")

        chess = repo.get_activity("Chess Club")
        assert chess is not None
        assert "late@mergington.edu" not in chess.participants

    def test_duplicate_names_rejected(self) -> None:
        """Two seed activities with the same name raise ValueError."""
        a = Activity("Chess Club", "d", "s", 5)
        b = Activity("Chess Club", "other", "s", 5)
        with pytest.raises(ValueError, match="Chess Club"):
            InMemoryActivityRepository([a, b])


class TestAddParticipant:
    """Tests for add_participant."""

    def test_success_appends_email(self, repository: InMemoryActivityRepository) -> None:
        """New email is appended after existing participants."""
        result = repository.add_participant("Chess Club", "new@mergington.edu")

        assert result == SignupOutcome.SUCCESS
        chess = repository.get_activity("Chess Club")
        assert chess is not None
        assert chess.participants == ["michael@mergington.edu", "new@mergington.edu"]

    def test_unknown_activity(self, repository: InMemoryActivityRepository) -> None:
        """Unknown activity returns NOT_FOUND."""
        result = repository.add_participant("Knitting Circle", "new@mergington.edu")
        assert result == SignupOutcome.NOT_FOUND

    def test_name_match_is_exact(self, repository: InMemoryActivityRepository) -> None:
        """Activity names are matched exactly."""
        assert repository.add_participant("chess club", "new@mergington.edu") == SignupOutcome.NOT_FOUND

    def test_duplicate_email(self, repository: InMemoryActivityRepository) -> None:
        """Existing participant returns ALREADY_SIGNED_UP and list is unchanged."""
        result = repository.add_participant("Chess Club", "michael@mergington.edu")

        assert result == SignupOutcome.ALREADY_SIGNED_UP
        chess = repository.get_activity("Chess Club")
        assert chess is not None
        assert chess.participants == ["michael@mergington.edu"]

    def test_capacity_reached(self, repository: InMemoryActivityRepository) -> None:
        """Signup beyond max_participants returns FULL."""
        assert repository.add_participant("Tiny Club", "second@mergington.edu") == SignupOutcome.SUCCESS
        assert repository.add_participant("Tiny Club", "third@mergington.edu") == SignupOutcome.FULL

        tiny = repository.get_activity("Tiny Club")
        assert tiny is not None
        assert len(tiny.participants) == tiny.max_participants
        assert tiny.spots_left == 0

    def test_duplicate_checked_before_capacity(self, repository: InMemoryActivityRepository) -> None:
        """A full activity still reports duplicates as ALREADY_SIGNED_UP."""
        repository.add_participant("Tiny Club", "second@mergington.edu")

        result = repository.add_participant("Tiny Club", "first@mergington.edu")
        assert result == SignupOutcome.ALREADY_SIGNED_UP


class TestRemoveParticipant:
    """Tests for remove_participant."""

    def test_success_removes_email(self, repository: InMemoryActivityRepository) -> None:
        """Existing participant is removed."""
        result = repository.remove_participant("Chess Club", "michael@mergington.edu")

        assert result == UnregisterOutcome.SUCCESS
        chess = repository.get_activity("Chess Club")
        assert chess is not None
        assert chess.participants == []

    def test_unknown_activity(self, repository: InMemoryActivityRepository) -> None:
        """Unknown activity returns NOT_FOUND."""
        result = repository.remove_participant("Knitting Circle", "michael@mergington.edu")
        assert result == UnregisterOutcome.NOT_FOUND

    def test_absent_email(self, repository: InMemoryActivityRepository) -> None:
        """Email not in the activity returns NOT_SIGNED_UP."""
        result = repository.remove_participant("Chess Club", "nobody@mergington.edu")
        assert result == UnregisterOutcome.NOT_SIGNED_UP

    def test_second_remove_fails(self, repository: InMemoryActivityRepository) -> None:
        """Removing twice returns NOT_SIGNED_UP the second time."""
        repository.remove_participant("Chess Club", "michael@mergington.edu")
        result = repository.remove_participant("Chess Club", "michael@mergington.edu")
        assert result == UnregisterOutcome.NOT_SIGNED_UP

    def test_remove_frees_a_seat(self, repository: InMemoryActivityRepository) -> None:
        """Unregistering from a full activity allows a new signup."""
        repository.add_participant("Tiny Club", "second@mergington.edu")
        assert repository.add_participant("Tiny Club", "third@mergington.edu") == SignupOutcome.FULL

        repository.remove_participant("Tiny Club", "first@mergington.edu")

        assert repository.add_participant("Tiny Club", "third@mergington.edu") == SignupOutcome.SUCCESS


class TestSnapshots:
    """Tests for read isolation."""

    def test_list_returns_copies(self, repository: InMemoryActivityRepository) -> None:
        """Mutating a listed activity does not change directory state."""
        snapshot = repository.list_activities()
        snapshot["Chess Club"].participants.append("sneaky@mergington.edu")
        snapshot.pop("Tiny Club")

        fresh = repository.list_activities()
        assert "sneaky@mergington.edu" not in fresh["Chess Club"].participants
        assert "Tiny Club" in fresh

    def test_snapshot_not_updated_by_later_signup(self, repository: InMemoryActivityRepository) -> None:
        """A snapshot keeps the state at the time it was taken."""
        snapshot = repository.list_activities()
        repository.add_participant("Chess Club", "new@mergington.edu")

        assert "new@mergington.edu" not in snapshot["Chess Club"].participants

    def test_get_unknown_returns_none(self, repository: InMemoryActivityRepository) -> None:
        """Unknown activity name returns None."""
        assert repository.get_activity("Knitting Circle") is None
