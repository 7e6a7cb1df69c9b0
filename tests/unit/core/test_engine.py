"""Unit tests for the swap engine.

Tests for the add / remove / activate / deactivate lifecycle and the
deactivate-first command discipline.
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from profctl.core.engine import Command, SwapEngine
from profctl.core.errors import (
    CopyError,
    DeletionError,
    FileNotManagedError,
    PathResolutionError,
    ProfileNotFoundError,
    ReservedNameError,
)
from profctl.models.registry import Registry
from profctl.models.status import FileState

MakeFile = Callable[[str, str], Path]


def _snapshot(path: Path, suffix: str) -> Path:
    return path.with_name(f"{path.name}.{suffix}")


@pytest.fixture
def engine() -> SwapEngine:
    """Engine over an empty registry."""
    return SwapEngine(Registry())


class TestAdd:
    """Tests for SwapEngine.add."""

    def test_creates_snapshots_and_profile(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """add snapshots the live content as org and variant and registers the file."""
        live = make_file("a.conf", "v1")

        records = engine.add("work", live)

        canonical = live.resolve()
        assert engine.registry.get("work").files == [canonical]
        assert _snapshot(canonical, "org").read_text() == "v1"
        assert _snapshot(canonical, "work").read_text() == "v1"
        assert [r.target for r in records] == [
            _snapshot(canonical, "org"),
            _snapshot(canonical, "work"),
        ]
        assert all(r.size == 2 for r in records)

    def test_appends_to_existing_profile(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """add appends to an existing profile in order."""
        first = make_file("a.conf", "a")
        second = make_file("b.conf", "b")

        engine.add("work", first)
        engine.add("work", second)

        assert engine.registry.get("work").files == [first.resolve(), second.resolve()]

    def test_stores_canonical_path(
        self, engine: SwapEngine, make_file: MakeFile, tmp_path: Path
    ) -> None:
        """Symlinked files are registered by their resolved path."""
        target = make_file("real/a.conf", "v1")
        link = tmp_path / "link.conf"
        link.symlink_to(target)

        engine.add("work", link)

        assert engine.registry.get("work").files == [target.resolve()]

    def test_reserved_name_rejected_without_side_effects(
        self, engine: SwapEngine, make_file: MakeFile, tmp_path: Path
    ) -> None:
        """add("org", f) writes nothing and leaves the registry unchanged."""
        live = make_file("a.conf", "v1")

        with pytest.raises(ReservedNameError):
            engine.add("org", live)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.conf"]
        assert len(engine.registry) == 0

    def test_missing_file_raises(self, engine: SwapEngine, tmp_path: Path) -> None:
        """add raises PathResolutionError for missing files."""
        with pytest.raises(PathResolutionError):
            engine.add("work", tmp_path / "missing.conf")

        assert len(engine.registry) == 0

    def test_readd_overwrites_org(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """Adding a managed file again re-snapshots the current live content as org."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        live.write_text("v1-edited")

        engine.add("home", live)

        assert _snapshot(live.resolve(), "org").read_text() == "v1-edited"
        assert _snapshot(live.resolve(), "work").read_text() == "v1"
        assert _snapshot(live.resolve(), "home").read_text() == "v1-edited"


class TestRemove:
    """Tests for SwapEngine.remove."""

    def test_deletes_exactly_two_snapshots(
        self, engine: SwapEngine, make_file: MakeFile, tmp_path: Path
    ) -> None:
        """remove deletes f.p and f.org and keeps the live file."""
        live = make_file("a.conf", "v1")
        other = make_file("b.conf", "b")
        engine.add("work", live)
        engine.add("work", other)

        deleted, dropped = engine.remove("work", live)

        canonical = live.resolve()
        assert deleted == [_snapshot(canonical, "work"), _snapshot(canonical, "org")]
        assert dropped is False
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "a.conf",
            "b.conf",
            "b.conf.org",
            "b.conf.work",
        ]
        assert engine.registry.get("work").files == [other.resolve()]

    def test_drops_empty_profile(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """remove drops a profile whose list becomes empty."""
        live = make_file("a.conf", "v1")
        kept = make_file("b.conf", "b")
        engine.add("work", live)
        engine.add("home", kept)

        _, dropped = engine.remove("work", live)

        assert dropped is True
        assert "work" not in engine.registry
        assert engine.registry.get("home").files == [kept.resolve()]

    def test_unknown_profile_raises(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """remove raises ProfileNotFoundError for unknown profiles."""
        live = make_file("a.conf", "v1")

        with pytest.raises(ProfileNotFoundError):
            engine.remove("work", live)

    def test_unmanaged_file_raises(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """remove raises FileNotManagedError for files outside the profile."""
        engine.add("work", make_file("a.conf", "v1"))

        with pytest.raises(FileNotManagedError):
            engine.remove("work", make_file("b.conf", "b"))

    def test_missing_live_file_raises(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """remove needs the live file to canonicalize its path."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        live.unlink()

        with pytest.raises(PathResolutionError):
            engine.remove("work", live)

    def test_deletion_failure_keeps_list_mutation(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """A failed snapshot deletion is reported after the list was already changed."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        _snapshot(live.resolve(), "org").unlink()

        with pytest.raises(DeletionError):
            engine.remove("work", live)

        assert "work" not in engine.registry
        assert not _snapshot(live.resolve(), "work").exists()


class TestActivateDeactivate:
    """Tests for SwapEngine.activate and SwapEngine.deactivate."""

    def test_scenario_v1_v2(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """Externally edited variants are swapped in and the original restored."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        assert _snapshot(live.resolve(), "org").read_text() == "v1"
        assert _snapshot(live.resolve(), "work").read_text() == "v1"

        _snapshot(live.resolve(), "work").write_text("v2")
        engine.execute(Command.ACTIVATE, profile="work")
        assert live.read_text() == "v2"

        engine.execute(Command.DEACTIVATE)
        assert live.read_text() == "v1"

    def test_add_deactivate_activate_round_trip(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """Activating after deactivate reproduces the content at add time."""
        live = make_file("a.conf", "at-add")
        engine.add("work", live)
        _snapshot(live.resolve(), "org").write_text("pristine")

        engine.deactivate()
        assert live.read_text() == "pristine"
        engine.activate("work")

        assert live.read_text() == "at-add"

    def test_deactivate_is_idempotent(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """Two deactivations in a row leave identical content."""
        first = make_file("a.conf", "a")
        second = make_file("b.conf", "b")
        engine.add("work", first)
        engine.add("home", second)
        _snapshot(first.resolve(), "work").write_text("a-work")
        engine.activate("work")

        engine.deactivate()
        after_first = (first.read_text(), second.read_text())
        engine.deactivate()

        assert (first.read_text(), second.read_text()) == after_first == ("a", "b")

    def test_deactivate_restores_original_regardless_of_profile(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """Deactivate restores first-add content after any activation sequence."""
        live = make_file("a.conf", "original")
        engine.add("work", live)
        engine.deactivate()
        engine.add("home", live)
        _snapshot(live.resolve(), "work").write_text("work")
        _snapshot(live.resolve(), "home").write_text("home")

        for name in ("work", "home", "work"):
            engine.execute(Command.ACTIVATE, profile=name)
            assert live.read_text() == name
            engine.execute(Command.DEACTIVATE)
            assert live.read_text() == "original"

    def test_deactivate_restores_shared_file_once(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """A file shared by two profiles is restored once."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        engine.add("home", live)

        records = engine.deactivate()

        assert len(records) == 1
        assert records[0].source == _snapshot(live.resolve(), "org")
        assert records[0].target == live.resolve()

    def test_deactivate_empty_registry(self, engine: SwapEngine) -> None:
        """Deactivating with nothing managed is a no-op."""
        assert engine.deactivate() == []

    def test_activate_unknown_profile_raises(self, engine: SwapEngine) -> None:
        """activate raises ProfileNotFoundError for unknown profiles."""
        with pytest.raises(ProfileNotFoundError):
            engine.activate("work")

    def test_activate_follows_list_order_and_stops_on_error(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """activate copies in list order and stops at the first failure."""
        first = make_file("a.conf", "a")
        second = make_file("b.conf", "b")
        third = make_file("c.conf", "c")
        for live in (first, second, third):
            engine.add("work", live)
            _snapshot(live.resolve(), "work").write_text(f"{live.name}-work")
        _snapshot(second.resolve(), "work").unlink()

        with pytest.raises(CopyError):
            engine.activate("work")

        assert first.read_text() == "a.conf-work"
        assert second.read_text() == "b"
        assert third.read_text() == "c"

    def test_deactivate_missing_org_raises(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """A missing org snapshot makes deactivate fail."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        _snapshot(live.resolve(), "org").unlink()

        with pytest.raises(CopyError):
            engine.deactivate()


class TestExecute:
    """Tests for SwapEngine.execute command dispatch."""

    def test_every_command_deactivates_first(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """execute runs deactivate before add, remove and activate."""
        live = make_file("a.conf", "v1")
        other = make_file("b.conf", "b")
        engine.add("work", live)

        with patch.object(engine, "deactivate", wraps=engine.deactivate) as spy:
            engine.execute(Command.ACTIVATE, profile="work")
            engine.execute(Command.ADD, profile="home", file=other)
            engine.execute(Command.REMOVE, profile="home", file=other)
            engine.execute(Command.DEACTIVATE)

        assert spy.call_count == 4

    def test_add_after_activation_snapshots_pristine_content(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """Because deactivate runs first, re-adding keeps the pristine org content."""
        live = make_file("a.conf", "pristine")
        engine.add("work", live)
        _snapshot(live.resolve(), "work").write_text("work")
        engine.execute(Command.ACTIVATE, profile="work")
        assert live.read_text() == "work"

        engine.execute(Command.ADD, profile="home", file=live)

        assert _snapshot(live.resolve(), "org").read_text() == "pristine"
        assert _snapshot(live.resolve(), "home").read_text() == "pristine"

    def test_reserved_add_does_not_deactivate(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """A reserved profile name is rejected before any file is restored."""
        live = make_file("a.conf", "pristine")
        engine.add("work", live)
        _snapshot(live.resolve(), "work").write_text("work")
        engine.activate("work")

        with pytest.raises(ReservedNameError):
            engine.execute(Command.ADD, profile="org", file=live)

        assert live.read_text() == "work"
        assert engine.registry.names == ["work"]

    def test_result_collects_operations(
        self, engine: SwapEngine, make_file: MakeFile
    ) -> None:
        """CommandResult lists restored copies, applied copies and deletions."""
        live = make_file("a.conf", "v1")

        added = engine.execute(Command.ADD, profile="work", file=live)
        activated = engine.execute(Command.ACTIVATE, profile="work")
        removed = engine.execute(Command.REMOVE, profile="work", file=live)

        assert added.restored == []
        assert len(added.applied) == 2
        assert len(activated.restored) == 1
        assert len(activated.applied) == 1
        assert len(removed.deleted) == 2
        assert removed.profile_dropped is True

    def test_missing_argument_raises(self, engine: SwapEngine) -> None:
        """Commands needing a profile reject a missing one."""
        with pytest.raises(ValueError, match="profile is required"):
            engine.execute(Command.ACTIVATE)


class TestStatus:
    """Tests for SwapEngine.status."""

    def test_reports_states(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """status classifies each (profile, file) pair."""
        active = make_file("a.conf", "a")
        pristine = make_file("b.conf", "b")
        modified = make_file("c.conf", "c")
        missing = make_file("d.conf", "d")
        for live in (active, pristine, modified, missing):
            engine.add("work", live)
            _snapshot(live.resolve(), "work").write_text(f"{live.name}-work")
        active.write_text("a.conf-work")
        modified.write_text("edited")
        _snapshot(missing.resolve(), "org").unlink()

        states = {s.path.name: s.state for s in engine.status()}

        assert states == {
            "a.conf": FileState.ACTIVE,
            "b.conf": FileState.PRISTINE,
            "c.conf": FileState.MODIFIED,
            "d.conf": FileState.MISSING,
        }

    def test_does_not_modify_files(self, engine: SwapEngine, make_file: MakeFile) -> None:
        """status never restores or swaps content."""
        live = make_file("a.conf", "v1")
        engine.add("work", live)
        live.write_text("edited")

        engine.status()

        assert live.read_text() == "edited"
