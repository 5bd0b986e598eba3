"""Unit tests for css_editor.themes.regenerator.BatchRegenerator."""
from __future__ import annotations

from typing import List

from css_editor.config_store import MemoryConfigStore
from css_editor.exceptions import FileWriteError
from css_editor.file_system import FileExists, LocalFileSystem
from css_editor.themes import BatchRegenerator, GenerationStatus, ThemeCssWriter


def seed(store) -> None:
    records = {
        "alpha": {"enabled": True, "css": "a{color:red}"},
        "beta": {"enabled": False, "css": "b{color:blue}"},
        "gamma": {"enabled": True, "css": ""},
        "delta": {"enabled": True, "css": "d{margin:0}"},
    }
    for theme, fields in records.items():
        record = store.get_editable(f"css_editor.theme.{theme}")
        for key, value in fields.items():
            record.set(key, value)
        record.save()


class SeenWriter(ThemeCssWriter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.seen: List[str] = []

    def generate_result(self, theme):
        self.seen.append(theme)
        return super().generate_result(theme)


class SelectiveFailFileSystem(LocalFileSystem):
    def __init__(self, *args, fail: List[str], **kwargs):
        super().__init__(*args, **kwargs)
        self.fail = fail

    def save_data(self, data, destination, replace=FileExists.RENAME):
        if any(destination.endswith(f"{theme}.css") for theme in self.fail):
            raise FileWriteError(destination, "no space left on device")
        return super().save_data(data, destination, replace)


def test_regenerate_all_counts_successes(writer, config_store, public_dir) -> None:
    seed(config_store)

    count = BatchRegenerator(writer).regenerate_all()

    assert count == 2
    assert (public_dir / "css_editor" / "alpha.css").read_text() == "a{color:red}"
    assert (public_dir / "css_editor" / "delta.css").read_text() == "d{margin:0}"
    assert not (public_dir / "css_editor" / "beta.css").exists()
    assert not (public_dir / "css_editor" / "gamma.css").exists()


def test_count_matches_independent_generation(writer, config_store) -> None:
    seed(config_store)
    regenerator = BatchRegenerator(writer)
    expected = sum(1 for theme in regenerator.list_themes() if writer.generate(theme))

    assert regenerator.regenerate_all() == expected


def test_every_theme_is_attempted_after_failures(config_store, public_dir, recording_logger) -> None:
    seed(config_store)
    file_system = SelectiveFailFileSystem(
        schemes={"public": str(public_dir)}, logger=recording_logger, fail=["alpha"]
    )
    writer = SeenWriter(config_store, file_system, logger=recording_logger)

    report = BatchRegenerator(writer).run()

    # alpha sorts first, so later themes run after a failure
    assert writer.seen == ["alpha", "beta", "delta", "gamma"]
    assert report.results["alpha"].status is GenerationStatus.WRITE_ERROR
    assert report.results["delta"].status is GenerationStatus.GENERATED
    assert report.generated_count == 1
    assert list(report.failed) == ["alpha"]


def test_report_distinguishes_skips(writer, config_store) -> None:
    seed(config_store)

    report = BatchRegenerator(writer).run()

    assert report.results["beta"].status is GenerationStatus.DISABLED
    assert report.results["gamma"].status is GenerationStatus.EMPTY_CSS
    assert report.failed == {}


def test_only_theme_records_are_listed(writer, config_store) -> None:
    seed(config_store)
    config_store.get_editable("css_editor.settings").set("enabled", True).save()
    config_store.get_editable("other.theme.alpha").set("enabled", True).save()

    themes = BatchRegenerator(writer).list_themes()

    assert sorted(themes) == ["alpha", "beta", "delta", "gamma"]


def test_empty_store_regenerates_nothing(writer) -> None:
    assert BatchRegenerator(writer).regenerate_all() == 0


def test_uses_explicit_store_when_given(file_system, recording_logger) -> None:
    store = MemoryConfigStore({"css_editor.theme.solo": {"enabled": True, "css": "s{}"}})
    writer = ThemeCssWriter(store, file_system, logger=recording_logger)

    assert BatchRegenerator(writer, store, logger=recording_logger).regenerate_all() == 1


def test_count_follows_overridden_generate(config_store, file_system, recording_logger) -> None:
    class OnlyAlphaWriter(ThemeCssWriter):
        def generate(self, theme):
            return theme == "alpha"

    seed(config_store)
    writer = OnlyAlphaWriter(config_store, file_system, logger=recording_logger)

    assert BatchRegenerator(writer).regenerate_all() == 1


def test_symlink_loop_does_not_abort_batch(writer, config_store, public_dir) -> None:
    seed(config_store)
    public_dir.mkdir(parents=True)
    (public_dir / "css_editor").symlink_to(public_dir / "css_editor")

    assert BatchRegenerator(writer).regenerate_all() == 0
    assert set(BatchRegenerator(writer).run().failed) == {"alpha", "delta"}
