from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FakeFiles

from tinypad.services.document_tracker import DocumentTracker
from tinypad.services.save_prompt import PromptOutcome, UnsavedChoice
from tinypad.services.ui.presenters.main_presenter import IMainView, MainPresenter

# ------------------------------
# Fakes
# ------------------------------


class FakeView:
    def __init__(self) -> None:
        self.text = ""
        self.cursor: int | None = None
        self.title = ""
        self.modified = False
        self.undo_state: tuple = ()
        self.status: list[str] = []
        self.closed = 0
        self.quit = 0
        self.presenter: MainPresenter | None = None

    def get_editor_text(self) -> str:
        return self.text

    def set_editor_text(self, text: str, cursor_pos: int | None = None) -> None:
        self.text = text
        self.cursor = cursor_pos
        # a real widget reports its own change back
        if self.presenter is not None:
            self.presenter.on_text_edited(text)

    def set_title(self, title: str) -> None:
        self.title = title

    def set_modified(self, modified: bool) -> None:
        self.modified = modified

    def set_undo_state(self, can_undo, undo_label, can_redo, redo_label) -> None:
        self.undo_state = (can_undo, undo_label, can_redo, redo_label)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.status.append(text)

    def close_window(self) -> None:
        self.closed += 1

    def quit_app(self) -> None:
        self.quit += 1

    # test helper: the user types
    def type(self, text: str) -> None:
        self.text += text
        self.presenter.on_text_edited(self.text)


class FakeMessages:
    def __init__(self, choice=UnsavedChoice.CANCEL) -> None:
        self.choice = choice
        self.asked = 0
        self.errors: list[str] = []

    def error(self, parent, title, text) -> None:
        self.errors.append(text)

    def ask_unsaved_changes(self, parent, title, text):
        self.asked += 1
        return self.choice


class FakeDialogs:
    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.save_result: Path | None = None
        self.save_start: str | None = None

    def get_open_file(self, parent, caption, start_dir, filter_str):
        return self.open_result

    def get_save_file(self, parent, caption, start_path, filter_str):
        self.save_start = start_path
        return self.save_result


class FakeSettings:
    def __init__(self) -> None:
        self.last_dir: str | None = None

    def get_geometry(self):
        return None

    def set_geometry(self, blob):
        pass

    def get_last_dir(self):
        return self.last_dir

    def set_last_dir(self, directory):
        self.last_dir = directory


@pytest.fixture()
def files() -> FakeFiles:
    return FakeFiles()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def settings() -> FakeSettings:
    return FakeSettings()


@pytest.fixture()
def presenter(view, files, messages, dialogs, settings) -> MainPresenter:
    p = MainPresenter(
        view=view,
        tracker=DocumentTracker(files),
        messages=messages,
        dialogs=dialogs,
        settings=settings,
        app_name="TinyPad",
    )
    view.presenter = p
    return p


# ------------------------------
# Tests
# ------------------------------


def test_fake_view_satisfies_protocol(view):
    assert isinstance(view, IMainView)


def test_initial_view_state(presenter, view):
    assert view.title == "TinyPad - Untitled"
    assert view.undo_state == (False, "Undo", False, "Redo")


def test_typing_marks_dirty_and_enables_undo(presenter, view):
    view.type("hi")
    assert view.title == "* TinyPad - Untitled"
    assert view.modified is True
    assert view.undo_state == (True, "Undo Typing", False, "Redo")


def test_text_edit_uses_reported_change(presenter, view):
    view.type("one\ntwo\n")
    view.text = "one\ntwXo\n"
    presenter.on_text_edited(view.text, (4, 4, 5))
    assert presenter.tracker.text == "one\ntwXo\n"
    assert presenter.tracker.history.undo_label() == "Undo Typing"
    assert presenter.undo() is True
    assert view.text == "one\ntwo\n"
    assert view.cursor == 6


def test_text_edit_with_stale_change_still_recorded(presenter, view):
    view.type("abc")
    # range does not line up with the tracked text
    presenter.on_text_edited("abcd", (0, 9, 9))
    assert presenter.tracker.text == "abcd"
    assert len(presenter.tracker.history) == 2


def test_undo_redo_push_text_back(presenter, view):
    view.type("a")
    view.type("b")
    assert presenter.undo() is True
    assert view.text == "a"
    assert view.cursor == 1
    assert presenter.tracker.history.cursor == 1
    assert presenter.redo() is True
    assert view.text == "ab"
    assert view.undo_state[2] is False


def test_undo_with_empty_history_only_reports_status(presenter, view, messages):
    assert presenter.undo() is False
    assert presenter.redo() is False
    assert view.status == ["Nothing to undo", "Nothing to redo"]
    assert messages.errors == []


def test_open_path_loads_and_reports(presenter, view, files, settings):
    p = Path("/docs/notes.txt")
    files.disk[p] = "line\n"
    assert presenter.open_path(p) is PromptOutcome.PROCEEDED
    assert view.text == "line\n"
    assert view.title == f"TinyPad - {p}"
    assert view.status[-1] == f"Opened: {p}"
    assert settings.last_dir == str(p.parent)
    # loading is not an undoable edit
    assert view.undo_state[0] is False


def test_open_missing_file_shows_error_once(presenter, view, messages):
    view.type("keep")
    messages.choice = UnsavedChoice.DISCARD
    presenter.open_path(Path("/nope.txt"))
    assert len(messages.errors) == 1
    assert "nope.txt" in messages.errors[0]
    assert view.text == "keep"
    assert presenter.tracker.dirty is True


def test_open_dialog_no_selection_is_noop(presenter, view, dialogs, messages):
    dialogs.open_result = None
    assert presenter.open_dialog() is PromptOutcome.PROCEEDED
    assert messages.errors == []
    assert view.title == "TinyPad - Untitled"


def test_save_unbound_asks_for_path(presenter, view, dialogs, files):
    view.type("hello")
    dialogs.save_result = Path("/out.txt")
    assert presenter.save() is True
    assert files.disk[Path("/out.txt")] == "hello"
    assert view.title == f"TinyPad - {Path('/out.txt')}"
    assert view.status[-1] == f"Saved: {Path('/out.txt')}"


def test_save_as_no_selection_is_noop(presenter, view, dialogs, files, messages):
    view.type("hello")
    dialogs.save_result = None
    assert presenter.save_as() is False
    assert files.writes == []
    assert messages.errors == []
    assert presenter.tracker.dirty is True


def test_save_bound_writes_without_dialog(presenter, view, dialogs, files):
    p = Path("/a.txt")
    files.disk[p] = "x\n"
    presenter.open_path(p)
    view.type("y")
    dialogs.save_result = Path("/should-not-be-used.txt")
    assert presenter.save() is True
    assert files.disk[p] == "x\ny"
    assert files.writes == [p]


def test_save_as_prefills_bound_path(presenter, files, dialogs):
    p = Path("/a.txt")
    files.disk[p] = ""
    presenter.open_path(p)
    presenter.save_as()
    assert dialogs.save_start == str(p)


def test_write_failure_reports_and_stays_dirty(presenter, view, dialogs, files, messages):
    view.type("data")
    ro = Path("/ro.txt")
    files.read_only.add(ro)
    dialogs.save_result = ro
    assert presenter.save() is False
    assert len(messages.errors) == 1
    assert presenter.tracker.dirty is True
    assert presenter.tracker.bound_path is None


def test_close_discard_abandons_buffer_without_writing(presenter, view, messages, files):
    view.type("hello")
    messages.choice = UnsavedChoice.DISCARD
    assert presenter.close_document() is PromptOutcome.PROCEEDED
    assert view.closed == 1
    assert files.writes == []


def test_exit_with_failed_save_is_aborted(presenter, view, messages, dialogs, files):
    view.type("hello")
    messages.choice = UnsavedChoice.SAVE
    ro = Path("/readonly.txt")
    files.read_only.add(ro)
    dialogs.save_result = ro
    assert presenter.exit_app() is PromptOutcome.SAVE_FAILED
    assert view.quit == 0
    assert presenter.tracker.dirty is True


def test_exit_save_dialog_cancelled_is_aborted(presenter, view, messages, dialogs):
    view.type("hello")
    messages.choice = UnsavedChoice.SAVE
    dialogs.save_result = None
    assert presenter.exit_app() is PromptOutcome.SAVE_FAILED
    assert view.quit == 0


def test_close_when_clean_skips_prompt(presenter, view, messages):
    assert presenter.close_document() is PromptOutcome.PROCEEDED
    assert messages.asked == 0
    assert view.closed == 1


def test_request_close_cancel(presenter, view, messages):
    view.type("x")
    messages.choice = UnsavedChoice.CANCEL
    assert presenter.request_close() is False
    messages.choice = None
    assert presenter.request_close() is False
    messages.choice = UnsavedChoice.DISCARD
    assert presenter.request_close() is True


def test_new_file_resets_after_discard(presenter, view, messages):
    view.type("junk")
    messages.choice = UnsavedChoice.DISCARD
    presenter.new_file()
    assert view.text == ""
    assert view.title == "TinyPad - Untitled"
    assert view.undo_state == (False, "Undo", False, "Redo")


def test_start_dir_falls_back_to_settings(presenter, settings, dialogs):
    settings.last_dir = "/remembered"
    presenter.save_as()
    assert dialogs.save_start == "/remembered"
