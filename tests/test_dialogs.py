from pathlib import Path

import pytest

from caffeine.services.ui.dialogs import Dialogs, ensure_txt_suffix
from caffeine.services.ui.ports.messages import Severity


@pytest.mark.parametrize(
    "given,expected",
    [
        ("notes", "notes.txt"),
        ("notes.txt", "notes.txt"),
        ("NOTES.TXT", "NOTES.TXT"),
        ("notes.md", "notes.md.txt"),
        ("dir/notes", "dir/notes.txt"),
    ],
)
def test_ensure_txt_suffix(given, expected):
    assert ensure_txt_suffix(Path(given)) == Path(expected)


def test_prompts_use_text_filter_first(file_dialogs, messages, tmp_path):
    dlg = Dialogs(file_dialogs, messages)
    file_dialogs.open_answers.append(tmp_path / "a.txt")

    assert dlg.prompt_open_path() == tmp_path / "a.txt"
    assert dlg.prompt_save_path() is None  # nothing queued == user cancelled

    (kind_o, caption_o, filt_o), (kind_s, caption_s, filt_s) = file_dialogs.calls
    assert (kind_o, caption_o) == ("open", "Open Text File")
    assert (kind_s, caption_s) == ("save", "Save Text File")
    for filt in (filt_o, filt_s):
        first, second = filt.split(";;")
        assert "*.txt" in first
        assert "All Files" in second


def test_prompt_save_path_returns_picker_choice_unchanged(file_dialogs, messages, tmp_path):
    dlg = Dialogs(file_dialogs, messages)
    file_dialogs.save_answers.append(tmp_path / "notes")
    assert dlg.prompt_save_path() == tmp_path / "notes"


def test_alert_routes_by_severity(file_dialogs, messages):
    dlg = Dialogs(file_dialogs, messages)
    dlg.alert("Success", "done", Severity.INFO)
    dlg.alert("Error", "boom", Severity.ERROR)
    dlg.alert("Note", "default")
    assert messages.shown == [
        ("info", "Success", "done"),
        ("error", "Error", "boom"),
        ("info", "Note", "default"),
    ]
