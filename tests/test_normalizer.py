from pathlib import Path

import pytest

from yeet.desktop_entry import DesktopEntry
from yeet.models import CustomApp, Direct, ShellLine
from yeet.normalizer import app_from_custom, app_from_desktop_entry, clean_exec


def entry(**kwargs) -> DesktopEntry:
    fields = dict(path=Path("x.desktop"), name="App", exec="app")
    fields.update(kwargs)
    return DesktopEntry(**fields)


def test_clean_exec_preserves_plain_commands():
    assert clean_exec("firefox") == "firefox"
    assert clean_exec("/usr/bin/app --flag") == "/usr/bin/app --flag"


def test_clean_exec_removes_field_codes():
    assert clean_exec("firefox %u") == "firefox"
    assert clean_exec("app %U") == "app"
    assert clean_exec("app %f %F") == "app"
    # the space around a removed code stays
    assert clean_exec("code %F --new-window") == "code  --new-window"


def test_clean_exec_preserves_escaped_percent():
    assert clean_exec("echo 100%%") == "echo 100%"
    assert clean_exec("app --format=%%d") == "app --format=%d"


def test_clean_exec_preserves_non_field_code_percent():
    assert clean_exec("app --ratio=50%x") == "app --ratio=50%x"
    assert clean_exec("echo %z") == "echo %z"


def test_clean_exec_handles_trailing_percent():
    assert clean_exec("app %") == "app"


def test_desktop_entry_becomes_direct_app():
    app = app_from_desktop_entry(entry(
        name="Visual Studio Code",
        exec="/usr/share/code/code --unity-launch %F",
        icon="vscode",
        description="Code Editing. Redefined.",
        keywords=("vscode",),
        terminal=False,
    ))
    assert app.name == "Visual Studio Code"
    assert app.exec == "/usr/share/code/code --unity-launch"
    assert app.launch_strategy == Direct(("/usr/share/code/code", "--unity-launch"))
    assert app.icon == "vscode"
    assert app.description == "Code Editing. Redefined."
    assert app.keywords == ("vscode",)
    assert app.runs_in_terminal is False


def test_argv_is_not_built_from_display_string():
    app = app_from_desktop_entry(entry(exec='"/opt/My App/run" --title "a b"'))
    assert app.launch_strategy == Direct(("/opt/My App/run", "--title", "a b"))
    assert app.exec == '"/opt/My App/run" --title "a b"'


def test_shell_metacharacters_stay_literal_arguments():
    app = app_from_desktop_entry(entry(exec="app ; rm -rf ~"))
    assert isinstance(app.launch_strategy, Direct)
    assert app.launch_strategy.argv == ("app", ";", "rm", "-rf", "~")


def test_terminal_flag_is_carried():
    app = app_from_desktop_entry(entry(exec="htop", terminal=True))
    assert app.runs_in_terminal is True


@pytest.mark.parametrize("kwargs", [
    {"no_display": True},
    {"hidden": True},
    {"name": None},
    {"name": ""},
    {"exec": None},
    {"exec": "%U"},
    {"exec": "%f %F"},
    {"exec": 'app "unterminated'},
])
def test_rejected_entries(kwargs):
    assert app_from_desktop_entry(entry(**kwargs)) is None


@pytest.mark.parametrize("command", [
    "firefox",
    "notify-send hi && sleep 1",
    "~/bin/thing | tee /tmp/log",
    "",
])
def test_custom_apps_always_use_shell(command):
    app = app_from_custom(CustomApp(name="Mine", exec=command, icon="star", keywords=("a", "b")))
    assert app.launch_strategy == ShellLine(command)
    assert app.exec == command
    assert app.icon == "star"
    assert app.keywords == ("a", "b")
    assert app.description is None
    assert app.runs_in_terminal is False


def test_search_text():
    app = app_from_desktop_entry(entry(name="Firefox", description="Web Browser", keywords=("internet", "www")))
    assert app.search_text() == "Firefox Web Browser internet www"

    bare = app_from_custom(CustomApp(name="Script", exec="run"))
    assert bare.search_text() == "Script"
