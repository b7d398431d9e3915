from pathlib import Path

from yeet.constants import FLATPAK_SYSTEM_EXPORTS
from yeet.fs_discovery import application_dirs, build, iter_desktop_files, sort_apps
from yeet.models import App, CustomApp, Direct, ShellLine


def names(apps):
    return [a.name for a in apps]


def test_favorites_first_then_case_insensitive(tmp_path, write_desktop):
    apps_dir = tmp_path / "applications"
    for name in ("Zed", "Alacritty", "Firefox", "ark"):
        write_desktop(apps_dir, f"{name.lower()}.desktop", name, name.lower())

    apps = build([apps_dir], favorite_names={"Zed", "Alacritty"})
    assert names(apps) == ["Alacritty", "Zed", "ark", "Firefox"]


def test_excluded_names_never_appear_even_as_favorites(tmp_path, write_desktop):
    apps_dir = tmp_path / "applications"
    write_desktop(apps_dir, "htop.desktop", "htop", "htop")
    write_desktop(apps_dir, "firefox.desktop", "Firefox", "firefox %u")

    apps = build([apps_dir], exclude_names={"htop"}, favorite_names={"htop"})
    assert names(apps) == ["Firefox"]


def test_exclusion_matches_display_name_not_file_name(tmp_path, write_desktop):
    apps_dir = tmp_path / "applications"
    write_desktop(apps_dir, "htop.desktop", "Process Viewer", "htop")

    apps = build([apps_dir], exclude_names={"htop.desktop", "htop"})
    assert names(apps) == ["Process Viewer"]


def test_custom_apps_are_added_and_not_excluded(tmp_path, write_desktop):
    apps_dir = tmp_path / "applications"
    write_desktop(apps_dir, "firefox.desktop", "Firefox", "firefox")
    custom = [CustomApp(name="Backup", exec="rsync -a ~/ /mnt/backup && notify-send done")]

    apps = build([apps_dir], exclude_names={"Backup"}, custom_apps=custom)
    assert names(apps) == ["Backup", "Firefox"]
    backup = apps[0]
    assert backup.launch_strategy == ShellLine("rsync -a ~/ /mnt/backup && notify-send done")
    assert isinstance(apps[1].launch_strategy, Direct)


def test_rejected_entries_are_dropped(tmp_path, write_desktop):
    apps_dir = tmp_path / "applications"
    write_desktop(apps_dir, "ok.desktop", "Ok", "ok")
    write_desktop(apps_dir, "nodisplay.desktop", "NoDisplay", "x", extra="NoDisplay=true")
    write_desktop(apps_dir, "hidden.desktop", "Hidden", "x", extra="Hidden=true")
    write_desktop(apps_dir, "codes.desktop", "Only Codes", "%U")
    (apps_dir / "garbage.desktop").write_text("not a desktop file", encoding="utf-8")
    (apps_dir / "readme.txt").write_text("[Desktop Entry]\nName=Txt\nExec=x\n", encoding="utf-8")

    assert names(build([apps_dir])) == ["Ok"]


def test_missing_dirs_are_skipped(tmp_path, write_desktop):
    apps_dir = tmp_path / "applications"
    write_desktop(apps_dir, "ok.desktop", "Ok", "ok")

    apps = build([tmp_path / "nope", apps_dir], extra_dirs=[tmp_path / "also-nope"])
    assert names(apps) == ["Ok"]


def test_extra_dirs_and_subdirectories(tmp_path, write_desktop):
    system = tmp_path / "system"
    extra = tmp_path / "extra"
    write_desktop(system / "kde4", "nested.desktop", "Nested", "nested")
    write_desktop(extra, "mine.desktop", "Mine", "mine")

    assert names(build([system], extra_dirs=[extra])) == ["Mine", "Nested"]


def test_same_display_name_from_two_files_is_kept_twice(tmp_path, write_desktop):
    a = tmp_path / "a"
    b = tmp_path / "b"
    write_desktop(a, "one.desktop", "Editor", "one")
    write_desktop(b, "two.desktop", "Editor", "two")

    apps = build([a, b], favorite_names={"Editor"})
    assert [x.launch_strategy.argv for x in apps] == [("one",), ("two",)]


def test_iter_desktop_files_order(tmp_path, write_desktop):
    first = tmp_path / "first"
    second = tmp_path / "second"
    write_desktop(second, "a.desktop", "A", "a")
    write_desktop(first, "z.desktop", "Z", "z")
    write_desktop(first, "b.desktop", "B", "b")

    found = list(iter_desktop_files([first, second]))
    assert found == [first / "b.desktop", first / "z.desktop", second / "a.desktop"]


def test_sort_is_stable_for_equal_names():
    def app(name, cmd):
        return App(name=name, exec=cmd, launch_strategy=Direct((cmd,)))

    apps = [app("firefox", "one"), app("Firefox", "two"), app("ark", "three")]
    ordered = sort_apps(apps, set())
    assert [a.exec for a in ordered] == ["three", "one", "two"]


def test_application_dirs_follow_xdg(tmp_path, monkeypatch):
    data_home = tmp_path / "data"
    sys_dir = tmp_path / "sys"
    (sys_dir / "applications").mkdir(parents=True)
    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    monkeypatch.setenv("XDG_DATA_DIRS", str(sys_dir))

    dirs = application_dirs()
    assert dirs[0] == data_home / "applications"
    assert sys_dir / "applications" in dirs
    assert data_home / "flatpak" / "exports" / "share" / "applications" in dirs
    assert dirs[-1] == FLATPAK_SYSTEM_EXPORTS
    assert len(dirs) == len(set(dirs))
