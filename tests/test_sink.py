"""
Unit tests for the desktop action sink.
"""
import pytest

from launchgrid import sink as sink_module
from launchgrid.inventory import scan_applications_folder
from launchgrid.models import ShortcutInfo, ShortcutItem, app_item_from_info
from launchgrid.sink import DesktopActionSink, web_search_url


@pytest.fixture
def popen_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(sink_module.subprocess, "Popen", lambda argv, **kw: calls.append((argv, kw)))
    return calls


@pytest.fixture
def opened_urls(monkeypatch):
    urls = []
    monkeypatch.setattr(sink_module.webbrowser, "open", urls.append)
    return urls


def apps_by_name(apps_dir):
    return {a.package_name: app_item_from_info(a) for a in scan_applications_folder(apps_dir)}


def test_web_search_url_encodes_query():
    assert web_search_url("café au lait", "https://search.example/") == (
        "https://search.example/?q=caf%C3%A9+au+lait"
    )


def test_open_web_search(opened_urls):
    DesktopActionSink("https://search.example/").open_web_search("weather")
    assert opened_urls == ["https://search.example/?q=weather"]


def test_launch_python_app(apps_dir, popen_calls):
    notes = apps_by_name(apps_dir)["Notes"]
    DesktopActionSink(python_exe="/usr/bin/python3").launch_app(notes)
    assert popen_calls == [
        (["/usr/bin/python3", str(apps_dir / "Notes" / "main.py")], {"cwd": str(apps_dir / "Notes")})
    ]


def test_launch_exe(apps_dir, popen_calls):
    editor = apps_by_name(apps_dir)["editor"]
    DesktopActionSink().launch_app(editor)
    assert popen_calls == [([str(apps_dir / "editor.exe")], {"cwd": str(apps_dir)})]


def test_launch_url_file(apps_dir, opened_urls):
    wiki = apps_by_name(apps_dir)["wiki"]
    DesktopActionSink().launch_app(wiki)
    assert opened_urls == [(apps_dir / "wiki.url").as_uri()]


def test_launch_shortcut_uses_launcher_python(tmp_path, popen_calls):
    item = ShortcutItem(
        label="New note",
        shortcut=ShortcutInfo(
            shortcut_id="new",
            label="New note",
            package_name="Notes",
            target=("python", "main.py", "--new"),
            cwd=str(tmp_path),
        ),
    )
    DesktopActionSink(python_exe="/opt/py").launch_shortcut(item)
    assert popen_calls == [(["/opt/py", "main.py", "--new"], {"cwd": str(tmp_path)})]


def test_launch_shortcut_without_target_raises():
    item = ShortcutItem(label="x", shortcut=ShortcutInfo(shortcut_id="x", label="x", package_name="p"))
    with pytest.raises(RuntimeError):
        DesktopActionSink().launch_shortcut(item)
