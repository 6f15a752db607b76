"""
Unit tests for launch item models.
"""
import pytest
from hypothesis import assume, given, strategies as st

from launchgrid.models import (
    AppInfo,
    AppItem,
    DuplicateLaunchItemError,
    ShortcutInfo,
    ShortcutItem,
    build_launch_items,
)

from conftest import make_app, make_shortcut


class TestIds:
    def test_app_id(self):
        assert make_app("Notes", "notes", "main.py").id == "notes/main.py"

    def test_shortcut_id(self):
        assert make_shortcut("New note", "new-note").id == "shortcut/new-note"

    def test_shortcut_never_deprioritized(self):
        assert make_shortcut("New note").is_deprioritized is False

    @given(
        package=st.text(min_size=1),
        activity=st.text(min_size=1),
        shortcut_id=st.text(min_size=1),
    )
    def test_app_and_shortcut_ids_never_collide(self, package, activity, shortcut_id):
        # the only collision is an app literally named "shortcut"
        assume(package != "shortcut")
        assume("/" not in package)
        app = make_app("x", package, activity)
        shortcut = make_shortcut("y", shortcut_id)
        assert app.id != shortcut.id


class TestMatchesFilter:
    def test_app_label_accent_insensitive(self):
        assert make_app("Café Menu", "cafe_menu").matches_filter("CAFE")

    def test_app_package_name(self):
        item = make_app("Calculator", "org.tools.calc")
        assert item.matches_filter("TOOLS.CALC")

    def test_shortcut_label_only(self):
        item = make_shortcut("New note", "compose", package_name="notes")
        assert item.matches_filter("new")
        assert not item.matches_filter("compose")
        assert not item.matches_filter("notes")

    def test_empty_query_matches(self):
        assert make_app("Terminal", "term").matches_filter("")
        assert make_shortcut("New note").matches_filter("")


class TestBuildLaunchItems:
    def test_apps_then_shortcuts(self):
        apps = [
            AppInfo(label="Notes", package_name="Notes", activity_name="main.py", icon="/i.png"),
            AppInfo(label="editor", package_name="editor", activity_name="editor.exe", kind="exe"),
        ]
        shortcuts = [ShortcutInfo(shortcut_id="new", label="New note", package_name="Notes", icon="/n.png")]

        items = build_launch_items(apps, shortcuts)

        assert [i.id for i in items] == ["Notes/main.py", "editor/editor.exe", "shortcut/new"]
        assert isinstance(items[0], AppItem)
        assert items[0].icon == "/i.png"
        assert items[0].app is apps[0]
        assert isinstance(items[2], ShortcutItem)
        assert items[2].shortcut is shortcuts[0]

    def test_duplicate_shortcut_ids_rejected(self):
        shortcuts = [
            ShortcutInfo(shortcut_id="new", label="New note", package_name="Notes"),
            ShortcutInfo(shortcut_id="new", label="New timer", package_name="Timer"),
        ]
        with pytest.raises(DuplicateLaunchItemError, match="shortcut/new"):
            build_launch_items([], shortcuts)

    def test_app_colliding_with_shortcut_namespace_rejected(self):
        apps = [AppInfo(label="Odd", package_name="shortcut", activity_name="new")]
        shortcuts = [ShortcutInfo(shortcut_id="new", label="New note", package_name="Notes")]
        with pytest.raises(DuplicateLaunchItemError):
            build_launch_items(apps, shortcuts)
