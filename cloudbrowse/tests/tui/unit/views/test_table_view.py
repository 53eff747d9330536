"""Unit tests for the generic table view, exercised through the instance table.

Tests cover:
- Filter mode entry/exit and text capture
- Escape ladder (leave filter, clear filter, go back)
- Refresh effect and cursor preservation on reload
- Windowed rendering
"""

from __future__ import annotations

from cloudbrowse.constants.enums import InputMode, TransitionKind
from cloudbrowse.views.instances.table import InstanceTableView
from cloudbrowse.views.signals import InstancesLoaded, RefreshInstances, ShowInstanceDetail
from cloudbrowse.views.table_view import table_height


def make_table(ctx, make_instance, names=("web-01", "web-02", "db-primary")):
    return InstanceTableView(ctx, [make_instance(n) for n in names])


# =============================================================================
# Filter mode
# =============================================================================


class TestFilterMode:
    """Test filter text entry."""

    def test_slash_enters_filter_mode(self, ctx, make_instance) -> None:
        """Slash switches the table into filter mode."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        assert table.filter_mode
        assert table.input_mode is InputMode.FILTER

    def test_text_keys_extend_filter(self, ctx, make_instance) -> None:
        """Printable keys in filter mode are appended to the filter."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        for key in "db":
            table.handle_key(key)
        assert table.list.filter_text == "db"
        assert [i.name for i in table.list.filtered] == ["db-primary"]

    def test_navigation_letters_are_filter_text(self, ctx, make_instance) -> None:
        """j and q are filter text while typing."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        table.handle_key("j")
        table.handle_key("q")
        assert table.list.filter_text == "jq"
        assert table.filter_mode

    def test_backspace_removes_last_char(self, ctx, make_instance) -> None:
        """Backspace removes the last filter character."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        table.handle_key("w")
        table.handle_key("e")
        table.handle_key("backspace")
        assert table.list.filter_text == "w"

    def test_enter_keeps_filter_and_leaves_mode(self, ctx, make_instance) -> None:
        """Enter leaves filter mode and keeps the filter."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        table.handle_key("d")
        table.handle_key("enter")
        assert not table.filter_mode
        assert table.list.filter_text == "d"

    def test_escape_leaves_mode_and_keeps_filter(self, ctx, make_instance) -> None:
        """Escape leaves filter mode without dropping the filter."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        table.handle_key("d")
        result = table.handle_key("escape")
        assert result.is_empty
        assert not table.filter_mode
        assert table.list.filter_text == "d"


# =============================================================================
# Normal mode
# =============================================================================


class TestNormalMode:
    """Test navigation, selection and the escape ladder."""

    def test_enter_emits_detail_effect(self, ctx, make_instance) -> None:
        """Enter on a row emits the detail effect for it."""
        table = make_table(ctx, make_instance)
        table.handle_key("down")
        result = table.handle_key("enter")
        assert result.effect == ShowInstanceDetail(make_instance("web-02"))

    def test_enter_with_no_rows_does_nothing(self, ctx, make_instance) -> None:
        """Enter on an empty result does nothing."""
        table = make_table(ctx, make_instance)
        table.list.set_filter("zzz")
        assert table.handle_key("enter").is_empty

    def test_vim_keys_move_cursor(self, ctx, make_instance) -> None:
        """j and k move the cursor like the arrow keys."""
        table = make_table(ctx, make_instance)
        table.handle_key("j")
        table.handle_key("j")
        table.handle_key("k")
        assert table.list.cursor == 1

    def test_escape_clears_filter_before_going_back(self, ctx, make_instance) -> None:
        """Escape clears an applied filter before leaving."""
        table = make_table(ctx, make_instance)
        table.list.set_filter("web")
        assert table.handle_key("escape").is_empty
        assert table.list.filter_text == ""
        result = table.handle_key("escape")
        assert result.transition is not None
        assert result.transition.kind is TransitionKind.POP

    def test_refresh_emits_reload(self, ctx, make_instance) -> None:
        """r emits the table's refresh effect."""
        table = make_table(ctx, make_instance)
        assert table.handle_key("r").effect == RefreshInstances()

    def test_reload_keeps_filter_and_cursor_index(self, ctx, make_instance) -> None:
        """Reloaded rows keep the filter and the cursor index."""
        table = make_table(ctx, make_instance)
        table.list.set_filter("web")
        table.handle_key("down")
        table.handle_message(
            InstancesLoaded(tuple(make_instance(n) for n in ("web-01", "web-02", "web-03")))
        )
        assert table.list.filter_text == "web"
        assert table.list.cursor == 1
        assert table.title() == "🖥️  Instances (3)"


# =============================================================================
# Rendering
# =============================================================================


class TestTableRendering:
    """Test rendered table text."""

    def test_table_height_is_clamped(self) -> None:
        """Visible rows stay between 5 and 20."""
        assert table_height(10) == 5
        assert table_height(30) == 15
        assert table_height(100) == 20

    def test_header_and_rows(self, ctx, make_instance) -> None:
        """The header and one line per row are rendered."""
        out = make_table(ctx, make_instance).render(120, 40)
        assert "Name" in out
        assert "IP Address" in out
        assert "db-primary" in out

    def test_filter_line_while_typing(self, ctx, make_instance) -> None:
        """The filter prompt shows while typing."""
        table = make_table(ctx, make_instance)
        table.handle_key("/")
        table.handle_key("w")
        assert "Filter: w▌" in table.render(120, 40)

    def test_filter_hint_after_confirm(self, ctx, make_instance) -> None:
        """A confirmed filter is shown as a hint line."""
        table = make_table(ctx, make_instance)
        table.list.set_filter("w")
        assert "(press / to edit)" in table.render(120, 40)

    def test_no_match_text(self, ctx, make_instance) -> None:
        """A filter without matches renders the no-match text."""
        table = make_table(ctx, make_instance)
        table.list.set_filter("zzz")
        assert "No instances match the filter" in table.render(120, 40)

    def test_long_list_is_windowed_around_cursor(self, ctx, make_instance) -> None:
        """Long lists render a window that contains the cursor."""
        names = [f"vm-{n:02d}" for n in range(30)]
        table = make_table(ctx, make_instance, names)
        for _ in range(25):
            table.handle_key("down")
        out = table.render(120, 20)
        assert "vm-25" in out
        assert "vm-00" not in out
        assert "26/30" in out
