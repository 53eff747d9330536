"""Reusable view state components."""

from cloudbrowse.views.components.action_menu import ActionMenu, MenuAction
from cloudbrowse.views.components.bounded_fields import (
    BoundedField,
    BoundedFieldEditor,
    scale_editor,
)
from cloudbrowse.views.components.filterable_list import FilterableList
from cloudbrowse.views.components.selection_list import SelectionList, SelectionOption

__all__ = [
    "ActionMenu",
    "BoundedField",
    "BoundedFieldEditor",
    "FilterableList",
    "MenuAction",
    "SelectionList",
    "SelectionOption",
    "scale_editor",
]
