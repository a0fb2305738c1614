# fieldengine/edit/binding.py
# Turn a user-entered value into a single-field partial update for the order store.
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fieldengine.errors import FieldNotEditable
from fieldengine.models.field_definition import FieldDefinition
from fieldengine.schema.registry import COMPLETION_FIELD_ID, NOTES_FIELD_ID

logger = logging.getLogger("fieldengine")

NotesCallback = Callable[[Any], None]


def bind_edit(field_id: str, new_value: Any, on_notes: Optional[NotesCallback] = None) -> Dict[str, Any]:
    """
    Partial update `{field_id: new_value}`; the value is passed through untouched.

    Edits to the notes field are also handed to `on_notes`, which feeds the
    dedicated notes-save path.
    """
    update = {field_id: new_value}
    if field_id == NOTES_FIELD_ID and on_notes is not None:
        on_notes(new_value)
    return update


def bind_select_edit(field: FieldDefinition, choice: Any,
                     on_notes: Optional[NotesCallback] = None) -> Dict[str, Any]:
    """Select widgets report the chosen option; the completion select stores a boolean."""
    if field.id == COMPLETION_FIELD_ID:
        return bind_edit(field.id, choice == "completed", on_notes)
    return bind_edit(field.id, choice, on_notes)


def guarded_bind_edit(field: FieldDefinition, new_value: Any,
                      on_notes: Optional[NotesCallback] = None) -> Dict[str, Any]:
    """bind_edit for callers that want the `isEditable` gate enforced here."""
    if not field.is_editable:
        logger.warning("[EDIT] rejected write to read-only field=%s", field.id)
        raise FieldNotEditable(field.id)
    return bind_edit(field.id, new_value, on_notes)
