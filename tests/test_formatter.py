from fieldengine.config import settings
from fieldengine.present.formatter import (
    COMPLETED,
    DATE,
    LABEL,
    MULTILINE,
    PENDING,
    SELECT,
    STATUS,
    TAGS,
    TEXT,
    UNSET,
    DisplayValue,
    format_date,
    format_value,
)
from payloads import LABELS, USERS


def test_unset_values():
    for value in (None, ""):
        dv = format_value(value, "text", "orderId")
        assert dv.kind == UNSET
        assert dv.text == settings.UNSET_TEXT
        assert not dv.is_set


def test_assignee_resolved_against_directory():
    dv = format_value("u2", "select", "assignedTo", users=USERS)
    assert (dv.kind, dv.text) == (SELECT, "Bob")


def test_assignee_falls_back_to_raw_id():
    assert format_value("u9", "select", "assignedTo", users=USERS).text == "u9"
    assert format_value("u1", "select", "assignedTo").text == "u1"
    assert format_value("u1", "select", "assignedTo", users={"u1": "Alice"}).text == "Alice"


def test_completion_select_captions():
    assert format_value(True, "select", "isCompleted").text == COMPLETED
    assert format_value(False, "select", "isCompleted").text == PENDING


def test_other_select_is_stringified():
    dv = format_value("blue", "select", "ribbon")
    assert (dv.kind, dv.text) == (SELECT, "blue")


def test_textarea_keeps_whitespace():
    text = "line one\n   line two  "
    dv = format_value(text, "textarea", "addOns")
    assert (dv.kind, dv.text) == (MULTILINE, text)


def test_date_formatting():
    dv = format_value("2025-06-21T00:00:00.000Z", "date", "orderDate")
    assert dv.kind == DATE
    assert format_date("2025-06-21T00:00:00.000Z", "%Y-%m-%d") == "2025-06-21"
    assert format_date("2025-06-21T23:30:00+02:00", "%d/%m/%Y") == "21/06/2025"


def test_default_date_display_is_day_first():
    assert settings.DATE_FORMAT == "%d/%m/%Y"
    assert format_value("2025-06-21T00:00:00.000Z", "date", "orderDate").text == "21/06/2025"


def test_unparseable_date_shown_verbatim():
    assert format_value("Invalid Date", "date", "orderDate").text == "Invalid Date"
    assert format_value("No match", "date", "orderDate").text == "No match"


def test_tags_keep_order_and_duplicates():
    dv = format_value(["urgent", "fragile", "urgent"], "tags", "orderTags")
    assert dv.kind == TAGS
    assert dv.items == ("urgent", "fragile", "urgent")


def test_tags_from_joined_string():
    dv = format_value("urgent, fragile", "tags", "orderTags")
    assert dv.items == ("urgent", "fragile")
    assert dv.text == "urgent, fragile"


def test_status_captions():
    assert format_value(True, "status", "isCompleted") == DisplayValue(STATUS, COMPLETED, raw=True)
    assert format_value(False, "status", "isCompleted").text == PENDING
    assert format_value("FULFILLED", "status", "isCompleted").text == COMPLETED
    assert format_value("UNFULFILLED", "status", "isCompleted").text == PENDING


def test_difficulty_label_colour():
    dv = format_value("Hard", "text", "difficultyLabel", labels=LABELS)
    assert (dv.kind, dv.text, dv.color) == (LABEL, "Hard", "#ef4444")


def test_difficulty_label_default_colour():
    assert format_value("Impossible", "text", "difficultyLabel", labels=LABELS).color == settings.DEFAULT_LABEL_COLOR
    assert format_value("Hard", "text", "difficultyLabel").color == settings.DEFAULT_LABEL_COLOR


def test_default_text():
    dv = format_value(42, "text", "orderId")
    assert (dv.kind, dv.text) == (TEXT, "42")


def test_formatting_twice_is_stable():
    tags = format_value(["b", "a", "b"], "tags", "orderTags")
    assert format_value(tags, "tags", "orderTags") == tags
    assert format_value(tags.text, "tags", "orderTags").items == tags.items

    status = format_value(False, "status", "isCompleted")
    assert format_value(status, "status", "isCompleted") == status
    assert format_value(status.text, "status", "isCompleted").text == PENDING
    assert format_value(COMPLETED, "status", "isCompleted").text == COMPLETED
