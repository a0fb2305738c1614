# fieldengine/errors.py
# Exceptions raised outside the render path (schema loading, gated edits).
# Nothing in resolve → transform → format raises; see the sentinels in
# fieldengine.transform.pipeline.


class FieldEngineError(Exception):
    pass


class FieldNotEditable(FieldEngineError):
    def __init__(self, field_id: str):
        super().__init__(f"Field '{field_id}' is not editable")
        self.field_id = field_id
