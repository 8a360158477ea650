# lobianco/admin/editing.py
"""
Per-tab edit state of the admin panel.

Each management tab is either creating a new record or editing one existing
record. The choice lives in the Flask session as an EditSession keyed by
resource name, so a reload of the tab keeps the form prefilled until the
record is saved or the edit is cancelled. Only the record id is kept; the
form is rebuilt from the stored record on every render.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from flask import session

SESSION_KEY = 'edit_sessions'


@dataclass
class EditSession:
    resource: str
    record_id: Optional[int] = None

    @property
    def editing(self):
        return self.record_id is not None


def start_edit(resource, record_id):
    edit = EditSession(resource=resource, record_id=record_id)
    sessions = session.get(SESSION_KEY, {})
    sessions[resource] = asdict(edit)
    session[SESSION_KEY] = sessions
    return edit


def current_edit(resource):
    stored = session.get(SESSION_KEY, {}).get(resource)
    if not stored:
        return None
    return EditSession(**stored)


def clear_edit(resource):
    sessions = session.get(SESSION_KEY, {})
    if sessions.pop(resource, None) is not None:
        session[SESSION_KEY] = sessions


def record_to_form_data(schema, record):
    """
    Maps a wire record (camelCase keys) onto form field names, using the
    schema's field aliases. Unknown keys such as timestamps are dropped.
    """
    record = record or {}
    data = {}
    for name, info in schema.model_fields.items():
        key = info.alias or name
        if key in record:
            data[name] = record[key]
        elif name in record:
            data[name] = record[name]
    data.pop('id', None)
    return data


def form_to_payload(schema, form):
    """
    Collects the form fields the schema knows about into a procedure
    payload. Blank text becomes None; numbers and booleans pass through.
    """
    payload = {}
    for name in schema.model_fields:
        if name == 'id' or name not in form:
            continue
        value = form[name].data
        if isinstance(value, str):
            value = value.strip() or None
        payload[name] = value
    return payload
