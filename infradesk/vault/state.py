"""
Manager UI state.

The credential manager and the notes manager share one shape: the record
form is either closed (viewing), open for a new record (adding) or open for
an existing one (editing). ``FormState`` is that tagged state and
``transition`` its reducer; only one form can be open at a time.

``ManagerSession`` keeps the form state and the per-row password reveal
flags in the user's session, keyed by manager name and association.
Mounting a manager (opening it from a list) clears both.
"""

import enum
from dataclasses import dataclass

from .errors import InvalidTransition


class Mode(enum.Enum):
    VIEWING = 'viewing'
    ADDING = 'adding'
    EDITING = 'editing'


class Action(enum.Enum):
    ADD = 'add'
    EDIT = 'edit'
    SAVE = 'save'
    CANCEL = 'cancel'


@dataclass(frozen=True)
class FormState:
    mode: Mode = Mode.VIEWING
    record_id: int = None

    @property
    def is_open(self):
        return self.mode is not Mode.VIEWING

    @property
    def is_adding(self):
        return self.mode is Mode.ADDING

    @property
    def is_editing(self):
        return self.mode is Mode.EDITING

    def to_dict(self):
        return {'mode': self.mode.value, 'record_id': self.record_id}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return VIEWING
        return cls(Mode(data['mode']), data.get('record_id'))


VIEWING = FormState()


def transition(state, action, record_id=None):
    """Return the state that follows ``action``, or raise InvalidTransition."""
    action = Action(action)
    if action is Action.ADD:
        if state.is_open:
            raise InvalidTransition('Save or cancel the open form before adding another record.')
        return FormState(Mode.ADDING)
    if action is Action.EDIT:
        if state.is_open:
            raise InvalidTransition('Save or cancel the open form before editing another record.')
        if record_id is None:
            raise InvalidTransition('No record selected for editing.')
        return FormState(Mode.EDITING, int(record_id))
    # SAVE / CANCEL
    if not state.is_open:
        raise InvalidTransition('There is no open form.')
    return VIEWING


class ManagerSession:
    """Form state and reveal flags of one manager for one association."""

    SESSION_KEY = 'vault_managers'

    def __init__(self, session, manager, association):
        self.session = session
        self.key = f"{manager}:{association.slug}"

    def _load(self):
        return dict(self.session.get(self.SESSION_KEY, {}).get(self.key, {}))

    def _store(self, data):
        managers = dict(self.session.get(self.SESSION_KEY, {}))
        managers[self.key] = data
        self.session[self.SESSION_KEY] = managers

    def mount(self):
        """Reset the manager as if it was opened for the first time."""
        managers = dict(self.session.get(self.SESSION_KEY, {}))
        managers.pop(self.key, None)
        self.session[self.SESSION_KEY] = managers

    @property
    def state(self):
        return FormState.from_dict(self._load().get('form'))

    def apply(self, action, record_id=None):
        new_state = transition(self.state, action, record_id)
        self.set_state(new_state)
        return new_state

    def set_state(self, state):
        data = self._load()
        data['form'] = state.to_dict()
        self._store(data)

    def is_revealed(self, credential):
        """Whether the password of ``credential`` is shown in clear text."""
        flags = self._load().get('revealed', {})
        return flags.get(str(credential.pk), not credential.hidden_display)

    def toggle_reveal(self, credential):
        revealed = not self.is_revealed(credential)
        data = self._load()
        flags = dict(data.get('revealed', {}))
        flags[str(credential.pk)] = revealed
        data['revealed'] = flags
        self._store(data)
        return revealed

    def forget(self, record_id):
        """Drop per-row state of a deleted record."""
        data = self._load()
        flags = dict(data.get('revealed', {}))
        flags.pop(str(record_id), None)
        data['revealed'] = flags
        form = FormState.from_dict(data.get('form'))
        if form.is_editing and form.record_id == int(record_id):
            data['form'] = VIEWING.to_dict()
        self._store(data)
