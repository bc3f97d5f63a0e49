"""
Document sources: where resume snapshots come from.

Implement:
- DocumentSource: protocol for a current snapshot plus change notifications
- ResumeStore: in-memory observable holder used by an editing session
- FileResumeSource: JSON/YAML file, re-read on demand
- ensure_resume: coerce the accepted input shapes into a Resume
"""

from pathlib import Path
from typing import Callable, Protocol, Union

from pydantic import ValidationError

from vitae import logger
from vitae.resume_models import Resume
from vitae.util import ResumeSource, load_resume_dict, validation_friendly_errors_string

Unsubscribe = Callable[[], None]
Listener = Callable[[Resume], None]


class DocumentSource(Protocol):
    """Protocol for sources that provide the current resume and announce changes."""

    def get(self) -> Resume: ...

    def subscribe(self, callback: Listener) -> Unsubscribe: ...


def ensure_resume(src: Union[Resume, ResumeSource]) -> Resume:
    """Get a Resume from a model, dict, JSON string, or JSON/YAML file path."""
    if isinstance(src, Resume):
        return src
    raw = load_resume_dict(src)
    try:
        return Resume.model_validate(raw)
    except ValidationError as e:
        logger.warning(f'Invalid resume:\n{validation_friendly_errors_string(e)}')
        raise


class _Observable:
    def __init__(self):
        self._listeners: list[Listener] = []

    def subscribe(self, callback: Listener) -> Unsubscribe:
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self, resume: Resume) -> None:
        for callback in list(self._listeners):
            callback(resume)


class ResumeStore(_Observable):
    """Holds the editing session's current snapshot.

    Snapshots are immutable; every edit replaces the snapshot and notifies
    subscribers with the new one.
    """

    def __init__(self, resume: Union[Resume, ResumeSource]):
        super().__init__()
        self._resume = ensure_resume(resume)

    def get(self) -> Resume:
        return self._resume

    def set(self, resume: Union[Resume, ResumeSource]) -> None:
        self._resume = ensure_resume(resume)
        self._notify(self._resume)

    def edit(self, edit: Callable[[Resume], Resume]) -> Resume:
        """Replace the snapshot with ``edit(current)``."""
        self.set(edit(self._resume))
        return self._resume


class FileResumeSource(_Observable):
    """Implements DocumentSource for a JSON or YAML file."""

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self._path = Path(path)
        self._resume = ensure_resume(self._path)

    def get(self) -> Resume:
        return self._resume

    def reload(self) -> Resume:
        """Re-read the file and notify subscribers."""
        self._resume = ensure_resume(self._path)
        self._notify(self._resume)
        return self._resume
