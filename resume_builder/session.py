"""
Session wiring.

Builds the object graph for one editing session: repository (chosen from
settings) -> ResumeService -> ResumeViewModel. Front ends call open_session()
once and pass the returned view model to their handlers.
"""

from typing import Optional

from resume_builder.config import Settings, load_settings
from resume_builder.contexts.application.use_cases import ResumeService
from resume_builder.contexts.infrastructure.storage import create_repository
from resume_builder.contexts.presentation.view_model import ResumeViewModel


def open_session(settings: Optional[Settings] = None, load: bool = True) -> ResumeViewModel:
    """
    Create a view model wired to the configured storage.

    Args:
        settings: Session settings (defaults to load_settings())
        load: Load the saved resume into the view model before returning

    Raises:
        StorageError: If load is True and the saved resume cannot be read
    """
    if settings is None:
        settings = load_settings()

    service = ResumeService(create_repository(settings))
    view_model = ResumeViewModel(service)
    if load:
        view_model.load()
    return view_model
