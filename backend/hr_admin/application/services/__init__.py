from .csv_export import export_csv
from .entity_list_editor import EntityListEditor
from .form_modal import FormModal, ModalMode
from .notification_center import NotificationCenter
from .resource_catalog import build_catalog
from .resource_definition import ResourceDefinition
from .resource_screen import DocumentScreen, ResourceScreen
from .session_service import SessionService, SessionStore
from .workspace import ConsoleWorkspace

__all__ = [
    "export_csv",
    "EntityListEditor",
    "FormModal",
    "ModalMode",
    "NotificationCenter",
    "build_catalog",
    "ResourceDefinition",
    "DocumentScreen",
    "ResourceScreen",
    "SessionService",
    "SessionStore",
    "ConsoleWorkspace",
]
