"""Console workspace — the operator's screens, session and notifications in one place."""

import logging
from typing import Any

from hr_admin.application.interfaces import AuthGateway, ResourceBackend
from hr_admin.application.services.notification_center import NotificationCenter
from hr_admin.application.services.resource_catalog import DOCUMENTS, build_catalog
from hr_admin.application.services.resource_definition import ResourceDefinition
from hr_admin.application.services.resource_screen import DocumentScreen, ResourceScreen
from hr_admin.application.services.session_service import SessionService, SessionStore
from hr_admin.domain.exceptions import UnknownResourceError

logger = logging.getLogger(__name__)


class ConsoleWorkspace:
    """Holds one screen per resource for a single operator.

    Screens are independent: each owns its editor and list, and none
    reads another's state.
    """

    def __init__(
        self,
        backend: ResourceBackend,
        auth_gateway: AuthGateway,
        *,
        base_url: str = "",
        session_store: SessionStore | None = None,
        notifications: NotificationCenter | None = None,
        catalog: dict[str, ResourceDefinition[Any]] | None = None,
    ):
        self.backend = backend
        self.base_url = base_url
        self.notifications = notifications or NotificationCenter()
        self.session_store = session_store or SessionStore()
        self.session = SessionService(auth_gateway, self.session_store, self.notifications)
        self.catalog = catalog if catalog is not None else build_catalog()
        self._screens: dict[str, ResourceScreen[Any]] = {}

    def definition(self, name: str) -> ResourceDefinition[Any]:
        try:
            return self.catalog[name]
        except KeyError:
            raise UnknownResourceError(name) from None

    def screen(self, name: str) -> ResourceScreen[Any]:
        """The current screen for ``name``, created empty on first use."""
        if name not in self._screens:
            self._screens[name] = self._new_screen(self.definition(name))
        return self._screens[name]

    async def activate(self, name: str) -> ResourceScreen[Any]:
        """Open a screen afresh: a new editor, then one Loader run."""
        screen = self._new_screen(self.definition(name))
        self._screens[name] = screen
        await screen.activate()
        return screen

    def _new_screen(self, definition: ResourceDefinition[Any]) -> ResourceScreen[Any]:
        screen_type = DocumentScreen if definition.name == DOCUMENTS else ResourceScreen
        logger.debug("Creating %s for %s", screen_type.__name__, definition.name)
        return screen_type(definition, self.backend, self.notifications, self.base_url)
