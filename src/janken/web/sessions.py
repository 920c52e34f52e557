"""Page session registry: one JankenView per loaded page."""

from __future__ import annotations

import logging
import secrets
from collections import OrderedDict
from typing import Optional

import httpx

from janken.config import JankenConfig
from janken.view.component import JankenView

logger = logging.getLogger(__name__)


class ViewRegistry:
    """Maps session ids to views, evicting the least recently used.

    Only touched from the event loop thread, so no locking.
    """

    def __init__(
        self,
        config: JankenConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._views: OrderedDict[str, JankenView] = OrderedDict()

    def __len__(self) -> int:
        return len(self._views)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._views

    def create(self) -> tuple[str, JankenView]:
        """Start a new page session with a fresh view."""
        session_id = secrets.token_hex(16)
        view = JankenView(self.config, transport=self._transport)
        self._views[session_id] = view

        while len(self._views) > self.config.max_sessions:
            evicted, _ = self._views.popitem(last=False)
            logger.debug(f"Evicted page session {evicted}")

        return session_id, view

    def get(self, session_id: Optional[str]) -> Optional[JankenView]:
        """Look up a view, marking it as recently used."""
        if session_id is None:
            return None
        view = self._views.get(session_id)
        if view is not None:
            self._views.move_to_end(session_id)
        return view

    def discard(self, session_id: str) -> None:
        self._views.pop(session_id, None)
