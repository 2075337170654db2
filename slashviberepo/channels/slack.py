"""Slack modal presenter using slack_sdk."""

import logging

from slack_sdk.web.async_client import AsyncWebClient

from slashviberepo.channels.base import ModalPresenter
from slashviberepo.newrepo.form import build_new_repo_modal

logger = logging.getLogger(__name__)


class SlackModalPresenter(ModalPresenter):
    """Opens modals through the Slack Web API ``views.open`` method."""

    name = "slack"

    def __init__(self, client: AsyncWebClient):
        """Initialize the presenter.

        Args:
            client: Authenticated Slack web client.
        """
        self._client = client

    @classmethod
    def from_token(cls, token: str) -> "SlackModalPresenter":
        """Create a presenter backed by a new client for ``token``."""
        if not token:
            raise ValueError("Slack bot token required")
        return cls(AsyncWebClient(token=token))

    async def open_new_repo_modal(self, trigger_id: str, repo_name: str = "") -> None:
        """Open the new-repository modal.

        Raises:
            slack_sdk.errors.SlackApiError: If Slack rejects the request.
        """
        view = build_new_repo_modal(repo_name)
        response = await self._client.views_open(trigger_id=trigger_id, view=view)
        logger.debug(f"views.open ok, view id: {response.get('view', {}).get('id')}")
