"""
JavaScript dialog (alert / confirm / prompt) handling.

Handlers are one-shot: register them right before the action that opens the
dialog. The helper remembers the last dialog message it saw.
"""

from typing import Optional

from loguru import logger
from playwright.sync_api import Dialog, Page


class AlertHelper:
    """Accept, dismiss or answer browser dialogs."""

    def __init__(self, page: Page):
        self.page = page
        self._last_message: Optional[str] = None

    def _remember(self, dialog: Dialog) -> str:
        self._last_message = dialog.message
        return dialog.message

    def handle_alert(self, accept: bool = True) -> None:
        """
        Accept or dismiss the next dialog.

        Args:
            accept: True to accept, False to dismiss
        """

        def _handler(dialog: Dialog) -> None:
            try:
                logger.info(f"⚠ Alert detected: {self._remember(dialog)}")
                if accept:
                    dialog.accept()
                    logger.info("✅ Alert accepted")
                else:
                    dialog.dismiss()
                    logger.info("❌ Alert dismissed")
            except Exception as e:
                logger.error(f"❌ Error handling alert: {e}")

        try:
            self.page.once("dialog", _handler)
        except Exception as e:
            logger.error(f"❌ Error registering alert handler: {e}")

    def accept_alert_with_text(self, input_text: str) -> None:
        """Accept the next (prompt) dialog, answering with `input_text`."""

        def _handler(dialog: Dialog) -> None:
            try:
                message = self._remember(dialog)
                logger.info(f"⚠ Prompt alert detected: {message} | Inputting text: {input_text}")
                dialog.accept(input_text)
                logger.info(f"✅ Alert accepted with text: {input_text}")
            except Exception as e:
                logger.error(f"❌ Error accepting alert with text: {e}")

        try:
            self.page.once("dialog", _handler)
        except Exception as e:
            logger.error(f"❌ Error registering prompt handler: {e}")

    def get_alert_text(self) -> Optional[str]:
        """Message of the last handled dialog, or None if none appeared."""
        logger.info(f"📢 Alert message: {self._last_message}")
        return self._last_message

    def is_alert_present(self) -> bool:
        """Whether a dialog has been handled since this helper was created."""
        return self._last_message is not None


__all__ = [
    "AlertHelper",
]
