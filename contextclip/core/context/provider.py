"""Context provider interface and simple providers"""

from abc import ABC, abstractmethod
from typing import Optional

from ..clipboard.models import ClipContext


class ContextProvider(ABC):
    """Describes the application that most likely owns the clipboard content"""

    @abstractmethod
    def capture_context(self) -> ClipContext:
        """
        Capture provenance for the current clipboard value

        Implementations must not raise; unavailable details are left absent.
        """


class UnknownContextProvider(ContextProvider):
    """Provider for hosts where the frontmost application cannot be queried"""

    def capture_context(self) -> ClipContext:
        return ClipContext.unknown()


class StaticContextProvider(ContextProvider):
    """Returns a fixed context, optionally simulating a failed URL lookup"""

    def __init__(self, context: Optional[ClipContext] = None, url_fails: bool = False):
        self.context = context or ClipContext.unknown()
        self.url_fails = url_fails

    def capture_context(self) -> ClipContext:
        if self.url_fails and self.context.url is not None:
            return ClipContext(
                app_name=self.context.app_name,
                app_bundle_id=self.context.app_bundle_id,
                window_title=self.context.window_title,
                file_path=self.context.file_path,
                project_name=self.context.project_name
            )
        return self.context
