"""Platform selection of the context provider"""

import platform

from loguru import logger

from .provider import ContextProvider, UnknownContextProvider
from .macos import MacOSContextProvider, DEFAULT_SCRIPT_TIMEOUT


def get_context_provider(enabled: bool = True, timeout: float = DEFAULT_SCRIPT_TIMEOUT) -> ContextProvider:
    """
    Create the context provider for the running platform

    Args:
        enabled: False forces the provider that reports every app as Unknown
        timeout: Seconds allowed for each external query

    Returns:
        Context provider instance
    """
    if not enabled:
        return UnknownContextProvider()

    system = platform.system()
    if system == "Darwin":
        return MacOSContextProvider(timeout=timeout)

    logger.warning(f"Application context is not supported on '{system}'")
    return UnknownContextProvider()
