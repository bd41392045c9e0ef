"""macOS context provider backed by bounded osascript calls"""

import subprocess
from dataclasses import dataclass
from typing import Optional, Tuple, List, Callable

from loguru import logger

from .provider import ContextProvider
from ..clipboard.models import ClipContext, UNKNOWN_APP
from ..exceptions import ContextQueryError


OSASCRIPT = '/usr/bin/osascript'
DEFAULT_SCRIPT_TIMEOUT = 2.0

FRONTMOST_APP_SCRIPT = '''
tell application "System Events"
    set frontProc to first application process whose frontmost is true
    set appName to name of frontProc
    set bundleID to ""
    try
        set bundleID to bundle identifier of frontProc
    end try
    set winTitle to ""
    try
        set winTitle to name of front window of frontProc
    end try
end tell
return appName & linefeed & bundleID & linefeed & winTitle
'''


def run_osascript(script: str, timeout: float) -> str:
    """
    Run an AppleScript snippet and return its trimmed output

    Args:
        script: AppleScript source
        timeout: Seconds before the process is killed

    Returns:
        Standard output without surrounding whitespace

    Raises:
        ContextQueryError: If the script fails, times out or cannot start
    """
    try:
        result = subprocess.run(
            [OSASCRIPT, '-e', script],
            capture_output=True,
            encoding='utf-8',
            errors='replace',
            timeout=timeout
        )
    except subprocess.TimeoutExpired as e:
        raise ContextQueryError(f"osascript timed out after {timeout}s") from e
    except OSError as e:
        raise ContextQueryError(f"Could not run osascript: {e}") from e

    if result.returncode != 0:
        raise ContextQueryError(f"osascript failed: {result.stderr.strip()}")

    return result.stdout.strip()


@dataclass(frozen=True)
class BrowserStrategy:
    """Fetches the active tab URL of a scriptable browser"""
    application: str
    tab_expression: str = 'active tab of front window'

    @property
    def script(self) -> str:
        return f'tell application "{self.application}" to return URL of {self.tab_expression}'


@dataclass(frozen=True)
class EditorStrategy:
    """Resolves the open file and project of a code editor"""
    application: str

    def resolve(self) -> Tuple[Optional[str], Optional[str]]:
        # Editor file context is not resolvable yet; both stay absent
        return None, None


# Ordered (bundle id substring, strategy) pairs, matched case-insensitively
BROWSER_STRATEGIES: List[Tuple[str, BrowserStrategy]] = [
    ('safari', BrowserStrategy('Safari', 'current tab of front window')),
    ('chrome', BrowserStrategy('Google Chrome')),
    ('brave', BrowserStrategy('Brave Browser')),
    ('edgemac', BrowserStrategy('Microsoft Edge')),
]

EDITOR_STRATEGIES: List[Tuple[str, EditorStrategy]] = [
    ('xcode', EditorStrategy('Xcode')),
    ('vscode', EditorStrategy('Visual Studio Code')),
]


def match_strategy(bundle_id: str, table: List[Tuple[str, object]]):
    """Return the first strategy whose pattern occurs in ``bundle_id``"""
    lowered = bundle_id.lower()
    for pattern, strategy in table:
        if pattern in lowered:
            return strategy
    return None


class MacOSContextProvider(ContextProvider):
    """Frontmost application, window title and browser URL via System Events"""

    def __init__(
        self,
        timeout: float = DEFAULT_SCRIPT_TIMEOUT,
        runner: Callable[[str, float], str] = run_osascript,
    ):
        """
        Initialize macOS context provider

        Args:
            timeout: Upper bound in seconds for each osascript call
            runner: Executes a script with a timeout, raising ContextQueryError
        """
        self.timeout = timeout
        self.runner = runner

    def capture_context(self) -> ClipContext:
        try:
            output = self.runner(FRONTMOST_APP_SCRIPT, self.timeout)
        except ContextQueryError as e:
            logger.warning(f"Frontmost application unavailable: {e}")
            return ClipContext.unknown()

        app_name, bundle_id, window_title = self._parse_frontmost(output)
        if not app_name:
            return ClipContext.unknown()

        url = None
        browser = match_strategy(bundle_id, BROWSER_STRATEGIES)
        if browser is not None:
            url = self._browser_url(browser)

        file_path = project_name = None
        editor = match_strategy(bundle_id, EDITOR_STRATEGIES)
        if editor is not None:
            file_path, project_name = editor.resolve()

        return ClipContext(
            app_name=app_name,
            app_bundle_id=bundle_id,
            window_title=window_title,
            url=url,
            file_path=file_path,
            project_name=project_name
        )

    @staticmethod
    def _parse_frontmost(output: str) -> Tuple[str, str, str]:
        parts = output.split('\n', 2)
        parts += [''] * (3 - len(parts))
        app_name, bundle_id, window_title = (p.strip() for p in parts)
        if app_name == 'missing value':
            app_name = UNKNOWN_APP
        if bundle_id == 'missing value':
            bundle_id = ''
        return app_name, bundle_id, window_title

    def _browser_url(self, browser: BrowserStrategy) -> Optional[str]:
        try:
            url = self.runner(browser.script, self.timeout)
        except ContextQueryError as e:
            logger.debug(f"No URL from {browser.application}: {e}")
            return None

        if not url or url == 'missing value':
            return None
        return url
