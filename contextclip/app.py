"""ContextClip application entry point"""

import argparse
import signal
import sys
import threading
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .cli import ClipShell
from .services import ContextClipService
from .utils import ConfigManager
from .utils.config_manager import default_config_dir


class ContextClipApp:
    """Wires configuration, logging, the clipboard service and the shell"""

    def __init__(self, args: argparse.Namespace):
        """
        Initialize application

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self.config_manager: Optional[ConfigManager] = None
        self.service: Optional[ContextClipService] = None
        self.shell: Optional[ClipShell] = None

        self._shutdown_event = threading.Event()

    def _setup_logging(self):
        """Configure logging"""
        level = self.args.log_level or self.config_manager.get('logging.level', 'INFO')

        logger.remove()  # Remove default handler

        # Console logging
        if sys.stderr is not None:
            logger.add(
                sys.stderr,
                level=level,
                format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
            )

        # File logging
        if self.config_manager.get('logging.file_logging'):
            log_dir = self.config_manager.get('logging.log_dir') or default_config_dir() / 'logs'
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_dir / "contextclip_{time:YYYY-MM-DD}.log",
                rotation="1 day",
                retention=self.config_manager.get('logging.retention', '7 days'),
                level="DEBUG",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
            )

    def initialize(self) -> bool:
        """Initialize all components"""
        self.config_manager = ConfigManager(self.args.config)

        if self.args.interval is not None:
            self.config_manager.set('clipboard.check_interval', self.args.interval)
        if self.args.no_context:
            self.config_manager.set('context.enabled', False)

        self._setup_logging()

        if not self.config_manager.validate():
            logger.error("Invalid configuration")
            return False

        self.service = ContextClipService.create(self.config_manager)
        self.shell = ClipShell(
            self.service,
            default_count=self.config_manager.get('cli.default_list_count', 10),
            content_preview_length=self.config_manager.get('cli.content_preview_length', 100)
        )

        logger.info("Application initialized successfully")
        return True

    def start(self):
        """Start monitoring and run the interactive shell"""
        self.service.start()
        try:
            self.shell.run()
        except KeyboardInterrupt:
            self.shell.output("")
        finally:
            self.shutdown()

    def shutdown(self):
        """Shutdown the application"""
        if self._shutdown_event.is_set():
            return

        logger.info("Shutting down application...")
        try:
            if self.service:
                self.service.stop()
        finally:
            self._shutdown_event.set()

        logger.info("Application shutdown complete")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog='contextclip',
        description='Context-aware clipboard history'
    )
    parser.add_argument('--config', help='Path to settings.yaml')
    parser.add_argument('--interval', type=int, help='Clipboard check interval in milliseconds')
    parser.add_argument('--log-level', help='Console log level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--no-context', action='store_true',
                        help='Do not query the frontmost application')
    return parser.parse_args(argv)


def signal_handler(signum, frame):
    """Handle system signals"""
    logger.info(f"Received signal {signum}")
    if hasattr(signal_handler, 'app'):
        signal_handler.app.shutdown()
    sys.exit(0)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    app = ContextClipApp(parse_args(argv))

    # Store app reference for signal handler
    signal_handler.app = app
    signal.signal(signal.SIGTERM, signal_handler)

    if not app.initialize():
        return 1

    app.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
