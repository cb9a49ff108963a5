import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Any, Dict


class LogManager:
    """Logging setup for host-side runs, plus a JSON-lines action log"""

    def __init__(self, log_dir: str = "pagecap_output/logs", log_level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up console, daily and error log handlers"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))

        # Clear existing handlers
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        all_logs_file = self.log_dir / f"pagecap_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        error_file = self.log_dir / f"errors_{datetime.now().strftime('%Y%m%d')}.log"
        error_handler = logging.FileHandler(error_file)
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

        # One JSON line per action invocation
        actions_file = self.log_dir / f"actions_{datetime.now().strftime('%Y%m%d')}.log"
        self.actions_logger = logging.getLogger('pagecap.performance')
        for handler in list(self.actions_logger.handlers):
            self.actions_logger.removeHandler(handler)
            handler.close()
        self.actions_handler = logging.FileHandler(actions_file)
        self.actions_logger.setLevel(logging.INFO)
        self.actions_logger.addHandler(self.actions_handler)
        self.actions_logger.propagate = False

    def log_action_event(self, result) -> Dict[str, Any]:
        """Record one finished invocation"""
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'kind': result.kind.value,
            'url': result.url,
            'ok': result.ok,
            'error_kind': result.error_kind.value if result.error_kind else None,
            'exit_code': result.exit_code,
            'duration': round(result.duration, 3),
            'artifacts': len(result.artifacts),
        }
        self.actions_logger.info(json.dumps(event_data))
        return event_data
