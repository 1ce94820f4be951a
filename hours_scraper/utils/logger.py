"""
Logging utilities for the extractor.
Supports both normal mode (rich console output) and debug mode (detailed logs).
"""

import sys
import logging
from pathlib import Path
from typing import Optional
from datetime import datetime
from urllib.parse import urlparse

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table


class ExtractorLogger:
    """
    Logger for the extractor with rich console output and optional debug mode.
    """

    def __init__(self, debug_mode: bool = False, debug_log_file: Optional[str] = None):
        self.debug_mode = debug_mode
        self.debug_log_file = debug_log_file
        self.console = Console(stderr=True)

        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging."""
        self.logger = logging.getLogger('hours-scraper')
        self.logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)

        # Remove existing handlers
        self.logger.handlers = []

        # Console handler
        if not self.debug_mode:
            console_handler = RichHandler(console=self.console, rich_tracebacks=True)
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(formatter)

        console_handler.setLevel(logging.INFO)
        self.logger.addHandler(console_handler)

        # File handler for debug mode
        if self.debug_mode and self.debug_log_file:
            log_path = Path(self.debug_log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode='a')
            file_handler.setLevel(logging.DEBUG)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def print_header(self, title: str):
        """Print a header/banner."""
        self.console.print(Panel(title, style="bold blue"))

    def print_section(self, title: str):
        """Print a section header."""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def print_table(self, title: str, data: list, headers: list):
        """Print a formatted table."""
        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in data:
            table.add_row(*[str(cell) for cell in row])
        self.console.print(table)

    def print_summary(self, total: int, successful: int, failed: int, duration: float):
        """Print completion summary."""
        self.print_section("Extraction Complete")

        table = Table(show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="bold")
        table.add_row("Total URLs", str(total))
        table.add_row("Successful", str(successful))
        table.add_row("Failed", str(failed))
        table.add_row("Duration", f"{duration:.1f}s")
        self.console.print(table)

    def create_progress(self) -> Optional[Progress]:
        """Create a progress bar for tracking (not shown in debug mode)."""
        if self.debug_mode:
            return None
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            console=self.console
        )

    def save_debug_html(self, html_content: str, url: str, debug_dir: str = './debug/html') -> Optional[Path]:
        """Save an HTML snapshot of a fetched page in debug mode."""
        if not self.debug_mode:
            return None

        parsed = urlparse(url)
        page_name = f"{parsed.netloc}{parsed.path}".strip('/') or 'page'
        safe_name = "".join(c if c.isalnum() else '_' for c in page_name)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        html_dir = Path(debug_dir)
        html_dir.mkdir(parents=True, exist_ok=True)

        filename = html_dir / f"{safe_name}_{timestamp}.html"

        with open(filename, 'w', encoding='utf-8') as f:
            f.write(html_content)

        self.debug(f"HTML snapshot saved: {filename}")
        return filename


# Global logger instance
_logger_instance: Optional[ExtractorLogger] = None


def get_logger() -> ExtractorLogger:
    """Get the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = ExtractorLogger()
    return _logger_instance


def init_logger(debug_mode: bool = False, debug_log_file: Optional[str] = None) -> ExtractorLogger:
    """Initialize the global logger."""
    global _logger_instance
    _logger_instance = ExtractorLogger(debug_mode=debug_mode, debug_log_file=debug_log_file)
    return _logger_instance
