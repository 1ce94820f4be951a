"""
JSON output file writer.
Handles atomic writes to a single output file.
"""

import json
import os
from pathlib import Path
from typing import Iterable, List, Sequence
import tempfile
import shutil

from ..errors import ExtractionError
from ..models import ExtractionResult
from ..utils import get_logger


class JsonResultWriter:
    """
    Writes extraction results to a single JSON file as one array.
    Failed URLs are kept in the array as {url, error, message} entries.
    """

    def __init__(self, output_file: str, indent: int = 2):
        self.output_file = Path(output_file)
        self.indent = indent
        self.logger = get_logger()

    def write(
        self,
        results: Sequence[ExtractionResult],
        failures: Iterable[ExtractionError] = ()
    ):
        """
        Write results (and failures) to the output file, replacing it.

        Args:
            results: Successful extraction results
            failures: Errors for URLs that could not be processed
        """
        records = self.build_records(results, failures)

        self.logger.info(f"Writing {len(records)} record(s) to {self.output_file}")

        try:
            self.output_file.parent.mkdir(parents=True, exist_ok=True)
            self._atomic_write(json.dumps(records, indent=self.indent, ensure_ascii=False))
        except OSError as e:
            self.logger.error(f"Error writing output file: {e}", exc_info=True)
            raise

    @staticmethod
    def build_records(
        results: Sequence[ExtractionResult],
        failures: Iterable[ExtractionError] = ()
    ) -> List[dict]:
        records = [result.to_dict() for result in results]

        for failure in failures:
            cause = failure.__cause__
            records.append({
                'url': failure.url,
                'error': type(cause).__name__ if cause else type(failure).__name__,
                'message': failure.message,
            })

        return records

    def _atomic_write(self, content: str):
        """
        Write content atomically using temp file + rename.
        Prevents corruption if process is interrupted.
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.output_file.parent,
            prefix='.tmp_',
            suffix='.json'
        )

        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                f.write(content)
                f.write('\n')

            shutil.move(temp_path, self.output_file)

        except OSError:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
