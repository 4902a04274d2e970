"""Line-oriented batch segmentation of text files."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .api import get_registry
from .exceptions import PipelineUnavailableError
from .models import BatchReport, Language
from .registry import PipelineRegistry

logger = logging.getLogger(__name__)

TOKEN_DELIMITER = ","
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class BatchSegmenter:
    """Segments a UTF-8 text file line by line into a timestamped result file.

    Output lines correspond one to one with input lines:

    - a blank input line gives a blank output line
    - a line that yields no tokens is written as its trimmed text
    - otherwise the tokens are written joined with ``,``

    Lines are written to a ``.tmp`` sibling that is renamed onto the result
    file only once the whole input has been processed.
    """

    def __init__(
        self,
        language: Language | str,
        results_dir: str | Path = "results",
        registry: Optional[PipelineRegistry] = None,
        show_progress: bool = True,
    ):
        """Initialize the batch segmenter.

        Args:
            language: Language of the input files
            results_dir: Directory for result files, created on demand
            registry: Pipeline registry; the process-wide one when omitted
            show_progress: Show a tqdm progress bar
        """
        self.language = Language.parse(language)
        self.results_dir = Path(results_dir)
        self.registry = registry or get_registry()
        self.show_progress = show_progress

    def output_path(self, now: Optional[datetime] = None) -> Path:
        """Result file path, e.g. ``results/jp_20250101_120000.txt``."""
        timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        return self.results_dir / f"{self.language.file_prefix}_{timestamp}.txt"

    def process_file(self, input_path: str | Path) -> Optional[BatchReport]:
        """Segment every line of a file.

        Args:
            input_path: UTF-8 text file

        Returns:
            BatchReport on success; None if the input is missing, the pipeline
            cannot be built, or reading/writing fails
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            logger.error(f"Input file does not exist: {input_path}")
            return None

        try:
            pipeline = self.registry.get_pipeline(self.language)
        except PipelineUnavailableError as e:
            logger.error(str(e))
            return None

        output_path = self.output_path()
        partial_path = output_path.with_suffix(".tmp")
        report = BatchReport(input_path=str(input_path), output_path=str(output_path))
        logger.info(f"Processing {input_path} -> {output_path}")

        try:
            self.results_dir.mkdir(parents=True, exist_ok=True)
            with open(input_path, "r", encoding="utf-8") as reader, \
                    open(partial_path, "w", encoding="utf-8") as writer:
                lines = tqdm(
                    reader,
                    desc=f"Segmenting {input_path.name}",
                    unit="lines",
                    disable=not self.show_progress,
                )
                for line in lines:
                    report.lines_processed += 1
                    text = line.strip()
                    if not text:
                        writer.write("\n")
                        continue

                    tokens = pipeline.run(text).tokens
                    if tokens:
                        writer.write(TOKEN_DELIMITER.join(tokens) + "\n")
                        report.tokens_emitted += len(tokens)
                    else:
                        logger.warning(
                            f"Line {report.lines_processed} produced no tokens, "
                            f"writing original text: {text!r}"
                        )
                        writer.write(text + "\n")
                        report.passthrough_lines.append(report.lines_processed)
            partial_path.replace(output_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error processing file {input_path}: {e}")
            if partial_path.exists():
                partial_path.unlink()
            return None

        logger.info(
            f"Processed {report.lines_processed} lines, {report.tokens_emitted} tokens -> {output_path}"
        )
        return report
