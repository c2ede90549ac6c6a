import json

from scopecheck.config_loader import ConfigLoader
from scopecheck.core.error_formatter import format_validation_errors
from scopecheck.core.logger import get_logger as Logger
from scopecheck.core.target_splitter import TargetSplitter
from scopecheck.validators.batch_validators import iter_target_lines, validate_targets

EXIT_OK = 0
EXIT_INVALID_TARGETS = 1
EXIT_ERROR = 2


class Engine:
    """
    Core engine for ScopeCheck.
    Coordinates config loading, target validation, error reporting and batching.
    """

    def __init__(self, config_path=None, batch_size=None, log_level=None):
        self.config = ConfigLoader(config_path).load()
        if batch_size is not None:
            self.config["batch_size"] = batch_size
        if log_level is not None:
            self.config["log_level"] = log_level
        self.logger = Logger(log_dir=self.config["log_dir"], console_level=self.config["log_level"])
        self.splitter = TargetSplitter(self.config["batch_size"])

    # -------------------------------
    # Core Flow
    # -------------------------------
    def check(self, text):
        """Validate text and log a summary. Returns the failure list."""
        failures = validate_targets(text)
        total = sum(1 for _ in iter_target_lines(text))
        self.logger.debug(f"Checked {total} target lines, {len(failures)} invalid")
        for failure in failures:
            self.logger.debug(f"Rejected line {failure.line}: {failure.target!r} ({failure.message})")
        return failures

    def split(self, text):
        batches = self.splitter.split_targets(text)
        self.logger.info(f"Split targets into {len(batches)} batch(es) of up to {self.splitter.batch_size}")
        return batches

    def run(self, text, split=False, as_json=False, interaction=None):
        """
        Main driver: validate, print a report and optionally the batches.
        Returns the process exit code.
        """
        failures = self.check(text)

        if as_json:
            print(json.dumps([f.to_dict() for f in failures], indent=2))
        elif failures:
            print(format_validation_errors(failures))

        if failures:
            self.logger.warning(f"{len(failures)} invalid target line(s); submission blocked")
            return EXIT_INVALID_TARGETS

        count = self.splitter.get_target_count(text)
        if not as_json:
            print(f"[+] {count} targets valid")

        if split:
            batches = self.split(text)
            if interaction is not None and not interaction.confirm_split(len(batches)):
                return EXIT_OK
            for idx, batch in enumerate(batches, 1):
                print(f"\n=== Batch {idx}/{len(batches)} ===")
                print(batch)

        return EXIT_OK
