from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple

from avsim import __app_name__, __version__
from avsim.core.errors import (
    AVSimError,
    ConfigError,
    DuplicateSignatureError,
    InvalidArgumentError,
    SignatureNotFoundError,
)
from avsim.core.session_service import ScanSession
from avsim.infra.config import AppConfig, load_config
from avsim.infra.logging_utils import LOGGER, configure_logging
from avsim.reports.html_report import generate_html_report
from avsim.reports.json_report import generate_json_report
from avsim.reports.text_report import render_help, render_text_report

_STRICT_SIZE = re.compile(r"[0-9]+")
_LENIENT_SIZE = re.compile(r"\s*\+?([0-9]+)")


def parse_size(token: str, lenient: bool = False) -> int:
    """Parse a LOAD size argument.

    Strict mode accepts only a plain non-negative base-10 integer. Lenient
    mode keeps the leading digits and falls back to 0, like C's ``atoi``.
    """
    if lenient:
        match = _LENIENT_SIZE.match(token)
        return int(match.group(1)) if match else 0
    if not _STRICT_SIZE.fullmatch(token):
        raise InvalidArgumentError(f"Invalid size '{token}'.")
    return int(token)


class CommandConsole:
    def __init__(
        self,
        session: ScanSession,
        config: Optional[AppConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.session = session
        self.config = config or AppConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        # command -> (minimum token count including the command, usage, handler)
        self.commands: Dict[str, Tuple[int, str, Callable[[List[str]], bool]]] = {
            "ADD_SIG": (2, "ADD_SIG <pattern>", self._add_sig),
            "DEL_SIG": (2, "DEL_SIG <pattern>", self._del_sig),
            "LOAD": (3, "LOAD <name> <size>", self._load),
            "SCAN": (1, "SCAN", self._scan),
            "QUAR": (2, "QUAR <name>", self._quarantine),
            "RESTORE": (2, "RESTORE <name>", self._restore),
            "REPORT": (1, "REPORT", self._report),
            "EXPORT": (3, "EXPORT <html|json> <path>", self._export),
            "PURGE": (1, "PURGE", self._purge),
            "HELP": (1, "HELP", self._help),
            "EXIT": (1, "EXIT", self._exit),
        }

    def run(self) -> int:
        self._print(f"=== TOY ANTIVIRUS SIMULATOR ({__app_name__} {__version__}) ===")
        self._print("Type HELP for commands")
        while True:
            self.stdout.write("\n> ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.session.purge()
                break
            if not self.handle(line):
                break
        return 0

    def handle(self, line: str) -> bool:
        """Run one command line; returns False when the session should end."""
        tokens = line.split()[:3]
        if not tokens:
            return True
        command = tokens[0].upper()
        entry = self.commands.get(command)
        if entry is None:
            self._print(f"Unknown command: {command} (type HELP for commands)")
            return True
        min_tokens, usage, handler = entry
        if len(tokens) < min_tokens:
            self._print(f"Usage: {usage}")
            return True
        try:
            return handler(tokens)
        except (DuplicateSignatureError, SignatureNotFoundError) as exc:
            self._print(str(exc))
        except AVSimError as exc:
            self._print(f"Error: {exc}")
        return True

    def _add_sig(self, tokens: List[str]) -> bool:
        self.session.add_signature(tokens[1])
        self._print(f"Added signature: '{tokens[1]}'")
        return True

    def _del_sig(self, tokens: List[str]) -> bool:
        self.session.delete_signature(tokens[1])
        self._print(f"Removed signature: '{tokens[1]}'")
        return True

    def _load(self, tokens: List[str]) -> bool:
        size = parse_size(tokens[2], lenient=self.config.lenient_sizes)
        record = self.session.load_file(tokens[1], size)
        self._print(f"Loaded file: {record.name} ({record.size} bytes)")
        return True

    def _scan(self, tokens: List[str]) -> bool:
        result = self.session.scan()
        if result.skipped:
            self._print("No signatures loaded. Nothing to scan.")
            return True
        self._print("Scanning files...")
        for hit in result.hits:
            self._print(f"  [!] {hit.name} matches pattern '{hit.pattern}'")
        self._print(f"Scan complete. Found {result.suspicious_count} suspicious file(s).")
        return True

    def _quarantine(self, tokens: List[str]) -> bool:
        self.session.quarantine(tokens[1])
        self._print(f"Quarantined: {tokens[1]}")
        return True

    def _restore(self, tokens: List[str]) -> bool:
        self.session.restore(tokens[1])
        self._print(f"Restored: {tokens[1]}")
        return True

    def _report(self, tokens: List[str]) -> bool:
        self._print(render_text_report(self.session.report()))
        return True

    def _export(self, tokens: List[str]) -> bool:
        fmt = tokens[1].lower()
        writers = {"html": generate_html_report, "json": generate_json_report}
        if fmt not in writers:
            raise InvalidArgumentError(f"Unknown report format '{tokens[1]}' (use html or json).")
        path = Path(tokens[2])
        if not path.is_absolute():
            path = Path(self.config.report_dir) / path
        try:
            writers[fmt](self.session.report(), path)
        except OSError as exc:
            LOGGER.error("Report export failed", extra={"extra_data": {"output": str(path), "error": str(exc)}})
            self._print(f"Error: Could not write report to {path}: {exc.strerror or exc}")
            return True
        self._print(f"Report written to {path}")
        return True

    def _purge(self, tokens: List[str]) -> bool:
        self.session.purge()
        self._print("All data purged.")
        return True

    def _help(self, tokens: List[str]) -> bool:
        self._print(render_help())
        return True

    def _exit(self, tokens: List[str]) -> bool:
        self._print("Cleaning up and exiting...")
        self.session.purge()
        return False

    def _print(self, text: str) -> None:
        self.stdout.write(text + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="avsim", description=f"{__app_name__} - toy antivirus simulator")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument("--version", action="version", version=f"{__app_name__} {__version__}")
    return parser


def run_app(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        configure_logging(args.log_level or config.log_level)
        session = ScanSession(config.signatures)
    except (ConfigError, ValueError) as exc:
        sys.stderr.write(f"{__app_name__}: {exc}\n")
        return 2
    LOGGER.info("Session started", extra={"extra_data": {"signatures": len(config.signatures)}})
    return CommandConsole(session, config, stdin=stdin, stdout=stdout).run()
