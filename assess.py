#!/usr/bin/env python3
from __future__ import annotations

"""
Headless runner for the AI Readiness Assessment.

Responsibilities:
- Configure logging to both console and `logs/app.log`
- Load an answers file (JSON or YAML mapping of field key -> value)
- Validate it with the same two-phase gate as the web form
- Optionally write the PDF export and/or submit to the configured endpoint

Exit codes: 0 on success, 1 when validation fails or the submission is not
accepted, 2 for unreadable input or configuration.
"""

import argparse
import json
import logging
from pathlib import Path

import yaml

from readiness.config import load_config
from readiness.errors import ReadinessError
from readiness.io_paths import LOGS_DIR
from readiness.storage import MemoryStateStorage
from readiness.ui_logic import build_manager
from readiness.utils_logging import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="AI Readiness Assessment – headless validate/export/submit")
    p.add_argument("--answers", type=str, required=True, help="Path to a JSON or YAML answers file")
    p.add_argument("--export", type=str, help="Write the PDF of the answers to this path")
    p.add_argument("--submit", action="store_true", help="Submit the answers to the configured endpoint")
    p.add_argument("--config", type=str, help="Path to a YAML config file (default: config/app.yaml)")
    p.add_argument("--debug", action="store_true")
    return p.parse_args(argv)


def load_answers(path: Path) -> dict:
    """Read an answers mapping from JSON (`.json`) or YAML (anything else).

    YAML scalars stay strings, so unquoted choices such as `Yes`/`No` or a
    date-like answer reach the form store as written.
    """
    text = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    if not isinstance(data, dict):
        raise ValueError(f"Answers file {path} must contain a mapping")
    return data


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config) if args.config else None)
    except ReadinessError as e:
        print(f"❌ {e}")
        return 2
    configure_logging(LOGS_DIR, debug=args.debug or config.debug)
    log = logging.getLogger("assess")

    try:
        answers = load_answers(Path(args.answers))
    except (OSError, ValueError, yaml.YAMLError) as e:
        log.error("Failed to read answers: %s", e)
        return 2

    manager = build_manager(config, storage=MemoryStateStorage(answers))
    state = manager.state_manager.get_state()
    log.info("Loaded %d answers from %s", len(state), args.answers)

    validation = manager.validation_manager.validate(state)
    if not validation.is_valid:
        print(validation.message)
        for field in validation.invalid_fields:
            print(f"  - {field}")
        return 1
    normalized = validation.normalized_state or state

    if args.export:
        out = Path(args.export)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(manager.export_generator.export_document(normalized))
        log.info("Wrote responses PDF to %s", out)

    if args.submit:
        report = manager.submit()
        print(report.message)
        return 0 if report.ok else 1

    print("OK: answers are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
