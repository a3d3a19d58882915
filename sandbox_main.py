#!/usr/bin/env python3
"""
Sandbox entrypoint for server-config-checker.
Reads a configuration from stdin JSON, runs the configuration checks, outputs JSON to stdout.
"""

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from pydantic import ValidationError

from server_config_checker.capabilities import RuntimeCapabilities, StaticCapabilities
from server_config_checker.config import ConfigFile
from server_config_checker.models import CheckInput, CheckReport
from server_config_checker.sink import MessageList
from server_config_checker.validator import ConfigValidator

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def run(check_input: CheckInput) -> CheckReport:
    config = ConfigFile.from_mapping(check_input.config)
    if check_input.capabilities is None:
        probe = RuntimeCapabilities()
    else:
        probe = StaticCapabilities(check_input.capabilities)

    sink = MessageList()
    ConfigValidator(session_gc_maxlifetime=check_input.session_gc_maxlifetime).run_checks(
        config, probe, sink
    )
    logger.info(f"Configuration check produced {len(sink)} message(s)")

    changes = config.changes()
    return CheckReport(
        messages=sink.messages,
        summary=sink.summary(),
        generated_secret="blowfish_secret" in changes,
        # Secrets never leave the process
        config_updates={key: "***REDACTED***" for key in changes},
    )


def main() -> None:
    try:
        input_data = json.load(sys.stdin)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON input: {e}"}))
        sys.exit(1)

    if not isinstance(input_data, dict):
        print(json.dumps({"error": "Input must be a JSON object"}))
        sys.exit(1)

    # Accept a bare configuration as well as {"config": {...}}
    if "config" not in input_data:
        input_data = {"config": input_data}

    try:
        check_input = CheckInput.model_validate(input_data)
        report = run(check_input)
    except (ValidationError, ValueError) as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)

    print(json.dumps(report.model_dump(mode="json")))


if __name__ == "__main__":
    main()
