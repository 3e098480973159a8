"""Split thresholds and a log file in a custom directory."""

from pathlib import Path

import levellog


def main() -> None:
    levellog.set_console_level(levellog.INFO)
    levellog.set_file_level(levellog.DEBUG)

    log_dir = Path("logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    levellog.set_log_file(log_dir / "custom.log")
    try:
        levellog.info("Custom file logger initialized")
        levellog.debug("Detailed debug info: %s", "variable x = 42")
        levellog.success("Task completed ✅")
        levellog.fail("Validation failed")
        levellog.error("Unexpected crash occurred")
    finally:
        levellog.close()


if __name__ == "__main__":
    main()
