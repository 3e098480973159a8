"""Default setup: INFO and above on the console, everything in ./out.log."""

import levellog


def main() -> None:
    levellog.setup_logging(levellog.INFO, levellog.DEBUG)
    try:
        levellog.info("App started")
        levellog.debug("Some internal value: %d", 123)
        levellog.success("Task completed successfully")
        levellog.fail("Validation failed on field: email")
        levellog.error("Connection error: %s", "timeout")
    finally:
        levellog.close()


if __name__ == "__main__":
    main()
