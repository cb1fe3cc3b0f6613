"""Default configuration values for the web.xml context parameter tools."""

from pathlib import Path

# Default configuration file name
DEFAULT_CONFIG_FILENAME = "webxml-params.config.json"

# Descriptor location inside a Maven-style web application
DEFAULT_DESCRIPTOR_PATH = "src/main/webapp/WEB-INF/web.xml"

# Glob used by the scan command to find descriptors
DEFAULT_SCAN_PATTERN = "**/WEB-INF/web.xml"

DEFAULT_SCAN_EXCLUDES = ["**/target/**", "**/build/**", "**/node_modules/**"]

# Descriptors read concurrently by the scan command
DEFAULT_SCAN_CONCURRENCY = 8

# Environment variables consulted by the loader
ENV_FORMAT = "WEBXML_PARAMS_FORMAT"
ENV_STRICT = "WEBXML_PARAMS_STRICT"


def config_search_paths() -> list[Path]:
    """Search paths for the configuration file, in order of priority."""
    return [
        Path.cwd() / DEFAULT_CONFIG_FILENAME,
        Path.home() / ".config" / "webxml-params" / "config.json",
    ]
