# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_INVALID = 2  # At least one metric or expression failed validation
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed metric file)
EXIT_NOINPUT = 66  # Input file not found
EXIT_CONFIG = 78  # Invalid configuration (e.g., bad [tool.metricgate] table)

__all__ = ["EXIT_CONFIG", "EXIT_DATAERR", "EXIT_GENERIC", "EXIT_INVALID", "EXIT_NOINPUT", "EXIT_OK"]
