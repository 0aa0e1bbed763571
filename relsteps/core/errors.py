"""Exit codes for the relsteps CLI.

The numeric values are process exit codes and should remain stable:
- 0: Success (including a best-effort site deploy that failed softly)
- 1: User error (invalid release configuration or arguments)
- 2: Environment error (missing release file, missing tools)
- 3: Stage error (a release stage failed and aborted the run)
- 4: Network error (polling or API access failed)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    STAGE_ERROR = 3
    NETWORK_ERROR = 4
