"""Oracle backed by the ``claude`` command-line client."""

import logging
import subprocess

from semgov.config.models import OracleConfig
from semgov.errors import OracleError

logger = logging.getLogger(__name__)


class ClaudeCliOracle:
    """Send prompts to ``claude --model <model> -p``, with the prompt on stdin."""

    def __init__(self, config: OracleConfig | None = None) -> None:
        self.config = config or OracleConfig()

    def ask(self, prompt: str) -> str:
        """Run one non-interactive prompt and return the response text.

        The prompt carries a whole diff, so it goes through stdin rather than
        argv, which the kernel caps per argument.

        Raises:
            OracleError: If the CLI is missing, cannot start, fails, or times out.
        """
        cmd = [self.config.command, "--model", self.config.model, "-p"]
        logger.info(f"Querying {self.config.command} ({self.config.model})")
        try:
            result = subprocess.run(
                cmd,
                input=prompt,
                check=True,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.config.timeout,
            )
        except FileNotFoundError as e:
            raise OracleError(f"Oracle command not found: {self.config.command}") from e
        except subprocess.TimeoutExpired as e:
            raise OracleError(
                f"Oracle did not answer within {self.config.timeout}s"
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise OracleError(
                f"Oracle exited with code {e.returncode}: {stderr[:500]}"
            ) from e
        except OSError as e:
            raise OracleError(f"Could not run {self.config.command}: {e}") from e
        return result.stdout.strip()
