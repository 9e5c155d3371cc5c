"""
Git adapter — repository initialization.

Runs the git CLI in the new project root. Only ``init`` is supported;
that is the one version-control operation scaffolding needs.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

from cenv.adapters.base import Adapter, ExecutionContext
from cenv.core.models.action import Receipt

logger = logging.getLogger(__name__)


class GitAdapter(Adapter):
    """Git version control operations.

    Action params:
        operation (str): Must be 'init'.
        timeout (int): Timeout in seconds (default: 30).
    """

    _OPERATIONS = {"init"}

    def __init__(self, binary: str = "git"):
        self._binary = binary

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which(self._binary) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.action.params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"
        if operation not in self._OPERATIONS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(self._OPERATIONS))}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        if not self.is_available():
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"'{self._binary}' not found on PATH",
            )

        return self._init(context)

    # ── Operations ──────────────────────────────────────────────

    def _init(self, ctx: ExecutionContext) -> Receipt:
        timeout = ctx.action.params.get("timeout", 30)
        cmd = [self._binary, "init"]
        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), ctx.working_dir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                cwd=ctx.working_dir,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"Command timed out after {timeout}s",
                metadata={"command": cmd},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=f"Git error: {e}",
                metadata={"command": cmd},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if result.returncode != 0:
            return Receipt.failure(
                adapter=self.name,
                action_id=ctx.action.id,
                error=result.stderr.strip() or f"git init exited with code {result.returncode}",
                duration_ms=elapsed_ms,
                metadata={"command": cmd, "return_code": result.returncode},
            )

        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=result.stdout.strip(),
            duration_ms=elapsed_ms,
            metadata={"command": cmd, "return_code": 0},
        )
