"""
Checklist consumer adapter — feed records into a dialog program.

Spawns the consumer with its stdin piped, streams the generated
records into it, then waits for the dialog to close. The consumer's
exit code decides the receipt:

    0    OK clicked          → ok, stdout holds the selected rows
    1    Cancel clicked      → skipped
    2    third button        → skipped, button recorded
    3    any later button    → skipped, button recorded
    5    dialog timed out    → skipped
    255  window closed       → skipped
    any  other (100 = error) → failed

A consumer that stops reading before the feed is complete is a
failure, never a partial success.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from collections.abc import Iterator

from rowfeed.adapters.base import Adapter, ExecutionContext
from rowfeed.core.models.action import Receipt
from rowfeed.core.models.record import FIELD_COUNT, Record
from rowfeed.core.services.generator import generate, write_records

logger = logging.getLogger(__name__)

EXIT_OK = 0

# Exit codes that end the dialog without a selection
SKIP_REASONS: dict[int, str] = {
    1: "cancelled",
    2: "extra button",
    3: "extra button",
    5: "timed out",
    255: "dialog closed",
}
EXTRA_BUTTON_CODES = frozenset({2, 3})

# zenity-style separator between selected rows on stdout
SELECTION_SEPARATOR = "|"


class ChecklistConsumerAdapter(Adapter):
    """Pipe a record feed into a checklist dialog."""

    def __init__(self, consumer: str = "zenity-rs"):
        self._consumer = consumer

    @property
    def name(self) -> str:
        return "checklist"

    def is_available(self) -> bool:
        return shutil.which(self._consumer) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        action = context.action
        if not action.argv:
            return False, "Missing consumer command line"

        columns = sum(1 for arg in action.argv if arg.startswith("--column="))
        if columns != FIELD_COUNT:
            return False, (
                f"Consumer declares {columns} columns but records have {FIELD_COUNT} fields"
            )

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        argv = list(action.argv)
        count = action.count
        timeout = action.timeout

        if not argv:
            return Receipt.failure(
                adapter=self.name, action_id=action.id, error="Missing consumer command line"
            )
        try:
            records = generate(count)
        except ValueError as e:
            return Receipt.failure(adapter=self.name, action_id=action.id, error=str(e))

        logger.debug("Launching consumer: %s (%d records)", argv[0], count)
        start = time.monotonic()

        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                cwd=context.working_dir,
            )
        except FileNotFoundError:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Consumer not found: {argv[0]}",
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Cannot start consumer: {e}",
            )

        fed = 0

        def tracked() -> Iterator[Record]:
            # Counts a record only once its write has returned
            nonlocal fed
            for record in records:
                yield record
                fed += 1

        broken = False
        assert proc.stdin is not None
        try:
            write_records(tracked(), proc.stdin)
        except BrokenPipeError:
            broken = True
            logger.error("Consumer closed its input after %d of %d records", fed, count)

        try:
            # communicate() flushes and closes stdin, ignoring a broken pipe
            stdout, stderr = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Consumer did not exit within {timeout}s",
                records=fed,
                lines=fed * FIELD_COUNT,
                duration_ms=int((time.monotonic() - start) * 1000),
            )

        code = proc.returncode
        output = (stdout or "").strip()
        err = (stderr or "").strip()
        common = {
            "records": fed,
            "lines": fed * FIELD_COUNT,
            "return_code": code,
            "duration_ms": int((time.monotonic() - start) * 1000),
        }

        if broken:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Consumer closed its input after {fed} of {count} records"
                + (f": {err}" if err else ""),
                **common,
            )

        if code == EXIT_OK:
            return Receipt.success(
                adapter=self.name,
                action_id=action.id,
                output=output,
                selected=output.split(SELECTION_SEPARATOR) if output else [],
                **common,
            )
        if code in SKIP_REASONS:
            metadata = {"button": code} if code in EXTRA_BUTTON_CODES else {}
            return Receipt.skip(
                adapter=self.name,
                action_id=action.id,
                reason=SKIP_REASONS[code],
                metadata=metadata,
                **common,
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=action.id,
            error=err or f"Consumer exited with code {code}",
            metadata={"stdout": output},
            **common,
        )
