"""Action dispatcher: run a confirmed catalog item and record the results.

// [LAW:dataflow-not-control-flow] Per-kind behavior lives in lookup tables.
// [LAW:single-enforcer] dispatch() is the error boundary for every external
// collaborator; nothing raised by a command or the clipboard escapes it.

Redraw policy: one redraw right after the ``$ <command>`` echo so the prompt
shows before the command finishes, then exactly one when each dispatch ends.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

import command_runner.action_config as cfg
from command_runner.catalog import ActionKind, CatalogItem
from command_runner.clipboard import Clipboard, ClipboardError
from command_runner.executor import CommandError, CommandRunner
from command_runner.output_log import OutputLog

logger = logging.getLogger(__name__)


def _error_message(error: BaseException) -> str:
    """Human-readable detail of an error, or "" when it carries none."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message.strip():
        return message.strip()
    return str(error).strip()


class ActionDispatcher:
    def __init__(
        self,
        output_log: OutputLog,
        runner: CommandRunner,
        clipboard: Clipboard,
        request_redraw: Callable[[], None] = lambda: None,
    ):
        self.output_log = output_log
        self._runner = runner
        self._clipboard = clipboard
        self._request_redraw = request_redraw
        self._handlers: dict[ActionKind, Callable[[CatalogItem], Awaitable[None]]] = {
            ActionKind.RUN_COMMAND: self._run_command,
            ActionKind.COPY_TEXT: self._copy_text,
            ActionKind.INTERNAL_ACTION: self._internal_action,
        }
        # [LAW:one-source-of-truth] Keys must match action_config.INTERNAL_ACTION_IDS.
        self._internal_actions: dict[str, Callable[[], None]] = {
            cfg.CLEAR_OUTPUT: self.output_log.clear,
        }

    async def dispatch(self, item: CatalogItem) -> None:
        """Execute ``item`` and append its outcome to the output log."""
        logger.info("Dispatching %s item %r", item.kind.value, item.name)
        try:
            await self._handlers[item.kind](item)
        except Exception:
            # Handlers convert collaborator errors themselves; this is a last resort.
            logger.exception("Unexpected error dispatching %r", item.name)
            self.output_log.append(cfg.UNKNOWN_ERROR)
        finally:
            self._request_redraw()

    async def _run_command(self, item: CatalogItem) -> None:
        command = item.payload
        self.output_log.append(f"{cfg.PROMPT_PREFIX}{command}")
        self._request_redraw()

        try:
            result = await self._runner.run(command)
        except CommandError as e:
            logger.warning("Command could not start: %s (%s)", command, e.message)
            self._append_error(e)
            return
        except Exception as e:
            logger.warning("Command runner failed for %s: %r", command, e)
            self._append_error(e)
            return

        if not result.ok:
            logger.info("Command failed: %s", result.failure_message)
            self.output_log.append(f"{cfg.ERROR_PREFIX}{result.failure_message}")
            return
        if result.stdout:
            self.output_log.append_many(result.stdout.splitlines())
        if result.stderr:
            self.output_log.append_many(
                f"{cfg.ERROR_PREFIX}{line}" for line in result.stderr.splitlines()
            )

    def _append_error(self, error: BaseException) -> None:
        message = _error_message(error)
        self.output_log.append(f"{cfg.ERROR_PREFIX}{message}" if message else cfg.UNKNOWN_ERROR)

    async def _copy_text(self, item: CatalogItem) -> None:
        try:
            await self._clipboard.copy(item.payload)
        except Exception as e:
            level = logging.INFO if isinstance(e, ClipboardError) else logging.WARNING
            logger.log(level, "Clipboard copy failed: %r", e)
            message = _error_message(e)
            self.output_log.append(
                cfg.COPY_ERROR_FORMAT.format(message=message) if message else cfg.UNKNOWN_ERROR
            )
            return
        self.output_log.append(cfg.COPIED_FORMAT.format(name=item.name))

    async def _internal_action(self, item: CatalogItem) -> None:
        action = self._internal_actions.get(item.payload)
        if action is None:
            # TODO: surface unknown identifiers in the status bar once it can show transient messages.
            logger.warning("Ignoring unrecognized internal action %r", item.payload)
            return
        action()
