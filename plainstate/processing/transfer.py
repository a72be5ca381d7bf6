# plainstate/processing/transfer.py

import asyncio
from concurrent.futures import Executor, ProcessPoolExecutor
from typing import Any, Callable, Dict, Mapping, Optional

from config.config import config
from plainstate.processing.traversal import UnwrapStrategy, to_plain_record
from plainstate.utils.logging import Logger

logger = Logger.get_logger('TransferLogger', config.paths.log_dir / config.logging.transfer_log)


class IsolatedContext:
    """
    Runs a handler in a separate worker process and feeds it plain snapshots
    of reactive state. Wrappers never cross the process boundary: every message
    goes through ``to_plain_record`` first.
    """
    def __init__(
        self,
        handler: Callable[[Dict[Any, Any]], Any],
        max_workers: Optional[int] = None,
        strategy: Optional[UnwrapStrategy] = None,
        executor: Optional[Executor] = None,
    ):
        self.handler = handler
        self.strategy = strategy
        self._owns_executor = executor is None
        self._executor = executor or ProcessPoolExecutor(
            max_workers=max_workers or config.processing.max_workers
        )
        self._closed = False

    async def post_message(self, state: Mapping) -> Any:
        """Unwrap ``state`` and hand the plain record to the handler. Returns the handler's result."""
        if self._closed:
            raise RuntimeError("Cannot post to a closed isolated context")

        message = to_plain_record(state, self.strategy)
        logger.debug(f"Posting message with keys {list(message)} to {getattr(self.handler, '__name__', self.handler)!r}")

        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(self._executor, self.handler, message)
        except Exception as e:
            logger.error(f"Handler failed in isolated context: {e}", exc_info=True)
            raise

    def close(self):
        if self._closed:
            return
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        logger.debug("Isolated context closed.")

    async def __aenter__(self) -> "IsolatedContext":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await asyncio.to_thread(self.close)
