# plainstate/processing/unwrap.py

import asyncio
import json
from pathlib import Path
from typing import Dict, Any, List, Optional

from tqdm.asyncio import tqdm

from config.config import config
from plainstate.processing.traversal import (
    ShapeMismatchError,
    UnwrapStrategy,
    is_plain,
    to_plain_record,
)
from plainstate.utils.logging import Logger
from plainstate.utils.data_handling import DataHandler
from plainstate.utils.file_operations import FileOperations

# Initialize Logger
logger = Logger.get_logger('UnwrapLogger', config.paths.log_dir / config.logging.unwrap_log)

class Unwrapper:
    """
    Unwraps a batch of named state snapshots into plain records and validates them.
    """
    def __init__(self, states: Dict[str, Any], strategy: Optional[UnwrapStrategy] = None):
        self.states = states
        self.strategy = strategy
        self.plain_records: Dict[str, Dict[Any, Any]] = {}
        self.failed: Dict[str, str] = {}

    async def unwrap_state(self, name: str, state: Any):
        try:
            self.plain_records[name] = to_plain_record(state, self.strategy)
            logger.debug(f"Unwrapped snapshot {name}.")
        except ShapeMismatchError as e:
            logger.warning(f"Skipping snapshot {name}: {e}")
            self.failed[name] = str(e)

    async def unwrap_all(self):
        """Unwrap every snapshot. Shape failures are recorded and do not stop the batch."""
        logger.info(f"Starting the unwrapping process for {len(self.states)} snapshots.")

        tasks = [self.unwrap_state(name, state) for name, state in self.states.items()]
        for task in tqdm.as_completed(tasks, total=len(tasks), desc="Unwrapping snapshots", unit="snapshot"):
            await task

        logger.info(
            f"Unwrapping process completed: {len(self.plain_records)} unwrapped, {len(self.failed)} failed."
        )

    def validate(self) -> List[str]:
        """Check that every record is wrapper-free and JSON-serializable. Returns the names of bad records."""
        problems = []
        for name, record in self.plain_records.items():
            if not is_plain(record, self.strategy):
                logger.warning(f"Snapshot {name} still contains wrapped values.")
                problems.append(name)
                continue
            try:
                json.dumps(record)
            except (TypeError, ValueError) as e:
                logger.warning(f"Snapshot {name} is not JSON-serializable: {e}")
                problems.append(name)

        if problems:
            logger.warning(f"Found {len(problems)} snapshots that failed validation.")
        else:
            logger.info("All unwrapped snapshots are plain.")
        return problems

    def discard(self, names: List[str]):
        """Move records that failed validation out of the batch so they are not saved."""
        for name in names:
            if name in self.plain_records:
                del self.plain_records[name]
                self.failed[name] = "failed validation"
        if names:
            logger.info(f"Discarded {len(names)} snapshots before saving.")

    async def save_results(self, output_dir: Path):
        """Save the plain records."""
        await DataHandler.save_yaml(self.plain_records, output_dir / config.files.plain_data_yaml)
        await DataHandler.save_json(self.plain_records, output_dir / config.files.plain_data_json)
        await DataHandler.save_pickle(self.plain_records, output_dir / config.files.plain_data_pickle)
        logger.info("Plain records saved successfully.")

async def load_snapshots(input_dir: Path) -> Dict[str, Any]:
    files = await FileOperations.list_files(input_dir, config.processing.snapshot_pattern)
    states = {}
    for file_path in files:
        states[file_path.stem] = await DataHandler.load_pickle(file_path)
    logger.info(f"Loaded {len(states)} snapshots from {input_dir}.")
    return states

async def main():
    input_dir = config.paths.input_dir
    output_dir = config.paths.output_dir

    await FileOperations.ensure_directory(output_dir)

    states = await load_snapshots(input_dir)
    if not states:
        logger.warning(f"No snapshots found in {input_dir}.")
        return

    unwrapper = Unwrapper(states)
    await unwrapper.unwrap_all()
    unwrapper.discard(unwrapper.validate())
    await unwrapper.save_results(output_dir)

    logger.info("Unwrap Process Completed Successfully.")

if __name__ == "__main__":
    asyncio.run(main())
