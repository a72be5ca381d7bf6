# plainstate/utils/file_operations.py

import asyncio
from pathlib import Path
from typing import List

from plainstate.utils.logging import Logger
from config.config import config

logger = Logger.get_logger(
    "FileOperationsLogger", config.paths.log_dir / "file_operations.log"
)

class FileOperations:
    @staticmethod
    async def ensure_directory(directory: Path):
        """Ensure that a directory exists asynchronously."""
        try:
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
            logger.debug(f"Ensured existence of directory: {directory}")
        except Exception as e:
            logger.error(f"Failed to create directory {directory}: {e}", exc_info=True)
            raise

    @staticmethod
    async def list_files(directory: Path, pattern: str = "*") -> List[Path]:
        """List snapshot files in a directory matching the given pattern, sorted by name."""
        try:
            files = await asyncio.to_thread(lambda: sorted(p for p in directory.glob(pattern) if p.is_file()))
            logger.debug(f"Found {len(files)} files matching {pattern!r} in {directory}")
            return files
        except Exception as e:
            logger.error(f"Failed to list files in {directory}: {e}", exc_info=True)
            raise
