# plainstate/process.py

import asyncio
import sys
from pathlib import Path

# Add the project root directory to the Python path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from config.config import config
from plainstate.utils.logging import Logger
from plainstate.processing import unwrap
from plainstate.utils.file_operations import FileOperations

# Initialize Logger using the structured config
logger = Logger.get_logger(
    "ProcessLogger",
    config.paths.log_dir / config.logging.processor_log
)


async def check_input_exists():
    """Check that the snapshot directory exists."""
    input_dir = config.paths.input_dir

    if await asyncio.to_thread(input_dir.is_dir):
        logger.info(f"Snapshot directory '{input_dir}' exists.")
    else:
        logger.error(f"Error: '{input_dir}' directory does not exist.")
        raise FileNotFoundError(f"Snapshot directory {input_dir} is missing.")


async def run_script(script_func, script_name: str):
    try:
        logger.info(f"Starting {script_name}...")
        await script_func()
        logger.info(f"Script {script_name} completed successfully.")
    except Exception as e:
        logger.error(f"Script {script_name} failed: {e}")
        logger.debug(f"Detailed error for {script_name}:", exc_info=True)
        raise


async def main():
    try:
        Logger.set_log_level(config.logging.console_level)
        await check_input_exists()
        logger.info("Starting all processing scripts...")

        await FileOperations.ensure_directory(config.paths.output_dir)

        scripts = [
            (unwrap.main, "Unwrap"),
        ]

        for script_func, script_name in scripts:
            await run_script(script_func, script_name)

        logger.info("All processing scripts completed successfully.")

    except Exception as e:
        logger.error(f"Processing pipeline failed: {e}")
        logger.debug("Detailed error for processing pipeline:", exc_info=True)
        raise


if __name__ == "__main__":
    asyncio.run(main())
