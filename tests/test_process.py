# tests/test_process.py

import pytest
from unittest.mock import patch, AsyncMock

from plainstate import process


@pytest.fixture
def mock_process_config(tmp_path):
    with patch("plainstate.process.config") as mock_conf:
        mock_conf.paths.input_dir = tmp_path / "snapshots"
        mock_conf.paths.output_dir = tmp_path / "plain"
        mock_conf.logging.console_level = "INFO"
        yield mock_conf


@pytest.mark.asyncio
async def test_check_input_missing(mock_process_config):
    with pytest.raises(FileNotFoundError):
        await process.check_input_exists()


@pytest.mark.asyncio
async def test_run_script_reraises():
    failing = AsyncMock(side_effect=RuntimeError("stage broke"))
    with patch("plainstate.process.logger.error") as mock_error:
        with pytest.raises(RuntimeError):
            await process.run_script(failing, "Broken")
    mock_error.assert_called_once_with("Script Broken failed: stage broke")


@pytest.mark.asyncio
async def test_main_runs_unwrap_stage(mock_process_config):
    mock_process_config.paths.input_dir.mkdir()

    with patch("plainstate.process.unwrap.main", new_callable=AsyncMock) as mock_unwrap:
        await process.main()

    mock_unwrap.assert_awaited_once()
    assert mock_process_config.paths.output_dir.is_dir()


@pytest.mark.asyncio
async def test_main_fails_without_input(mock_process_config):
    with patch("plainstate.process.unwrap.main", new_callable=AsyncMock) as mock_unwrap:
        with pytest.raises(FileNotFoundError):
            await process.main()
    mock_unwrap.assert_not_awaited()
