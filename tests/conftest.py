# tests/conftest.py

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from plainstate.reactivity import Ref, reactive, readonly, ref, shallow_ref


@pytest.fixture
def plain_state():
    return {
        "user": {"name": "Ada", "tags": ["admin", "ops"]},
        "count": 3,
        "ratio": 0.5,
        "enabled": True,
        "missing": None,
        "history": [1, 2, 3],
    }


@pytest.fixture
def wrapped_state():
    """Same content as plain_state, with wrappers of every kind at various depths."""
    return reactive({
        "user": readonly({"name": ref("Ada"), "tags": reactive(["admin", shallow_ref("ops")])}),
        "count": ref(3),
        "ratio": Ref(ref(0.5), shallow=True),
        "enabled": True,
        "missing": ref(None),
        "history": ref([1, ref(2), 3]),
    })


@pytest.fixture
def mock_config(tmp_path):
    with patch("plainstate.processing.unwrap.config") as mock_conf:
        mock_conf.paths = MagicMock()
        mock_conf.paths.input_dir = tmp_path / "snapshots"
        mock_conf.paths.output_dir = tmp_path / "plain"
        mock_conf.paths.log_dir = tmp_path / "logs"

        mock_conf.processing = MagicMock()
        mock_conf.processing.snapshot_pattern = "*.pickle"
        mock_conf.processing.max_workers = 2

        mock_conf.files = MagicMock()
        mock_conf.files.plain_data_yaml = "plain_data.yaml"
        mock_conf.files.plain_data_json = "plain_data.json"
        mock_conf.files.plain_data_pickle = "plain_data.pickle"

        mock_conf.logging = MagicMock()
        mock_conf.logging.processor_log = "processor.log"
        mock_conf.logging.unwrap_log = "unwrap.log"
        mock_conf.logging.transfer_log = "transfer.log"
        mock_conf.logging.reactivity_log = "reactivity.log"
        mock_conf.logging.console_level = "INFO"

        yield mock_conf


@pytest.fixture
def mock_data_handler():
    with patch("plainstate.processing.unwrap.DataHandler") as mock_dh:
        mock_dh.load_yaml = AsyncMock()
        mock_dh.save_yaml = AsyncMock()
        mock_dh.load_json = AsyncMock()
        mock_dh.save_json = AsyncMock()
        mock_dh.load_pickle = AsyncMock()
        mock_dh.save_pickle = AsyncMock()
        yield mock_dh


@pytest.fixture
def mock_file_operations():
    with patch("plainstate.processing.unwrap.FileOperations") as mock_fo:
        mock_fo.ensure_directory = AsyncMock()
        mock_fo.list_files = AsyncMock(return_value=[])
        yield mock_fo
