from collections.abc import Callable
from pathlib import Path

import pytest

from docsummary.config.settings import Settings
from docsummary.processor.processor import Processor, build_processor


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    root = tmp_path / "files"
    root.mkdir()
    return root


@pytest.fixture
def test_settings(files_root: Path) -> Settings:
    return Settings(
        storage_backend="local",
        local_files_root=str(files_root),
        ocr_provider="disabled",
        summarization_provider="example",
    )


@pytest.fixture
def processor(test_settings: Settings) -> Processor:
    return build_processor(test_settings)


@pytest.fixture
def store_file(files_root: Path) -> Callable[[str, bytes], str]:
    def _store(key: str, data: bytes) -> str:
        path = files_root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return key

    return _store
