import logging
import shutil
from pathlib import Path
from typing import Callable, Union

import pytest

MakeDevice = Callable[[Path, str, Union[str, bytes], Union[str, bytes]], Path]


def _write(path: Path, value: Union[str, bytes]) -> None:
    if isinstance(value, bytes):
        path.write_bytes(value)
    else:
        path.write_text(value)


@pytest.fixture
def fixtures_dir() -> Path:
    """The bundled backlight tree; read only."""
    return Path(__file__).resolve().parent / "backlight"


@pytest.fixture
def make_device() -> MakeDevice:
    def make(root: Path, name: str, max_brightness: Union[str, bytes], brightness: Union[str, bytes]) -> Path:
        path = root / name
        path.mkdir(parents=True)
        _write(path / "max_brightness", max_brightness)
        _write(path / "brightness", brightness)
        return path
    return make


@pytest.fixture
def backlight(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Writable copy of the bundled backlight tree."""
    root = tmp_path / "backlight"
    shutil.copytree(fixtures_dir, root)
    return root


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("brack")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
