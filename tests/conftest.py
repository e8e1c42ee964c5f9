import os
import shutil
import pytest

from scadaxdf.config import DasipConfig
from scadaxdf.templates import TemplateRegistry
from scadaxdf.xdf.generator import XdfGenerator
from tests.common import *


@pytest.fixture
def cleanup():
    def delete_files():
        if os.path.exists(LOG_FILE):
            os.remove(LOG_FILE)
        if os.path.exists(OUTPUT):
            shutil.rmtree(OUTPUT)

    delete_files()
    yield
    delete_files()


@pytest.fixture
def test_data_dir():
    """The path to the directory that contains the fixture data"""
    return DATA_DIR


@pytest.fixture
def registry():
    return TemplateRegistry.from_file(TEMPLATES_FILE)


@pytest.fixture
def dasip():
    return DasipConfig.from_file(DASIP_FILE)


@pytest.fixture
def generator(registry, dasip):
    return XdfGenerator(registry, dasip.get_parent_path)
