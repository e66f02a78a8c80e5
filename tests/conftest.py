import os
import sys
from glob import glob
from typing import List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import ROOT, open_file  # isort:skip


@pytest.fixture(scope="session")
def factorial_program() -> str:
    return open_file("data/valid/factorial.tny")


def data_files(pattern: str) -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT) for file in glob(os.path.join(ROOT, "data", pattern))
    )


def valid_files() -> List[str]:
    return data_files("valid/*.tny")


def scannerError_files() -> List[str]:
    return data_files("invalid/scanner/*.tny")


def parserError_files() -> List[str]:
    return data_files("invalid/parser/*.tny")


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=scannerError_files())
def scanner_error(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parserError_files())
def parser_error(request) -> str:
    return request.param
