"""Fixtures for the tests."""

import os
import shutil
import tempfile

import pytest


@pytest.fixture(name="temp_dir")
def fixture_temp_dir():
    """Create a temporary directory and delete it after the test has run."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture(name="start_umask", autouse=True)
def fixture_start_umask():
    """Start each test with a umask of 022 and restore the original one afterwards."""
    original = os.umask(0o022)
    yield 0o022
    os.umask(original)


def read_umask():
    """Read the umask without any of the code under test."""
    umask = os.umask(0)
    os.umask(umask)
    return umask
