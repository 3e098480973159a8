import typing as t

import pytest

from levellog import core


@pytest.fixture(autouse=True)
def fresh_dispatcher() -> t.Iterator[core.LogDispatcher]:
    """
    Gives every test an unconfigured process-wide dispatcher and
    closes whatever file the test opened.
    """
    dispatcher = core.reset_dispatcher()
    yield dispatcher
    core.reset_dispatcher()


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
