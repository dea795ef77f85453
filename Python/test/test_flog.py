"""
Verbosity filtering and formatting of the logging facade.
"""

import io

import pytest

from QHam.common.flog import Logger

@pytest.fixture
def sink():
    return io.StringIO()

def test_messages_above_verbosity_are_dropped(sink):
    log = Logger(name="qham-test-verbosity", verbose=1, level="debug", stream=sink)
    log.say("kept", log="info", lvl=1)
    log.say("dropped", log="info", lvl=2)
    log.info("also kept", lvl=0)
    out = sink.getvalue()
    assert "kept" in out
    assert "also kept" in out
    assert "dropped" not in out

def test_severity_threshold(sink):
    log = Logger(name="qham-test-severity", verbose=5, level="warning", stream=sink)
    log.debug("quiet")
    log.error("loud")
    out = sink.getvalue()
    assert "quiet" not in out
    assert "[ERROR] loud" in out

def test_colors_only_when_enabled():
    plain   = Logger(name="qham-test-plain", use_colors=False, stream=io.StringIO())
    colored = Logger(name="qham-test-colored", use_colors=True, stream=io.StringIO())
    assert plain.colorize("msg", "red") == "msg"
    assert colored.colorize("msg", "red") == "\033[91mmsg\033[0m"
    assert colored.colorize("msg", "purple") == "msg"

# ----------------------------------------------------------------------------------------------------
#! End of test_flog.py
# ----------------------------------------------------------------------------------------------------
