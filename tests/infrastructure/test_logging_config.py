import pytest
import structlog

from ims.infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("chatty")


def test_debug_lines_reach_stderr(capsys):
    configure_logging("debug")
    structlog.get_logger("ims.test").debug("sample line", answer=42)
    err = capsys.readouterr().err
    assert "sample line" in err
    assert "answer=42" in err


def test_info_filtered_at_warning(capsys):
    configure_logging("WARNING")
    structlog.get_logger("ims.test").info("hidden")
    assert "hidden" not in capsys.readouterr().err
