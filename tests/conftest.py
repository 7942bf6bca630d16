"""
Pytest configuration and fixtures for fixedwidth tests.
"""

import io
import json
import logging

import pytest

from fixedwidth import LayoutConfig, LineEnding
from fixedwidth.logging_config import get_logger


class FlushCountingStream(io.BytesIO):
    """BytesIO that counts flush calls."""

    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


@pytest.fixture
def people_input():
    """Input with a header line, comments and four records."""
    return (
        b"This is a header line to be skipped\n"
        b"# The following is info for the men\n"
        b"  John   1245\n"
        b"  Peter  3545\n"
        b"# The following is info for certain women\n"
        b"  Susan  6784\n"
        b"  Sarah  4321\n"
    )


@pytest.fixture
def people_layout():
    """Layout matching people_input."""
    return LayoutConfig(
        field_lengths=[7, 4],
        skip_start=2,
        skip_lines=1,
        comment="#",
        line_ending=LineEnding.LF,
        trim_fields=True,
    )


@pytest.fixture
def country_layout():
    """Three left aligned columns with truncation enabled."""
    return LayoutConfig(field_lengths=[2, 20, 10], trim_fields=True)


@pytest.fixture
def counting_stream():
    """A writable stream that records flushes."""
    return FlushCountingStream()


@pytest.fixture
def layout_file(tmp_path):
    """Write a JSON layout file for people-style lines."""
    path = tmp_path / "layout.json"
    path.write_text(
        json.dumps(
            {
                "field_lengths": [7, 4],
                "field_align": ["left", "right"],
                "skip_start": 2,
                "line_ending": "lf",
                "comment": "#",
                "trim_fields": True,
            }
        )
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = get_logger()
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
