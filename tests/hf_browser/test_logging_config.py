import io
import json
import logging

import pytest

from hf_browser.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_logging_includes_extra_fields():
    stream = io.StringIO()
    configure_logging(level=logging.INFO, force_format="json", stream=stream)

    logging.getLogger("hf_browser.test").info("Dataset loaded", extra={"n_rows": 299})

    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["message"] == "Dataset loaded"
    assert payload["n_rows"] == 299


def test_plain_logging_replaces_handlers():
    stream = io.StringIO()
    configure_logging(level=logging.INFO, force_format="plain", stream=stream)
    configure_logging(level=logging.INFO, force_format="plain", stream=stream)

    logging.getLogger("hf_browser.test").info("hello")

    assert len(logging.getLogger().handlers) == 1
    assert stream.getvalue().count("hello") == 1
    assert "[INFO] hf_browser.test: hello" in stream.getvalue()
