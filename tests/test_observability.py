import json
import logging

from cityroute.config import ObservabilityConfig
from cityroute.observability import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "cityroute.test", logging.INFO, __file__, 1, "Route found", (), None
    )
    record.distance = 3

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Route found"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "cityroute.test"
    assert payload["distance"] == 3


def test_configure_logging_replaces_its_own_handler():
    config = ObservabilityConfig(level="INFO", structured=True)

    configure_logging(config)
    configure_logging(config, level="debug")

    root = logging.getLogger()
    ours = [h for h in root.handlers if h.get_name() == "cityroute"]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG
