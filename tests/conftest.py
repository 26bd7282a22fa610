import logging

import pytest

from cityroute.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    root_level = logging.getLogger().level
    yield
    reset_config()
    logging.getLogger().setLevel(root_level)
    # configure_logging() binds a handler to whatever stderr was active.
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "cityroute":
            root.removeHandler(handler)


@pytest.fixture
def routes_csv(tmp_path):
    path = tmp_path / "routes.csv"
    path.write_text(
        "\n".join(
            [
                "A,B,1",
                "B,C,2",
                "A,C,5",
                "X,Y,3",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
