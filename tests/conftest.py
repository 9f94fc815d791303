import logging

import pytest

from inlinefmt import Formatter


def italic(span):
    return f"<i>{span}</i>"


def bold(span):
    return f"<b>{span}</b>"


def code(span):
    return f"<code>{span}</code>"


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    base = logging.getLogger("inlinefmt")
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(logging.NOTSET)
    base.propagate = True


@pytest.fixture
def formatter():
    return Formatter()


@pytest.fixture
def markdown():
    fmt = Formatter()
    fmt.register(name="bold", symbol="**", transformer=bold)
    fmt.register(name="italic", symbol="*", transformer=italic)
    return fmt
