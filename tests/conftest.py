import logging

import pytest

from kvfilter.context import set_bound_attributes, set_request_id


class CollectingHandler(logging.Handler):
    """Sink that keeps every record it is handed"""

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    @property
    def messages(self):
        return [record.getMessage() for record in self.records]


def make_record(level=logging.INFO, msg="message", name="test", **fields):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in fields.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def sink():
    return CollectingHandler()


@pytest.fixture(autouse=True)
def clean_context():
    set_request_id("")
    set_bound_attributes()
    yield
    set_request_id("")
    set_bound_attributes()
