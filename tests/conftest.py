"""Shared test fixtures for Record Fmt."""

from datetime import datetime
from ipaddress import ip_address

import pytest

from record_fmt.core.models import Field, Record

NGINX_AGENT = (
    "Mozilla/5.0(Macintosh; Intel Mac OS X 10_14_5) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/75.0.3770.142 Safari/537.36 "
)


@pytest.fixture
def nginx_agent():
    return NGINX_AGENT


@pytest.fixture
def nginx_record():
    """Access-log record with a user agent containing commas and a trailing space."""
    return Record.of(
        Field.from_ip("ip", ip_address("192.168.1.2")),
        Field.from_time("time", datetime(2019, 8, 6, 12, 12, 19)),
        Field.from_chars("http/request", "GET /nginx-logo.png HTTP/1.1"),
        Field.from_digit("http/status", 200),
        Field.from_digit("length", 368),
        Field.from_chars("chars", "http://119.122.1.4/"),
        Field.from_chars("http/agent", NGINX_AGENT),
        Field.from_chars("src_key", "_"),
    )


@pytest.fixture
def nested_record():
    """Record with an object and an array value."""
    obj = {"inner": Field.from_digit("inner", 7)}
    arr = [Field.from_chars("a", "foo"), Field.from_digit("b", 9)]
    return Record.of(Field.from_obj("payload", obj), Field.from_arr("list", arr))


@pytest.fixture
def ignored_only_record():
    return Record.of(
        Field.ignored("secret", "hidden"),
        Field.ignored("token", 42),
    )
