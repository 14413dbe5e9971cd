import random

import pytest

import urikit
from urikit.util import uri


@pytest.fixture
def options():
    return urikit.ParserOptions()


@pytest.fixture
def parser(options):
    return urikit.URIParser(options)


@pytest.fixture(params=['bytearray', 'join_list'])
def decode_approach(request, monkeypatch):
    method = uri._join_tokens_list
    if request.param == 'bytearray':
        method = uri._join_tokens_bytearray
    monkeypatch.setattr(uri, '_join_tokens', method)
    return method


@pytest.fixture
def arbitrary_uris():
    rng = random.Random(1337)
    alphabet = uri._ALL_ALLOWED + ' %+ç€\U0001f600'
    return [''.join(rng.choice(alphabet) for _ in range(32)) for __ in range(100)]
