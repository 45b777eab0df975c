"""HTTP API tests, driven through aiohttp's test client."""

import asyncio
import base64
import os
import sys

from aiohttp import test_utils

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'web'))

from app import MAX_SHARES, create_app


def _post(path, payload=None, data=None):
    """POST to the app and return (status, json body)."""
    async def go():
        async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
            if data is not None:
                resp = await client.post(path, data=data)
            else:
                resp = await client.post(path, json=payload)
            return resp.status, await resp.json()
    return asyncio.run(go())


def test_split_and_recover_text():
    status, body = _post('/api/split', {'secret': 'Hello', 'n': 5, 'k': 3})
    assert status == 200
    assert body['ok'] is True
    assert body['secret_size'] == 5
    assert len(body['shares']) == 5

    status, body = _post('/api/recover', {'shares': body['shares'][2:]})
    assert status == 200
    assert body['secret'] == 'Hello'
    assert body['secret_size'] == 5


def test_split_and_recover_binary():
    secret = os.urandom(31)
    status, body = _post('/api/split', {
        'secret_b64': base64.b64encode(secret).decode('ascii'), 'n': 300, 'k': 2,
    })
    assert status == 200
    assert body['shares'][0][0] == '2'

    status, body = _post('/api/recover', {'shares': [body['shares'][10], body['shares'][200]]})
    assert status == 200
    assert base64.b64decode(body['secret_b64']) == secret


def test_split_rejects_bad_parameters():
    cases = [
        {'secret': 'x', 'n': 3},
        {'secret': 'x', 'n': 'three', 'k': 2},
        {'secret': 'x', 'n': 3, 'k': 5},
        {'secret': 'x', 'n': MAX_SHARES + 1, 'k': 2},
        {'secret_b64': '***', 'n': 3, 'k': 2},
    ]
    for payload in cases:
        status, body = _post('/api/split', payload)
        assert status == 400, payload
        assert body['ok'] is False


def test_split_secret_must_be_text():
    status, body = _post('/api/split', {'secret': None, 'n': 3, 'k': 2})
    assert status == 200
    assert body['secret_size'] == 0

    status, body = _post('/api/recover', {'shares': body['shares'][:2]})
    assert status == 200
    assert body['secret'] == ''

    for value in (123, ['a'], {'a': 1}, True):
        status, body = _post('/api/split', {'secret': value, 'n': 3, 'k': 2})
        assert status == 400, value
        assert body['error'] == 'secret must be a string'


def test_invalid_json_body():
    for path in ('/api/split', '/api/recover', '/api/verify'):
        status, body = _post(path, data='not json')
        assert status == 400
        assert body['error'] == 'Invalid JSON body'

    status, body = _post('/api/split', ['a', 'list'])
    assert status == 400


def test_recover_errors():
    _, split = _post('/api/split', {'secret': 'Hello', 'n': 5, 'k': 3})
    shares = split['shares']

    status, body = _post('/api/recover', {'shares': shares[:2]})
    assert status == 400
    assert 'Recovery failed' in body['error']

    status, body = _post('/api/recover', {'shares': [shares[0], shares[0], shares[1]]})
    assert status == 400

    status, body = _post('/api/recover', {'shares': []})
    assert status == 400

    status, body = _post('/api/recover', {'shares': 'not a list'})
    assert status == 400


def test_verify():
    _, split = _post('/api/split', {'secret': 'Verify me', 'n': 4, 'k': 3})

    status, body = _post('/api/verify', {'shares': split['shares']})
    assert status == 200
    assert body['valid'] is True
    assert body['recoverable'] is True
    assert body['threshold'] == 3

    status, body = _post('/api/verify', {'shares': split['shares'][:1] + ['bogus']})
    assert status == 200
    assert body['valid'] is False
    assert len(body['errors']) == 1

    status, body = _post('/api/verify', {'shares': []})
    assert status == 400
