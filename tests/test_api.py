"""
Tests for the Flask web API
"""
import json

import pytest

import config
from api import create_app


@pytest.fixture
def client(tmp_path):
    app = create_app(str(tmp_path / "api.db"))
    app.config['TESTING'] = True
    return app.test_client()


def send(client, action, value=None):
    return client.post('/api/input', json={'action': action, 'value': value})


def test_api_info(client):
    response = client.get('/api')
    body = response.get_json()
    assert response.status_code == 200
    assert body['success'] is True
    assert 'equals' in body['data']['actions']


def test_initial_display(client):
    body = client.get('/api/display').get_json()
    assert body['data'] == {
        'display': '0',
        'state': 'idle',
        'memory': '0',
        'has_memory': False,
    }


def test_input_sequence(client):
    send(client, 'digit', '2')
    body = send(client, 'operator', '+').get_json()
    assert body['data']['state'] == 'awaiting_operand'
    send(client, 'digit', '3')
    body = send(client, 'equals').get_json()
    assert body['success'] is True
    assert body['data']['display'] == '5'
    assert body['data']['state'] == 'idle'


def test_divide_by_zero(client):
    for action, value in [('digit', '8'), ('operator', '/'), ('digit', '0'), ('equals', None)]:
        body = send(client, action, value).get_json()
    assert body['data']['display'] == 'Cannot divide by zero'


def test_key_endpoint(client):
    for key in ['5', '0', '+', '1', '0', '%']:
        response = client.post('/api/key', json={'key': key})
        assert response.status_code == 200
    assert client.get('/api/display').get_json()['data']['display'] == '55'


def test_unknown_action_is_400(client):
    response = send(client, 'explode')
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_missing_body_is_400(client):
    response = client.post('/api/input', data='not json', content_type='text/plain')
    assert response.status_code == 400


def test_non_calculator_key_is_400(client):
    response = client.post('/api/key', json={'key': 'Shift_L'})
    assert response.status_code == 400


def test_calculation_history(client):
    for action, value in [('digit', '6'), ('operator', '*'), ('digit', '7'), ('equals', None)]:
        send(client, action, value)

    body = client.get('/api/calculations').get_json()
    assert body['count'] == 1
    assert body['data'][0]['expression'] == '6 × 7'
    assert body['data'][0]['result'] == '42'

    assert client.delete('/api/calculations').get_json()['success'] is True
    assert client.get('/api/calculations').get_json()['count'] == 0


def test_bad_limit_is_400(client):
    response = client.get('/api/calculations?limit=abc')
    assert response.status_code == 400


def test_sessions_are_independent(tmp_path):
    first = create_app(str(tmp_path / "a.db")).test_client()
    second = create_app(str(tmp_path / "b.db")).test_client()
    first.post('/api/input', json={'action': 'digit', 'value': '9'})
    assert second.get('/api/display').get_json()['data']['display'] == '0'


def test_negative_limit_is_400(client):
    response = client.get('/api/calculations?limit=-1')
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_history_cap_applies(client, monkeypatch):
    monkeypatch.setattr(config, 'MAX_HISTORY_ITEMS', 3)
    for _ in range(5):
        for action, value in [('digit', '1'), ('operator', '+'), ('digit', '1'), ('equals', None)]:
            send(client, action, value)
    assert client.get('/api/calculations?limit=50').get_json()['count'] == 3


def _reject_constant(name):
    raise ValueError(name)


def test_memory_overflow_stays_valid_json(client):
    send(client, 'digit', '1')
    for _ in range(400):
        send(client, 'digit', '0')
    response = send(client, 'memory_add')

    body = json.loads(response.get_data(as_text=True), parse_constant=_reject_constant)
    assert body['data']['memory'] == config.DIVIDE_BY_ZERO_TEXT
    assert body['data']['has_memory'] is True


def test_engine_operations_run_under_the_session_lock(tmp_path):
    app = create_app(str(tmp_path / "lock.db"))
    lock = app.config['CALCULATOR_LOCK']
    held = []
    app.config['CALCULATOR'].add_result_listener(lambda expr, result: held.append(lock.locked()))
    client = app.test_client()

    for action, value in [('digit', '2'), ('operator', '+'), ('digit', '3')]:
        send(client, action, value)
    client.post('/api/key', json={'key': '='})
    send(client, 'operator', '*')
    send(client, 'digit', '4')
    send(client, 'equals')

    assert held == [True, True]
    assert not lock.locked()
