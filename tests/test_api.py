"""
Testing the HTTP and WebSocket surface.
"""

import pytest

from wordl import create_app
from wordl.config import TestingConfig
from wordl.services.game_service import initialize_game_service


@pytest.fixture
def app_and_socketio(catalog):
    initialize_game_service(catalog)
    return create_app(TestingConfig)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def game_id(client):
    response = client.post('/api/new_game', json={})
    return response.get_json()['game_id']


def test_new_game(client):
    response = client.post('/api/new_game', json={'max_attempts': 3})
    data = response.get_json()

    assert response.status_code == 200
    assert data['success']
    assert data['state']['state'] == 'play'
    assert data['state']['max_attempts'] == 3
    assert data['state']['options']['word'] is None


def test_new_game_rejects_bad_settings(client):
    assert client.post('/api/new_game', json={'word_length': 40}).status_code == 400
    assert client.post('/api/new_game', json={'language': 'klingon'}).status_code == 400
    assert client.post('/api/new_game', json={'max_attempts': 'many'}).status_code == 400


def test_new_game_with_language_and_length(client):
    response = client.post('/api/new_game', json={'language': 'alt', 'word_length': 2})
    assert response.status_code == 200
    assert response.get_json()['state']['options']['word_length'] == 2


def test_winning_guess(client, game_id):
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'hello'})
    data = response.get_json()

    assert response.status_code == 200
    assert data['outcome'] == 'WON'
    assert data['state']['state'] == 'win'
    assert data['state']['options']['word'] == 'hello'


def test_invalid_guesses(client, game_id):
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'hell'})
    assert response.status_code == 400
    assert response.get_json()['outcome'] == 'INVALID_LENGTH'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
    assert response.status_code == 400
    assert response.get_json()['outcome'] == 'UNKNOWN_WORD'
    assert response.get_json()['state']['guesses'] == []

    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400


def test_unknown_game(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert client.post('/api/game/nope/guess', json={'guess': 'hello'}).status_code == 404


def test_menu_actions(client, game_id):
    url = f'/api/game/{game_id}/action'

    response = client.post(url, json={'action': 'open_settings'})
    assert response.get_json()['state']['state'] == 'menu'

    response = client.post(url, json={'action': 'go_back'})
    assert response.get_json()['state']['state'] == 'play'

    assert client.post(url, json={'action': 'retry'}).status_code == 409
    assert client.post(url, json={'action': 'dance'}).status_code == 400

    client.post(url, json={'action': 'open_settings'})
    response = client.post(url, json={'action': 'start_game', 'language': 'alt', 'max_attempts': 4})
    data = response.get_json()
    assert response.status_code == 200
    assert data['state']['options']['language'] == 'alt'
    assert data['state']['max_attempts'] == 4


def test_share(client, game_id):
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'world'})

    response = client.get(f'/api/game/{game_id}/share')

    assert response.status_code == 200
    assert response.get_json()['share'].startswith('wordl ')
    assert ' 1/5\n' in response.get_json()['share']


def test_delete_game(client, game_id):
    assert client.delete(f'/api/game/{game_id}').status_code == 200
    assert client.delete(f'/api/game/{game_id}').status_code == 404
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_languages(client):
    data = client.get('/api/languages').get_json()

    assert data['ready']
    names = {language['name']: language for language in data['languages']}
    assert names['english-us']['word_lengths'] == [4, 5]


def test_health(client, game_id):
    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['assets_ready']
    assert data['log_stats']['log_file'].endswith('.log')


def last_state(received):
    states = [message for message in received if message['name'] == 'game_state']
    return states[-1]['args'][0]


def test_websocket_keys(app_and_socketio, client, game_id):
    app, socketio = app_and_socketio
    ws = socketio.test_client(app)

    ws.emit('join_game', {'game_id': game_id})
    assert last_state(ws.get_received())['state']['state'] == 'play'

    for key in 'hellx':
        ws.emit('key', {'game_id': game_id, 'key': key})
    ws.emit('key', {'game_id': game_id, 'key': 'BACKSPACE'})
    ws.emit('key', {'game_id': game_id, 'key': 'o'})
    ws.emit('key', {'game_id': game_id, 'key': 'ENTER'})

    message = last_state(ws.get_received())
    assert message['outcome'] == 'WON'
    assert message['state']['state'] == 'win'


def test_websocket_requires_known_game(app_and_socketio):
    app, socketio = app_and_socketio
    ws = socketio.test_client(app)

    ws.emit('submit_guess', {'game_id': 'nope', 'guess': 'hello'})

    received = ws.get_received()
    assert received[-1]['name'] == 'error'
