from daily_wordle.services.word_selector import select_word

from conftest import TODAY, WORDS

SECRET = select_word(WORDS, TODAY)


def test_today(client):
    response = client.get('/api/today')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['state']['outcome'] == 'playing'
    assert data['state']['answer'] is None
    assert data['state']['date'] == '2024-01-01'
    assert data['streak'] == 0
    assert data['already_played'] is False


def test_guess_requires_body(client):
    response = client.post('/api/guess', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_invalid_word_rejected(client):
    response = client.post('/api/guess', json={'guess': 'zzzzz'})
    assert response.status_code == 400
    data = response.get_json()
    assert data['error'] == 'Not a valid word'
    assert data['state']['remaining_attempts'] == 6


def test_winning_guess(client):
    response = client.post('/api/guess', json={'guess': SECRET})
    assert response.status_code == 200
    data = response.get_json()
    assert data['state']['outcome'] == 'win'
    assert data['state']['answer'] == SECRET
    assert data['streak'] == 1
    assert data['persisted'] is True

    response = client.post('/api/guess', json={'guess': SECRET})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'

    data = client.get('/api/today').get_json()
    assert data['already_played'] is True


def test_guess_letters_reported(client):
    wrong = next(w for w in WORDS if w != SECRET)
    data = client.post('/api/guess', json={'guess': wrong}).get_json()
    letters = data['state']['guesses'][0]['letters']
    assert ''.join(entry['letter'] for entry in letters) == wrong
    assert all(entry['status'] in ('correct', 'present', 'absent') for entry in letters)


def test_streak_and_history(client):
    client.post('/api/guess', json={'guess': SECRET})

    data = client.get('/api/streak').get_json()
    assert data['streak'] == 1
    assert data['statistics']['games_played'] == 1

    history = client.get('/api/history').get_json()['history']
    assert len(history) == 1
    assert history[0]['word'] == SECRET
    assert history[0]['won'] is True


def test_health(client):
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['word_count'] == len(WORDS)
