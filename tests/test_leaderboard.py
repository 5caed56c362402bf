from eventboard.models import LeaderboardEntry


def test_empty_leaderboard(client):
    assert client.get('/api/leaderboard').get_json() == {'status': 'success', 'leaderboard': []}


def test_sorted_by_points_descending(client, register, make_task, award):
    task_id = make_task()
    scores = {'low@x.com': 5, 'high@x.com': 50, 'mid@x.com': 20}
    for email, points in scores.items():
        register(email=email, name=email.split('@')[0])
        client.post('/api/submit-task', json={'email': email, 'taskId': task_id, 'link': 'l'})
        award(email, task_id, points)

    for _ in range(3):
        board = client.get('/api/leaderboard').get_json()['leaderboard']
        assert [row['name'] for row in board] == ['high', 'mid', 'low']
        assert [row['points'] for row in board] == [50, 20, 5]


def test_row_shape(client, register, make_task, award):
    task_id = make_task()
    register()
    client.post('/api/submit-task', json={'email': 'a@x.com', 'taskId': task_id, 'link': 'l'})
    award('a@x.com', task_id, 20)
    assert client.get('/api/leaderboard').get_json()['leaderboard'] == [
        {'name': 'Asha', 'college': 'CUSAT', 'points': 20},
    ]


def test_school_representative_has_no_college(client, register, make_task, award):
    task_id = make_task()
    register(representative_type='school')
    client.post('/api/submit-task', json={'email': 'a@x.com', 'taskId': task_id, 'link': 'l'})
    award('a@x.com', task_id, 3)
    row = client.get('/api/leaderboard').get_json()['leaderboard'][0]
    assert row['college'] == ''


def test_unknown_user_fallback(client, session, register):
    register()
    session.add(LeaderboardEntry(user_email='a@x.com', total_points=4))
    session.add(LeaderboardEntry(user_email='ghost@x.com', total_points=9))
    session.commit()

    board = client.get('/api/leaderboard').get_json()['leaderboard']
    assert board == [
        {'name': 'Unknown User', 'college': 'Unknown College', 'points': 9},
        {'name': 'Asha', 'college': 'CUSAT', 'points': 4},
    ]


def test_end_to_end(client, register):
    assert register().status_code == 200
    ok = client.post('/api/sign-in', json={'email': 'a@x.com', 'password': 'pw1234'})
    assert ok.get_json()['status'] == 'success'
    bad = client.post('/api/sign-in', json={'email': 'a@x.com', 'password': 'wrong'})
    assert bad.get_json()['message'] == 'Invalid credentials'

    resp = client.post('/api/admin/upload-task',
                       json={'title': 'T1', 'description': 'D', 'points': 20})
    assert resp.get_json()['status'] == 'success'
    task_id = client.get('/api/tasks').get_json()['tasks'][0]['id']

    resp = client.post('/api/submit-task',
                       json={'email': 'a@x.com', 'taskId': task_id, 'link': 'http://drive/x'})
    assert resp.get_json()['status'] == 'success'
    resp = client.post('/api/admin/update-points',
                       json={'email': 'a@x.com', 'taskId': task_id, 'pointsAwarded': 20})
    assert resp.get_json()['status'] == 'success'

    board = client.get('/api/leaderboard').get_json()['leaderboard']
    assert board == [{'name': 'Asha', 'college': 'CUSAT', 'points': 20}]
