from datetime import datetime, timedelta
from urllib.parse import urlparse
from models import db
from models.shopkeeper import Shopkeeper, ShopkeeperSession
from app.auth import Identity, AuthError


def signup(client, email='asha@example.com', password='secret123', name='Asha', **extra):
    payload = {
        'email': email,
        'password': password,
        'name': name,
        'shop_name': 'Asha Stores',
        'location': 'MG Road',
        'city': 'Pune',
    }
    payload.update(extra)
    return client.post('/signup', json=payload)


def login(client, email='asha@example.com', password='secret123'):
    return client.post('/login', json={'email': email, 'password': password})


def location_path(resp):
    return urlparse(resp.headers['Location']).path


def test_signup_creates_account_and_session(client, app):
    resp = signup(client)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body['message'] == 'Welcome, Asha!'
    assert body['redirect'] == '/main'
    assert 'password_hash' not in body['data']['shopkeeper']
    assert app.config['SESSION_ID_COOKIE'] in resp.headers.get('Set-Cookie', '')
    assert 'HttpOnly' in resp.headers.get('Set-Cookie', '')

    shopkeeper = Shopkeeper.query.filter_by(email='asha@example.com').first()
    assert shopkeeper is not None
    assert shopkeeper.password_hash != 'secret123'
    assert ShopkeeperSession.query.filter_by(shopkeeper_id=shopkeeper.id).count() == 1

    # auto-login: protected page is reachable straight away
    assert client.get('/main').status_code == 200


def test_signup_then_login_with_same_credentials(app):
    first = app.test_client()
    signup(first, email='ravi@example.com', name='Ravi')
    first.get('/logout')

    second = app.test_client()
    resp = login(second, email='ravi@example.com')
    assert resp.status_code == 200
    assert resp.get_json()['message'] == 'Welcome back, Ravi!'
    assert second.get('/main').status_code == 200


def test_duplicate_email_rejected_and_count_unchanged(client, app):
    signup(client, email='dup@example.com')
    before = Shopkeeper.query.count()

    other = app.test_client()
    resp = signup(other, email='DUP@example.com ', name='Someone Else')
    assert resp.status_code == 409
    body = resp.get_json()
    assert body['message'] == 'Email already exists. Please log in.'
    assert body['redirect'] == '/'
    assert Shopkeeper.query.count() == before


def test_concurrent_duplicate_signup_still_conflicts(client, app, monkeypatch):
    import app.services.shopkeepers as shopkeepers

    signup(client, email='race@example.com')
    before = Shopkeeper.query.count()

    # the second request passes the lookup as if the first had not committed yet
    monkeypatch.setattr(shopkeepers, 'email_taken', lambda email: False)
    other = app.test_client()
    resp = signup(other, email='race@example.com', name='Racer')
    assert resp.status_code == 409
    body = resp.get_json()
    assert body['message'] == 'Email already exists. Please log in.'
    assert body['redirect'] == '/'
    assert Shopkeeper.query.count() == before


def test_signup_validation_error_redirects_to_signup(client, app):
    resp = client.post('/signup', json={'email': 'not-an-email', 'password': 'secret123', 'name': 'X'})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['redirect'] == '/signup'
    assert body['errors'][0]['field'] == 'email'
    assert Shopkeeper.query.count() == 0


def test_login_failure_returns_flash_and_redirect(client, app):
    signup(client)
    client.get('/logout')
    resp = login(client, password='wrong-password')
    assert resp.status_code == 401
    body = resp.get_json()
    assert body['message'] == 'Password or username is incorrect'
    assert body['redirect'] == '/'

    resp_unknown = login(client, email='nobody@example.com')
    assert resp_unknown.status_code == 401


def test_logout_then_protected_route_redirects_to_login(client, app):
    signup(client)
    assert client.get('/main').status_code == 200

    resp = client.get('/logout')
    assert resp.status_code == 200
    assert resp.get_json()['message'] == 'Logged out successfully!'
    assert ShopkeeperSession.query.count() == 0

    for path in ('/main', '/main/order', '/main/dashboard', '/main/categories', '/addlist'):
        r = client.get(path)
        assert r.status_code == 302
        assert location_path(r) == '/'


def test_logout_invalidates_session_server_side(app):
    client = app.test_client()
    signup(client)
    cookie = client.get_cookie(app.config['SESSION_ID_COOKIE'])
    sid = cookie.value
    client.get('/logout')

    # replaying the old session id no longer authenticates
    replay = app.test_client()
    replay.set_cookie(app.config['SESSION_ID_COOKIE'], sid)
    assert replay.get('/main').status_code == 302


def test_login_page_redirects_when_authenticated(client, app):
    anon = app.test_client()
    resp = anon.get('/')
    assert resp.status_code == 200
    assert resp.get_json()['data'] == {'page': 'login'}
    assert anon.get('/signup').get_json()['data'] == {'page': 'signup'}

    signup(client)
    for path in ('/', '/signup'):
        r = client.get(path)
        assert r.status_code == 302
        assert location_path(r) == '/main'


def test_expired_session_is_discarded(client, app):
    signup(client)
    record = ShopkeeperSession.query.first()
    record.expires_at = datetime.utcnow() - timedelta(minutes=1)
    db.session.commit()

    resp = client.get('/main')
    assert resp.status_code == 302
    assert ShopkeeperSession.query.count() == 0


def test_session_expiry_is_fixed_lifetime(client, app):
    signup(client)
    record = ShopkeeperSession.query.first()
    lifetime = record.expires_at - record.created_at
    assert lifetime == timedelta(days=app.config['SESSION_LIFETIME_DAYS'])


def test_injected_authenticator_is_used(client, app, monkeypatch):
    signup(client, email='kiosk@example.com', name='Kiosk')
    client.get('/logout')
    shopkeeper = Shopkeeper.query.filter_by(email='kiosk@example.com').first()
    seen = []

    class StubAuthenticator:
        def verify(self, credentials):
            seen.append(credentials['email'])
            if credentials['password'] != 'let-me-in':
                raise AuthError('denied')
            return Identity(shopkeeper_id=shopkeeper.id, email=shopkeeper.email, name='Kiosk')

    monkeypatch.setattr(app, 'authenticator', StubAuthenticator())
    assert login(client, email='kiosk@example.com', password='secret123').status_code == 401
    resp = login(client, email='kiosk@example.com', password='let-me-in')
    assert resp.status_code == 200
    assert seen == ['kiosk@example.com', 'kiosk@example.com']


def test_login_rate_limited_per_ip(client, app, monkeypatch):
    monkeypatch.setitem(app.config, 'LOGIN_LIMIT_PER_IP', '3 per minute')
    for _ in range(3):
        assert login(client, password='wrong-password').status_code == 401
    resp = login(client, password='wrong-password')
    assert resp.status_code == 429
    assert resp.get_json()['status'] == 'error'
