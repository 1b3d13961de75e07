from types import SimpleNamespace
from app.services.categories import distinct_categories, filter_by_category
from models.item import Item


def fake_items(*categories):
    return [SimpleNamespace(id=i, category=c) for i, c in enumerate(categories)]


def test_distinct_categories_keeps_first_seen_order():
    items = fake_items('Grocery', 'Dairy', 'Grocery', 'Dairy')
    assert distinct_categories(items) == ['Grocery', 'Dairy']


def test_uncategorised_items_add_no_category():
    items = fake_items(None, 'Grocery', '', None)
    assert distinct_categories(items) == ['Grocery']
    assert len(filter_by_category(items, 'all')) == 4


def test_filter_by_category_exact_match():
    items = fake_items('Grocery', 'Dairy', 'grocery')
    assert [i.id for i in filter_by_category(items, 'Grocery')] == [0]
    assert filter_by_category(items, 'Toys') == []


def test_filter_all_or_empty_keeps_everything():
    items = fake_items('Grocery', 'Dairy')
    assert len(filter_by_category(items, 'all')) == 2
    assert len(filter_by_category(items, None)) == 2
    assert len(filter_by_category(items, '')) == 2


def signup_with_items(client):
    client.post('/signup', json={'email': 'cat@example.com', 'password': 'secret123', 'name': 'Cat'})
    for name, category in (('Milk', 'Dairy'), ('Rice', 'Grocery'), ('Paneer', 'Dairy')):
        client.post('/main', json={'name': name, 'cost_price': 10, 'selling_price': 12, 'category': category})


def test_categories_page_filters_by_query(client, app):
    signup_with_items(client)

    data = client.get('/main/categories?q=Dairy').get_json()['data']
    assert [i['name'] for i in data['items']] == ['Milk', 'Paneer']
    assert data['categories'] == ['Dairy', 'Grocery']
    assert data['q'] == 'Dairy'
    assert data['shopkeeper']['email'] == 'cat@example.com'

    everything = client.get('/main/categories?q=all').get_json()['data']
    assert len(everything['items']) == 3
    assert client.get('/main/categories').get_json()['data']['q'] == 'all'


def test_home_page_shares_the_category_filter(client, app):
    signup_with_items(client)
    data = client.get('/main?q=Grocery').get_json()['data']
    assert [i['name'] for i in data['items']] == ['Rice']
    assert data['categories'] == ['Dairy', 'Grocery']


def test_categories_only_list_own_items(app):
    first = app.test_client()
    signup_with_items(first)
    second = app.test_client()
    second.post('/signup', json={'email': 'new@example.com', 'password': 'secret123', 'name': 'New'})
    data = second.get('/main/categories').get_json()['data']
    assert data['items'] == []
    assert data['categories'] == []


def test_delete_from_categories_page(client, app):
    signup_with_items(client)
    milk = Item.query.filter_by(name='Milk').first()

    resp = client.delete(f'/main/categories/{milk.id}')
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['message'] == 'Item deleted successfully!'
    assert body['redirect'] == '/main/categories'
    assert Item.query.filter_by(name='Milk').count() == 0

    missing = client.delete(f'/main/categories/{milk.id}')
    assert missing.status_code == 404
    assert missing.get_json()['redirect'] == '/main/categories'
