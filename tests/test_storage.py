import io
import os
import pytest
from werkzeug.datastructures import FileStorage
from app.services.storage import LocalImageStorage, ImageStorageError


def upload(name, body=b'img'):
    return FileStorage(stream=io.BytesIO(body), filename=name)


def test_saves_with_unique_safe_name(app, tmp_path):
    storage = LocalImageStorage(upload_folder=str(tmp_path / 'imgs'))
    first = storage.save(upload('../../etc/Shop Front.JPG'))
    second = storage.save(upload('../../etc/Shop Front.JPG'))

    assert first != second
    assert first.startswith('/uploads/')
    assert first.endswith('_etc_Shop_Front.JPG')
    stored = tmp_path / 'imgs' / first.rsplit('/', 1)[1]
    assert stored.read_bytes() == b'img'


def test_rejects_disallowed_extension(app, tmp_path):
    storage = LocalImageStorage(upload_folder=str(tmp_path))
    with pytest.raises(ImageStorageError):
        storage.save(upload('script.sh'))
    with pytest.raises(ImageStorageError):
        storage.save(upload('noextension'))
    assert os.listdir(tmp_path) == []


def test_defaults_to_configured_folder_and_prefix(app):
    storage = LocalImageStorage(url_prefix='/media/')
    ref = storage.save(upload('logo.png'))
    assert ref.startswith('/media/')
    assert os.path.exists(os.path.join(app.config['UPLOAD_FOLDER'], ref.rsplit('/', 1)[1]))
