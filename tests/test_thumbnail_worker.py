"""Tests for the thumbnail worker, its rq task and the rendering helper."""

import base64
import io
from pathlib import Path

import pytest
from PIL import Image
from rq import SimpleWorker

from worker import tasks
from worker.thumbnail_worker import ThumbnailJobError, ThumbnailWorker
from worker.thumbnails import render_thumbnail


@pytest.fixture
def worker(database, storage):
    processor = ThumbnailWorker(database, storage)
    tasks.configure(processor)
    yield processor
    tasks.configure(None)


def drain(queue):
    """Run every queued job in-process, as an rq worker would."""
    SimpleWorker([queue.queue], connection=queue.client).work(burst=True)


@pytest.fixture
def headers(register_and_login):
    return register_and_login()


def upload_image(client, headers, png_bytes, **extra):
    body = {'name': 'pic.png', 'type': 'image', 'data': base64.b64encode(png_bytes).decode('ascii')}
    body.update(extra)
    response = client.post('/files', json=body, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_render_thumbnail_keeps_aspect_ratio(png_bytes):
    thumbnail = render_thumbnail(png_bytes, 100)
    with Image.open(io.BytesIO(thumbnail)) as image:
        assert image.size == (100, 75)
        assert image.format == 'PNG'


def test_render_thumbnail_rejects_non_image():
    with pytest.raises(Exception):
        render_thumbnail(b'not an image', 100)


def test_worker_writes_three_thumbnails(client, headers, queue, worker, png_bytes):
    created = upload_image(client, headers, png_bytes)

    drain(queue)
    assert queue.pending_count() == 0
    assert queue.failed_count() == 0

    for width in (500, 250, 100):
        path = Path(f"{created['localPath']}_{width}")
        assert path.is_file()
        with Image.open(path) as image:
            assert image.width == width

    response = client.get(f"/files/{created['id']}/data", params={'size': 500}, headers=headers)
    assert response.status_code == 200
    assert response.content == Path(f"{created['localPath']}_500").read_bytes()
    assert response.headers['content-type'] == 'image/png'


def test_original_still_served_without_size(client, headers, queue, worker, png_bytes):
    created = upload_image(client, headers, png_bytes, isPublic=True)
    drain(queue)
    response = client.get(f"/files/{created['id']}/data")
    assert response.content == png_bytes


@pytest.mark.parametrize('data, message', [
    ({'userId': '5f1e7d35c7ba06511e683b21'}, 'Missing fileId'),
    ({'fileId': '5f1e7d35c7ba06511e683b21'}, 'Missing userId'),
    ({'fileId': 'bad', 'userId': '5f1e7d35c7ba06511e683b21'}, 'Invalid fileId'),
    ({'fileId': '5f1e7d35c7ba06511e683b21', 'userId': 'bad'}, 'Invalid userId'),
    ({'fileId': '5f1e7d35c7ba06511e683b21', 'userId': '5f1e7d35c7ba06511e683b22'}, 'File not found'),
])
def test_invalid_jobs_fail(worker, data, message):
    with pytest.raises(ThumbnailJobError, match=message):
        worker.process_job(data)


def test_failed_job_is_recorded(worker, queue):
    job = queue.enqueue({'userId': '5f1e7d35c7ba06511e683b21'})
    drain(queue)
    assert queue.pending_count() == 0
    assert queue.failed_count() == 1
    assert queue.failed_job_ids() == [job.id]


def test_job_for_other_owner_fails(client, register_and_login, worker, png_bytes):
    alice = register_and_login('alice@b.com', 'pw')
    bob_id = client.post('/users', json={'email': 'bob@b.com', 'password': 'pw'}).json()['id']
    created = upload_image(client, alice, png_bytes)

    with pytest.raises(ThumbnailJobError, match='File not found'):
        worker.process_job({'fileId': created['id'], 'userId': bob_id})


def test_non_image_job_is_skipped(client, headers, worker):
    created = client.post('/files', json={
        'name': 'a.txt', 'type': 'file', 'data': base64.b64encode(b'abc').decode('ascii'),
    }, headers=headers).json()

    job = {'fileId': created['id'], 'userId': created['userId']}
    assert worker.process_job(job) == {}
    assert not Path(f"{created['localPath']}_500").exists()


def test_one_width_failing_does_not_stop_others(client, headers, worker, png_bytes, monkeypatch):
    created = upload_image(client, headers, png_bytes)

    def flaky_render(data, width):
        if width == 250:
            raise OSError('encoder failure')
        return render_thumbnail(data, width)

    monkeypatch.setattr('worker.thumbnail_worker.render_thumbnail', flaky_render)

    job = {'fileId': created['id'], 'userId': created['userId']}
    assert worker.process_job(job) == {500: True, 250: False, 100: True}
    assert Path(f"{created['localPath']}_500").exists()
    assert not Path(f"{created['localPath']}_250").exists()
    assert Path(f"{created['localPath']}_100").exists()


def test_task_runs_outside_rq(client, headers, worker, png_bytes):
    created = upload_image(client, headers, png_bytes)
    results = tasks.generate_thumbnails({'fileId': created['id'], 'userId': created['userId']})
    assert results == {500: True, 250: True, 100: True}
