"""Tests for the session store, job queue and content store adapters."""

from common.constants import QUEUE_NAME, SESSION_TTL_SECONDS, THUMBNAIL_TASK


class TestSessionStore:

    def test_create_get_delete(self, sessions, redis_client):
        sessions.create('tok', 'user-1')
        assert sessions.get_user_id('tok') == 'user-1'
        assert 0 < redis_client.ttl('auth_tok') <= SESSION_TTL_SECONDS

        sessions.delete('tok')
        assert sessions.get_user_id('tok') is None

    def test_empty_token(self, sessions):
        assert sessions.get_user_id('') is None
        assert sessions.get_user_id(None) is None

    def test_is_alive(self, sessions):
        assert sessions.is_alive() is True


class TestJobQueue:

    def test_enqueue_references_task_by_path(self, queue):
        first = queue.enqueue({'fileId': 'a', 'userId': 'u'})
        second = queue.enqueue({'fileId': 'b', 'userId': 'u'})

        assert queue.name == QUEUE_NAME
        assert queue.pending_count() == 2
        assert queue.queue.job_ids == [first.id, second.id]
        assert first.func_name == THUMBNAIL_TASK
        assert first.timeout == queue.job_timeout

    def test_nothing_failed_initially(self, queue):
        assert queue.failed_count() == 0
        assert queue.failed_job_ids() == []


class TestContentStore:

    def test_write_creates_root(self, storage):
        assert not storage.root.exists()
        path = storage.write_new(b'data')
        assert storage.root.is_dir()
        assert storage.read(path) == b'data'

    def test_variants(self, storage):
        path = storage.write_new(b'original')
        assert not storage.exists(path, 100)

        storage.write_variant(path, 100, b'small')
        assert storage.exists(path, 100)
        assert storage.read(path, 100) == b'small'
        assert storage.read(path) == b'original'
