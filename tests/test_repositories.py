"""Integration tests for the MongoDB repositories."""

from common.repositories.file_repository import FileRepository
from common.repositories.user_repository import UserRepository
from common.types import FileRecord


class TestUserRepository:
    """Test UserRepository lookups."""

    def test_create_and_fetch(self, database):
        repo = UserRepository(database)
        user = repo.create_user('a@b.com', 'hash123')

        assert repo.get_by_email('a@b.com') == user
        assert repo.get_by_user_id(user.user_id) == user

    def test_missing_user(self, database):
        repo = UserRepository(database)
        assert repo.get_by_email('nobody@b.com') is None
        assert repo.get_by_user_id('5f1e7d35c7ba06511e683b21') is None
        assert repo.get_by_user_id('not-an-id') is None


class TestFileRepository:
    """Test FileRepository queries and updates."""

    def test_create_folder_without_local_path(self, database):
        owner = UserRepository(database).create_user('a@b.com', 'hash')
        repo = FileRepository(database)

        record = repo.create_file(owner.user_id, 'docs', 'folder', False, '0')

        assert record.local_path is None
        assert 'localPath' not in database.files.find_one({'name': 'docs'})
        assert repo.get_by_id(record.file_id) == record

    def test_owner_scoped_lookup(self, database):
        users = UserRepository(database)
        alice = users.create_user('alice@b.com', 'hash')
        bob = users.create_user('bob@b.com', 'hash')
        repo = FileRepository(database)
        record = repo.create_file(alice.user_id, 'a.txt', 'file', False, '0', '/tmp/x')

        assert repo.get_by_id_and_owner(record.file_id, alice.user_id) == record
        assert repo.get_by_id_and_owner(record.file_id, bob.user_id) is None
        assert repo.get_by_id_and_owner('bad', alice.user_id) is None

    def test_set_public_returns_updated_record(self, database):
        owner = UserRepository(database).create_user('a@b.com', 'hash')
        repo = FileRepository(database)
        record = repo.create_file(owner.user_id, 'a.txt', 'file', False, '0', '/tmp/x')

        updated = repo.set_public(record.file_id, owner.user_id, True)

        assert updated.is_public is True
        assert updated.local_path == '/tmp/x'
        assert repo.get_by_id(record.file_id).is_public is True

    def test_set_public_unknown_file(self, database):
        owner = UserRepository(database).create_user('a@b.com', 'hash')
        repo = FileRepository(database)
        assert repo.set_public('5f1e7d35c7ba06511e683b21', owner.user_id, True) is None


def test_file_record_wire_format():
    record = FileRecord(
        file_id='f1', user_id='u1', name='a.txt', type='file',
        is_public=True, parent_id='0', local_path='/tmp/files_manager/x',
    )
    assert record.to_dict() == {
        'id': 'f1', 'userId': 'u1', 'name': 'a.txt', 'type': 'file',
        'isPublic': True, 'parentId': '0', 'localPath': '/tmp/files_manager/x',
    }
