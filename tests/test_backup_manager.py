import os
from datetime import datetime

import pytest

from er_save_copy.core.backup_manager import BackupManager
from er_save_copy.core.errors import BackupError


@pytest.fixture
def save_path(tmp_path):
    path = tmp_path / "ER0000.sl2"
    path.write_bytes(b"live save")
    return path


def test_default_location_is_next_to_save(save_path, clock):
    manager = BackupManager(clock=clock)

    path = manager.get_next_backup_path(save_path)

    assert path == save_path.parent / "SaveCopyBackups" / "ER0000_2026-01-16_143052.sl2"


def test_configured_location(tmp_path, save_path, clock):
    manager = BackupManager(tmp_path / "elsewhere", clock=clock)
    assert manager.get_next_backup_path(save_path).parent == tmp_path / "elsewhere" / save_path.parent.name


def test_name_collision_gets_counter(tmp_path, save_path):
    manager = BackupManager(tmp_path / "backups", clock=lambda: datetime(2026, 1, 1))

    first = manager.create_backup(save_path, b"one")
    second = manager.create_backup(save_path, b"two")

    assert first.name == "ER0000_2026-01-01_000000.sl2"
    assert second.name == "ER0000_2026-01-01_000000_1.sl2"
    assert first.read_bytes() == b"one"
    assert second.read_bytes() == b"two"


def test_create_backup_writes_data(tmp_path, save_path, clock):
    manager = BackupManager(tmp_path / "backups", clock=clock)

    backup = manager.create_backup(save_path, b"previous content")

    assert backup.read_bytes() == b"previous content"
    assert manager.list_backups(save_path) == [backup]


def test_rotation_keeps_newest(tmp_path, save_path, clock):
    manager = BackupManager(tmp_path / "backups", max_backups=2, clock=clock)

    created = [manager.create_backup(save_path, bytes([n])) for n in range(4)]

    remaining = manager.list_backups(save_path)
    assert remaining == [created[3], created[2]]
    assert not created[0].exists()
    assert not created[1].exists()


def test_rotation_ignores_other_saves(tmp_path, save_path, clock):
    manager = BackupManager(tmp_path / "backups", max_backups=1, clock=clock)
    backups = manager.backup_dir_for(save_path)
    backups.mkdir(parents=True)
    other = backups / "ER0000_2020-01-01_000000.co2"
    other.write_bytes(b"coop")

    manager.create_backup(save_path, b"a")
    manager.create_backup(save_path, b"b")

    assert other.exists()
    assert len(manager.list_backups(save_path)) == 1


def test_list_backups_without_directory(tmp_path, save_path):
    assert BackupManager(tmp_path / "missing").list_backups(save_path) == []


def test_unwritable_location_raises_backup_error(tmp_path, save_path, clock):
    blocker = tmp_path / "not_a_dir"
    blocker.write_bytes(b"")
    manager = BackupManager(blocker, clock=clock)

    with pytest.raises(BackupError):
        manager.create_backup(save_path, b"data")


def test_remove_game_backup(save_path):
    game_backup = save_path.with_name("ER0000.sl2.bak")
    game_backup.write_bytes(b"stale")
    manager = BackupManager()

    assert manager.remove_game_backup(save_path)
    assert not game_backup.exists()
    assert save_path.exists()


def test_remove_game_backup_when_absent(save_path):
    assert not BackupManager().remove_game_backup(save_path)


def test_max_backups_must_be_positive():
    with pytest.raises(ValueError):
        BackupManager(max_backups=0)


def test_accounts_sharing_a_location_rotate_separately(tmp_path, clock):
    root = tmp_path / "backups"
    first_account = tmp_path / "76561198000000001" / "ER0000.sl2"
    second_account = tmp_path / "76561198000000002" / "ER0000.sl2"
    manager = BackupManager(root, max_backups=2, clock=clock)

    kept = manager.create_backup(first_account, b"first")
    manager.create_backup(second_account, b"second 1")
    manager.create_backup(second_account, b"second 2")
    manager.create_backup(second_account, b"second 3")

    assert kept.exists()
    assert kept.parent == root / "76561198000000001"
    assert manager.list_backups(first_account) == [kept]
    assert len(manager.list_backups(second_account)) == 2


def test_order_follows_name_not_modification_time(tmp_path, save_path, clock):
    manager = BackupManager(tmp_path / "backups", clock=clock)
    oldest, middle, newest = (manager.create_backup(save_path, bytes([n])) for n in range(3))
    modified = newest.stat().st_mtime + 60
    os.utime(oldest, (modified, modified))

    assert manager.list_backups(save_path) == [newest, middle, oldest]


def test_counter_orders_numerically(tmp_path, save_path):
    manager = BackupManager(tmp_path / "backups", max_backups=20, clock=lambda: datetime(2026, 1, 1))

    created = [manager.create_backup(save_path, bytes([n])) for n in range(12)]

    assert created[11].name == "ER0000_2026-01-01_000000_11.sl2"
    assert manager.list_backups(save_path) == created[::-1]


def test_rotation_removes_oldest_by_name(tmp_path, save_path, clock):
    manager = BackupManager(tmp_path / "backups", max_backups=2, clock=clock)
    oldest = manager.create_backup(save_path, b"0")
    second = manager.create_backup(save_path, b"1")
    modified = second.stat().st_mtime + 60
    os.utime(oldest, (modified, modified))

    newest = manager.create_backup(save_path, b"2")

    assert not oldest.exists()
    assert manager.list_backups(save_path) == [newest, second]
