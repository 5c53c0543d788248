# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Tests for migration discovery and pending-migration selection."""

import textwrap
import pytest

from stud_cli.migrations import MigrationRegistry, MigrationScope
from stud_cli.migrations.global_migrations.m202501150000001_git_token_format import GitTokenFormat
from helpers.config_helpers import RecordingMigration


@pytest.fixture
def registry():
    return MigrationRegistry()


def test_discovers_shipped_global_migrations(registry):
    migrations = registry.discover_global_migrations()

    assert [m.id for m in migrations] == ['202501150000001']
    assert isinstance(migrations[0], GitTokenFormat)
    assert all(m.scope == MigrationScope.GLOBAL for m in migrations)


def test_project_migrations_directory_may_be_empty(registry):
    assert registry.discover_project_migrations() == []


def test_missing_package_yields_no_migrations():
    registry = MigrationRegistry(global_package='stud_cli.migrations.does_not_exist')

    assert registry.discover_global_migrations() == []


def test_discovery_filters_scope_and_sorts(tmp_path, monkeypatch):
    package = tmp_path / "sample_migrations"
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "m202502010000001_second.py").write_text(textwrap.dedent("""
        from stud_cli.migrations import Migration, MigrationScope

        class Second(Migration):
            id = '202502010000001'
            description = 'second'
            scope = MigrationScope.GLOBAL

            def up(self, config):
                return config

            def down(self, config):
                return config
    """))
    (package / "m202501010000001_first.py").write_text(textwrap.dedent("""
        from stud_cli.migrations import Migration, MigrationScope

        class First(Migration):
            id = '202501010000001'
            description = 'first'
            scope = MigrationScope.GLOBAL

            def up(self, config):
                return config

            def down(self, config):
                return config
    """))
    (package / "m202503010000001_wrong_scope.py").write_text(textwrap.dedent("""
        from stud_cli.migrations import Migration, MigrationScope

        class WrongScope(Migration):
            id = '202503010000001'
            description = 'project migration in the global package'
            scope = MigrationScope.PROJECT

            def up(self, config):
                return config

            def down(self, config):
                return config
    """))
    (package / "m202504010000001_broken.py").write_text("raise RuntimeError('cannot import')\n")
    (package / "helpers.py").write_text("raise RuntimeError('not a migration module')\n")
    monkeypatch.syspath_prepend(str(tmp_path))

    registry = MigrationRegistry(global_package='sample_migrations')
    migrations = registry.discover_global_migrations()

    assert [m.id for m in migrations] == ['202501010000001', '202502010000001']


def test_discovered_migrations_share_context(registry):
    migration = registry.discover_global_migrations()[0]

    assert migration.context is registry.context


def test_pending_returns_all_sorted_when_nothing_ran(registry):
    available = [RecordingMigration('202501160000002'), RecordingMigration('202501160000001')]

    for version in ('0', '', None):
        pending = registry.get_pending_migrations(available, version)
        assert [m.id for m in pending] == ['202501160000001', '202501160000002']


def test_pending_returns_only_newer_migrations(registry):
    available = [
        RecordingMigration('202501160000001'),
        RecordingMigration('202501160000002'),
        RecordingMigration('202501160000003'),
    ]

    pending = registry.get_pending_migrations(available, '202501160000002')

    assert [m.id for m in pending] == ['202501160000003']


def test_pending_is_empty_when_up_to_date(registry):
    available = [RecordingMigration('202501160000001')]

    assert registry.get_pending_migrations(available, '202501160000001') == []


def test_latest_migration_id(registry):
    available = [RecordingMigration('202501160000002'), RecordingMigration('202501160000010')]

    assert registry.get_latest_migration_id(available) == '202501160000010'
    assert registry.get_latest_migration_id([]) is None


def test_migration_with_failing_constructor_is_skipped(tmp_path, monkeypatch):
    package = tmp_path / "fragile_migrations"
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "m202501010000001_fragile.py").write_text(textwrap.dedent("""
        from stud_cli.migrations import Migration, MigrationScope

        class Fragile(Migration):
            id = '202501010000001'
            description = 'cannot be built'
            scope = MigrationScope.GLOBAL

            def __init__(self, context=None):
                raise RuntimeError('missing dependency')

            def up(self, config):
                return config

            def down(self, config):
                return config

        class Sturdy(Migration):
            id = '202501010000002'
            description = 'fine'
            scope = MigrationScope.GLOBAL

            def up(self, config):
                return config

            def down(self, config):
                return config
    """))
    monkeypatch.syspath_prepend(str(tmp_path))

    registry = MigrationRegistry(global_package='fragile_migrations')

    assert [m.id for m in registry.discover_global_migrations()] == ['202501010000002']
