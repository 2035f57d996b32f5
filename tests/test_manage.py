"""Tests for the administration CLI."""
import logging

import pytest
from sqlalchemy import inspect
from sqlalchemy.orm import Session, sessionmaker

from photo_visibility import database, manage
from photo_visibility.config import PUBLIC_PHOTOS_HIDDEN_KEY
from photo_visibility.infrastructure.database import Base
from photo_visibility.infrastructure.repositories import ConfigRepository


@pytest.fixture
def cli_db(engine, monkeypatch):
    """Point the CLI at the isolated database."""
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(
        database, "SessionLocal",
        sessionmaker(engine, class_=Session, expire_on_commit=False, autoflush=False),
    )
    yield engine
    logger = logging.getLogger("photo_visibility")
    logger.handlers.clear()
    logger.propagate = True


class TestManage:

    def test_no_arguments_prints_usage(self, capsys):
        assert manage.main([]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_unknown_command(self, cli_db, capsys):
        assert manage.main(["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().out

    def test_init_db_creates_tables(self, cli_db):
        Base.metadata.drop_all(cli_db)

        assert manage.main(["init-db"]) == 0
        assert {"users", "albums", "photos", "configs"} <= set(inspect(cli_db).get_table_names())

    def test_main_configures_logging(self, cli_db):
        logger = logging.getLogger("photo_visibility")
        logger.handlers.clear()

        manage.main(["help"])

        assert len(logger.handlers) == 1

    def test_set_then_get_config(self, cli_db, db_session, capsys):
        assert manage.main(["set-config", PUBLIC_PHOTOS_HIDDEN_KEY, "0"]) == 0
        assert ConfigRepository(db_session).get_bool(PUBLIC_PHOTOS_HIDDEN_KEY, True) is False

        capsys.readouterr()
        assert manage.main(["get-config", PUBLIC_PHOTOS_HIDDEN_KEY]) == 0
        assert capsys.readouterr().out.strip() == f"{PUBLIC_PHOTOS_HIDDEN_KEY} = 0"

    def test_get_unset_config(self, cli_db, capsys):
        assert manage.main(["get-config", "missing"]) == 0
        assert "missing is not set" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [["get-config"], ["set-config", "only_key"]])
    def test_missing_arguments(self, cli_db, argv, capsys):
        assert manage.main(argv) == 1
        assert "Error:" in capsys.readouterr().out
