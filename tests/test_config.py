import pytest

from config import database_uri

SQLITE = 'sqlite:///acadreq.db'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ('DATABASE_URL', 'MYSQL_HOST', 'MYSQL_USER', 'MYSQL_PASSWORD', 'MYSQL_DB'):
        monkeypatch.delenv(key, raising=False)


def test_development_defaults_to_sqlite():
    assert database_uri(SQLITE) == SQLITE


def test_database_url_wins(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'postgresql://db/acadreq')
    monkeypatch.setenv('MYSQL_HOST', 'mysql.internal')

    assert database_uri(SQLITE) == 'postgresql://db/acadreq'


def test_mysql_settings_switch_development_to_mysql(monkeypatch):
    monkeypatch.setenv('MYSQL_HOST', 'mysql.internal')
    monkeypatch.setenv('MYSQL_USER', 'acad')
    monkeypatch.setenv('MYSQL_PASSWORD', 'pw')

    assert database_uri(SQLITE) == 'mysql+pymysql://acad:pw@mysql.internal/acadreq'


def test_mysql_db_alone_uses_local_server(monkeypatch):
    monkeypatch.setenv('MYSQL_DB', 'requests')

    assert database_uri(SQLITE) == 'mysql+pymysql://root:@localhost/requests'


def test_base_config_defaults_to_local_mysql():
    assert database_uri() == 'mysql+pymysql://root:@localhost/acadreq'


def test_setup_environment_template_is_loadable(tmp_path, monkeypatch):
    from dotenv import dotenv_values
    from setup_environment import setup_environment

    monkeypatch.chdir(tmp_path)
    setup_environment()

    values = dotenv_values(tmp_path / '.env')
    # database keys ship commented out so SQLite stays the default
    assert 'DATABASE_URL' not in values
    assert 'MYSQL_HOST' not in values
    assert values['FLASK_ENV'] == 'development'
