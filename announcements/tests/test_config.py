from announcements.config import StoreConfig


def test_from_env_reads_recognized_options():
    cfg = StoreConfig.from_env({
        "MEGAPHONE_DB_SERVER": "db.example.ac.uk",
        "MEGAPHONE_DB_DATABASE": "megaphone",
        "MEGAPHONE_DB_USERNAME": "reader",
        "MEGAPHONE_DB_PASSWORD": "s3cret",
        "MEGAPHONE_DB_PORT": "3307",
    })
    assert cfg == StoreConfig("db.example.ac.uk", "megaphone", "reader", "s3cret", 3307)
    assert cfg.is_configured


def test_unconfigured_without_server():
    assert not StoreConfig.from_env({}).is_configured


def test_as_database_builds_mysql_entry():
    db = StoreConfig("db", "megaphone", "reader", "pw").as_database()
    assert db["ENGINE"] == "django.db.backends.mysql"
    assert (db["HOST"], db["NAME"], db["USER"], db["PASSWORD"]) == ("db", "megaphone", "reader", "pw")
    assert db["PORT"] == ""
    assert db["CONN_MAX_AGE"] == 0


def test_repr_hides_password():
    assert "pw" not in repr(StoreConfig("db", "megaphone", "reader", "pw"))
