import pytest

from tuitioncentre.admin import Admin
from tuitioncentre.db import Database


@pytest.fixture
def db():
    database = Database(":memory:")
    database.create_schema()
    database.execute(
        "INSERT INTO admin (AdminID, AdminPass) VALUES (?, ?)", ("ADM01", "password")
    )
    yield database
    database.close()


def test_login_succeeds_with_correct_credentials(db):
    admin = Admin("ADM01", "password")
    assert admin.login(db) is True
    assert admin.admin_id == "ADM01"
    assert admin.admin_pass == "password"


def test_login_fails_with_wrong_password(db):
    assert Admin("ADM01", "secret").login(db) is False


def test_login_fails_for_unknown_admin(db):
    assert Admin("NOPE", "password").login(db) is False


def test_default_admin_cannot_log_in(db):
    admin = Admin()
    assert (admin.admin_id, admin.admin_pass) == ("", "")
    assert admin.login(db) is False