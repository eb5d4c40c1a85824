"""Test configuration and shared fixtures"""

import os

import pytest
from fastapi.testclient import TestClient

from ffportal.app import app
from ffportal.config import Config, get_config
from ffportal.db import DatabaseConnection

ADMIN_USERNAME = "admin@example.com"
ADMIN_PASSWORD = "admin-password"


def remove_database(config: Config) -> None:
    DatabaseConnection.dispose(config.database_url)
    if os.path.exists(config.database_path):
        os.remove(config.database_path)


@pytest.fixture(scope="class")
def test_config() -> Config:
    """Configuration of the app under test, test classes may override it"""
    return Config(
        # overwrite application name so it will use another database file
        app_name="ffportal-test",
        database_url_env=None,
        secret_key="test-secret-key",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        seed_demo_data=False,
        ratio_reference_check=True,
        cloudinary_cloud_name="demo-cloud",
        cloudinary_api_key="123456789",
        cloudinary_api_secret="cloudinary-secret",
        debug=False,
    )


# each test class have it's own empty database
@pytest.fixture(scope="class")
def test_app(test_config: Config):
    remove_database(test_config)
    app.dependency_overrides = {get_config: lambda: test_config}
    # create tables and the admin user
    DatabaseConnection(config=test_config)

    client = TestClient(app)
    if test_config.admin_password:
        r = client.post(
            "/login",
            json={
                "username": test_config.admin_username,
                "password": test_config.admin_password,
            },
        )
        assert r.status_code == 200, r.text
        # pass admin token for all requests
        client.headers["Authorization"] = f"Bearer {r.json()['token']}"
    yield client

    app.dependency_overrides = {}
    # clean up test database file after tests
    remove_database(test_config)


@pytest.fixture
def anonymous_client(test_app: TestClient):
    """Client of the same app that sends no credentials"""
    return TestClient(app)


@pytest.fixture
def db_session(test_app: TestClient, test_config: Config):
    """Plain session on the test database, for service level tests"""
    session = DatabaseConnection(config=test_config).get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
