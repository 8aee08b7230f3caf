import pytest

from app.config import settings
from app.core import storage


@pytest.fixture(autouse=True)
def _fresh_client():
    storage.get_s3_client.cache_clear()
    yield
    storage.get_s3_client.cache_clear()


def test_s3_client_uses_configured_region_and_keys(monkeypatch):
    monkeypatch.setattr(settings, "AWS_REGION", "ap-south-1")
    monkeypatch.setattr(settings, "AWS_ACCESS_KEY", "AKIATEST")
    monkeypatch.setattr(settings, "AWS_SECRET_KEY", "secret")
    monkeypatch.setattr(settings, "S3_ENDPOINT_URL", None)

    client = storage.get_s3_client()
    assert client.meta.region_name == "ap-south-1"
    creds = client._request_signer._credentials
    assert creds.access_key == "AKIATEST"
    assert storage.get_s3_client() is client


def test_s3_client_custom_endpoint(monkeypatch):
    monkeypatch.setattr(settings, "AWS_REGION", "us-east-1")
    monkeypatch.setattr(settings, "AWS_ACCESS_KEY", "minioadmin")
    monkeypatch.setattr(settings, "AWS_SECRET_KEY", "minioadmin")
    monkeypatch.setattr(settings, "S3_ENDPOINT_URL", "http://localhost:9000")

    client = storage.get_s3_client()
    assert client.meta.endpoint_url == "http://localhost:9000"


def test_s3_client_requires_keys(monkeypatch):
    monkeypatch.setattr(settings, "AWS_REGION", "ap-south-1")
    monkeypatch.setattr(settings, "AWS_ACCESS_KEY", None)
    monkeypatch.setattr(settings, "AWS_SECRET_KEY", None)

    with pytest.raises(RuntimeError, match="AWS_ACCESS_KEY"):
        storage.get_s3_client()
