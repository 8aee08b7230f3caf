"""S3 client factory.

Builds one boto3 S3 client from static credentials held in settings
(``AWS_ACCESS_KEY`` / ``AWS_SECRET_KEY`` / ``AWS_REGION``).
"""

import logging
from functools import lru_cache

import boto3
from botocore.config import Config

from app.config import settings

logger = logging.getLogger(__name__)


def _require(name: str) -> str:
    value = getattr(settings, name)
    if not value:
        raise RuntimeError(f"{name} is not configured")
    return value


@lru_cache(maxsize=1)
def get_s3_client():  # type: ignore[no-untyped-def]
    config_kwargs: dict = {"signature_version": "s3v4"}
    if settings.S3_ENDPOINT_URL:
        config_kwargs["s3"] = {"addressing_style": "path"}

    kwargs: dict = {
        "service_name": "s3",
        "region_name": _require("AWS_REGION"),
        "aws_access_key_id": _require("AWS_ACCESS_KEY"),
        "aws_secret_access_key": _require("AWS_SECRET_KEY"),
        "config": Config(**config_kwargs),
    }
    if settings.S3_ENDPOINT_URL:
        kwargs["endpoint_url"] = settings.S3_ENDPOINT_URL

    logger.info("Creating S3 client for region %s", kwargs["region_name"])
    return boto3.client(**kwargs)
