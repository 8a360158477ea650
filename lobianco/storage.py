# lobianco/storage.py

import enum
import logging
import mimetypes
import os
import re
import time
import unicodedata

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app

from lobianco.errors import StorageError

logger = logging.getLogger(__name__)

CACHE_CONTROL = 'max-age=3600'
DEFAULT_STEM = 'arquivo'
DEFAULT_PUBLIC_BASE_URL = 'http://localhost:5000'


class StorageBucket(enum.Enum):
    CARROSSEL = 'carrossel'
    INVESTIMENTOS = 'investimentos'
    CONFIG = 'config'


def sanitize_filename(filename):
    """
    Lower-cases the name, strips accents, turns every character outside
    [a-z0-9.-] into a hyphen, collapses hyphen runs and trims hyphens from
    both ends. Applying it twice gives the same result.
    """
    name = unicodedata.normalize('NFD', filename.lower())
    name = ''.join(ch for ch in name if not unicodedata.combining(ch))
    name = re.sub(r'[^a-z0-9.-]', '-', name)
    name = re.sub(r'-+', '-', name)
    return name.strip('-')


def build_object_key(filename, now=None):
    millis = int((now if now is not None else time.time()) * 1000)
    return f"{millis}-{sanitize_filename(filename) or DEFAULT_STEM}"


def guess_content_type(filename):
    return mimetypes.guess_type(filename)[0] or 'application/octet-stream'


class Storage:
    def save_bytes(self, bucket, key, data, *, content_type=None):
        """Writes one object and returns its public URL."""
        raise NotImplementedError


class LocalStorage(Storage):
    """
    Keeps objects on disk under base_dir/<bucket>/<key>. URLs are absolute,
    under public_base, which points at the site's /uploads route.
    """

    def __init__(self, base_dir, public_base):
        self.base_dir = base_dir
        self.public_base = public_base.rstrip('/')

    def save_bytes(self, bucket, key, data, *, content_type=None):
        bucket_dir = os.path.join(self.base_dir, bucket.value)
        try:
            os.makedirs(bucket_dir, exist_ok=True)
            with open(os.path.join(bucket_dir, key), 'wb') as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Falha ao gravar {key}: {e}") from e
        return f"{self.public_base}/{bucket.value}/{key}"


class S3Storage(Storage):
    """S3-compatible object storage; each StorageBucket is a bucket of the same name."""

    def __init__(self, *, endpoint_url, access_key, secret_key, region=None, public_base_url=None, client=None):
        if client is None:
            cfg = BotoConfig(signature_version='s3v4', s3={'addressing_style': 'path'})
            client = boto3.client(
                's3',
                endpoint_url=endpoint_url,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                region_name=region,
                config=cfg,
            )
        self.client = client
        self.public_base_url = public_base_url.rstrip('/') if public_base_url else None

    def save_bytes(self, bucket, key, data, *, content_type=None):
        extra_args = {'CacheControl': CACHE_CONTROL}
        if content_type:
            extra_args['ContentType'] = content_type
        try:
            self.client.put_object(Bucket=bucket.value, Key=key, Body=data, **extra_args)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Falha ao enviar {key}: {e}") from e
        if self.public_base_url:
            return f"{self.public_base_url}/{bucket.value}/{key}"
        endpoint = self.client.meta.endpoint_url.rstrip('/')
        return f"{endpoint}/{bucket.value}/{key}"


def create_storage(config):
    backend = (config.get('STORAGE_BACKEND') or 'local').lower()
    if backend == 's3':
        endpoint = config.get('S3_ENDPOINT_URL')
        access_key = config.get('S3_ACCESS_KEY_ID')
        secret_key = config.get('S3_SECRET_ACCESS_KEY')
        if not (endpoint and access_key and secret_key):
            raise StorageError("S3 storage is not fully configured")
        return S3Storage(
            endpoint_url=endpoint,
            access_key=access_key,
            secret_key=secret_key,
            region=config.get('S3_REGION'),
            public_base_url=config.get('S3_PUBLIC_BASE_URL'),
        )
    site_url = (config.get('PUBLIC_BASE_URL') or DEFAULT_PUBLIC_BASE_URL).rstrip('/')
    return LocalStorage(base_dir=config['UPLOAD_FOLDER'], public_base=f"{site_url}/uploads")


def get_storage():
    """The app's storage backend, built on first use from its config."""
    storage = current_app.extensions.get('storage')
    if storage is None:
        storage = create_storage(current_app.config)
        current_app.extensions['storage'] = storage
        logger.info(f"Storage backend ready: {type(storage).__name__}")
    return storage
