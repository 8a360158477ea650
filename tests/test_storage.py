"""Tests for the object storage adapter."""

import re

import boto3
import pytest
from botocore.stub import Stubber

from lobianco.errors import StorageError
from lobianco.storage import (
    LocalStorage,
    S3Storage,
    StorageBucket,
    build_object_key,
    create_storage,
    guess_content_type,
    sanitize_filename,
)

NAMES = [
    'Minha Foto São Paulo!.PNG',
    'Foto Ótima!.PNG',
    '  espaços   demais .jpg',
    '---já-com-hífens---.webp',
    'Ação_Ünica (1).jpeg',
    'simple.png',
    '...',
]


class TestSanitizeFilename:

    def test_example(self):
        assert sanitize_filename('Minha Foto São Paulo!.PNG') == 'minha-foto-sao-paulo-.png'

    def test_accents_are_stripped(self):
        assert sanitize_filename('Ação.jpg') == 'acao.jpg'

    def test_punctuation_and_case(self):
        assert sanitize_filename('Foto Ótima!.PNG') == 'foto-otima-.png'

    @pytest.mark.parametrize('name', NAMES)
    def test_output_alphabet(self, name):
        result = sanitize_filename(name)
        assert re.fullmatch(r'[a-z0-9.-]*', result)
        assert '--' not in result
        assert not result.startswith('-')
        assert not result.endswith('-')

    @pytest.mark.parametrize('name', NAMES)
    def test_idempotent(self, name):
        once = sanitize_filename(name)
        assert sanitize_filename(once) == once


def test_build_object_key():
    assert build_object_key('Foto Nova.PNG', now=1700000000.5) == '1700000000500-foto-nova.png'


def test_build_object_key_for_unusable_name():
    assert build_object_key('!!!', now=1700000000.5) == '1700000000500-arquivo'
    assert build_object_key('', now=1700000000.5) == '1700000000500-arquivo'


def test_build_object_key_uses_current_time():
    assert re.fullmatch(r'\d{13}-logo\.png', build_object_key('logo.png'))


def test_guess_content_type():
    assert guess_content_type('foto.png') == 'image/png'
    assert guess_content_type('arquivo.sem-tipo') == 'application/octet-stream'


class TestLocalStorage:

    def test_save_bytes(self, tmp_path):
        storage = LocalStorage(str(tmp_path), 'https://lobianco.example.com/uploads/')
        url = storage.save_bytes(StorageBucket.INVESTIMENTOS, '1-casa.png', b'data')
        assert url == 'https://lobianco.example.com/uploads/investimentos/1-casa.png'
        assert (tmp_path / 'investimentos' / '1-casa.png').read_bytes() == b'data'

    def test_write_failure(self, tmp_path):
        blocked = tmp_path / 'blocked'
        blocked.write_text('not a directory')
        storage = LocalStorage(str(blocked), 'http://localhost/uploads')
        with pytest.raises(StorageError):
            storage.save_bytes(StorageBucket.CONFIG, 'logo.png', b'data')


class TestS3Storage:

    @pytest.fixture
    def client(self):
        return boto3.client(
            's3',
            endpoint_url='https://storage.example.com',
            aws_access_key_id='test',
            aws_secret_access_key='test',
            region_name='us-east-1',
        )

    def test_put_object(self, client):
        storage = S3Storage(endpoint_url=None, access_key=None, secret_key=None, client=client)
        with Stubber(client) as stubber:
            stubber.add_response('put_object', {}, expected_params={
                'Bucket': 'carrossel',
                'Key': '1-slide.png',
                'Body': b'png-bytes',
                'CacheControl': 'max-age=3600',
                'ContentType': 'image/png',
            })
            url = storage.save_bytes(StorageBucket.CARROSSEL, '1-slide.png', b'png-bytes',
                                     content_type='image/png')
            stubber.assert_no_pending_responses()
        assert url == 'https://storage.example.com/carrossel/1-slide.png'

    def test_public_base_url(self, client):
        storage = S3Storage(endpoint_url=None, access_key=None, secret_key=None, client=client,
                            public_base_url='https://cdn.example.com/public/')
        with Stubber(client) as stubber:
            stubber.add_response('put_object', {})
            url = storage.save_bytes(StorageBucket.CONFIG, '1-logo.png', b'x')
        assert url == 'https://cdn.example.com/public/config/1-logo.png'

    def test_client_error(self, client):
        storage = S3Storage(endpoint_url=None, access_key=None, secret_key=None, client=client)
        with Stubber(client) as stubber:
            stubber.add_client_error('put_object', service_error_code='NoSuchBucket', http_status_code=404)
            with pytest.raises(StorageError):
                storage.save_bytes(StorageBucket.CARROSSEL, '1-slide.png', b'x')


class TestCreateStorage:

    def test_local_is_default(self, tmp_path):
        storage = create_storage({'UPLOAD_FOLDER': str(tmp_path)})
        assert isinstance(storage, LocalStorage)
        assert storage.public_base == 'http://localhost:5000/uploads'

    def test_local_urls_use_public_base_url(self, tmp_path):
        storage = create_storage({'UPLOAD_FOLDER': str(tmp_path), 'PUBLIC_BASE_URL': 'https://lobianco.example.com/'})
        url = storage.save_bytes(StorageBucket.CARROSSEL, '1-a.png', b'data')
        assert url == 'https://lobianco.example.com/uploads/carrossel/1-a.png'

    def test_s3(self):
        storage = create_storage({
            'STORAGE_BACKEND': 's3',
            'S3_ENDPOINT_URL': 'https://storage.example.com',
            'S3_ACCESS_KEY_ID': 'key',
            'S3_SECRET_ACCESS_KEY': 'secret',
            'S3_REGION': 'us-east-1',
        })
        assert isinstance(storage, S3Storage)

    def test_s3_needs_credentials(self):
        with pytest.raises(StorageError):
            create_storage({'STORAGE_BACKEND': 's3', 'S3_ENDPOINT_URL': 'https://storage.example.com'})
