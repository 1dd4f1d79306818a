"""Shared unit-test fixtures: a throwaway RSA service account."""
from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from fcm_push.security import ServiceAccountCredentials

TOKEN_URI = "https://oauth2.test/token"


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_private_key: rsa.RSAPrivateKey) -> str:
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture()
def service_account(private_key_pem: str) -> ServiceAccountCredentials:
    return ServiceAccountCredentials(
        project_id="demo-project",
        private_key=private_key_pem,
        private_key_id="kid-1",
        client_email="sender@demo-project.iam.gserviceaccount.com",
        token_uri=TOKEN_URI,
    )
