import json
import os

from google.cloud import storage
from google.oauth2 import service_account

from videotube.config import Settings

STORAGE_SCOPES = ["https://www.googleapis.com/auth/devstorage.read_write"]


def load_service_account(key_path: str):
    """
    Loads service-account credentials and the project id they belong to.
    """
    if not os.path.exists(key_path):
        raise FileNotFoundError(f"Missing key file at: {key_path}")

    with open(key_path) as f:
        project_id = json.load(f)["project_id"]

    creds = service_account.Credentials.from_service_account_file(key_path, scopes=STORAGE_SCOPES)
    return creds, project_id


def create_storage_client(settings: Settings) -> storage.Client:
    creds, project_id = load_service_account(settings.credentials_path)
    return storage.Client(credentials=creds, project=project_id)
