# azure_blob.py
"""
Lease document storage in Azure Blob Storage.
"""
import logging
import os
import uuid
from functools import lru_cache

from azure.storage.blob import BlobServiceClient

import config

logger = logging.getLogger(__name__)


def _account_url() -> str:
     return f"https://{config.AZURE_STORAGE_ACCOUNT}.blob.core.windows.net"


@lru_cache(maxsize=1)
def _blob_service() -> BlobServiceClient:
     if not config.AZURE_STORAGE_ACCOUNT or not config.AZURE_STORAGE_KEY:
          raise RuntimeError("AZURE_STORAGE_ACCOUNT and AZURE_STORAGE_KEY must be set for uploads")
     return BlobServiceClient.from_connection_string(
          f"DefaultEndpointsProtocol=https;"
          f"AccountName={config.AZURE_STORAGE_ACCOUNT};"
          f"AccountKey={config.AZURE_STORAGE_KEY};"
          f"EndpointSuffix=core.windows.net"
     )


def upload_to_blob(file, container: str, prefix: str) -> str:
     """Upload an UploadFile under `prefix/` and return its public URL."""
     ext = os.path.splitext(file.filename or "")[1]
     filename = f"{prefix}/{uuid.uuid4()}{ext}"
     blob_client = _blob_service().get_blob_client(container=container, blob=filename)
     blob_client.upload_blob(file.file, overwrite=True)
     logger.info("Uploaded %s to container %s", filename, container)
     return f"{_account_url()}/{container}/{filename}"


def is_blob_url(url: str) -> bool:
     """True when the URL points into our storage account."""
     return bool(config.AZURE_STORAGE_ACCOUNT) and url.startswith(_account_url() + "/")


def delete_from_blob(blob_url: str) -> None:
     """
     Deletes a file from Azure Blob Storage using its full URL
     """
     container, _, blob_name = blob_url[len(_account_url()) + 1:].partition("/")
     blob_client = _blob_service().get_blob_client(
          container=container,
          blob=blob_name
     )
     blob_client.delete_blob()
     logger.info("Deleted blob %s from container %s", blob_name, container)
