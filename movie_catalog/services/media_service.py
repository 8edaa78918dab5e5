"""
Pass-through access to the S3 bucket holding posters and trailers.
"""
from typing import BinaryIO, Dict, Optional
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from movie_catalog.exceptions import UpstreamError
from movie_catalog.utils.media_url import build_media_key, public_object_url

logger = logging.getLogger(__name__)


class MediaStore:
    def __init__(self, bucket: str, region: str, client=None):
        self.bucket = bucket
        self.region = region
        self._client = client

    @property
    def client(self):
        # created on first use so the app starts without AWS credentials
        if self._client is None:
            self._client = boto3.client("s3", region_name=self.region)
        return self._client

    def upload(
        self,
        fileobj: BinaryIO,
        filename: str,
        category: str,
        content_type: Optional[str] = None,
    ) -> Dict[str, str]:
        """Store ``fileobj`` publicly under a generated key; return its key and URL."""
        key = build_media_key(category, filename)
        extra_args = {"ACL": "public-read"}
        if content_type:
            extra_args["ContentType"] = content_type

        try:
            self.client.upload_fileobj(fileobj, self.bucket, key, ExtraArgs=extra_args)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Upload of {key} to {self.bucket} failed: {e}")
            raise UpstreamError(str(e)) from e

        logger.info(f"📦 Uploaded {key} to {self.bucket}")
        return {"key": key, "url": public_object_url(self.bucket, key)}

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Delete of {key} from {self.bucket} failed: {e}")
            raise UpstreamError(str(e)) from e
        logger.info(f"🗑️ Deleted {key} from {self.bucket}")
