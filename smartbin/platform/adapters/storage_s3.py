import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from smartbin.core.config import Settings
from smartbin.platform.ports.media_host import MediaHostPort, MediaHostError, StoredMedia, ResourceType

class S3MediaHost(MediaHostPort):
    def __init__(self, settings: Settings):
        session = boto3.session.Session(
            aws_access_key_id=settings.S3_ACCESS_KEY,
            aws_secret_access_key=settings.S3_SECRET_KEY,
            region_name=settings.S3_REGION,
        )
        self.s3 = session.client(
            "s3",
            endpoint_url=settings.S3_ENDPOINT_URL,
            config=Config(signature_version="s3v4"),
        )
        self.bucket = settings.S3_BUCKET
        self.public_base_url = (
            settings.S3_PUBLIC_BASE_URL
            or f"https://{settings.S3_BUCKET}.s3.{settings.S3_REGION}.amazonaws.com"
        ).rstrip("/")

    def upload(self, data: bytes, *, resource_type: ResourceType, folder: str, name: str, extension: str = "", content_type: str | None = None) -> StoredMedia:
        # storage id is the object key
        key = f"{folder.strip('/')}/{name}{('.' + extension) if extension else ''}"
        try:
            self.s3.put_object(
                Bucket=self.bucket, Key=key, Body=data,
                ContentType=content_type or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            raise MediaHostError(f"S3 upload failed: {e}") from e
        return StoredMedia(url=f"{self.public_base_url}/{key}", storage_id=key)

    def destroy(self, storage_id: str, *, resource_type: ResourceType) -> None:
        try:
            self.s3.delete_object(Bucket=self.bucket, Key=storage_id)
        except (BotoCoreError, ClientError) as e:
            raise MediaHostError(f"S3 delete failed: {e}") from e
