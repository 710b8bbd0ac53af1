"""
Event Models

Pydantic models for the S3 event notification that triggers the Lambda,
and the InboundEvent value the pipeline works with.
Only the fields the pipeline reads are modelled; everything else is ignored.
"""

from urllib.parse import unquote_plus

from pydantic import BaseModel, ConfigDict, Field


class S3Bucket(BaseModel):
    """Bucket section of an S3 notification record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Bucket name")


class S3Object(BaseModel):
    """Object section of an S3 notification record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = Field(..., min_length=1, description="URL-encoded object key")
    size: int | None = Field(default=None, ge=0, description="Object size in bytes")


class S3Entity(BaseModel):
    """The `s3` entity of a notification record."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    bucket: S3Bucket
    s3_object: S3Object = Field(..., alias="object")


class S3EventRecord(BaseModel):
    """A single record of an S3 event notification."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    event_name: str | None = Field(
        default=None,
        alias="eventName",
        description="e.g. ObjectCreated:Put",
    )
    s3: S3Entity


class S3EventNotification(BaseModel):
    """S3 event notification as delivered to a Lambda function."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    records: list[S3EventRecord] = Field(..., alias="Records", min_length=1)


class InboundEvent(BaseModel):
    """Bucket and decoded key of the document to process."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1)

    @classmethod
    def from_record(cls, record: S3EventRecord) -> "InboundEvent":
        # S3 delivers keys form-encoded ("my file.pdf" -> "my+file.pdf")
        return cls(
            bucket=record.s3.bucket.name,
            key=unquote_plus(record.s3.s3_object.key),
        )

    @property
    def s3_uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"
