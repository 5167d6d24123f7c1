from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from perlver.reconstruct import INT64_MAX, INT64_MIN
from perlver.version import Version

Component = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class VersionRecord(BaseModel):
    """Cache record for a Version. A structural mirror: nothing is re-parsed."""

    model_config = ConfigDict(frozen=True)

    original: str
    alpha: bool = False
    qv: bool = False
    # Back-compat: older cache files store the components under "version".
    components: list[Component] = Field(
        min_length=1, validation_alias=AliasChoices("components", "version")
    )


def encode_version(v: Version) -> VersionRecord:
    return VersionRecord(
        original=v.original,
        alpha=v.alpha,
        qv=v.qv,
        components=list(v.components),
    )


def decode_version(record: VersionRecord) -> Version:
    return Version(
        original=record.original,
        alpha=record.alpha,
        qv=record.qv,
        components=tuple(record.components),
    )


def dumps_version(v: Version) -> str:
    return encode_version(v).model_dump_json()


def loads_version(data: str | bytes) -> Version:
    return decode_version(VersionRecord.model_validate_json(data))
