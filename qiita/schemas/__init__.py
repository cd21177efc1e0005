"""Pydantic models decoded from (and encoded to) the Qiita API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["ApiModel"]


class ApiModel(BaseModel):
    """Base model for API payloads.

    Unknown response fields are ignored so upstream additions do not break
    decoding, and instances are frozen once decoded.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
