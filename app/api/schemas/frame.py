from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FrameUntrustedData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    input_text: str | None = Field(None, alias="inputText")


class FrameActionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    untrusted_data: FrameUntrustedData | None = Field(None, alias="untrustedData")
