# src/models/request_model.py

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from src.services.errors import DecodeError


class SubscriptionRequest(BaseModel):
    """Body of ``POST /subscribeAll``.

    ``subscriptions`` maps a region (county) to the sub-regions (towns) the
    user follows inside it.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: StrictStr = Field(alias="userId", min_length=1)
    subscriptions: Dict[StrictStr, Optional[List[StrictStr]]]

    @field_validator("subscriptions", mode="after")
    @classmethod
    def null_lists_are_empty(cls, v):
        # {"CountyA": null} is accepted and subscribes to nothing
        return {region: list(towns or []) for region, towns in v.items()}

    @property
    def row_count(self) -> int:
        return sum(len(towns) for towns in self.subscriptions.values())


def decode_request(raw: Union[bytes, str]) -> SubscriptionRequest:
    """Parse an untrusted request body, raising DecodeError on anything invalid."""
    if raw is None or len(raw) == 0:
        raise DecodeError("empty request body")
    try:
        return SubscriptionRequest.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"invalid subscription request: {e.error_count()} error(s): {e.errors()[0]['msg']}") from e
