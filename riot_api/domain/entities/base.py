from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RiotModel(BaseModel):
    """
    Base record for API payloads.

    Upstream keys are camelCase and are exposed as snake_case attributes.
    Keys the record does not declare are kept as extra attributes under their
    upstream name, so nothing the service returns is dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_dict(self) -> dict:
        """Convert the record back to the upstream JSON shape."""
        return self.model_dump(by_alias=True, exclude_none=True)
