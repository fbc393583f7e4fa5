"""Token metadata supplied by the token registry."""

from pydantic import BaseModel, Field

from pathfinder.models.types import Address


class Token(BaseModel):
    """A tradable ERC-20 token.

    Identity is the lowercase address; symbol and decimals are display and
    scaling metadata. Instances are immutable once imported.
    """

    address: Address
    symbol: str
    # Some exotic tokens use more than 18 decimals; 77 is the uint256 maximum
    decimals: int = Field(ge=0, le=77)
    name: str | None = None

    model_config = {"frozen": True, "populate_by_name": True}

    def __str__(self) -> str:
        return self.symbol
