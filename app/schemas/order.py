from pydantic import BaseModel, Field


class BuyItemRequest(BaseModel):
    quantity: int = Field(ge=1)
