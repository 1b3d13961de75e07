from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class AddItemRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    cost_price: float = Field(ge=0)
    selling_price: float = Field(ge=0)
    brand: Optional[str] = None
    category: Optional[str] = None
    sub_category: str = ""
    discount: float = Field(default=0, ge=0, le=100)
    stock: int = Field(default=0, ge=0)
    min_stock_alert: int = Field(default=5, ge=0)
    unit: str = "pcs"
    image: str = ""
    description: str = ""


class UpdateItemRequest(BaseModel):
    """Every field optional; only fields actually sent are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    cost_price: Optional[float] = Field(default=None, ge=0)
    selling_price: Optional[float] = Field(default=None, ge=0)
    brand: Optional[str] = None
    category: Optional[str] = None
    sub_category: Optional[str] = None
    discount: Optional[float] = Field(default=None, ge=0, le=100)
    stock: Optional[int] = Field(default=None, ge=0)
    min_stock_alert: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
