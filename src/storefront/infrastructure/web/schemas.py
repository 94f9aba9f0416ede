"""Pydantic request bodies for the HTTP API."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field


class CredentialsIn(BaseModel):
    email: str
    password: str


class AdminLoginIn(BaseModel):
    password: str


class ProductRefIn(BaseModel):
    product_id: str = Field(..., alias="id")

    model_config = {"populate_by_name": True}


class CheckoutIn(BaseModel):
    full_name: str = Field(..., alias="fullName")
    phone: str
    email: str
    address: str
    country: str
    city: str
    payment_method: str = Field(..., alias="paymentMethod")

    model_config = {"populate_by_name": True}


class ContinueCheckoutIn(BaseModel):
    order_id: Optional[str] = Field(default=None, alias="orderId")

    model_config = {"populate_by_name": True}


class ApproveOrderIn(BaseModel):
    order_id: str = Field(..., alias="orderId")
    verify_payment: bool = Field(default=False, alias="verifyPayment")

    model_config = {"populate_by_name": True}


class RejectOrderIn(BaseModel):
    order_id: str = Field(..., alias="orderId")
    reason: str

    model_config = {"populate_by_name": True}


class ExpireOrdersIn(BaseModel):
    max_age_hours: Optional[float] = Field(default=None, gt=0)


class ProductIn(BaseModel):
    # Price is passed through untouched so the domain decides what counts as one.
    name: str
    price: Union[str, int, float]
    image: Optional[str] = None


class ProductEditIn(BaseModel):
    product_id: Optional[str] = Field(default=None, alias="id")
    name: Optional[str] = None
    price: Optional[Union[str, int, float]] = None
    image: Optional[str] = None

    model_config = {"populate_by_name": True}


class MessageIn(BaseModel):
    message: str


class ReplyIn(BaseModel):
    user: str
    reply: str
