from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ResourceKind(str, Enum):
    PRODUCT = "product"
    SUPPLIER = "supplier"
    ORDER = "order"

    @property
    def path(self) -> str:
        """Collection path on the inventory backend."""
        return _RESOURCE_PATHS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def plural_label(self) -> str:
        return f"{self.label}s"


# Suppliers live under /supplies on the backend.
_RESOURCE_PATHS = {
    ResourceKind.PRODUCT: "/products",
    ResourceKind.SUPPLIER: "/supplies",
    ResourceKind.ORDER: "/orders",
}


# ---------------------------------------------------------------------------
# Reference variants
# ---------------------------------------------------------------------------

class IdReference(BaseModel):
    kind: Literal["id"] = "id"
    value: Any


class EmbeddedReference(BaseModel):
    kind: Literal["embedded"] = "embedded"
    record: Dict[str, Any] = Field(default_factory=dict)


class SkuReference(BaseModel):
    kind: Literal["sku"] = "sku"
    sku: str


class NameReference(BaseModel):
    kind: Literal["name"] = "name"
    name: str


ProductReference = Annotated[
    Union[IdReference, EmbeddedReference, SkuReference],
    Field(discriminator="kind"),
]

SupplierReference = Annotated[
    Union[IdReference, EmbeddedReference, NameReference],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Canonical records
# ---------------------------------------------------------------------------

class ProductRecord(BaseModel):
    id: Any = None
    sku: str = ""
    name: str = ""
    price: Optional[float] = None
    stock: Optional[int] = None
    raw: Dict[str, Any] = Field(default_factory=dict)


class SupplierRecord(BaseModel):
    id: Any = None
    name: str = ""
    contact: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict)


class OrderItemRecord(BaseModel):
    product: Optional[ProductReference] = None
    quantity: Optional[float] = None
    price: Optional[float] = None
    raw: Dict[str, Any] = Field(default_factory=dict)


class OrderRecord(BaseModel):
    id: Any = None
    items: List[OrderItemRecord] = Field(default_factory=list)
    supplier: Optional[SupplierReference] = None
    status: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Abstract backend interface
# ---------------------------------------------------------------------------

class InventoryBackend(ABC):
    """Every inventory backend client (real or in-memory) implements this interface."""

    @abstractmethod
    async def fetch_json(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """Issue a request and return the parsed JSON body, or None when there is none."""

    async def list_resource(self, kind: ResourceKind) -> List[Dict[str, Any]]:
        data = await self.fetch_json(kind.path)
        return data if isinstance(data, list) else []

    async def get_resource(self, kind: ResourceKind, record_id: Any) -> Optional[Dict[str, Any]]:
        return await self.fetch_json(f"{kind.path}/{record_id}")

    async def create_resource(self, kind: ResourceKind, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.fetch_json(kind.path, method="POST", body=payload)

    async def update_resource(self, kind: ResourceKind, record_id: Any, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.fetch_json(f"{kind.path}/{record_id}", method="PUT", body=payload)

    async def delete_resource(self, kind: ResourceKind, record_id: Any) -> None:
        await self.fetch_json(f"{kind.path}/{record_id}", method="DELETE")
