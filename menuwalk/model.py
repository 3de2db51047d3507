from __future__ import annotations

from pydantic import BaseModel, Field


class CatalogNode(BaseModel):
    id: int | str
    name: str
    description: str | None = None
    price: float = Field(ge=0)
    children: list[CatalogNode] = Field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class Catalog(BaseModel):
    menu: list[CatalogNode] = Field(default_factory=list)
