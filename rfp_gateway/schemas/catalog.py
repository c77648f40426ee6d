from pydantic import BaseModel, ConfigDict, Field


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    name: str
    category: str
    specs: dict[str, str] = Field(default_factory=dict)
