from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class UploadRules(BaseModel):
    bucket: str
    path_prefix: str = "products"
    max_upload_bytes: int = Field(gt=0)
    allowlist_extensions: list[str]
    allowlist_mime_types: list[str]

    @field_validator("allowlist_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]


class ProductRules(BaseModel):
    name_max: int = 200
    description_max: int = 500
    long_description_max: int = 5000
    data_ai_hint_max: int = 60
    price_max: float = 1_000_000


class Rules(BaseModel):
    project: ProjectRules
    uploads: UploadRules
    products: ProductRules = Field(default_factory=ProductRules)
