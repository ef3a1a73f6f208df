"""
EduLibrary Backend — Resource Schemas and Validation
======================================================

What:  Pydantic models defining the Resource API contract, plus the explicit
       payload validator used by the service layer.
How:   `ResourceCreate` declares the field rules; `validate_resource_payload()`
       runs them against an untyped payload and returns a `ValidationResult`
       (typed value or list of field errors) instead of raising.
Who:   Service layer (validation), route handlers (response models), storage
       implementations (stored record type).

Wire format is camelCase (`skillLevel`, `imageUrl`, `resourceType`,
`videoUrl`); Python attributes are snake_case. Pydantic's `to_camel` alias
generator maps between the two and FastAPI serializes responses by alias.

Field rules:
    title          1..200 chars
    description    10..1000 chars
    category       one of Category
    skillLevel     one of SkillLevel
    imageUrl       absolute URL
    resourceType   at least 1 char
    videoUrl       optional absolute URL; "" means not provided
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, computed_field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from edulibrary.services.video import get_embed_url


class Category(str, Enum):
    """The six subject areas a resource can be filed under."""

    PROGRAMMING = "Programming"
    DATA_SCIENCE = "Data Science"
    DESIGN = "Design"
    BUSINESS = "Business"
    MATHEMATICS = "Mathematics"
    LANGUAGES = "Languages"


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Parses `value` as an absolute URL but returns the original string."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a valid URL") from None
    return value


# ══════════════════════════════════════════════════════════════════════════
# Resource Models
# ══════════════════════════════════════════════════════════════════════════


class ResourceCreate(BaseModel):
    """
    What:  Every client-writable field of a Resource.
    Who:   Produced by validate_resource_payload(); consumed by storage
           `create()` and `update()` (update replaces all of these fields).
    """

    title: str = Field(min_length=1, max_length=200, description="Resource title")
    description: str = Field(
        min_length=10, max_length=1000, description="What the learner gets out of it"
    )
    category: Category = Field(description="Subject area")
    skill_level: SkillLevel = Field(description="Intended learner level")
    image_url: str = Field(description="Cover image URL")
    resource_type: str = Field(min_length=1, description="e.g. 'Video Course', 'eBook'")
    video_url: Optional[str] = Field(default=None, description="Optional video page URL")

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        return _check_url(v)

    @field_validator("video_url", mode="before")
    @classmethod
    def blank_video_url_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v

    @field_validator("video_url")
    @classmethod
    def validate_video_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_url(v)


class Resource(ResourceCreate):
    """
    What:  A stored catalog record.
    Who:   Returned by every storage read/write and by all API endpoints.

    `id` is assigned by storage on creation and never changes afterwards.
    `embedUrl` is derived from `videoUrl` on serialization and never stored.
    """

    id: str = Field(description="Opaque unique identifier")

    @computed_field(alias="embedUrl", description="Inline player URL, null for unknown hosts")
    @property
    def embed_url(self) -> Optional[str]:
        return get_embed_url(self.video_url)

    @classmethod
    def from_create(cls, resource_id: str, data: ResourceCreate) -> "Resource":
        return cls(id=resource_id, **data.model_dump(exclude={"embed_url"}))


# ══════════════════════════════════════════════════════════════════════════
# Validation Result
# ══════════════════════════════════════════════════════════════════════════


class FieldError(BaseModel):
    """One failed rule: the wire name of the field and what was wrong with it."""

    field: str
    message: str


class ValidationResult(BaseModel):
    """Either `value` is set, or `errors` lists every failing field."""

    value: Optional[ResourceCreate] = None
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def validate_resource_payload(payload: Any) -> ValidationResult:
    """
    Validate an untyped request payload against the Resource rules.

    Every field is checked independently, so one call reports all problems.
    Unknown keys (including a client-supplied `id`) are ignored.

    Returns:
        ValidationResult with `value` on success, `errors` otherwise.
        Never raises for bad input.
    """
    if not isinstance(payload, dict):
        return ValidationResult(
            errors=[FieldError(field="body", message="Expected a JSON object")]
        )

    try:
        value = ResourceCreate.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationResult(
            errors=[
                FieldError(field=_field_name(err["loc"]), message=err["msg"])
                for err in exc.errors()
            ]
        )
    return ValidationResult(value=value)


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Fields:
        error: Machine-readable error code ("validation_error", "not_found", ...)
        message: Human-readable description
        details: Per-field summary string (400 only)
        fields: Structured per-field errors (400 only)
        request_id: Correlation ID for tracing this error in server logs
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[str] = Field(default=None, description="Per-field error summary")
    fields: Optional[List[FieldError]] = Field(default=None, description="Per-field errors")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage_backend: str = Field(description="Configured backend: memory, database")
    storage: str = Field(description="Storage reachability: available, unavailable")
    resource_count: Optional[int] = Field(
        default=None, description="Number of stored resources (null when unavailable)"
    )
    uptime_seconds: float = Field(description="Seconds since service started")
