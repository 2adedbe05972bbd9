"""OpenAPI connector definitions.

A connector is configured once as a ``PartialConnector`` and finalized
with a namespace into a renderable ``Connector``:

    def headers(h: Headers):
        h.push_header("Authorization", "Bearer {{ env.STRIPE_API_KEY }}")
        h.push_introspection_header("x-api-version", "2023-10-16")

    stripe = PartialConnector(
        schema="https://raw.githubusercontent.com/stripe/openapi/master/openapi/spec3.json",
        url="https://api.stripe.com",
        headers=headers,
    )
    print(stripe.finalize("Stripe"))
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import MissingSchema, SchemaError, validate_name
from .header import Header, HeaderGenerator, Headers
from .scalars import quote


class OpenAPITransforms(Enum):
    """How operations of the remote API are named in the schema."""
    OPERATION_ID = "OPERATION_ID"
    SCHEMA_NAME = "SCHEMA_NAME"


class OpenAPIParams(BaseModel):
    """Validated connector parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_ref: str
    url: Optional[str] = None
    transforms: Optional[OpenAPITransforms] = None
    headers: Optional[Callable[[Headers], Any]] = None

    @field_validator("schema_ref", mode="before")
    @classmethod
    def _schema_present(cls, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("schema is required")
        return value

    @field_validator("url")
    @classmethod
    def _url_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("url must not be blank")
        return value


def _validate_params(params: Mapping[str, Any]) -> OpenAPIParams:
    data = dict(params)
    # "schema" shadows a BaseModel attribute, so the model stores it as schema_ref
    if "schema" in data:
        data["schema_ref"] = data.pop("schema")
    try:
        return OpenAPIParams.model_validate(data)
    except ValidationError as e:
        if any(error["loc"][:1] == ("schema_ref",) for error in e.errors()):
            raise MissingSchema() from e
        raise SchemaError(f"Invalid OpenAPI parameters: {e}") from e


def _render_headers(key: str, headers: tuple[Header, ...]) -> str:
    if not headers:
        return ""
    lines = "\n".join(f"    {header}" for header in headers)
    return f"  {key}: [\n{lines}\n  ]\n"


class PartialConnector:
    """An OpenAPI connector waiting for its namespace.

    The header callback, if any, runs once here. The partial connector is
    never changed by ``finalize`` and can be finalized many times.
    """

    def __init__(
        self,
        schema: Optional[str] = None,
        url: Optional[str] = None,
        transforms: Optional[OpenAPITransforms] = None,
        headers: Optional[HeaderGenerator] = None,
    ):
        params = _validate_params(
            {"schema": schema, "url": url, "transforms": transforms, "headers": headers}
        )
        collector = Headers()
        if params.headers is not None:
            params.headers(collector)

        self.schema = params.schema_ref
        self.url = params.url
        self.transforms = params.transforms
        self.headers: tuple[Header, ...] = tuple(collector.headers)
        self.introspection_headers: tuple[Header, ...] = tuple(collector.introspection_headers)

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "PartialConnector":
        """Build from a mapping with schema, url, transforms and headers keys."""
        unknown = set(params) - {"schema", "url", "transforms", "headers"}
        if unknown:
            raise SchemaError(f"Unknown OpenAPI parameters: {', '.join(sorted(unknown))}")
        return cls(**params)

    def finalize(self, namespace: str) -> "Connector":
        """Create a renderable connector under the given namespace."""
        return Connector(
            namespace=validate_name(namespace, "connector namespace"),
            schema=self.schema,
            headers=self.headers,
            introspection_headers=self.introspection_headers,
            transforms=self.transforms,
            url=self.url,
        )


@dataclass(frozen=True)
class Connector:
    """A namespaced OpenAPI connector, rendered as an ``@openapi`` directive."""
    namespace: str
    schema: str
    headers: tuple[Header, ...] = ()
    introspection_headers: tuple[Header, ...] = ()
    transforms: Optional[OpenAPITransforms] = None
    url: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.schema, str) or not self.schema.strip():
            raise MissingSchema()
        validate_name(self.namespace, "connector namespace")

    def __str__(self) -> str:
        header = "@openapi(\n"
        namespace = f"  name: {quote(self.namespace)}\n"
        url = f"  url: {quote(self.url)}\n" if self.url else ""
        schema = f"  schema: {quote(self.schema)}\n"
        transforms = (
            f"  transforms: {{ queryNaming: {self.transforms.value} }}\n"
            if self.transforms
            else ""
        )
        headers = _render_headers("headers", self.headers)
        introspection_headers = _render_headers("introspectionHeaders", self.introspection_headers)
        footer = ")"
        return f"{header}{namespace}{url}{schema}{transforms}{headers}{introspection_headers}{footer}"
