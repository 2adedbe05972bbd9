"""Header values usable inside connector directives.

A header either carries a literal value or forwards a header from the
incoming request:

    headers.push_header("Authorization", "Bearer {{ env.STRIPE_KEY }}")
    headers.push_header("x-api-key", HeaderForward("x-api-key"))
"""

from dataclasses import dataclass, field
from typing import Callable, Union

from .errors import InvalidIdentifier
from .scalars import quote


@dataclass(frozen=True)
class HeaderForward:
    """Reference to a request header whose value is forwarded as is."""
    name: str

    def __post_init__(self):
        if not self.name:
            raise InvalidIdentifier(self.name, "forwarded header name")


HeaderValue = Union[str, HeaderForward]


@dataclass(frozen=True)
class Header:
    """A single header entry, rendered as one directive argument object."""
    name: str
    value: HeaderValue

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidIdentifier(self.name, "header name")
        if isinstance(self.value, dict) and "forward" in self.value:
            # Accept the {"forward": "name"} shorthand
            object.__setattr__(self, "value", HeaderForward(self.value["forward"]))
        elif not isinstance(self.value, (str, HeaderForward)):
            raise InvalidIdentifier(self.value, "header value")

    def __str__(self) -> str:
        if isinstance(self.value, HeaderForward):
            return f"{{ name: {quote(self.name)}, forward: {quote(self.value.name)} }}"
        return f"{{ name: {quote(self.name)}, value: {quote(self.value)} }}"


@dataclass
class Headers:
    """Mutable collector handed to a connector's header callback."""
    headers: list[Header] = field(default_factory=list)
    introspection_headers: list[Header] = field(default_factory=list)

    def push_header(self, name: str, value: HeaderValue) -> "Headers":
        """Add a header sent with every request to the remote API."""
        self.headers.append(Header(name, value))
        return self

    def push_introspection_header(self, name: str, value: HeaderValue) -> "Headers":
        """Add a header sent only while introspecting the remote schema."""
        self.introspection_headers.append(Header(name, value))
        return self


HeaderGenerator = Callable[[Headers], None]
