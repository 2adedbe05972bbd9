"""Authorization rules for the ``@auth`` directive.

Rules are built by a callback that receives a fresh ``AuthRules`` collector:

    def rules(rules: AuthRules):
        rules.private().read()
        rules.groups(["admin"])

    g.string().auth(rules)
    # String! @auth(rules: [{ allow: private, operations: [read] }, { allow: groups, groups: ["admin"] }])
"""

from enum import Enum
from typing import Callable, Iterable

from .errors import InvalidIdentifier, SchemaError
from .scalars import quote


class AuthStrategy(Enum):
    """Who a rule grants access to."""
    PUBLIC = "public"
    PRIVATE = "private"
    OWNER = "owner"
    GROUPS = "groups"


class AuthOperation(Enum):
    """Operations a rule can be narrowed to."""
    CREATE = "create"
    READ = "read"
    GET = "get"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


class AuthRule:
    """A single rule. Operation methods narrow it and return the rule."""

    def __init__(self, strategy: AuthStrategy, groups: Iterable[str] = ()):
        self.strategy = strategy
        self.groups = list(groups)
        self.operations: list[AuthOperation] = []

        if strategy is AuthStrategy.GROUPS:
            if not self.groups:
                raise SchemaError("A groups rule needs at least one group")
            for group in self.groups:
                if not isinstance(group, str) or not group:
                    raise InvalidIdentifier(group, "group name")

    def _allow(self, operation: AuthOperation) -> "AuthRule":
        if operation not in self.operations:
            self.operations.append(operation)
        return self

    def create(self) -> "AuthRule":
        return self._allow(AuthOperation.CREATE)

    def read(self) -> "AuthRule":
        return self._allow(AuthOperation.READ)

    def get(self) -> "AuthRule":
        return self._allow(AuthOperation.GET)

    def list(self) -> "AuthRule":
        return self._allow(AuthOperation.LIST)

    def update(self) -> "AuthRule":
        return self._allow(AuthOperation.UPDATE)

    def delete(self) -> "AuthRule":
        return self._allow(AuthOperation.DELETE)

    def __str__(self) -> str:
        parts = [f"allow: {self.strategy.value}"]
        if self.strategy is AuthStrategy.GROUPS:
            parts.append(f"groups: [{', '.join(quote(g) for g in self.groups)}]")
        if self.operations:
            parts.append(f"operations: [{', '.join(op.value for op in self.operations)}]")
        return "{ " + ", ".join(parts) + " }"


class AuthRules:
    """Ordered collector of auth rules."""

    def __init__(self):
        self.rules: list[AuthRule] = []

    def _push(self, rule: AuthRule) -> AuthRule:
        self.rules.append(rule)
        return rule

    def public(self) -> AuthRule:
        """Allow anonymous access."""
        return self._push(AuthRule(AuthStrategy.PUBLIC))

    def private(self) -> AuthRule:
        """Allow any signed-in user."""
        return self._push(AuthRule(AuthStrategy.PRIVATE))

    def owner(self) -> AuthRule:
        """Allow the owner of the entity."""
        return self._push(AuthRule(AuthStrategy.OWNER))

    def groups(self, groups: Iterable[str]) -> AuthRule:
        """Allow members of any of the given groups."""
        return self._push(AuthRule(AuthStrategy.GROUPS, groups))

    def __str__(self) -> str:
        return "[" + ", ".join(str(rule) for rule in self.rules) + "]"


AuthRuleF = Callable[[AuthRules], None]


def build_rules(rules_fn: AuthRuleF) -> str:
    """Run a rules callback once and return the rendered rule list."""
    if not callable(rules_fn):
        raise SchemaError("auth() expects a callable receiving AuthRules")
    rules = AuthRules()
    rules_fn(rules)
    if not rules.rules:
        raise SchemaError("auth() callback defined no rules")
    return str(rules)
