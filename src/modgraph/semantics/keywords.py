"""Default keyword vocabularies for module classification.

Matched case-insensitively as substrings of module and export short names.
"""

DEFAULT_INFRA_KEYWORDS: tuple[str, ...] = (
    "config",
    "configuration",
    "database",
    "db",
    "connection",
    "query",
    "repository",
    "storage",
    "cache",
    "logger",
    "log",
    "http",
    "client",
    "adapter",
    "driver",
    "queue",
    "kafka",
    "redis",
    "mail",
    "email",
    "sms",
    "notification",
    "transport",
)

DEFAULT_DOMAIN_KEYWORDS: tuple[str, ...] = (
    "user",
    "account",
    "profile",
    "order",
    "product",
    "catalog",
    "inventory",
    "payment",
    "billing",
    "pricing",
    "checkout",
    "cart",
    "shipping",
    "delivery",
    "loyalty",
    "search",
)
