"""Operation record entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationRecord:
    """Caching metadata for one top-level operation in a query document.

    Attributes:
        name: The operation name, empty string for an anonymous operation.
        cacheable: True if the operation carries the caching directive.
        ttl: TTL in seconds from the directive. None means use the default.
        canonical_text: The operation re-printed from its AST.
    """

    name: str
    cacheable: bool
    ttl: int | None
    canonical_text: str


# Operation name -> record, only for operations that opted into caching
CacheDirectiveIndex = dict[str, OperationRecord]
