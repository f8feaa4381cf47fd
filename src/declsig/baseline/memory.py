from collections import defaultdict


class InMemoryBaselineStore:
    """Signature to suppressed rule ids, kept in process memory.

    Implements the ``BaselineStore`` protocol.
    """

    def __init__(self, entries: dict[str, set[str]] | None = None) -> None:
        self.entries: defaultdict[str, set[str]] = defaultdict(set)
        for signature, rule_ids in (entries or {}).items():
            self.entries[signature].update(rule_ids)

    def suppressed_rules(self, signature: str) -> set[str]:
        return set(self.entries.get(signature, ()))

    def record(self, signature: str, rule_id: str) -> None:
        self.entries[signature].add(rule_id)

    def __len__(self) -> int:
        return sum(len(rule_ids) for rule_ids in self.entries.values())
