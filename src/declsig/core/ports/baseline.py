from typing import Protocol


class BaselineStore(Protocol):
    def suppressed_rules(self, signature: str) -> set[str]: ...

    def record(self, signature: str, rule_id: str) -> None: ...
