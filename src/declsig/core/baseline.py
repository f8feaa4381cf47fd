import logging
from collections.abc import Iterable

from declsig.core.ports.baseline import BaselineStore
from declsig.models import Finding

logger = logging.getLogger(__name__)


def is_suppressed(store: BaselineStore, finding: Finding) -> bool:
    return finding.rule_id in store.suppressed_rules(finding.entity.signature)


def filter_findings(store: BaselineStore, findings: Iterable[Finding]) -> list[Finding]:
    """Return the findings the baseline does not already account for."""
    remaining: list[Finding] = []
    suppressed = 0
    for finding in findings:
        if is_suppressed(store, finding):
            suppressed += 1
            logger.debug("Suppressed %s at %s", finding.rule_id, finding.entity.signature)
        else:
            remaining.append(finding)
    logger.info("Baseline suppressed %d finding(s), %d remaining", suppressed, len(remaining))
    return remaining


def record_findings(store: BaselineStore, findings: Iterable[Finding]) -> int:
    count = 0
    for finding in findings:
        store.record(finding.entity.signature, finding.rule_id)
        count += 1
    return count
