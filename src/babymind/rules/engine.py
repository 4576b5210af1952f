"""Age-bucketed rule tables. Rules are data; the resolver only picks a bucket."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, ValidationError, model_validator

from babymind.config import get_rule_data
from babymind.errors import EmptyRuleTable, RuleTableError, UnknownDomain
from babymind.models import (
    ContentBundle,
    Domain,
    MilestoneBundle,
    PlaySuggestion,
    RoutineBundle,
    SupplementBundle,
    TaskBundle,
    VaccinationBundle,
)

logger = logging.getLogger(__name__)

BUNDLE_TYPES: dict[str, type[ContentBundle]] = {
    Domain.PLAY.value: PlaySuggestion,
    Domain.VACCINATION.value: VaccinationBundle,
    Domain.ROUTINE.value: RoutineBundle,
    Domain.MILESTONE.value: MilestoneBundle,
    Domain.TASK.value: TaskBundle,
    Domain.SUPPLEMENT.value: SupplementBundle,
}


class AgeRangeRule(BaseModel):
    """Maps [min_months, max_months) to a content bundle. max_months None is open-ended."""

    model_config = ConfigDict(frozen=True)

    min_months: int = Field(..., ge=0)
    max_months: int | None = Field(default=None)
    domain: str
    payload: SerializeAsAny[ContentBundle]

    @model_validator(mode="after")
    def _check_range(self) -> "AgeRangeRule":
        if self.max_months is not None and self.max_months <= self.min_months:
            raise ValueError(
                f"max_months ({self.max_months}) must exceed min_months ({self.min_months})"
            )
        return self

    def contains(self, age_months: int) -> bool:
        if age_months < self.min_months:
            return False
        return self.max_months is None or age_months < self.max_months


class RuleTable:
    """Ordered rules of one domain. First match in declaration order wins."""

    def __init__(self, domain: str, rules: Iterable[AgeRangeRule]) -> None:
        self.domain = str(domain)
        self._rules = tuple(rules)
        if not self._rules:
            raise EmptyRuleTable(self.domain)

    @property
    def rules(self) -> tuple[AgeRangeRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def resolve_rule(self, age_months: int) -> AgeRangeRule:
        """
        Pick the rule for an age. Never empty:
        below the first rule -> first rule, past every range -> last rule,
        inside a gap -> the nearest rule starting before the age.
        """
        age_months = max(0, age_months)
        for rule in self._rules:
            if rule.contains(age_months):
                return rule
        if age_months < self._rules[0].min_months:
            return self._rules[0]
        preceding = [r for r in self._rules if r.min_months <= age_months]
        if preceding:
            return max(preceding, key=lambda r: r.min_months)
        return self._rules[-1]

    def resolve(self, age_months: int) -> ContentBundle:
        return self.resolve_rule(age_months).payload

    def matching(self, age_months: int) -> list[ContentBundle]:
        """Every bundle whose range contains the age, in declaration order."""
        return [r.payload for r in self._rules if r.contains(max(0, age_months))]


def build_table(domain: str, raw_rules: list[dict[str, Any]] | None) -> RuleTable:
    """Validate raw YAML rules of one domain into a RuleTable."""
    domain = str(domain)
    bundle_type = BUNDLE_TYPES.get(domain)
    if bundle_type is None:
        raise RuleTableError(f"No bundle type registered for domain '{domain}'")
    if not raw_rules:
        raise EmptyRuleTable(domain)
    rules: list[AgeRangeRule] = []
    try:
        for raw in raw_rules:
            payload = bundle_type.model_validate(raw.get("payload") or {})
            rules.append(
                AgeRangeRule(
                    min_months=raw.get("min_months", 0),
                    max_months=raw.get("max_months"),
                    domain=domain,
                    payload=payload,
                )
            )
    except (ValidationError, AttributeError) as e:
        raise RuleTableError(f"Invalid rule in domain '{domain}': {e}") from e
    return RuleTable(domain, rules)


def load_rule_tables(data: Mapping[str, Any]) -> dict[str, RuleTable]:
    """Build every domain table. Fails fast if a known domain is missing or empty."""
    domains = data.get("domains") or {}
    if not isinstance(domains, Mapping):
        raise RuleTableError("'domains' must be a mapping of domain -> rules")
    tables = {str(d): build_table(d, rules) for d, rules in domains.items()}
    for domain in BUNDLE_TYPES:
        if domain not in tables:
            raise EmptyRuleTable(domain)
    logger.info("Loaded rule tables: %s", ", ".join(sorted(tables)))
    return tables


class RuleEngine:
    """Resolves age-appropriate content from the configured rule tables."""

    def __init__(
        self,
        tables: Mapping[str, RuleTable] | None = None,
        reference_data: Mapping[str, Any] | None = None,
    ) -> None:
        if tables is None:
            data = get_rule_data()
            tables = load_rule_tables(data)
            if reference_data is None:
                reference_data = data
        self._tables = {str(k): v for k, v in tables.items()}
        self._reference = dict(reference_data or {})

    @property
    def domains(self) -> list[str]:
        return sorted(self._tables)

    def table(self, domain: str | Domain) -> RuleTable:
        key = domain.value if isinstance(domain, Domain) else str(domain)
        try:
            return self._tables[key]
        except KeyError:
            raise UnknownDomain(key) from None

    def resolve(self, domain: str | Domain, age_months: int) -> ContentBundle:
        """Content bundle for the age. Always returns a bundle."""
        return self.table(domain).resolve(age_months)

    def matching(self, domain: str | Domain, age_months: int) -> list[ContentBundle]:
        return self.table(domain).matching(age_months)

    def age_bucket(self, domain: str | Domain, age_months: int) -> str:
        """Label of the bucket an age falls into."""
        return self.resolve(domain, age_months).age_range_label

    def reference_list(self, section: str, key: str | None = None) -> Any:
        """Static lists shipped next to the rule tables (checklists, tips, food sources)."""
        value = self._reference.get(section, {} if key is not None else [])
        if key is None:
            return value
        return value.get(key, [])
