"""Error taxonomy for the recommendation engine."""


class BabyMindError(Exception):
    """Base class for all engine errors."""


class RuleTableError(BabyMindError):
    """Rule data failed to load or validate."""


class EmptyRuleTable(RuleTableError):
    """A domain was configured with zero rules."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"Rule table for domain '{domain}' is empty")
        self.domain = domain


class UnknownDomain(BabyMindError):
    """No rule table exists for the requested domain."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"Unknown rule domain '{domain}'")
        self.domain = domain


class BabyNotFound(BabyMindError):
    """No session is registered for the baby id."""

    def __init__(self, baby_id: object) -> None:
        super().__init__(f"Baby {baby_id} not found")
        self.baby_id = baby_id
