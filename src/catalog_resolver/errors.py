"""Exceptions raised for caller programming errors."""


class ResolutionContractError(ValueError):
    """Input to the resolution pipeline violates its contract.

    Raised for empty labels, unknown entity types, a missing catalog snapshot
    and similar caller mistakes. Never used for legitimate uncertainty:
    ambiguous and missing verdicts are ordinary outcomes.
    """
