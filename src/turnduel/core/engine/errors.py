"""Engine error taxonomy.

Illegal player submissions are not errors: the engine rejects them with a
``False`` return and an ``ActionRejected`` event. The exceptions here cover
configuration problems and internal state machine violations.
"""


class MatchConfigurationError(ValueError):
    """Raised by ``begin_match`` when the match cannot start consistently."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("Invalid match configuration: " + "; ".join(self.problems))


class IllegalTransitionError(RuntimeError):
    """Raised when the state machine is asked for a transition it has no rule for."""

    def __init__(self, state, trigger):
        self.state = state
        self.trigger = trigger
        super().__init__(f"No transition from {state.name} on {trigger.name}")


class TemplateLoadError(ValueError):
    """Raised when a roster file exists but cannot be turned into templates."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed loading '{path}': {detail}")
