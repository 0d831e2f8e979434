class EmptyPopulationError(ValueError):
    """Raised when a report is requested for a population with no outcomes."""

    def __init__(self, process: str) -> None:
        super().__init__(f"Cannot aggregate an empty {process} population")
        self.process = process
