class InvalidGeometry(ValueError):
    """Raised when the input violates a structural rule of RFC 7946.

    `path` holds the nesting indices of the offending element, outermost first
    (e.g. `(1, 2)` is ring 2 of polygon 1). It is empty for top-level failures.
    """

    def __init__(self, rule: str, count: int | None = None, path: tuple[int, ...] = ()):
        super().__init__(rule)
        self.rule = rule
        self.count = count
        self.path = path

    def at(self, index: int) -> 'InvalidGeometry':
        self.path = (index, *self.path)
        return self

    def __str__(self) -> str:
        message = self.rule
        if self.count is not None:
            message = f'{message} (got {self.count})'
        if self.path:
            message = f'{message} at index {list(self.path)}'
        return message
