class HullError(Exception):
    pass


class InsufficientPointsError(HullError):
    def __init__(self, n_distinct: int):
        self.n_distinct = n_distinct
        super().__init__(f'Convex hull needs at least 3 distinct points, got {n_distinct}')


class MalformedInputError(HullError, ValueError):
    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f'line {line_number}: {message}'
        super().__init__(message)
