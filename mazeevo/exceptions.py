class MazeEvoError(Exception):
    """Base for all MazeEvo exceptions."""

    pass


# High-level families
class ValidationError(MazeEvoError):
    """Data validation failures."""

    pass


class MazeDecodeError(MazeEvoError):
    """Genome to maze decoding failures."""

    pass


class MutationError(MazeEvoError):
    """Mutation failures."""

    pass


# Decode subtypes
class InvalidBoundaryError(MazeDecodeError, ValidationError):
    """Raised when a maze boundary has a non-positive width or height."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(
            f"Maze boundary must be positive in both dimensions, got {width}x{height}"
        )


class DegenerateGeneError(MazeDecodeError, ValidationError):
    """Raised when a gene location falls outside [0, 1) or is not finite."""

    def __init__(self, gene_index: int, field: str, value: float):
        self.gene_index = gene_index
        self.field = field
        self.value = value
        super().__init__(
            f"Gene {gene_index} has {field}={value!r}, expected a value in [0, 1)"
        )


class CoordinateOverflowError(MazeDecodeError):
    """Raised when the scaled maze exceeds the representable coordinate range."""

    pass
