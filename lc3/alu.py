import operator

from .bits import WORD_MASK


class ALU:
    OPS = {
        "ADD": operator.add,
        "AND": operator.and_,
        "NOT": lambda a, _b: ~a,
    }

    @classmethod
    def execute(cls, op: str, a: int, b: int = 0) -> int:
        """Apply `op` and wrap the result to a 16-bit word."""
        try:
            return cls.OPS[op](a, b) & WORD_MASK
        except KeyError as e:
            raise ValueError(f"Unsupported ALU op {op}") from e
