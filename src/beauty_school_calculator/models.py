from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class Dependency(str, Enum):
    DEPENDENT = "dependent"
    INDEPENDENT = "independent"


class ErrorKind(str, Enum):
    INVALID_COURSE = "invalid_course"
    INVALID_AGE = "invalid_age"
    INVALID_HOUSEHOLD = "invalid_household"
    INVALID_STUDENTS = "invalid_students"
    INVALID_DEPENDENCY = "invalid_dependency"
    FAFSA_DISABLED = "fafsa_disabled"


@dataclass(frozen=True)
class Course:
    """
    One tuition program from the course catalog.

    Money amounts are whole dollars. Courses are only edited through the
    settings store; calculations treat them as read-only.
    """
    key: str                     # e.g. "cosmetology"
    name: str
    price: int                   # tuition
    hours: int                   # required clock hours
    books_price: int = 0
    supplies_price: int = 0
    other_price: int = 0
    other_label: str = "Other Fees"

    @property
    def total_program_cost(self) -> int:
        return self.price + self.books_price + self.supplies_price + self.other_price

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("key")
        return data


@dataclass
class CalculationInput:
    """
    Validated request for a single calculation.

    The household fields stay None on the cost-only path.
    """
    course: Course
    age: Optional[int] = None
    income: Optional[int] = None
    household_size: Optional[int] = None
    college_students: Optional[int] = None
    dependency: Optional[Dependency] = None


@dataclass
class CostBreakdown:
    course_name: str
    course_price: int
    books_price: int
    supplies_price: int
    other_price: int
    other_label: str
    total_program_cost: int


@dataclass
class AidEstimate:
    efc: int
    pell_grant: int
    loan_eligibility: int
    total_aid: int
    remaining_cost: int


@dataclass
class CalculationResult:
    costs: CostBreakdown
    aid: Optional[AidEstimate] = None

    @property
    def fafsa_enabled(self) -> bool:
        return self.aid is not None

    def to_dict(self) -> Dict[str, Any]:
        """Flat, JSON-ready payload. Aid keys only appear when aid was estimated."""
        data = asdict(self.costs)
        if self.aid is not None:
            data.update(asdict(self.aid))
        data["fafsa_enabled"] = self.fafsa_enabled
        return data


@dataclass
class ValidationError:
    kind: ErrorKind
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.kind.value, "message": self.message}
